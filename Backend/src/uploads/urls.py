from django.urls import path

from .views import upload_attachments, upload_image

urlpatterns = [
    path("attachment", upload_attachments, name="upload_attachment"),
    path("image", upload_image, name="upload_image"),
]
