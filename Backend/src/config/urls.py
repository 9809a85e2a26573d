from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),

    # APIs
    path("api/common/", include("common.urls")),
    path("api/auth/", include("users.urls")),
    path("api/companies/", include("companies.urls")),
    path("api/progress/", include("progress.urls")),
    path("api/mom/", include("mom.urls")),
    path("api/documents/", include("agreements.urls")),
    path("api/uploads/", include("uploads.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
