from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import ProgressStepListView, ProgressViewSet

router = SimpleRouter()
router.register("", ProgressViewSet, basename="progress")

urlpatterns = [
    path("steps/", ProgressStepListView.as_view(), name="progress_steps"),
] + router.urls
