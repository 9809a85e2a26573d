from rest_framework.routers import SimpleRouter

from .views import JikViewSet, MouViewSet, MsaViewSet, NdaViewSet

# /api/documents/jik/, /api/documents/nda/ ...
router = SimpleRouter()
router.register("jik", JikViewSet, basename="jik")
router.register("nda", NdaViewSet, basename="nda")
router.register("msa", MsaViewSet, basename="msa")
router.register("mou", MouViewSet, basename="mou")

urlpatterns = router.urls
