from rest_framework.routers import SimpleRouter

from .views import MomViewSet

router = SimpleRouter()
router.register("", MomViewSet, basename="mom")

urlpatterns = router.urls
