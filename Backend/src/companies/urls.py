from rest_framework.routers import SimpleRouter

from .views import CompanyViewSet

router = SimpleRouter()
router.register("", CompanyViewSet, basename="company")

urlpatterns = router.urls
