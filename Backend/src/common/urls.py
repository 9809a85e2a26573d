# Sondes techniques (pas d'authentification)
from django.urls import path

from .health import health
from .views import info, ping

urlpatterns = [
    path("health", health, name="health"),
    path("ping", ping, name="ping"),
    path("info", info, name="info"),
]
