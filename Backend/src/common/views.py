import os

from django.conf import settings
from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from progress.models import DEFAULT_STEPS

PROJECT_APPS = ("common", "users", "companies", "progress", "mom", "agreements", "uploads")


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def ping(request):
    return Response({"pong": True})


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def info(request):
    """
    Infos non sensibles pour le front : environnement, apps du projet,
    types de documents (ordre du parcours partenaire) et entreprise interne.
    """
    return Response(
        {
            "debug": settings.DEBUG,
            "env": os.getenv("DJANGO_ENV", "local"),
            "apps": [app for app in settings.INSTALLED_APPS if app in PROJECT_APPS],
            "document_types": [code for code, _name, _order in DEFAULT_STEPS],
            "internal_company": settings.MOM_INTERNAL_COMPANY_NAME,
            "upload_max_bytes": settings.UPLOAD_MAX_BYTES,
        }
    )
