import logging
from typing import Optional

from django.db.models import ProtectedError
from django.http import Http404
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import APIException

logger = logging.getLogger(__name__)


class UserFacingAPIException(APIException):
    """
    Exception controllable et propre pour retourner un message a l'utilisateur.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Une erreur est survenue."
    default_code = "error"


class InvalidIdentifier(UserFacingAPIException):
    default_detail = "Identifiant invalide."
    default_code = "invalid_id"


class ExportError(APIException):
    """Echec de generation d'un document (DOCX)."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Échec de la génération du document."
    default_code = "export_failed"


def custom_exception_handler(exc, context) -> Optional[Response]:
    """
    Enveloppe les erreurs DRF dans un format stable:
        {"error": {"code": ..., "detail": ..., "status": ...}}
    Active via REST_FRAMEWORK['EXCEPTION_HANDLER'].
    """
    if isinstance(exc, ProtectedError):
        return Response(
            {
                "error": {
                    "code": "protected",
                    "detail": "Objet encore référencé par des documents.",
                    "status": status.HTTP_409_CONFLICT,
                }
            },
            status=status.HTTP_409_CONFLICT,
        )

    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, Http404):
            code = "not_found"
        else:
            codes = exc.get_codes() if isinstance(exc, APIException) else None
            code = codes if isinstance(codes, str) else getattr(exc, "default_code", "error")
        response.data = {
            "error": {
                "code": code,
                "detail": response.data,
                "status": response.status_code,
            }
        }
        return response

    # Erreur non geree -> 500
    view = context.get("view")
    logger.exception(f"[api] Erreur non gérée dans {view.__class__.__name__ if view else '?'}")
    return Response(
        {"error": {"code": "server_error", "detail": "Erreur interne", "status": 500}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
