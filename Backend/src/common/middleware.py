import logging
import time
import uuid
from typing import Callable
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestIDMiddleware:
    """
    Ajoute un identifiant de requete a chaque reponse.
    - Header d'entree/sortie: X-Request-ID (repris s'il est fourni par le front)
    - Accessible via request.request_id
    - Trace la duree des appels /api/ en DEBUG
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        setattr(request, "request_id", request_id)

        started = time.monotonic()
        response = self.get_response(request)
        response.headers["X-Request-ID"] = request_id

        if request.path.startswith("/api/"):
            elapsed_ms = (time.monotonic() - started) * 1000
            logger.debug(
                f"[http] {request.method} {request.path} -> {response.status_code} "
                f"({elapsed_ms:.1f} ms) id={request_id}"
            )
        return response
