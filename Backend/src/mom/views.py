import logging

from django.shortcuts import get_object_or_404
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from common.exceptions import ExportError, UserFacingAPIException
from common.mixins import IntegerLookupMixin, SearchQueryMixin, parse_identifier
from docgen.content import default_sections
from docgen.files import docx_response

from .exporters import render_mom_docx
from .serializers import MomSerializer, MomWriteSerializer
from .services import create_mom, delete_mom, mom_queryset, update_mom
from .tasks import export_mom_docx

logger = logging.getLogger(__name__)


class MomViewSet(IntegerLookupMixin, SearchQueryMixin, viewsets.ModelViewSet):
    """
    CRUD des Minutes of Meeting + export DOCX.
        GET  /api/mom/?q=          -> recherche sur entreprise ou titre
        GET  /api/mom/sections/defaults/
        POST /api/mom/generate-docx/   {"momId": 1}
        GET  /api/mom/{id}/docx/
        POST /api/mom/{id}/export/     (Celery)
    """

    serializer_class = MomSerializer
    search_fields = ("company__name", "title")

    def get_queryset(self):
        return mom_queryset()

    def get_serializer_class(self):
        if self.action in ("create", "update", "partial_update"):
            return MomWriteSerializer
        return MomSerializer

    def _read(self, mom):
        return MomSerializer(mom_queryset().get(pk=mom.pk), context=self.get_serializer_context()).data

    # ------------------------------------------------------------------ #
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        mom = create_mom(serializer.validated_data, user=request.user)
        return Response({"message": "MOM créée.", "data": self._read(mom)}, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        mom = self.get_object()
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        mom = update_mom(mom, serializer.validated_data)
        return Response({"message": "MOM mise à jour.", "data": self._read(mom)})

    def destroy(self, request, *args, **kwargs):
        delete_mom(self.get_object())
        return Response({"message": "MOM supprimée."})

    # ------------------------------------------------------------------ #
    @action(detail=False, methods=["get"], url_path="sections/defaults", url_name="sections-defaults")
    def sections_defaults(self, request):
        return Response(default_sections())

    @action(detail=False, methods=["post"], url_path="generate-docx", url_name="generate-docx")
    def generate_docx(self, request):
        raw = request.data.get("momId")
        if raw in (None, ""):
            raise UserFacingAPIException("momId requis.")
        mom = get_object_or_404(mom_queryset(), pk=parse_identifier(raw))
        return self._download(mom)

    @action(detail=True, methods=["get"])
    def docx(self, request, pk=None):
        return self._download(self.get_object())

    @action(detail=True, methods=["post"])
    def export(self, request, pk=None):
        mom = self.get_object()
        result = export_mom_docx.delay(mom.pk)
        payload = {
            "task_id": result.id,
            "status": result.status,
            "file": result.result if result.successful() else None,
        }
        return Response(payload, status=status.HTTP_202_ACCEPTED)

    def _download(self, mom):
        try:
            content, filename = render_mom_docx(mom)
        except Exception as e:
            logger.exception(f"[docx] Échec export MOM {mom.pk}")
            raise ExportError() from e
        return docx_response(content, filename)
