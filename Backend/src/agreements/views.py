import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from common.exceptions import ExportError
from common.mixins import IntegerLookupMixin, SearchQueryMixin
from docgen.files import docx_response

from .exporters import render_agreement_docx
from .models import Jik, Mou, Msa, Nda
from .serializers import (
    AgreementWriteSerializer,
    JikSerializer,
    JikWriteSerializer,
    MouSerializer,
    MsaSerializer,
    NdaSerializer,
)
from .services import create_document, delete_document, document_queryset, update_document

logger = logging.getLogger(__name__)


class AgreementViewSet(IntegerLookupMixin, SearchQueryMixin, viewsets.ModelViewSet):
    """
    Base commune des documents JIK / NDA / MSA / MOU :
    CRUD, recherche ?q= (entreprise ou titre), export GET {id}/docx/.
    """

    model = None
    read_serializer_class = None
    write_serializer_class = AgreementWriteSerializer
    search_fields = ("company_name", "title")

    def get_queryset(self):
        return document_queryset(self.model)

    def get_serializer_class(self):
        if self.action in ("create", "update", "partial_update"):
            return self.write_serializer_class
        return self.read_serializer_class

    def _read(self, doc):
        serializer = self.read_serializer_class(
            self.get_queryset().get(pk=doc.pk), context=self.get_serializer_context()
        )
        return serializer.data

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        doc = create_document(self.model, serializer.validated_data, user=request.user)
        return Response(
            {"message": f"{self.model.DOC_TYPE} créé.", "data": self._read(doc)},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        doc = self.get_object()
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        doc = update_document(doc, serializer.validated_data)
        return Response({"message": f"{self.model.DOC_TYPE} mis à jour.", "data": self._read(doc)})

    def destroy(self, request, *args, **kwargs):
        delete_document(self.get_object())
        return Response({"message": f"{self.model.DOC_TYPE} supprimé."})

    @action(detail=True, methods=["get"])
    def docx(self, request, pk=None):
        doc = self.get_object()
        try:
            content, filename = render_agreement_docx(doc)
        except Exception as e:
            logger.exception(f"[docx] Échec export {self.model.DOC_TYPE} {doc.pk}")
            raise ExportError() from e
        return docx_response(content, filename)


class JikViewSet(AgreementViewSet):
    model = Jik
    read_serializer_class = JikSerializer
    write_serializer_class = JikWriteSerializer


class NdaViewSet(AgreementViewSet):
    model = Nda
    read_serializer_class = NdaSerializer


class MsaViewSet(AgreementViewSet):
    model = Msa
    read_serializer_class = MsaSerializer


class MouViewSet(AgreementViewSet):
    model = Mou
    read_serializer_class = MouSerializer
