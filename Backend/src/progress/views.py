from rest_framework import viewsets
from rest_framework.generics import ListAPIView

from common.mixins import IntegerLookupMixin
from .models import Progress, ProgressStep
from .serializers import ProgressSerializer, ProgressStepSerializer


class ProgressViewSet(IntegerLookupMixin, viewsets.ReadOnlyModelViewSet):
    """
    GET /api/progress/?company=<id>&step=<code> -> avancement par entreprise
    """

    serializer_class = ProgressSerializer

    def get_queryset(self):
        qs = Progress.objects.select_related("company", "step", "status")
        company = self.request.query_params.get("company")
        if company and company.isascii() and company.isdigit():
            qs = qs.filter(company_id=int(company))
        step = self.request.query_params.get("step")
        if step:
            qs = qs.filter(step__code=step)
        return qs


class ProgressStepListView(ListAPIView):
    """GET /api/progress/steps/ -> etapes du parcours, dans l'ordre."""

    queryset = ProgressStep.objects.all()
    serializer_class = ProgressStepSerializer
