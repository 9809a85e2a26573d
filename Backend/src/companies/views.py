from rest_framework import viewsets

from common.mixins import IntegerLookupMixin, SearchQueryMixin
from .models import Company
from .serializers import CompanySerializer


class CompanyViewSet(IntegerLookupMixin, SearchQueryMixin, viewsets.ModelViewSet):
    """
    CRUD des entreprises partenaires.
    GET /api/companies/?q=telkom -> filtre sur le nom
    Suppression refusee (409) si des documents y font encore reference.
    """

    queryset = Company.objects.all()
    serializer_class = CompanySerializer
    search_fields = ("name",)
