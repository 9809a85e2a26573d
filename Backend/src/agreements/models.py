from django.conf import settings
from django.db import models

from common.models import TimeStampedModel
from progress.models import STEP_JIK, STEP_MOU, STEP_MSA, STEP_NDA


class AgreementDocument(TimeStampedModel):
    """
    Structure commune des documents qui suivent une MOM.
    `sections` = [{"title": str, "content": <doc Tiptap>}].
    """

    STEP_CODE = ""
    DOC_TYPE = ""
    TITLE_LABEL = "Title"
    DESCRIPTION_LABEL = "Description"

    company = models.ForeignKey(
        "companies.Company", on_delete=models.PROTECT, null=True, blank=True, related_name="%(class)s_documents"
    )
    company_name = models.CharField(max_length=255)
    title = models.CharField(max_length=255)
    unit_name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    invest_value = models.DecimalField(max_digits=18, decimal_places=2, null=True, blank=True)
    contract_duration_years = models.DecimalField(max_digits=10, decimal_places=4, null=True, blank=True)
    sections = models.JSONField(default=list, blank=True)
    progress = models.ForeignKey(
        "progress.Progress", on_delete=models.SET_NULL, null=True, blank=True, related_name="%(class)s_documents"
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="%(class)s_documents"
    )

    def __str__(self) -> str:
        return f"{self.DOC_TYPE} {self.title} ({self.company_name})"

    class Meta:
        abstract = True
        ordering = ["-created_at", "-id"]


class Jik(AgreementDocument):
    STEP_CODE = STEP_JIK
    DOC_TYPE = "JIK"
    TITLE_LABEL = "JIK Title"
    DESCRIPTION_LABEL = "Initiative Partnership"

    class Meta(AgreementDocument.Meta):
        verbose_name = "JIK"
        verbose_name_plural = "JIK"


class Nda(AgreementDocument):
    STEP_CODE = STEP_NDA
    DOC_TYPE = "NDA"
    DESCRIPTION_LABEL = "Purpose"

    class Meta(AgreementDocument.Meta):
        verbose_name = "NDA"
        verbose_name_plural = "NDA"


class Msa(AgreementDocument):
    STEP_CODE = STEP_MSA
    DOC_TYPE = "MSA"
    DESCRIPTION_LABEL = "Scope of Services"

    class Meta(AgreementDocument.Meta):
        verbose_name = "MSA"
        verbose_name_plural = "MSA"


class Mou(AgreementDocument):
    STEP_CODE = STEP_MOU
    DOC_TYPE = "MOU"
    DESCRIPTION_LABEL = "Purpose"

    class Meta(AgreementDocument.Meta):
        verbose_name = "MOU"
        verbose_name_plural = "MOU"


AGREEMENT_MODELS = (Jik, Nda, Msa, Mou)
