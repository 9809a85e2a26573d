from django.db import models

from common.models import TimeStampedModel

STEP_MOM = "mom"
STEP_JIK = "jik"
STEP_NDA = "nda"
STEP_MSA = "msa"
STEP_MOU = "mou"

STATUS_COMPLETED = "completed"

# (code, libelle, ordre) - seedes par la migration 0002
DEFAULT_STEPS = (
    (STEP_MOM, "MOM", 1),
    (STEP_JIK, "JIK", 2),
    (STEP_NDA, "NDA", 3),
    (STEP_MSA, "MSA", 4),
    (STEP_MOU, "MOU", 5),
)
DEFAULT_STATUSES = ((STATUS_COMPLETED, "Completed"),)


class ProgressStep(models.Model):
    """Etape du parcours partenaire (MOM, JIK, NDA, MSA, MOU)."""

    code = models.SlugField(max_length=32, unique=True)
    name = models.CharField(max_length=100)
    order = models.PositiveSmallIntegerField(default=0)

    def __str__(self) -> str:
        return self.name

    class Meta:
        ordering = ["order", "id"]


class ProgressStatus(models.Model):
    code = models.SlugField(max_length=32, unique=True)
    name = models.CharField(max_length=100)

    def __str__(self) -> str:
        return self.name

    class Meta:
        verbose_name_plural = "Progress statuses"
        ordering = ["id"]


class Progress(TimeStampedModel):
    """
    Avancement d'un document pour une entreprise.
    status NULL = brouillon, status "completed" = document termine.
    """

    company = models.ForeignKey("companies.Company", on_delete=models.CASCADE, related_name="progress_entries")
    step = models.ForeignKey(ProgressStep, on_delete=models.PROTECT, related_name="entries")
    status = models.ForeignKey(
        ProgressStatus, on_delete=models.SET_NULL, null=True, blank=True, related_name="entries"
    )

    @property
    def is_completed(self) -> bool:
        return self.status is not None and self.status.code == STATUS_COMPLETED

    def __str__(self) -> str:
        return f"{self.company} / {self.step} / {self.status or 'Draft'}"

    class Meta:
        verbose_name_plural = "Progress"
        ordering = ["-updated_at", "-id"]
