from django.db import models

from common.models import TimeStampedModel


class Company(TimeStampedModel):
    """
    Entreprise partenaire (mitra) d'un MOM ou d'un accord.
    `logo_mitra_url` est affiche dans l'en-tete des documents exportes.
    """

    name = models.CharField(max_length=255, unique=True)
    logo_mitra_url = models.URLField(max_length=1024, blank=True, default="")
    address = models.TextField(blank=True, default="")

    def __str__(self) -> str:
        return self.name

    class Meta:
        verbose_name = "Entreprise"
        verbose_name_plural = "Entreprises"
        ordering = ["name"]
