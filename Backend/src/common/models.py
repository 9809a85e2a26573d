from django.db import models


class TimeStampedModel(models.Model):
    """Horodatage commun a tous les documents et referentiels."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
