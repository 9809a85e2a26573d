from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Redacteur des documents (MOM, JIK, NDA, MSA, MOU).
    job_title / unit_name alimentent l'approbateur interne propose par defaut.
    """

    job_title = models.CharField(max_length=255, blank=True, default="")
    unit_name = models.CharField(max_length=255, blank=True, default="")

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        return self.get_full_name() or self.username or self.email

    class Meta:
        verbose_name = "Utilisateur"
        verbose_name_plural = "Utilisateurs"
        ordering = ["id"]
