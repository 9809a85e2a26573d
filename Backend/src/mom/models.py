from django.conf import settings
from django.db import models

from common.models import TimeStampedModel


class Mom(TimeStampedModel):
    """
    Minutes of Meeting.
    `content` = liste de sections [{"label": str, "content": <doc Tiptap>}].
    """

    company = models.ForeignKey("companies.Company", on_delete=models.PROTECT, related_name="moms")
    title = models.CharField(max_length=255)
    date = models.DateField()
    time = models.CharField(max_length=100, blank=True, default="")
    venue = models.CharField(max_length=255, blank=True, default="")
    count_attendees = models.TextField(blank=True, default="")
    content = models.JSONField(default=list, blank=True)
    progress = models.ForeignKey(
        "progress.Progress", on_delete=models.SET_NULL, null=True, blank=True, related_name="moms"
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="moms"
    )

    def __str__(self) -> str:
        return f"{self.title} ({self.company})"

    class Meta:
        verbose_name = "MOM"
        verbose_name_plural = "MOMs"
        ordering = ["-date", "-id"]


class Approver(models.Model):
    TYPE_INTERNAL = "Internal"
    TYPE_EXTERNAL = "External"
    TYPE_CHOICES = [(TYPE_INTERNAL, "Internal"), (TYPE_EXTERNAL, "External")]

    mom = models.ForeignKey(Mom, on_delete=models.CASCADE, related_name="approvers")
    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True, default="")
    type = models.CharField(max_length=16, choices=TYPE_CHOICES, default=TYPE_INTERNAL)

    def __str__(self) -> str:
        return self.name

    class Meta:
        ordering = ["id"]


class NextAction(models.Model):
    """Ligne du tableau "Next Action" : action, echeance (target), responsable (pic / UIC)."""

    mom = models.ForeignKey(Mom, on_delete=models.CASCADE, related_name="next_actions")
    action = models.TextField(blank=True, default="")
    target = models.CharField(max_length=255, blank=True, default="")
    pic = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        ordering = ["id"]


class MomAttachmentSection(models.Model):
    mom = models.ForeignKey(Mom, on_delete=models.CASCADE, related_name="attachments")
    section_name = models.CharField(max_length=255, blank=True, default="")
    position = models.PositiveIntegerField(default=0)

    def __str__(self) -> str:
        return self.section_name

    class Meta:
        ordering = ["position", "id"]


class MomAttachmentFile(models.Model):
    section = models.ForeignKey(MomAttachmentSection, on_delete=models.CASCADE, related_name="files")
    name = models.CharField(max_length=255, blank=True, default="")
    url = models.CharField(max_length=1024)
    mime_type = models.CharField(max_length=100, blank=True, default="")
    size = models.PositiveBigIntegerField(null=True, blank=True)

    def __str__(self) -> str:
        return self.name or self.url

    class Meta:
        ordering = ["id"]
