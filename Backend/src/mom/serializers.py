from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from rest_framework import serializers

from common.fields import FlexibleDateField
from companies.models import Company
from companies.serializers import CompanySummarySerializer
from docgen.content import ContentError, normalize_sections
from progress.serializers import ProgressSerializer
from progress.services import status_label

from .models import Approver, Mom, MomAttachmentFile, MomAttachmentSection, NextAction


# ---------------------------------------------------------------------------
# Lecture
# ---------------------------------------------------------------------------

class ApproverSerializer(serializers.ModelSerializer):
    class Meta:
        model = Approver
        fields = ["id", "name", "email", "type"]


class NextActionSerializer(serializers.ModelSerializer):
    class Meta:
        model = NextAction
        fields = ["id", "action", "target", "pic"]


class AttachmentFileSerializer(serializers.ModelSerializer):
    class Meta:
        model = MomAttachmentFile
        fields = ["id", "name", "url", "mime_type", "size"]


class AttachmentSectionSerializer(serializers.ModelSerializer):
    files = AttachmentFileSerializer(many=True, read_only=True)

    class Meta:
        model = MomAttachmentSection
        fields = ["id", "section_name", "position", "files"]


class MomSerializer(serializers.ModelSerializer):
    company = CompanySummarySerializer(read_only=True)
    company_id = serializers.IntegerField(read_only=True)
    approvers = ApproverSerializer(many=True, read_only=True)
    next_actions = NextActionSerializer(many=True, read_only=True)
    attachments = AttachmentSectionSerializer(many=True, read_only=True)
    progress = ProgressSerializer(read_only=True)
    status_label = serializers.SerializerMethodField()
    created_by = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Mom
        fields = [
            "id",
            "company_id",
            "company",
            "title",
            "date",
            "time",
            "venue",
            "count_attendees",
            "content",
            "approvers",
            "next_actions",
            "attachments",
            "progress",
            "status_label",
            "created_by",
            "created_at",
            "updated_at",
        ]

    def get_status_label(self, obj: Mom) -> str:
        return status_label(obj.progress)


# ---------------------------------------------------------------------------
# Ecriture (noms de champs du formulaire front)
# ---------------------------------------------------------------------------

_APPROVER_TYPES = {
    "internal": Approver.TYPE_INTERNAL,
    "external": Approver.TYPE_EXTERNAL,
    "eksternal": Approver.TYPE_EXTERNAL,
}


class ApproverInputSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default="")
    # verifie seulement pour une ligne nommee (les lignes sans nom sont ignorees)
    email = serializers.CharField(required=False, allow_blank=True, default="")
    type = serializers.CharField(required=False, allow_blank=True, default=Approver.TYPE_INTERNAL)

    def validate_type(self, value: str) -> str:
        value = (value or "").strip().lower()
        if not value:
            return Approver.TYPE_INTERNAL
        if value not in _APPROVER_TYPES:
            raise serializers.ValidationError("Type attendu : Internal ou External.")
        return _APPROVER_TYPES[value]

    def validate(self, attrs):
        email = (attrs.get("email") or "").strip()
        if email and (attrs.get("name") or "").strip():
            try:
                validate_email(email)
            except DjangoValidationError:
                raise serializers.ValidationError({"email": "Adresse e-mail invalide."})
        return attrs


class NextActionInputSerializer(serializers.Serializer):
    action = serializers.CharField(required=False, allow_blank=True, default="")
    target = serializers.CharField(required=False, allow_blank=True, default="")
    pic = serializers.CharField(required=False, allow_blank=True, default="")


class AttachmentFileInputSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default="")
    url = serializers.CharField(max_length=1024)
    mime_type = serializers.CharField(required=False, allow_blank=True, default="")
    size = serializers.IntegerField(required=False, allow_null=True, min_value=0, default=None)


class AttachmentSectionInputSerializer(serializers.Serializer):
    sectionName = serializers.CharField(source="section_name", required=False, allow_blank=True, default="")
    files = AttachmentFileInputSerializer(many=True, required=False, default=list)


class MomWriteSerializer(serializers.Serializer):
    """
    Payload du formulaire MOM.
    Les cles sont celles du front (judul, tanggalMom, peserta...), les
    `source` donnent directement les noms des champs du modele.
    """

    companyId = serializers.PrimaryKeyRelatedField(queryset=Company.objects.all(), source="company")
    judul = serializers.CharField(source="title", max_length=255)
    tanggalMom = FlexibleDateField(source="date")
    peserta = serializers.CharField(source="count_attendees")
    venue = serializers.CharField(max_length=255)
    waktu = serializers.CharField(source="time", max_length=100)
    content = serializers.JSONField(required=False, default=list)
    approvers = ApproverInputSerializer(many=True, required=False, default=list)
    attachments = AttachmentSectionInputSerializer(many=True, required=False)
    nextActions = NextActionInputSerializer(many=True, required=False, default=list, source="next_actions")
    is_finish = serializers.BooleanField(required=False, default=False)

    def validate_content(self, value):
        try:
            return normalize_sections(value, label_key="label")
        except ContentError as e:
            raise serializers.ValidationError(str(e))
