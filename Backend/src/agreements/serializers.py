from decimal import ROUND_HALF_UP, Decimal

from rest_framework import serializers

from common.fields import OptionalDecimalField
from companies.models import Company
from companies.serializers import CompanySummarySerializer
from docgen.content import ContentError, normalize_sections
from progress.serializers import ProgressSerializer
from progress.services import status_label

from .models import Jik, Mou, Msa, Nda

DURATION_DIVISORS = {"day": Decimal(365), "month": Decimal(12), "year": Decimal(1)}
YEARS_QUANTUM = Decimal("0.0001")


def duration_to_years(amount: Decimal, unit: str) -> Decimal:
    """{amount, unit} -> annees (jour / 365, mois / 12)."""
    return (Decimal(amount) / DURATION_DIVISORS[unit]).quantize(YEARS_QUANTUM, rounding=ROUND_HALF_UP)


# ---------------------------------------------------------------------------
# Lecture
# ---------------------------------------------------------------------------

class AgreementSerializer(serializers.ModelSerializer):
    company = CompanySummarySerializer(read_only=True)
    company_id = serializers.IntegerField(read_only=True)
    doc_type = serializers.SerializerMethodField()
    progress = ProgressSerializer(read_only=True)
    status_label = serializers.SerializerMethodField()
    created_by = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        fields = [
            "id",
            "doc_type",
            "company_id",
            "company",
            "company_name",
            "title",
            "unit_name",
            "description",
            "invest_value",
            "contract_duration_years",
            "sections",
            "progress",
            "status_label",
            "created_by",
            "created_at",
            "updated_at",
        ]

    def get_doc_type(self, obj) -> str:
        return obj.DOC_TYPE

    def get_status_label(self, obj) -> str:
        return status_label(obj.progress)


class JikSerializer(AgreementSerializer):
    class Meta(AgreementSerializer.Meta):
        model = Jik


class NdaSerializer(AgreementSerializer):
    class Meta(AgreementSerializer.Meta):
        model = Nda


class MsaSerializer(AgreementSerializer):
    class Meta(AgreementSerializer.Meta):
        model = Msa


class MouSerializer(AgreementSerializer):
    class Meta(AgreementSerializer.Meta):
        model = Mou


# ---------------------------------------------------------------------------
# Ecriture
# ---------------------------------------------------------------------------

class DurationSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=4, min_value=0)
    unit = serializers.ChoiceField(choices=list(DURATION_DIVISORS))


class AgreementWriteSerializer(serializers.Serializer):
    """
    Payload des formulaires JIK / NDA / MSA / MOU.
    La duree peut arriver deja convertie (contractDurationYears) ou sous la
    forme {amount, unit} (contractDuration).
    """

    # alias du formulaire -> cle canonique
    ALIASES: dict = {}

    companyId = serializers.PrimaryKeyRelatedField(
        queryset=Company.objects.all(), source="company", required=False, allow_null=True
    )
    companyName = serializers.CharField(source="company_name", max_length=255)
    title = serializers.CharField(max_length=255)
    unitName = serializers.CharField(source="unit_name", max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    investValue = OptionalDecimalField(source="invest_value", max_digits=18, decimal_places=2, min_value=0)
    contractDurationYears = OptionalDecimalField(
        source="contract_duration_years", max_digits=10, decimal_places=4, min_value=0
    )
    contractDuration = DurationSerializer(required=False, allow_null=True)
    sections = serializers.JSONField(required=False, default=list)
    is_finish = serializers.BooleanField(required=False, default=False)

    def to_internal_value(self, data):
        if self.ALIASES and hasattr(data, "keys"):
            data = data.copy()
            for alias, key in self.ALIASES.items():
                if alias in data and key not in data:
                    data[key] = data[alias]
        return super().to_internal_value(data)

    def validate_sections(self, value):
        try:
            return normalize_sections(value, label_key="title")
        except ContentError as e:
            raise serializers.ValidationError(str(e))

    def validate(self, attrs):
        duration = attrs.pop("contractDuration", None)
        if duration:
            attrs["contract_duration_years"] = duration_to_years(duration["amount"], duration["unit"])
        return attrs


class JikWriteSerializer(AgreementWriteSerializer):
    ALIASES = {"jikTitle": "title", "initiativePartnership": "description"}
