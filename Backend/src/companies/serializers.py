from rest_framework import serializers

from .models import Company


class CompanySerializer(serializers.ModelSerializer):
    class Meta:
        model = Company
        fields = ["id", "name", "logo_mitra_url", "address", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_name(self, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("Nom d'entreprise requis.")
        return value


class CompanySummarySerializer(serializers.ModelSerializer):
    """Version courte imbriquee dans les documents."""

    class Meta:
        model = Company
        fields = ["id", "name", "logo_mitra_url"]
