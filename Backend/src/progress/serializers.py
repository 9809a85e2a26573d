from rest_framework import serializers

from .models import Progress, ProgressStatus, ProgressStep


class ProgressStepSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProgressStep
        fields = ["id", "code", "name", "order"]


class ProgressStatusSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProgressStatus
        fields = ["id", "code", "name"]


class ProgressSerializer(serializers.ModelSerializer):
    step = ProgressStepSerializer(read_only=True)
    status = ProgressStatusSerializer(read_only=True)
    company_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Progress
        fields = ["id", "company_id", "step", "status", "created_at", "updated_at"]
