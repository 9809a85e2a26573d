from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from agreements.models import AGREEMENT_MODELS

User = get_user_model()

PROFILE_FIELDS = ["first_name", "last_name", "email", "job_title", "unit_name"]


class UserSerializer(serializers.ModelSerializer):
    """
    Profil du redacteur connecte.
    `approver` sert au front pour pre-remplir un approbateur interne de MOM,
    `documents` compte les documents qu'il a crees par type.
    """

    display_name = serializers.CharField(read_only=True)
    approver = serializers.SerializerMethodField()
    documents = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "username", *PROFILE_FIELDS, "display_name", "approver", "documents", "is_staff"]
        read_only_fields = ["id", "username", "is_staff"]

    def get_approver(self, user) -> dict:
        return {"name": user.display_name, "email": user.email, "type": "Internal"}

    def get_documents(self, user) -> dict:
        counts = {"mom": user.moms.count()}
        for model in AGREEMENT_MODELS:
            counts[model.DOC_TYPE.lower()] = model.objects.filter(created_by=user).count()
        return counts


class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, trim_whitespace=False, style={"input_type": "password"})

    class Meta:
        model = User
        fields = ["id", "username", "password", *PROFILE_FIELDS]
        read_only_fields = ["id"]

    def validate(self, attrs):
        # les validateurs Django ont besoin de l'utilisateur (similarite avec le username...)
        validate_password(attrs["password"], User(**{k: v for k, v in attrs.items() if k != "password"}))
        return attrs

    def create(self, validated_data):
        return User.objects.create_user(**validated_data)


class ChangePasswordSerializer(serializers.Serializer):
    old_password = serializers.CharField(write_only=True, trim_whitespace=False)
    new_password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_old_password(self, value: str) -> str:
        if not self.context["request"].user.check_password(value):
            raise serializers.ValidationError("Ancien mot de passe incorrect.")
        return value

    def validate_new_password(self, value: str) -> str:
        validate_password(value, self.context["request"].user)
        return value

    def save(self, **kwargs):
        user = self.context["request"].user
        user.set_password(self.validated_data["new_password"])
        user.save(update_fields=["password"])
        return user
