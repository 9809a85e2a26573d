from datetime import date

from django.utils.dateparse import parse_datetime
from rest_framework import serializers
from rest_framework.fields import empty


class FlexibleDateField(serializers.DateField):
    """
    Accepte "2025-01-31" comme "2025-01-31T09:00:00.000Z" (valeur d'un
    <input type="date"> ou d'un Date JS serialise) et garde la partie date.
    """

    def to_internal_value(self, value):
        if isinstance(value, str) and "T" in value:
            parsed = parse_datetime(value.replace("Z", "+00:00"))
            if parsed is not None:
                return parsed.date()
        if isinstance(value, date):
            return value
        return super().to_internal_value(value)


class OptionalDecimalField(serializers.DecimalField):
    """DecimalField ou une chaine vide vaut null (champs numeriques optionnels des formulaires)."""

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)

    def run_validation(self, data=empty):
        if isinstance(data, str) and not data.strip():
            data = None
        return super().run_validation(data)
