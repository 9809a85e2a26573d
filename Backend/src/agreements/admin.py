from django.contrib import admin

from .models import AGREEMENT_MODELS


class AgreementAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "company_name", "unit_name", "progress", "created_at")
    search_fields = ("title", "company_name", "unit_name")
    autocomplete_fields = ("company",)


for model in AGREEMENT_MODELS:
    admin.site.register(model, AgreementAdmin)
