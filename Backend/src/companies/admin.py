from django.contrib import admin

from .models import Company


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "logo_mitra_url", "created_at")
    search_fields = ("name",)
    ordering = ("name",)
