from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    """Redacteurs : le poste et l'unite apparaissent dans les blocs d'approbation."""

    list_display = ("username", "display_name", "unit_name", "job_title", "email", "is_active")
    list_filter = ("unit_name", "is_active", "is_staff")
    search_fields = ("username", "email", "first_name", "last_name", "unit_name", "job_title")
    ordering = ("username",)

    fieldsets = DjangoUserAdmin.fieldsets + (("Organisation", {"fields": ("unit_name", "job_title")}),)
    add_fieldsets = DjangoUserAdmin.add_fieldsets + (
        ("Organisation", {"classes": ("wide",), "fields": ("email", "unit_name", "job_title")}),
    )

    @admin.display(description="Nom affiche")
    def display_name(self, obj):
        return obj.display_name
