from django.contrib import admin

from .models import Progress, ProgressStatus, ProgressStep


@admin.register(ProgressStep)
class ProgressStepAdmin(admin.ModelAdmin):
    list_display = ("id", "code", "name", "order")
    ordering = ("order",)


@admin.register(ProgressStatus)
class ProgressStatusAdmin(admin.ModelAdmin):
    list_display = ("id", "code", "name")


@admin.register(Progress)
class ProgressAdmin(admin.ModelAdmin):
    list_display = ("id", "company", "step", "status", "updated_at")
    list_filter = ("step", "status")
    search_fields = ("company__name",)
