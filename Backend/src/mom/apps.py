from django.apps import AppConfig


class MomConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "mom"
    verbose_name = "Minutes of Meeting"
