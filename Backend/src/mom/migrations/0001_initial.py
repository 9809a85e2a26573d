import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("companies", "0001_initial"),
        ("progress", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Mom",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("date", models.DateField()),
                ("time", models.CharField(blank=True, default="", max_length=100)),
                ("venue", models.CharField(blank=True, default="", max_length=255)),
                ("count_attendees", models.TextField(blank=True, default="")),
                ("content", models.JSONField(blank=True, default=list)),
                (
                    "company",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="moms",
                        to="companies.company",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="moms",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "progress",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="moms",
                        to="progress.progress",
                    ),
                ),
            ],
            options={"verbose_name": "MOM", "verbose_name_plural": "MOMs", "ordering": ["-date", "-id"]},
        ),
        migrations.CreateModel(
            name="Approver",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(blank=True, default="", max_length=254)),
                (
                    "type",
                    models.CharField(
                        choices=[("Internal", "Internal"), ("External", "External")],
                        default="Internal",
                        max_length=16,
                    ),
                ),
                (
                    "mom",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="approvers", to="mom.mom"
                    ),
                ),
            ],
            options={"ordering": ["id"]},
        ),
        migrations.CreateModel(
            name="NextAction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("action", models.TextField(blank=True, default="")),
                ("target", models.CharField(blank=True, default="", max_length=255)),
                ("pic", models.CharField(blank=True, default="", max_length=255)),
                (
                    "mom",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="next_actions", to="mom.mom"
                    ),
                ),
            ],
            options={"ordering": ["id"]},
        ),
        migrations.CreateModel(
            name="MomAttachmentSection",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("section_name", models.CharField(blank=True, default="", max_length=255)),
                ("position", models.PositiveIntegerField(default=0)),
                (
                    "mom",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="attachments", to="mom.mom"
                    ),
                ),
            ],
            options={"ordering": ["position", "id"]},
        ),
        migrations.CreateModel(
            name="MomAttachmentFile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("url", models.CharField(max_length=1024)),
                ("mime_type", models.CharField(blank=True, default="", max_length=100)),
                ("size", models.PositiveBigIntegerField(blank=True, null=True)),
                (
                    "section",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="files",
                        to="mom.momattachmentsection",
                    ),
                ),
            ],
            options={"ordering": ["id"]},
        ),
    ]
