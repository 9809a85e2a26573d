import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def document_fields(prefix):
    related = f"{prefix}_documents"
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
        ("company_name", models.CharField(max_length=255)),
        ("title", models.CharField(max_length=255)),
        ("unit_name", models.CharField(max_length=255)),
        ("description", models.TextField(blank=True, default="")),
        ("invest_value", models.DecimalField(blank=True, decimal_places=2, max_digits=18, null=True)),
        ("contract_duration_years", models.DecimalField(blank=True, decimal_places=4, max_digits=10, null=True)),
        ("sections", models.JSONField(blank=True, default=list)),
        (
            "company",
            models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.PROTECT,
                related_name=related,
                to="companies.company",
            ),
        ),
        (
            "created_by",
            models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name=related,
                to=settings.AUTH_USER_MODEL,
            ),
        ),
        (
            "progress",
            models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name=related,
                to="progress.progress",
            ),
        ),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("companies", "0001_initial"),
        ("progress", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Jik",
            fields=document_fields("jik"),
            options={
                "verbose_name": "JIK",
                "verbose_name_plural": "JIK",
                "ordering": ["-created_at", "-id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Nda",
            fields=document_fields("nda"),
            options={
                "verbose_name": "NDA",
                "verbose_name_plural": "NDA",
                "ordering": ["-created_at", "-id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Msa",
            fields=document_fields("msa"),
            options={
                "verbose_name": "MSA",
                "verbose_name_plural": "MSA",
                "ordering": ["-created_at", "-id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Mou",
            fields=document_fields("mou"),
            options={
                "verbose_name": "MOU",
                "verbose_name_plural": "MOU",
                "ordering": ["-created_at", "-id"],
                "abstract": False,
            },
        ),
    ]
