from django.db import migrations

STEPS = (
    ("mom", "MOM", 1),
    ("jik", "JIK", 2),
    ("nda", "NDA", 3),
    ("msa", "MSA", 4),
    ("mou", "MOU", 5),
)
STATUSES = (("completed", "Completed"),)


def seed(apps, schema_editor):
    ProgressStep = apps.get_model("progress", "ProgressStep")
    ProgressStatus = apps.get_model("progress", "ProgressStatus")
    for code, name, order in STEPS:
        ProgressStep.objects.update_or_create(code=code, defaults={"name": name, "order": order})
    for code, name in STATUSES:
        ProgressStatus.objects.update_or_create(code=code, defaults={"name": name})


def unseed(apps, schema_editor):
    apps.get_model("progress", "ProgressStatus").objects.filter(code__in=[c for c, _ in STATUSES]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("progress", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed, unseed),
    ]
