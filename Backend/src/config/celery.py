import os
from pathlib import Path

from celery import Celery
from dotenv import load_dotenv

# Backend/.env (CELERY_BROKER_URL, MEDIA_ROOT...) avant la lecture des settings
load_dotenv(Path(__file__).resolve().parents[2] / ".env")

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.local")

app = Celery("mom_documents")

# Config lue dans les settings Django (prefixe CELERY_)
app.config_from_object("django.conf:settings", namespace="CELERY")

# mom.tasks, ...
app.autodiscover_tasks()
