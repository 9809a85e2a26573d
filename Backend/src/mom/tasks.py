import logging

from celery import shared_task
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from .exporters import render_mom_docx
from .services import mom_queryset

logger = logging.getLogger(__name__)

EXPORT_DIR = "exports/mom"


@shared_task(name="mom.export_docx")
def export_mom_docx(mom_id: int) -> dict:
    """Genere le DOCX d'une MOM dans le storage media et renvoie son chemin."""
    mom = mom_queryset().get(pk=mom_id)
    content, filename = render_mom_docx(mom)
    path = default_storage.save(f"{EXPORT_DIR}/{filename}", ContentFile(content))
    logger.info(f"[mom] Export asynchrone MOM {mom_id} -> {path}")
    return {"path": path, "url": default_storage.url(path), "filename": filename}
