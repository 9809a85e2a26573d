"""
Synchronisation de l'avancement (Progress) avec le bouton "Save & Finish"
des formulaires de documents.
"""

from __future__ import annotations

import logging
from typing import Optional

from .models import (
    DEFAULT_STATUSES,
    DEFAULT_STEPS,
    STATUS_COMPLETED,
    Progress,
    ProgressStatus,
    ProgressStep,
)

__all__ = ["get_step", "get_status", "sync_progress", "delete_progress", "status_label"]

logger = logging.getLogger(__name__)

_STEP_DEFAULTS = {code: {"name": name, "order": order} for code, name, order in DEFAULT_STEPS}
_STATUS_DEFAULTS = {code: {"name": name} for code, name in DEFAULT_STATUSES}


def get_step(code: str) -> ProgressStep:
    step, _ = ProgressStep.objects.get_or_create(
        code=code, defaults=_STEP_DEFAULTS.get(code, {"name": code.upper()})
    )
    return step


def get_status(code: str) -> ProgressStatus:
    status, _ = ProgressStatus.objects.get_or_create(
        code=code, defaults=_STATUS_DEFAULTS.get(code, {"name": code.title()})
    )
    return status


def sync_progress(progress: Optional[Progress], company, step_code: str, finished: bool) -> Optional[Progress]:
    """
    Applique l'etat termine / brouillon et renvoie le Progress a rattacher au document.

    - termine + progress existant  -> status "completed"
    - termine + pas de progress    -> creation (company, step, "completed")
    - brouillon + progress existant -> status NULL
    - brouillon + pas de progress  -> None (rien a creer)
    """
    if finished:
        completed = get_status(STATUS_COMPLETED)
        if progress is not None:
            progress.status = completed
            progress.company = company
            progress.save(update_fields=["status", "company", "updated_at"])
            return progress
        created = Progress.objects.create(company=company, step=get_step(step_code), status=completed)
        logger.info(f"[progress] {step_code} terminé pour company={company.pk} (progress={created.pk})")
        return created

    if progress is not None:
        progress.status = None
        progress.company = company
        progress.save(update_fields=["status", "company", "updated_at"])
    return progress


def delete_progress(progress_id: Optional[int]) -> None:
    """Suppression best-effort du Progress d'un document supprime."""
    if not progress_id:
        return
    deleted, _ = Progress.objects.filter(pk=progress_id).delete()
    if not deleted:
        logger.warning(f"[progress] Progress {progress_id} introuvable lors de la suppression")


def status_label(progress: Optional[Progress]) -> str:
    if progress is not None and progress.is_completed:
        return progress.status.name
    return "Draft"
