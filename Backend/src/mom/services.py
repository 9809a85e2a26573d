"""
Ecriture des MOM et de leurs lignes enfants (approvers, next actions,
pieces jointes) dans une seule transaction.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction

from progress.models import STEP_MOM
from progress.services import delete_progress, sync_progress

from .models import Approver, Mom, MomAttachmentFile, MomAttachmentSection, NextAction

__all__ = [
    "mom_queryset",
    "clean_approvers",
    "clean_next_actions",
    "clean_attachments",
    "create_mom",
    "update_mom",
    "delete_mom",
]

logger = logging.getLogger(__name__)

SCALAR_FIELDS = ("company", "title", "date", "time", "venue", "count_attendees", "content")


def mom_queryset():
    return (
        Mom.objects.select_related("company", "progress__step", "progress__status")
        .prefetch_related("approvers", "next_actions", "attachments__files")
    )


def _blank(value: Any) -> bool:
    return not str(value or "").strip()


def clean_approvers(items: Iterable[dict]) -> List[dict]:
    """Les approvers sans nom sont ignores."""
    return [
        {
            "name": item["name"].strip(),
            "email": (item.get("email") or "").strip(),
            "type": item.get("type") or Approver.TYPE_INTERNAL,
        }
        for item in items or []
        if not _blank(item.get("name"))
    ]


def clean_next_actions(items: Iterable[dict]) -> List[dict]:
    """Une ligne dont action, target et pic sont tous vides est ignoree."""
    return [
        {key: (item.get(key) or "").strip() for key in ("action", "target", "pic")}
        for item in items or []
        if not all(_blank(item.get(key)) for key in ("action", "target", "pic"))
    ]


def clean_attachments(items: Iterable[dict]) -> List[dict]:
    """Une section sans nom ni fichier est ignoree."""
    sections = []
    for item in items or []:
        name = (item.get("section_name") or "").strip()
        files = [f for f in item.get("files") or [] if not _blank(f.get("url"))]
        if not name and not files:
            continue
        sections.append({"section_name": name, "files": files})
    return sections


def _create_children(mom: Mom, data: Dict[str, Any]) -> None:
    if "approvers" in data:
        Approver.objects.bulk_create(Approver(mom=mom, **a) for a in clean_approvers(data["approvers"]))
    if "next_actions" in data:
        NextAction.objects.bulk_create(NextAction(mom=mom, **n) for n in clean_next_actions(data["next_actions"]))
    if "attachments" in data:
        for position, section in enumerate(clean_attachments(data["attachments"])):
            sec = MomAttachmentSection.objects.create(
                mom=mom, section_name=section["section_name"], position=position
            )
            MomAttachmentFile.objects.bulk_create(
                MomAttachmentFile(
                    section=sec,
                    name=f.get("name") or "",
                    url=f["url"],
                    mime_type=f.get("mime_type") or "",
                    size=f.get("size"),
                )
                for f in section["files"]
            )


def _sync(mom: Mom, finished: bool) -> None:
    progress = sync_progress(mom.progress, mom.company, STEP_MOM, finished)
    if progress != mom.progress:
        mom.progress = progress
        mom.save(update_fields=["progress", "updated_at"])


@transaction.atomic
def create_mom(data: Dict[str, Any], user=None) -> Mom:
    mom = Mom.objects.create(
        created_by=user if user is not None and user.is_authenticated else None,
        **{field: data[field] for field in SCALAR_FIELDS if field in data},
    )
    _create_children(mom, data)
    _sync(mom, bool(data.get("is_finish")))
    logger.info(f"[mom] MOM {mom.pk} créé (company={mom.company_id})")
    return mom


@transaction.atomic
def update_mom(mom: Mom, data: Dict[str, Any]) -> Mom:
    """
    Champs simples mis a jour s'ils sont fournis ; approvers et next actions
    recrees a partir du payload ; pieces jointes remplacees seulement si la
    cle "attachments" est presente.
    """
    changed = [field for field in SCALAR_FIELDS if field in data]
    for field in changed:
        setattr(mom, field, data[field])
    if changed:
        mom.save(update_fields=changed + ["updated_at"])

    if "approvers" in data:
        mom.approvers.all().delete()
    if "next_actions" in data:
        mom.next_actions.all().delete()
    if "attachments" in data:
        # les fichiers partent en cascade avec leur section
        mom.attachments.all().delete()
    _create_children(mom, data)

    if "is_finish" in data:
        _sync(mom, bool(data["is_finish"]))
    logger.info(f"[mom] MOM {mom.pk} mis à jour")
    return mom


@transaction.atomic
def delete_mom(mom: Mom) -> None:
    progress_id: Optional[int] = mom.progress_id
    mom_id = mom.pk
    # approvers, next actions, sections et fichiers suivent en cascade
    mom.delete()
    delete_progress(progress_id)
    logger.info(f"[mom] MOM {mom_id} supprimé")
