"""
Creation / mise a jour / suppression generiques des documents JIK, NDA, MSA,
MOU ; la classe du modele porte le code d'etape de progression.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type

from django.db import transaction

from companies.models import Company
from progress.services import delete_progress, sync_progress

from .models import AgreementDocument

__all__ = ["document_queryset", "resolve_company", "create_document", "update_document", "delete_document"]

logger = logging.getLogger(__name__)

SCALAR_FIELDS = (
    "company",
    "company_name",
    "title",
    "unit_name",
    "description",
    "invest_value",
    "contract_duration_years",
    "sections",
)


def document_queryset(model: Type[AgreementDocument]):
    return model.objects.select_related("company", "progress__step", "progress__status")


def resolve_company(company: Optional[Company], company_name: str) -> Company:
    """
    Entreprise choisie, sinon celle du même nom : correspondance exacte d'abord,
    puis sans casse (la plus ancienne), créée au besoin.
    """
    if company is not None:
        return company
    company = (
        Company.objects.filter(name=company_name).first()
        or Company.objects.filter(name__iexact=company_name).order_by("id").first()
    )
    if company is None:
        company = Company.objects.create(name=company_name)
        logger.info(f"[documents] Entreprise '{company_name}' créée depuis un formulaire")
    return company


def _sync(doc: AgreementDocument, finished: bool) -> None:
    progress = sync_progress(doc.progress, doc.company, doc.STEP_CODE, finished)
    if progress != doc.progress:
        doc.progress = progress
        doc.save(update_fields=["progress", "updated_at"])


@transaction.atomic
def create_document(model: Type[AgreementDocument], data: Dict[str, Any], user=None) -> AgreementDocument:
    values = {field: data[field] for field in SCALAR_FIELDS if field in data}
    values["company"] = resolve_company(values.get("company"), values["company_name"])
    doc = model.objects.create(
        created_by=user if user is not None and user.is_authenticated else None,
        **values,
    )
    _sync(doc, bool(data.get("is_finish")))
    logger.info(f"[documents] {model.DOC_TYPE} {doc.pk} créé (company={doc.company_id})")
    return doc


@transaction.atomic
def update_document(doc: AgreementDocument, data: Dict[str, Any]) -> AgreementDocument:
    changed = [field for field in SCALAR_FIELDS if field in data]
    for field in changed:
        setattr(doc, field, data[field])
    if "company" in changed or "company_name" in changed:
        doc.company = resolve_company(data.get("company"), doc.company_name)
        if "company" not in changed:
            changed.append("company")
    if changed:
        doc.save(update_fields=changed + ["updated_at"])

    if "is_finish" in data:
        _sync(doc, bool(data["is_finish"]))
    logger.info(f"[documents] {doc.DOC_TYPE} {doc.pk} mis à jour")
    return doc


@transaction.atomic
def delete_document(doc: AgreementDocument) -> None:
    progress_id = doc.progress_id
    doc_id = doc.pk
    doc.delete()
    delete_progress(progress_id)
    logger.info(f"[documents] {doc.DOC_TYPE} {doc_id} supprimé")
