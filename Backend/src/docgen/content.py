"""
Sections de contenu riche (documents Tiptap / ProseMirror JSON) :
valeurs par defaut et normalisation avant stockage.
"""

from __future__ import annotations

import copy
import json
from typing import Any, Dict, Iterable, List

EMPTY_DOC: Dict[str, Any] = {"type": "doc", "content": [{"type": "paragraph"}]}

DEFAULT_MOM_SECTION_TITLES = (
    "Latar Belakang",
    "Key Point",
    "Ruang lingkup dan deskripsi inisiatif Kerja Sama",
    "Hak & Kewajiban",
)

_MAX_DEPTH = 40


class ContentError(ValueError):
    """Contenu de section invalide."""


def empty_doc() -> Dict[str, Any]:
    return copy.deepcopy(EMPTY_DOC)


def default_sections(titles: Iterable[str] = DEFAULT_MOM_SECTION_TITLES, label_key: str = "label") -> List[dict]:
    return [{label_key: title, "content": empty_doc()} for title in titles]


def validate_node(node: Any, depth: int = 0) -> None:
    if depth > _MAX_DEPTH:
        raise ContentError("Contenu trop profondément imbriqué.")
    if not isinstance(node, dict):
        raise ContentError("Chaque nœud doit être un objet.")
    if not isinstance(node.get("type"), str) or not node["type"]:
        raise ContentError("Chaque nœud doit avoir un champ 'type'.")
    if "text" in node and not isinstance(node["text"], str):
        raise ContentError("Le champ 'text' doit être une chaîne.")
    children = node.get("content")
    if children is None:
        return
    if not isinstance(children, list):
        raise ContentError("Le champ 'content' doit être une liste.")
    for child in children:
        validate_node(child, depth + 1)


def _coerce_doc(raw: Any) -> Dict[str, Any]:
    if raw in (None, ""):
        return empty_doc()
    if isinstance(raw, str):
        # le front peut envoyer le JSON Tiptap deja serialise
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ContentError(f"Contenu JSON invalide: {e.msg}") from e
    validate_node(raw)
    return raw


def normalize_sections(raw: Any, label_key: str = "label") -> List[dict]:
    """
    Valide une liste de sections et la renvoie sous la forme
    [{label_key: str, "content": <doc Tiptap>}].
    Accepte "label" ou "title" en entree.
    """
    if raw in (None, ""):
        return []
    if not isinstance(raw, list):
        raise ContentError("Les sections doivent être une liste.")

    sections = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ContentError(f"Section {idx + 1}: objet attendu.")
        label = item.get(label_key)
        if label is None:
            label = item.get("title", item.get("label", ""))
        if not isinstance(label, str):
            raise ContentError(f"Section {idx + 1}: titre invalide.")
        try:
            content = _coerce_doc(item.get("content"))
        except ContentError as e:
            raise ContentError(f"Section {idx + 1}: {e}") from e
        sections.append({label_key: label.strip(), "content": content})
    return sections
