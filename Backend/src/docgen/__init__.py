"""Briques communes de generation DOCX (MOM, JIK, NDA, MSA, MOU)."""

from .content import (
    DEFAULT_MOM_SECTION_TITLES,
    EMPTY_DOC,
    ContentError,
    default_sections,
    empty_doc,
    normalize_sections,
)
from .files import DOCX_MIME, build_filename, docx_response, to_bytes
from .tiptap import BlockSink, TiptapRenderer

__all__ = [
    "DEFAULT_MOM_SECTION_TITLES",
    "EMPTY_DOC",
    "ContentError",
    "default_sections",
    "empty_doc",
    "normalize_sections",
    "DOCX_MIME",
    "build_filename",
    "docx_response",
    "to_bytes",
    "BlockSink",
    "TiptapRenderer",
]
