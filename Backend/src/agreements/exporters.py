"""
Export DOCX des documents JIK / NDA / MSA / MOU : titre, tableau de detail,
puis les sections Tiptap rendues avec le meme walker que la MOM.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Tuple

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from docgen import layout
from docgen.content import normalize_sections
from docgen.files import build_filename, to_bytes
from docgen.tiptap import BlockSink, TiptapRenderer

from .models import AgreementDocument

__all__ = ["format_amount", "format_years", "build_agreement_document", "render_agreement_docx"]

logger = logging.getLogger(__name__)

DETAIL_COLUMNS = (30, 70)
EMPTY_VALUE = "-"


def format_amount(value: Optional[Decimal]) -> str:
    if value is None:
        return EMPTY_VALUE
    return f"Rp {value:,.2f}".replace(",", " ")


def format_years(value: Optional[Decimal]) -> str:
    if value is None:
        return EMPTY_VALUE
    years = value.normalize()
    # 2E+1 -> 20
    text = f"{years:f}"
    return f"{text} {'year' if years == 1 else 'years'}"


def build_agreement_document(doc: AgreementDocument, renderer: Optional[TiptapRenderer] = None):
    renderer = renderer or TiptapRenderer()
    document = Document()
    section = document.sections[0]
    layout.set_page_margins(section)
    width = layout.usable_width(section)
    layout.add_page_number_footer(section)

    heading = document.add_paragraph(style="Title")
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
    heading.add_run(doc.DOC_TYPE)
    subtitle = document.add_paragraph(style="Heading 2")
    subtitle.alignment = WD_ALIGN_PARAGRAPH.CENTER
    subtitle.add_run(doc.title)

    rows = [
        ("Company Name", doc.company_name),
        (doc.TITLE_LABEL, doc.title),
        ("Unit Name", doc.unit_name),
        (doc.DESCRIPTION_LABEL, doc.description or EMPTY_VALUE),
        ("Invest Value", format_amount(doc.invest_value)),
        ("Contract Duration", format_years(doc.contract_duration_years)),
    ]
    table = document.add_table(rows=len(rows), cols=2)
    layout.set_table_full_width(table)
    layout.set_column_widths(table, DETAIL_COLUMNS, width)
    for row, (label, value) in zip(table.rows, rows):
        label_cell, value_cell = row.cells
        layout.style_cell(label_cell, shaded=True, center=True)
        layout.style_cell(value_cell, center=True)
        BlockSink(label_cell).add_paragraph().add_run(label).bold = True
        BlockSink(value_cell).add_paragraph().add_run(value or "")

    body = BlockSink(document)
    for item in normalize_sections(doc.sections, label_key="title"):
        layout.spacer(document, before_twips=200)
        document.add_paragraph(item["title"], style="Heading 3")
        renderer.render_doc(item["content"], body)

    return document


def render_agreement_docx(doc: AgreementDocument) -> Tuple[bytes, str]:
    document = build_agreement_document(doc)
    filename = build_filename(doc.DOC_TYPE, doc.title, doc.company_name, doc.DOC_TYPE)
    content = to_bytes(document)
    logger.info(f"[docx] {doc.DOC_TYPE} {doc.pk} exporté ({len(content)} octets) -> {filename}")
    return content, filename
