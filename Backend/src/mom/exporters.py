"""
Export DOCX d'une MOM (python-docx).

Mise en page :
    en-tete  : logo interne | MINUTE OF MEETING | logo mitra, puis Date/Time/Venue
    corps    : Attendees, Result, Description, sections, Next Action
    ensuite  : bloc "Disetujui Oleh:" (approvers groupes par entreprise)
    enfin    : Lampiran (pieces jointes)
    pied     : Page X of Y
"""

from __future__ import annotations

import io
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from django.conf import settings
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Twips

from docgen import layout
from docgen.content import normalize_sections
from docgen.files import build_filename, to_bytes
from docgen.images import fetch_image, gather, is_supported_image, read_default_logo
from docgen.tiptap import IMAGE_HEIGHT_PX, IMAGE_WIDTH_PX, BlockSink, TiptapRenderer

from .models import Approver, Mom

__all__ = ["group_approvers", "build_mom_document", "render_mom_docx"]

logger = logging.getLogger(__name__)

LOGO_WIDTH_PX = 120
LOGO_HEIGHT_PX = 60
NO_ATTENDEES = "(Tidak ada data peserta)"
EXTERNAL_FALLBACK = "Eksternal"

HEADER_COLUMNS = (25, 50, 25)
MAIN_COLUMNS = (15, 85)
NEXT_ACTION_COLUMNS_TWIPS = (1000, 4000, 2500, 2500)


def group_approvers(
    approvers: Sequence[Approver], company_name: str, internal_name: str
) -> List[Tuple[str, List[str]]]:
    """
    [(entreprise, [noms])] : les Internal sous le nom interne, les autres sous
    le nom de l'entreprise de la MOM. Interne en premier, puis ordre alphabetique.
    """
    groups: Dict[str, List[str]] = {}
    for approver in approvers:
        if approver.type == Approver.TYPE_INTERNAL:
            key = internal_name
        else:
            key = company_name or EXTERNAL_FALLBACK
        groups.setdefault(key, []).append(approver.name)

    def sort_key(name: str):
        return (0 if name == internal_name else 1, name.casefold())

    return [(name, groups[name]) for name in sorted(groups, key=sort_key)]


def _bold_paragraph(sink: BlockSink, text: str, center: bool = False, before: int = 0, after: int = 0):
    paragraph = sink.add_paragraph()
    if center:
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    if before:
        paragraph.paragraph_format.space_before = Twips(before)
    if after:
        paragraph.paragraph_format.space_after = Twips(after)
    paragraph.add_run(text).bold = True
    return paragraph


def _logo_paragraph(cell, data: Optional[bytes], fallback: str) -> None:
    paragraph = BlockSink(cell).add_paragraph()
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    if is_supported_image(data):
        paragraph.add_run().add_picture(
            io.BytesIO(data), width=layout.px(LOGO_WIDTH_PX), height=layout.px(LOGO_HEIGHT_PX)
        )
    else:
        paragraph.add_run(fallback)


class MomDocxBuilder:
    def __init__(self, mom: Mom, renderer: Optional[TiptapRenderer] = None):
        self.mom = mom
        self.company_name = mom.company.name if mom.company_id else ""
        self.internal_name = settings.MOM_INTERNAL_COMPANY_NAME
        self.renderer = renderer or TiptapRenderer()
        self.document = Document()
        self.section = self.document.sections[0]
        layout.set_page_margins(self.section)
        self.width = layout.usable_width(self.section)

    # ------------------------------------------------------------------ #
    def build(self):
        partner_url = self.mom.company.logo_mitra_url if self.mom.company_id else ""
        internal_logo, partner_logo = gather(read_default_logo, lambda: fetch_image(partner_url))

        self._header(internal_logo, partner_logo)
        layout.add_page_number_footer(self.section)
        self._main_table()
        self._approvers()
        self._attachments()
        return self.document

    # ------------------------------------------------------------------ #
    def _header(self, internal_logo: Optional[bytes], partner_logo: Optional[bytes]) -> None:
        header = self.section.header
        table = header.add_table(2, 3, self.width)
        layout.set_table_full_width(table)
        layout.set_column_widths(table, HEADER_COLUMNS, self.width)

        top, bottom = table.rows[0].cells, table.rows[1].cells
        for cell in top:
            layout.style_cell(cell, bottom=layout.NO_BORDER, center=True)
        for cell in bottom:
            layout.style_cell(cell, top=layout.NO_BORDER, center=True)
        layout.set_cell_borders(top[1])
        layout.set_cell_borders(bottom[1])

        left = top[0].merge(bottom[0])
        right = top[2].merge(bottom[2])
        _logo_paragraph(left, internal_logo, "Logo T-Sat")
        _logo_paragraph(right, partner_logo, "Logo Mitra")

        title_sink = BlockSink(top[1])
        title = title_sink.add_paragraph(style="Heading 5")
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        title.add_run("MINUTE OF MEETING")
        subtitle = title_sink.add_paragraph()
        subtitle.alignment = WD_ALIGN_PARAGRAPH.CENTER
        subtitle.add_run(f"Joint Planning Session {self.internal_name} & {self.company_name}")

        mom = self.mom
        date_text = mom.date.strftime(settings.DOCX_DATE_FORMAT) if mom.date else ""
        info_sink = BlockSink(bottom[1])
        for label, value in (("Date", date_text), ("Time", mom.time), ("Venue", mom.venue)):
            info_sink.add_paragraph().add_run(f"{label}\t: {value or ''}")

        # le tableau doit preceder le paragraphe vide par defaut de l'en-tete
        if header.paragraphs:
            header.paragraphs[0]._p.addprevious(table._tbl)

    def _main_table(self) -> None:
        mom = self.mom
        sections = normalize_sections(mom.content, label_key="label")
        next_actions = list(mom.next_actions.all())

        table = self.document.add_table(rows=5 + len(sections), cols=2)
        layout.set_table_full_width(table)
        layout.set_column_widths(table, MAIN_COLUMNS, self.width)
        rows = iter(table.rows)

        # Attendees
        label_cell, value_cell = next(rows).cells
        layout.style_cell(label_cell, center=True)
        layout.style_cell(value_cell, left=layout.NO_BORDER)
        _bold_paragraph(BlockSink(label_cell), "Attendees", center=True)
        BlockSink(value_cell).add_paragraph().add_run(mom.count_attendees or NO_ATTENDEES)

        # Result
        cell = self._merged(next(rows))
        layout.style_cell(cell, top=layout.NO_BORDER, center=True)
        _bold_paragraph(BlockSink(cell), "Result", center=True)

        # Description
        cell = self._merged(next(rows))
        layout.style_cell(cell, shaded=True, center=True)
        _bold_paragraph(BlockSink(cell), "Description", center=True)

        for section in sections:
            cell = self._merged(next(rows))
            layout.style_cell(cell, top=layout.NO_BORDER, bottom=layout.NO_BORDER)
            sink = BlockSink(cell)
            _bold_paragraph(sink, section["label"], after=100)
            self.renderer.render_doc(section["content"], sink)

        cell = self._merged(next(rows))
        layout.style_cell(cell, top=layout.NO_BORDER, bottom=layout.NO_BORDER)
        _bold_paragraph(BlockSink(cell), "Next Action")

        cell = self._merged(next(rows))
        layout.style_cell(cell, top=layout.NO_BORDER)
        self._next_action_table(BlockSink(cell), next_actions)

    def _merged(self, row):
        return row.cells[0].merge(row.cells[1])

    def _next_action_table(self, sink: BlockSink, next_actions) -> None:
        table = sink.add_table(1 + len(next_actions), 4)
        layout.set_table_full_width(table)
        widths = [Twips(w) for w in NEXT_ACTION_COLUMNS_TWIPS]
        for idx, width in enumerate(widths):
            table.columns[idx].width = width
            for cell in table.columns[idx].cells:
                cell.width = width

        values = [("No", "Action", "Due Date", "UIC")]
        values += [(str(i), n.action, n.target, n.pic) for i, n in enumerate(next_actions, start=1)]
        for row, texts in zip(table.rows, values):
            for cell, text in zip(row.cells, texts):
                layout.style_cell(cell)
                BlockSink(cell).add_paragraph().add_run(text or "")

    def _approvers(self) -> None:
        groups = group_approvers(list(self.mom.approvers.all()), self.company_name, self.internal_name)
        if not groups:
            return

        body = BlockSink(self.document)
        _bold_paragraph(body, "Disetujui Oleh:", center=True, before=200, after=200)

        total = sum(len(names) for _, names in groups)
        table = self.document.add_table(rows=3, cols=total)
        layout.set_table_full_width(table)
        layout.set_column_widths(table, [100 / total] * total, self.width)
        for row in table.rows:
            for cell in row.cells:
                layout.style_cell(cell, center=True)

        header_row, sign_row, name_row = table.rows
        start = 0
        for company, names in groups:
            end = start + len(names) - 1
            head = header_row.cells[start]
            if end > start:
                head = head.merge(header_row.cells[end])
            _bold_paragraph(BlockSink(head), company, center=True)
            for offset, name in enumerate(names):
                sign = BlockSink(sign_row.cells[start + offset]).add_paragraph()
                sign.paragraph_format.space_before = Twips(800)
                sign.paragraph_format.space_after = Twips(800)
                label = BlockSink(name_row.cells[start + offset]).add_paragraph()
                label.alignment = WD_ALIGN_PARAGRAPH.CENTER
                label.add_run(name)
            start = end + 1

    def _attachments(self) -> None:
        sections = list(self.mom.attachments.all())
        if not sections:
            return

        layout.spacer(self.document, before_twips=400)
        table = self.document.add_table(rows=1, cols=1)
        layout.set_table_full_width(table)
        cell = table.rows[0].cells[0]
        layout.style_cell(cell)
        sink = BlockSink(cell)
        _bold_paragraph(sink, "Lampiran", before=200, after=100)

        for idx, section in enumerate(sections, start=1):
            _bold_paragraph(sink, f"{idx}. {section.section_name}", before=100, after=100)
            for attachment in section.files.all():
                data = self.renderer.image_loader(attachment.url)
                if is_supported_image(data):
                    paragraph = sink.add_paragraph()
                    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
                    paragraph.paragraph_format.space_after = Twips(100)
                    paragraph.add_run().add_picture(
                        io.BytesIO(data),
                        width=layout.px(IMAGE_WIDTH_PX),
                        height=layout.px(IMAGE_HEIGHT_PX),
                    )
                else:
                    # fichier non image (pdf, xlsx...) : on cite son nom
                    sink.add_paragraph().add_run(f"- {attachment.name or attachment.url}")


def build_mom_document(mom: Mom, renderer: Optional[TiptapRenderer] = None):
    return MomDocxBuilder(mom, renderer=renderer).build()


def render_mom_docx(mom: Mom) -> Tuple[bytes, str]:
    """Octets du DOCX et nom de fichier MOM-<titre>-<entreprise>.docx."""
    document = build_mom_document(mom)
    company = mom.company.name if mom.company_id else ""
    filename = build_filename("MOM", mom.title, company, "MOM")
    content = to_bytes(document)
    logger.info(f"[docx] MOM {mom.pk} exporté ({len(content)} octets) -> {filename}")
    return content, filename
