"""
Helpers de mise en page DOCX (python-docx) : bordures, trames, marges de
cellule, largeurs de tableau, champs de numerotation de page.

python-docx n'expose pas ces proprietes : on ecrit directement l'OOXML en
respectant l'ordre des enfants de w:tcPr / w:tblPr.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from docx.enum.table import WD_CELL_VERTICAL_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Emu, Length, Twips

THIN = {"val": "single", "sz": "6", "space": "0", "color": "000000"}
NO_BORDER = {"val": "nil"}
HEADER_FILL = "D9D9D9"
CELL_MARGIN_TWIPS = 100
PAGE_MARGIN_TWIPS = 1440
EMU_PER_PX = 9525

# successeurs de w:tcBorders / w:shd / w:tcMar dans w:tcPr (CT_TcPr)
_TCPR_AFTER_BORDERS = (
    "w:shd", "w:noWrap", "w:tcMar", "w:textDirection", "w:tcFitText", "w:vAlign",
    "w:hideMark", "w:headers", "w:cellIns", "w:cellDel", "w:cellMerge", "w:tcPrChange",
)
_TCPR_AFTER_SHD = _TCPR_AFTER_BORDERS[1:]
_TCPR_AFTER_MAR = _TCPR_AFTER_BORDERS[3:]
_TBLPR_AFTER_TBLW = (
    "w:jc", "w:tblCellSpacing", "w:tblInd", "w:tblBorders", "w:shd", "w:tblLayout",
    "w:tblCellMar", "w:tblLook", "w:tblCaption", "w:tblDescription", "w:tblPrChange",
)

_ALIGNMENTS = {
    "center": WD_ALIGN_PARAGRAPH.CENTER,
    "right": WD_ALIGN_PARAGRAPH.RIGHT,
    "justify": WD_ALIGN_PARAGRAPH.JUSTIFY,
}


def px(value: int) -> Length:
    """Pixels (96 dpi) -> longueur DOCX."""
    return Emu(int(value) * EMU_PER_PX)


def alignment(value: Optional[str]):
    """left / center / right (attrs Tiptap) -> WD_ALIGN_PARAGRAPH, gauche par defaut."""
    return _ALIGNMENTS.get((value or "").lower(), WD_ALIGN_PARAGRAPH.LEFT)


def _replace_child(parent, tag: str, successors: Sequence[str]):
    existing = parent.find(qn(tag))
    if existing is not None:
        parent.remove(existing)
    element = OxmlElement(tag)
    parent.insert_element_before(element, *successors)
    return element


def set_cell_borders(cell, top=THIN, left=THIN, bottom=THIN, right=THIN) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    borders = _replace_child(tc_pr, "w:tcBorders", _TCPR_AFTER_BORDERS)
    for edge, border in (("top", top), ("left", left), ("bottom", bottom), ("right", right)):
        element = OxmlElement(f"w:{edge}")
        for key, value in border.items():
            element.set(qn(f"w:{key}"), value)
        borders.append(element)


def shade_cell(cell, fill: str = HEADER_FILL) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    shd = _replace_child(tc_pr, "w:shd", _TCPR_AFTER_SHD)
    shd.set(qn("w:val"), "solid")
    shd.set(qn("w:color"), fill)
    shd.set(qn("w:fill"), fill)


def set_cell_margins(cell, twips: int = CELL_MARGIN_TWIPS) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    mar = _replace_child(tc_pr, "w:tcMar", _TCPR_AFTER_MAR)
    for edge in ("top", "left", "bottom", "right"):
        element = OxmlElement(f"w:{edge}")
        element.set(qn("w:w"), str(twips))
        element.set(qn("w:type"), "dxa")
        mar.append(element)


def style_cell(
    cell,
    *,
    top=THIN,
    left=THIN,
    bottom=THIN,
    right=THIN,
    shaded: bool = False,
    margins: bool = True,
    center: bool = False,
) -> None:
    """Bordures + trame + marges + alignement vertical en un appel."""
    set_cell_borders(cell, top=top, left=left, bottom=bottom, right=right)
    if shaded:
        shade_cell(cell)
    if margins:
        set_cell_margins(cell)
    if center:
        cell.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.CENTER


def set_table_full_width(table) -> None:
    """Tableau a 100 % de la largeur disponible."""
    tbl_pr = table._tbl.tblPr
    tbl_w = tbl_pr.find(qn("w:tblW"))
    if tbl_w is None:
        tbl_w = OxmlElement("w:tblW")
        tbl_pr.insert_element_before(tbl_w, *_TBLPR_AFTER_TBLW)
    tbl_w.set(qn("w:type"), "pct")
    tbl_w.set(qn("w:w"), "5000")


def set_column_widths(table, percentages: Iterable[float], total: Length) -> None:
    """Largeurs de colonnes en pourcentage de `total` (a appeler avant les fusions)."""
    widths = [Twips(int(total.twips * pct / 100)) for pct in percentages]
    for idx, width in enumerate(widths):
        table.columns[idx].width = width
        for cell in table.columns[idx].cells:
            cell.width = width


def usable_width(section) -> Length:
    return Emu(section.page_width - section.left_margin - section.right_margin)


def set_page_margins(section, twips: int = PAGE_MARGIN_TWIPS) -> None:
    margin = Twips(twips)
    section.top_margin = margin
    section.bottom_margin = margin
    section.left_margin = margin
    section.right_margin = margin


def add_field(paragraph, code: str, italic: bool = False) -> None:
    """Insere un champ Word (PAGE, NUMPAGES...) sous forme de fldChar."""
    begin = paragraph.add_run()
    fld_begin = OxmlElement("w:fldChar")
    fld_begin.set(qn("w:fldCharType"), "begin")
    begin._r.append(fld_begin)

    instr = paragraph.add_run()
    instr_text = OxmlElement("w:instrText")
    instr_text.text = f" {code} "
    instr._r.append(instr_text)

    sep = paragraph.add_run()
    fld_sep = OxmlElement("w:fldChar")
    fld_sep.set(qn("w:fldCharType"), "separate")
    sep._r.append(fld_sep)

    placeholder = paragraph.add_run("1")

    end = paragraph.add_run()
    fld_end = OxmlElement("w:fldChar")
    fld_end.set(qn("w:fldCharType"), "end")
    end._r.append(fld_end)

    for run in (begin, instr, sep, placeholder, end):
        run.italic = italic or None


def add_page_number_footer(section) -> None:
    """Pied de page aligne a droite : "Page X of Y" en italique."""
    footer = section.footer
    paragraph = footer.paragraphs[0] if footer.paragraphs else footer.add_paragraph()
    paragraph.alignment = WD_ALIGN_PARAGRAPH.RIGHT
    paragraph.add_run("Page ").italic = True
    add_field(paragraph, "PAGE", italic=True)
    paragraph.add_run(" of ").italic = True
    add_field(paragraph, "NUMPAGES", italic=True)


def spacer(container, before_twips: int = 0, after_twips: int = 0):
    paragraph = container.add_paragraph()
    if before_twips:
        paragraph.paragraph_format.space_before = Twips(before_twips)
    if after_twips:
        paragraph.paragraph_format.space_after = Twips(after_twips)
    return paragraph
