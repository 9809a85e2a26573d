"""
Rendu d'un document Tiptap (JSON) en blocs python-docx.

Un seul parcours recursif : paragraph, bulletList / orderedList, image,
table ; tout autre noeud devient un paragraphe de ses textes.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Callable, Dict, List, Optional

from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.table import _Cell

from . import layout
from .images import fetch_image, is_supported_image

__all__ = ["BlockSink", "TiptapRenderer", "IMAGE_WIDTH_PX", "IMAGE_HEIGHT_PX"]

logger = logging.getLogger(__name__)

IMAGE_WIDTH_PX = 450
IMAGE_HEIGHT_PX = 300

_LIST_STYLES = {"bulletList": "List Bullet", "orderedList": "List Number"}
_TABLE_ALIGNMENTS = {"center": WD_TABLE_ALIGNMENT.CENTER, "right": WD_TABLE_ALIGNMENT.RIGHT}

Node = Dict[str, Any]


class BlockSink:
    """
    Point d'insertion de blocs (Document, cellule, en-tete).
    Dans une cellule neuve, le paragraphe vide initial est reutilise.
    """

    def __init__(self, container):
        self.container = container
        self._reuse_first = _is_blank_cell(container)

    def add_paragraph(self, style: Optional[str] = None):
        if self._reuse_first:
            self._reuse_first = False
            paragraph = self.container.paragraphs[0]
            if style:
                paragraph.style = style
            return paragraph
        return self.container.add_paragraph(style=style)

    def add_table(self, rows: int, cols: int):
        self._reuse_first = False
        return self.container.add_table(rows, cols)


def _is_blank_cell(container) -> bool:
    if not isinstance(container, _Cell):
        return False
    paragraphs = container.paragraphs
    return len(paragraphs) == 1 and not container.tables and not paragraphs[0].runs


def _attrs(node: Node) -> Dict[str, Any]:
    attrs = node.get("attrs")
    return attrs if isinstance(attrs, dict) else {}


def _align(node: Node):
    attrs = _attrs(node)
    return layout.alignment(attrs.get("align") or attrs.get("textAlign"))


class TiptapRenderer:
    """Convertit un doc Tiptap en paragraphes / tableaux dans un BlockSink."""

    def __init__(self, image_loader: Callable[[str], Optional[bytes]] = fetch_image):
        self.image_loader = image_loader

    # ------------------------------------------------------------------ #
    def render_doc(self, doc: Optional[Node], sink: BlockSink) -> None:
        children = doc.get("content") if isinstance(doc, dict) else None
        if not isinstance(children, list) or not children:
            self._empty_paragraph(sink)
            return
        for node in children:
            self.render_node(node, sink)

    def render_node(self, node: Node, sink: BlockSink, is_header: bool = False) -> None:
        if not isinstance(node, dict):
            return
        kind = node.get("type")
        if kind == "paragraph":
            paragraph = sink.add_paragraph()
            paragraph.alignment = _align(node)
            self._add_runs(paragraph, node.get("content"), is_header)
        elif kind in _LIST_STYLES:
            self._render_list(node, sink, is_header)
        elif kind == "image":
            self._render_image(node, sink)
        elif kind == "table":
            self._render_table(node, sink)
        elif node.get("content"):
            paragraph = sink.add_paragraph()
            self._add_runs(paragraph, node.get("content"), is_header)
        else:
            self._empty_paragraph(sink)

    # ------------------------------------------------------------------ #
    def _empty_paragraph(self, sink: BlockSink) -> None:
        sink.add_paragraph().add_run("")

    def _add_runs(self, paragraph, children: Optional[List[Node]], is_header: bool = False) -> None:
        added = 0
        for child in children or []:
            if not isinstance(child, dict):
                continue
            if child.get("type") == "hardBreak":
                paragraph.add_run().add_break()
                added += 1
                continue
            if child.get("type") != "text" or not child.get("text"):
                continue
            marks = {m.get("type") for m in child.get("marks") or [] if isinstance(m, dict)}
            run = paragraph.add_run(child["text"])
            run.bold = True if (is_header or "bold" in marks) else None
            run.italic = True if "italic" in marks else None
            added += 1
        if not added:
            paragraph.add_run("")

    def _render_list(self, node: Node, sink: BlockSink, is_header: bool) -> None:
        style = _LIST_STYLES[node["type"]]
        for item in node.get("content") or []:
            if not isinstance(item, dict) or item.get("type") != "listItem":
                continue
            for block in item.get("content") or []:
                if isinstance(block, dict) and block.get("type") == "paragraph":
                    paragraph = sink.add_paragraph(style=style)
                    paragraph.alignment = _align(block)
                    self._add_runs(paragraph, block.get("content"), is_header)

    def _render_image(self, node: Node, sink: BlockSink) -> None:
        src = _attrs(node).get("src")
        if not src:
            return
        data = self.image_loader(src)
        if not is_supported_image(data):
            return
        paragraph = sink.add_paragraph()
        paragraph.alignment = _align(node)
        paragraph.add_run().add_picture(
            io.BytesIO(data), width=layout.px(IMAGE_WIDTH_PX), height=layout.px(IMAGE_HEIGHT_PX)
        )

    def _render_table(self, node: Node, sink: BlockSink) -> None:
        rows = [
            r for r in node.get("content") or []
            if isinstance(r, dict) and r.get("type") == "tableRow"
        ]
        grid = [
            [c for c in row.get("content") or [] if isinstance(c, dict) and c.get("type") in ("tableCell", "tableHeader")]
            for row in rows
        ]
        cols = max((len(cells) for cells in grid), default=0)
        if not cols:
            return

        table = sink.add_table(len(grid), cols)
        layout.set_table_full_width(table)
        table.alignment = _TABLE_ALIGNMENTS.get(_attrs(node).get("align"), WD_TABLE_ALIGNMENT.LEFT)

        for r_idx, cells in enumerate(grid):
            row = table.rows[r_idx]
            for c_idx in range(cols):
                cell = row.cells[c_idx]
                cell_node = cells[c_idx] if c_idx < len(cells) else None
                is_header = bool(cell_node and cell_node.get("type") == "tableHeader")
                layout.style_cell(cell, shaded=is_header, center=True)
                cell_sink = BlockSink(cell)
                for child in (cell_node or {}).get("content") or []:
                    self.render_node(child, cell_sink, is_header=is_header)
