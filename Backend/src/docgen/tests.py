import base64
import io
from unittest import mock

import pytest
from django.core.files.storage import default_storage
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from requests.exceptions import ConnectTimeout

from docgen import layout
from docgen.content import ContentError, default_sections, normalize_sections
from docgen.files import build_filename
from docgen.images import fetch_image, gather, is_supported_image
from docgen.tiptap import BlockSink, TiptapRenderer


def _text(text, *marks):
    node = {"type": "text", "text": text}
    if marks:
        node["marks"] = [{"type": m} for m in marks]
    return node


def _render(content, loader=lambda url: None):
    document = Document()
    TiptapRenderer(image_loader=loader).render_doc({"type": "doc", "content": content}, BlockSink(document))
    return document


# ---------------------------------------------------------------------------
# Walker Tiptap
# ---------------------------------------------------------------------------

def test_paragraph_marks_alignment_and_breaks():
    document = _render(
        [
            {
                "type": "paragraph",
                "attrs": {"textAlign": "center"},
                "content": [_text("Gras", "bold"), _text(" et "), _text("italique", "italic"), {"type": "hardBreak"}],
            },
            {"type": "paragraph", "attrs": {"align": "right"}, "content": [_text("droite")]},
        ]
    )
    first, second = document.paragraphs
    assert first.alignment == WD_ALIGN_PARAGRAPH.CENTER
    assert first.runs[0].bold is True
    assert first.runs[1].bold is None
    assert first.runs[2].italic is True
    assert first._p.xpath(".//w:br")
    assert second.alignment == WD_ALIGN_PARAGRAPH.RIGHT
    assert second.text == "droite"


def test_lists_use_bullet_and_number_styles():
    item = lambda text: {"type": "listItem", "content": [{"type": "paragraph", "content": [_text(text)]}]}
    document = _render(
        [
            {"type": "bulletList", "content": [item("a"), item("b")]},
            {"type": "orderedList", "content": [item("un")]},
        ]
    )
    assert [(p.text, p.style.name) for p in document.paragraphs] == [
        ("a", "List Bullet"),
        ("b", "List Bullet"),
        ("un", "List Number"),
    ]


def test_empty_doc_and_unknown_nodes_give_paragraphs():
    document = _render([])
    assert len(document.paragraphs) == 1
    assert document.paragraphs[0].text == ""

    document = _render([{"type": "blockquote", "content": [_text("cite")]}, {"type": "horizontalRule"}])
    assert [p.text for p in document.paragraphs] == ["cite", ""]


def test_table_header_cells_are_bold_and_shaded():
    document = _render(
        [
            {
                "type": "table",
                "content": [
                    {
                        "type": "tableRow",
                        "content": [
                            {"type": "tableHeader", "content": [{"type": "paragraph", "content": [_text("Nama")]}]},
                            {"type": "tableHeader", "content": [{"type": "paragraph", "content": [_text("Peran")]}]},
                        ],
                    },
                    {
                        "type": "tableRow",
                        "content": [
                            {"type": "tableCell", "content": [{"type": "paragraph", "content": [_text("Budi")]}]},
                        ],
                    },
                ],
            }
        ]
    )
    table = document.tables[0]
    assert len(table.rows) == 2 and len(table.columns) == 2
    header = table.rows[0].cells[0]
    assert header.text == "Nama"
    assert header.paragraphs[0].runs[0].bold is True
    assert header._tc.tcPr.find(qn("w:shd")).get(qn("w:fill")) == layout.HEADER_FILL
    body = table.rows[1].cells[0]
    assert body.text == "Budi"
    assert body._tc.tcPr.find(qn("w:shd")) is None
    # cellule manquante completee a vide
    assert table.rows[1].cells[1].text == ""
    assert table._tbl.tblPr.find(qn("w:tblW")).get(qn("w:type")) == "pct"


def test_images_are_embedded_or_skipped(png_bytes):
    loader = mock.Mock(side_effect=lambda url: png_bytes if url.endswith("ok.png") else None)
    document = _render(
        [
            {"type": "image", "attrs": {"src": "https://cdn.example.com/ok.png"}},
            {"type": "image", "attrs": {"src": "https://cdn.example.com/down.png"}},
            {"type": "image", "attrs": {}},
        ],
        loader=loader,
    )
    assert len(document.inline_shapes) == 1
    assert document.inline_shapes[0].width == layout.px(450)
    assert loader.call_count == 2


def test_block_sink_reuses_blank_cell_paragraph():
    document = Document()
    cell = document.add_table(rows=1, cols=1).rows[0].cells[0]
    sink = BlockSink(cell)
    sink.add_paragraph().add_run("premier")
    sink.add_paragraph().add_run("second")
    assert [p.text for p in cell.paragraphs] == ["premier", "second"]


# ---------------------------------------------------------------------------
# Contenu
# ---------------------------------------------------------------------------

def test_normalize_sections():
    sections = normalize_sections(
        [
            {"title": "  Latar Belakang ", "content": '{"type": "doc", "content": []}'},
            {"label": "Key Point", "content": None},
        ]
    )
    assert sections[0] == {"label": "Latar Belakang", "content": {"type": "doc", "content": []}}
    assert sections[1]["content"] == {"type": "doc", "content": [{"type": "paragraph"}]}
    assert normalize_sections(None) == []

    with pytest.raises(ContentError):
        normalize_sections({"label": "x"})
    with pytest.raises(ContentError):
        normalize_sections([{"label": "x", "content": "{pas du json"}])
    with pytest.raises(ContentError):
        normalize_sections([{"label": "x", "content": {"type": "doc", "content": "texte"}}])


def test_default_sections_are_independent_copies():
    first, second = default_sections(), default_sections()
    first[0]["content"]["content"].append({"type": "paragraph"})
    assert second[0]["content"] == {"type": "doc", "content": [{"type": "paragraph"}]}
    assert [s["title"] for s in default_sections(("A",), label_key="title")] == ["A"]


def test_build_filename():
    assert build_filename("MOM", 'Rapat: "Q1"', "PT A/B", "MOM") == "MOM-Rapat_ _Q1_-PT A_B.docx"
    assert build_filename("MOM", "   ", "", "MOM") == "MOM-MOM-Generated.docx"


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------

def test_fetch_image_data_url(png_bytes):
    url = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
    assert fetch_image(url) == png_bytes
    assert fetch_image("data:image/png;base64,@@@") is None


def test_fetch_image_reads_media_from_storage(png_bytes):
    path = default_storage.save("attachments/2025/01/logo.png", io.BytesIO(png_bytes))
    with mock.patch("docgen.images.requests.get") as get:
        assert fetch_image(f"http://testserver/media/{path}") == png_bytes
    get.assert_not_called()


def test_fetch_image_http_errors_return_none(png_bytes):
    with mock.patch("docgen.images.requests.get", side_effect=ConnectTimeout("timeout")):
        assert fetch_image("https://cdn.example.com/a.png") is None
    with mock.patch("docgen.images.requests.get", return_value=mock.Mock(status_code=500, content=b"")):
        assert fetch_image("https://cdn.example.com/a.png") is None
    with mock.patch("docgen.images.requests.get", return_value=mock.Mock(status_code=200, content=png_bytes)) as get:
        assert fetch_image("https://cdn.example.com/a.png", timeout=3) == png_bytes
    get.assert_called_once_with("https://cdn.example.com/a.png", timeout=3)


def test_is_supported_image(png_bytes):
    assert is_supported_image(png_bytes)
    assert not is_supported_image(b"<svg></svg>")
    assert not is_supported_image(None)


def test_gather_keeps_order():
    assert gather(lambda: b"a", lambda: None, lambda: b"c") == [b"a", None, b"c"]
    assert gather() == []
