import io
from unittest import mock

import pytest
from django.core.files.storage import default_storage
from django.urls import reverse
from docx import Document
from rest_framework.test import APIClient

from docgen.files import DOCX_MIME
from mom.exporters import group_approvers
from mom.models import Approver, Mom
from progress.models import Progress


def _payload(company, **overrides):
    data = {
        "companyId": company.pk,
        "judul": "Rapat/Awal",
        "tanggalMom": "2025-03-14T00:00:00.000Z",
        "peserta": "Budi, Sari, Andi",
        "venue": "Ruang Rapat 2",
        "waktu": "09:00 - 11:00",
        "content": [
            {
                "label": "Latar Belakang",
                "content": {
                    "type": "doc",
                    "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Kerja sama satelit"}]}],
                },
            },
            {"label": "Key Point", "content": ""},
        ],
        "approvers": [
            {"name": "Direktur Bisnis", "email": "dir@telkomsat.co.id", "type": "Internal"},
            {"name": "Direktur Mitra", "email": "", "type": "External"},
            {"name": "   ", "email": "", "type": "Internal"},
        ],
        "nextActions": [
            {"action": "Kirim draft NDA", "target": "Minggu depan", "pic": "Legal"},
            {"action": "", "target": " ", "pic": ""},
        ],
        "attachments": [
            {"sectionName": "Foto", "files": [{"name": "foto.png", "url": "/media/attachments/foto.png"}]},
            {"sectionName": "", "files": []},
        ],
        "is_finish": 1,
    }
    data.update(overrides)
    return data


def _png_response(png_bytes):
    return mock.Mock(status_code=200, content=png_bytes)


@pytest.mark.django_db
def test_mom_create_list_update_delete(company):
    client = APIClient()

    r = client.post(reverse("mom-list"), _payload(company), format="json")
    assert r.status_code == 201, r.content
    data = r.data["data"]
    mom_id = data["id"]
    assert r.data["message"]
    assert data["title"] == "Rapat/Awal"
    assert data["date"] == "2025-03-14"
    assert [a["name"] for a in data["approvers"]] == ["Direktur Bisnis", "Direktur Mitra"]
    assert len(data["next_actions"]) == 1
    assert len(data["attachments"]) == 1
    assert data["attachments"][0]["files"][0]["name"] == "foto.png"
    # contenu vide normalise en doc Tiptap vide
    assert data["content"][1]["content"] == {"type": "doc", "content": [{"type": "paragraph"}]}
    assert data["status_label"] == "Completed"
    assert data["progress"]["step"]["code"] == "mom"

    r = client.get(reverse("mom-list"), {"q": "sejahtera"})
    assert r.status_code == 200
    assert [m["id"] for m in r.data] == [mom_id]
    r = client.get(reverse("mom-list"), {"q": "inconnu"})
    assert r.data == []

    # update : brouillon, approvers remplaces, pieces jointes conservees (cle absente)
    update = _payload(company, judul="Rapat Lanjutan", is_finish=0, approvers=[{"name": "Manajer"}])
    update.pop("attachments")
    r = client.put(reverse("mom-detail", args=[mom_id]), update, format="json")
    assert r.status_code == 200, r.content
    data = r.data["data"]
    assert data["title"] == "Rapat Lanjutan"
    assert data["status_label"] == "Draft"
    assert [(a["name"], a["type"]) for a in data["approvers"]] == [("Manajer", "Internal")]
    assert len(data["attachments"]) == 1

    # update avec attachments vide : sections supprimees
    r = client.patch(reverse("mom-detail", args=[mom_id]), {"attachments": []}, format="json")
    assert r.status_code == 200
    assert r.data["data"]["attachments"] == []
    assert r.data["data"]["title"] == "Rapat Lanjutan"

    progress_id = Mom.objects.get(pk=mom_id).progress_id
    r = client.delete(reverse("mom-detail", args=[mom_id]))
    assert r.status_code == 200
    assert r.data["message"]
    assert not Mom.objects.filter(pk=mom_id).exists()
    assert not Progress.objects.filter(pk=progress_id).exists()
    assert not Approver.objects.exists()


@pytest.mark.django_db
def test_mom_draft_creates_no_progress(company):
    r = APIClient().post(reverse("mom-list"), _payload(company, is_finish=0), format="json")
    assert r.status_code == 201
    assert r.data["data"]["progress"] is None
    assert r.data["data"]["status_label"] == "Draft"
    assert Progress.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize("field", ["companyId", "judul", "tanggalMom", "peserta", "venue", "waktu"])
def test_mom_required_fields(company, field):
    payload = _payload(company)
    payload[field] = ""
    r = APIClient().post(reverse("mom-list"), payload, format="json")
    assert r.status_code == 400
    assert field in r.data["error"]["detail"]
    assert not Mom.objects.exists()


@pytest.mark.django_db
def test_mom_rejects_malformed_content(company):
    r = APIClient().post(
        reverse("mom-list"), _payload(company, content=[{"label": "X", "content": {"content": []}}]), format="json"
    )
    assert r.status_code == 400
    assert "content" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_mom_approver_email_checked_only_on_named_rows(company):
    client = APIClient()
    approvers = [{"name": "Direktur Bisnis", "email": "dir@telkomsat.co.id"}, {"name": "", "email": "-"}]
    r = client.post(reverse("mom-list"), _payload(company, approvers=approvers), format="json")
    assert r.status_code == 201, r.content
    assert [a["name"] for a in r.data["data"]["approvers"]] == ["Direktur Bisnis"]

    r = client.post(
        reverse("mom-list"), _payload(company, approvers=[{"name": "Manajer", "email": "-"}]), format="json"
    )
    assert r.status_code == 400
    assert "approvers" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_mom_invalid_and_unknown_ids():
    client = APIClient()
    for raw in ("abc", "²"):
        r = client.get(reverse("mom-detail", args=[raw]))
        assert r.status_code == 400, raw
        assert r.data["error"]["code"] == "invalid_id"

    r = client.get(reverse("mom-detail", args=[4242]))
    assert r.status_code == 404


@pytest.mark.django_db
def test_default_sections():
    r = APIClient().get(reverse("mom-sections-defaults"))
    assert r.status_code == 200
    assert [s["label"] for s in r.data] == [
        "Latar Belakang",
        "Key Point",
        "Ruang lingkup dan deskripsi inisiatif Kerja Sama",
        "Hak & Kewajiban",
    ]
    assert r.data[0]["content"] == {"type": "doc", "content": [{"type": "paragraph"}]}


@pytest.mark.django_db
def test_generate_docx_errors():
    client = APIClient()
    url = reverse("mom-generate-docx")

    r = client.post(url, {}, format="json")
    assert r.status_code == 400

    for raw in ("abc", "²", "-3"):
        r = client.post(url, {"momId": raw}, format="json")
        assert r.status_code == 400, raw
        assert r.data["error"]["code"] == "invalid_id"

    r = client.post(url, {"momId": 999}, format="json")
    assert r.status_code == 404


@pytest.mark.django_db
def test_generate_docx_document(company, png_bytes):
    client = APIClient()
    default_storage.save("attachments/foto.png", io.BytesIO(png_bytes))
    r = client.post(reverse("mom-list"), _payload(company), format="json")
    mom_id = r.data["data"]["id"]

    with mock.patch("docgen.images.requests.get", return_value=_png_response(png_bytes)) as get:
        r = client.post(reverse("mom-generate-docx"), {"momId": mom_id}, format="json")

    assert r.status_code == 200
    assert r["Content-Type"] == DOCX_MIME
    assert "MOM-Rapat_Awal-PT Mitra Sejahtera.docx" in r["Content-Disposition"]
    # seul le logo mitra passe par HTTP, la piece jointe est lue dans le storage
    get.assert_called_once()

    doc = Document(io.BytesIO(r.content))
    header = doc.sections[0].header
    header_text = "\n".join(cell.text for row in header.tables[0].rows for cell in row.cells)
    assert "MINUTE OF MEETING" in header_text
    assert "Joint Planning Session Telkomsat & PT Mitra Sejahtera" in header_text
    assert "Date\t: 14/03/2025" in header_text
    assert "Logo T-Sat" in header_text

    main_text = "\n".join(cell.text for row in doc.tables[0].rows for cell in row.cells)
    for expected in ("Attendees", "Budi, Sari, Andi", "Result", "Description", "Latar Belakang",
                     "Kerja sama satelit", "Next Action"):
        assert expected in main_text

    # tableau imbrique dans la derniere ligne (cell.text ne couvre pas les sous-tableaux)
    next_actions = doc.tables[0].rows[-1].cells[0].tables[0]
    assert [[c.text for c in row.cells] for row in next_actions.rows] == [
        ["No", "Action", "Due Date", "UIC"],
        ["1", "Kirim draft NDA", "Minggu depan", "Legal"],
    ]

    assert any(p.text == "Disetujui Oleh:" for p in doc.paragraphs)
    approvers = doc.tables[1]
    assert [c.text for c in approvers.rows[0].cells] == ["Telkomsat", "PT Mitra Sejahtera"]
    assert [c.text for c in approvers.rows[2].cells] == ["Direktur Bisnis", "Direktur Mitra"]

    lampiran = doc.tables[2].rows[0].cells[0].text
    assert "Lampiran" in lampiran
    assert "1. Foto" in lampiran
    assert len(doc.inline_shapes) >= 1


@pytest.mark.django_db
def test_docx_download_survives_unreachable_logo(company):
    r = APIClient().post(reverse("mom-list"), _payload(company, attachments=[], approvers=[]), format="json")
    mom_id = r.data["data"]["id"]

    with mock.patch("docgen.images.requests.get", return_value=mock.Mock(status_code=404, content=b"")):
        r = APIClient().get(reverse("mom-docx", args=[mom_id]))

    assert r.status_code == 200
    doc = Document(io.BytesIO(r.content))
    header_text = "\n".join(cell.text for row in doc.sections[0].header.tables[0].rows for cell in row.cells)
    assert "Logo Mitra" in header_text
    # pas d'approver -> pas de bloc de signature
    assert len(doc.tables) == 1


@pytest.mark.django_db
def test_export_task_writes_docx_to_storage(company):
    r = APIClient().post(reverse("mom-list"), _payload(company, attachments=[]), format="json")
    mom_id = r.data["data"]["id"]

    with mock.patch("docgen.images.requests.get", return_value=mock.Mock(status_code=404, content=b"")):
        r = APIClient().post(reverse("mom-export", args=[mom_id]))

    assert r.status_code == 202
    assert r.data["status"] == "SUCCESS"
    path = r.data["file"]["path"]
    assert path.startswith("exports/mom/")
    assert default_storage.exists(path)


@pytest.mark.django_db
def test_company_referenced_by_mom_cannot_be_deleted(company):
    APIClient().post(reverse("mom-list"), _payload(company), format="json")
    r = APIClient().delete(reverse("company-detail", args=[company.pk]))
    assert r.status_code == 409
    assert r.data["error"]["code"] == "protected"


def test_group_approvers_internal_first():
    approvers = [
        Approver(name="Eko", type=Approver.TYPE_EXTERNAL),
        Approver(name="Ani", type=Approver.TYPE_INTERNAL),
        Approver(name="Budi", type=Approver.TYPE_INTERNAL),
    ]
    assert group_approvers(approvers, "Alpha Corp", "Telkomsat") == [
        ("Telkomsat", ["Ani", "Budi"]),
        ("Alpha Corp", ["Eko"]),
    ]
    assert group_approvers(approvers[:1], "", "Telkomsat") == [("Eksternal", ["Eko"])]
