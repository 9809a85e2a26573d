import io
from decimal import Decimal

import pytest
from django.urls import reverse
from docx import Document
from rest_framework.test import APIClient

from agreements.exporters import format_years
from agreements.models import Jik, Nda
from agreements.serializers import duration_to_years
from companies.models import Company
from progress.models import Progress

SECTIONS = [
    {
        "title": "Ruang Lingkup",
        "content": {
            "type": "doc",
            "content": [
                {
                    "type": "bulletList",
                    "content": [
                        {
                            "type": "listItem",
                            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Layanan VSAT"}]}],
                        }
                    ],
                }
            ],
        },
    }
]


@pytest.mark.django_db
def test_jik_create_with_form_aliases(company):
    client = APIClient()
    r = client.post(
        reverse("jik-list"),
        {
            "companyId": company.pk,
            "companyName": company.name,
            "jikTitle": "Kerja Sama Backhaul",
            "unitName": "Enterprise",
            "initiativePartnership": "Penyediaan kapasitas satelit",
            "investValue": "1500000",
            "contractDuration": {"amount": 18, "unit": "month"},
            "sections": SECTIONS,
            "is_finish": True,
        },
        format="json",
    )
    assert r.status_code == 201, r.content
    data = r.data["data"]
    assert data["doc_type"] == "JIK"
    assert data["title"] == "Kerja Sama Backhaul"
    assert data["description"] == "Penyediaan kapasitas satelit"
    assert Decimal(data["contract_duration_years"]) == Decimal("1.5")
    assert Decimal(data["invest_value"]) == Decimal("1500000")
    assert data["status_label"] == "Completed"
    assert data["progress"]["step"]["code"] == "jik"


@pytest.mark.django_db
@pytest.mark.parametrize("field", ["companyName", "title", "unitName"])
def test_agreement_required_fields(field):
    payload = {"companyName": "PT Alpha", "title": "NDA Proyek", "unitName": "Legal"}
    payload.pop(field)
    r = APIClient().post(reverse("nda-list"), payload, format="json")
    assert r.status_code == 400
    assert field in r.data["error"]["detail"]


@pytest.mark.django_db
def test_agreement_invalid_duration_unit():
    r = APIClient().post(
        reverse("msa-list"),
        {"companyName": "PT Alpha", "title": "MSA", "unitName": "Legal", "contractDuration": {"amount": 2, "unit": "week"}},
        format="json",
    )
    assert r.status_code == 400
    assert "contractDuration" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_agreement_without_company_id_links_company_by_name():
    Company.objects.create(name="PT Alpha")
    r = APIClient().post(
        reverse("mou-list"),
        {"companyName": "pt alpha", "title": "MOU Riset", "unitName": "R&D", "investValue": ""},
        format="json",
    )
    assert r.status_code == 201, r.content
    assert r.data["data"]["company"]["name"] == "PT Alpha"
    assert r.data["data"]["invest_value"] is None
    assert r.data["data"]["status_label"] == "Draft"
    assert Company.objects.count() == 1


@pytest.mark.django_db
def test_agreement_company_name_matching_several_casings():
    acme = Company.objects.create(name="Acme")
    upper = Company.objects.create(name="ACME")
    client = APIClient()

    r = client.post(reverse("nda-list"), {"companyName": "acme", "title": "NDA 1", "unitName": "Legal"}, format="json")
    assert r.status_code == 201, r.content
    assert r.data["data"]["company"]["id"] == acme.pk

    r = client.post(reverse("nda-list"), {"companyName": "ACME", "title": "NDA 2", "unitName": "Legal"}, format="json")
    assert r.status_code == 201, r.content
    assert r.data["data"]["company"]["id"] == upper.pk

    r = client.patch(reverse("nda-detail", args=[r.data["data"]["id"]]), {"companyName": "aCmE"}, format="json")
    assert r.status_code == 200, r.content
    assert r.data["data"]["company"]["id"] == acme.pk
    assert Company.objects.count() == 2


@pytest.mark.django_db
def test_agreement_update_search_and_delete(company):
    client = APIClient()
    r = client.post(
        reverse("nda-list"),
        {"companyId": company.pk, "companyName": company.name, "title": "NDA Satelit", "unitName": "Legal"},
        format="json",
    )
    doc_id = r.data["data"]["id"]

    r = client.patch(
        reverse("nda-detail", args=[doc_id]), {"contractDurationYears": "2", "is_finish": 1}, format="json"
    )
    assert r.status_code == 200, r.content
    assert r.data["data"]["status_label"] == "Completed"
    assert Decimal(r.data["data"]["contract_duration_years"]) == Decimal("2")

    r = client.get(reverse("nda-list"), {"q": "satelit"})
    assert [d["id"] for d in r.data] == [doc_id]
    assert client.get(reverse("jik-list"), {"q": "satelit"}).data == []

    progress_id = Nda.objects.get(pk=doc_id).progress_id
    r = client.delete(reverse("nda-detail", args=[doc_id]))
    assert r.status_code == 200
    assert not Nda.objects.exists()
    assert not Progress.objects.filter(pk=progress_id).exists()

    r = client.get(reverse("nda-detail", args=["x1"]))
    assert r.status_code == 400
    assert r.data["error"]["code"] == "invalid_id"


@pytest.mark.django_db
def test_agreement_docx_export(company):
    doc = Jik.objects.create(
        company=company,
        company_name=company.name,
        title="Kerja Sama: Fase 1",
        unit_name="Enterprise",
        description="Penyediaan kapasitas",
        invest_value=Decimal("2500000.00"),
        contract_duration_years=Decimal("3.0000"),
        sections=SECTIONS,
    )
    r = APIClient().get(reverse("jik-docx", args=[doc.pk]))
    assert r.status_code == 200
    assert "JIK-Kerja Sama_ Fase 1-PT Mitra Sejahtera.docx" in r["Content-Disposition"]

    document = Document(io.BytesIO(r.content))
    texts = [p.text for p in document.paragraphs]
    assert "JIK" in texts
    assert "Ruang Lingkup" in texts
    assert "Layanan VSAT" in texts
    detail = {row.cells[0].text: row.cells[1].text for row in document.tables[0].rows}
    assert detail["JIK Title"] == "Kerja Sama: Fase 1"
    assert detail["Initiative Partnership"] == "Penyediaan kapasitas"
    assert detail["Contract Duration"] == "3 years"


def test_duration_conversion():
    assert duration_to_years(Decimal(730), "day") == Decimal("2.0000")
    assert duration_to_years(Decimal(6), "month") == Decimal("0.5000")
    assert duration_to_years(Decimal(4), "year") == Decimal("4.0000")
    assert format_years(Decimal("1.0000")) == "1 year"
    assert format_years(Decimal("20.0000")) == "20 years"
    assert format_years(None) == "-"
