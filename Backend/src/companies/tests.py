import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from companies.models import Company


@pytest.mark.django_db
def test_company_crud_and_search():
    client = APIClient()

    r = client.post(
        reverse("company-list"),
        {"name": "  PT Mitra Sejahtera ", "logo_mitra_url": "https://cdn.example.com/mitra.png"},
        format="json",
    )
    assert r.status_code == 201, r.content
    company_id = r.data["id"]
    assert r.data["name"] == "PT Mitra Sejahtera"

    Company.objects.create(name="CV Nusantara")

    r = client.get(reverse("company-list"), {"q": "mitra"})
    assert r.status_code == 200
    assert [c["name"] for c in r.data] == ["PT Mitra Sejahtera"]

    r = client.patch(reverse("company-detail", args=[company_id]), {"address": "Jakarta"}, format="json")
    assert r.status_code == 200
    assert r.data["address"] == "Jakarta"

    r = client.delete(reverse("company-detail", args=[company_id]))
    assert r.status_code == 204


@pytest.mark.django_db
def test_company_requires_name():
    r = APIClient().post(reverse("company-list"), {"name": "   "}, format="json")
    assert r.status_code == 400
    assert r.data["error"]["status"] == 400
    assert "name" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_company_invalid_id_is_bad_request():
    r = APIClient().get(reverse("company-detail", args=["abc"]))
    assert r.status_code == 400
    assert r.data["error"]["code"] == "invalid_id"

    r = APIClient().get(reverse("company-detail", args=[999]))
    assert r.status_code == 404
    assert r.data["error"]["code"] == "not_found"
