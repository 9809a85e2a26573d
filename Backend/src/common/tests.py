import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from common.exceptions import InvalidIdentifier
from common.mixins import parse_identifier
from common.utils import dict_without_none, env_bool, sanitize_filename


@pytest.mark.django_db
def test_health_and_ping():
    client = APIClient()

    r = client.get(reverse("health"))
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["database"] is True

    r = client.get(reverse("ping"))
    assert r.status_code == 200
    assert r.json()["pong"] is True


@pytest.mark.django_db
def test_info_lists_document_types():
    client = APIClient()
    r = client.get(reverse("info"))
    assert r.status_code == 200
    assert "mom" in r.data["document_types"]
    assert r.data["internal_company"] == "Telkomsat"


@pytest.mark.django_db
def test_request_id_is_echoed_or_generated():
    client = APIClient()
    r = client.get(reverse("ping"), HTTP_X_REQUEST_ID="abc-123")
    assert r.headers["X-Request-ID"] == "abc-123"

    r = client.get(reverse("ping"))
    assert r.headers["X-Request-ID"]


def test_sanitize_filename():
    assert sanitize_filename('  Rapat: Q1/Q2 "final"?  ') == "Rapat_ Q1_Q2 _final__"
    assert sanitize_filename("") == ""


def test_dict_without_none():
    assert dict_without_none({"a": 1, "b": None, "c": 0}) == {"a": 1, "c": 0}


def test_env_bool(monkeypatch):
    monkeypatch.setenv("MOM_FLAG", "True")
    assert env_bool("MOM_FLAG") is True
    monkeypatch.setenv("MOM_FLAG", "0")
    assert env_bool("MOM_FLAG", default=True) is False
    monkeypatch.delenv("MOM_FLAG")
    assert env_bool("MOM_FLAG", default=True) is True


def test_parse_identifier():
    assert parse_identifier("42") == 42
    assert parse_identifier(7) == 7
    for raw in ("", "abc", "4.2", "-1", "²", "١٢"):
        with pytest.raises(InvalidIdentifier):
            parse_identifier(raw)
