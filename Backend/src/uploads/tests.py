import pytest
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework.test import APIClient


@pytest.mark.django_db
def test_upload_attachments_multiple(png_bytes):
    files = [
        SimpleUploadedFile("notulen rapat.pdf", b"%PDF-1.4 demo", content_type="application/pdf"),
        SimpleUploadedFile("foto.png", png_bytes, content_type="image/png"),
    ]
    r = APIClient().post(reverse("upload_attachment"), {"files": files}, format="multipart")
    assert r.status_code == 201, r.content
    assert [f["name"] for f in r.data] == ["notulen rapat.pdf", "foto.png"]
    first = r.data[0]
    assert first["path"].startswith("attachments/")
    assert first["url"].startswith("http://testserver/media/attachments/")
    assert first["mime_type"] == "application/pdf"
    assert first["size"] == len(b"%PDF-1.4 demo")
    assert default_storage.exists(first["path"])


@pytest.mark.django_db
def test_upload_attachment_requires_files():
    r = APIClient().post(reverse("upload_attachment"), {}, format="multipart")
    assert r.status_code == 400
    assert r.data["error"]["status"] == 400


@pytest.mark.django_db
def test_upload_attachment_too_large(settings):
    settings.UPLOAD_MAX_BYTES = 10
    upfile = SimpleUploadedFile("big.bin", b"x" * 11, content_type="application/octet-stream")
    r = APIClient().post(reverse("upload_attachment"), {"files": [upfile]}, format="multipart")
    assert r.status_code == 400
    assert r.data["error"]["code"] == "file_too_large"


@pytest.mark.django_db
def test_upload_image(png_bytes):
    upfile = SimpleUploadedFile("logo.png", png_bytes, content_type="image/png")
    r = APIClient().post(reverse("upload_image"), {"file": upfile}, format="multipart")
    assert r.status_code == 201, r.content
    assert r.data["path"].startswith("images/")
    assert r.data["mime_type"] == "image/png"

    doc = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
    r = APIClient().post(reverse("upload_image"), {"file": doc}, format="multipart")
    assert r.status_code == 400
    assert r.data["error"]["code"] == "unsupported_type"

    r = APIClient().post(reverse("upload_image"), {}, format="multipart")
    assert r.status_code == 400
