import base64

import pytest

from companies.models import Company

# PNG 1x1 transparent
PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


@pytest.fixture(autouse=True)
def media_root(tmp_path, settings):
    """Chaque test ecrit ses fichiers media dans un dossier temporaire."""
    settings.MEDIA_ROOT = str(tmp_path / "media")
    return tmp_path / "media"


@pytest.fixture
def png_bytes():
    return PNG_1X1


@pytest.fixture
def company(db):
    return Company.objects.create(name="PT Mitra Sejahtera", logo_mitra_url="https://cdn.example.com/mitra.png")
