"""
Chargement des images embarquees dans les DOCX (logos, images Tiptap,
pieces jointes). Une image illisible ou injoignable est journalisee puis
ignoree : l'export ne doit jamais echouer a cause d'une image.
"""

from __future__ import annotations

import base64
import binascii
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional
from urllib.parse import unquote, urlparse

import requests
from django.conf import settings
from django.core.files.storage import default_storage
from docx.image.image import Image as DocxImage
from requests.exceptions import RequestException

__all__ = ["fetch_image", "read_default_logo", "is_supported_image", "gather"]

logger = logging.getLogger(__name__)


def _read_local_media(url: str) -> Optional[bytes]:
    """Lit directement depuis le storage les fichiers servis sous MEDIA_URL."""
    media_url = settings.MEDIA_URL or ""
    if not media_url:
        return None
    path = urlparse(url).path
    if not path.startswith(media_url):
        return None
    name = unquote(path[len(media_url):])
    if not name or not default_storage.exists(name):
        return None
    with default_storage.open(name, "rb") as fh:
        return fh.read()


def _decode_data_url(url: str) -> Optional[bytes]:
    # data:image/png;base64,....
    header, _, payload = url.partition(",")
    if ";base64" not in header:
        return None
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        logger.warning("[docx] data URL image non décodable")
        return None


def fetch_image(url: str, timeout: Optional[int] = None) -> Optional[bytes]:
    """Renvoie les octets de l'image ou None (erreur journalisee)."""
    if not url:
        return None
    if url.startswith("data:image/"):
        return _decode_data_url(url)

    local = _read_local_media(url)
    if local is not None:
        return local

    try:
        resp = requests.get(url, timeout=timeout or settings.DOCX_IMAGE_TIMEOUT_SECONDS)
    except RequestException as e:
        logger.warning(f"[docx] Erreur réseau image {url}: {e}")
        return None

    if resp.status_code >= 400:
        logger.warning(f"[docx] Échec fetch image {url}: HTTP {resp.status_code}")
        return None
    return resp.content or None


def read_default_logo() -> Optional[bytes]:
    """Logo interne (MOM_DEFAULT_LOGO_PATH) ou None si absent."""
    path = settings.MOM_DEFAULT_LOGO_PATH
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as e:
        logger.warning(f"[docx] Logo par défaut illisible ({path}): {e}")
        return None


def is_supported_image(data: Optional[bytes]) -> bool:
    """True si python-docx sait embarquer ces octets (PNG, JPEG, GIF, BMP, TIFF)."""
    if not data:
        return False
    try:
        DocxImage.from_blob(data)
    except Exception as e:
        logger.warning(f"[docx] Image ignorée (format non reconnu): {e}")
        return False
    return True


def gather(*loaders: Callable[[], Optional[bytes]]) -> List[Optional[bytes]]:
    """Execute les chargements independants en parallele, resultats dans l'ordre."""
    if not loaders:
        return []
    with ThreadPoolExecutor(max_workers=len(loaders)) as pool:
        futures = [pool.submit(fn) for fn in loaders]
        return [f.result() for f in futures]
