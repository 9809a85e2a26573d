"""Depot des fichiers envoyes par le front dans le storage Django (MEDIA_ROOT)."""

import logging
import mimetypes
import uuid

from django.conf import settings
from django.core.files.storage import default_storage

from common.exceptions import UserFacingAPIException
from common.utils import now_utc

logger = logging.getLogger(__name__)

ATTACHMENTS_DIR = "attachments"
IMAGES_DIR = "images"


class FileTooLarge(UserFacingAPIException):
    default_detail = "Fichier trop volumineux."
    default_code = "file_too_large"


class UnsupportedFileType(UserFacingAPIException):
    default_detail = "Type de fichier non autorisé."
    default_code = "unsupported_type"


def mime_type_of(upfile) -> str:
    content_type = getattr(upfile, "content_type", "") or ""
    if content_type and content_type != "application/octet-stream":
        return content_type
    guessed, _ = mimetypes.guess_type(upfile.name or "")
    return guessed or content_type or "application/octet-stream"


def check_size(upfile) -> None:
    limit = settings.UPLOAD_MAX_BYTES
    if upfile.size > limit:
        raise FileTooLarge(f"'{upfile.name}' depasse la taille maximale ({limit} octets).")


def store(upfile, folder: str, request=None) -> dict:
    """Enregistre sous <folder>/YYYY/MM/<uuid>-<nom> et renvoie la description du fichier."""
    check_size(upfile)
    original = upfile.name or "file"
    name = default_storage.get_valid_name(original)
    path = default_storage.save(f"{folder}/{now_utc():%Y/%m}/{uuid.uuid4().hex[:12]}-{name}", upfile)
    url = default_storage.url(path)
    if request is not None:
        url = request.build_absolute_uri(url)
    logger.info(f"[uploads] {original} -> {path} ({upfile.size} octets)")
    return {
        "name": original,
        "url": url,
        "path": path,
        "size": upfile.size,
        "mime_type": mime_type_of(upfile),
    }
