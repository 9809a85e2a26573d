from __future__ import annotations

import io

from django.http import HttpResponse
from django.utils.http import content_disposition_header

from common.utils import sanitize_filename

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def build_filename(prefix: str, title: str, company: str, default_title: str) -> str:
    """MOM-<titre>-<entreprise>.docx, caracteres interdits remplaces par "_"."""
    safe_title = sanitize_filename(title or "") or default_title
    safe_company = sanitize_filename(company or "") or "Generated"
    return f"{prefix}-{safe_title}-{safe_company}.docx"


def to_bytes(document) -> bytes:
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


def docx_response(content: bytes, filename: str) -> HttpResponse:
    response = HttpResponse(content, content_type=DOCX_MIME)
    response["Content-Disposition"] = content_disposition_header(True, filename)
    response["Content-Length"] = str(len(content))
    return response
