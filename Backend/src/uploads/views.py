from rest_framework import status
from rest_framework.decorators import api_view, parser_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response

from common.exceptions import UserFacingAPIException

from .storage import ATTACHMENTS_DIR, IMAGES_DIR, UnsupportedFileType, check_size, mime_type_of, store


@api_view(["POST"])
@parser_classes([MultiPartParser, FormParser])
def upload_attachments(request):
    """Pieces jointes de MOM : champ multipart 'files' (un ou plusieurs)."""
    files = request.FILES.getlist("files")
    if not files:
        raise UserFacingAPIException("Champ 'files' requis.")
    # tout ou rien : aucune ecriture si un fichier depasse la limite
    for f in files:
        check_size(f)
    stored = [store(f, ATTACHMENTS_DIR, request) for f in files]
    return Response(stored, status=status.HTTP_201_CREATED)


@api_view(["POST"])
@parser_classes([MultiPartParser, FormParser])
def upload_image(request):
    """Image inseree depuis l'editeur riche : champ multipart 'file', image/* uniquement."""
    upfile = request.FILES.get("file")
    if not upfile:
        raise UserFacingAPIException("Champ 'file' requis.")
    if not mime_type_of(upfile).startswith("image/"):
        raise UnsupportedFileType("Seules les images sont acceptées.")
    return Response(store(upfile, IMAGES_DIR, request), status=status.HTTP_201_CREATED)
