from django.db import connection
from django.http import JsonResponse


def health(request):
    """
    Endpoint de sante tres simple.
    GET /api/common/health -> {"status":"ok","service":"django","database":true}
    """
    try:
        connection.ensure_connection()
        db_ok = True
    except Exception:
        db_ok = False
    return JsonResponse({"status": "ok", "service": "django", "database": db_ok})
