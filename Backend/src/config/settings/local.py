from .base import *  # noqa

# --- Charger .env (Backend/.env) et ECRASER les variables OS si besoin -----
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_DIR = Path(__file__).resolve().parents[3]  # -> dossier Backend/ (depuis src/config/settings/local.py)
env_path = ENV_DIR / ".env"
# override=True pour ecraser une variable deja definie dans la session
if env_path.exists():
    load_dotenv(env_path, override=True)
    logger.info(f"[settings] .env chargé depuis {env_path}")

# --- Dev local ---
DEBUG = True
ALLOWED_HOSTS = ["127.0.0.1", "localhost", "host.docker.internal"]

# Front Next.js en dev
CSRF_TRUSTED_ORIGINS = [
    "http://127.0.0.1:3000",
    "http://localhost:3000",
]

# Ne pas ré-ajouter corsheaders ici (il est déjà dans base.py)

# CORS en dev
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# DRF: permissions ouvertes en dev
REST_FRAMEWORK.update({
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.BasicAuthentication",
        "rest_framework_simplejwt.authentication.JWTAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.AllowAny",),
})

# Valeurs relues après le .env
MOM_INTERNAL_COMPANY_NAME = os.getenv("MOM_INTERNAL_COMPANY_NAME", MOM_INTERNAL_COMPANY_NAME)
MOM_DEFAULT_LOGO_PATH = os.getenv("MOM_DEFAULT_LOGO_PATH", MOM_DEFAULT_LOGO_PATH)
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", CELERY_BROKER_URL)
