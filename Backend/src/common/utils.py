import os
import re
from datetime import datetime, timezone
from typing import Dict, Any

_FORBIDDEN_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def dict_without_none(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}


def sanitize_filename(name: str) -> str:
    """Remplace les caracteres interdits dans un nom de fichier par "_"."""
    if not name:
        return ""
    return _FORBIDDEN_FILENAME_CHARS.sub("_", name.strip())


def env_bool(name: str, default: bool = False) -> bool:
    """Lit une variable d'environnement booleenne ("1", "true", "yes", "on")."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}
