# resumehub/config.py
import os
from pathlib import Path
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

# backend/ directory; default home for the SQLite file and the upload folder
BASE_DIR = Path(__file__).resolve().parents[1]


def _env_list(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = os.getenv("APP_NAME", "Resume Hub API")
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Route prefix; "/api" matches the legacy browser client's URL layout (paths only, not its response fields)
    api_prefix: str = os.getenv("API_PREFIX", "")

    # CORS origins for the browser client
    CORS_ORIGINS: list[str] = _env_list("CORS_ORIGINS", "*")

    # Storage
    database_url: str = os.getenv("DATABASE_URL", f"sqlite://{BASE_DIR / 'db' / 'data.sqlite3'}")
    upload_dir: str = os.getenv("UPLOAD_DIR", str(BASE_DIR / "uploads"))

    # Upload policy (checked before any bytes are written)
    max_upload_bytes: int = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
    allowed_extensions: list[str] = [
        ext.lower() if ext.startswith(".") else f".{ext.lower()}"
        for ext in _env_list("ALLOWED_EXTENSIONS", ".pdf,.doc,.docx")
    ]

    # Search
    search_limit: int = int(os.getenv("SEARCH_LIMIT", "200"))

    # Caller identity: "self-asserted" (token is the bare account id) or "jwt"
    auth_mode: str = os.getenv("AUTH_MODE", "self-asserted").lower()

    # Orphaned document cleanup
    sweep_orphans_on_startup: bool = _env_flag("SWEEP_ORPHANS_ON_STARTUP")
    orphan_grace_seconds: int = int(os.getenv("ORPHAN_GRACE_SECONDS", "3600"))

settings = Settings()  # Instantiate configuration
