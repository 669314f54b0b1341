# /app/core/config.py

import os
from dotenv import load_dotenv

# --- CONFIGURATION ---
# Values come from the environment (or a local .env file during development).
load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./websites.db")
    AUTO_CREATE_TABLES: bool = _env_bool("AUTO_CREATE_TABLES", "true")

    # Generator service (Gemini). The key is only checked when a call is made.
    GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GENERATOR_TIMEOUT_SECONDS: float = float(os.getenv("GENERATOR_TIMEOUT_SECONDS", "120"))

    # Session cookies
    SESSION_SECRET: str = os.getenv("SESSION_SECRET", "")
    SESSION_MAX_AGE_SECONDS: int = int(os.getenv("SESSION_MAX_AGE_SECONDS", str(30 * 24 * 60 * 60)))
    SESSION_HTTPS_ONLY: bool = _env_bool("SESSION_HTTPS_ONLY")

    CORS_ORIGINS: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # When enabled, only premium accounts may download the ZIP archive.
    DOWNLOAD_REQUIRES_PREMIUM: bool = _env_bool("DOWNLOAD_REQUIRES_PREMIUM")


settings = Settings()
