# src/etl_admin/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is required at import time; every value has a default.
- URL layout, language and timezone live here so the renderer stays pure.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "ETL"

# Numeric only: strftime names (%A, %B) follow the process locale, not ETL_LANG.
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Existing environment always wins over .env.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "y", "on"}:
        return True
    if v in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Links / assets ----
    admin_base_url: str
    pix_base_url: str
    legacy_history_param: bool

    # ---- Localization ----
    lang: str
    strings_path: Path | None
    timezone: str
    date_format: str

    # ---- Table ----
    table_id_prefix: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "etl-admin")
        log_level = _env(_k("LOG_LEVEL"), "INFO").upper()
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/etl-admin")) or Path(".local/etl-admin")

        # Trailing slashes are dropped so URL joins stay predictable.
        admin_base_url = _env(_k("ADMIN_BASE_URL"), "/admin/tool/etl").rstrip("/")
        pix_base_url = _env(_k("PIX_BASE_URL"), "/pix").rstrip("/")
        legacy_history_param = _env_bool(_k("LEGACY_HISTORY_PARAM"), False)

        lang = _env(_k("LANG"), "en").lower()
        strings_path = _env_path(_k("STRINGS_PATH"), None)
        timezone = _env(_k("TIMEZONE"), "UTC")
        date_format = _env(_k("DATE_FORMAT"), DEFAULT_DATE_FORMAT)

        table_id_prefix = _env(_k("TABLE_ID_PREFIX"), "tool-etl-tasks-")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            admin_base_url=admin_base_url,
            pix_base_url=pix_base_url,
            legacy_history_param=legacy_history_param,
            lang=lang,
            strings_path=strings_path,
            timezone=timezone,
            date_format=date_format,
            table_id_prefix=table_id_prefix,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process settings, reading the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
