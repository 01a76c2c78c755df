"""Runtime settings, read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def clean_env_value(value: str | None) -> str:
    """Strip whitespace and one layer of surrounding quotes."""
    if not value:
        return ""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    return value.strip()


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    secret_key: str
    token_ttl_hours: int
    log_level: str


def load_settings() -> Settings:
    load_dotenv()
    data_dir = clean_env_value(os.getenv("INVOICER_DATA_DIR"))
    ttl = clean_env_value(os.getenv("INVOICER_TOKEN_TTL_HOURS")) or "24"
    return Settings(
        data_dir=Path(data_dir) if data_dir else _PROJECT_ROOT / "data",
        secret_key=clean_env_value(os.getenv("INVOICER_SECRET_KEY")) or "change-me",
        token_ttl_hours=int(ttl),
        log_level=(clean_env_value(os.getenv("INVOICER_LOG_LEVEL")) or "WARNING").upper(),
    )
