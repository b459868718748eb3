from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(slots=True)
class AppConfig:
    log_dir: Path
    log_level: str
    file_encoding: str
    decode_errors: str


def _resolve_path(value: str | None, fallback: str) -> Path:
    candidate = Path(value or fallback)
    if not candidate.is_absolute():
        candidate = PROJECT_ROOT / candidate
    return candidate


def load_config(env_file: str | os.PathLike[str] | None = None) -> AppConfig:
    """Load configuration values from a .env file and environment variables."""

    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    log_dir = _resolve_path(os.getenv("LOG_DIR"), "logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    return AppConfig(
        log_dir=log_dir,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        file_encoding=os.getenv("LOG_FILE_ENCODING", "utf-8"),
        decode_errors=os.getenv("DECODE_ERRORS", "strict"),
    )
