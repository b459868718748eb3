from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class LogReadError(RuntimeError):
    """The log file could not be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Error loading file {path}: {reason}")
        self.path = path
        self.reason = reason


def read_log_text(path: Path, encoding: str = "utf-8", errors: str = "strict") -> str:
    try:
        text = path.read_text(encoding=encoding, errors=errors)
    except FileNotFoundError as exc:
        raise LogReadError(path, "file not found") from exc
    except IsADirectoryError as exc:
        raise LogReadError(path, "is a directory") from exc
    except PermissionError as exc:
        raise LogReadError(path, "permission denied") from exc
    except UnicodeDecodeError as exc:
        raise LogReadError(path, f"cannot decode as {encoding}") from exc
    except LookupError as exc:
        raise LogReadError(path, f"unknown encoding {encoding}") from exc
    except OSError as exc:
        raise LogReadError(path, exc.strerror or str(exc)) from exc
    LOGGER.debug("Read %d characters from %s", len(text), path)
    return text
