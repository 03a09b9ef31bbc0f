"""
Flat-file state shared by the usage tools and the check-in command.
Each file holds exactly one value: the anonymous installation id, or the
Unix time in milliseconds the ``kiji`` script was last used.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class StoreError(OSError):
    """A state file is missing or doesn't hold a usable value."""


def current_millis() -> int:
    return int(time.time() * 1000)


def _read_value(path: Path) -> str:
    try:
        value = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        raise StoreError(f"State file not found: {path}") from exc
    if not value:
        raise StoreError(f"State file is empty: {path}")
    return value


def _write_value(path: Path, value: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(value + "\n", encoding="utf-8")


# ─── Installation id ──────────────────────────────────────────────────

def read_uuid(path: Path) -> str:
    return _read_value(path)


def write_uuid_if_absent(path: Path) -> tuple[str, bool]:
    """
    Make sure ``path`` holds an installation id.

    Returns (id, created). An existing id is never replaced; a missing or
    blank file gets a fresh uuid4.
    """
    if path.exists():
        existing = path.read_text(encoding="utf-8").strip()
        if existing:
            return existing, False
        logger.warning("Id file %s is blank, generating a new id", path)

    installation_id = str(uuid.uuid4())
    _write_value(path, installation_id)
    return installation_id, True


# ─── Last-used timestamp ──────────────────────────────────────────────

def read_last_used(path: Path) -> int:
    raw = _read_value(path)
    try:
        return int(raw)
    except ValueError as exc:
        raise StoreError(f"State file {path} does not hold a timestamp: {raw!r}") from exc


def write_last_used(path: Path, millis: Optional[int] = None) -> int:
    """Overwrite ``path`` with ``millis`` (default: now). Returns the value written."""
    if millis is None:
        millis = current_millis()
    _write_value(path, str(millis))
    return millis
