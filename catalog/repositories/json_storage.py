"""
Whole-file JSON persistence adapter.

The products file holds a single JSON array. Every helper reads or writes the
complete file; the blocking call runs in a worker thread so other tasks on the
event loop keep going.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Sequence, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

JSON_INDENT = 2


class StorageError(Exception):
    """Base exception for the JSON file adapter."""

    def __init__(self, message: str, path: PathLike):
        super().__init__(message)
        self.path = Path(path)


class StorageIOError(StorageError):
    """Raised when the file cannot be read, written or removed."""


class StorageParseError(StorageError):
    """Raised when the file content is not valid JSON."""


def _read_sync(path: Path) -> list:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise StorageIOError(f"Failed to read {path}: {exc}", path) from exc
    if not raw:
        return []
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise StorageParseError(f"Invalid JSON in {path}: {exc}", path) from exc


def _write_sync(path: Path, records: Sequence[Any]) -> None:
    payload = json.dumps(list(records), ensure_ascii=False, indent=JSON_INDENT)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(payload, encoding="utf-8")
        tmp.replace(path)  # atomic replace on same filesystem
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise StorageIOError(f"Failed to write {path}: {exc}", path) from exc


def _create_sync(path: Path) -> bool:
    if path.exists():
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps([]), encoding="utf-8")
    except OSError as exc:
        raise StorageIOError(f"Failed to create {path}: {exc}", path) from exc
    return True


def _delete_sync(path: Path) -> None:
    try:
        path.unlink()
    except OSError as exc:
        raise StorageIOError(f"Failed to delete {path}: {exc}", path) from exc


async def read(path: PathLike) -> list:
    """Decode the whole file; empty content reads as an empty list."""
    return await asyncio.to_thread(_read_sync, Path(path))


async def create(path: PathLike) -> bool:
    """Create the file holding ``[]`` unless it already exists. Returns True when created."""
    created = await asyncio.to_thread(_create_sync, Path(path))
    if created:
        logger.info("Created empty products file at %s", path)
    return created


async def write(path: PathLike, records: Sequence[Any]) -> None:
    """Replace the file content with ``records`` pretty-printed as JSON."""
    await asyncio.to_thread(_write_sync, Path(path), records)


async def delete(path: PathLike) -> None:
    await asyncio.to_thread(_delete_sync, Path(path))
