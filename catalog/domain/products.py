"""Domain helpers for product records and the outcomes returned by the repository."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True)
class Added:
    record: dict
    ok: bool = True


@dataclass(frozen=True)
class DuplicateCode:
    """Insertion rejected: another product already uses this code."""

    code: Any
    ok: bool = False


@dataclass(frozen=True)
class Found:
    record: dict
    ok: bool = True


@dataclass(frozen=True)
class NotFound:
    """No product stored under the requested id."""

    product_id: Any
    ok: bool = False


@dataclass(frozen=True)
class Updated:
    record: dict
    ok: bool = True


def _same(left: Any, right: Any) -> bool:
    # True nao casa com 1
    return isinstance(left, bool) == isinstance(right, bool) and left == right


def find_by_code(records: Sequence[Mapping[str, Any]], code: Any) -> Optional[Mapping[str, Any]]:
    """Return the first record whose code equals ``code``."""
    for record in records:
        if isinstance(record, Mapping) and _same(record.get("code"), code):
            return record
    return None


def find_index(records: Sequence[Mapping[str, Any]], product_id: Any) -> int:
    """Index of the first record with ``product_id``, or -1."""
    for idx, record in enumerate(records):
        if isinstance(record, Mapping) and _same(record.get("id"), product_id):
            return idx
    return -1


def find_by_id(records: Sequence[Mapping[str, Any]], product_id: Any) -> Optional[Mapping[str, Any]]:
    idx = find_index(records, product_id)
    return records[idx] if idx >= 0 else None


def next_id(records: Sequence[Any]) -> int:
    # Conta os registros atuais; nao ha remocao, entao nao colide
    return len(records) + 1


def merge_patch(existing: Mapping[str, Any], patch: Mapping[str, Any]) -> dict:
    """Shallow merge: patch fields win, everything else is preserved."""
    merged = dict(existing)
    merged.update(patch)
    return merged
