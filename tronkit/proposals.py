"""Parsing of network proposal parameters and approvals."""

from __future__ import annotations

import re
from collections.abc import Iterable

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _parse_int64(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def parse_proposals(entries: Iterable[str]) -> dict[int, int]:
    """Parse 'ID:VALUE' entries into a map of parameter id to value."""
    proposals: dict[int, int] = {}
    for entry in entries:
        parts = entry.split(":")
        if len(parts) != 2:
            raise ValueError(f"invalid proposal {parts}")
        try:
            param_id = _parse_int64(parts[0])
        except ValueError as exc:
            raise ValueError(f"invalid param ID: {parts[0]} {exc}") from exc
        if proposals.get(param_id, 0) > 0:
            raise ValueError(
                f"proposal colision {param_id}:{proposals[param_id]} -> {entry}"
            )
        try:
            proposals[param_id] = _parse_int64(parts[1])
        except ValueError as exc:
            raise ValueError(f"invalid vote count {parts[1]}. {exc}") from exc
    return proposals


def parse_approval(proposal_id: str, confirm: str) -> tuple[int, bool]:
    """Parse a proposal id and an approve/disapprove flag."""
    return _parse_int64(proposal_id), _parse_bool(confirm)