"""Parsing of account permission rules for permission updates."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

# Contract types never granted to an active permission.
EXCLUDED_OPERATIONS = frozenset({"UpdateBrokerageContract", "ShieldedTransferContract"})


@dataclass
class Permission:
    """A named permission: signer weights, a threshold and allowed operations."""

    name: str
    threshold: int
    keys: dict[str, int] = field(default_factory=dict)
    operations: Optional[frozenset[str]] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the permission in the form sent with a permission update."""
        data: dict[str, Any] = {
            "name": self.name,
            "threshold": self.threshold,
            "keys": dict(self.keys),
        }
        if self.operations is not None:
            data["operations"] = {op: True for op in sorted(self.operations)}
        return data


def _parse_int64(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def parse_keys(text: str) -> dict[str, int]:
    """Parse 'ADDRESS1-WEIGHT+ADDRESS2-WEIGHT' into a map of address to weight."""
    keys: dict[str, int] = {}
    for key in text.split("+"):
        parts = key.split("-")
        if len(parts) != 2:
            raise ValueError(f"invalid key: {key}")
        try:
            keys[parts[0]] = _parse_int64(parts[1])
        except ValueError as exc:
            raise ValueError(f"invalid key: {key}") from exc
    return keys


def _parse_threshold(text: str) -> int:
    try:
        return _parse_int64(text)
    except ValueError as exc:
        raise ValueError(f"invalid threshold: {text}") from exc


def parse_permissions(
    entries: Iterable[str], contract_types: Iterable[str]
) -> tuple[Optional[Permission], Optional[Permission], list[Permission]]:
    """Parse 'TYPE:THRESHOLD:KEYS' rules into owner, witness and active permissions.

    TYPE is O (owner), W (witness) or A (active), in either case. Active
    permissions may use every contract type except the excluded ones.
    """
    rules = list(entries)
    if not rules:
        raise ValueError("at least one rule is expected")

    operations = frozenset(
        name for name in contract_types if name not in EXCLUDED_OPERATIONS
    )
    owner: Optional[Permission] = None
    witness: Optional[Permission] = None
    actives: list[Permission] = []
    active_counter = 0

    for rule in rules:
        parts = rule.split(":")
        if len(parts) != 3:
            raise ValueError(f"invalid format: {rule}")
        kind, threshold_text, keys_text = parts
        if kind in ("O", "o"):
            if owner is not None:
                raise ValueError("can have only one owner permission")
            threshold = _parse_threshold(threshold_text)
            owner = Permission("owner", threshold, parse_keys(keys_text))
        elif kind in ("W", "w"):
            if witness is not None:
                raise ValueError("can have only one witness permission")
            threshold = _parse_threshold(threshold_text)
            witness = Permission("witness", threshold, parse_keys(keys_text))
        elif kind in ("A", "a"):
            threshold = _parse_threshold(threshold_text)
            actives.append(
                Permission(
                    f"active{active_counter}",
                    threshold,
                    parse_keys(keys_text),
                    operations,
                )
            )
        else:
            raise ValueError(f"invalid type: {kind}")

    return owner, witness, actives