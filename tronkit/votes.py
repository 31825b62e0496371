"""Amount conversion, witness vote lists and resource selection for accounts."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from typing import Union

from tronkit.address import base58_to_address
from tronkit.model import ResourceCode

SUN_PER_TRX = 10**6

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _parse_int64(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def _parse_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    return float(text)


def to_sun(value: Union[str, float, int]) -> int:
    """Convert a TRX amount to sun, truncating any fraction of a sun."""
    amount = _parse_float(value) if isinstance(value, str) else float(value)
    if not math.isfinite(amount):
        raise ValueError(f"invalid amount: {value!r}")
    sun = int(amount * SUN_PER_TRX)
    if not _INT64_MIN <= sun <= _INT64_MAX:
        raise ValueError(f"amount out of range: {value!r}")
    return sun


def parse_votes(entries: Iterable[str]) -> dict[str, int]:
    """Parse 'WITNESS:COUNT' entries into a map of witness address to votes."""
    votes: dict[str, int] = {}
    for entry in entries:
        parts = entry.split(":")
        if len(parts) != 2:
            raise ValueError(f"invalid vote {parts}")
        witness, count_text = parts
        if votes.get(witness, 0) > 0:
            raise ValueError(f"vote colision {witness}:{votes[witness]} -> {entry}")
        try:
            witness_address = base58_to_address(witness)
        except ValueError as exc:
            raise ValueError(f"invalid address {witness}. {exc}") from exc
        try:
            count = _parse_int64(count_text)
        except ValueError as exc:
            raise ValueError(f"invalid vote count {count_text}. {exc}") from exc
        votes[str(witness_address)] = count
    return votes


def resource_from_flag(value: int) -> ResourceCode:
    """Map the freeze type flag (0 bandwidth, 1 energy) to a resource."""
    if value == 0:
        return ResourceCode.BANDWIDTH
    if value == 1:
        return ResourceCode.ENERGY
    raise ValueError("invalid resource. Use 0 for Bandwidth or 1 for Energy")