"""Amount normalisation and expected returns for TRC10 bancor exchanges."""

from __future__ import annotations

import math
import re
from typing import Union

TRX_TOKEN_ID = "_"
TRX_ALIASES = frozenset({"TRX", "0"})
SUN_PER_TRX = 10**6

_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

Number = Union[str, float, int]


def _parse_amount(amount: Number) -> float:
    if isinstance(amount, bool):
        raise TypeError("amount cannot be a boolean")
    if isinstance(amount, str):
        if not _FLOAT_RE.fullmatch(amount):
            raise ValueError(f"invalid syntax: {amount!r}")
        return float(amount)
    return float(amount)


def _canonical_id(token_id: str) -> str:
    return TRX_TOKEN_ID if token_id in TRX_ALIASES else token_id


def normalize_token(token_id: str, amount: Number) -> tuple[str, float]:
    """Validate an amount and map TRX to the exchange's '_' id.

    A TRX amount ('TRX' or '0') is converted to sun; any other token's
    amount is returned unscaled, for its own precision to be applied.
    """
    value = _parse_amount(amount)
    if not math.isfinite(value) or value <= 0:
        raise ValueError("invalid token amount")
    if token_id in TRX_ALIASES:
        return TRX_TOKEN_ID, value * SUN_PER_TRX
    return token_id, value


def expected_trade_amount(
    token_id: str,
    amount: float,
    first_token_id: str,
    first_balance: int,
    second_token_id: str,
    second_balance: int,
) -> int:
    """Estimate the tokens returned for selling amount of token_id.

    The estimate is amount divided by the pool ratio after the sale,
    rounded half up. The token must be one side of the exchange.
    """
    token = _canonical_id(token_id)
    if token == first_token_id:
        numerator = float(first_balance) + float(amount)
        denominator = float(second_balance)
    elif token == second_token_id:
        numerator = float(second_balance) + float(amount)
        denominator = float(first_balance)
    else:
        raise ValueError(
            "Token ID provided does not match excahnge "
            f"{first_token_id}/{second_token_id}"
        )

    if denominator == 0:
        if numerator == 0:
            raise ValueError("exchange pool is empty")
        # An infinite ratio leaves nothing to receive.
        return 0
    ratio = numerator / denominator
    if ratio == 0:
        raise ValueError("exchange pool is empty")
    expected = math.floor(float(amount) / ratio + 0.5)
    if not _INT64_MIN <= expected <= _INT64_MAX:
        raise ValueError(f"expected amount out of range: {expected}")
    return int(expected)