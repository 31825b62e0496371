"""Contract ABI types and argument encoding for smart-contract calls."""

from __future__ import annotations

import base64
import binascii
import json
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from Crypto.Hash import keccak

from tronkit.address import base58_to_address

_WORD = 32

_ARRAY_RE = re.compile(r"^(.+)\[(\d*)\]$")
_INT_RE = re.compile(r"^(u?int)(\d*)$")
_FIXED_BYTES_RE = re.compile(r"^bytes(\d+)$")
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_HEX_DIGITS_RE = re.compile(r"[+-]?[0-9a-fA-F]+")


@dataclass(frozen=True)
class AbiType:
    """A parsed ABI type; size is the bit width, byte count or array length."""

    class Kind(Enum):
        INT = "int"
        UINT = "uint"
        BOOL = "bool"
        STRING = "string"
        BYTES = "bytes"
        FIXED_BYTES = "fixed_bytes"
        ADDRESS = "address"
        SLICE = "slice"
        ARRAY = "array"

    kind: "AbiType.Kind"
    name: str
    size: int = 0
    elem: Optional["AbiType"] = None


@dataclass(frozen=True)
class Argument:
    """One named, typed argument of a contract method."""

    name: str
    type: AbiType
    indexed: bool = False


Kind = AbiType.Kind


def parse_type(type_str: str) -> AbiType:
    """Parse an ABI type string such as 'uint256', 'bytes32' or 'address[2]'."""
    match = _ARRAY_RE.match(type_str)
    if match:
        elem = parse_type(match.group(1))
        digits = match.group(2)
        if digits:
            return AbiType(Kind.ARRAY, f"{elem.name}[{digits}]", int(digits), elem)
        return AbiType(Kind.SLICE, f"{elem.name}[]", 0, elem)

    match = _INT_RE.match(type_str)
    if match:
        bits = int(match.group(2)) if match.group(2) else 256
        if bits < 8 or bits > 256 or bits % 8:
            raise ValueError(f"unsupported arg type: {type_str}")
        kind = Kind.UINT if match.group(1) == "uint" else Kind.INT
        return AbiType(kind, f"{match.group(1)}{bits}", bits)

    match = _FIXED_BYTES_RE.match(type_str)
    if match:
        size = int(match.group(1))
        if not 1 <= size <= 32:
            raise ValueError(f"unsupported arg type: {type_str}")
        return AbiType(Kind.FIXED_BYTES, type_str, size)

    simple = {
        "address": Kind.ADDRESS,
        "bool": Kind.BOOL,
        "string": Kind.STRING,
        "bytes": Kind.BYTES,
    }
    if type_str in simple:
        return AbiType(simple[type_str], type_str)
    raise ValueError(f"unsupported arg type: {type_str}")


def load_from_json(text: str) -> list[dict[str, Any]]:
    """Load a JSON list of single-entry {type: value} parameters."""
    if not text:
        return []
    data = json.loads(text)
    if not isinstance(data, list) or not all(isinstance(p, dict) for p in data):
        raise ValueError("parameters must be a JSON list of objects")
    return data


def signature(method: str) -> bytes:
    """Return the four-byte selector of a method signature."""
    return keccak.new(digest_bits=256, data=method.encode()).digest()[:4]


def get_padded_param(params: Iterable[Mapping[str, Any]]) -> bytes:
    """Encode a list of {type: value} parameters as ABI call data."""
    types: list[AbiType] = []
    values: list[Any] = []
    for param in params:
        if not isinstance(param, Mapping) or len(param) != 1:
            raise ValueError(f"invalid param {param!r}")
        ((type_str, value),) = param.items()
        try:
            abi_type = parse_type(type_str)
        except ValueError as exc:
            raise ValueError(f"invalid param {param!r}: {exc}") from exc
        types.append(abi_type)
        values.append(_coerce(abi_type, value))
    return _encode_sequence(types, values)


def pack(method: str, params: Iterable[Mapping[str, Any]]) -> bytes:
    """Return the method selector followed by the encoded parameters."""
    return signature(method) + get_padded_param(params)


def get_parser(entries: Iterable[Mapping[str, Any]], method: str) -> list[Argument]:
    """Return the output arguments of the named method in an ABI entry list."""
    for entry in entries:
        if entry.get("name") != method:
            continue
        arguments = []
        for output in entry.get("outputs") or ():
            type_str = output.get("type", "")
            try:
                abi_type = parse_type(type_str)
            except ValueError as exc:
                raise ValueError(f"invalid param {type_str}: {exc}") from exc
            arguments.append(
                Argument(
                    name=output.get("name", ""),
                    type=abi_type,
                    indexed=bool(output.get("indexed", False)),
                )
            )
        return arguments
    raise LookupError(f"method {method} not found")


def _int_range(abi_type: AbiType) -> tuple[int, int]:
    bits = abi_type.size
    if abi_type.kind is Kind.UINT:
        return 0, (1 << bits) - 1
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _parse_integer_text(text: str, allow_hex: bool) -> int:
    if allow_hex and text.startswith("0x"):
        digits = text[2:]
        if _HEX_DIGITS_RE.fullmatch(digits):
            return int(digits, 16)
    elif _DECIMAL_RE.fullmatch(text):
        return int(text, 10)
    raise ValueError(f"invalid integer {text!r}")


def _coerce_int(abi_type: AbiType, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"cannot use {type(value).__name__} as {abi_type.name}")
    number = (
        _parse_integer_text(value, allow_hex=abi_type.size > 64)
        if isinstance(value, str)
        else value
    )
    low, high = _int_range(abi_type)
    if not low <= number <= high:
        raise ValueError(f"value {number} out of range for {abi_type.name}")
    return number


def _coerce_bytes(abi_type: AbiType, value: Any) -> bytes:
    if isinstance(value, str):
        try:
            data = binascii.unhexlify(value)
        except (binascii.Error, ValueError):
            try:
                data = base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise ValueError(f"invalid bytes value {value!r}") from exc
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    else:
        raise TypeError(f"cannot use {type(value).__name__} as {abi_type.name}")
    if abi_type.kind is Kind.FIXED_BYTES and len(data) != abi_type.size:
        raise ValueError(f"invalid size: {abi_type.size}/{len(data)}")
    return data


def _coerce_address(value: Any) -> bytes:
    if not isinstance(value, str):
        raise ValueError(f"invalid address {value!r}")
    try:
        raw = base58_to_address(value)
    except ValueError as exc:
        raise ValueError(f"invalid address {value}: {exc}") from exc
    if len(raw) < 20:
        raise ValueError(f"invalid address {value}: too short")
    return bytes(raw[-20:])


def _coerce(abi_type: AbiType, value: Any) -> Any:
    kind = abi_type.kind
    if kind in (Kind.INT, Kind.UINT):
        return _coerce_int(abi_type, value)
    if kind is Kind.BOOL:
        if not isinstance(value, bool):
            raise TypeError(f"cannot use {type(value).__name__} as bool")
        return value
    if kind is Kind.STRING:
        if not isinstance(value, str):
            raise TypeError(f"cannot use {type(value).__name__} as string")
        return value.encode()
    if kind in (Kind.BYTES, Kind.FIXED_BYTES):
        return _coerce_bytes(abi_type, value)
    if kind is Kind.ADDRESS:
        return _coerce_address(value)
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"cannot use {type(value).__name__} as {abi_type.name}")
    if kind is Kind.ARRAY and len(value) != abi_type.size:
        raise ValueError(
            f"array {abi_type.name} expects {abi_type.size} items, got {len(value)}"
        )
    assert abi_type.elem is not None
    return [_coerce(abi_type.elem, item) for item in value]


def _is_dynamic(abi_type: AbiType) -> bool:
    if abi_type.kind in (Kind.STRING, Kind.BYTES, Kind.SLICE):
        return True
    if abi_type.kind is Kind.ARRAY:
        assert abi_type.elem is not None
        return _is_dynamic(abi_type.elem)
    return False


def _head_size(abi_type: AbiType) -> int:
    if abi_type.kind is Kind.ARRAY and not _is_dynamic(abi_type):
        assert abi_type.elem is not None
        return abi_type.size * _head_size(abi_type.elem)
    return _WORD


def _word(number: int) -> bytes:
    return (number % (1 << 256)).to_bytes(_WORD, "big")


def _pad_right(data: bytes) -> bytes:
    return data + b"\x00" * (-len(data) % _WORD)


def _encode(abi_type: AbiType, value: Any) -> bytes:
    kind = abi_type.kind
    if kind in (Kind.INT, Kind.UINT):
        return _word(value)
    if kind is Kind.BOOL:
        return _word(int(value))
    if kind is Kind.ADDRESS:
        return value.rjust(_WORD, b"\x00")
    if kind is Kind.FIXED_BYTES:
        return value.ljust(_WORD, b"\x00")
    if kind in (Kind.STRING, Kind.BYTES):
        return _word(len(value)) + _pad_right(value)
    assert abi_type.elem is not None
    body = _encode_sequence([abi_type.elem] * len(value), value)
    if kind is Kind.SLICE:
        return _word(len(value)) + body
    return body


def _encode_sequence(types: list[AbiType], values: list[Any]) -> bytes:
    heads: list[bytes] = []
    tails: list[bytes] = []
    offset = sum(_head_size(t) for t in types)
    for abi_type, value in zip(types, values):
        encoded = _encode(abi_type, value)
        if _is_dynamic(abi_type):
            heads.append(_word(offset))
            tails.append(encoded)
            offset += len(encoded)
        else:
            heads.append(encoded)
    return b"".join(heads + tails)