"""Tron account addresses and their Base58Check, hex and Base64 forms."""

from __future__ import annotations

import base64
import binascii
import hashlib
import re

from Crypto.Hash import keccak

HASH_LENGTH = 32
ADDRESS_LENGTH = 21
ADDRESS_LENGTH_BASE58 = 34
TRON_BYTE_PREFIX = 0x41

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_INDEX = {char: index for index, char in enumerate(_ALPHABET)}
_HEX_RE = re.compile(r"[0-9a-fA-F]*")


class Address(bytes):
    """The raw bytes of a Tron account address, normally 21 bytes led by 0x41."""

    def hex(self) -> str:  # type: ignore[override]
        """Return the address as a 0x-prefixed hex string."""
        digits = bytes(self).hex()
        return "0x" + (digits or "0")

    def __str__(self) -> str:
        if not self:
            return ""
        if self[0] == 0:
            return str(int.from_bytes(self, "big"))
        return encode_check(bytes(self))

    def __repr__(self) -> str:
        return f"Address({str(self)!r})"


def _double_sha256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return "1" * leading_zeros + "".join(reversed(digits))


def _b58decode(text: str) -> bytes:
    number = 0
    for char in text:
        try:
            number = number * 58 + _ALPHABET_INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * leading_ones + body


def encode_check(data: bytes) -> str:
    """Encode bytes as Base58 with a four-byte double-SHA256 checksum."""
    payload = bytes(data)
    return _b58encode(payload + _double_sha256(payload)[:4])


def decode_check(text: str) -> bytes:
    """Decode a Base58Check string, verifying its checksum."""
    raw = _b58decode(text)
    if len(raw) < 4:
        raise ValueError("b58 check error")
    payload, checksum = raw[:-4], raw[-4:]
    if _double_sha256(payload)[:4] != checksum:
        raise ValueError("b58 check error")
    return payload


def big_to_address(value: int) -> Address:
    """Return the address whose bytes are the big-endian form of value."""
    if value < 0:
        raise ValueError("address value cannot be negative")
    raw = value.to_bytes((value.bit_length() + 7) // 8, "big")
    if len(raw) > ADDRESS_LENGTH:
        raise ValueError(f"value does not fit in {ADDRESS_LENGTH} bytes")
    return Address(raw.rjust(ADDRESS_LENGTH, b"\x00"))


def hex_to_address(text: str) -> Address:
    """Parse a hex string, with or without 0x, into an address."""
    digits = text[2:] if text[:2] in ("0x", "0X") else text
    if not _HEX_RE.fullmatch(digits):
        raise ValueError(f"invalid hex string {text!r}")
    if len(digits) % 2:
        digits = "0" + digits
    return Address(bytes.fromhex(digits))


def base58_to_address(text: str) -> Address:
    """Parse a Base58Check address string."""
    return Address(decode_check(text))


def base64_to_address(text: str) -> Address:
    """Parse a standard Base64 string into an address."""
    try:
        return Address(base64.b64decode(text, validate=True))
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 address {text!r}: {exc}") from exc


def pubkey_to_address(public_key: bytes) -> Address:
    """Derive the address of an uncompressed secp256k1 public key.

    The key is given as 64 bytes (x then y) or 65 bytes led by 0x04.
    """
    key = bytes(public_key)
    if len(key) == 65 and key[0] == 0x04:
        key = key[1:]
    if len(key) != 64:
        raise ValueError("public key must be 64 raw or 65 uncompressed bytes")
    digest = keccak.new(digest_bits=256, data=key).digest()
    return Address(bytes([TRON_BYTE_PREFIX]) + digest[-20:])