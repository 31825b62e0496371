"""A command-line value that holds a validated Base58 Tron address."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tronkit.address import Address, base58_to_address


@dataclass
class TronAddress:
    """A Base58 address string, checked when it is set."""

    address: str = ""

    type_name = "tron-address"

    def __str__(self) -> str:
        return self.address

    def set(self, text: str) -> None:
        """Validate text as a Base58Check address and store it."""
        try:
            base58_to_address(text)
        except ValueError as exc:
            raise ValueError(f"not a valid one address: {exc}") from exc
        self.address = text

    def get_address(self) -> Optional[Address]:
        """Return the decoded address, or None if none valid is held."""
        try:
            return base58_to_address(self.address)
        except ValueError:
            return None