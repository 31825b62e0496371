"""Detailed account view and frozen-resource records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ResourceCode(IntEnum):
    """Resource gained by freezing TRX."""

    BANDWIDTH = 0
    ENERGY = 1


@dataclass
class FrozenResource:
    """An amount frozen for a resource, possibly delegated to another account."""

    type: ResourceCode
    amount: int = 0
    delegate_to: str = ""
    expire: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "Type": int(self.type),
            "Amount": self.amount,
            "DelegateTo": self.delegate_to,
            "Expire": self.expire,
        }


@dataclass
class Account:
    """A detailed account view as reported by the account info command."""

    address: str = ""
    type: str = ""
    name: str = ""
    id: str = ""
    balance: int = 0
    allowance: int = 0
    last_withdraw: int = 0
    is_witness: bool = False
    is_elected: bool = False
    assets: dict[str, int] = field(default_factory=dict)
    tron_power: int = 0
    tron_power_used: int = 0
    frozen_balance: int = 0
    frozen_resources: list[FrozenResource] = field(default_factory=list)
    votes: dict[str, int] = field(default_factory=dict)
    bw_total: int = 0
    bw_used: int = 0
    energy_total: int = 0
    energy_used: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the account as a JSON-ready dict with its wire key names."""
        return {
            "address": self.address,
            "type": self.type,
            "name": self.name,
            "id": self.id,
            "balance": self.balance,
            "allowance": self.allowance,
            "lastWithdraw": self.last_withdraw,
            "isWitness": self.is_witness,
            "isElected": self.is_elected,
            "assetList": dict(self.assets),
            "tronPower": self.tron_power,
            "tronPowerUsed": self.tron_power_used,
            "frozenBalance": self.frozen_balance,
            "frozenList": [item.to_dict() for item in self.frozen_resources],
            "voteList": dict(self.votes),
            "bandwidthTotal": self.bw_total,
            "bandwidthUsed": self.bw_used,
            "energyTotal": self.energy_total,
            "energyUsed": self.energy_used,
        }