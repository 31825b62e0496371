"""TRON addresses, contract ABI encoding, operation input parsing and settings."""

__version__ = "0.1.0"