"""The tronctl command line: version, utility and config commands."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from tronkit.address import base58_to_address, hex_to_address
from tronkit.config import (
    ConfigError,
    config_path,
    get_option,
    init_config,
    save_config,
    set_option,
)

VERSION = "0.1.0"
PROG = "tronctl"


def _version(args: argparse.Namespace) -> None:
    print(f"TronCTL. {PROG} version {VERSION}", file=sys.stderr)


def _nothing(args: argparse.Namespace) -> None:
    return None


def _base58_to_addr(args: argparse.Namespace) -> None:
    print(base58_to_address(args.address).hex())


def _addr_to_base58(args: argparse.Namespace) -> None:
    address = hex_to_address(args.address)
    if not address:
        raise ValueError(f"invalid address {args.address!r}")
    print(address)


def _config_set(args: argparse.Namespace) -> None:
    config = init_config(args.config_dir)
    set_option(config, args.param, args.value)
    save_config(config, config_path(args.config_dir))


def _config_get(args: argparse.Namespace) -> None:
    print(get_option(init_config(args.config_dir), args.param))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every command."""
    parser = argparse.ArgumentParser(prog=PROG, description="Tron command line tool")
    parser.add_argument(
        "--config-dir",
        default=None,
        help="directory of the config file (default: ~/.config/tronctl)",
    )
    commands = parser.add_subparsers(dest="command")

    version = commands.add_parser("version", help="Show version")
    version.set_defaults(handler=_version)

    utility = commands.add_parser("utility", help="common tron utilities")
    utility.set_defaults(group_help=utility.format_help)
    utilities = utility.add_subparsers(dest="utility_command")
    utilities.add_parser(
        "metadata", help="data includes network specific values"
    ).set_defaults(handler=_nothing)
    utilities.add_parser(
        "metrics", help="mostly in-memory fluctuating values"
    ).set_defaults(handler=_nothing)
    to_hex = utilities.add_parser(
        "base58-to-addr", help="0x Address of a base58 one-address"
    )
    to_hex.add_argument("address")
    to_hex.set_defaults(handler=_base58_to_addr)
    to_b58 = utilities.add_parser(
        "addr-to-base58", help="base58 tron-address of an 0x address"
    )
    to_b58.add_argument("address")
    to_b58.set_defaults(handler=_addr_to_base58)

    config = commands.add_parser("config", help="update default config")
    config.set_defaults(group_help=config.format_help)
    config_commands = config.add_subparsers(dest="config_command")
    config_set = config_commands.add_parser("set", help="set default config")
    config_set.add_argument("param")
    config_set.add_argument("value")
    config_set.set_defaults(handler=_config_set)
    config_get = config_commands.add_parser("get", help="get default config")
    config_get.add_argument("param")
    config_get.set_defaults(handler=_config_get)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        print(getattr(args, "group_help", parser.format_help)())
        return 0
    try:
        handler(args)
    except (ValueError, ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")
    sys.exit(main())