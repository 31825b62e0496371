"""Persistent command-line settings stored as YAML."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

DEFAULT_NODE_ADDR = "grpc.trongrid.io:50051"
DEFAULT_TIMEOUT = 20
DEFAULT_PORT = "50051"
CONFIG_FILE_NAME = "config.default"

ERR_CONFIG_NOT_MATCH = "no config matchs"
ERR_EMPTY_ENDPOINT = "no endpoint has been set"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

PathLike = Union[str, "os.PathLike[str]"]


class ConfigError(ValueError):
    """Raised for an unknown setting or a malformed config file."""


@dataclass
class Config:
    """The settings schema; unset fields hold their zero values."""

    node: str = ""
    ledger: bool = False
    verbose: bool = False
    timeout: int = 0
    no_pretty: bool = False
    api_key: str = ""
    with_tls: bool = False

    @classmethod
    def default(cls) -> "Config":
        """Return the settings used when no usable config file exists."""
        return cls(node=DEFAULT_NODE_ADDR, timeout=DEFAULT_TIMEOUT)


# (attribute, YAML key, JSON key, expected type)
_FIELDS = (
    ("node", "node", "Node", str),
    ("ledger", "ledger", "Ledger", bool),
    ("verbose", "verbose", "Verbose", bool),
    ("timeout", "timeout", "Timeout", int),
    ("no_pretty", "noPretty", "NoPretty", bool),
    ("api_key", "apiKey", "APIKey", str),
    ("with_tls", "withTLS", "WithTLS", bool),
)


def default_config_dir() -> Path:
    """Return the directory that holds the config file by default."""
    return Path(os.environ.get("HOME", str(Path.home()))) / ".config" / "tronctl"


def config_path(config_dir: Optional[PathLike] = None) -> Path:
    """Return the config file path inside config_dir (or the default directory)."""
    directory = Path(config_dir) if config_dir is not None else default_config_dir()
    return directory / CONFIG_FILE_NAME


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ConfigError(f"invalid boolean: {text!r}")


def load_config(path: PathLike) -> Config:
    """Read a YAML config file; missing keys keep their zero values."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse config {path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} is not a mapping")
    config = Config()
    for attr, key, _, kind in _FIELDS:
        if key not in data or data[key] is None:
            continue
        value = data[key]
        if kind is int and isinstance(value, bool) or not isinstance(value, kind):
            raise ConfigError(f"invalid value for {key}: {value!r}")
        if kind is int and value < 0:
            raise ConfigError(f"invalid value for {key}: {value!r}")
        setattr(config, attr, value)
    return config


def save_config(config: Config, path: PathLike) -> None:
    """Write the config as YAML, readable by the owner only."""
    data = {key: getattr(config, attr) for attr, key, _, _ in _FIELDS}
    text = yaml.safe_dump(data, sort_keys=False)
    fd = os.open(os.fspath(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(text)


def init_config(config_dir: Optional[PathLike] = None) -> Config:
    """Load the config, writing the defaults when it is missing or unusable."""
    directory = Path(config_dir) if config_dir is not None else default_config_dir()
    directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    path = config_path(directory)
    try:
        config = load_config(path)
    except (OSError, ConfigError):
        config = Config()
    if not config.node:
        config = Config.default()
        save_config(config, path)
    return config


def set_option(config: Config, name: str, value: str) -> Config:
    """Change one setting by its command-line name and return the config."""
    if name == "node":
        if len(value.split(":")) == 1:
            value = f"{value}:{DEFAULT_PORT}"
        config.node = value
    elif name == "ledger":
        config.ledger = _parse_bool(value)
    elif name == "verbose":
        config.verbose = _parse_bool(value)
    elif name == "nopretty":
        config.no_pretty = _parse_bool(value)
    elif name == "apiKey":
        config.api_key = value
    elif name == "withTLS":
        config.with_tls = _parse_bool(value)
    else:
        raise ConfigError("parameter not found")
    return config


def _show(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def get_option(config: Config, name: str) -> str:
    """Return one setting, or all of them as JSON for the name 'all'."""
    if name == "all":
        data = {json_key: getattr(config, attr) for attr, _, json_key, _ in _FIELDS}
        return json.dumps(data, indent=2)
    names = {
        "node": config.node,
        "ledger": config.ledger,
        "verbose": config.verbose,
        "nopretty": config.no_pretty,
        "apiKey": config.api_key,
        "withTLS": config.with_tls,
    }
    if name not in names:
        raise ConfigError("parameter not found")
    return _show(names[name])