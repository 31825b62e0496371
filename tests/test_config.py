import json

import pytest
import yaml

from tronkit.config import (
    CONFIG_FILE_NAME,
    DEFAULT_NODE_ADDR,
    DEFAULT_TIMEOUT,
    Config,
    ConfigError,
    config_path,
    get_option,
    init_config,
    load_config,
    save_config,
    set_option,
)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "cfg.yaml"
    original = Config(
        node="grpc.example.com:50051",
        ledger=True,
        verbose=True,
        timeout=7,
        no_pretty=True,
        api_key="placeholder",
        with_tls=True,
    )
    save_config(original, path)
    assert load_config(path) == original


def test_saved_file_uses_yaml_key_names(tmp_path):
    path = tmp_path / "cfg.yaml"
    save_config(Config(no_pretty=True, api_key="placeholder"), path)
    data = yaml.safe_load(path.read_text())
    assert data["noPretty"] is True
    assert data["apiKey"] == "placeholder"
    assert "withTLS" in data


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_load_partial_file_keeps_zero_values(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("node: grpc.example.com:50051\n")
    config = load_config(path)
    assert config == Config(node="grpc.example.com:50051")


def test_load_rejects_wrong_types(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("ledger: maybe\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_init_config_writes_defaults(tmp_path):
    config_dir = tmp_path / "tronctl"
    config = init_config(config_dir)
    assert config.node == DEFAULT_NODE_ADDR
    assert config.timeout == DEFAULT_TIMEOUT
    assert config_path(config_dir) == config_dir / CONFIG_FILE_NAME
    assert load_config(config_path(config_dir)) == config


def test_init_config_keeps_existing(tmp_path):
    stored = Config(node="grpc.example.com:50051", verbose=True, timeout=5)
    save_config(stored, config_path(tmp_path))
    assert init_config(tmp_path) == stored


def test_init_config_replaces_corrupt_file(tmp_path):
    config_path(tmp_path).write_text("node: [unterminated\n")
    assert init_config(tmp_path) == Config.default()


def test_set_node_appends_default_port():
    config = set_option(Config(), "node", "grpc.example.com")
    assert config.node == "grpc.example.com:50051"


def test_set_node_keeps_given_port():
    config = set_option(Config(), "node", "grpc.example.com:9090")
    assert config.node == "grpc.example.com:9090"


@pytest.mark.parametrize(
    "name, attr",
    [("ledger", "ledger"), ("verbose", "verbose"), ("nopretty", "no_pretty"), ("withTLS", "with_tls")],
)
def test_set_boolean_options(name, attr):
    config = set_option(Config(), name, "true")
    assert getattr(config, attr) is True
    set_option(config, name, "F")
    assert getattr(config, attr) is False


def test_set_boolean_rejects_bad_value():
    with pytest.raises(ConfigError):
        set_option(Config(), "ledger", "yes")


def test_set_unknown_parameter():
    with pytest.raises(ConfigError, match="parameter not found"):
        set_option(Config(), "timeout", "5")


def test_get_options_reflect_set_values():
    config = set_option(Config(), "apiKey", "placeholder")
    set_option(config, "verbose", "1")
    assert get_option(config, "apiKey") == "placeholder"
    assert get_option(config, "verbose") == "true"
    assert get_option(config, "ledger") == "false"


def test_get_all_is_json():
    config = Config.default()
    data = json.loads(get_option(config, "all"))
    assert data["Node"] == DEFAULT_NODE_ADDR
    assert data["Timeout"] == DEFAULT_TIMEOUT
    assert data["APIKey"] == ""


def test_get_unknown_parameter():
    with pytest.raises(ConfigError):
        get_option(Config(), "timeout")