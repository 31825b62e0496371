import pytest

from tronkit.cli import build_parser, main
from tronkit.config import DEFAULT_NODE_ADDR

VALID = "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"


def test_base58_to_addr_and_back(capsys):
    assert main(["utility", "base58-to-addr", VALID]) == 0
    hex_form = capsys.readouterr().out.strip()
    assert hex_form.startswith("0x41")
    assert main(["utility", "addr-to-base58", hex_form]) == 0
    assert capsys.readouterr().out.strip() == VALID


def test_base58_to_addr_rejects_bad_checksum(capsys):
    assert main(["utility", "base58-to-addr", VALID[:-1] + "2"]) == 1
    assert "Error" in capsys.readouterr().err


def test_addr_to_base58_rejects_bad_hex(capsys):
    assert main(["utility", "addr-to-base58", "0xzz"]) == 1
    assert "Error" in capsys.readouterr().err


def test_version_goes_to_stderr(capsys):
    assert main(["version"]) == 0
    assert "TronCTL." in capsys.readouterr().err


def test_group_without_subcommand_prints_help(capsys):
    assert main(["utility"]) == 0
    assert "base58-to-addr" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "tronctl" in capsys.readouterr().out


def test_config_set_then_get(tmp_path, capsys):
    base = ["--config-dir", str(tmp_path), "config"]
    assert main(base + ["set", "apiKey", "placeholder"]) == 0
    assert main(base + ["get", "apiKey"]) == 0
    assert capsys.readouterr().out.strip() == "placeholder"


def test_config_get_default_node(tmp_path, capsys):
    assert main(["--config-dir", str(tmp_path), "config", "get", "node"]) == 0
    assert capsys.readouterr().out.strip() == DEFAULT_NODE_ADDR


def test_config_set_unknown_parameter(tmp_path, capsys):
    code = main(["--config-dir", str(tmp_path), "config", "set", "colour", "blue"])
    assert code == 1
    assert "parameter not found" in capsys.readouterr().err


def test_parser_requires_address_argument():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["utility", "base58-to-addr"])