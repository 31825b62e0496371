import pytest

from tronkit.abi import (
    AbiType,
    get_padded_param,
    get_parser,
    load_from_json,
    pack,
    parse_type,
    signature,
)
from tronkit.address import base58_to_address

SAMPLE = "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"


def test_abi_param():
    big = int("100000000000000000000")
    native = get_padded_param(
        [
            {"string": "KLV Test Token"},
            {"string": "KLV"},
            {"uint8": 6},
            {"uint256": big},
        ]
    )
    assert len(native) == 256

    textual = get_padded_param(
        [
            {"string": "KLV Test Token"},
            {"string": "KLV"},
            {"uint8": "6"},
            {"uint256": str(big)},
        ]
    )
    assert len(textual) == 256
    assert textual == native


def test_abi_param_array():
    encoded = get_padded_param([{"address[2]": [SAMPLE, SAMPLE]}])
    assert len(encoded) == 64
    raw = base58_to_address(SAMPLE)
    assert encoded[12:32] == raw[1:]
    assert encoded[:12] == bytes(12)


def test_abi_param_array_uint256():
    encoded = get_padded_param(
        [{"uint256[2]": ["100000000000000000000", "200000000000000000000"]}]
    )
    assert len(encoded) == 64
    assert encoded.hex() == (
        "0000000000000000000000000000000000000000000000056bc75e2d63100000"
        "00000000000000000000000000000000000000000000000ad78ebc5ac6200000"
    )


def test_abi_param_array_bytes():
    params = load_from_json(
        """
    [
        {"bytes32": "0001020001020001020001020001020001020001020001020001020001020001"}
    ]
    """
    )
    encoded = get_padded_param(params)
    assert len(encoded) == 32
    assert encoded.hex() == (
        "0001020001020001020001020001020001020001020001020001020001020001"
    )


def test_abi_hex_uint256():
    encoded = get_padded_param([{"uint256": "43981"}, {"uint256": "0xABCD"}])
    assert len(encoded) == 64
    assert encoded.hex() == (
        "000000000000000000000000000000000000000000000000000000000000abcd"
        "000000000000000000000000000000000000000000000000000000000000abcd"
    )


def test_negative_int_is_twos_complement():
    assert get_padded_param([{"int8": -1}]) == b"\xff" * 32


def test_param_with_two_keys_is_rejected():
    with pytest.raises(ValueError):
        get_padded_param([{"uint8": 1, "uint16": 2}])


def test_unknown_type_is_rejected():
    with pytest.raises(ValueError):
        get_padded_param([{"uint7": 1}])


def test_fixed_bytes_size_mismatch():
    with pytest.raises(ValueError):
        get_padded_param([{"bytes32": "0001"}])


def test_out_of_range_uint8():
    with pytest.raises(ValueError):
        get_padded_param([{"uint8": 256}])


def test_invalid_address_is_rejected():
    with pytest.raises(ValueError):
        get_padded_param([{"address": "not-an-address"}])


def test_signature_of_transfer():
    assert signature("transfer(address,uint256)").hex() == "a9059cbb"


def test_pack_is_selector_then_params():
    params = [{"address": SAMPLE}, {"uint256": "43981"}]
    packed = pack("transfer(address,uint256)", params)
    assert packed[:4] == signature("transfer(address,uint256)")
    assert packed[4:] == get_padded_param(params)


def test_parse_type_defaults_and_nesting():
    assert parse_type("uint").size == 256
    nested = parse_type("uint256[2][]")
    assert nested.kind is AbiType.Kind.SLICE
    assert nested.elem.kind is AbiType.Kind.ARRAY
    assert nested.elem.size == 2


@pytest.mark.parametrize("bad", ["uint7", "bytes33", "tuple", "int512"])
def test_parse_type_rejects(bad):
    with pytest.raises(ValueError):
        parse_type(bad)


def test_load_from_json_empty_and_invalid():
    assert load_from_json("") == []
    with pytest.raises(ValueError):
        load_from_json('{"uint8": 1}')


def test_get_parser_returns_outputs():
    entries = [
        {"name": "name", "outputs": [{"name": "", "type": "string"}]},
        {
            "name": "balanceOf",
            "outputs": [{"name": "balance", "type": "uint256", "indexed": False}],
        },
    ]
    arguments = get_parser(entries, "balanceOf")
    assert len(arguments) == 1
    assert arguments[0].name == "balance"
    assert arguments[0].type.kind is AbiType.Kind.UINT
    assert arguments[0].type.size == 256


def test_get_parser_missing_method():
    with pytest.raises(LookupError):
        get_parser([{"name": "name", "outputs": []}], "symbol")