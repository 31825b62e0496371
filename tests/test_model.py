import json

from tronkit.model import Account, FrozenResource, ResourceCode


def _sample():
    return Account(
        address="TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R",
        type="Normal",
        balance=5,
        assets={"1000001": 3},
        frozen_resources=[
            FrozenResource(ResourceCode.ENERGY, amount=9, delegate_to="TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"),
        ],
        votes={"TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R": 4},
        energy_total=11,
    )


def test_to_dict_uses_wire_keys():
    data = _sample().to_dict()
    assert set(data) == {
        "address", "type", "name", "id", "balance", "allowance", "lastWithdraw",
        "isWitness", "isElected", "assetList", "tronPower", "tronPowerUsed",
        "frozenBalance", "frozenList", "voteList", "bandwidthTotal",
        "bandwidthUsed", "energyTotal", "energyUsed",
    }
    assert data["assetList"] == {"1000001": 3}
    assert data["energyTotal"] == 11


def test_frozen_resource_serialises_enum_as_number():
    data = _sample().to_dict()
    assert data["frozenList"] == [
        {
            "Type": int(ResourceCode.ENERGY),
            "Amount": 9,
            "DelegateTo": "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R",
            "Expire": 0,
        }
    ]


def test_to_dict_is_json_serialisable_round_trip():
    data = _sample().to_dict()
    assert json.loads(json.dumps(data)) == data


def test_default_collections_are_independent():
    first, second = Account(), Account()
    first.assets["x"] = 1
    assert second.to_dict()["assetList"] == {}


def test_resource_codes_match_flag_values():
    assert ResourceCode(0) is ResourceCode.BANDWIDTH
    assert ResourceCode(1) is ResourceCode.ENERGY