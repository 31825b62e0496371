# tronkit

Offline building blocks for working with the TRON network from Python:

- `tronkit.address`: 21-byte TRON addresses in Base58Check, hex and
  Base64 form, and an address derived from a secp256k1 public key.
- `tronkit.abi`: method selectors and ABI encoding of call parameters for
  smart contracts.
- `tronkit.votes`, `tronkit.permissions`, `tronkit.proposals`,
  `tronkit.exchange`: parsing and checking of the inputs that account,
  permission, proposal and Bancor exchange operations take.
- `tronkit.model`: a detailed account record with its JSON key names.
- `tronkit.config`: settings kept in a YAML file.
- `tronkit.flags`: a command-line value that holds a checked Base58 address.
- The `tronctl` command for address conversions and settings.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Addresses

```python
from tronkit.address import base58_to_address, hex_to_address

addr = base58_to_address("TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R")
print(addr.hex())                        # "0x41..." hex form
print(str(hex_to_address(addr.hex())))   # back to Base58Check
```

`Address` is a `bytes` subclass. `str()` gives its Base58Check form, or a
decimal number when the first byte is zero. `base58_to_address` and
`decode_check` raise `ValueError` on a bad character or checksum;
`encode_check` does the reverse. `hex_to_address` accepts hex with or without
`0x`, `base64_to_address` standard Base64, and `big_to_address` an integer
(left-padded to 21 bytes). `pubkey_to_address` takes a 64-byte public key, or
65 bytes led by `0x04`, and returns `0x41` followed by the last 20 bytes of
its Keccak-256 hash.

## Encoding contract parameters

Each parameter is a one-entry mapping from its ABI type to its value:

```python
from tronkit.abi import get_padded_param, pack, signature

data = get_padded_param([
    {"uint256": "43981"},
    {"uint256": "0xABCD"},
])
print(data.hex())
# 000000000000000000000000000000000000000000000000000000000000abcd
# 000000000000000000000000000000000000000000000000000000000000abcd

selector = signature("transfer(address,uint256)")   # first 4 bytes of Keccak-256
call = pack("transfer(address,uint256)", [
    {"address": "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"},
    {"uint256": "1000000"},
])
```

Supported types are `intN`/`uintN`, `bool`, `string`, `bytes`, `bytesN`,
`address`, fixed arrays `T[k]` and dynamic arrays `T[]`. Integers may be
Python ints or decimal strings; types wider than 64 bits also take `0x` hex
strings. Addresses are Base58 strings. Byte values are hex, falling back to
Base64, or raw `bytes`; a `bytesN` value must be exactly N bytes long.
Out-of-range values and wrong types raise.

`load_from_json` reads such a parameter list from JSON text, `parse_type`
turns a type string into an `AbiType`, and `get_parser(entries, method)`
returns the output `Argument`s of a method from a list of ABI entries
(raising `LookupError` if the method is absent).

## Operation inputs

```python
from tronkit.votes import to_sun, parse_votes, resource_from_flag
from tronkit.permissions import parse_permissions, parse_keys
from tronkit.proposals import parse_proposals, parse_approval
from tronkit.exchange import normalize_token, expected_trade_amount
```

- `to_sun("1.5")` gives `1500000`; fractions of a sun are dropped.
- `parse_votes(["WITNESS:COUNT", ...])` checks each Base58 witness address
  and returns a map of address to vote count; a repeated witness is an error.
- `resource_from_flag(0)` is `ResourceCode.BANDWIDTH`, `1` is `ENERGY`,
  anything else raises.
- `parse_permissions(rules, contract_types)` reads `TYPE:THRESHOLD:KEYS`
  rules, where TYPE is `O`, `W` or `A` and KEYS is
  `ADDRESS1-WEIGHT+ADDRESS2-WEIGHT`, and returns `(owner, witness, actives)`
  as `Permission` objects. Active permissions (`active0`, `active1`, …) may
  use every given contract type except `UpdateBrokerageContract` and
  `ShieldedTransferContract`.
- `parse_proposals(["ID:VALUE", ...])` returns a map of parameter id to
  value; `parse_approval("7", "true")` returns `(7, True)`.
- `normalize_token("TRX", "2")` returns `("_", 2000000.0)`; other token ids
  keep their amount unscaled. `expected_trade_amount` estimates what a trade
  against an exchange pool returns, rounded half up.

## Configuration

```python
from tronkit.config import init_config, load_config, save_config, set_option, get_option
```

`init_config(config_dir)` creates the directory (by default
`$HOME/.config/tronctl`) and loads `config.default` from it, writing the
defaults (node `grpc.trongrid.io:50051`, timeout 20) when the file is missing,
unreadable or has no node. `set_option` takes the names `node`, `ledger`,
`verbose`, `nopretty`, `apiKey` and `withTLS`, and appends port `:50051` to
a node given without one. `get_option` returns one setting as text, or all of
them as JSON for `all`. Unknown names raise `ConfigError`.

## Command line

```
tronctl utility base58-to-addr TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R
tronctl utility addr-to-base58 <HEX_ADDRESS>
tronctl config set node grpc.trongrid.io
tronctl config get all
tronctl version
```

`--config-dir DIR` selects another settings directory. `utility metadata`
and `utility metrics` exist but print nothing. Errors are printed to stderr
with exit status 1.

## What this package does not do

It does not connect to a TRON node. There is no network client, no
keystore or private-key storage, no transaction building, signing or
broadcasting, and no TRC10 or TRC20 token commands. The node, ledger and TLS
settings are stored and shown, but nothing in the package uses them to make
a connection.