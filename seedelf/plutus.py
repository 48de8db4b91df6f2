# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# seedelf/plutus.py

from typing import Any

import cbor2

# constructor tags from the plutus data cddl
SMALL_TAG_BASE = 121
LARGE_TAG_BASE = 1280
GENERAL_TAG = 102


def constr(index: int, fields: list[dict[str, Any]]) -> dict[str, Any]:
    return {"constructor": index, "fields": fields}


def bytes_constr(*values: str, index: int = 0) -> dict[str, Any]:
    """
    Build a constructor whose fields are all byte strings.

    Args:
        values: Hex strings, one per field, in field order.
        index: The constructor index.

    Returns:
        The detailed-schema JSON form used by cardano-cli.
    """
    return constr(index, [{"bytes": v} for v in values])


def _tag_for(index: int) -> int:
    if index < 7:
        return SMALL_TAG_BASE + index
    if index < 128:
        return LARGE_TAG_BASE + (index - 7)
    return GENERAL_TAG


def _index_for(tag: int) -> int | None:
    if SMALL_TAG_BASE <= tag < SMALL_TAG_BASE + 7:
        return tag - SMALL_TAG_BASE
    if LARGE_TAG_BASE <= tag < LARGE_TAG_BASE + 121:
        return tag - LARGE_TAG_BASE + 7
    return None


def _encode(data: dict[str, Any]) -> Any:
    if "bytes" in data:
        return bytes.fromhex(data["bytes"])
    if "int" in data:
        return int(data["int"])
    if "list" in data:
        return [_encode(d) for d in data["list"]]
    if "constructor" in data:
        index = data["constructor"]
        fields = [_encode(d) for d in data["fields"]]
        tag = _tag_for(index)
        if tag == GENERAL_TAG:
            return cbor2.CBORTag(tag, [index, fields])
        return cbor2.CBORTag(tag, fields)
    raise ValueError(f"Unsupported plutus data: {data!r}")


def _decode(value: Any) -> dict[str, Any]:
    if isinstance(value, bytes):
        return {"bytes": value.hex()}
    if isinstance(value, bool):
        raise ValueError("Booleans are not plutus data")
    if isinstance(value, int):
        return {"int": value}
    if isinstance(value, list):
        return {"list": [_decode(v) for v in value]}
    if isinstance(value, cbor2.CBORTag):
        if value.tag == GENERAL_TAG:
            payload = value.value
            if (
                not isinstance(payload, (list, tuple))
                or len(payload) != 2
                or not isinstance(payload[0], int)
                or isinstance(payload[0], bool)
                or not isinstance(payload[1], (list, tuple))
            ):
                raise ValueError("Malformed general constructor")
            index, fields = payload
            return constr(index, [_decode(f) for f in fields])
        index = _index_for(value.tag)
        if index is None:
            raise ValueError(f"Unexpected CBOR tag {value.tag}")
        if not isinstance(value.value, (list, tuple)):
            raise ValueError(f"Constructor fields must be an array, got {type(value.value).__name__}")
        return constr(index, [_decode(f) for f in value.value])
    raise ValueError(f"Expected plutus data, got {type(value).__name__}")


def to_cbor(data: dict[str, Any]) -> str:
    """
    Encode detailed-schema plutus data JSON as a CBOR hex string.

    Byte strings are written as definite-length strings, so values must not
    exceed the 64 byte chunk limit of the ledger.

    Args:
        data: Plutus data in the `{"constructor": .., "fields": [..]}` form.

    Returns:
        The CBOR encoding as a hex string.

    Raises:
        ValueError: If the structure is not plutus data or a byte string
            is longer than 64 bytes.
    """
    _check_chunks(data)
    return cbor2.dumps(_encode(data)).hex()


def from_cbor(cbor_hex: str) -> dict[str, Any]:
    """
    Decode a CBOR hex string into detailed-schema plutus data JSON.

    Accepts both definite and indefinite length arrays, which is what
    on-chain inline datums use.

    Raises:
        ValueError: If the CBOR is not valid plutus data.
    """
    try:
        value = cbor2.loads(bytes.fromhex(cbor_hex))
    except cbor2.CBORDecodeError as e:
        raise ValueError(f"Invalid CBOR: {e}") from e
    return _decode(value)


def _check_chunks(data: dict[str, Any]) -> None:
    if "bytes" in data and len(data["bytes"]) > 128:
        raise ValueError("Byte strings longer than 64 bytes are not supported")
    for d in data.get("fields", []) + data.get("list", []):
        _check_chunks(d)
