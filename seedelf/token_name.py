# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from typing import NamedTuple

from seedelf.constants import PERSONAL_LIMIT, SEEDELF_PREFIX, TOKEN_NAME_LENGTH


class TxInput(NamedTuple):
    """An output reference spent by a transaction, `tx_id#index`."""

    tx_id: str
    index: int


def personal(tx_id: str, idx: int, prefix: str, msg: str) -> str:
    """
    Derive a personalized token name from a spent output reference.

        name = (prefix || msg[:15] || idx || tx_id)[:32]

    The output index is pushed onto the front of the transaction id. Since an
    output reference is spent at most once, names minted from distinct first
    inputs never collide.

    Args:
        tx_id: Hex transaction id, 32 bytes on chain.
        idx: Output index, a single byte.
        prefix: Hex prefix, 4 bytes for seedelfs.
        msg: Hex personalization, truncated to 15 bytes.

    Returns:
        The hex token name, at most 32 bytes.

    Raises:
        ValueError: If an argument is not hex or the index is not a byte.
    """
    if not 0 <= idx <= 255:
        raise ValueError(f"output index must fit in one byte, got {idx}")

    prepend_index = bytes([idx]) + bytes.fromhex(tx_id)
    trimmed = bytes.fromhex(msg)[:PERSONAL_LIMIT]
    name = bytes.fromhex(prefix) + trimmed + prepend_index
    return name[:TOKEN_NAME_LENGTH].hex()


derive_name = personal


def first_input(inputs: list[TxInput] | list[tuple[str, int]]) -> TxInput:
    """
    The first output reference in ledger order: by transaction id, then index.

    Raises:
        ValueError: If there are no inputs.
    """
    if not inputs:
        raise ValueError("a transaction has at least one input")
    refs = [TxInput(*i) for i in inputs]
    return min(refs, key=lambda i: (bytes.fromhex(i.tx_id), i.index))


def is_seedelf(name: str, prefix: str = SEEDELF_PREFIX) -> bool:
    return name.lower().startswith(prefix.lower())
