# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging

from seedelf.bls12381 import rng, g1_point
from seedelf.constants import DATA_DIR, SEEDELF_PREFIX
from seedelf.elgamal import CypherText, cypher_key, encrypt
from seedelf.files import artifact_path, load_json, save_string
from seedelf.register import Register
from seedelf.schnorr import Proof, schnorr_proof, schnorr_signature
from seedelf.token_name import TxInput, first_input, personal

logger = logging.getLogger(__name__)


def create_seedelf(
    secret: int,
    inputs: list[TxInput],
    personal_msg: str = "",
    prefix: str = SEEDELF_PREFIX,
) -> tuple[str, Register]:
    """
    Create the artifacts for minting a new seedelf.

    High-level steps:
    1. Pick the first input in ledger order and derive the token name from it.
    2. Build the register for `secret` and rerandomize it with a fresh scalar
       so the new output is unlinkable to any other seedelf of the same secret.
    3. Write the register datum and the token name to disk.

    Side effects (writes files):
    - Register via `Register.to_file()`
    - Token name to ../data/seedelf.name

    Args:
        secret: The wallet secret scalar.
        inputs: Output references the transaction spends.
        personal_msg: Hex personalization, at most 15 bytes are kept.
        prefix: The token prefix.

    Returns:
        The token name and the register placed in the datum.
    """
    tx_id, idx = first_input(inputs)
    name = personal(tx_id, idx, prefix, personal_msg)

    datum = Register.from_secret(secret).rerandomize(rng())
    datum.to_file()
    save_string(f"{DATA_DIR}/seedelf.name", name)

    logger.info("created seedelf %s from %s#%d", name, tx_id, idx)
    return name, datum


def create_spend_proof(secret: int, datum: Register) -> Proof:
    """
    Prove ownership of a register so its output can be spent.

    Side effects (writes files):
    - Schnorr proof via `Proof.to_file()`
    """
    proof = schnorr_proof(secret, datum)
    proof.to_file()
    logger.info("wrote spend proof for %s", datum.beta)
    return proof


def create_signature(secret: int, message: str, datum: Register) -> Proof:
    """
    Sign a hex message under a register and write it to ../data/signature.json.
    """
    signature = schnorr_signature(secret, message, datum)
    signature.to_file(artifact_path("signature"))
    logger.info("signed %d byte message", len(message) // 2)
    return signature


def create_encryption(
    message: int, datum: Register, scaler: int | None = None
) -> CypherText:
    """
    Encrypt `[message]G1` to a register and write the cypher text datum.

    Args:
        message: The scalar encoded as a G1 point before encryption.
        datum: The recipient register.
        scaler: Sender randomness, drawn fresh when omitted.

    Returns:
        The cypher text.
    """
    cypher_text = encrypt(g1_point(message), rng() if scaler is None else scaler, datum)
    cypher_text.to_file()
    logger.info("wrote cypher text committed to %s", cypher_text.h)
    return cypher_text


def create_decryption_proof(secret: int, cypher_text: CypherText) -> str:
    """
    Write the blinding term `[x]c1` to ../data/cypher-key.point.

    The point proves the holder can decrypt this cypher text and nothing
    else.
    """
    key = cypher_key(cypher_text, secret)
    save_string(f"{DATA_DIR}/cypher-key.point", key)
    return key


def load_register(path: str | None = None) -> Register:
    return Register.from_data(load_json(path or artifact_path("register")))


def find_owned(secret: int, datums: list[str]) -> list[Register]:
    """
    Scan inline datums for the registers a secret controls.

    Datums that are not registers, or whose points do not decode, belong to
    something else and are skipped.

    Args:
        secret: The wallet secret scalar.
        datums: CBOR hex inline datums.

    Returns:
        The owned registers in input order.
    """
    owned = []
    for cbor_hex in datums:
        try:
            datum = Register.from_cbor(cbor_hex)
            if datum.is_owned_by(secret):
                owned.append(datum)
        except ValueError as e:
            logger.debug("skipping datum %s: %s", cbor_hex, e)
    logger.info("found %d of %d datums owned", len(owned), len(datums))
    return owned
