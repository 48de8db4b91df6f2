# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from dataclasses import dataclass
from typing import Any
from seedelf.bls12381 import combine, compress, invert, is_identity, scale, uncompress
from seedelf.errors import DegenerateMessage, ProofRejected
from seedelf.files import artifact_path, save_json
from seedelf.hashing import generate
from seedelf.plutus import bytes_constr
from seedelf.register import Register


@dataclass(frozen=True)
class CypherText:
    """
    ElGamal ciphertext `(c1, c2)` of a G1 message plus `h = H(message)`.
    """

    c1: str
    c2: str
    h: str

    def to_data(self) -> dict[str, Any]:
        return bytes_constr(self.c1, self.c2, self.h)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> "CypherText":
        try:
            c1, c2, h = (field["bytes"] for field in data["fields"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Not a cypher text datum: {data!r}") from e
        return cls(c1=c1, c2=c2, h=h)

    def to_file(self, path: str | None = None) -> None:
        save_json(path or artifact_path("cypher-text"), self.to_data())


def encrypt(message: str, scaler: int, datum: Register) -> CypherText:
    """
    Encrypt a G1 message to a register.

        c1 = [s]alpha
        c2 = message + [s]beta
        h  = H(message)

    Args:
        message: The compressed G1 point being encrypted.
        scaler: Single use sender randomness `s`.
        datum: The recipient register.

    Returns:
        The cypher text.
    """
    c1 = scale(datum.alpha, scaler)
    c2 = combine(message, scale(datum.beta, scaler))
    # re-encode so the hash is over the canonical compression
    h = generate(compress(uncompress(message)))
    return CypherText(c1=c1, c2=c2, h=h)


def cypher_key(cypher_text: CypherText, x: int) -> str:
    """The blinding term `[x]c1`, computable only by the holder of `x`."""
    return scale(cypher_text.c1, x)


def _recover(cypher_text: CypherText, key: str) -> str:
    return combine(cypher_text.c2, invert(key))


def proves_decryption(cypher_text: CypherText, key: str) -> bool:
    """
    Check that `key` is the blinding term of the cypher text.

    Accepts iff `m = c2 - key` is not the identity and `H(m) == h`. Revealing
    `key` shows the ability to decrypt this one cypher text without
    revealing the secret behind the register.

    Raises:
        MalformedPoint: If c1, c2 or the key is not a G1 element.
    """
    uncompress(cypher_text.c1)
    m = _recover(cypher_text, key)
    if is_identity(m):
        return False
    return bytes.fromhex(generate(m)) == bytes.fromhex(cypher_text.h)


def decrypt(cypher_text: CypherText, x: int) -> str:
    """
    Recover the G1 message with the secret behind the register.

    Raises:
        DegenerateMessage: If the recovered message is the identity.
        ProofRejected: If the recovered message does not match `h`, i.e.
            `x` is not the recipient's secret.
    """
    m = _recover(cypher_text, cypher_key(cypher_text, x))
    if is_identity(m):
        raise DegenerateMessage("recovered message is the identity")
    if bytes.fromhex(generate(m)) != bytes.fromhex(cypher_text.h):
        raise ProofRejected("recovered message does not match the commitment")
    return m


verify_decryption = proves_decryption
