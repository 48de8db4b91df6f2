# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from dataclasses import dataclass
from typing import Any, Callable
from seedelf.bls12381 import (
    combine,
    curve_order,
    equal,
    from_int,
    is_identity,
    rng,
    scale,
    to_int,
    uncompress,
)
from seedelf.fiat_shamir import fiat_shamir_heuristic, message_challenge
from seedelf.files import artifact_path, save_json
from seedelf.plutus import bytes_constr
from seedelf.register import Register

# maps (datum, g_r) to the challenge for one transcript convention
ChallengeStrategy = Callable[[Register, str], int]


@dataclass(frozen=True)
class Proof:
    """
    A Schnorr proof `(z, g_r)` with `z = r + c*x` and `g_r = [r]alpha`.
    """

    z: int
    g_r: str

    def to_data(self) -> dict[str, Any]:
        return bytes_constr(from_int(self.z), self.g_r)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> "Proof":
        """
        Raises:
            ValueError: If the data is not a two field byte constructor.
        """
        try:
            zb, g_r = (field["bytes"] for field in data["fields"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Not a proof redeemer: {data!r}") from e
        return cls(z=to_int(zb), g_r=g_r)

    def to_file(self, path: str | None = None) -> None:
        """
        Serialize the proof to `../data/schnorr.json` unless a path is given.

        The output schema matches a Plutus/Aiken constructor encoding:
            {
              "constructor": 0,
              "fields": [
                {"bytes": z},
                {"bytes": g_r}
              ]
            }
        """
        save_json(path or artifact_path("schnorr"), self.to_data())


def _d_log_challenge(datum: Register, g_r: str) -> int:
    return fiat_shamir_heuristic(datum.alpha, g_r, datum.beta)


def _respond(x: int, r: int, c: int) -> int:
    return (r + c * x) % curve_order


def schnorr_proof(x: int, datum: Register, r: int | None = None) -> Proof:
    """
    Generate a non-interactive proof of knowledge of `x` for `beta = [x]alpha`.

    Commit:
        r  <-$ Z_q
        g_r = [r]alpha

    Challenge:
        c = H(alpha || g_r || beta)

    Response:
        z = r + c*x mod q

    Args:
        x: The secret scalar behind the register.
        datum: The register being proven, possibly a rerandomized variant.
        r: The nonce. Drawn from `rng()` when omitted. A nonce must never be
            used for two proofs with the same `x`; doing so reveals `x`.

    Returns:
        The proof `(z, g_r)`.
    """
    r = rng() if r is None else r
    g_r = scale(datum.alpha, r)
    c = _d_log_challenge(datum, g_r)
    return Proof(z=_respond(x, r, c), g_r=g_r)


def schnorr_signature(
    x: int, message: str, datum: Register, r: int | None = None
) -> Proof:
    """
    Sign a hex message with the secret behind a register.

    Same commitment and response as `schnorr_proof`, but the challenge is

        c = H(H(message) || g_r)

    Args:
        x: The secret scalar behind the register.
        message: The hex encoded message.
        datum: The register the signature verifies against.
        r: The nonce, drawn from `rng()` when omitted. Single use.

    Returns:
        The signature as a proof `(z, g_r)`.
    """
    r = rng() if r is None else r
    g_r = scale(datum.alpha, r)
    c = message_challenge(message, g_r)
    return Proof(z=_respond(x, r, c), g_r=g_r)


def verify_equation(datum: Register, proof: Proof, strategy: ChallengeStrategy) -> bool:
    """
    Check `[z]alpha == g_r + [c]beta` with `c` from the given strategy.

    All three points are decoded before anything is hashed, so a malformed
    encoding raises instead of rejecting. A register whose alpha is the
    identity is rejected since every proof with `g_r` at the identity
    satisfies the equation against it.

    Raises:
        MalformedPoint: If alpha, beta or g_r is not a G1 element.
    """
    for element in (datum.alpha, datum.beta, proof.g_r):
        uncompress(element)

    if is_identity(datum.alpha):
        return False

    c = strategy(datum, proof.g_r)
    lhs = scale(datum.alpha, proof.z)
    rhs = combine(proof.g_r, scale(datum.beta, c))
    return equal(lhs, rhs)


def d_log(datum: Register, proof: Proof) -> bool:
    """
    Verify a plain proof of knowledge for the secret behind a register.
    """
    return verify_equation(datum, proof, _d_log_challenge)


def verify(message: str, datum: Register, proof: Proof) -> bool:
    """
    Verify a message-bound signature under the secret behind a register.

    Raises:
        MalformedPoint: If a point in the datum or proof is malformed.
        ValueError: If the message is not a hex string.
    """
    return verify_equation(
        datum, proof, lambda _, g_r: message_challenge(message, g_r)
    )


# boundary names
verify_discrete_log = d_log
verify_signature = verify
