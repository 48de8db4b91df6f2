# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

from dataclasses import dataclass
from typing import Any
from seedelf.bls12381 import (
    curve_order,
    equal,
    g1_generator,
    g1_point,
    is_identity,
    scale,
)
from seedelf.files import artifact_path, save_json
from seedelf.plutus import bytes_constr, from_cbor, to_cbor


@dataclass(frozen=True)
class Register:
    """
    A public pair (alpha, beta) with beta = [x]alpha for some secret x.

    Both values are compressed G1 points. A register is never changed in
    place; rerandomizing returns a new, unlinkable variant.
    """

    alpha: str
    beta: str

    @classmethod
    def from_secret(cls, x: int) -> "Register":
        # the initial form uses the generator as alpha
        return cls(alpha=g1_generator, beta=g1_point(x))

    def rerandomize(self, d: int) -> "Register":
        """
        Scale both halves by the same scalar.

        `d` must be fresh secret randomness for every call; two variants that
        share a `d` with a known register can be linked.

        Raises:
            ValueError: If `d` is zero modulo the curve order.
        """
        if d % curve_order == 0:
            raise ValueError("rerandomizing by zero destroys the register")
        return Register(alpha=scale(self.alpha, d), beta=scale(self.beta, d))

    def is_owned_by(self, x: int) -> bool:
        if is_identity(self.alpha):
            return False
        return equal(scale(self.alpha, x), self.beta)

    def to_data(self) -> dict[str, Any]:
        return bytes_constr(self.alpha, self.beta)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> "Register":
        """
        Raises:
            ValueError: If the data is not a two field byte constructor.
        """
        try:
            alpha, beta = (field["bytes"] for field in data["fields"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Not a register datum: {data!r}") from e
        if data.get("constructor") != 0:
            raise ValueError(f"Not a register datum: {data!r}")
        return cls(alpha=alpha, beta=beta)

    def to_cbor(self) -> str:
        return to_cbor(self.to_data())

    @classmethod
    def from_cbor(cls, cbor_hex: str) -> "Register":
        return cls.from_data(from_cbor(cbor_hex))

    def to_file(self, path: str | None = None) -> None:
        save_json(path or artifact_path("register"), self.to_data())


def rerandomize(datum: Register, d: int) -> Register:
    return datum.rerandomize(d)
