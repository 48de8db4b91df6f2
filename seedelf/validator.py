# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from dataclasses import dataclass, field
from seedelf.constants import SEEDELF_PREFIX
from seedelf.errors import ExclusivityViolation, ProofRejected
from seedelf.policy import check_exclusivity, split_mint
from seedelf.register import Register
from seedelf.schnorr import Proof, d_log, verify
from seedelf.token_name import TxInput, first_input, personal


@dataclass(frozen=True)
class MintContext:
    """
    The fields a mint or burn needs from its transaction.

    Attributes:
        inputs: Spent output references.
        mint: This policy's mint value, token name to signed quantity.
        personal: The hex personalization from the redeemer.
        prefix: The reserved token prefix.
    """

    inputs: tuple[TxInput, ...]
    mint: dict[str, int] = field(default_factory=dict)
    personal: str = ""
    prefix: str = SEEDELF_PREFIX

    def expected_name(self) -> str:
        ref = first_input(list(self.inputs))
        return personal(ref.tx_id, ref.index, self.prefix, self.personal)


@dataclass(frozen=True)
class SpendContext:
    """A register locked output spent with a discrete log proof."""

    datum: Register
    proof: Proof


@dataclass(frozen=True)
class SignContext:
    """A message signed under the secret behind a register."""

    message: str
    datum: Register
    proof: Proof


Context = MintContext | SpendContext | SignContext


def validate(context: Context) -> bool:
    """
    Resolve the context variant and run its check.

    Returns:
        True to accept the surrounding operation, False to reject it.

    Raises:
        MalformedPoint: If a register or proof point does not decode.
        TypeError: If the context is not a known variant.
    """
    if isinstance(context, MintContext):
        minted, burned = split_mint(context.mint)
        # a burn never needs the derived name
        expected = context.expected_name() if minted else None
        return check_exclusivity(minted, burned, context.prefix, expected)
    if isinstance(context, SpendContext):
        return d_log(context.datum, context.proof)
    if isinstance(context, SignContext):
        return verify(context.message, context.datum, context.proof)
    raise TypeError(f"Unknown context: {type(context).__name__}")


def enforce(context: Context) -> None:
    """
    Like `validate` but fails the way an on-chain validator does.

    Raises:
        ExclusivityViolation: If a mint context is neither a pure mint nor a
            pure burn.
        ProofRejected: If a spend or sign context fails verification.
    """
    if validate(context):
        return
    if isinstance(context, MintContext):
        raise ExclusivityViolation("transaction must mint one or burn one seedelf")
    raise ProofRejected("verification equation does not hold")
