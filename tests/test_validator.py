import pytest

from seedelf.bls12381 import rng
from seedelf.constants import SEEDELF_PREFIX
from seedelf.errors import ExclusivityViolation, ProofRejected
from seedelf.register import Register
from seedelf.schnorr import schnorr_proof, schnorr_signature
from seedelf.token_name import TxInput, personal
from seedelf.validator import MintContext, SignContext, SpendContext, enforce, validate

SECRET = 1234567890
INPUTS = (TxInput("bb" * 32, 0), TxInput("aa" * 32, 4))
NAME = personal("aa" * 32, 4, SEEDELF_PREFIX, "acab")


def test_expected_name_uses_first_input():
    ctx = MintContext(inputs=INPUTS, mint={NAME: 1}, personal="acab")
    assert ctx.expected_name() == NAME


def test_mint_context():
    assert validate(MintContext(inputs=INPUTS, mint={NAME: 1}, personal="acab"))


def test_mint_context_with_wrong_personal():
    assert not validate(MintContext(inputs=INPUTS, mint={NAME: 1}, personal="beef"))


def test_burn_context():
    assert validate(MintContext(inputs=INPUTS, mint={NAME: -1}))


def test_burn_context_does_not_derive_a_name():
    assert validate(MintContext(inputs=(), mint={NAME: -1}))
    assert not validate(MintContext(inputs=(), mint={"cafe": -1}))


def test_mint_and_burn_context():
    other = personal("cc" * 32, 0, SEEDELF_PREFIX, "")
    ctx = MintContext(inputs=INPUTS, mint={NAME: 1, other: -1}, personal="acab")
    assert not validate(ctx)
    with pytest.raises(ExclusivityViolation):
        enforce(ctx)


def test_spend_context():
    datum = Register.from_secret(SECRET).rerandomize(rng())
    ctx = SpendContext(datum=datum, proof=schnorr_proof(SECRET, datum))
    assert validate(ctx)
    enforce(ctx)


def test_spend_context_with_wrong_secret():
    datum = Register.from_secret(SECRET)
    ctx = SpendContext(datum=datum, proof=schnorr_proof(SECRET + 1, datum))
    assert not validate(ctx)
    with pytest.raises(ProofRejected):
        enforce(ctx)


def test_sign_context():
    datum = Register.from_secret(SECRET)
    signature = schnorr_signature(SECRET, "acab", datum)
    assert validate(SignContext(message="acab", datum=datum, proof=signature))
    assert not validate(SignContext(message="beef", datum=datum, proof=signature))


def test_unknown_context():
    with pytest.raises(TypeError):
        validate("mint")


if __name__ == "__main__":
    pytest.main()
