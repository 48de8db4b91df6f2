import pytest

from seedelf.bls12381 import g1_generator, g1_identity, g1_point, scale, curve_order, rng
from seedelf.register import Register, rerandomize

ALICE = 1234567890
BOB = 987654321


def test_alice_is_not_bob():
    alice = Register.from_secret(ALICE)
    bob = Register.from_secret(BOB)
    assert alice != bob


def test_initial_form_uses_generator():
    alice = Register.from_secret(ALICE)
    assert alice.alpha == g1_generator
    assert alice.beta == g1_point(ALICE)


def test_rerandomize_scales_both_halves():
    alice = Register.from_secret(ALICE)
    d = 31
    variant = rerandomize(alice, d)
    assert variant.alpha == g1_point(d)
    assert variant.beta == scale(alice.beta, d)
    assert variant.beta == g1_point(d * ALICE)


def test_rerandomize_returns_new_value():
    alice = Register.from_secret(ALICE)
    variant = alice.rerandomize(rng())
    assert variant != alice
    assert variant.alpha != alice.alpha
    assert variant.beta != alice.beta
    # the original is untouched
    assert alice.alpha == g1_generator


def test_rerandomize_rejects_zero():
    alice = Register.from_secret(ALICE)
    with pytest.raises(ValueError):
        alice.rerandomize(0)
    with pytest.raises(ValueError):
        alice.rerandomize(curve_order)


def test_variants_remain_owned():
    alice = Register.from_secret(ALICE)
    variant = alice.rerandomize(rng()).rerandomize(rng())
    assert variant.is_owned_by(ALICE)
    assert not variant.is_owned_by(BOB)


def test_identity_register_is_not_owned():
    assert not Register(alpha=g1_identity, beta=g1_identity).is_owned_by(ALICE)


def test_register_is_immutable():
    alice = Register.from_secret(ALICE)
    with pytest.raises(AttributeError):
        alice.alpha = g1_identity


def test_to_data():
    alice = Register.from_secret(ALICE)
    assert alice.to_data() == {
        "constructor": 0,
        "fields": [{"bytes": alice.alpha}, {"bytes": alice.beta}],
    }
    assert Register.from_data(alice.to_data()) == alice


def test_from_data_rejects_other_shapes():
    with pytest.raises(ValueError):
        Register.from_data({"constructor": 0, "fields": [{"bytes": "00"}]})
    with pytest.raises(ValueError):
        Register.from_data({"constructor": 1, "fields": [{"bytes": "00"}, {"bytes": "00"}]})
    with pytest.raises(ValueError):
        Register.from_data({"int": 1})


def test_cbor_layout():
    alice = Register.from_secret(ALICE)
    expected = "d87982" + "5830" + alice.alpha + "5830" + alice.beta
    assert alice.to_cbor() == expected
    assert Register.from_cbor(expected) == alice


def test_from_indefinite_cbor():
    alice = Register.from_secret(ALICE)
    datum = "d8799f" + "5830" + alice.alpha + "5830" + alice.beta + "ff"
    assert Register.from_cbor(datum) == alice


def test_to_file(tmp_path):
    import json

    alice = Register.from_secret(ALICE)
    path = tmp_path / "register.json"
    alice.to_file(str(path))
    assert json.loads(path.read_text()) == alice.to_data()


if __name__ == "__main__":
    pytest.main()
