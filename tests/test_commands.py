# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import cbor2
import pytest

from seedelf.commands import (
    create_decryption_proof,
    create_encryption,
    create_seedelf,
    create_signature,
    create_spend_proof,
    find_owned,
    load_register,
)
from seedelf.bls12381 import g1_point
from seedelf.elgamal import proves_decryption
from seedelf.files import load_json
from seedelf.register import Register
from seedelf.schnorr import d_log, verify
from seedelf.token_name import personal

SECRET = 1234567890
INPUTS = [("bb" * 32, 1), ("aa" * 32, 0)]


@pytest.fixture()
def workdir(tmp_path, monkeypatch):
    app = tmp_path / "app"
    app.mkdir()
    monkeypatch.chdir(app)
    return tmp_path / "data"


def test_create_seedelf(workdir):
    name, datum = create_seedelf(SECRET, INPUTS, "acab")

    assert name == personal("aa" * 32, 0, "5eed0e1f", "acab")
    assert (workdir / "seedelf.name").read_text() == name
    assert load_json(workdir / "register.json") == datum.to_data()
    assert load_register() == datum
    assert datum.is_owned_by(SECRET)
    assert datum != Register.from_secret(SECRET)


def test_create_spend_proof(workdir):
    _, datum = create_seedelf(SECRET, INPUTS)
    proof = create_spend_proof(SECRET, datum)
    assert d_log(datum, proof)
    assert (workdir / "schnorr.json").exists()


def test_create_signature(workdir):
    datum = Register.from_secret(SECRET)
    signature = create_signature(SECRET, "acab", datum)
    assert verify("acab", datum, signature)
    assert (workdir / "signature.json").exists()


def test_create_encryption_and_decryption_proof(workdir):
    datum = Register.from_secret(SECRET)
    ct = create_encryption(42, datum)
    assert load_json(workdir / "cypher-text.json") == ct.to_data()

    key = create_decryption_proof(SECRET, ct)
    assert (workdir / "cypher-key.point").read_text() == key
    assert proves_decryption(ct, key)


def test_find_owned():
    mine = Register.from_secret(SECRET).rerandomize(7)
    theirs = Register.from_secret(SECRET + 1).rerandomize(7)
    datums = [
        theirs.to_cbor(),
        mine.to_cbor(),
        "d87980",
        "d8798242acab42beef",
        "d879",
        cbor2.dumps(cbor2.CBORTag(102, 5)).hex(),
        cbor2.dumps(cbor2.CBORTag(121, 5)).hex(),
        mine.to_cbor(),
    ]
    assert find_owned(SECRET, datums) == [mine, mine]


def test_find_owned_skips_points_off_curve():
    bad = Register(alpha=g1_point(1), beta="00" * 48)
    assert find_owned(SECRET, [bad.to_cbor()]) == []


if __name__ == "__main__":
    pytest.main()
