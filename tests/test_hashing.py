import pytest

from seedelf.hashing import generate


def test_empty_string_hash():
    h = generate("")
    assert h == "0e5751c026e543b2e8ab2eb06099daa1d1e5df47778f7787faab45cdf12fe3a8"


def test_hash():
    h = generate("acab")
    assert h == "caa50d5a6b870997e6eaa900baa8c7727c0ad1c7e826a672e0b234e9f46a95eb"


def test_hash_is_256_bits():
    assert len(bytes.fromhex(generate("cafe"))) == 32


def test_rejects_non_hex():
    with pytest.raises(ValueError):
        generate("xyz")


if __name__ == "__main__":
    pytest.main()
