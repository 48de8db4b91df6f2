# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import binascii
import secrets
from eth_typing import BLSPubkey
from seedelf.constants import G1_LENGTH
from seedelf.errors import MalformedPoint
from py_ecc.bls.g2_primitives import G1_to_pubkey, pubkey_to_G1
from py_ecc.optimized_bls12_381 import (
    G1,
    Z1,
    add,
    b,
    curve_order,
    eq,
    is_inf,
    is_on_curve,
    multiply,
    neg,
)


def rng() -> int:
    """
    Generates a random scalar using the secrets module.

    Returns:
        int: A random number in [1, curve_order - 1].
    """
    return secrets.randbelow(curve_order - 1) + 1


def g1_point(scalar: int) -> str:
    """
    Generates a BLS12-381 point from the G1 generator using scalar multiplication
    and returns it in compressed format.

    Args:
        scalar (int): The scalar value for multiplication.

    Returns:
        str: The resulting BLS12-381 G1 point in compressed hex format.
    """
    return compress(multiply(G1, scalar % curve_order))


def uncompress(element: str) -> tuple:
    """
    Uncompresses a hexadecimal string to a BLS12-381 G1 point.

    The point must be a 48 byte compressed encoding of an element in the
    prime order subgroup. The identity is a valid element.

    Args:
        element (str): The compressed point as a hexadecimal string.

    Returns:
        tuple: The uncompressed point.

    Raises:
        MalformedPoint: If the encoding is not a G1 subgroup element.
    """
    try:
        raw = binascii.unhexlify(element)
    except (binascii.Error, TypeError) as e:
        raise MalformedPoint(f"not a hex string: {element!r}") from e

    if len(raw) != G1_LENGTH:
        raise MalformedPoint(f"compressed G1 must be {G1_LENGTH} bytes, got {len(raw)}")

    try:
        point = pubkey_to_G1(BLSPubkey(raw))
    except ValueError as e:
        raise MalformedPoint(str(e)) from e

    if is_inf(point):
        return point

    if not is_on_curve(point, b):
        raise MalformedPoint("point is not on the curve")

    # q - 1 avoids relying on how multiply treats a scalar equal to the order
    if not eq(multiply(point, curve_order - 1), neg(point)):
        raise MalformedPoint("point is not in the G1 subgroup")

    return point


def compress(element: tuple) -> str:
    """
    Compresses a BLS12-381 G1 point to a hexadecimal string.

    Args:
        element (tuple): The point to be compressed.

    Returns:
        str: The compressed point as a hexadecimal string.
    """
    return G1_to_pubkey(element).hex()


def scale(element: str, scalar: int) -> str:
    """
    Scales a BLS12-381 point by a given scalar using scalar multiplication.

    The scalar is reduced modulo the curve order first so hash digests larger
    than the order wrap correctly.

    Args:
        element (str): The compressed point to be scaled.
        scalar (int): The scalar value for multiplication.

    Returns:
        str: The resulting scaled point.
    """
    return compress(multiply(uncompress(element), scalar % curve_order))


def invert(element: str) -> str:
    """
    Calculates the inverse of a BLS12-381 point.

    Args:
        element (str): A compressed point.

    Returns:
        str: The negated point.
    """
    return compress(neg(uncompress(element)))


def combine(left_element: str, right_element: str) -> str:
    """
    Combines two BLS12-381 points using addition.

    Args:
        left_element (str): A compressed point.
        right_element (str): A compressed point.

    Returns:
        str: The resulting combined point.
    """
    return compress(add(uncompress(left_element), uncompress(right_element)))


def equal(left_element: str, right_element: str) -> bool:
    """
    Group equality of two compressed points.

    Both sides are decoded so a malformed encoding fails instead of comparing
    unequal.
    """
    return eq(uncompress(left_element), uncompress(right_element))


def is_identity(element: str) -> bool:
    return is_inf(uncompress(element))


def to_int(hash_digest: str) -> int:
    """
    Interpret a hex string as a big-endian unsigned integer.

    No reduction is applied; `scale` reduces modulo the curve order when the
    integer is used as a scalar.

    Args:
        hash_digest: Hex-encoded digest string (no '0x' prefix expected).

    Returns:
        The integer value of the digest. The empty string is 0.
    """
    return int.from_bytes(binascii.unhexlify(hash_digest), "big")


def from_int(integer: int) -> str:
    """
    Encode a non-negative integer as a minimal-length big-endian hex string.

    - The encoding is *minimal* (no leading zero bytes).
    - The special case `0` is encoded as `"00"` to ensure a non-empty byte
      representation.

    Args:
        integer: Non-negative integer to encode.

    Returns:
        A hex string representing the integer in big-endian byte order.

    Raises:
        ValueError: If the integer is negative.
    """
    if integer < 0:
        raise ValueError("cannot encode a negative integer")
    if integer == 0:
        return "00"
    length = (integer.bit_length() + 7) // 8
    return integer.to_bytes(length, "big").hex()


# generator and identity elements
g1_generator = compress(G1)
g1_identity = compress(Z1)

# curve order
curve_order = curve_order
