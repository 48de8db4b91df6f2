# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from seedelf.bls12381 import to_int
from seedelf.hashing import generate


def challenge(*parts: str) -> int:
    """
    Hash an ordered transcript into a challenge integer.

    The parts are concatenated with no delimiters. Every part is either a
    compressed point or a digest, so the lengths are fixed and the
    concatenation is unambiguous. The digest is read as a big-endian integer
    and is not reduced here; scalar multiplication does the reduction.

    Args:
        parts: Hex strings in transcript order.

    Returns:
        The challenge as an integer below 2**256.
    """
    return to_int(generate("".join(parts)))


def fiat_shamir_heuristic(alpha: str, g_r: str, beta: str) -> int:
    """
    Challenge for the plain discrete log proof:

        c = H(alpha || g_r || beta)
    """
    return challenge(alpha, g_r, beta)


def message_challenge(message: str, g_r: str) -> int:
    """
    Challenge for the message-bound signature:

        h = H(message)
        c = H(h || g_r)

    The register is not part of the transcript.
    """
    return challenge(generate(message), g_r)
