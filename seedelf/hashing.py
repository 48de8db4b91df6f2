# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

import hashlib
import binascii

from seedelf.constants import DIGEST_SIZE


def generate(input_string: str) -> str:
    """
    Calculates the blake2b_256 hash digest of the input string.

    Args:
        input_string (str): The hex string to be hashed.

    Returns:
        str: The blake2b_256 hash digest of the input string.
    """
    hash_digest = hashlib.blake2b(
        binascii.unhexlify(input_string), digest_size=DIGEST_SIZE
    ).hexdigest()

    return hash_digest
