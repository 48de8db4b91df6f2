#!/usr/bin/env python3

# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

"""
Generate token-name-vectors.json for cross-platform token name mirror tests.

Run from the repository root:
    PYTHONPATH=. python test-vectors/generate_vectors.py
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from seedelf.token_name import personal

TX_ID = "acabbeef" * 8


def make_vector(name: str, tx_id: str, idx: int, prefix: str, personal_hex: str) -> dict:
    return {
        "name": name,
        "tx_id": tx_id,
        "idx": idx,
        "prefix": prefix,
        "personal": personal_hex,
        "token_name": personal(tx_id, idx, prefix, personal_hex),
    }


vectors = [
    make_vector("all-empty", "", 0, "", ""),
    make_vector("no-prefix-no-personal", TX_ID, 1, "", ""),
    make_vector(
        "seedelf-full-personal", TX_ID, 69, "5eed0e1f", "00112233445566778899aabbccddee"
    ),
    make_vector(
        "seedelf-long-personal",
        TX_ID,
        69,
        "5eed0e1f",
        "00112233445566778899aabbccddeeff01020304",
    ),
    make_vector("seedelf-empty-personal", TX_ID, 0, "5eed0e1f", ""),
    make_vector("seedelf-short-personal", TX_ID, 255, "5eed0e1f", "616263"),
]

out_path = Path(__file__).resolve().parent / "token-name-vectors.json"
out_path.write_text(json.dumps(vectors, indent=2) + "\n")
print(f"Wrote {len(vectors)} vectors to {out_path}")
