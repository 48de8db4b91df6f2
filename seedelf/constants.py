# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# seedelf token prefix
SEEDELF_PREFIX = "5eed0e1f"

# byte limits
PERSONAL_LIMIT = 15
TOKEN_NAME_LENGTH = 32
DIGEST_SIZE = 32

# compressed g1 size in bytes
G1_LENGTH = 48

# where the off-chain artifacts are written
DATA_DIR = "../data"
