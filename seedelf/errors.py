# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only


class SeedelfError(Exception):
    """Base class for protocol failures."""


class MalformedPoint(SeedelfError, ValueError):
    """The bytes do not decode to an element of the G1 subgroup."""


class ProofRejected(SeedelfError):
    """The verification equation does not hold."""


class DegenerateMessage(ProofRejected):
    """The recovered message is the group identity."""


class ExclusivityViolation(SeedelfError):
    """A transaction neither mints exactly one nor burns exactly one token."""
