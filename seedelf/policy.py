# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from seedelf.errors import ExclusivityViolation
from seedelf.token_name import is_seedelf


def split_mint(mint: dict[str, int]) -> tuple[dict[str, int], dict[str, int]]:
    """
    Split a policy's signed mint value into minted and burned quantities.

    Args:
        mint: Token name to quantity, negative for burns.

    Returns:
        `(minted, burned)` with positive quantities in both.
    """
    minted = {name: qty for name, qty in mint.items() if qty > 0}
    burned = {name: -qty for name, qty in mint.items() if qty < 0}
    return minted, burned


def _is_burn(minted: dict[str, int], burned: dict[str, int], prefix: str) -> bool:
    if minted or len(burned) != 1:
        return False
    [(name, qty)] = burned.items()
    return qty == 1 and is_seedelf(name, prefix)


def _is_mint(
    minted: dict[str, int],
    burned: dict[str, int],
    prefix: str,
    expected_name: str | None,
) -> bool:
    if len(minted) != 1 or any(is_seedelf(name, prefix) for name in burned):
        return False
    [(name, qty)] = minted.items()
    if expected_name is None:
        return qty == 1 and is_seedelf(name, prefix)
    return qty == 1 and name.lower() == expected_name.lower()


def check_exclusivity(
    minted_units: dict[str, int],
    burned_units: dict[str, int],
    prefix: str,
    expected_name: str | None = None,
) -> bool:
    """
    Exactly one of mint-one or burn-one must hold.

    burn: one unit bearing the prefix is destroyed and nothing is created.
    mint: one unit is created, named `expected_name` when given (the name
        derived from the first input) or else bearing the prefix, and no unit
        bearing the prefix is destroyed.

    Args:
        minted_units: Token name to positive quantity created.
        burned_units: Token name to positive quantity destroyed.
        prefix: The reserved hex prefix.
        expected_name: The derived name a mint must use.

    Returns:
        True iff exactly one of the two cases holds.
    """
    mint = _is_mint(minted_units, burned_units, prefix, expected_name)
    burn = _is_burn(minted_units, burned_units, prefix)
    return mint != burn


def mint_or_burn(
    minted_units: dict[str, int],
    burned_units: dict[str, int],
    prefix: str,
    expected_name: str | None = None,
) -> None:
    """
    Raises:
        ExclusivityViolation: If the event is both or neither.
    """
    if not check_exclusivity(minted_units, burned_units, prefix, expected_name):
        raise ExclusivityViolation(
            f"expected exactly one mint or one burn, got minted={minted_units} burned={burned_units}"
        )
