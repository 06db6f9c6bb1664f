"""Dice rolling utilities for Tabletop Generators."""

import re

from pydantic import BaseModel

from config import ABILITY_ROLL
from engine.errors import InvalidInputError
from engine.rng import RandomSource


class DiceResult(BaseModel):
    """Result of a dice roll."""
    total: int
    rolls: list[int]
    kept: list[int]
    modifier: int
    notation: str


def roll(notation: str, rng: RandomSource | None = None) -> DiceResult:
    """Parse and roll dice notation like '2d6+3', '1d20', '4d6k3'.

    A ``kN`` suffix keeps only the N highest dice.

    Args:
        notation: Dice notation string (e.g. "2d6+3").
        rng: Optional RandomSource for seeded/testing rolls.

    Returns:
        DiceResult with total, individual rolls, kept dice, modifier, and notation.
    """
    rng = rng or RandomSource()
    notation = notation.strip().lower()

    match = re.match(r"^(\d+)d(\d+)(?:k(\d+))?([+-]\d+)?$", notation)
    if not match:
        raise InvalidInputError(f"Invalid dice notation: {notation}")

    num_dice = int(match.group(1))
    die_size = int(match.group(2))
    keep = int(match.group(3)) if match.group(3) else num_dice
    modifier = int(match.group(4)) if match.group(4) else 0

    if num_dice < 1 or die_size < 1:
        raise InvalidInputError(f"Invalid dice notation: {notation}")
    if not 1 <= keep <= num_dice:
        raise InvalidInputError(f"Cannot keep {keep} of {num_dice} dice")

    rolls = [rng.uniform_int(1, die_size) for _ in range(num_dice)]
    kept = sorted(rolls, reverse=True)[:keep]
    total = sum(kept) + modifier

    return DiceResult(
        total=total,
        rolls=rolls,
        kept=kept,
        modifier=modifier,
        notation=notation,
    )


def roll_ability_score(rng: RandomSource | None = None) -> int:
    """Roll one ability score: 4d6, drop the lowest die (range 3-18)."""
    return roll(f"{ABILITY_ROLL}k3", rng=rng).total
