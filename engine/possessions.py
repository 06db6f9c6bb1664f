"""Class equipment: guaranteed kit plus a few random extras."""

from engine.rng import RandomSource
from models.characters import Possession
from models.settings import CharacterClass

# Drawn from when a class has no extras of its own.
COMMON_TRINKETS = [
    Possession(name="Pouch of coins", desc="A handful of copper and silver pieces."),
    Possession(name="Waterskin"),
    Possession(name="Traveler's clothes"),
    Possession(name="Worn map", desc="Marked with a route nobody remembers drawing."),
    Possession(name="Lucky charm", desc="A carved bone token on a leather cord."),
    Possession(name="Tinderbox"),
]


def generate_possessions(character_class: CharacterClass, rng: RandomSource) -> list[Possession]:
    """Guaranteed items for the class, then ``extra_count`` random extras."""
    table = character_class.possessions
    pool = table.extras or COMMON_TRINKETS
    lo, hi = table.extra_count
    extras = rng.sample(pool, rng.uniform_int(max(0, lo), max(0, lo, hi)))
    return [item.model_copy() for item in table.guaranteed + extras]
