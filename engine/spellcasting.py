"""Spellcasting summary for spellcasting classes."""

from __future__ import annotations

import logging

from config import MAX_SPELLS_SHOWN
from engine.rng import RandomSource
from engine.rules import spell_attack_bonus, spell_save_dc
from models.characters import AbilityModifiers, SpellcastingSummary
from models.settings import CharacterClass, SpellcastingProfile

logger = logging.getLogger(__name__)


def _progression(table: list, level: int, default):
    """Row of a level-indexed table, clamped to its last row."""
    if not table:
        return default
    return table[min(level, len(table)) - 1]


def cantrips_known(profile: SpellcastingProfile, level: int) -> int:
    return _progression(profile.cantrips_known, level, 0)


def spell_slots(profile: SpellcastingProfile, level: int) -> dict[int, int]:
    """Non-zero slot counts by spell level for a character level."""
    row = _progression(profile.spell_slots, level, [])
    return {i + 1: count for i, count in enumerate(row) if count > 0}


def generate_spellcasting(
    character_class: CharacterClass,
    modifiers: AbilityModifiers,
    level: int,
    prof_bonus: int,
    rng: RandomSource,
) -> SpellcastingSummary | None:
    """Build the spellcasting block, or None for a non-caster.

    Cantrips and spells are drawn without replacement from the class lists.
    Each spell level shows at most ``min(MAX_SPELLS_SHOWN, slots + 1)`` spells.
    """
    profile = character_class.spellcasting
    if profile is None:
        return None

    ability_mod = getattr(modifiers, profile.ability)
    known = cantrips_known(profile, level)
    slots = spell_slots(profile, level)

    spells: dict[int, list[str]] = {}
    for spell_level, count in slots.items():
        pool = profile.spells.get(spell_level, [])
        chosen = rng.sample(pool, min(MAX_SPELLS_SHOWN, count + 1))
        if chosen:
            spells[spell_level] = chosen

    summary = SpellcastingSummary(
        ability=profile.ability,
        save_dc=spell_save_dc(prof_bonus, ability_mod),
        attack_bonus=spell_attack_bonus(prof_bonus, ability_mod),
        cantrips_known=known,
        slots=slots,
        cantrips=rng.sample(profile.cantrips, known),
        spells=spells,
    )
    logger.debug(
        "%s spellcasting at level %d: DC %d, slots %s",
        character_class.name, level, summary.save_dc, slots,
    )
    return summary
