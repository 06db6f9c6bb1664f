"""D&D 5e SRD derivations: modifiers, proficiency, hit points, skills, saves."""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.characters import ABILITIES, AbilityModifiers, AbilityScores

if TYPE_CHECKING:
    from models.settings import CharacterClass

# Governing ability of each skill.
SKILL_ABILITIES = {
    "Acrobatics": "dexterity",
    "Animal Handling": "wisdom",
    "Arcana": "intelligence",
    "Athletics": "strength",
    "Deception": "charisma",
    "History": "intelligence",
    "Insight": "wisdom",
    "Intimidation": "charisma",
    "Investigation": "intelligence",
    "Medicine": "wisdom",
    "Nature": "intelligence",
    "Perception": "wisdom",
    "Performance": "charisma",
    "Persuasion": "charisma",
    "Religion": "intelligence",
    "Sleight of Hand": "dexterity",
    "Stealth": "dexterity",
    "Survival": "wisdom",
}


def calculate_ability_modifier(score: int) -> int:
    """Calculate ability modifier from a score using the 5e formula.

    Args:
        score: The ability score (e.g. 16).

    Returns:
        The modifier (e.g. +3 for score 16).
    """
    return (score - 10) // 2


def calculate_ability_modifiers(scores: AbilityScores) -> AbilityModifiers:
    """Derive all six modifiers from a set of scores."""
    return AbilityModifiers(
        **{a: calculate_ability_modifier(getattr(scores, a)) for a in ABILITIES}
    )


def proficiency_bonus(level: int) -> int:
    """Proficiency bonus by character level: +2 at 1-4, +3 at 5-8, ..."""
    return 2 + (level - 1) // 4


def average_hit_die(hit_die: int) -> int:
    """Fixed hit points per level for a die: half the die plus one."""
    return hit_die // 2 + 1


def calculate_hit_points(hit_die: int, con_modifier: int, level: int) -> int:
    """Average hit points for a character.

    Level 1 grants ``hit_die/2 + 1``; every further level grants
    ``hit_die/2 + 1 + con_modifier``. Each level contributes at least 1.

    Args:
        hit_die: Size of the class hit die (e.g. 10 for d10).
        con_modifier: Constitution modifier.
        level: Character level.

    Returns:
        Total hit points, never below ``level``.
    """
    per_level = average_hit_die(hit_die)
    total = max(1, per_level)
    for _ in range(level - 1):
        total += max(1, per_level + con_modifier)
    return total


def calculate_skills(
    character_class: CharacterClass,
    modifiers: AbilityModifiers,
    prof_bonus: int,
) -> dict[str, int]:
    """Skill bonuses for a character, dropping any that come to zero.

    Proficient skills (those in the class list) add the proficiency bonus.
    """
    proficient = {s.lower() for s in character_class.skill_proficiencies}
    skills: dict[str, int] = {}
    for skill, ability in SKILL_ABILITIES.items():
        bonus = getattr(modifiers, ability)
        if skill.lower() in proficient:
            bonus += prof_bonus
        if bonus != 0:
            skills[skill] = bonus
    return skills


def calculate_saving_throws(
    character_class: CharacterClass,
    modifiers: AbilityModifiers,
    prof_bonus: int,
) -> dict[str, int]:
    """Saving throw bonus for every ability, in canonical order."""
    return {
        ability: getattr(modifiers, ability)
        + (prof_bonus if ability in character_class.saving_throws else 0)
        for ability in ABILITIES
    }


def spell_save_dc(prof_bonus: int, ability_modifier: int) -> int:
    return 8 + prof_bonus + ability_modifier


def spell_attack_bonus(prof_bonus: int, ability_modifier: int) -> int:
    return prof_bonus + ability_modifier


def challenge_rating(level: int) -> int:
    """Rough challenge rating for an NPC of the given level."""
    return max(1, level // 4)


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_bonus(value: int) -> str:
    """Signed bonus text: 3 -> '+3', -1 -> '-1', 0 -> '+0'."""
    return f"+{value}" if value >= 0 else str(value)
