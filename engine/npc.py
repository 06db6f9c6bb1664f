"""NPC generation from race and class tables."""

from __future__ import annotations

import logging

from config import MAX_ABILITY_SCORE, MAX_LEVEL, MIN_ABILITY_SCORE, MIN_LEVEL
from engine.dice import roll_ability_score
from engine.errors import InvalidInputError, NotFoundError
from engine.possessions import generate_possessions
from engine.rng import RandomSource
from engine.rules import (
    calculate_ability_modifiers,
    calculate_hit_points,
    calculate_skills,
    proficiency_bonus,
)
from engine.spellcasting import generate_spellcasting
from models.characters import ABILITIES, ALIGNMENTS, NPC, AbilityScores, NPCOptions
from models.settings import CharacterClass, Race, SettingsDocument, Subclass

logger = logging.getLogger(__name__)

# Sentinel subclass name meaning "no subclass, even if the level allows one".
NO_SUBCLASS = "None"

FALLBACK_FIRST_NAMES = ["Ash", "Bryn", "Cor", "Dara", "Eli", "Fen", "Gale", "Hollis"]
FALLBACK_SURNAMES = ["Blackwood", "Stone", "Marsh", "Reed", "Thorne", "Vale"]


def find_race(settings: SettingsDocument, name: str) -> Race:
    """Look up a race by name (case-insensitive).

    Raises:
        NotFoundError: If no race has that name.
    """
    for race in settings.npc.races:
        if race.name.lower() == name.lower():
            return race
    raise NotFoundError(f"Race '{name}' not found")


def find_class(settings: SettingsDocument, name: str) -> CharacterClass:
    """Look up a class by name (case-insensitive).

    Raises:
        NotFoundError: If no class has that name.
    """
    for character_class in settings.npc.classes:
        if character_class.name.lower() == name.lower():
            return character_class
    raise NotFoundError(f"Class '{name}' not found")


def find_subclass(character_class: CharacterClass, name: str) -> Subclass:
    for subclass in character_class.subclasses:
        if subclass.name.lower() == name.lower():
            return subclass
    raise NotFoundError(
        f"Subclass '{name}' not found for class '{character_class.name}'"
    )


def resolve_subclass(
    character_class: CharacterClass,
    requested: str | None,
    level: int,
    rng: RandomSource,
) -> Subclass | None:
    """Pick the NPC's subclass.

    - ``"None"`` never assigns one.
    - A named subclass is used regardless of level.
    - Otherwise one is drawn once the class's unlock level is reached.
    """
    if requested == NO_SUBCLASS:
        return None
    if requested:
        return find_subclass(character_class, requested)
    if character_class.subclasses and level >= character_class.subclass_level:
        return rng.choice(character_class.subclasses)
    return None


def roll_ability_scores(race: Race, rng: RandomSource) -> AbilityScores:
    """Roll 4d6-drop-lowest per ability, then apply racial adjustments.

    Adjusted scores are clamped to the legal 1-30 range.
    """
    scores = {}
    for ability in ABILITIES:
        base = roll_ability_score(rng)
        adjusted = base + race.ability_score_adjustments.get(ability, 0)
        scores[ability] = max(MIN_ABILITY_SCORE, min(MAX_ABILITY_SCORE, adjusted))
    return AbilityScores(**scores)


def generate_name(race: Race, rng: RandomSource) -> str:
    first = rng.choice(race.first_names or FALLBACK_FIRST_NAMES)
    last = rng.choice(race.surnames or FALLBACK_SURNAMES)
    return f"{first} {last}"


def _validate_options(options: NPCOptions) -> None:
    if options.level is not None and not MIN_LEVEL <= options.level <= MAX_LEVEL:
        raise InvalidInputError(
            f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {options.level}"
        )
    if options.alignment is not None and options.alignment not in ALIGNMENTS:
        raise InvalidInputError(f"Unknown alignment: {options.alignment}")


def generate_character(
    options: NPCOptions,
    settings: SettingsDocument,
    rng: RandomSource | None = None,
) -> NPC:
    """Generate a complete NPC.

    Anything the caller leaves unset is rolled: level (1-20), race, class
    and alignment uniformly.

    Args:
        options: Caller-chosen options.
        settings: Read-only settings snapshot holding the race/class tables.
        rng: Random source; a fresh unseeded one if omitted.

    Returns:
        A frozen NPC record.

    Raises:
        InvalidInputError: Level or alignment out of range.
        NotFoundError: Unknown race, class or subclass, or empty tables.
    """
    rng = rng or RandomSource(options.seed)
    _validate_options(options)

    if not settings.npc.races:
        raise NotFoundError("No races are configured")
    if not settings.npc.classes:
        raise NotFoundError("No classes are configured")

    level = options.level if options.level is not None else rng.uniform_int(MIN_LEVEL, MAX_LEVEL)
    race = (
        find_race(settings, options.race) if options.race
        else rng.choice(settings.npc.races)
    )
    character_class = (
        find_class(settings, options.character_class) if options.character_class
        else rng.choice(settings.npc.classes)
    )
    alignment = options.alignment or rng.choice(ALIGNMENTS)
    subclass = resolve_subclass(character_class, options.subclass, level, rng)

    scores = roll_ability_scores(race, rng)
    modifiers = calculate_ability_modifiers(scores)
    prof = proficiency_bonus(level)
    hit_points = calculate_hit_points(character_class.hit_die, modifiers.constitution, level)

    npc = NPC(
        name=generate_name(race, rng),
        level=level,
        race=race.name,
        character_class=character_class.name,
        subclass=subclass.name if subclass else None,
        alignment=alignment,
        ability_scores=scores,
        ability_modifiers=modifiers,
        hit_points=hit_points,
        proficiency_bonus=prof,
        skills=calculate_skills(character_class, modifiers, prof),
        traits=list(race.traits),
        possessions=generate_possessions(character_class, rng),
        spellcasting=generate_spellcasting(character_class, modifiers, level, prof, rng),
    )
    logger.info(
        "Generated NPC %s: level %d %s %s%s",
        npc.name, npc.level, npc.race, npc.character_class,
        f" ({npc.subclass})" if npc.subclass else "",
    )
    return npc
