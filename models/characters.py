"""Character and NPC data models for Tabletop Generators."""

from pydantic import BaseModel, ConfigDict, Field

# Canonical ability order, as printed in a statblock.
ABILITIES = (
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
)

ABILITY_ABBREVIATIONS = {
    "str": "strength",
    "dex": "dexterity",
    "con": "constitution",
    "int": "intelligence",
    "wis": "wisdom",
    "cha": "charisma",
}

ALIGNMENTS = (
    "Lawful Good",
    "Neutral Good",
    "Chaotic Good",
    "Lawful Neutral",
    "True Neutral",
    "Chaotic Neutral",
    "Lawful Evil",
    "Neutral Evil",
    "Chaotic Evil",
)


def normalize_ability(name: str) -> str:
    """Map 'dex', 'DEX' or 'Dexterity' to 'dexterity'.

    Raises:
        ValueError: If the name is not one of the six abilities.
    """
    key = name.strip().lower()
    key = ABILITY_ABBREVIATIONS.get(key, key)
    if key not in ABILITIES:
        raise ValueError(f"Unknown ability: {name}")
    return key


class AbilityScores(BaseModel):
    """The six core ability scores."""
    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10


class AbilityModifiers(AbilityScores):
    """Modifiers derived from AbilityScores, one per ability."""
    strength: int = 0
    dexterity: int = 0
    constitution: int = 0
    intelligence: int = 0
    wisdom: int = 0
    charisma: int = 0


class Possession(BaseModel):
    """An item an NPC carries."""
    name: str
    desc: str | None = None


class SpellcastingSummary(BaseModel):
    """Spellcasting block of a generated NPC."""
    ability: str
    save_dc: int
    attack_bonus: int
    cantrips_known: int
    slots: dict[int, int] = {}          # spell level -> slot count
    cantrips: list[str] = []
    spells: dict[int, list[str]] = {}   # spell level -> prepared spells


class NPC(BaseModel):
    """A fully generated non-player character. Read-only once built."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    level: int
    race: str
    character_class: str = Field(alias="class")
    subclass: str | None = None
    alignment: str
    ability_scores: AbilityScores
    ability_modifiers: AbilityModifiers
    hit_points: int
    proficiency_bonus: int
    skills: dict[str, int] = {}         # skill -> bonus, non-zero only
    traits: list[str] = []
    possessions: list[Possession] = []
    spellcasting: SpellcastingSummary | None = None


class NPCOptions(BaseModel):
    """Caller-chosen options for NPC generation; anything unset is rolled."""
    model_config = ConfigDict(populate_by_name=True)

    level: int | None = None
    race: str | None = None
    character_class: str | None = Field(default=None, alias="class")
    subclass: str | None = None         # "None" suppresses the subclass
    alignment: str | None = None
    seed: int | None = None
