"""Settings document models: race/class tables, dungeon profiles, templates.

Persisted JSON uses camelCase keys (``dungeonTypes``, ``defaultDungeonType``);
attributes are snake_case. Both spellings are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from config import ROOM_COUNT_RANGES
from models.characters import Possession, normalize_ability
from models.dungeon import RoomTag


class SettingsModel(BaseModel):
    """Base for every persisted settings record."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# NPC tables
# ---------------------------------------------------------------------------


class Race(SettingsModel):
    """A playable race."""
    name: str
    ability_score_adjustments: dict[str, int] = {}
    traits: list[str] = []
    trait_descriptions: dict[str, str] = {}
    languages: list[str] = []
    size: str = "Medium"
    speed: int = 30
    innate_spellcasting: str | None = None
    first_names: list[str] = []
    surnames: list[str] = []

    @field_validator("ability_score_adjustments")
    @classmethod
    def _normalize_abilities(cls, value: dict[str, int]) -> dict[str, int]:
        return {normalize_ability(k): v for k, v in value.items()}


class Feature(SettingsModel):
    """A class or subclass feature gained at a given level."""
    level: int
    name: str
    description: str = ""


class Subclass(SettingsModel):
    name: str
    description: str = ""
    features: list[Feature] = []


class SpellcastingProfile(SettingsModel):
    """How a class casts spells, indexed by character level (1-20)."""
    ability: str
    cantrips_known: list[int] = []       # index = level - 1
    spell_slots: list[list[int]] = []    # index = level - 1, then spell level - 1
    cantrips: list[str] = []
    spells: dict[int, list[str]] = {}    # spell level -> spell names

    @field_validator("ability")
    @classmethod
    def _normalize_ability(cls, value: str) -> str:
        return normalize_ability(value)


class PossessionTable(SettingsModel):
    """Equipment for a class: guaranteed kit plus random flavour items."""
    guaranteed: list[Possession] = []
    extras: list[Possession] = []
    extra_count: tuple[int, int] = (0, 2)

    @field_validator("guaranteed", "extras", mode="before")
    @classmethod
    def _coerce_strings(cls, value: list) -> list:
        return [{"name": item} if isinstance(item, str) else item for item in value]


class CharacterClass(SettingsModel):
    """A character class and its level progression."""
    name: str
    hit_die: int = 8
    primary_ability: str = "strength"
    saving_throws: list[str] = []
    skill_proficiencies: list[str] = []
    features: list[Feature] = []
    subclasses: list[Subclass] = []
    subclass_level: int = 3
    spellcasting: SpellcastingProfile | None = None
    possessions: PossessionTable = PossessionTable()

    @field_validator("primary_ability")
    @classmethod
    def _normalize_primary(cls, value: str) -> str:
        return normalize_ability(value)

    @field_validator("saving_throws")
    @classmethod
    def _normalize_saves(cls, value: list[str]) -> list[str]:
        return [normalize_ability(v) for v in value]


class NPCSettings(SettingsModel):
    races: list[Race] = []
    classes: list[CharacterClass] = []
    statblock_format: str = "fantasy_statblock"


# ---------------------------------------------------------------------------
# Dungeon profiles
# ---------------------------------------------------------------------------


class CorridorStyle(SettingsModel):
    style: str = "straight"              # "straight" or "winding"
    width: int = 1                       # cells
    door_chance: float = 0.5
    secret_door_chance: float = 0.1
    extra_connection_chance: float = 0.2


class TaggingRules(SettingsModel):
    treasure_chance: float = 0.2
    boss_chance: float = 0.7
    content_weights: dict[str, float] = {
        "monster": 4,
        "trap": 2,
        "empty": 3,
        "shrine": 1,
    }

    @field_validator("content_weights")
    @classmethod
    def _known_tags(cls, value: dict[str, float]) -> dict[str, float]:
        for tag in value:
            RoomTag(tag)
        return value


class DungeonTheme(SettingsModel):
    background_color: str = "#1e1e1e"
    floor_color: str = "#f4ecd8"
    wall_color: str = "#3b2f2f"
    corridor_color: str = "#d8ccb0"
    door_color: str = "#8b5a2b"
    secret_door_color: str = "#7a1f1f"
    label_color: str = "#3b2f2f"
    stroke_width: float = 2.0
    line_style: str = "solid"            # "solid" or "dashed"
    tag_colors: dict[str, str] = {
        "entrance": "#cfe8cf",
        "boss": "#e8b4b4",
        "treasure": "#f3e0a1",
    }


class DungeonTypeProfile(SettingsModel):
    """Controls a dungeon's room shapes, density and visual theme."""
    name: str
    room_count_ranges: dict[str, tuple[int, int]] = Field(
        default_factory=lambda: dict(ROOM_COUNT_RANGES)
    )
    room_shapes: dict[str, float] = {"rectangle": 3, "square": 2}
    room_size: tuple[int, int] = (4, 9)
    corridor: CorridorStyle = CorridorStyle()
    tagging: TaggingRules = TaggingRules()
    descriptions: dict[str, list[str]] = {}
    theme: DungeonTheme = DungeonTheme()

    @model_validator(mode="after")
    def _check_ranges(self) -> "DungeonTypeProfile":
        for size, (lo, hi) in self.room_count_ranges.items():
            if lo < 1 or lo > hi:
                raise ValueError(f"Invalid room count range for {size}: {lo}-{hi}")
        lo, hi = self.room_size
        if lo < 2 or lo > hi:
            raise ValueError(f"Invalid room size range: {lo}-{hi}")
        return self


class MapStyle(SettingsModel):
    cell_size: int = 12                  # pixels per grid cell
    show_grid: bool = True
    grid_color: str = "#2c2c2c"
    show_labels: bool = True
    padding: int = 1                     # cells of margin around the map


class DungeonSettings(SettingsModel):
    dungeon_types: dict[str, DungeonTypeProfile] = {}
    default_dungeon_type: str = ""
    map_style: MapStyle = MapStyle()


# ---------------------------------------------------------------------------
# Random text templates
# ---------------------------------------------------------------------------


class Candidate(SettingsModel):
    """One weighted replacement for a token."""
    text: str
    weight: float = 1.0


class GeneratorTemplate(SettingsModel):
    """A named text template with per-token weighted replacement tables."""
    name: str
    description: str = ""
    template: str
    tables: dict[str, list[Candidate]] = {}

    @model_validator(mode="before")
    @classmethod
    def _root_entry(cls, data):
        """Accept the body as a ``root`` table entry instead of ``template``."""
        if not isinstance(data, dict) or data.get("template"):
            return data
        tables = dict(data.get("tables") or {})
        root = tables.pop("root", None)
        if root is None:
            return data
        if isinstance(root, list):
            root = root[0]
        if isinstance(root, dict):
            root = root.get("text", "")
        return {**data, "template": root, "tables": tables}

    @field_validator("tables", mode="before")
    @classmethod
    def _coerce_candidates(cls, value: dict) -> dict:
        return {
            token: [{"text": c} if isinstance(c, str) else c for c in candidates]
            for token, candidates in value.items()
        }


class RandomSettings(SettingsModel):
    generators: list[GeneratorTemplate] = []


# ---------------------------------------------------------------------------
# Whole document
# ---------------------------------------------------------------------------


class SettingsDocument(SettingsModel):
    """The single configuration document consumed by the generation core."""
    npc: NPCSettings = NPCSettings()
    dungeon: DungeonSettings = DungeonSettings()
    random: RandomSettings = RandomSettings()
