"""Tests for NPC generation, spellcasting and possessions."""

import pytest

from engine.defaults import default_settings
from engine.errors import InvalidInputError, NotFoundError
from engine.npc import (
    NO_SUBCLASS,
    find_class,
    find_race,
    generate_character,
    resolve_subclass,
    roll_ability_scores,
)
from engine.possessions import COMMON_TRINKETS, generate_possessions
from engine.rng import RandomSource
from engine.rules import SKILL_ABILITIES, proficiency_bonus
from engine.spellcasting import cantrips_known, generate_spellcasting, spell_slots
from models.characters import ALIGNMENTS, AbilityModifiers, NPCOptions
from models.settings import CharacterClass, PossessionTable, Race, SettingsDocument


@pytest.fixture
def settings() -> SettingsDocument:
    return default_settings()


def _generate(settings: SettingsDocument, seed: int = 1, **options):
    return generate_character(NPCOptions(**options), settings, RandomSource(seed))


class TestLookups:

    def test_find_race_case_insensitive(self, settings):
        assert find_race(settings, "half-orc").name == "Half-Orc"

    def test_find_race_missing(self, settings):
        with pytest.raises(NotFoundError):
            find_race(settings, "Kobold")

    def test_find_class_missing(self, settings):
        with pytest.raises(NotFoundError):
            find_class(settings, "Artificer")


class TestGenerateCharacter:
    """Tests for generate_character()."""

    def test_human_fighter_level_five(self, settings):
        npc = _generate(settings, race="Human", character_class="Fighter", level=5)
        assert npc.level == 5
        assert npc.race == "Human"
        assert npc.character_class == "Fighter"
        assert npc.proficiency_bonus == 3
        # Human +1 Con caps the modifier at +4
        assert 5 <= npc.hit_points <= 5 * (10 // 2 + 1 + 4)

    def test_class_alias_accepted(self, settings):
        options = NPCOptions.model_validate({"class": "Rogue", "level": 2})
        npc = generate_character(options, settings, RandomSource(3))
        assert npc.character_class == "Rogue"

    def test_hit_points_at_least_level(self, settings):
        for seed in range(40):
            npc = _generate(settings, seed=seed)
            assert npc.hit_points >= npc.level

    def test_proficiency_matches_level(self, settings):
        for level in range(1, 21):
            npc = _generate(settings, level=level, character_class="Fighter")
            assert npc.proficiency_bonus == 2 + (level - 1) // 4
            assert npc.proficiency_bonus == proficiency_bonus(level)

    def test_skill_bonuses(self, settings):
        for seed in range(30):
            npc = _generate(settings, seed=seed)
            cls = find_class(settings, npc.character_class)
            proficient = {s.lower() for s in cls.skill_proficiencies}
            for skill, bonus in npc.skills.items():
                expected = getattr(npc.ability_modifiers, SKILL_ABILITIES[skill])
                if skill.lower() in proficient:
                    expected += npc.proficiency_bonus
                assert bonus == expected
                assert bonus != 0

    def test_scores_within_bounds(self, settings):
        for seed in range(30):
            npc = _generate(settings, seed=seed)
            for value in npc.ability_scores.model_dump().values():
                assert 1 <= value <= 30

    def test_modifiers_match_scores(self, settings):
        npc = _generate(settings, seed=11)
        for ability, score in npc.ability_scores.model_dump().items():
            assert getattr(npc.ability_modifiers, ability) == (score - 10) // 2

    def test_random_fields_are_valid(self, settings):
        npc = _generate(settings, seed=5)
        assert 1 <= npc.level <= 20
        assert npc.alignment in ALIGNMENTS
        assert npc.race in [r.name for r in settings.npc.races]
        assert npc.character_class in [c.name for c in settings.npc.classes]

    def test_seed_reproducible(self, settings):
        a = generate_character(NPCOptions(seed=99), settings)
        b = generate_character(NPCOptions(seed=99), settings)
        assert a == b

    def test_npc_is_frozen(self, settings):
        npc = _generate(settings)
        with pytest.raises(Exception):
            npc.level = 3

    def test_invalid_level(self, settings):
        for level in (0, 21):
            with pytest.raises(InvalidInputError):
                _generate(settings, level=level)

    def test_invalid_alignment(self, settings):
        with pytest.raises(InvalidInputError):
            _generate(settings, alignment="Sort of Nice")

    def test_unknown_race(self, settings):
        with pytest.raises(NotFoundError):
            _generate(settings, race="Kobold")

    def test_empty_tables(self):
        with pytest.raises(NotFoundError):
            generate_character(NPCOptions(), SettingsDocument(), RandomSource(1))

    def test_traits_copied_from_race(self, settings):
        npc = _generate(settings, race="Dwarf")
        assert npc.traits == find_race(settings, "Dwarf").traits


class TestSubclass:
    """Tests for resolve_subclass()."""

    def test_below_unlock_level(self, settings):
        fighter = find_class(settings, "Fighter")
        assert resolve_subclass(fighter, None, 2, RandomSource(1)) is None

    def test_at_unlock_level(self, settings):
        fighter = find_class(settings, "Fighter")
        sub = resolve_subclass(fighter, None, 3, RandomSource(1))
        assert sub.name in [s.name for s in fighter.subclasses]

    def test_per_class_unlock_level(self, settings):
        wizard = find_class(settings, "Wizard")
        assert wizard.subclass_level == 2
        assert resolve_subclass(wizard, None, 2, RandomSource(1)) is not None

    def test_none_sentinel(self, settings):
        fighter = find_class(settings, "Fighter")
        assert resolve_subclass(fighter, NO_SUBCLASS, 20, RandomSource(1)) is None

    def test_named_subclass(self, settings):
        fighter = find_class(settings, "Fighter")
        sub = resolve_subclass(fighter, "champion", 1, RandomSource(1))
        assert sub.name == "Champion"

    def test_unknown_subclass(self, settings):
        with pytest.raises(NotFoundError):
            _generate(settings, character_class="Fighter", subclass="Samurai")

    def test_named_subclass_on_class_without_subclasses(self):
        commoner = CharacterClass(name="Commoner")
        with pytest.raises(NotFoundError):
            resolve_subclass(commoner, "Champion", 5, RandomSource(1))

    def test_class_without_subclasses_rolls_none(self):
        commoner = CharacterClass(name="Commoner", subclass_level=1)
        assert resolve_subclass(commoner, None, 20, RandomSource(1)) is None


class TestAbilityScores:

    def test_racial_adjustment_clamped(self):
        race = Race(name="Titan", ability_score_adjustments={"str": 40, "dex": -40})
        scores = roll_ability_scores(race, RandomSource(2))
        assert scores.strength == 30
        assert scores.dexterity == 1

    def test_abbreviations_normalized(self):
        race = Race(name="Test", ability_score_adjustments={"DEX": 2, "Wisdom": 1})
        assert race.ability_score_adjustments == {"dexterity": 2, "wisdom": 1}


class TestSpellcasting:

    def test_non_caster(self, settings):
        fighter = find_class(settings, "Fighter")
        assert generate_spellcasting(fighter, AbilityModifiers(), 5, 3, RandomSource(1)) is None

    def test_wizard_level_five(self, settings):
        wizard = find_class(settings, "Wizard")
        mods = AbilityModifiers(intelligence=3)
        summary = generate_spellcasting(wizard, mods, 5, 3, RandomSource(1))
        assert summary.save_dc == 14
        assert summary.attack_bonus == 6
        assert summary.slots == {1: 4, 2: 3, 3: 2}
        assert len(summary.cantrips) == summary.cantrips_known == 4
        assert len(set(summary.cantrips)) == 4
        for spell_level, spells in summary.spells.items():
            assert len(spells) <= min(4, summary.slots[spell_level] + 1)
            assert set(spells) <= set(wizard.spellcasting.spells[spell_level])

    def test_tables_clamp_past_last_row(self, settings):
        profile = find_class(settings, "Bard").spellcasting
        assert cantrips_known(profile, 25) == profile.cantrips_known[-1]
        assert spell_slots(profile, 1) == {1: 2}

    def test_generated_caster_has_block(self, settings):
        npc = _generate(settings, character_class="Cleric", level=3)
        assert npc.spellcasting is not None
        assert npc.spellcasting.ability == "wisdom"


class TestPossessions:

    def test_guaranteed_items_first(self, settings):
        fighter = find_class(settings, "Fighter")
        items = generate_possessions(fighter, RandomSource(1))
        names = [i.name for i in items]
        assert names[:3] == ["Chain mail", "Longsword", "Shield"]
        assert 1 <= len(items) - 3 <= 2

    def test_falls_back_to_trinkets(self):
        cls = CharacterClass(name="Commoner", possessions=PossessionTable(extra_count=(2, 2)))
        items = generate_possessions(cls, RandomSource(4))
        assert len(items) == 2
        trinkets = {t.name for t in COMMON_TRINKETS}
        assert all(i.name in trinkets for i in items)

    def test_string_items_coerced(self):
        table = PossessionTable(guaranteed=["Rope"])
        assert table.guaranteed[0].name == "Rope"
