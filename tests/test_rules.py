"""Tests for D&D 5e SRD derivations."""

from engine.rules import (
    SKILL_ABILITIES,
    average_hit_die,
    calculate_ability_modifier,
    calculate_ability_modifiers,
    calculate_hit_points,
    calculate_saving_throws,
    calculate_skills,
    challenge_rating,
    format_bonus,
    ordinal,
    proficiency_bonus,
    spell_attack_bonus,
    spell_save_dc,
)
from models.characters import AbilityModifiers, AbilityScores
from models.settings import CharacterClass


def _make_class(**overrides) -> CharacterClass:
    """Helper to create a test class."""
    data = dict(
        name="Fighter",
        hit_die=10,
        primary_ability="str",
        saving_throws=["str", "con"],
        skill_proficiencies=["Athletics", "Perception"],
    )
    data.update(overrides)
    return CharacterClass(**data)


class TestAbilityModifier:
    """Tests for calculate_ability_modifier()."""

    def test_score_10(self):
        assert calculate_ability_modifier(10) == 0

    def test_score_11(self):
        assert calculate_ability_modifier(11) == 0

    def test_score_16(self):
        assert calculate_ability_modifier(16) == 3

    def test_score_8(self):
        assert calculate_ability_modifier(8) == -1

    def test_score_1(self):
        assert calculate_ability_modifier(1) == -5

    def test_score_30(self):
        assert calculate_ability_modifier(30) == 10

    def test_all_modifiers(self):
        mods = calculate_ability_modifiers(AbilityScores(strength=18, dexterity=9))
        assert mods.strength == 4
        assert mods.dexterity == -1
        assert mods.wisdom == 0


class TestProficiencyBonus:

    def test_tiers(self):
        assert [proficiency_bonus(level) for level in (1, 4, 5, 8, 9, 13, 17, 20)] == [
            2, 2, 3, 3, 4, 5, 6, 6,
        ]


class TestHitPoints:
    """Tests for calculate_hit_points()."""

    def test_average_die(self):
        assert average_hit_die(10) == 6
        assert average_hit_die(6) == 4

    def test_level_one_ignores_constitution(self):
        assert calculate_hit_points(10, 3, 1) == 6

    def test_fighter_level_five(self):
        # 6 + 4 * (6 + 2)
        assert calculate_hit_points(10, 2, 5) == 38

    def test_each_level_grants_at_least_one(self):
        # d6 with -5 con: 4 at level 1, then max(1, 4 - 5) = 1 per level
        assert calculate_hit_points(6, -5, 3) == 6

    def test_never_below_level(self):
        for level in range(1, 21):
            assert calculate_hit_points(4, -5, level) >= level


class TestSkills:

    def test_proficient_skill_adds_bonus(self):
        mods = AbilityModifiers(strength=3, wisdom=1)
        skills = calculate_skills(_make_class(), mods, 3)
        assert skills["Athletics"] == 6
        assert skills["Perception"] == 4

    def test_zero_bonus_dropped(self):
        skills = calculate_skills(_make_class(), AbilityModifiers(), 2)
        assert set(skills) == {"Athletics", "Perception"}

    def test_non_proficient_uses_modifier(self):
        skills = calculate_skills(_make_class(), AbilityModifiers(dexterity=-1), 2)
        assert skills["Stealth"] == -1
        assert skills["Acrobatics"] == -1

    def test_every_skill_has_an_ability(self):
        assert len(SKILL_ABILITIES) == 18


class TestSavingThrows:

    def test_proficient_saves(self):
        mods = AbilityModifiers(strength=2, constitution=1, charisma=-1)
        saves = calculate_saving_throws(_make_class(), mods, 3)
        assert saves["strength"] == 5
        assert saves["constitution"] == 4
        assert saves["charisma"] == -1
        assert list(saves)[0] == "strength"


class TestSpellMath:

    def test_save_dc(self):
        assert spell_save_dc(3, 4) == 15

    def test_attack_bonus(self):
        assert spell_attack_bonus(3, 4) == 7


class TestFormatting:

    def test_ordinal(self):
        assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23)] == [
            "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd", "23rd",
        ]

    def test_format_bonus(self):
        assert format_bonus(3) == "+3"
        assert format_bonus(0) == "+0"
        assert format_bonus(-2) == "-2"

    def test_challenge_rating(self):
        assert challenge_rating(1) == 1
        assert challenge_rating(8) == 2
        assert challenge_rating(20) == 5
