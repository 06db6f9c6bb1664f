"""Statblock formatting for generated NPCs.

Two output formats are supported:

- ``fantasy_statblock``: a fenced ``statblock`` code block whose body is a
  YAML mapping, readable by statblock renderers.
- ``basic``: a plain Markdown statblock.

Formatting is read-only over the NPC. Text coming from user-editable tables
(trait, feature, subclass and possession text) is passed through
``sanitize`` first, which drops single quotes, double quotes and backticks
and turns newlines into spaces.
"""

from __future__ import annotations

import yaml

from engine.errors import InvalidInputError
from engine.npc import find_class, find_race
from engine.rules import (
    calculate_saving_throws,
    challenge_rating,
    format_bonus,
    ordinal,
)
from models.characters import ABILITIES, NPC, Possession
from models.settings import CharacterClass, Race, SettingsDocument

FANTASY_STATBLOCK = "fantasy_statblock"
BASIC = "basic"
FORMAT_ALIASES = {
    "fantasy_statblock": FANTASY_STATBLOCK,
    "fantasystatblock": FANTASY_STATBLOCK,
    "basic": BASIC,
}

TRAIT_DESCRIPTIONS = {
    "Darkvision": (
        "Can see in dim light within 60 feet as if it were bright light, "
        "and in darkness as if it were dim light."
    ),
    "Fey Ancestry": "Has advantage on saving throws against being charmed, and magic can't put it to sleep.",
    "Lucky": "When it rolls a 1 on an attack roll, ability check, or saving throw, it can reroll the die.",
    "Relentless Endurance": "When reduced to 0 hit points but not killed outright, it drops to 1 hit point instead (once per long rest).",
    "Hellish Resistance": "Has resistance to fire damage.",
    "Dwarven Resilience": "Has advantage on saving throws against poison, and resistance to poison damage.",
}


def sanitize(text: str) -> str:
    """Strip quotes and backticks and flatten newlines."""
    for ch in ("'", '"', "`"):
        text = text.replace(ch, "")
    return text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ").strip()


def trait_description(race: Race, trait: str) -> str:
    return (
        race.trait_descriptions.get(trait)
        or TRAIT_DESCRIPTIONS.get(trait)
        or f"Racial trait of {race.name}."
    )


def _feature_entries(npc: NPC, race: Race, character_class: CharacterClass) -> list[dict]:
    """Race traits, then class features, then subclass features up to level."""
    entries = [
        {"name": sanitize(t), "desc": sanitize(trait_description(race, t))}
        for t in npc.traits
    ]
    if race.innate_spellcasting:
        entries.append({
            "name": "Innate Spellcasting",
            "desc": sanitize(race.innate_spellcasting),
        })
    entries += [
        {"name": sanitize(f.name), "desc": sanitize(f.description)}
        for f in character_class.features
        if f.level <= npc.level
    ]
    if npc.subclass:
        for subclass in character_class.subclasses:
            if subclass.name == npc.subclass:
                entries += [
                    {
                        "name": f"{sanitize(f.name)} ({sanitize(subclass.name)})",
                        "desc": sanitize(f.description),
                    }
                    for f in subclass.features
                    if f.level <= npc.level
                ]
    return entries


def _primary_attack(npc: NPC, character_class: CharacterClass) -> dict:
    """One weapon attack, Strength or Dexterity based."""
    mods = npc.ability_modifiers
    use_strength = (
        character_class.primary_ability == "strength"
        or mods.strength > mods.dexterity
    )
    if use_strength:
        weapon, dice, die_size, bonus = "Longsword", "1d8", 8, mods.strength
    else:
        weapon, dice, die_size, bonus = "Shortsword", "1d6", 6, mods.dexterity
    to_hit = bonus + npc.proficiency_bonus
    average = max(1, die_size // 2 + 1 + bonus)
    return {
        "name": weapon,
        "desc": (
            f"Melee Weapon Attack: {format_bonus(to_hit)} to hit, reach 5 ft., "
            f"one target. Hit: {average} ({dice} {format_bonus(bonus)}) slashing damage."
        ),
        "attack_bonus": to_hit,
        "damage_dice": dice,
        "damage_bonus": bonus,
    }


def _spell_lines(npc: NPC) -> list[str]:
    casting = npc.spellcasting
    if casting is None:
        return []
    lines = [
        f"The {npc.name} is a level {npc.level} spellcaster. Its spellcasting "
        f"ability is {casting.ability.capitalize()} (spell save DC {casting.save_dc}, "
        f"{format_bonus(casting.attack_bonus)} to hit with spell attacks)."
    ]
    if casting.cantrips:
        lines.append(f"Cantrips (at will): {', '.join(casting.cantrips)}")
    for spell_level, slots in sorted(casting.slots.items()):
        spells = ", ".join(casting.spells.get(spell_level, [])) or "-"
        plural = "slot" if slots == 1 else "slots"
        lines.append(f"{ordinal(spell_level)} level ({slots} {plural}): {spells}")
    return lines


def _possession_entries(possessions: list[Possession]) -> list[dict]:
    entries = []
    for item in possessions:
        entry = {"name": sanitize(item.name)}
        if item.desc:
            entry["desc"] = sanitize(item.desc)
        entries.append(entry)
    return entries


def _senses(npc: NPC, race: Race) -> str:
    passive = 10 + npc.skills.get("Perception", npc.ability_modifiers.wisdom)
    darkvision = "darkvision 60 ft., " if "Darkvision" in race.traits else ""
    return f"{darkvision}passive Perception {passive}"


def build_statblock(npc: NPC, race: Race, character_class: CharacterClass) -> dict:
    """The statblock as an ordered mapping (the fixed output schema)."""
    mods = npc.ability_modifiers
    saves = calculate_saving_throws(character_class, mods, npc.proficiency_bonus)
    con_total = npc.level * mods.constitution
    block = {
        "name": npc.name,
        "source": "NPC Generator",
        "size": race.size,
        "type": "humanoid",
        "subtype": npc.race.lower(),
        "alignment": npc.alignment.lower(),
        "ac": 10 + mods.dexterity,
        "hp": npc.hit_points,
        "hit_dice": f"{npc.level}d{character_class.hit_die} {'+' if con_total >= 0 else '-'} {abs(con_total)}",
        "speed": f"{race.speed} ft.",
        "stats": [getattr(npc.ability_scores, a) for a in ABILITIES],
        "saves": [{a: saves[a]} for a in ABILITIES],
        "skillsaves": [{skill.lower(): bonus} for skill, bonus in npc.skills.items()],
        "senses": _senses(npc, race),
        "languages": ", ".join(race.languages) or "Common",
        "cr": str(challenge_rating(npc.level)),
        "bestiary": True,
        "traits": _feature_entries(npc, race, character_class),
        "actions": [_primary_attack(npc, character_class)],
    }
    spells = _spell_lines(npc)
    if spells:
        block["spells"] = spells
    block["possessions"] = _possession_entries(npc.possessions)
    return block


def _format_fantasy(block: dict) -> str:
    body = yaml.safe_dump(block, sort_keys=False, allow_unicode=True, width=1000)
    return f"```statblock\n{body}```"


def _format_basic(npc: NPC, block: dict) -> str:
    title = f"{npc.character_class}" + (f" ({npc.subclass})" if npc.subclass else "")
    lines = [
        f"## {npc.name}",
        f"*{block['size']} humanoid ({block['subtype']}), {block['alignment']}*",
        f"Level {npc.level} {npc.race} {title}",
        "",
        f"**Armor Class** {block['ac']}  ",
        f"**Hit Points** {block['hp']} ({block['hit_dice']})  ",
        f"**Speed** {block['speed']}",
        "",
        "| STR | DEX | CON | INT | WIS | CHA |",
        "|:---:|:---:|:---:|:---:|:---:|:---:|",
        "| " + " | ".join(
            f"{getattr(npc.ability_scores, a)} ({format_bonus(getattr(npc.ability_modifiers, a))})"
            for a in ABILITIES
        ) + " |",
        "",
        "**Saving Throws** " + ", ".join(
            f"{a[:3].capitalize()} {format_bonus(list(s.values())[0])}"
            for a, s in zip(ABILITIES, block["saves"])
        ) + "  ",
    ]
    if npc.skills:
        lines.append(
            "**Skills** "
            + ", ".join(f"{k} {format_bonus(v)}" for k, v in npc.skills.items())
            + "  "
        )
    lines += [
        f"**Senses** {block['senses']}  ",
        f"**Languages** {block['languages']}  ",
        f"**Challenge** {block['cr']}  ",
        f"**Proficiency Bonus** {format_bonus(npc.proficiency_bonus)}",
        "",
    ]
    for entry in block["traits"]:
        lines.append(f"***{entry['name']}.*** {entry['desc']}")
        lines.append("")
    lines.append("### Actions")
    for action in block["actions"]:
        lines.append(f"***{action['name']}.*** {action['desc']}")
    if "spells" in block:
        lines += ["", "### Spellcasting"]
        lines += [f"- {line}" for line in block["spells"]]
    lines += ["", "### Possessions"]
    for item in block["possessions"]:
        desc = f": {item['desc']}" if "desc" in item else ""
        lines.append(f"- {item['name']}{desc}")
    return "\n".join(lines)


def format_statblock(npc: NPC, settings: SettingsDocument, fmt: str | None = None) -> str:
    """Render an NPC as statblock text.

    Args:
        npc: A generated NPC; it is only read.
        settings: Settings snapshot holding the NPC's race and class.
        fmt: Output format; defaults to the configured statblock format.

    Raises:
        NotFoundError: If the NPC's race or class is no longer configured.
        InvalidInputError: If the format name is unknown.
    """
    requested = fmt or settings.npc.statblock_format
    key = FORMAT_ALIASES.get(requested.lower())
    if key is None:
        raise InvalidInputError(f"Unknown statblock format: {requested}")

    race = find_race(settings, npc.race)
    character_class = find_class(settings, npc.character_class)
    block = build_statblock(npc, race, character_class)

    if key == BASIC:
        return _format_basic(npc, block)
    return _format_fantasy(block)

