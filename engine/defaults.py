"""Content shipped with a fresh settings document."""

from models.settings import (
    CharacterClass,
    DungeonSettings,
    DungeonTypeProfile,
    GeneratorTemplate,
    NPCSettings,
    Race,
    RandomSettings,
    SettingsDocument,
)

# Full-caster slot progression, one row per character level.
FULL_CASTER_SLOTS = [
    [2],
    [3],
    [4, 2],
    [4, 3],
    [4, 3, 2],
    [4, 3, 3],
    [4, 3, 3, 1],
    [4, 3, 3, 2],
    [4, 3, 3, 3, 1],
    [4, 3, 3, 3, 2],
    [4, 3, 3, 3, 2, 1],
    [4, 3, 3, 3, 2, 1],
    [4, 3, 3, 3, 2, 1, 1],
    [4, 3, 3, 3, 2, 1, 1],
    [4, 3, 3, 3, 2, 1, 1, 1],
    [4, 3, 3, 3, 2, 1, 1, 1],
    [4, 3, 3, 3, 2, 1, 1, 1, 1],
    [4, 3, 3, 3, 3, 1, 1, 1, 1],
    [4, 3, 3, 3, 3, 2, 1, 1, 1],
    [4, 3, 3, 3, 3, 2, 2, 1, 1],
]

RACES = [
    {
        "name": "Human",
        "abilityScoreAdjustments": {
            "str": 1, "dex": 1, "con": 1, "int": 1, "wis": 1, "cha": 1,
        },
        "traits": ["Versatile"],
        "traitDescriptions": {"Versatile": "Humans adapt quickly to any calling."},
        "languages": ["Common", "one extra language"],
        "firstNames": ["Alden", "Bram", "Cora", "Dain", "Elena", "Garrick", "Helga", "Mira"],
        "surnames": ["Ashford", "Brightwater", "Cole", "Hale", "Marsh", "Thatcher"],
    },
    {
        "name": "Elf",
        "abilityScoreAdjustments": {"dex": 2, "int": 1},
        "traits": ["Darkvision", "Fey Ancestry", "Trance"],
        "traitDescriptions": {"Trance": "Meditates for 4 hours instead of sleeping."},
        "languages": ["Common", "Elvish"],
        "speed": 30,
        "firstNames": ["Aelar", "Caelynn", "Erevan", "Lia", "Naivara", "Thamior"],
        "surnames": ["Amakiir", "Galanodel", "Liadon", "Nailo", "Siannodel"],
    },
    {
        "name": "Dwarf",
        "abilityScoreAdjustments": {"con": 2, "wis": 1},
        "traits": ["Darkvision", "Dwarven Resilience", "Stonecunning"],
        "traitDescriptions": {
            "Stonecunning": "Adds double proficiency to History checks about stonework.",
        },
        "languages": ["Common", "Dwarvish"],
        "speed": 25,
        "firstNames": ["Bruenor", "Dagnal", "Eberk", "Gunnloda", "Kildrak", "Vistra"],
        "surnames": ["Battlehammer", "Fireforge", "Gorunn", "Ironfist", "Rumnaheim"],
    },
    {
        "name": "Halfling",
        "abilityScoreAdjustments": {"dex": 2, "cha": 1},
        "traits": ["Lucky", "Brave", "Halfling Nimbleness"],
        "traitDescriptions": {
            "Brave": "Has advantage on saving throws against being frightened.",
            "Halfling Nimbleness": "Can move through the space of any creature larger than it.",
        },
        "languages": ["Common", "Halfling"],
        "size": "Small",
        "speed": 25,
        "firstNames": ["Cade", "Eldon", "Lidda", "Merric", "Seraphina", "Verna"],
        "surnames": ["Brushgather", "Goodbarrel", "Tealeaf", "Thorngage", "Underbough"],
    },
    {
        "name": "Half-Orc",
        "abilityScoreAdjustments": {"str": 2, "con": 1},
        "traits": ["Darkvision", "Relentless Endurance", "Savage Attacks"],
        "traitDescriptions": {
            "Savage Attacks": "Rolls one extra weapon damage die on a melee critical hit.",
        },
        "languages": ["Common", "Orc"],
        "firstNames": ["Dench", "Feng", "Holg", "Ovak", "Sutha", "Volen"],
        "surnames": ["Bonebreaker", "Gorefang", "Skullsplitter", "Tuskwise"],
    },
    {
        "name": "Tiefling",
        "abilityScoreAdjustments": {"cha": 2, "int": 1},
        "traits": ["Darkvision", "Hellish Resistance"],
        "languages": ["Common", "Infernal"],
        "innateSpellcasting": (
            "Knows the thaumaturgy cantrip. Can cast hellish rebuke once per long rest "
            "from 3rd level and darkness from 5th level. Charisma is its spellcasting ability."
        ),
        "firstNames": ["Akmenos", "Damakos", "Kallista", "Nemeia", "Orianna", "Skamos"],
        "surnames": ["Ash", "Hope", "Sorrow", "Torment", "Vex"],
    },
]

CLASSES = [
    {
        "name": "Fighter",
        "hitDie": 10,
        "primaryAbility": "str",
        "savingThrows": ["str", "con"],
        "skillProficiencies": ["Athletics", "Intimidation", "Perception"],
        "features": [
            {"level": 1, "name": "Second Wind", "description": "As a bonus action, regains 1d10 + level hit points once per short rest."},
            {"level": 2, "name": "Action Surge", "description": "Takes one additional action on its turn, once per short rest."},
            {"level": 5, "name": "Extra Attack", "description": "Attacks twice when taking the Attack action."},
            {"level": 9, "name": "Indomitable", "description": "Rerolls a failed saving throw once per long rest."},
        ],
        "subclassLevel": 3,
        "subclasses": [
            {
                "name": "Champion",
                "description": "A warrior honed to physical perfection.",
                "features": [
                    {"level": 3, "name": "Improved Critical", "description": "Weapon attacks score a critical hit on a roll of 19 or 20."},
                    {"level": 7, "name": "Remarkable Athlete", "description": "Adds half proficiency to Strength, Dexterity and Constitution checks."},
                ],
            },
            {
                "name": "Battle Master",
                "description": "A student of martial technique.",
                "features": [
                    {"level": 3, "name": "Combat Superiority", "description": "Has four d8 superiority dice to fuel battlefield maneuvers."},
                ],
            },
        ],
        "possessions": {
            "guaranteed": [
                {"name": "Chain mail"},
                {"name": "Longsword"},
                {"name": "Shield"},
            ],
            "extras": [
                {"name": "Whetstone"},
                {"name": "Regimental badge", "desc": "From a company that no longer exists."},
                {"name": "Dented helm"},
                {"name": "Flask of strong ale"},
                {"name": "Letter of commendation", "desc": "Signed by a minor noble."},
            ],
            "extraCount": [1, 2],
        },
    },
    {
        "name": "Rogue",
        "hitDie": 8,
        "primaryAbility": "dex",
        "savingThrows": ["dex", "int"],
        "skillProficiencies": ["Acrobatics", "Deception", "Sleight of Hand", "Stealth"],
        "features": [
            {"level": 1, "name": "Sneak Attack", "description": "Deals extra damage once per turn when it has advantage on an attack."},
            {"level": 2, "name": "Cunning Action", "description": "Can Dash, Disengage or Hide as a bonus action."},
            {"level": 5, "name": "Uncanny Dodge", "description": "Halves the damage of an attack it can see, using its reaction."},
            {"level": 7, "name": "Evasion", "description": "Takes no damage on a successful Dexterity save against area effects."},
        ],
        "subclassLevel": 3,
        "subclasses": [
            {
                "name": "Thief",
                "description": "A burglar and treasure hunter.",
                "features": [
                    {"level": 3, "name": "Fast Hands", "description": "Uses Cunning Action to pick locks or use objects."},
                ],
            },
            {
                "name": "Assassin",
                "description": "A practitioner of the grim art of death.",
                "features": [
                    {"level": 3, "name": "Assassinate", "description": "Has advantage against creatures that have not yet acted."},
                ],
            },
        ],
        "possessions": {
            "guaranteed": [
                {"name": "Leather armor"},
                {"name": "Shortsword"},
                {"name": "Thieves' tools"},
            ],
            "extras": [
                {"name": "Stolen signet ring", "desc": "Bears the crest of a local merchant house."},
                {"name": "Set of loaded dice"},
                {"name": "Dark hooded cloak"},
                {"name": "Crowbar"},
                {"name": "Forged travel papers"},
            ],
            "extraCount": [1, 3],
        },
    },
    {
        "name": "Wizard",
        "hitDie": 6,
        "primaryAbility": "int",
        "savingThrows": ["int", "wis"],
        "skillProficiencies": ["Arcana", "History", "Investigation"],
        "features": [
            {"level": 1, "name": "Arcane Recovery", "description": "Recovers expended spell slots during a short rest, once per day."},
            {"level": 18, "name": "Spell Mastery", "description": "Casts one 1st- and one 2nd-level spell at will."},
        ],
        "subclassLevel": 2,
        "subclasses": [
            {
                "name": "School of Evocation",
                "description": "Focuses on raw elemental power.",
                "features": [
                    {"level": 2, "name": "Sculpt Spells", "description": "Shields allies from its own evocation spells."},
                    {"level": 6, "name": "Potent Cantrip", "description": "Targets that save against its cantrips still take half damage."},
                ],
            },
            {
                "name": "School of Divination",
                "description": "Seeks to part the veil of time.",
                "features": [
                    {"level": 2, "name": "Portent", "description": "Rolls two d20s after a long rest and can replace any roll with one."},
                ],
            },
        ],
        "spellcasting": {
            "ability": "int",
            "cantripsKnown": [3, 3, 3, 4, 4, 4, 4, 4, 4, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5],
            "spellSlots": FULL_CASTER_SLOTS,
            "cantrips": ["Fire Bolt", "Light", "Mage Hand", "Minor Illusion", "Prestidigitation", "Ray of Frost", "Shocking Grasp"],
            "spells": {
                1: ["Burning Hands", "Detect Magic", "Mage Armor", "Magic Missile", "Shield", "Sleep"],
                2: ["Invisibility", "Misty Step", "Mirror Image", "Scorching Ray", "Web"],
                3: ["Counterspell", "Fireball", "Fly", "Haste", "Lightning Bolt"],
                4: ["Banishment", "Dimension Door", "Greater Invisibility", "Ice Storm"],
                5: ["Cone of Cold", "Scrying", "Telekinesis", "Wall of Force"],
                6: ["Chain Lightning", "Disintegrate", "Globe of Invulnerability"],
                7: ["Finger of Death", "Plane Shift", "Teleport"],
                8: ["Dominate Monster", "Maze", "Power Word Stun"],
                9: ["Meteor Swarm", "Power Word Kill", "Time Stop"],
            },
        },
        "possessions": {
            "guaranteed": [
                {"name": "Quarterstaff"},
                {"name": "Spellbook", "desc": "Bound in cracked leather and full of marginal notes."},
                {"name": "Component pouch"},
            ],
            "extras": [
                {"name": "Bottle of ink and quill"},
                {"name": "Crystal orb"},
                {"name": "Half-finished treatise", "desc": "On the migratory habits of will-o-wisps."},
                {"name": "Owl feather bookmark"},
            ],
            "extraCount": [1, 2],
        },
    },
    {
        "name": "Cleric",
        "hitDie": 8,
        "primaryAbility": "wis",
        "savingThrows": ["wis", "cha"],
        "skillProficiencies": ["Insight", "Medicine", "Religion"],
        "features": [
            {"level": 2, "name": "Channel Divinity", "description": "Channels divine energy to Turn Undead, once per short rest."},
            {"level": 5, "name": "Destroy Undead", "description": "Undead that fail against Turn Undead are destroyed outright."},
            {"level": 10, "name": "Divine Intervention", "description": "Calls on its deity to intervene on its behalf."},
        ],
        "subclassLevel": 1,
        "subclasses": [
            {
                "name": "Life Domain",
                "description": "Devoted to the vibrant energy that sustains all life.",
                "features": [
                    {"level": 1, "name": "Disciple of Life", "description": "Healing spells restore extra hit points."},
                ],
            },
            {
                "name": "War Domain",
                "description": "Champions the cause of battle.",
                "features": [
                    {"level": 1, "name": "War Priest", "description": "Makes a weapon attack as a bonus action a few times per day."},
                ],
            },
        ],
        "spellcasting": {
            "ability": "wis",
            "cantripsKnown": [3, 3, 3, 4, 4, 4, 4, 4, 4, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5],
            "spellSlots": FULL_CASTER_SLOTS,
            "cantrips": ["Guidance", "Light", "Sacred Flame", "Spare the Dying", "Thaumaturgy"],
            "spells": {
                1: ["Bless", "Command", "Cure Wounds", "Guiding Bolt", "Healing Word", "Sanctuary"],
                2: ["Hold Person", "Lesser Restoration", "Prayer of Healing", "Spiritual Weapon"],
                3: ["Dispel Magic", "Mass Healing Word", "Revivify", "Spirit Guardians"],
                4: ["Banishment", "Death Ward", "Guardian of Faith"],
                5: ["Flame Strike", "Greater Restoration", "Mass Cure Wounds"],
                6: ["Blade Barrier", "Harm", "Heal"],
                7: ["Divine Word", "Fire Storm", "Regenerate"],
                8: ["Antimagic Field", "Earthquake", "Holy Aura"],
                9: ["Gate", "Mass Heal", "True Resurrection"],
            },
        },
        "possessions": {
            "guaranteed": [
                {"name": "Mace"},
                {"name": "Scale mail"},
                {"name": "Holy symbol"},
            ],
            "extras": [
                {"name": "Prayer book"},
                {"name": "Vial of holy water"},
                {"name": "Incense sticks"},
                {"name": "Pilgrim's token", "desc": "A souvenir from a distant shrine."},
            ],
            "extraCount": [1, 2],
        },
    },
    {
        "name": "Bard",
        "hitDie": 8,
        "primaryAbility": "cha",
        "savingThrows": ["dex", "cha"],
        "skillProficiencies": ["Performance", "Persuasion", "Deception", "History"],
        "features": [
            {"level": 1, "name": "Bardic Inspiration", "description": "Grants an ally an inspiration die as a bonus action."},
            {"level": 2, "name": "Jack of All Trades", "description": "Adds half proficiency to ability checks it is not proficient in."},
            {"level": 6, "name": "Countercharm", "description": "Grants allies advantage against being frightened or charmed."},
        ],
        "subclassLevel": 3,
        "subclasses": [
            {
                "name": "College of Lore",
                "description": "Collects knowledge from every source.",
                "features": [
                    {"level": 3, "name": "Cutting Words", "description": "Spends inspiration to reduce an enemy roll."},
                ],
            },
            {
                "name": "College of Valor",
                "description": "Sings the deeds of heroes and joins them.",
                "features": [
                    {"level": 3, "name": "Combat Inspiration", "description": "Inspiration can add to damage or armor class."},
                ],
            },
        ],
        "spellcasting": {
            "ability": "cha",
            "cantripsKnown": [2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4],
            "spellSlots": FULL_CASTER_SLOTS,
            "cantrips": ["Dancing Lights", "Mage Hand", "Minor Illusion", "Vicious Mockery"],
            "spells": {
                1: ["Charm Person", "Dissonant Whispers", "Faerie Fire", "Healing Word", "Thunderwave"],
                2: ["Heat Metal", "Hold Person", "Shatter", "Suggestion"],
                3: ["Bestow Curse", "Hypnotic Pattern", "Sending"],
                4: ["Compulsion", "Dimension Door", "Polymorph"],
                5: ["Dominate Person", "Mass Cure Wounds", "Raise Dead"],
                6: ["Eyebite", "Mass Suggestion", "Otto's Irresistible Dance"],
                7: ["Etherealness", "Forcecage", "Mirage Arcane"],
                8: ["Feeblemind", "Glibness", "Power Word Stun"],
                9: ["Foresight", "Power Word Kill", "True Polymorph"],
            },
        },
        "possessions": {
            "guaranteed": [
                {"name": "Rapier"},
                {"name": "Leather armor"},
                {"name": "Lute"},
            ],
            "extras": [
                {"name": "Songbook", "desc": "Half the songs are about the same lost love."},
                {"name": "Fine clothes"},
                {"name": "Love letter", "desc": "Unsigned and unsent."},
                {"name": "Spare lute strings"},
            ],
            "extraCount": [1, 3],
        },
    },
]

DUNGEON_TYPES = {
    "cave": {
        "name": "Cave",
        "roomShapes": {"cave": 5, "circle": 2, "rectangle": 1},
        "roomSize": [4, 10],
        "corridor": {
            "style": "winding",
            "width": 1,
            "doorChance": 0.05,
            "secretDoorChance": 0.05,
            "extraConnectionChance": 0.25,
        },
        "tagging": {
            "treasureChance": 0.15,
            "bossChance": 0.6,
            "contentWeights": {"monster": 5, "trap": 1, "empty": 4, "shrine": 1},
        },
        "descriptions": {
            "entrance": [
                "A narrow cleft in the hillside opens onto a damp, dripping chamber.",
                "Roots hang from the ceiling of this wide cave mouth.",
            ],
            "boss": [
                "A vast cavern littered with gnawed bones. Something large sleeps here.",
                "An underground lake; the water ripples though there is no wind.",
            ],
            "treasure": [
                "A crevice stuffed with the belongings of lost travellers.",
                "Glittering geodes line the walls around a rotted chest.",
            ],
            "monster": [
                "Giant bats roost on the ceiling.",
                "A pack of hungry wolves dens among the rocks.",
                "Fungus-covered creatures shuffle in the dark.",
            ],
            "trap": ["Loose scree covers a sudden drop.", "A pocket of bad air pools at floor level."],
            "empty": ["Stalactites drip into shallow pools.", "Cold, quiet stone."],
            "shrine": ["Crude paintings of a horned figure cover one wall."],
        },
        "theme": {
            "backgroundColor": "#2b2420",
            "floorColor": "#c9b79c",
            "wallColor": "#4a3b2c",
            "corridorColor": "#b5a184",
            "strokeWidth": 2.5,
        },
    },
    "crypt": {
        "name": "Crypt",
        "roomShapes": {"rectangle": 4, "square": 3},
        "roomSize": [3, 8],
        "corridor": {
            "style": "straight",
            "width": 1,
            "doorChance": 0.7,
            "secretDoorChance": 0.15,
            "extraConnectionChance": 0.1,
        },
        "tagging": {
            "treasureChance": 0.25,
            "bossChance": 0.8,
            "contentWeights": {"monster": 3, "trap": 3, "empty": 2, "shrine": 2},
        },
        "descriptions": {
            "entrance": ["Worn steps descend past a broken iron gate."],
            "boss": [
                "A sealed tomb with a carved sarcophagus. The lid has been pushed aside from within.",
            ],
            "treasure": ["Grave goods are piled around a noble's bier."],
            "monster": ["Skeletons stand in alcoves, waiting.", "A ghoul crouches over an opened coffin."],
            "trap": ["Pressure plates trigger darts from the walls.", "The floor is a false slab over a pit."],
            "empty": ["Rows of empty burial niches.", "Dust lies thick and undisturbed."],
            "shrine": ["A chapel to the god of the dead, candles long burnt out."],
        },
        "theme": {
            "backgroundColor": "#141414",
            "floorColor": "#dcdcdc",
            "wallColor": "#222222",
            "corridorColor": "#bdbdbd",
            "doorColor": "#5c4033",
            "lineStyle": "solid",
        },
    },
    "fortress": {
        "name": "Fortress",
        "roomShapes": {"rectangle": 5, "square": 3, "circle": 1},
        "roomSize": [4, 9],
        "corridor": {
            "style": "straight",
            "width": 2,
            "doorChance": 0.8,
            "secretDoorChance": 0.05,
            "extraConnectionChance": 0.35,
        },
        "tagging": {
            "treasureChance": 0.2,
            "bossChance": 0.7,
            "contentWeights": {"monster": 4, "trap": 1, "empty": 3},
        },
        "descriptions": {
            "entrance": ["A gatehouse with a rusted portcullis, half raised."],
            "boss": ["The commander's hall, banners hanging over a long table."],
            "treasure": ["The armoury strongroom, its lock already picked."],
            "monster": ["A barracks with a squad of hobgoblins.", "Guards play dice by a brazier."],
            "trap": ["Murder holes overlook this corridor junction."],
            "empty": ["An abandoned mess hall.", "Storerooms stripped bare."],
        },
        "theme": {
            "backgroundColor": "#1d2330",
            "floorColor": "#e6e0d0",
            "wallColor": "#2f3a4f",
            "corridorColor": "#c8c1b0",
            "lineStyle": "dashed",
            "strokeWidth": 3,
        },
    },
}

TEMPLATES = [
    {
        "name": "tavernName",
        "description": "Names for inns and taverns.",
        "template": "The {adj} {noun}",
        "tables": {
            "{adj}": ["Rusty", "Golden", "Prancing", "Drunken", {"text": "Sleeping", "weight": 2}],
            "{noun}": ["Dragon", "Anchor", "Pony", "Goblet", {"text": "{animal}'s Rest", "weight": 0.5}],
            "{animal}": ["Stag", "Boar", "Griffon"],
        },
    },
    {
        "name": "questHook",
        "description": "One-line adventure hooks.",
        "template": "A {patron} asks the party to {task} before {deadline}.",
        "tables": {
            "{patron}": ["nervous merchant", "retired adventurer", "temple acolyte", "{noble}"],
            "{noble}": ["baron's steward", "disgraced countess"],
            "{task}": [
                "recover a stolen {item}",
                "escort a caravan through {place}",
                "find a missing {person}",
            ],
            "{item}": ["relic", "ledger", "family sword"],
            "{place}": ["the Mirewood", "the old dwarf road", "bandit country"],
            "{person}": ["apprentice", "tax collector", "heir"],
            "{deadline}": ["the next full moon", "the harvest festival", "dawn"],
        },
    },
    {
        "name": "npcQuirk",
        "description": "Memorable mannerisms.",
        "template": "{quirk}",
        "tables": {
            "{quirk}": [
                "Constantly {habit}.",
                "Speaks only in {speech}.",
                {"text": "Collects {collection} and will not stop talking about them.", "weight": 0.5},
            ],
            "{habit}": ["polishes a coin", "hums old marching songs", "checks the exits"],
            "{speech}": ["whispers", "rhyming couplets", "questions"],
            "{collection}": ["teeth", "buttons", "maps of places that do not exist"],
        },
    },
]


def default_npc_settings() -> NPCSettings:
    return NPCSettings(
        races=[Race.model_validate(r) for r in RACES],
        classes=[CharacterClass.model_validate(c) for c in CLASSES],
    )


def default_dungeon_settings() -> DungeonSettings:
    return DungeonSettings(
        dungeon_types={
            key: DungeonTypeProfile.model_validate(profile)
            for key, profile in DUNGEON_TYPES.items()
        },
        default_dungeon_type="cave",
    )


def default_random_settings() -> RandomSettings:
    return RandomSettings(
        generators=[GeneratorTemplate.model_validate(t) for t in TEMPLATES],
    )


def default_settings() -> SettingsDocument:
    """A fresh settings document holding the shipped content."""
    return SettingsDocument(
        npc=default_npc_settings(),
        dungeon=default_dungeon_settings(),
        random=default_random_settings(),
    )
