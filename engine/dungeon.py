"""Dungeon generation: room placement, connectivity, tagging.

Placement policy: each room gets ``PLACEMENT_ATTEMPTS`` tries that keep a
one-cell gap to every placed room, then ``RELAXED_PLACEMENT_ATTEMPTS`` tries
that only forbid overlap. A room that fits in neither pass is skipped, so a
crowded map can come out with fewer rooms than targeted. That is accepted as
long as the size's minimum room count is still met.
"""

from __future__ import annotations

import logging
import math

from config import MAP_DIMENSIONS, PLACEMENT_ATTEMPTS, RELAXED_PLACEMENT_ATTEMPTS
from engine.errors import GenerationFailedError, InvalidInputError
from engine.grid import corridor_path, distance, hop_distances, is_connected, rooms_overlap
from engine.render import render_guide, render_svg
from engine.rng import RandomSource
from models.dungeon import Connection, DoorType, Dungeon, DungeonOptions, Room, RoomTag
from models.settings import DungeonTypeProfile, SettingsDocument

logger = logging.getLogger(__name__)

# Loop chance used when loops are explicitly requested but the profile has none.
REQUESTED_LOOP_CHANCE = 0.3

DEFAULT_DESCRIPTIONS = {
    RoomTag.ENTRANCE: ["The way in. Cold air drifts from deeper inside."],
    RoomTag.BOSS: ["The lair of whatever rules this place."],
    RoomTag.TREASURE: ["A hoard, or what is left of one."],
    RoomTag.MONSTER: ["Something lives here and does not welcome guests."],
    RoomTag.TRAP: ["The floor and walls hide a nasty surprise."],
    RoomTag.EMPTY: ["Dust, debris and silence."],
    RoomTag.SHRINE: ["A small altar to a forgotten power."],
}


def find_dungeon_type(settings: SettingsDocument, name: str | None) -> tuple[str, DungeonTypeProfile]:
    """Resolve a dungeon type by key or display name (case-insensitive).

    ``None`` selects the configured default type.

    Raises:
        InvalidInputError: If no dungeon type matches.
    """
    types = settings.dungeon.dungeon_types
    wanted = name or settings.dungeon.default_dungeon_type
    if wanted:
        for key, profile in types.items():
            if wanted.lower() in (key.lower(), profile.name.lower()):
                return key, profile
    raise InvalidInputError(f"Unknown dungeon type: {wanted or '(none)'}")


def _resolve_size(profile: DungeonTypeProfile, size: str) -> tuple[str, tuple[int, int]]:
    for key, room_range in profile.room_count_ranges.items():
        if key.lower() == size.lower():
            return key, room_range
    raise InvalidInputError(
        f"Unknown dungeon size '{size}'; expected one of "
        f"{', '.join(profile.room_count_ranges)}"
    )


def _cave_outline(x: int, y: int, w: int, h: int, rng: RandomSource) -> list[tuple[float, float]]:
    """Irregular polygon inscribed in the room's bounding box."""
    cx, cy = x + w / 2, y + h / 2
    corners = rng.uniform_int(7, 11)
    points = []
    for i in range(corners):
        angle = 2 * math.pi * i / corners
        jitter = 0.75 + 0.25 * rng.uniform_float()
        points.append((
            round(cx + math.cos(angle) * w / 2 * jitter, 2),
            round(cy + math.sin(angle) * h / 2 * jitter, 2),
        ))
    return points


def _roll_room(
    room_id: int,
    shape: str,
    profile: DungeonTypeProfile,
    map_size: tuple[int, int],
    rng: RandomSource,
) -> Room:
    map_w, map_h = map_size
    lo, hi = profile.room_size
    w = min(rng.uniform_int(lo, hi), map_w - 2)
    h = w if shape in ("square", "circle") else min(rng.uniform_int(lo, hi), map_h - 2)
    h = min(h, map_h - 2)
    x = rng.uniform_int(1, map_w - w - 1)
    y = rng.uniform_int(1, map_h - h - 1)
    points = _cave_outline(x, y, w, h, rng) if shape == "cave" else None
    return Room(id=room_id, x=x, y=y, width=w, height=h, shape=shape, points=points)


def _place_room(
    room_id: int,
    profile: DungeonTypeProfile,
    placed: list[Room],
    map_size: tuple[int, int],
    rng: RandomSource,
) -> Room | None:
    """Try to fit one new room; None if both passes fail."""
    shapes = list(profile.room_shapes)
    weights = list(profile.room_shapes.values())
    for gap, attempts in ((1, PLACEMENT_ATTEMPTS), (0, RELAXED_PLACEMENT_ATTEMPTS)):
        for _ in range(attempts):
            shape = rng.weighted_choice(shapes, weights)
            room = _roll_room(room_id, shape, profile, map_size, rng)
            if not any(rooms_overlap(room, other, gap) for other in placed):
                return room
    return None


def _roll_door(profile: DungeonTypeProfile, rng: RandomSource) -> DoorType:
    if rng.chance(profile.corridor.secret_door_chance):
        return DoorType.SECRET
    if rng.chance(profile.corridor.door_chance):
        return DoorType.DOOR
    return DoorType.OPEN


def _connect(a: Room, b: Room, profile: DungeonTypeProfile, rng: RandomSource) -> Connection:
    return Connection(
        rooms=(a.id, b.id),
        path=corridor_path(a.center, b.center, rng, profile.corridor.style),
        door=_roll_door(profile, rng),
    )


def _nearest(room: Room, candidates: list[Room]) -> Room:
    return min(candidates, key=lambda other: (distance(room.center, other.center), other.id))


def connect_rooms(
    rooms: list[Room],
    profile: DungeonTypeProfile,
    rng: RandomSource,
    allow_loops: bool | None = None,
) -> list[Connection]:
    """Join every room to the nearest earlier room, then add loop corridors.

    The first pass is a spanning tree, so every room is reachable from the
    first. The second pass gives each room a chance to link to its nearest
    room it is not already joined to.
    """
    connections = [
        _connect(room, _nearest(room, rooms[:i]), profile, rng)
        for i, room in enumerate(rooms)
        if i > 0
    ]
    linked = {frozenset(c.rooms) for c in connections}

    if allow_loops is False or len(rooms) < 3:
        return connections
    loop_chance = profile.corridor.extra_connection_chance
    if allow_loops:
        loop_chance = max(loop_chance, REQUESTED_LOOP_CHANCE)

    def add_loop(room: Room) -> bool:
        candidates = [
            other for other in rooms
            if other.id != room.id and frozenset((room.id, other.id)) not in linked
        ]
        if not candidates:
            return False
        other = _nearest(room, candidates)
        connections.append(_connect(room, other, profile, rng))
        linked.add(frozenset((room.id, other.id)))
        return True

    loops = 0
    for room in rooms:
        if rng.chance(loop_chance) and add_loop(room):
            loops += 1
    if allow_loops and loops == 0:
        add_loop(rng.choice(rooms))
    return connections


def tag_rooms(
    rooms: list[Room],
    connections: list[Connection],
    profile: DungeonTypeProfile,
    rng: RandomSource,
) -> list[Room]:
    """Assign tags and guide descriptions.

    The first room is the entrance. The room farthest from it (by corridor
    count) may become the boss room; the rest are treasure rooms or draw
    from the profile's content weights.
    """
    rules = profile.tagging
    entrance = rooms[0]
    tags = {entrance.id: RoomTag.ENTRANCE}

    if len(rooms) > 1 and rng.chance(rules.boss_chance):
        hops = hop_distances(connections, entrance.id)
        boss = max(rooms[1:], key=lambda r: (hops.get(r.id, 0), r.id))
        tags[boss.id] = RoomTag.BOSS

    contents = [RoomTag(tag) for tag in rules.content_weights]
    weights = list(rules.content_weights.values())
    for room in rooms:
        if room.id in tags:
            continue
        if rng.chance(rules.treasure_chance):
            tags[room.id] = RoomTag.TREASURE
        elif contents:
            tags[room.id] = rng.weighted_choice(contents, weights)
        else:
            tags[room.id] = RoomTag.EMPTY

    tagged = []
    for room in rooms:
        tag = tags[room.id]
        pool = profile.descriptions.get(tag.value) or DEFAULT_DESCRIPTIONS[tag]
        tagged.append(room.model_copy(update={"tag": tag, "description": rng.choice(pool)}))
    return tagged


def generate_dungeon(
    options: DungeonOptions,
    settings: SettingsDocument,
    rng: RandomSource | None = None,
) -> Dungeon:
    """Generate a dungeon layout with its SVG map and room guide.

    Args:
        options: Dungeon type, size and topology.
        settings: Read-only settings snapshot holding the dungeon profiles.
        rng: Random source; a fresh one seeded from options if omitted.

    Returns:
        A Dungeon whose rooms are all reachable from the entrance.

    Raises:
        InvalidInputError: Unknown dungeon type or size.
        GenerationFailedError: Fewer rooms than the size minimum could be
            placed, or the corridors failed to connect every room.
    """
    rng = rng or RandomSource(options.seed)
    type_key, profile = find_dungeon_type(settings, options.dungeon_type)
    size, (min_rooms, max_rooms) = _resolve_size(profile, options.size)
    map_size = MAP_DIMENSIONS.get(size, MAP_DIMENSIONS["Large"])

    target = rng.uniform_int(min_rooms, max_rooms)
    rooms: list[Room] = []
    for _ in range(target):
        room = _place_room(len(rooms) + 1, profile, rooms, map_size, rng)
        if room is None:
            logger.debug("Gave up placing room %d of %d", len(rooms) + 1, target)
            continue
        rooms.append(room)

    if len(rooms) < min_rooms:
        raise GenerationFailedError(
            f"Only placed {len(rooms)} rooms; {size} dungeons need at least {min_rooms}"
        )
    if len(rooms) < target:
        logger.warning("Placed %d of %d requested rooms", len(rooms), target)

    connections = connect_rooms(rooms, profile, rng, options.allow_loops)
    if not is_connected([r.id for r in rooms], connections, rooms[0].id):
        raise GenerationFailedError("Corridors do not reach every room")
    rooms = tag_rooms(rooms, connections, profile, rng)

    dungeon = Dungeon(
        dungeon_type=type_key,
        size=size,
        width=map_size[0],
        height=map_size[1],
        requested_rooms=target,
        entrance_id=rooms[0].id,
        rooms=rooms,
        connections=connections,
    )
    dungeon.svg = render_svg(dungeon, profile, settings.dungeon.map_style)
    dungeon.guide = render_guide(dungeon, profile)
    logger.info(
        "Generated %s %s dungeon: %d rooms, %d corridors",
        size, profile.name, len(rooms), len(connections),
    )
    return dungeon
