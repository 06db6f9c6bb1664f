"""Grid geometry and graph search for dungeon layouts."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from engine.rng import RandomSource
    from models.dungeon import Connection, Room


def rooms_overlap(a: Room, b: Room, gap: int = 0) -> bool:
    """Check if two room bounding boxes overlap, or come within ``gap`` cells.

    Args:
        a: First room.
        b: Second room.
        gap: Cells of clearance required between the rooms.

    Returns:
        True if the rooms are too close.
    """
    return not (
        a.x + a.width + gap <= b.x
        or b.x + b.width + gap <= a.x
        or a.y + a.height + gap <= b.y
        or b.y + b.height + gap <= a.y
    )


def distance(pos1: tuple[int, int], pos2: tuple[int, int]) -> float:
    """Straight-line distance in cells between two grid positions."""
    return math.hypot(pos1[0] - pos2[0], pos1[1] - pos2[1])


def corridor_path(
    start: tuple[int, int],
    end: tuple[int, int],
    rng: RandomSource,
    style: str = "straight",
) -> list[tuple[int, int]]:
    """Axis-aligned corridor waypoints from ``start`` to ``end``.

    ``straight`` makes one L-bend (horizontal or vertical first, at random).
    ``winding`` routes through a random midpoint, giving two bends.

    Returns:
        Waypoints, first == start and last == end, with consecutive
        duplicates removed.
    """
    if style == "winding" and start[0] != end[0] and start[1] != end[1]:
        lo_x, hi_x = sorted((start[0], end[0]))
        lo_y, hi_y = sorted((start[1], end[1]))
        mid = (rng.uniform_int(lo_x, hi_x), rng.uniform_int(lo_y, hi_y))
        first = corridor_path(start, mid, rng)
        second = corridor_path(mid, end, rng)
        points = first + second[1:]
    else:
        (sx, sy), (ex, ey) = start, end
        corner = (ex, sy) if rng.chance(0.5) else (sx, ey)
        points = [start, corner, end]

    path: list[tuple[int, int]] = []
    for point in points:
        if not path or path[-1] != point:
            path.append(point)
    return path


def adjacency(connections: list[Connection]) -> dict[int, set[int]]:
    """Undirected neighbour sets from a list of connections."""
    graph: dict[int, set[int]] = {}
    for connection in connections:
        a, b = connection.rooms
        graph.setdefault(a, set()).add(b)
        graph.setdefault(b, set()).add(a)
    return graph


def hop_distances(connections: list[Connection], start: int) -> dict[int, int]:
    """Breadth-first search over the connection graph.

    Args:
        connections: Corridors between rooms.
        start: Room id to search from.

    Returns:
        Mapping of every reachable room id to its corridor count from start.
    """
    graph = adjacency(connections)
    visited: dict[int, int] = {start: 0}
    queue: list[int] = [start]

    while queue:
        current = queue.pop(0)
        for neighbour in sorted(graph.get(current, ())):
            if neighbour not in visited:
                visited[neighbour] = visited[current] + 1
                queue.append(neighbour)

    return visited


def is_connected(room_ids: list[int], connections: list[Connection], start: int) -> bool:
    """True if every room in ``room_ids`` is reachable from ``start``."""
    reached = hop_distances(connections, start)
    return all(room_id in reached for room_id in room_ids)


def exit_point(room: Room, toward: tuple[int, int]) -> tuple[float, float]:
    """Where a corridor leaving the room centre toward ``toward`` crosses its edge.

    Corridors are axis-aligned, so the first waypoint after the centre shares
    either its x or its y with the centre.
    """
    cx, cy = room.center
    tx, ty = toward
    if ty == cy and tx != cx:
        x = room.x + room.width if tx > cx else room.x
        return (float(x), cy + 0.5)
    if tx == cx and ty != cy:
        y = room.y + room.height if ty > cy else room.y
        return (cx + 0.5, float(y))
    return (cx + 0.5, cy + 0.5)
