"""SVG map and Markdown guide for a generated dungeon.

Both outputs number rooms by ``Room.id``: the map labels each room and wraps
it in ``<g id="room-N" data-room-id="N">``, and the guide has one
``### N. Tag`` heading per room, so the two can be read side by side.
"""

from __future__ import annotations

from html import escape

from engine.grid import adjacency, exit_point
from models.dungeon import Connection, DoorType, Dungeon, Room
from models.settings import DungeonTheme, DungeonTypeProfile, MapStyle

DOOR_LABELS = {
    DoorType.OPEN: "open archway",
    DoorType.DOOR: "door",
    DoorType.SECRET: "secret door",
}


def _attr(value) -> str:
    return escape(str(value), quote=True)


def _fmt(value: float) -> str:
    """Compact number formatting for SVG coordinates."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


class _Canvas:
    """Converts grid coordinates to pixels."""

    def __init__(self, style: MapStyle):
        self.cell = style.cell_size
        self.pad = style.padding

    def px(self, v: float) -> float:
        return (v + self.pad) * self.cell

    def center_px(self, v: float) -> float:
        return self.px(v + 0.5)


def _grid_lines(dungeon: Dungeon, canvas: _Canvas, style: MapStyle) -> list[str]:
    lines = [f'<g class="grid" stroke="{_attr(style.grid_color)}" stroke-width="0.5">']
    for x in range(dungeon.width + 1):
        px = _fmt(canvas.px(x))
        lines.append(
            f'<line x1="{px}" y1="{_fmt(canvas.px(0))}" x2="{px}" y2="{_fmt(canvas.px(dungeon.height))}"/>'
        )
    for y in range(dungeon.height + 1):
        py = _fmt(canvas.px(y))
        lines.append(
            f'<line x1="{_fmt(canvas.px(0))}" y1="{py}" x2="{_fmt(canvas.px(dungeon.width))}" y2="{py}"/>'
        )
    lines.append("</g>")
    return lines


def _corridor(connection: Connection, canvas: _Canvas, theme: DungeonTheme, width: int) -> str:
    points = " ".join(
        f"{_fmt(canvas.center_px(x))},{_fmt(canvas.center_px(y))}" for x, y in connection.path
    )
    a, b = connection.rooms
    return (
        f'<polyline class="corridor" data-rooms="{a}-{b}" points="{points}" fill="none" '
        f'stroke="{_attr(theme.corridor_color)}" stroke-width="{_fmt(width * canvas.cell)}" '
        f'stroke-linecap="square" stroke-linejoin="miter"/>'
    )


def _room_shape(room: Room, canvas: _Canvas, fill: str, theme: DungeonTheme) -> str:
    stroke = (
        f'fill="{_attr(fill)}" stroke="{_attr(theme.wall_color)}" '
        f'stroke-width="{_fmt(theme.stroke_width)}"'
    )
    if theme.line_style == "dashed":
        stroke += ' stroke-dasharray="6 4"'
    if room.shape == "circle":
        rx = room.width * canvas.cell / 2
        ry = room.height * canvas.cell / 2
        return (
            f'<ellipse cx="{_fmt(canvas.px(room.x) + rx)}" cy="{_fmt(canvas.px(room.y) + ry)}" '
            f'rx="{_fmt(rx)}" ry="{_fmt(ry)}" {stroke}/>'
        )
    if room.points:
        points = " ".join(f"{_fmt(canvas.px(x))},{_fmt(canvas.px(y))}" for x, y in room.points)
        return f'<polygon points="{points}" {stroke}/>'
    return (
        f'<rect x="{_fmt(canvas.px(room.x))}" y="{_fmt(canvas.px(room.y))}" '
        f'width="{_fmt(room.width * canvas.cell)}" height="{_fmt(room.height * canvas.cell)}" {stroke}/>'
    )


def _room_group(room: Room, canvas: _Canvas, theme: DungeonTheme, style: MapStyle) -> list[str]:
    fill = theme.tag_colors.get(room.tag.value, theme.floor_color)
    parts = [
        f'<g id="room-{room.id}" class="room room-{room.tag.value}" data-room-id="{room.id}">',
        _room_shape(room, canvas, fill, theme),
    ]
    if style.show_labels:
        cx = canvas.px(room.x) + room.width * canvas.cell / 2
        cy = canvas.px(room.y) + room.height * canvas.cell / 2
        parts.append(
            f'<text x="{_fmt(cx)}" y="{_fmt(cy)}" text-anchor="middle" dominant-baseline="central" '
            f'font-family="serif" font-weight="bold" font-size="{_fmt(canvas.cell * 1.2)}" '
            f'fill="{_attr(theme.label_color)}">{room.id}</text>'
        )
    parts.append("</g>")
    return parts


def _doors(dungeon: Dungeon, canvas: _Canvas, theme: DungeonTheme) -> list[str]:
    """One marker where each corridor leaves each of its two rooms."""
    size = canvas.cell * 0.8
    parts = ['<g class="doors">']
    for connection in dungeon.connections:
        if connection.door == DoorType.OPEN or len(connection.path) < 2:
            continue
        color = theme.secret_door_color if connection.door == DoorType.SECRET else theme.door_color
        ends = (
            (dungeon.room(connection.rooms[0]), connection.path[1]),
            (dungeon.room(connection.rooms[1]), connection.path[-2]),
        )
        for room, toward in ends:
            x, y = exit_point(room, toward)
            parts.append(
                f'<rect class="door door-{connection.door.value}" '
                f'x="{_fmt(canvas.px(x) - size / 2)}" y="{_fmt(canvas.px(y) - size / 2)}" '
                f'width="{_fmt(size)}" height="{_fmt(size)}" fill="{_attr(color)}" '
                f'stroke="{_attr(theme.wall_color)}" stroke-width="1"/>'
            )
    parts.append("</g>")
    return parts


def render_svg(dungeon: Dungeon, profile: DungeonTypeProfile, style: MapStyle) -> str:
    """Render the dungeon as a self-contained SVG document."""
    theme = profile.theme
    canvas = _Canvas(style)
    width = (dungeon.width + 2 * style.padding) * style.cell_size
    height = (dungeon.height + 2 * style.padding) * style.cell_size

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" class="dungeon-map" '
        f'width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
        f"<title>{escape(profile.name)} dungeon ({escape(dungeon.size)})</title>",
        f'<rect width="{width}" height="{height}" fill="{_attr(theme.background_color)}"/>',
    ]
    if style.show_grid:
        parts += _grid_lines(dungeon, canvas, style)

    parts.append('<g class="corridors">')
    parts += [
        _corridor(c, canvas, theme, profile.corridor.width) for c in dungeon.connections
    ]
    parts.append("</g>")

    parts.append('<g class="rooms">')
    for room in dungeon.rooms:
        parts += _room_group(room, canvas, theme, style)
    parts.append("</g>")

    parts += _doors(dungeon, canvas, theme)
    parts.append("</svg>")
    return "\n".join(parts)


def render_guide(dungeon: Dungeon, profile: DungeonTypeProfile) -> str:
    """Markdown guide with one section per room, numbered like the map."""
    doors: dict[tuple[int, int], DoorType] = {}
    for connection in dungeon.connections:
        a, b = connection.rooms
        doors[(a, b)] = doors[(b, a)] = connection.door
    graph = adjacency(dungeon.connections)

    lines = [
        f"# {profile.name} Dungeon ({dungeon.size})",
        "",
        f"{len(dungeon.rooms)} rooms joined by {len(dungeon.connections)} corridors. "
        f"Room {dungeon.entrance_id} is the entrance.",
        "",
        "## Rooms",
    ]
    for room in dungeon.rooms:
        exits = ", ".join(
            f"{other} ({DOOR_LABELS[doors[(room.id, other)]]})"
            for other in sorted(graph.get(room.id, ()))
        )
        lines += [
            "",
            f"### {room.id}. {room.tag.value.capitalize()}",
            "",
            room.description,
            "",
            f"- Size: {room.width * 5} x {room.height * 5} ft ({room.shape})",
            f"- Exits: {exits or 'none'}",
        ]
    return "\n".join(lines)
