"""Tests for the SVG map and Markdown guide."""

import re

from engine.render import render_guide, render_svg
from models.dungeon import Connection, DoorType, Dungeon, Room, RoomTag
from models.settings import DungeonTypeProfile, MapStyle


def _dungeon() -> Dungeon:
    """Helper: three rooms in an L, one door of each kind."""
    rooms = [
        Room(id=1, x=1, y=1, width=4, height=4, tag=RoomTag.ENTRANCE, description="Way in."),
        Room(id=2, x=10, y=1, width=4, height=4, shape="circle", tag=RoomTag.MONSTER,
             description="Goblins & <rats>."),
        Room(id=3, x=10, y=10, width=4, height=4, shape="cave", tag=RoomTag.BOSS,
             points=[(10, 10), (14, 10), (14, 14), (10, 14)], description="The boss."),
    ]
    connections = [
        Connection(rooms=(1, 2), path=[(3, 3), (12, 3)], door=DoorType.DOOR),
        Connection(rooms=(2, 3), path=[(12, 3), (12, 12)], door=DoorType.SECRET),
        Connection(rooms=(3, 1), path=[(12, 12), (3, 12), (3, 3)], door=DoorType.OPEN),
    ]
    return Dungeon(
        dungeon_type="test", size="Small", width=20, height=16, requested_rooms=3,
        entrance_id=1, rooms=rooms, connections=connections,
    )


class TestRenderSvg:

    def test_document_size(self):
        svg = render_svg(_dungeon(), DungeonTypeProfile(name="Test"), MapStyle(cell_size=10, padding=1))
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert 'width="220" height="180"' in svg
        assert svg.endswith("</svg>")

    def test_room_groups_and_shapes(self):
        svg = render_svg(_dungeon(), DungeonTypeProfile(name="Test"), MapStyle())
        for room_id in (1, 2, 3):
            assert f'<g id="room-{room_id}"' in svg
        assert "<ellipse" in svg
        assert "<polygon" in svg
        assert 'class="room room-boss"' in svg

    def test_labels_toggle(self):
        with_labels = render_svg(_dungeon(), DungeonTypeProfile(name="Test"), MapStyle())
        without = render_svg(_dungeon(), DungeonTypeProfile(name="Test"), MapStyle(show_labels=False))
        assert "<text" in with_labels
        assert "<text" not in without

    def test_grid_toggle(self):
        svg = render_svg(_dungeon(), DungeonTypeProfile(name="Test"), MapStyle(show_grid=False))
        assert 'class="grid"' not in svg

    def test_doors_drawn_for_closed_connections(self):
        svg = render_svg(_dungeon(), DungeonTypeProfile(name="Test"), MapStyle())
        assert len(re.findall(r'class="door door-door"', svg)) == 2
        assert len(re.findall(r'class="door door-secret"', svg)) == 2
        assert "door-open" not in svg

    def test_profile_name_escaped(self):
        svg = render_svg(_dungeon(), DungeonTypeProfile(name="Rats & <Bats>"), MapStyle())
        assert "Rats &amp; &lt;Bats&gt;" in svg

    def test_dashed_walls(self):
        profile = DungeonTypeProfile(name="Test", theme={"lineStyle": "dashed"})
        assert "stroke-dasharray" in render_svg(_dungeon(), profile, MapStyle())


class TestRenderGuide:

    def test_one_section_per_room(self):
        guide = render_guide(_dungeon(), DungeonTypeProfile(name="Crypt"))
        assert guide.startswith("# Crypt Dungeon (Small)")
        assert re.findall(r"^### (\d+)\. ", guide, re.MULTILINE) == ["1", "2", "3"]
        assert "### 3. Boss" in guide

    def test_exits_name_door_types(self):
        guide = render_guide(_dungeon(), DungeonTypeProfile(name="Crypt"))
        assert "- Exits: 2 (door), 3 (open archway)" in guide
        assert "3 (secret door)" in guide

    def test_room_size_in_feet(self):
        guide = render_guide(_dungeon(), DungeonTypeProfile(name="Crypt"))
        assert "- Size: 20 x 20 ft (circle)" in guide
