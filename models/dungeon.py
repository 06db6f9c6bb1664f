"""Dungeon layout models for Tabletop Generators."""

from enum import Enum

from pydantic import BaseModel


class RoomTag(str, Enum):
    """What a room is for; drives colour and guide text."""
    ENTRANCE = "entrance"
    BOSS = "boss"
    TREASURE = "treasure"
    MONSTER = "monster"
    TRAP = "trap"
    EMPTY = "empty"
    SHRINE = "shrine"


class DoorType(str, Enum):
    OPEN = "open"
    DOOR = "door"
    SECRET = "secret"


class Room(BaseModel):
    """A placed room. Bounds are in grid cells; ``id`` is the map label."""
    id: int
    x: int
    y: int
    width: int
    height: int
    shape: str = "rectangle"
    points: list[tuple[float, float]] | None = None  # Outline for irregular shapes
    tag: RoomTag = RoomTag.EMPTY
    description: str = ""

    @property
    def center(self) -> tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)


class Connection(BaseModel):
    """A corridor joining two rooms."""
    rooms: tuple[int, int]
    path: list[tuple[int, int]]         # Grid points, first in rooms[0]
    door: DoorType = DoorType.OPEN


class DungeonOptions(BaseModel):
    dungeon_type: str | None = None     # Key or display name; None = default
    size: str = "Medium"
    allow_loops: bool | None = None     # None = profile decides
    seed: int | None = None


class Dungeon(BaseModel):
    """A generated dungeon with its rendered image and guide."""
    dungeon_type: str
    size: str
    width: int
    height: int
    requested_rooms: int
    entrance_id: int
    rooms: list[Room]
    connections: list[Connection]
    svg: str = ""
    guide: str = ""

    def room(self, room_id: int) -> Room:
        for room in self.rooms:
            if room.id == room_id:
                return room
        raise KeyError(room_id)
