"""Dungeon generation endpoints."""

from fastapi import APIRouter, Request

from api.errors import http_error
from engine.dungeon import generate_dungeon
from engine.errors import GeneratorError
from engine.rng import RandomSource
from models.dungeon import Dungeon, DungeonOptions

router = APIRouter()


@router.post("/generate", response_model=Dungeon)
def create_dungeon(body: DungeonOptions, request: Request) -> Dungeon:
    """Generate a dungeon with its SVG map and Markdown room guide."""
    try:
        return generate_dungeon(body, request.app.state.settings, RandomSource(body.seed))
    except GeneratorError as e:
        raise http_error(e)


@router.get("/types")
def list_dungeon_types(request: Request) -> dict:
    """Configured dungeon types, keyed by type key, and the default."""
    dungeon = request.app.state.settings.dungeon
    return {
        "default": dungeon.default_dungeon_type,
        "types": {
            key: {"name": profile.name, "sizes": list(profile.room_count_ranges)}
            for key, profile in dungeon.dungeon_types.items()
        },
    }
