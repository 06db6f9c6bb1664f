"""NPC generation and statblock endpoints."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from api.errors import http_error
from engine.errors import GeneratorError
from engine.npc import generate_character
from engine.rng import RandomSource
from engine.statblock import format_statblock
from models.characters import NPC, NPCOptions
from models.settings import SettingsDocument

router = APIRouter()


class GenerateNPCRequest(NPCOptions):
    """NPC options plus an optional statblock format override."""
    format: str | None = None


class GenerateNPCResponse(BaseModel):
    npc: NPC
    statblock: str


class StatblockRequest(BaseModel):
    npc: NPC
    format: str | None = None


class StatblockResponse(BaseModel):
    statblock: str


def _get_settings(request: Request) -> SettingsDocument:
    """Get the current settings snapshot from app state."""
    return request.app.state.settings


@router.post("/generate", response_model=GenerateNPCResponse)
def generate_npc(body: GenerateNPCRequest, request: Request) -> GenerateNPCResponse:
    """Generate an NPC and its statblock.

    Any option left out is rolled. Pass ``seed`` for a reproducible NPC.
    """
    settings = _get_settings(request)
    try:
        npc = generate_character(body, settings, RandomSource(body.seed))
        statblock = format_statblock(npc, settings, body.format)
    except GeneratorError as e:
        raise http_error(e)
    return GenerateNPCResponse(npc=npc, statblock=statblock)


@router.post("/statblock", response_model=StatblockResponse)
def render_statblock(body: StatblockRequest, request: Request) -> StatblockResponse:
    """Re-render a previously generated NPC, e.g. in another format."""
    try:
        statblock = format_statblock(body.npc, _get_settings(request), body.format)
    except GeneratorError as e:
        raise http_error(e)
    return StatblockResponse(statblock=statblock)


@router.get("/races")
def list_races(request: Request) -> list[str]:
    return [race.name for race in _get_settings(request).npc.races]


@router.get("/classes")
def list_classes(request: Request) -> list[dict]:
    """Configured classes with their subclasses."""
    return [
        {
            "name": c.name,
            "subclasses": [s.name for s in c.subclasses],
            "subclass_level": c.subclass_level,
            "spellcaster": c.spellcasting is not None,
        }
        for c in _get_settings(request).npc.classes
    ]
