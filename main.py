"""FastAPI app entry point for Tabletop Generators.

Run with: uvicorn main:app --reload
"""

from fastapi import FastAPI

import config
from api.dungeon import router as dungeon_router
from api.npc import router as npc_router
from api.settings import router as settings_router
from api.templates import router as templates_router
from engine.settings_store import load_settings

config.setup_logging()
config.load_secret()

app = FastAPI(
    title="Tabletop Generators",
    description="NPC, dungeon and random table generators for tabletop RPGs",
    version="0.1.0",
)

# Settings snapshot shared by all requests; replaced wholesale on import
app.state.settings = load_settings(config.SETTINGS_FILE)

app.include_router(npc_router, prefix="/npc", tags=["NPC"])
app.include_router(dungeon_router, prefix="/dungeon", tags=["Dungeon"])
app.include_router(templates_router, prefix="/random", tags=["Random"])
app.include_router(settings_router, prefix="/settings", tags=["Settings"])


@app.get("/")
def root() -> dict:
    """Root endpoint returning server info."""
    return {"name": "Tabletop Generators", "version": "0.1.0", "status": "running"}


@app.get("/health")
def health() -> dict:
    """Health check endpoint."""
    return {"healthy": True}
