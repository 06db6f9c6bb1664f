"""Persistence for the settings document.

The document is one JSON file with a top-level key per section. Sections the
file lacks are filled from the shipped defaults, so an older or hand-trimmed
file still loads.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from engine.defaults import (
    default_dungeon_settings,
    default_npc_settings,
    default_random_settings,
    default_settings,
)
from engine.errors import InvalidInputError
from models.settings import DungeonSettings, NPCSettings, RandomSettings, SettingsDocument

logger = logging.getLogger(__name__)

SECTIONS = {
    "npc": (NPCSettings, default_npc_settings),
    "dungeon": (DungeonSettings, default_dungeon_settings),
    "random": (RandomSettings, default_random_settings),
}


def _check_section(name: str) -> None:
    if name not in SECTIONS:
        raise InvalidInputError(
            f"Unknown settings section '{name}'; expected one of {', '.join(SECTIONS)}"
        )


def _validate_section(name: str, data):
    model, _ = SECTIONS[name]
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid '{name}' settings: {e}") from e


def validate_settings(doc: SettingsDocument) -> SettingsDocument:
    """Repair references between sections.

    A default dungeon type that no longer exists falls back to the first
    configured type.
    """
    dungeon = doc.dungeon
    if dungeon.dungeon_types and dungeon.default_dungeon_type not in dungeon.dungeon_types:
        fallback = next(iter(dungeon.dungeon_types))
        logger.warning(
            "Default dungeon type '%s' is not configured; using '%s'",
            dungeon.default_dungeon_type, fallback,
        )
        dungeon = dungeon.model_copy(update={"default_dungeon_type": fallback})
        doc = doc.model_copy(update={"dungeon": dungeon})
    return doc


def document_from_dict(data: dict) -> SettingsDocument:
    """Build a document from parsed JSON, defaulting any missing section.

    Raises:
        InvalidInputError: If the data is not an object or a section is
            malformed.
    """
    if not isinstance(data, dict):
        raise InvalidInputError("Settings document must be a JSON object")
    sections = {}
    for name, (_, default) in SECTIONS.items():
        if name in data:
            sections[name] = _validate_section(name, data[name])
        else:
            sections[name] = default()
    return validate_settings(SettingsDocument(**sections))


def load_settings(path: str) -> SettingsDocument:
    """Load the settings document from a JSON file.

    Args:
        path: File path to read from.

    Returns:
        The loaded document, or the defaults if the file doesn't exist.

    Raises:
        InvalidInputError: If the file is not valid JSON or has a bad shape.
    """
    if not Path(path).exists():
        logger.info("No settings file at %s; using defaults", path)
        return default_settings()
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidInputError(f"Settings file {path} is not valid JSON: {e}") from e
    return document_from_dict(data)


def save_settings(doc: SettingsDocument, path: str) -> None:
    """Persist the settings document to a JSON file.

    Writes to a temporary file first, then renames for atomicity.
    """
    tmp_path = path + ".tmp"
    data = doc.model_dump(mode="json", by_alias=True)
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    os.replace(tmp_path, path)
    logger.debug("Saved settings to %s", path)


def export_section(doc: SettingsDocument, name: str) -> dict:
    """JSON-ready copy of one section, in the same shape it is stored in."""
    _check_section(name)
    return getattr(doc, name).model_dump(mode="json", by_alias=True)


def import_section(doc: SettingsDocument, name: str, data: dict) -> SettingsDocument:
    """Return a new document with one section replaced.

    Raises:
        InvalidInputError: Unknown section name or invalid section data.
    """
    _check_section(name)
    section = _validate_section(name, data)
    logger.info("Imported '%s' settings", name)
    return validate_settings(doc.model_copy(update={name: section}))
