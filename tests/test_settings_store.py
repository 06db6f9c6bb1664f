"""Tests for settings persistence and section import/export."""

import json

import pytest

from engine.defaults import default_settings
from engine.errors import InvalidInputError
from engine.settings_store import (
    document_from_dict,
    export_section,
    import_section,
    load_settings,
    save_settings,
)


class TestDefaults:

    def test_shipped_content(self):
        doc = default_settings()
        assert [r.name for r in doc.npc.races] == [
            "Human", "Elf", "Dwarf", "Halfling", "Half-Orc", "Tiefling",
        ]
        assert [c.name for c in doc.npc.classes] == ["Fighter", "Rogue", "Wizard", "Cleric", "Bard"]
        assert set(doc.dungeon.dungeon_types) == {"cave", "crypt", "fortress"}
        assert doc.dungeon.default_dungeon_type == "cave"
        assert [t.name for t in doc.random.generators] == ["tavernName", "questHook", "npcQuirk"]


class TestLoadSave:
    """Tests for load_settings / save_settings."""

    def test_load_nonexistent_returns_defaults(self, tmp_path):
        doc = load_settings(str(tmp_path / "missing.json"))
        assert doc == default_settings()

    def test_roundtrip(self, tmp_path):
        path = str(tmp_path / "settings.json")
        doc = default_settings()
        save_settings(doc, path)
        assert load_settings(path) == doc

    def test_saved_keys_are_camel_case(self, tmp_path):
        path = str(tmp_path / "settings.json")
        save_settings(default_settings(), path)
        with open(path) as f:
            data = json.load(f)
        assert "dungeonTypes" in data["dungeon"]
        assert "defaultDungeonType" in data["dungeon"]
        assert "statblockFormat" in data["npc"]

    def test_no_temp_file_left(self, tmp_path):
        path = tmp_path / "settings.json"
        save_settings(default_settings(), str(path))
        assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]

    def test_missing_sections_filled(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"random": {"generators": []}}))
        doc = load_settings(str(path))
        assert doc.random.generators == []
        assert doc.npc == default_settings().npc
        assert doc.dungeon == default_settings().dungeon

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        with pytest.raises(InvalidInputError):
            load_settings(str(path))

    def test_undecodable_bytes(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_bytes(b'{"npc": {"races": [{"name": "\xff\xfe"}]}}')
        with pytest.raises(InvalidInputError):
            load_settings(str(path))

    def test_invalid_shape(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"npc": {"races": "everyone"}}))
        with pytest.raises(InvalidInputError):
            load_settings(str(path))

    def test_not_an_object(self):
        with pytest.raises(InvalidInputError):
            document_from_dict(["npc"])

    def test_bad_default_dungeon_type_falls_back(self):
        data = {
            "dungeon": {
                "dungeonTypes": {"mine": {"name": "Mine"}, "tower": {"name": "Tower"}},
                "defaultDungeonType": "sewer",
            }
        }
        assert document_from_dict(data).dungeon.default_dungeon_type == "mine"


class TestSections:
    """Tests for export_section / import_section."""

    def test_export_shape(self):
        data = export_section(default_settings(), "random")
        assert list(data) == ["generators"]
        assert data["generators"][0]["name"] == "tavernName"

    def test_export_unknown_section(self):
        with pytest.raises(InvalidInputError):
            export_section(default_settings(), "weather")

    def test_import_replaces_section(self):
        doc = default_settings()
        new_random = {"generators": [{"name": "greeting", "template": "Hi {x}", "tables": {"x": ["there"]}}]}
        updated = import_section(doc, "random", new_random)
        assert [t.name for t in updated.random.generators] == ["greeting"]
        assert updated.npc == doc.npc

    def test_import_does_not_mutate(self):
        doc = default_settings()
        import_section(doc, "random", {"generators": []})
        assert len(doc.random.generators) == 3

    def test_export_import_roundtrip(self):
        doc = default_settings()
        exported = export_section(doc, "dungeon")
        assert import_section(doc, "dungeon", exported) == doc

    def test_import_invalid_data(self):
        with pytest.raises(InvalidInputError):
            import_section(default_settings(), "dungeon", {"dungeonTypes": {"x": {"roomSize": [9, 2]}}})

    def test_import_unknown_section(self):
        with pytest.raises(InvalidInputError):
            import_section(default_settings(), "weather", {})

    def test_import_repairs_default_type(self):
        doc = import_section(
            default_settings(), "dungeon", {"dungeonTypes": {"lair": {"name": "Lair"}}}
        )
        assert doc.dungeon.default_dungeon_type == "lair"
