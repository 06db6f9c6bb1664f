"""Tests for the command-line client, run against the app in-process."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

import config
import gen_cli
from engine.defaults import default_settings
from main import app

SECRET = "test-admin-secret"
URL = "http://testserver"


@pytest.fixture(autouse=True)
def _route_to_app(tmp_path, monkeypatch):
    """Send the CLI's requests to a TestClient instead of the network."""
    monkeypatch.setattr(config, "SETTINGS_FILE", str(tmp_path / "settings.json"))
    monkeypatch.setattr(config, "ADMIN_SECRET", SECRET)
    monkeypatch.setattr(gen_cli, "ADMIN_SECRET", SECRET)
    app.state.settings = default_settings()
    client = TestClient(app)

    def fake_request(method, url, **kwargs):
        kwargs.pop("timeout", None)
        return client.request(method, url, **kwargs)

    monkeypatch.setattr(httpx, "request", fake_request)


class TestNpcCommand:

    def test_prints_statblock(self, capsys):
        gen_cli.main(["npc", "--race", "Elf", "--class", "Wizard", "--level", "3", "--seed", "1", "--url", URL])
        out = capsys.readouterr().out
        assert out.startswith("```statblock")
        assert "Elf" in out or "elf" in out

    def test_basic_to_file(self, tmp_path, capsys):
        path = tmp_path / "npc.md"
        gen_cli.main(["npc", "--format", "basic", "--output", str(path), "--url", URL])
        assert path.read_text().startswith("## ")
        assert f"Wrote {path}" in capsys.readouterr().out

    def test_error_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            gen_cli.main(["npc", "--race", "Kobold", "--url", URL])
        assert exc.value.code == 1
        assert "404" in capsys.readouterr().err


class TestDungeonCommand:

    def test_writes_map_and_prints_guide(self, tmp_path, capsys):
        svg = tmp_path / "map.svg"
        gen_cli.main(["dungeon", "--type", "crypt", "--size", "Small", "--seed", "2",
                      "--svg", str(svg), "--url", URL])
        assert svg.read_text().startswith("<svg")
        assert "# Crypt Dungeon (Small)" in capsys.readouterr().out

    def test_no_loops(self, tmp_path):
        guide = tmp_path / "guide.md"
        gen_cli.main(["dungeon", "--no-loops", "--guide", str(guide), "--url", URL])
        assert guide.read_text().startswith("# ")


class TestRandomCommand:

    def test_count(self, capsys):
        gen_cli.main(["random", "tavernName", "--count", "3", "--seed", "10", "--url", URL])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3
        assert all(line.startswith("The ") for line in lines)

    def test_truncation_noted(self, capsys):
        gen_cli.main(["random", "tavernName", "--max-depth", "0", "--url", URL])
        captured = capsys.readouterr()
        assert captured.out.strip() == "The {adj} {noun}"
        assert "depth limit" in captured.err


class TestSettingsCommands:

    def test_export_then_import(self, tmp_path, capsys):
        path = tmp_path / "random.json"
        gen_cli.main(["export", "random", "--output", str(path), "--url", URL])
        data = json.loads(path.read_text())
        data["generators"] = data["generators"][:1]
        path.write_text(json.dumps(data))

        gen_cli.main(["import", "random", str(path), "--url", URL])
        assert "Imported 'random'" in capsys.readouterr().out
        assert len(app.state.settings.random.generators) == 1

    def test_import_wrong_secret(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(gen_cli, "ADMIN_SECRET", "nope")
        path = tmp_path / "random.json"
        path.write_text(json.dumps({"generators": []}))
        with pytest.raises(SystemExit):
            gen_cli.main(["import", "random", str(path), "--url", URL])
        assert "Invalid admin secret" in capsys.readouterr().err

    def test_import_bad_json(self, tmp_path, capsys):
        path = tmp_path / "random.json"
        path.write_text("{oops")
        with pytest.raises(SystemExit):
            gen_cli.main(["import", "random", str(path), "--url", URL])
        assert "not valid JSON" in capsys.readouterr().err
