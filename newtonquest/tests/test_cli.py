"""
Tests for the command-line interface.
"""

import json

import pytest

from ..cli import main
from ..persistence import SAVE_KEY, FileStore, reset, restore
from ..session import Session


@pytest.fixture
def save_dir(tmp_path):
    return tmp_path / "saves"


class TestCLI:
    """Tests for CLI commands."""

    def test_show_new_game(self, save_dir, capsys):
        """show prints the start scene."""
        main(["--save-dir", str(save_dir), "show"])
        out = capsys.readouterr().out

        assert "== The beginning ==" in out
        assert "[2] Pick up sword" in out

    def test_play_session(self, save_dir, capsys, monkeypatch):
        """play reads choices until quit and saves progress."""
        answers = iter(["2", "1", "9", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        main(["--save-dir", str(save_dir), "play"])
        out = capsys.readouterr().out

        assert "* Gained sword" in out
        assert "There is no choice 9 here." in out
        saved = json.loads(FileStore(save_dir).get(SAVE_KEY))
        assert saved["sceneId"] == "road"
        assert saved["inventory"] == {"sword": 1}

    def test_reset_deletes_save(self, save_dir, capsys):
        """reset deletes the save."""
        FileStore(save_dir).set(SAVE_KEY, '{"sceneId": "road", "health": 3, "inventory": {}}')

        main(["--save-dir", str(save_dir), "reset"])

        assert FileStore(save_dir).get(SAVE_KEY) is None
        assert "Save deleted." in capsys.readouterr().out

    def test_reset_lasts_until_next_start(self, newton_graph, save_dir):
        """After reset, the next start is a new game, not the old save."""
        Session.start(newton_graph, FileStore(save_dir)).choose(1)  # East, to road
        assert restore(FileStore(save_dir), newton_graph).scene_id == "road"

        main(["--save-dir", str(save_dir), "reset"])

        assert restore(FileStore(save_dir), newton_graph) == reset()

    def test_validate_ok(self, tmp_path, capsys):
        """validate accepts good content."""
        path = tmp_path / "scenes.json"
        path.write_text(json.dumps({
            "start": {"title": "S", "text": "...", "links": [{"text": "Go", "to": "graveyard"}]},
            "graveyard": {"title": "G", "text": "..."},
        }))

        main(["validate", str(path)])
        assert "OK: 2 scenes" in capsys.readouterr().out

    def test_validate_broken(self, tmp_path, capsys):
        """validate exits 1 and lists broken references."""
        path = tmp_path / "scenes.json"
        path.write_text(json.dumps({
            "start": {"title": "S", "text": "...", "links": [{"text": "Go", "to": "moon"}]},
            "graveyard": {"title": "G", "text": "..."},
        }))

        with pytest.raises(SystemExit) as exc_info:
            main(["validate", str(path)])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "BrokenReference" in out
        assert "moon" in out

    def test_no_command(self, capsys):
        """No command prints help and exits 1."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
