"""Tests for the command line interface and headless replay."""
import json

import pytest
from typer.testing import CliRunner

from herochat.cli.app import app
from herochat.cli.replay import replay_session

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HEROCHAT_PLAYBOOK", "HEROCHAT_CADENCE_MS", "HEROCHAT_THEME", "HEROCHAT_SEED"):
        monkeypatch.delenv(name, raising=False)


class TestReplaySession:
    """Tests for replay_session()."""

    def test_welcome_and_starters(self, playbook):
        result = replay_session(playbook, [], seed=1)
        assert result.welcome == "Hello"
        assert result.starter_suggestions == list(playbook.starter_suggestions)
        assert result.turns == []
        assert result.total_ms == 150

    def test_picked_and_typed_questions(self, playbook):
        result = replay_session(playbook, ["Ask about pumps", "valves?"], seed=1)
        first, second = result.turns
        assert first.picked_suggestion
        assert first.reply == "Pumps move fluid."
        assert first.suggestions == ["Pump curves"]
        assert not second.picked_suggestion
        assert second.reply == "Valves throttle flow."
        assert [m.role.value for m in result.transcript] == [
            "assistant", "user", "assistant", "user", "assistant",
        ]

    def test_debug_callback_receives_trace(self, playbook):
        logs = []
        replay_session(playbook, ["pump"], debug_callback=lambda *args: logs.append(args))
        assert logs
        assert all(level in ("debug", "info", "warning", "error") for level, _, _ in logs)


class TestReplayCommand:
    """Tests for `herochat replay`."""

    def test_json_output(self):
        result = runner.invoke(
            app, ["replay", "Analyze my current process constraints", "--json", "--seed", "3"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["playbook"] == "constraints"
        assert data["seed"] == 3
        turn = data["turns"][0]
        assert turn["accepted"] is True
        assert turn["picked_suggestion"] is True
        assert turn["reply"].startswith("I've analyzed your current process constraints")
        assert turn["suggestions"] == [
            "Show me optimization opportunities",
            "Review equipment performance trends",
            "Analyze production bottlenecks",
        ]

    def test_rich_output(self):
        result = runner.invoke(app, ["replay", "What is TI100?", "--playbook", "refinery"])
        assert result.exit_code == 0, result.output
        assert "What is TI100?" in result.output
        assert "Virtual time" in result.output

    def test_playbook_from_environment(self, monkeypatch):
        monkeypatch.setenv("HEROCHAT_PLAYBOOK", "refinery")
        result = runner.invoke(app, ["replay", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["playbook"] == "refinery"

    def test_unknown_playbook_fails(self):
        result = runner.invoke(app, ["replay", "--playbook", "nope"])
        assert result.exit_code == 1
        assert "Unsupported playbook" in result.output

    def test_malformed_playbook_file_fails(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed\n")
        result = runner.invoke(app, ["replay", "--playbook", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "Invalid playbook YAML" in result.output

    def test_playbook_file(self, tmp_path, playbook):
        from herochat.playbook import dump_playbook

        path = dump_playbook(playbook, tmp_path / "tiny.yaml")
        result = runner.invoke(app, ["replay", "pump", "--json", "--playbook", str(path)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["turns"][0]["reply"] == "Pumps move fluid."


class TestPlaybooksCommand:
    """Tests for `herochat playbooks`."""

    def test_lists_builtins(self):
        result = runner.invoke(app, ["playbooks"])
        assert result.exit_code == 0
        assert "constraints" in result.output
        assert "refinery" in result.output
        assert "default" in result.output


class TestProviders:
    """Tests for option and environment resolution."""

    def test_theme_resolution(self, monkeypatch):
        from herochat.cli.providers import resolve_dark

        assert resolve_dark() is True
        assert resolve_dark("LIGHT") is False
        monkeypatch.setenv("HEROCHAT_THEME", "light")
        assert resolve_dark() is False

    def test_invalid_seed_is_ignored(self, monkeypatch):
        from herochat.cli.providers import resolve_seed

        assert resolve_seed(5) == 5
        monkeypatch.setenv("HEROCHAT_SEED", "abc")
        assert resolve_seed() is None
        monkeypatch.setenv("HEROCHAT_SEED", "11")
        assert resolve_seed() == 11

    def test_cadence_override(self, monkeypatch):
        from herochat.cli.providers import resolve_playbook

        monkeypatch.setenv("HEROCHAT_CADENCE_MS", "5")
        assert resolve_playbook("refinery").timings.cadence_ms == 5
        monkeypatch.setenv("HEROCHAT_CADENCE_MS", "-1")
        assert resolve_playbook("refinery").timings.cadence_ms == 25
