"""CLI tests for the config command group."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from tasklist_cli.config import get_config_manager
from tasklist_cli.main import app

runner = CliRunner()


class TestConfigView:
    def test_view_json(self):
        result = runner.invoke(app, ["config", "view", "-o", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["storage"]["backend"] == "json"
        assert data["ui"]["language"] == "en"

    def test_view_pretty_flattens_keys(self):
        result = runner.invoke(app, ["config", "view"])

        assert result.exit_code == 0
        assert "ui.language" in result.output
        assert "storage.backend" in result.output


class TestConfigGetSet:
    def test_get(self):
        result = runner.invoke(app, ["config", "get", "ui.language"])

        assert result.exit_code == 0
        assert "en" in result.output

    def test_get_unknown(self):
        result = runner.invoke(app, ["config", "get", "ui.colour"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_set(self):
        result = runner.invoke(app, ["config", "set", "ui.default_filter", "pending"])

        assert result.exit_code == 0
        assert "Success" in result.output
        assert get_config_manager().get("ui.default_filter") == "pending"

    def test_set_unknown_key(self):
        result = runner.invoke(app, ["config", "set", "ui.colour", "blue"])

        assert result.exit_code == 1

    def test_set_invalid_value(self):
        result = runner.invoke(app, ["config", "set", "storage.backend", "cloud"])

        assert result.exit_code == 2
        assert "Invalid value" in result.output
        assert get_config_manager().get("storage.backend") == "json"

    def test_default_filter_applies_to_list(self):
        runner.invoke(app, ["config", "set", "ui.default_filter", "completed"])
        runner.invoke(app, ["add", "Buy milk", "-d", "2099-01-01"])

        result = runner.invoke(app, ["list", "--json"])

        assert json.loads(result.output)["rows"] == []

    def test_output_format_applies_to_list(self):
        runner.invoke(app, ["config", "set", "output.format", "json"])

        result = runner.invoke(app, ["list"])

        assert json.loads(result.output)["is_empty"] is True

    def test_memory_backend_forgets_between_commands(self):
        runner.invoke(app, ["config", "set", "storage.backend", "memory"])
        runner.invoke(app, ["add", "Buy milk", "-d", "2099-01-01"])

        result = runner.invoke(app, ["list", "--json"])

        assert json.loads(result.output)["is_empty"] is True


class TestConfigReset:
    def test_reset_key(self):
        runner.invoke(app, ["config", "set", "ui.language", "id"])

        result = runner.invoke(app, ["config", "reset", "ui.language", "--yes"])

        assert result.exit_code == 0
        assert get_config_manager().get("ui.language") == "en"

    def test_reset_declined(self):
        runner.invoke(app, ["config", "set", "ui.language", "id"])

        result = runner.invoke(app, ["config", "reset"], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert get_config_manager().get("ui.language") == "id"

    def test_reset_unknown_key(self):
        result = runner.invoke(app, ["config", "reset", "nope.key", "--yes"])

        assert result.exit_code == 1
