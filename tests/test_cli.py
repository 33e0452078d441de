"""Tests for the guild-state command line."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from discord_guild_state.cli.app import cli, load_payload
from discord_guild_state.core.exceptions import GuildStateError, PayloadError


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def write_json(tmp_path):
    counter = iter(range(1000))

    def _write(data) -> str:
        path = tmp_path / f"payload{next(counter)}.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


class TestLoadPayload:
    def test_plain_object(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text('{"name": "x"}', encoding="utf-8")
        assert load_payload(path) == {"name": "x"}

    def test_gateway_envelope_unwrapped(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text(
            json.dumps({"op": 0, "t": "GUILD_UPDATE", "s": 2, "d": {"name": "x"}}),
            encoding="utf-8",
        )
        assert load_payload(path) == {"name": "x"}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text("{nope", encoding="utf-8")
        with pytest.raises(PayloadError, match="invalid JSON"):
            load_payload(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(PayloadError, match="expected a JSON object"):
            load_payload(path)

    def test_payload_error_is_guild_state_error(self):
        err = PayloadError("bad")
        assert isinstance(err, GuildStateError)
        assert str(err) == "bad"


class TestBuildCommand:
    def test_merges_in_order(self, runner, write_json, guild_payload):
        first = write_json(guild_payload)
        second = write_json({"name": "Renamed", "features": ["NEWS"]})

        result = runner.invoke(cli, ["build", first, second])

        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert body["name"] == "Renamed"
        assert body["features"] == ["NEWS"]
        assert body["afk_timeout"] == 300
        assert "id" not in body

    def test_with_id(self, runner, write_json):
        path = write_json({"id": "123", "name": "Test"})
        result = runner.invoke(cli, ["build", "--with-id", path])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["id"] == "123"

    def test_invalid_payload_reports_error(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")
        result = runner.invoke(cli, ["build", str(path)])
        assert result.exit_code == 1
        assert "expected a JSON object" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["build", str(tmp_path / "missing.json")])
        assert result.exit_code == 2


class TestInspectCommand:
    def test_summary(self, runner, write_json, guild_payload):
        result = runner.invoke(cli, ["inspect", write_json(guild_payload)])
        assert result.exit_code == 0, result.output
        assert "Discord Testers" in result.output
        assert "Us West" in result.output
        assert "VERIFIED" in result.output
        assert "discord-testers" in result.output
        assert "80351110224678912" in result.output

    def test_empty_guild(self, runner, write_json):
        result = runner.invoke(cli, ["inspect", write_json({"id": "1"})])
        assert result.exit_code == 0, result.output
        assert "Features: none" in result.output


class TestMemberCommand:
    def test_successive_payloads(self, runner, write_json):
        first = write_json({"nick": "Bob", "deaf": True})
        second = write_json({"mute": True})

        result = runner.invoke(
            cli, ["member", first, second, "--guild-id", "10", "--user-id", "20"]
        )

        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert body["nick"] == "Bob"
        assert body["deaf"] is True
        assert body["mute"] is True

    def test_invalid_snowflake_option(self, runner, write_json):
        result = runner.invoke(cli, ["member", write_json({}), "--user-id", "abc"])
        assert result.exit_code == 2
        assert "Invalid snowflake" in result.output


class TestGroupOptions:
    def test_log_level_choice(self, runner, write_json):
        result = runner.invoke(cli, ["--log-level", "debug", "build", write_json({})])
        assert result.exit_code == 0, result.output

    def test_invalid_log_level(self, runner, write_json):
        result = runner.invoke(cli, ["--log-level", "loud", "build", write_json({})])
        assert result.exit_code == 2

    def test_log_level_from_env(self, runner, write_json):
        result = runner.invoke(
            cli, ["build", write_json({})], env={"GUILD_STATE_LOG_LEVEL": "INFO"}
        )
        assert result.exit_code == 0, result.output
