"""Tests for the typed RunConfig / EngineConfig dataclasses."""

import pytest

from trending_channels.config import ConfigError, EngineConfig, RunConfig

_ALL_VARS = (
    "DISCORD_BOT_TOKEN",
    "DISCORD_GUILD_ID",
    "DISCORD_CATEGORY_PERSONAL_ID",
    "DISCORD_CATEGORY_TRENDING_ID",
    "CHANNEL_ID",
    "DRY_RUN",
    "TRENDING_TIMEZONE",
    "TRENDING_BOUNDARY_HOUR",
    "TRENDING_MARKER",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ALL_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def full_env(clean_env):
    clean_env.setenv("DISCORD_BOT_TOKEN", "tok")
    clean_env.setenv("DISCORD_GUILD_ID", "10")
    clean_env.setenv("DISCORD_CATEGORY_PERSONAL_ID", "100")
    clean_env.setenv("DISCORD_CATEGORY_TRENDING_ID", "200")
    return clean_env


class TestEngineConfig:
    def test_defaults(self):
        c = EngineConfig()
        assert c.timezone == "Asia/Tokyo"
        assert c.boundary_hour == 4
        assert c.marker == "🔥-"

    def test_from_env_overrides(self, clean_env):
        clean_env.setenv("TRENDING_TIMEZONE", "UTC")
        clean_env.setenv("TRENDING_BOUNDARY_HOUR", "6")
        clean_env.setenv("TRENDING_MARKER", "hot-")
        c = EngineConfig.from_env()
        assert (c.timezone, c.boundary_hour, c.marker) == ("UTC", 6, "hot-")

    def test_unknown_timezone(self, clean_env):
        clean_env.setenv("TRENDING_TIMEZONE", "Mars/Olympus")
        with pytest.raises(ConfigError, match="Invalid TRENDING_TIMEZONE"):
            EngineConfig.from_env()

    def test_bad_hour(self, clean_env):
        clean_env.setenv("TRENDING_BOUNDARY_HOUR", "four")
        with pytest.raises(ConfigError, match="TRENDING_BOUNDARY_HOUR"):
            EngineConfig.from_env()

    def test_hour_out_of_range(self, clean_env):
        clean_env.setenv("TRENDING_BOUNDARY_HOUR", "24")
        with pytest.raises(ConfigError, match="out of range"):
            EngineConfig.from_env()


class TestRunConfig:
    def test_from_env(self, full_env):
        c = RunConfig.from_env()
        assert c.token == "tok"
        assert c.guild_id == "10"
        assert c.personal_category_id == "100"
        assert c.trending_category_id == "200"
        assert c.channel_id is None
        assert c.dry_run is False
        assert isinstance(c.engine, EngineConfig)

    def test_missing_lists_every_variable(self, clean_env):
        clean_env.setenv("DISCORD_BOT_TOKEN", "tok")
        with pytest.raises(ConfigError) as exc:
            RunConfig.from_env()
        message = str(exc.value)
        assert "DISCORD_GUILD_ID" in message
        assert "DISCORD_CATEGORY_PERSONAL_ID" in message
        assert "DISCORD_CATEGORY_TRENDING_ID" in message
        assert "DISCORD_BOT_TOKEN" not in message

    def test_empty_value_counts_as_missing(self, full_env):
        full_env.setenv("DISCORD_GUILD_ID", "")
        with pytest.raises(ConfigError, match="DISCORD_GUILD_ID"):
            RunConfig.from_env()

    def test_channel_required_for_toggle(self, full_env):
        with pytest.raises(ConfigError, match="CHANNEL_ID"):
            RunConfig.from_env(require_channel=True)
        full_env.setenv("CHANNEL_ID", "55")
        assert RunConfig.from_env(require_channel=True).channel_id == "55"

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("TRUE", True),
        ("True", True),
        ("false", False),
        ("1", False),
        ("yes", False),
        ("", False),
    ])
    def test_dry_run_flag(self, full_env, raw, expected):
        full_env.setenv("DRY_RUN", raw)
        assert RunConfig.from_env().dry_run is expected
