"""Configuration loaded from the process environment."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from trending_channels.domain.marker import FIRE_MARKER
from trending_channels.domain.window import DEFAULT_BOUNDARY_HOUR, DEFAULT_TIMEZONE

load_dotenv()

_REQUIRED_VARS = (
    "DISCORD_BOT_TOKEN",
    "DISCORD_GUILD_ID",
    "DISCORD_CATEGORY_PERSONAL_ID",
    "DISCORD_CATEGORY_TRENDING_ID",
)


class ConfigError(ValueError):
    """Raised when a required environment variable is missing or invalid."""


def _env_flag(name: str, default: str = "false") -> bool:
    return str(os.getenv(name, default) or default).strip().lower() == "true"


@dataclass
class EngineConfig:
    """Decision engine settings: window timezone, boundary hour, name marker."""

    timezone: str = DEFAULT_TIMEZONE
    boundary_hour: int = DEFAULT_BOUNDARY_HOUR
    marker: str = FIRE_MARKER

    @classmethod
    def from_env(cls) -> "EngineConfig":
        raw_hour = os.getenv("TRENDING_BOUNDARY_HOUR", "").strip()
        if raw_hour:
            try:
                hour = int(raw_hour)
            except ValueError:
                raise ConfigError(f"Invalid TRENDING_BOUNDARY_HOUR: {raw_hour!r}")
        else:
            hour = DEFAULT_BOUNDARY_HOUR
        if not 0 <= hour <= 23:
            raise ConfigError(f"TRENDING_BOUNDARY_HOUR out of range (0-23): {hour}")
        tz = os.getenv("TRENDING_TIMEZONE", "").strip() or DEFAULT_TIMEZONE
        try:
            ZoneInfo(tz)
        except (ZoneInfoNotFoundError, KeyError, ValueError):
            raise ConfigError(f"Invalid TRENDING_TIMEZONE: {tz!r}")
        return cls(
            timezone=tz,
            boundary_hour=hour,
            marker=os.getenv("TRENDING_MARKER") or FIRE_MARKER,
        )


@dataclass
class RunConfig:
    """Everything one run needs. Built once at process start."""

    token: str
    guild_id: str
    personal_category_id: str
    trending_category_id: str
    channel_id: Optional[str] = None
    dry_run: bool = False
    engine: EngineConfig = field(default_factory=EngineConfig)

    @classmethod
    def from_env(cls, require_channel: bool = False) -> "RunConfig":
        """Create RunConfig from environment variables.

        Raises ConfigError naming every missing variable. ``CHANNEL_ID`` is
        only required when ``require_channel`` is set (toggle mode).
        """
        required: List[str] = list(_REQUIRED_VARS)
        if require_channel:
            required.append("CHANNEL_ID")
        missing = [name for name in required if not os.getenv(name)]
        if missing:
            raise ConfigError(f"Missing required env var: {', '.join(missing)}")

        return cls(
            token=os.environ["DISCORD_BOT_TOKEN"],
            guild_id=os.environ["DISCORD_GUILD_ID"],
            personal_category_id=os.environ["DISCORD_CATEGORY_PERSONAL_ID"],
            trending_category_id=os.environ["DISCORD_CATEGORY_TRENDING_ID"],
            channel_id=os.getenv("CHANNEL_ID") or None,
            dry_run=_env_flag("DRY_RUN"),
            engine=EngineConfig.from_env(),
        )
