"""Process entry points: periodic run and single-channel toggle."""

import asyncio
import sys
from typing import Optional, Sequence

from trending_channels.adapters.discord.adapter import DiscordChannelAdapter
from trending_channels.config import ConfigError, RunConfig
from trending_channels.domain.classifier import ToggleError
from trending_channels.service import TrendingService


def _log(msg: str):
    print(msg, file=sys.stderr)


def _platform_for(config: RunConfig) -> DiscordChannelAdapter:
    return DiscordChannelAdapter(config.token, config.guild_id)


async def run_trending(config: RunConfig) -> None:
    async with _platform_for(config) as platform:
        await TrendingService(platform, config).run()


async def run_toggle(config: RunConfig) -> None:
    async with _platform_for(config) as platform:
        await TrendingService(platform, config).toggle(config.channel_id)


def _execute(toggle: bool) -> int:
    try:
        config = RunConfig.from_env(require_channel=toggle)
    except ConfigError as e:
        _log(f"[ERROR] {e}")
        return 1

    try:
        asyncio.run(run_toggle(config) if toggle else run_trending(config))
    except ToggleError as e:
        _log(f"[ERROR] {e}")
        return 1
    except Exception as e:
        _log(f"[ERROR] {type(e).__name__}: {e}")
        return 1
    return 0


def trending_main() -> int:
    """Reset Trending, then promote recently active Personal channels."""
    return _execute(toggle=False)


def toggle_main() -> int:
    """Toggle the channel named by CHANNEL_ID."""
    return _execute(toggle=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "toggle":
        return toggle_main()
    if args:
        _log(f"[ERROR] Unknown command: {args[0]!r}. Use no argument or 'toggle'.")
        return 2
    return trending_main()


def cli():
    sys.exit(main())


def toggle_cli():
    sys.exit(toggle_main())
