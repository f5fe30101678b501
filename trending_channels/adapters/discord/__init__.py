"""Discord platform adapter."""

from trending_channels.adapters.discord.adapter import DiscordChannelAdapter

__all__ = ["DiscordChannelAdapter"]
