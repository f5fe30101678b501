"""Discord adapter — ChannelPlatformPort over a REST-only discord.Client.

The client logs in without opening a gateway connection; every call below
is a plain HTTP request awaited to completion.
"""

import sys
from datetime import datetime
from typing import Dict, List, Optional

import discord

from trending_channels.domain.models import ChannelInfo


def _log(msg: str):
    print(msg, file=sys.stderr)


def _to_info(channel: discord.abc.GuildChannel) -> ChannelInfo:
    """Convert a discord.py guild channel to a platform-agnostic ChannelInfo."""
    category_id = getattr(channel, "category_id", None)
    return ChannelInfo(
        channel_id=str(channel.id),
        name=channel.name,
        parent_id=str(category_id) if category_id else None,
        kind=channel.type.name,
    )


class DiscordChannelAdapter:
    """ChannelPlatformPort implementation scoped to one guild.

    Use as ``async with DiscordChannelAdapter(token, guild_id) as platform``;
    login happens on enter and the client is always closed on exit.
    """

    def __init__(self, token: str, guild_id: str, client: Optional[discord.Client] = None):
        if client is None:
            intents = discord.Intents.none()
            intents.guilds = True
            intents.guild_messages = True
            client = discord.Client(intents=intents)
        self._client = client
        self._token = token
        self._guild_id = int(guild_id)
        self._guild: Optional[discord.Guild] = None
        # Latest fetched channel objects, keyed by id. Replaced on every list.
        self._channels: Dict[str, discord.abc.GuildChannel] = {}

    async def __aenter__(self) -> "DiscordChannelAdapter":
        try:
            await self._client.login(self._token)
            self._guild = await self._client.fetch_guild(self._guild_id)
        except BaseException:
            await self._client.close()
            raise
        _log(f"[discord] logged in as {self._client.user}, guild={self._guild_id}")
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self._client.close()

    @property
    def guild(self) -> discord.Guild:
        if self._guild is None:
            raise RuntimeError("DiscordChannelAdapter used outside 'async with'")
        return self._guild

    async def list_channels(self) -> List[ChannelInfo]:
        channels = await self.guild.fetch_channels()
        self._channels = {str(c.id): c for c in channels}
        return [_to_info(c) for c in channels]

    async def get_channel(self, channel_id: str) -> Optional[ChannelInfo]:
        try:
            channel = await self.guild.fetch_channel(int(channel_id))
        except (discord.NotFound, discord.InvalidData):
            return None
        self._channels[str(channel.id)] = channel
        return _to_info(channel)

    async def _resolve(self, channel_id: str) -> discord.abc.GuildChannel:
        channel = self._channels.get(channel_id)
        if channel is None:
            channel = await self.guild.fetch_channel(int(channel_id))
            self._channels[channel_id] = channel
        return channel

    async def fetch_last_message_at(self, channel_id: str) -> Optional[datetime]:
        channel = await self._resolve(channel_id)
        async for message in channel.history(limit=1):
            return message.created_at
        return None

    async def set_parent(self, channel_id: str, parent_id: str) -> None:
        """Move under ``parent_id`` and take over the category's permission overwrites.

        The guild is fetched over REST, so discord.py's ``sync_permissions``
        cannot see the category; its overwrites are passed explicitly.
        """
        channel = await self._resolve(channel_id)
        category = await self._resolve(parent_id)
        await channel.edit(
            category=discord.Object(id=int(parent_id)),
            overwrites=category.overwrites,
        )

    async def rename(self, channel_id: str, name: str) -> None:
        channel = await self._resolve(channel_id)
        await channel.edit(name=name)
