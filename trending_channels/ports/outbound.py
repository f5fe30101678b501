"""Outbound ports — interfaces for the chat platform."""

from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable

from trending_channels.domain.models import ChannelInfo


@runtime_checkable
class ChannelPlatformPort(Protocol):
    """Interface for the guild the passes operate on.

    Every method is a remote call; only ``fetch_last_message_at`` is allowed
    to fail without ending the run.
    """

    async def list_channels(self) -> List[ChannelInfo]: ...

    async def get_channel(self, channel_id: str) -> Optional[ChannelInfo]: ...

    async def fetch_last_message_at(self, channel_id: str) -> Optional[datetime]: ...

    async def set_parent(self, channel_id: str, parent_id: str) -> None: ...

    async def rename(self, channel_id: str, name: str) -> None: ...
