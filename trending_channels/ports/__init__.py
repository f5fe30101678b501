"""Port interfaces (Hexagonal Architecture)."""

from trending_channels.ports.outbound import ChannelPlatformPort

__all__ = [
    "ChannelPlatformPort",
]
