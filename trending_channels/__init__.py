"""Trending Channels — rotate Discord channels between Personal and Trending."""

from trending_channels.config import __version__, ConfigError, EngineConfig, RunConfig
from trending_channels.domain import (
    ChannelAction,
    ChannelClassifier,
    ChannelInfo,
    NameMarker,
    TimeWindow,
    compute_window,
)
from trending_channels.service import TrendingService

__all__ = [
    "__version__",
    "ConfigError",
    "EngineConfig",
    "RunConfig",
    "ChannelAction",
    "ChannelClassifier",
    "ChannelInfo",
    "NameMarker",
    "TimeWindow",
    "compute_window",
    "TrendingService",
]
