"""Domain layer — pure Python, no framework dependencies."""

from trending_channels.domain.models import ChannelAction, ChannelInfo, TimeWindow
from trending_channels.domain.marker import NameMarker, add_marker, has_marker, remove_marker
from trending_channels.domain.window import compute_window
from trending_channels.domain.classifier import (
    ChannelClassifier,
    ChannelNotFoundError,
    ToggleError,
    WrongChannelKindError,
)

__all__ = [
    "ChannelAction",
    "ChannelInfo",
    "TimeWindow",
    "NameMarker",
    "add_marker",
    "has_marker",
    "remove_marker",
    "compute_window",
    "ChannelClassifier",
    "ChannelNotFoundError",
    "ToggleError",
    "WrongChannelKindError",
]
