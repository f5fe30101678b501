"""Per-channel Personal/Trending decisions.

Pure domain logic: every method takes channel snapshots and returns the
ChannelAction to apply, or None when nothing should happen.
"""

from typing import Iterable, List, Optional

from trending_channels.domain.marker import NameMarker
from trending_channels.domain.models import ChannelAction, ChannelInfo, TimeWindow


class ToggleError(Exception):
    """Base class for fatal toggle failures."""


class ChannelNotFoundError(ToggleError):
    def __init__(self, channel_id: str):
        super().__init__(f"Channel not found: {channel_id}")
        self.channel_id = channel_id


class WrongChannelKindError(ToggleError):
    def __init__(self, channel: ChannelInfo):
        super().__init__(f"Channel is not a text channel: {channel.channel_id} type={channel.kind}")
        self.channel = channel


class ChannelClassifier:
    """Decides target category and name for channels of one guild."""

    def __init__(self, personal_id: str, trending_id: str, marker: Optional[NameMarker] = None):
        self.personal_id = personal_id
        self.trending_id = trending_id
        self.marker = marker or NameMarker()

    @staticmethod
    def text_channels_under(channels: Iterable[ChannelInfo], parent_id: str) -> List[ChannelInfo]:
        return [c for c in channels if c is not None and c.is_text and c.parent_id == parent_id]

    def trending_channels(self, channels: Iterable[ChannelInfo]) -> List[ChannelInfo]:
        return self.text_channels_under(channels, self.trending_id)

    def personal_channels(self, channels: Iterable[ChannelInfo]) -> List[ChannelInfo]:
        return self.text_channels_under(channels, self.personal_id)

    def _to_personal(self, channel: ChannelInfo, label: str) -> ChannelAction:
        return ChannelAction(
            label=label,
            channel_id=channel.channel_id,
            old_name=channel.name,
            new_name=self.marker.remove_marker(channel.name),
            old_parent=channel.parent_id,
            new_parent=self.personal_id,
        )

    def _to_trending(self, channel: ChannelInfo, label: str) -> ChannelAction:
        return ChannelAction(
            label=label,
            channel_id=channel.channel_id,
            old_name=channel.name,
            new_name=self.marker.add_marker(channel.name),
            old_parent=channel.parent_id,
            new_parent=self.trending_id,
        )

    def plan_reset(self, channel: ChannelInfo) -> ChannelAction:
        """Trending channel -> Personal with the marker stripped."""
        return self._to_personal(channel, "[RESET]")

    def plan_evaluation(self, channel: ChannelInfo, window: TimeWindow) -> Optional[ChannelAction]:
        """Personal channel -> Trending when its last message falls in ``window``.

        Channels without any message history are never recent.
        """
        if not window.contains(channel.last_message_at):
            return None
        return self._to_trending(channel, "[TRENDING]")

    def plan_toggle(self, channel: Optional[ChannelInfo], channel_id: str) -> Optional[ChannelAction]:
        """Flip one channel between the two categories.

        Returns None when the channel sits under neither category.
        """
        if channel is None:
            raise ChannelNotFoundError(channel_id)
        if not channel.is_text:
            raise WrongChannelKindError(channel)
        if channel.parent_id == self.personal_id:
            return self._to_trending(channel, "[TOGGLE] Personal -> Trending:")
        if channel.parent_id == self.trending_id:
            return self._to_personal(channel, "[TOGGLE] Trending -> Personal:")
        return None
