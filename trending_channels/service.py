"""Reset, Evaluation and Toggle passes over a ChannelPlatformPort.

Every action is logged before it is applied, and under dry-run it is
logged and skipped, so a dry-run log previews a live run.
"""

import sys
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from trending_channels.config import RunConfig
from trending_channels.domain.classifier import ChannelClassifier
from trending_channels.domain.marker import NameMarker
from trending_channels.domain.models import ChannelAction, ChannelInfo, TimeWindow
from trending_channels.domain.window import compute_window
from trending_channels.ports.outbound import ChannelPlatformPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TrendingService:
    """Runs the passes for one guild, one remote call at a time."""

    def __init__(
        self,
        platform: ChannelPlatformPort,
        config: RunConfig,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._platform = platform
        self._config = config
        self._clock = clock
        self.classifier = ChannelClassifier(
            personal_id=config.personal_category_id,
            trending_id=config.trending_category_id,
            marker=NameMarker(config.engine.marker),
        )

    @property
    def dry_run(self) -> bool:
        return self._config.dry_run

    def current_window(self) -> TimeWindow:
        engine = self._config.engine
        return compute_window(self._clock(), tz=engine.timezone, boundary_hour=engine.boundary_hour)

    async def apply(self, action: ChannelAction) -> None:
        """Log one action, then move before rename unless dry-run."""
        _log(action.describe())
        if self.dry_run:
            return
        if action.needs_move:
            await self._platform.set_parent(action.channel_id, action.new_parent)
        if action.needs_rename:
            await self._platform.rename(action.channel_id, action.new_name)

    async def reset_pass(self) -> List[ChannelAction]:
        """Move every Trending channel back to Personal and strip the marker."""
        channels = await self._platform.list_channels()
        actions = []
        for channel in self.classifier.trending_channels(channels):
            action = self.classifier.plan_reset(channel)
            await self.apply(action)
            actions.append(action)
        return actions

    @staticmethod
    def _project(channels: List[ChannelInfo], planned: Sequence[ChannelAction]) -> List[ChannelInfo]:
        """Channels as they would look after ``planned`` had been applied."""
        targets = {a.channel_id: a for a in planned}
        projected = []
        for channel in channels:
            action = targets.get(channel.channel_id)
            if action is not None:
                channel = replace(channel, parent_id=action.new_parent, name=action.new_name)
            projected.append(channel)
        return projected

    async def evaluation_pass(
        self, window: TimeWindow, planned: Sequence[ChannelAction] = ()
    ) -> List[ChannelAction]:
        """Promote Personal channels whose last message falls in ``window``.

        Re-reads the channel list so channels moved by the reset pass are
        evaluated too. Under dry-run nothing was moved, so the reset actions
        in ``planned`` are laid over the fresh list instead.
        """
        channels = await self._platform.list_channels()
        if self.dry_run and planned:
            channels = self._project(channels, planned)
        actions = []
        for channel in self.classifier.personal_channels(channels):
            last_message_at: Optional[datetime] = None
            try:
                last_message_at = await self._platform.fetch_last_message_at(channel.channel_id)
            except Exception as e:
                _log(f"[WARN] Failed to fetch last message for {channel.channel_id} ({channel.name}): {e}")

            action = self.classifier.plan_evaluation(
                replace(channel, last_message_at=last_message_at), window
            )
            if action is None:
                continue
            await self.apply(action)
            actions.append(action)
        return actions

    async def run(self) -> List[ChannelAction]:
        """Full periodic run: reset pass, then evaluation pass."""
        window = self.current_window()
        engine = self._config.engine
        _log(
            f"Window (UTC): {window.start.isoformat()} → {window.end.isoformat()} "
            f"({engine.timezone} {engine.boundary_hour:02d}:00 boundary)"
        )
        _log(f"Dry-run: {str(self.dry_run).lower()}")

        reset_actions = await self.reset_pass()
        return reset_actions + await self.evaluation_pass(window, planned=reset_actions)

    async def toggle(self, channel_id: str) -> Optional[ChannelAction]:
        """Flip one channel between Personal and Trending.

        Raises ChannelNotFoundError / WrongChannelKindError before any
        mutation. Returns None when the channel is under neither category.
        """
        channel = await self._platform.get_channel(channel_id)
        action = self.classifier.plan_toggle(channel, channel_id)
        if action is None:
            _log(
                f"[INFO] Channel {channel.channel_id} is not under "
                f"Personal({self.classifier.personal_id}) or "
                f"Trending({self.classifier.trending_id}). No action."
            )
            return None
        await self.apply(action)
        return action
