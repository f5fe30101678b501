"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

TEXT_KIND = "text"


@dataclass
class ChannelInfo:
    """Snapshot of one guild channel as read from the platform."""

    channel_id: str
    name: str
    parent_id: Optional[str]
    kind: str  # "text", "voice", "category", ...
    last_message_at: Optional[datetime] = None

    @property
    def is_text(self) -> bool:
        return self.kind == TEXT_KIND


@dataclass(frozen=True)
class TimeWindow:
    """Half-open interval [start, end) of UTC instants."""

    start: datetime
    end: datetime

    def contains(self, instant: Optional[datetime]) -> bool:
        if instant is None:
            return False
        return self.start <= instant < self.end


@dataclass(frozen=True)
class ChannelAction:
    """Target parent and name for one channel, decided in a single step."""

    label: str  # e.g. "[RESET]", "[TRENDING]", "[TOGGLE] Personal -> Trending:"
    channel_id: str
    old_name: str
    new_name: str
    old_parent: Optional[str]
    new_parent: str

    @property
    def needs_move(self) -> bool:
        return self.old_parent != self.new_parent

    @property
    def needs_rename(self) -> bool:
        return self.old_name != self.new_name

    def describe(self) -> str:
        return (
            f"{self.label} {self.channel_id} {self.old_name} → "
            f"parent={self.new_parent}, name={self.new_name} (was parent={self.old_parent})"
        )
