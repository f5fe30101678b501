"""Idempotent name prefix used to flag trending channels."""

FIRE_MARKER = "🔥-"


class NameMarker:
    """Tests for, adds and strips a fixed leading prefix on channel names."""

    def __init__(self, prefix: str = FIRE_MARKER):
        if not prefix:
            raise ValueError("Marker prefix must not be empty")
        self.prefix = prefix

    def has_marker(self, name: str) -> bool:
        return name.startswith(self.prefix)

    def add_marker(self, name: str) -> str:
        return name if self.has_marker(name) else f"{self.prefix}{name}"

    def remove_marker(self, name: str) -> str:
        return name[len(self.prefix):] if self.has_marker(name) else name


def has_marker(name: str, marker: str = FIRE_MARKER) -> bool:
    return NameMarker(marker).has_marker(name)


def add_marker(name: str, marker: str = FIRE_MARKER) -> str:
    return NameMarker(marker).add_marker(name)


def remove_marker(name: str, marker: str = FIRE_MARKER) -> str:
    return NameMarker(marker).remove_marker(name)
