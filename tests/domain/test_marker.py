"""Tests for the idempotent channel name marker."""

import pytest

from trending_channels.domain.marker import NameMarker, add_marker, has_marker, remove_marker

NAMES = ["general", "🔥-general", "", "chat-🔥-", "🔥"]


class TestNameMarker:
    def test_has_marker(self):
        assert has_marker("🔥-general") is True
        assert has_marker("general") is False
        assert has_marker("general-🔥-") is False

    def test_add(self):
        assert add_marker("chat") == "🔥-chat"

    def test_add_is_noop_when_present(self):
        assert add_marker("🔥-chat") == "🔥-chat"

    def test_remove(self):
        assert remove_marker("🔥-general") == "general"

    def test_remove_is_noop_when_absent(self):
        assert remove_marker("general") == "general"

    def test_only_leading_marker_removed(self):
        assert remove_marker("🔥-🔥-double") == "🔥-double"
        assert remove_marker("chat-🔥-") == "chat-🔥-"

    @pytest.mark.parametrize("name", NAMES)
    def test_properties(self, name):
        assert has_marker(add_marker(name))
        assert add_marker(add_marker(name)) == add_marker(name)
        assert remove_marker(remove_marker(name)) == remove_marker(name)

    @pytest.mark.parametrize("name", ["general", "", "chat-🔥-"])
    def test_round_trip_without_leading_marker(self, name):
        assert remove_marker(add_marker(name)) == name

    def test_custom_prefix(self):
        marker = NameMarker("hot-")
        assert marker.add_marker("news") == "hot-news"
        assert marker.remove_marker("hot-news") == "news"
        assert marker.has_marker("🔥-news") is False

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValueError):
            NameMarker("")
