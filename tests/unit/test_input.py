"""Unit tests for the Textual input bridge and quit keys."""

from __future__ import annotations

import pytest
from textual import events
from textual.geometry import Size

from clocktui.core.events import Key, LogicTick, Mouse, Resize
from clocktui.core.scheduler import InputUnavailable
from clocktui.input import QueueInputSource, translate_textual_event
from clocktui.keybindings import is_quit_key

pytestmark = pytest.mark.unit


class TestQueueInputSource:
    def test_poll_returns_queued_item(self):
        source = QueueInputSource()
        source.put("raw")

        assert source.poll(0.1) == "raw"

    def test_poll_times_out_with_none(self):
        assert QueueInputSource().poll(0.01) is None

    def test_closed_source_raises_for_every_poll(self):
        source = QueueInputSource()
        source.close()

        for _ in range(2):
            with pytest.raises(InputUnavailable):
                source.poll(0.01)


class TestTranslateTextualEvent:
    """Tests for converting Textual events to scheduler events."""

    def test_key(self):
        assert translate_textual_event(events.Key("q", "q")) == Key("q", "q")

    def test_resize(self):
        raw = events.Resize(Size(100, 30), Size(100, 30))

        assert translate_textual_event(raw) == Resize(100, 30)

    def test_core_events_pass_through(self):
        assert translate_textual_event(Mouse(3, 4, 1)) == Mouse(3, 4, 1)

    def test_other_objects_are_dropped(self):
        assert translate_textual_event(LogicTick(1.0)) is None
        assert translate_textual_event("q") is None


class TestQuitKeys:
    @pytest.mark.parametrize("key", ["escape", "q", "Q", "shift+q", "ctrl+c", "ctrl+d"])
    def test_quit_keys(self, key):
        assert is_quit_key(Key(key))

    @pytest.mark.parametrize("key", ["a", "enter", "f12", "ctrl+q"])
    def test_other_keys(self, key):
        assert not is_quit_key(Key(key))
