"""Tests for the central logger and the output panel's event line."""

import logging

import pytest

from horde_keyboard.gui.output_panel import EVENT_COLORS, format_log_event
from horde_keyboard.utils.logger import LogLevel, logger, tag


@pytest.fixture
def captured(qapp):
    """Messages mirrored through the Qt signal."""
    messages = []

    def record(msg, level, stamp):
        messages.append((msg, level))

    logger.signal_emitter.log_message.connect(record)
    yield messages
    logger.signal_emitter.log_message.disconnect(record)


def test_tag():
    assert tag("plain") == "plain"
    assert tag("started", "APP") == "[APP] started"
    assert tag("failed", details="why") == "failed - why"


def test_component_and_details(captured):
    logger.warning("Config unreadable", component="APP", details="bad json")
    assert captured[-1] == ("[APP] Config unreadable - bad json", LogLevel.WARNING)


def test_convenience_tags(captured):
    logger.horde("frame 600")
    logger.hive("seeded 'q'")
    logger.haptic("vibrate [50]")
    assert [m for m, _ in captured[-3:]] == [
        "[HORDE] frame 600",
        "[HIVE] seeded 'q'",
        "[HAPTIC] vibrate [50]",
    ]
    assert all(level == LogLevel.DEBUG for _, level in captured[-3:])


def test_file_logging(tmp_path):
    path = tmp_path / "horde.log"
    logger.enable_file_logging(str(path))
    try:
        logger.hive("layout 480x360: 84 tiles")
    finally:
        logger.disable_file_logging()
    logger.hive("after disable")
    text = path.read_text()
    assert "[HIVE] layout 480x360: 84 tiles" in text
    assert "after disable" not in text


class TestEventLine:

    def test_debug_hidden(self):
        assert format_log_event("[HIVE] seeded 'q'", logging.DEBUG, "12:00:00") is None

    def test_info_shown_with_time(self):
        text, color = format_log_event("[HORDE] Swarm dispersed", logging.INFO, "12:00:01")
        assert text == "12:00:01  [HORDE] Swarm dispersed"
        assert color == EVENT_COLORS[logging.INFO]

    def test_warning_and_error_colours(self):
        assert format_log_event("w", logging.WARNING, "t")[1] == EVENT_COLORS[logging.WARNING]
        assert format_log_event("e", logging.ERROR, "t")[1] == EVENT_COLORS[logging.ERROR]
        assert format_log_event("c", logging.CRITICAL, "t")[1] == EVENT_COLORS[logging.ERROR]

    def test_signal_feeds_formatter(self, captured):
        logger.info("Chorus mode: on", component="HORDE")
        message, level = captured[-1]
        text, _ = format_log_event(message, level, "00:00:00")
        assert text == "00:00:00  [HORDE] Chorus mode: on"
