"""
Output Panel - read-only view of the OutputBuffer plus a status line
and an event line that shows the latest log message (INFO and up).
"""

import logging

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QPlainTextEdit, QLabel
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QTextCursor

from horde_keyboard.output.output_buffer import OutputBuffer
from horde_keyboard.utils.logger import logger
from .theme import COLORS, MONO_FONT, FONT_SIZES

# Event line colours per log level
EVENT_COLORS = {
    logging.INFO: "#88ff88",
    logging.WARNING: "#ffaa44",
    logging.ERROR: "#ff6666",
}


def format_log_event(message: str, level: int, timestamp: str):
    """(text, colour) for the event line, or None for records below INFO."""
    if level < logging.INFO:
        return None
    if level >= logging.ERROR:
        color = EVENT_COLORS[logging.ERROR]
    else:
        color = EVENT_COLORS.get(level, EVENT_COLORS[logging.INFO])
    return f"{timestamp}  {message}", color


class OutputPanel(QWidget):
    """Mirrors the output buffer; keeps the view scrolled to the end."""

    def __init__(self, output: OutputBuffer, parent=None):
        super().__init__(parent)
        self._output = output

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 4)
        layout.setSpacing(4)

        self._text = QPlainTextEdit()
        self._text.setObjectName("output_text")
        self._text.setReadOnly(True)
        self._text.setFocusPolicy(Qt.NoFocus)
        self._text.setFont(QFont(MONO_FONT, FONT_SIZES['output']))
        layout.addWidget(self._text)

        self._status = QLabel()
        self._status.setObjectName("output_status")
        self._status.setFont(QFont(MONO_FONT, FONT_SIZES['status']))
        layout.addWidget(self._status)

        self._event = QLabel()
        self._event.setObjectName("output_event")
        self._event.setFont(QFont(MONO_FONT, FONT_SIZES['status']))
        layout.addWidget(self._event)

        self._apply_style()
        output.add_listener(self._on_text_changed)
        self._on_text_changed(output.get_text())
        logger.signal_emitter.log_message.connect(self.on_log_message)

    def _apply_style(self):
        self.setStyleSheet(f"""
            #output_text {{
                background: {COLORS['background_dark']};
                color: {COLORS['text_bright']};
                border: 1px solid {COLORS['border']};
            }}
            #output_status, #output_event {{
                color: {COLORS['text_dim']};
            }}
        """)

    def _on_text_changed(self, text: str) -> None:
        self._text.setPlainText(text)
        self._text.moveCursor(QTextCursor.End)
        self._text.ensureCursorVisible()

    def on_log_message(self, message: str, level: int, timestamp: str) -> None:
        """Show the newest INFO+ log record on the event line."""
        event = format_log_event(message, level, timestamp)
        if event is None:
            return
        text, color = event
        self._event.setText(text)
        self._event.setStyleSheet(f"color: {color};")

    def set_status(self, state: dict) -> None:
        """Render an AppContext.get_state() snapshot."""
        self._status.setText(
            f"haptics {'on' if state['haptics_enabled'] else 'off'}  |  "
            f"chorus {'on' if state['chorus_mode'] else 'off'}  |  "
            f"agents {state['agent_count']}"
        )

    def closeEvent(self, event):
        self._output.remove_listener(self._on_text_changed)
        logger.signal_emitter.log_message.disconnect(self.on_log_message)
        super().closeEvent(event)
