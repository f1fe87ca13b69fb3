"""
Logger - one place for every log line the keyboard writes

Usage:
    from horde_keyboard.utils.logger import logger

    logger.info("Agent added", component="HORDE")
    logger.warning("Config unreadable", component="APP", details=str(e))
    logger.hive("seeded 'q'")          # debug, tagged [HIVE]

Records go to the terminal (INFO and up), to an optional file, and to a
Qt signal that the output panel's event line listens to.
"""

import logging
import sys
from datetime import datetime
from enum import IntEnum
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

TERMINAL_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class LogLevel(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogSignalEmitter(QObject):
    """Carries (message, level, HH:MM:SS) to widgets."""
    log_message = pyqtSignal(str, int, str)


class SignalHandler(logging.Handler):
    """Forwards formatted records through a LogSignalEmitter."""

    def __init__(self, emitter: LogSignalEmitter, level: int = logging.DEBUG):
        super().__init__(level)
        self.emitter = emitter
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord):
        try:
            stamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            self.emitter.log_message.emit(self.format(record), record.levelno, stamp)
        except Exception:
            self.handleError(record)


def tag(msg: str, component: Optional[str] = None, details: Optional[str] = None) -> str:
    """'[COMPONENT] msg - details', leaving out the parts not given."""
    text = f"[{component}] {msg}" if component else msg
    return f"{text} - {details}" if details else text


class HordeLogger:
    """
    Thin front over a stdlib logger named "horde_keyboard".

    Each sink has its own level: terminal INFO, signal DEBUG, file DEBUG.
    """

    def __init__(self, name: str = "horde_keyboard"):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self.signal_emitter = LogSignalEmitter()
        self._signal_handler = SignalHandler(self.signal_emitter)

        self._terminal_handler = logging.StreamHandler(sys.stdout)
        self._terminal_handler.setLevel(logging.INFO)
        self._terminal_handler.setFormatter(logging.Formatter(TERMINAL_FORMAT, datefmt="%H:%M:%S"))

        for handler in (self._terminal_handler, self._signal_handler):
            self._logger.addHandler(handler)
        self._file_handler: Optional[logging.FileHandler] = None

    # === Sinks ===

    def set_level(self, level: int):
        self._terminal_handler.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Mirror everything (DEBUG and up) into filepath, replacing any earlier file."""
        self.disable_file_logging()
        handler = logging.FileHandler(filepath)
        handler.setFormatter(logging.Formatter(TERMINAL_FORMAT))
        self._logger.addHandler(handler)
        self._file_handler = handler

    def disable_file_logging(self):
        handler, self._file_handler = self._file_handler, None
        if handler is not None:
            self._logger.removeHandler(handler)
            handler.close()

    # === Messages ===

    def log(self, level: int, msg: str, component: Optional[str] = None,
            details: Optional[str] = None):
        self._logger.log(level, tag(msg, component, details))

    def debug(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self.log(logging.DEBUG, msg, component, details)

    def info(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self.log(logging.INFO, msg, component, details)

    def warning(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self.log(logging.WARNING, msg, component, details)

    def error(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self.log(logging.ERROR, msg, component, details)

    # Debug-level shorthands per subsystem
    def horde(self, msg: str, details: Optional[str] = None):
        self.debug(msg, "HORDE", details)

    def hive(self, msg: str, details: Optional[str] = None):
        self.debug(msg, "HIVE", details)

    def haptic(self, msg: str, details: Optional[str] = None):
        self.debug(msg, "HAPTIC", details)


logger = HordeLogger()


def set_log_level(level: int):
    """Terminal threshold (--debug lowers it to DEBUG)."""
    logger.set_level(level)
