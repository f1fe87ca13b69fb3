"""
Output Buffer - committed text plus the word being typed.

The hive appends characters (or whole dragged words) here; the output
panel listens for changes and redraws.
"""

from typing import Callable, List

from horde_keyboard.config import PROMPT


class OutputBuffer:
    """Text sink for committed characters and words."""

    def __init__(self):
        self._current_text = ""
        self._word_buffer = ""
        self._listeners: List[Callable[[str], None]] = []

    def add_listener(self, callback: Callable[[str], None]) -> None:
        """Register callback(text), called after every change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[str], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self) -> None:
        text = self.get_text()
        for callback in list(self._listeners):
            callback(text)

    @property
    def current_text(self) -> str:
        return self._current_text

    @property
    def word_buffer(self) -> str:
        return self._word_buffer

    def append_character(self, text: str) -> None:
        """Add text (a single char or a whole word) to the word buffer."""
        self._word_buffer += text
        self._changed()

    def commit_word(self) -> None:
        """Move the word buffer into the committed text."""
        if not self._word_buffer.strip():
            return
        if self._current_text and not self._current_text.endswith(' '):
            self._current_text += ' '
        self._current_text += self._word_buffer
        self._word_buffer = ""
        self._changed()

    def append_space(self) -> None:
        """Commit the pending word, then make sure the text ends in a space."""
        self.commit_word()
        if self._current_text and not self._current_text.endswith(' '):
            self._current_text += ' '
            self._changed()

    def new_line(self) -> None:
        """Commit the pending word and start a fresh prompt line."""
        self.commit_word()
        self.append_raw(PROMPT)

    def append_raw(self, text: str) -> None:
        """Append text straight to the committed text, bypassing word handling."""
        self._current_text += text
        self._changed()

    def backspace(self) -> None:
        """Delete from the word buffer first, then from the committed text."""
        if self._word_buffer:
            self._word_buffer = self._word_buffer[:-1]
        elif self._current_text:
            self._current_text = self._current_text[:-1]
        self._changed()

    def clear(self) -> None:
        self._current_text = ""
        self._word_buffer = ""
        self._changed()

    def get_text(self) -> str:
        return self._current_text + self._word_buffer
