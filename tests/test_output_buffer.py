"""
Tests for OutputBuffer word handling and listeners.
"""

import pytest

from horde_keyboard.output.output_buffer import OutputBuffer


@pytest.fixture
def seen(output):
    """Every text snapshot pushed to listeners."""
    texts = []
    output.add_listener(texts.append)
    return texts


class TestCharacters:

    def test_characters_build_word(self, output):
        for ch in "abc":
            output.append_character(ch)
        assert output.word_buffer == "abc"
        assert output.current_text == ""
        assert output.get_text() == "abc"

    def test_append_space_commits_word(self, output):
        output.append_character("hi")
        output.append_space()
        assert output.get_text() == "hi "
        assert output.word_buffer == ""

    def test_second_word_is_separated(self, output):
        output.append_character("one")
        output.commit_word()
        output.append_character("two")
        output.commit_word()
        assert output.get_text() == "one two"

    def test_commit_blank_word_is_noop(self, output, seen):
        output.commit_word()
        assert output.get_text() == ""
        assert seen == []

    def test_space_on_empty_text(self, output):
        output.append_space()
        assert output.get_text() == ""

    def test_space_not_doubled(self, output):
        output.append_character("a")
        output.append_space()
        output.append_space()
        assert output.get_text() == "a "


class TestEditing:

    def test_backspace_word_buffer_first(self, output):
        output.append_character("ab")
        output.commit_word()
        output.append_character("cd")
        output.backspace()
        assert output.get_text() == "abc"
        assert output.current_text == "ab"

    def test_backspace_into_committed_text(self, output):
        output.append_character("ab")
        output.append_space()
        output.backspace()
        output.backspace()
        assert output.get_text() == "a"

    def test_backspace_on_empty(self, output, seen):
        output.backspace()
        assert output.get_text() == ""
        assert seen == [""]

    def test_clear(self, output):
        output.append_character("abc")
        output.append_space()
        output.append_character("d")
        output.clear()
        assert output.get_text() == ""
        assert output.word_buffer == ""


class TestRawAndNewLine:

    def test_new_line_commits_then_prompts(self, output):
        output.append_character("go")
        output.new_line()
        assert output.get_text() == "go\n> "

    def test_new_line_on_empty(self, output):
        output.new_line()
        assert output.get_text() == "\n> "

    def test_append_raw_bypasses_word(self, output):
        output.append_character("x")
        output.append_raw("BANNER\n")
        assert output.current_text == "BANNER\n"
        assert output.get_text() == "BANNER\nx"


class TestListeners:

    def test_listener_gets_full_text(self, output, seen):
        output.append_character("a")
        output.append_space()
        output.append_character("b")
        # commit and trailing space notify separately
        assert seen == ["a", "a", "a ", "a b"]

    def test_remove_listener(self, output, seen):
        output.remove_listener(seen.append)
        output.append_character("a")
        assert seen == []

    def test_remove_unknown_listener(self, output):
        output.remove_listener(lambda text: None)
