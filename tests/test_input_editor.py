# test_input_editor.py

import random
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termline.session.editor import InputEditor, InputState


class TestInputEditor:
    """Tests for line editing and cursor bounds."""

    def setup_method(self):
        self.editor = InputEditor()

    def assert_cursor_in_bounds(self):
        assert 0 <= self.editor.cursor <= len(self.editor.text)

    def test_insert_advances_cursor(self):
        self.editor.insert("a")
        self.editor.insert("b")
        assert self.editor.state == InputState("ab", 2)

    def test_insert_in_middle(self):
        self.editor.insert("ac")
        self.editor.move_cursor(-1)
        self.editor.insert("b")
        assert self.editor.state == InputState("abc", 2)

    @pytest.mark.parametrize("char", ["\n", "\r", "\t", "\x1b", "\x00", "\x7f"])
    def test_control_characters_rejected(self, char):
        self.editor.insert("ls")
        self.editor.insert(char)
        assert self.editor.state == InputState("ls", 2)

    def test_paste_filters_control_characters(self):
        self.editor.insert("echo\nhi")
        assert self.editor.text == "echohi"
        assert self.editor.cursor == 6

    def test_unicode_is_accepted(self):
        self.editor.insert("é")
        self.editor.insert("日")
        assert self.editor.state == InputState("é日", 2)

    def test_backspace_at_start_is_noop(self):
        self.editor.insert("ab")
        self.editor.move_cursor("home")
        self.editor.delete_before()
        assert self.editor.state == InputState("ab", 0)

    def test_backspace_removes_previous_character(self):
        self.editor.insert("abc")
        self.editor.move_cursor(-1)
        self.editor.delete_before()
        assert self.editor.state == InputState("ac", 1)

    def test_forward_delete(self):
        self.editor.insert("abc")
        self.editor.move_cursor("home")
        self.editor.delete_at()
        assert self.editor.state == InputState("bc", 0)

    def test_forward_delete_at_end_is_noop(self):
        self.editor.insert("abc")
        self.editor.delete_at()
        assert self.editor.state == InputState("abc", 3)

    def test_move_cursor_clamps(self):
        self.editor.insert("abc")
        self.editor.move_cursor(100)
        assert self.editor.cursor == 3
        self.editor.move_cursor(-100)
        assert self.editor.cursor == 0
        self.editor.move_cursor("end")
        assert self.editor.cursor == 3

    def test_move_cursor_rejects_unknown_target(self):
        with pytest.raises(ValueError):
            self.editor.move_cursor("middle")

    def test_word_motion(self):
        self.editor.insert("git commit -m")
        self.editor.move_word(-1)
        assert self.editor.cursor == 11
        self.editor.move_word(-1)
        assert self.editor.cursor == 4
        self.editor.move_word(1)
        assert self.editor.cursor == 11

    def test_delete_word_before(self):
        self.editor.insert("git commit ")
        self.editor.delete_word_before()
        assert self.editor.state == InputState("git ", 4)

    def test_replace_current_word_at_end(self):
        self.editor.insert("gi")
        self.editor.replace_current_word("git")
        assert self.editor.state == InputState("git ", 4)

    def test_replace_current_word_flag(self):
        self.editor.insert("ls -l")
        self.editor.replace_current_word("-la")
        assert self.editor.state == InputState("ls -la ", 7)

    def test_replace_word_containing_cursor(self):
        self.editor.insert("gt status")
        self.editor.move_cursor("home")
        self.editor.move_cursor(1)
        self.editor.replace_current_word("git")
        assert self.editor.text == "git status"
        assert self.editor.cursor == 4

    def test_word_span_at_start_of_word(self):
        self.editor.insert("ls -l")
        self.editor.move_cursor("home")
        assert self.editor.current_word_span() == (0, 2)
        self.editor.move_cursor(3)
        assert self.editor.current_word_span() == (3, 5)

    def test_word_span_between_spaces_is_empty(self):
        self.editor.insert("ls  -l")
        self.editor.move_cursor("home")
        self.editor.move_cursor(3)
        assert self.editor.current_word_span() == (3, 3)

    def test_replace_after_whitespace_inserts(self):
        self.editor.insert("ls ")
        self.editor.replace_current_word("-l")
        assert self.editor.state == InputState("ls -l ", 6)

    def test_clear(self):
        self.editor.insert("abc")
        self.editor.clear()
        assert self.editor.state == InputState("", 0)

    def test_restore_clamps(self):
        self.editor.restore(InputState("ab", 10))
        assert self.editor.state == InputState("ab", 2)

    def test_cursor_stays_in_bounds_for_random_sequences(self):
        rng = random.Random(1234)
        operations = [
            lambda: self.editor.insert(rng.choice(["a", "b", " ", "\n", "é", "-x"])),
            self.editor.delete_before,
            self.editor.delete_at,
            self.editor.delete_word_before,
            lambda: self.editor.move_cursor(rng.randint(-5, 5)),
            lambda: self.editor.move_cursor(rng.choice(["home", "end"])),
            lambda: self.editor.move_word(rng.choice([-1, 1])),
            lambda: self.editor.replace_current_word(rng.choice(["git", "-l", ""])),
            self.editor.clear,
        ]
        for _ in range(2000):
            rng.choice(operations)()
            self.assert_cursor_in_bounds()
            assert "\n" not in self.editor.text
