# test_suggestions.py

import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termline.session.editor import InputEditor
from termline.session.suggestions import (
    CommandKnowledgeBase, SuggestionEngine, SuggestionState, current_word,
)
from termline.default_commands import DEFAULT_KNOWLEDGE_BASE


class TestCommandKnowledgeBase:
    def test_keeps_declared_order_and_dedups(self):
        kb = CommandKnowledgeBase.create(["ls", "git", "ls", "grep"])
        assert kb.known_commands == ("ls", "git", "grep")

    def test_flags_are_read_only(self):
        kb = CommandKnowledgeBase.create(["ls"], {"ls": ["-l"]})
        with pytest.raises(TypeError):
            kb.flags_by_command["ls"] = ("-a",)
        assert kb.flags_for("ls") == ("-l",)
        assert kb.flags_for("unknown") == ()

    def test_default_knowledge_base_contains_builtins(self):
        for name in ("cd", "pwd", "clear", "history", "exit", "help"):
            assert name in DEFAULT_KNOWLEDGE_BASE


class TestSuggestionEngine:
    """Tests for candidate ranking, selection and application."""

    def setup_method(self):
        self.kb = CommandKnowledgeBase.create(
            ["git", "grep", "ls"],
            {"ls": ["-l", "-a", "-la", "-lh"], "git": ["--version", "--help"]},
        )
        self.engine = SuggestionEngine(self.kb, logger=Mock())
        self.editor = InputEditor()

    def type(self, text):
        self.editor.insert(text)
        return self.engine.refresh(self.editor.text[:self.editor.cursor])

    def test_command_prefix_in_declared_order(self):
        assert self.type("g").candidates == ("git", "grep")

    def test_exact_match_offers_nothing(self):
        assert self.type("ls").candidates == ()

    def test_flag_candidates(self):
        assert self.type("ls -").candidates == ("-l", "-a", "-la", "-lh")

    def test_flag_prefix_excludes_exact(self):
        assert self.type("ls -l").candidates == ("-la", "-lh")

    def test_flags_of_unknown_command(self):
        assert self.type("foo -").candidates == ()

    def test_positional_argument_gets_nothing(self):
        assert self.type("git sta").candidates == ()

    def test_empty_and_trailing_whitespace_hide(self):
        assert not self.engine.refresh("").visible
        assert not self.type("git ").visible

    def test_truncated_to_limit(self):
        kb = CommandKnowledgeBase.create([f"cmd{i}" for i in range(10)])
        engine = SuggestionEngine(kb)
        assert engine.refresh("c").candidates == tuple(f"cmd{i}" for i in range(5))
        engine = SuggestionEngine(kb, max_suggestions=2)
        assert engine.refresh("c").candidates == ("cmd0", "cmd1")

    def test_min_prefix_length_threshold(self):
        engine = SuggestionEngine(self.kb, min_prefix_length=2)
        assert engine.refresh("g").candidates == ()
        assert engine.refresh("gi").candidates == ("git",)

    def test_invalid_settings_rejected(self):
        with pytest.raises(ValueError):
            SuggestionEngine(self.kb, max_suggestions=0)
        with pytest.raises(ValueError):
            SuggestionEngine(self.kb, min_prefix_length=-1)

    def test_cycle_selection_wraps(self):
        self.type("g")
        assert self.engine.state.selected is None
        assert self.engine.cycle_selection() == 0
        assert self.engine.cycle_selection() == 1
        assert self.engine.cycle_selection() == 0

    def test_cycle_with_no_candidates(self):
        assert self.engine.cycle_selection() is None

    def test_refresh_resets_selection(self):
        self.type("g")
        self.engine.cycle_selection()
        self.engine.refresh("gr")
        assert self.engine.state == SuggestionState(("grep",), None)

    def test_apply_uses_first_when_none_selected(self):
        self.type("g")
        assert self.engine.apply(self.editor) is True
        assert self.editor.text == "git "
        assert self.editor.cursor == 4

    def test_apply_with_nothing_available(self):
        self.type("xyz")
        assert self.engine.apply(self.editor) is False
        assert self.editor.text == "xyz"

    def test_repeated_apply_swaps_in_place(self):
        self.type("g")
        self.engine.apply(self.editor)
        self.engine.cycle_selection()
        self.engine.apply(self.editor)
        assert self.editor.text == "grep "
        assert self.engine.state.selected == 1

    def test_apply_flag_keeps_command(self):
        self.type("ls -l")
        self.engine.apply(self.editor)
        assert self.editor.text == "ls -la "

    def test_apply_mid_line_replaces_word_at_cursor(self):
        self.editor.insert("ls -l -a")
        self.editor.move_cursor(-3)
        assert self.engine.refresh(self.editor.text[:self.editor.cursor]).candidates == (
            "-la", "-lh")
        self.engine.apply(self.editor)
        assert self.editor.text == "ls -la -a"
        assert self.editor.cursor == 7

    def test_current_word(self):
        assert current_word("git sta") == "sta"
        assert current_word("git ") == ""
        assert current_word("") == ""
