#!/usr/bin/env python3
"""Unit tests for the inline ActiveEditor."""

import pytest

from core import ActiveEditor, EditKind, FieldId


def single(value=""):
    return ActiveEditor(FieldId.SUMMARY, EditKind.INLINE_SINGLE_LINE, value)


def multi(value=""):
    return ActiveEditor(FieldId.DESCRIPTION, EditKind.INLINE_MULTI_LINE, value)


class TestSeeding:
    def test_seeded_with_exact_value_and_cursor_at_end(self):
        editor = single("Fix login")
        assert editor.value == "Fix login"
        assert editor.original_value == "Fix login"
        assert editor.buffer.cursor_position == len("Fix login")
        assert editor.has_changes() is False

    def test_none_value_becomes_empty(self):
        editor = single(None)
        assert editor.value == ""

    def test_host_owned_kinds_rejected(self):
        with pytest.raises(ValueError):
            ActiveEditor(FieldId.STATUS, EditKind.MODAL_CHOICE, "Open")
        with pytest.raises(ValueError):
            ActiveEditor(FieldId.LINKS, EditKind.SIDE_PANEL)


class TestTextInput:
    def test_insert_tracks_changes(self):
        editor = single("Fix")
        editor.insert_text(" login")
        assert editor.value == "Fix login"
        assert editor.has_changes()

    def test_single_line_drops_newlines(self):
        editor = single("a")
        editor.insert_text("b\nc")
        assert editor.value == "ab c"
        assert editor.insert_newline() is False
        assert editor.line_count == 1

    def test_multi_line_newline_splits_line(self):
        editor = multi("hello world")
        editor.home()
        for _ in range(5):
            editor.cursor_right()
        assert editor.insert_newline() is True
        assert editor.value == "hello\n world"
        assert editor.cursor_line == 1
        assert editor.cursor_col == 0

    def test_backspace_joins_lines(self):
        editor = multi("ab\ncd")
        editor.home()
        assert editor.cursor_line == 1 and editor.cursor_col == 0
        assert editor.backspace() is True
        assert editor.value == "abcd"
        assert editor.cursor_col == 2

    def test_backspace_at_start_is_noop(self):
        editor = single("")
        assert editor.backspace() is False

    def test_delete_forward(self):
        editor = single("abc")
        editor.home()
        assert editor.delete() is True
        assert editor.value == "bc"
        editor.end()
        assert editor.delete() is False

    def test_kill_to_line_start(self):
        editor = single("hello world")
        for _ in range(6):
            editor.cursor_left()
        assert editor.kill_to_line_start() is True
        assert editor.value == " world"
        assert editor.kill_to_line_start() is False

    def test_kill_to_line_end_joins_next_line_at_eol(self):
        editor = multi("one\ntwo")
        editor.cursor_up()
        editor.home()
        assert editor.kill_to_line_end() is True
        assert editor.value == "\ntwo"
        assert editor.kill_to_line_end() is True
        assert editor.value == "two"
        editor.end()
        assert editor.kill_to_line_end() is False


class TestCursor:
    def test_left_right_cross_lines(self):
        editor = multi("ab\ncd")
        editor.home()
        editor.cursor_left()
        assert (editor.cursor_line, editor.cursor_col) == (0, 2)
        editor.cursor_right()
        assert (editor.cursor_line, editor.cursor_col) == (1, 0)

    def test_bounds_are_respected(self):
        editor = single("ab")
        editor.cursor_right()
        assert editor.buffer.cursor_position == 2
        editor.home()
        editor.cursor_left()
        assert editor.buffer.cursor_position == 0

    def test_up_down_between_lines(self):
        editor = multi("first\nsecond")
        editor.cursor_up()
        assert editor.cursor_line == 0
        editor.cursor_down()
        assert editor.cursor_line == 1
