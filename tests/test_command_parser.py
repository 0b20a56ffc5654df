"""Tests for the automation command parser."""

import pytest

from kanban.core.command_parser import is_command, parse_command, parse_key
from kanban.core.events import EventKind, InputEvent


def test_is_command_requires_sentinel():
    assert is_command("►:submit")
    assert not is_command("submit")
    assert not is_command(" ►:submit")


@pytest.mark.parametrize(
    "line,name",
    [
        ("►:keypress:down", "down"),
        ("►:keypress:up\n", "up"),
        ("►:keypress:pageup", "pageup"),
        ("►:keypress:pagedown", "pagedown"),
        ("►:keypress:escape", "escape"),
        ("►:keypress:return", "return"),
        ("►:keypress:enter", "return"),
        ("►:keypress:backspace", "backspace"),
    ],
)
def test_keypress_named_keys(line, name):
    assert parse_command(line) == InputEvent.key(name)


def test_keypress_single_character_is_typed():
    event = parse_command("►:keypress:a")

    assert event == InputEvent.char("a")


def test_keypress_without_key_is_ignored():
    assert parse_command("►:keypress:") is None
    assert parse_command("►:keypress") is None


def test_set_line_keeps_colons():
    event = parse_command("►:set_line:feat: add login\n")

    assert event.kind is EventKind.SET_LINE
    assert event.text == "feat: add login"


def test_set_line_can_be_empty():
    assert parse_command("►:set_line:") == InputEvent.set_line("")


def test_submit():
    event = parse_command("►:submit\r\n")

    assert event.kind is EventKind.SUBMIT
    assert event.is_submit


def test_unknown_command_is_ignored():
    assert parse_command("►:explode:now") is None


def test_plain_line_is_not_a_command():
    assert parse_command("hello") is None


def test_parse_key_aliases():
    assert parse_key("ESC") == InputEvent.key("escape")
    assert parse_key("space") == InputEvent.char(" ")
    assert parse_key("F5") == InputEvent.key("f5")
