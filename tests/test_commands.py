"""Tests for the command value types."""

import dataclasses

import pytest
from linepad.commands import (
    ALL_COMMANDS,
    DocumentCommand,
    EditCommand,
    InsertChar,
    LoadDocument,
    MoveCursorLeft,
    MovementCommand,
    SaveDocument,
)


def test_all_commands_are_frozen_dataclasses():
    for command_type in ALL_COMMANDS:
        assert dataclasses.is_dataclass(command_type)
        assert command_type.__dataclass_params__.frozen


def test_all_commands_belong_to_one_family():
    families = (MovementCommand, EditCommand, DocumentCommand)
    for command_type in ALL_COMMANDS:
        assert sum(issubclass(command_type, family) for family in families) == 1


def test_only_edit_commands_edit_text():
    for command_type in ALL_COMMANDS:
        assert command_type.edits_text == issubclass(command_type, EditCommand)


def test_commands_compare_by_value():
    assert InsertChar('a') == InsertChar('a')
    assert InsertChar('a') != InsertChar('b')
    assert MoveCursorLeft() == MoveCursorLeft()
    assert SaveDocument() == SaveDocument(None)
    assert LoadDocument("x") != LoadDocument("y")


def test_insert_char_is_immutable():
    command = InsertChar('a')
    with pytest.raises(dataclasses.FrozenInstanceError):
        command.character = 'b'


@pytest.mark.parametrize("bad", ["", "ab", "\n", "\r"])
def test_insert_char_rejects_non_characters(bad):
    with pytest.raises(ValueError):
        InsertChar(bad)


def test_insert_char_accepts_tab_and_unicode():
    assert InsertChar('\t').character == '\t'
    assert InsertChar('é').character == 'é'
