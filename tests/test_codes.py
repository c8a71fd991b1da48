import string

import pytest

from lunalite.codes import CursorMode, KeyCode, MouseCode


def test_letter_keys_match_ascii_uppercase():
    for letter in string.ascii_uppercase:
        assert KeyCode(ord(letter)).name == letter


def test_none_codes_are_zero():
    assert KeyCode(0) is KeyCode.NONE
    assert MouseCode(0) is MouseCode.NONE
    assert CursorMode(0) is CursorMode.NORMAL


def test_key_codes_are_unique():
    values = [member.value for member in KeyCode]
    assert len(values) == len(set(values))
    assert [KeyCode(value) for value in values] == list(KeyCode)


def test_non_letter_keys_precede_letters():
    non_letters = [k for k in KeyCode if k.name not in string.ascii_uppercase]
    assert max(non_letters) < KeyCode(ord("A"))
    assert KeyCode(1) is KeyCode.LEFT_SHIFT


def test_mouse_codes_are_sequential():
    assert [MouseCode(i) for i in range(len(MouseCode))] == list(MouseCode)


def test_cursor_modes_order():
    assert [CursorMode(i) for i in range(3)] == [
        CursorMode.NORMAL,
        CursorMode.HIDDEN,
        CursorMode.LOCKED,
    ]


def test_lookup_by_value():
    assert KeyCode(ord("W")) is KeyCode.W
    with pytest.raises(ValueError):
        KeyCode(ord("a"))