import io

import pytest

from vaultkit.consoleio import apply_keystrokes, get_confirmation, get_masked_input


def test_confirmation_yes():
    out = io.StringIO()
    assert get_confirmation("Continue?", io.StringIO("y"), out) is True
    assert out.getvalue() == "Continue? (y/n)> "


def test_confirmation_no_after_retries():
    out = io.StringIO()
    assert get_confirmation("Quit?", io.StringIO("x\nn"), out) is False
    assert out.getvalue().count("Quit? (y/n)> ") == 3


def test_confirmation_eof_raises():
    with pytest.raises(EOFError):
        get_confirmation("Quit?", io.StringIO("abc"), io.StringIO())


def test_apply_keystrokes_backspace():
    assert apply_keystrokes("ab\x08c\r") == "ac"


def test_apply_keystrokes_backspace_on_empty_is_ignored():
    assert apply_keystrokes("\x08\x08xy") == "xy"


def test_apply_keystrokes_stops_at_terminators():
    assert apply_keystrokes("abc\ndef") == "abc"
    assert apply_keystrokes("ab\x03cd") == "ab"


def test_apply_keystrokes_ignores_non_printable():
    assert apply_keystrokes("a\x01\tb\x7f") == "ab"


def test_masked_input_returns_text_and_masks_output():
    out = io.StringIO()
    result = get_masked_input("DATA> ", io.StringIO("token\n"), out)
    assert result == "token"
    shown = out.getvalue()
    assert "token" not in shown
    assert shown.startswith("DATA> ")
    assert shown.endswith("\rDATA> *****\n")


def test_masked_input_backspace_display():
    out = io.StringIO()
    result = get_masked_input("> ", io.StringIO("ab\x08\r"), out)
    assert result == "a"
    assert "\b \b" in out.getvalue()


def test_masked_input_matches_apply_keystrokes():
    keys = "pa\x08ss\x01word\rignored"
    assert get_masked_input("", io.StringIO(keys), io.StringIO()) == apply_keystrokes(keys)


def test_masked_input_ends_at_eof():
    assert get_masked_input("> ", io.StringIO("abc"), io.StringIO()) == "abc"