import pytest

from sensorman.keyboard import VirtualKeyboard


def test_letters_are_appended_in_order():
    kb = VirtualKeyboard()
    kb.press("h")
    assert kb.press("i") == "hi"


def test_shift_applies_to_next_key_only():
    kb = VirtualKeyboard()
    kb.press_shift()
    assert kb.shift is True
    kb.press("a")
    kb.press("b")
    assert kb.text == "Ab"
    assert kb.shift is False


def test_space_key_adds_space():
    kb = VirtualKeyboard()
    kb.press("a")
    kb.press("Space")
    kb.press("b")
    assert kb.text == "a b"


def test_symbol_layer_labels():
    kb = VirtualKeyboard()
    kb.set_symbols(True)
    labels = kb.labels()
    assert labels["8"] == "&&"
    assert labels["a"] == "\\"
    assert labels["q"] == "("
    assert labels["space"] == "Space"


def test_ampersand_and_backslash_keys():
    kb = VirtualKeyboard()
    kb.set_symbols(True)
    kb.press("&&")
    kb.press("\\")
    assert kb.text == "&\\"


def test_switching_back_restores_letter_layer():
    kb = VirtualKeyboard()
    original = kb.labels()
    kb.set_symbols(True)
    assert kb.labels() != original
    kb.set_symbols(False)
    assert kb.labels() == original


def test_unknown_label_is_rejected():
    kb = VirtualKeyboard()
    with pytest.raises(ValueError):
        kb.press("(")


def test_backspace_removes_last_character():
    kb = VirtualKeyboard()
    kb.set_text("abc")
    assert kb.backspace() == "ab"
    kb.clear()
    assert kb.backspace() == ""


def test_clear_empties_buffer():
    kb = VirtualKeyboard()
    kb.press("x")
    kb.clear()
    assert kb.text == ""


def test_set_text_then_press_appends():
    kb = VirtualKeyboard()
    kb.set_text("ab")
    assert kb.press("c") == "abc"


def test_enter_hands_text_to_callback_and_resets():
    received = []
    kb = VirtualKeyboard(received.append)
    kb.press("o")
    kb.press("k")
    assert kb.enter() == "ok"
    assert received == ["ok"]
    assert kb.text == ""