"""On-screen keyboard model: keys, shift and symbol layers, and an edit buffer."""

from __future__ import annotations

from typing import Callable, Optional

_KEY_IDS = "0123456789qwertyuiopasdfghjklzxcvbnm"

_LETTER_LAYOUT: dict[str, str] = {key: key for key in _KEY_IDS}
_LETTER_LAYOUT["space"] = "Space"

_SYMBOL_LAYOUT: dict[str, str] = {
    **dict(zip("0123456789", ["`", "~", "!", "@", "#", "$", "%", "^", "&&", "*"])),
    **dict(zip("qwertyuiop", "()-_=+[]{}")),
    "a": "\\",
    "s": "|",
    "d": ";",
    "f": ":",
    "g": "'",
    "h": '"',
    "j": "/",
    "k": "?",
    "l": "",
    "z": "<",
    "x": ">",
    "c": ",",
    "v": ".",
    "b": "",
    "n": "",
    "m": "",
    "space": "Space",
}


class VirtualKeyboard:
    """A touch keyboard that edits a text buffer and hands it over on enter."""

    def __init__(self, on_enter: Optional[Callable[[str], None]] = None) -> None:
        self._on_enter = on_enter
        self._labels = dict(_LETTER_LAYOUT)
        self._shift = False
        self.text = ""

    @property
    def shift(self) -> bool:
        """Whether the next key press will be upper-cased."""
        return self._shift

    def labels(self) -> dict[str, str]:
        """Return the current label of every key, by key id."""
        return dict(self._labels)

    def press(self, label: str) -> str:
        """Press the key showing ``label`` and return the updated text."""
        if label not in self._labels.values():
            raise ValueError(f"no key is labelled {label!r}")
        if label == "Space":
            self.text += " "
        elif label == "&&":
            self.text += "&"
        elif label == "\\":
            self.text += self._labels["a"]
        elif self._shift:
            self._shift = False
            self.text += label.upper()
        else:
            self.text += label
        return self.text

    def press_shift(self) -> None:
        """Upper-case the next ordinary key press."""
        self._shift = True

    def set_symbols(self, checked: bool) -> None:
        """Switch between the symbol layer and the letter layer."""
        self._labels = dict(_SYMBOL_LAYOUT if checked else _LETTER_LAYOUT)

    def clear(self) -> None:
        """Empty the edit buffer."""
        self.text = ""

    def backspace(self) -> str:
        """Remove the last character and return the updated text."""
        self.text = self.text[:-1]
        return self.text

    def set_text(self, text: str) -> None:
        """Replace the buffer, as when the text is edited directly."""
        self.text = text

    def enter(self) -> str:
        """Hand the text to the enter callback, reset the buffer and return the text."""
        result = self.text
        if self._on_enter is not None:
            self._on_enter(result)
        self.text = ""
        return result