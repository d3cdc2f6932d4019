"""
Shared fixtures: a console that records draw calls instead of painting.
"""

import pytest

from flappy_dragon.settings import load_settings


class RecordingConsole:
    """Console stand-in that keeps every draw call for inspection."""

    def __init__(self):
        self.calls = []

    def cls(self):
        self.calls.append(("cls",))

    def cls_bg(self, color):
        self.calls.append(("cls_bg", color))

    def set(self, x, y, fg, bg, glyph):
        self.calls.append(("set", x, y, glyph))

    def set_fancy(self, x, y, rotation, scale, fg, bg, glyph):
        self.calls.append(("set_fancy", x, y, glyph))

    def print(self, x, y, text):
        self.calls.append(("print", x, y, text))

    def print_centered(self, y, text):
        self.calls.append(("print_centered", y, text))

    def texts(self):
        return [c[-1] for c in self.calls if c[0] in ("print", "print_centered")]


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def settings():
    return load_settings(seed=42)
