"""Line editor model for entering calculator expressions.

The editor keeps a list of expression lines and a cursor. Keys are fed to
:meth:`ExpressionEditor.press`, either as a single printable character or as
a :class:`Key` for editing and navigation. Pressing :attr:`Key.ENTER` submits
the line under the cursor and starts a new input session.
"""

from __future__ import annotations

import enum
from typing import Iterable, Union

__all__ = ["Key", "ExpressionEditor"]

# Pressing one of these first on a fresh line continues from the last result.
_ANS_OPERATORS = frozenset("!+-*/^")
_ANS = "ans"


class Key(enum.Enum):
    """Editing and navigation keys understood by the editor."""

    BACKSPACE = enum.auto()
    ENTER = enum.auto()
    ESCAPE = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    DELETE = enum.auto()


class ExpressionEditor:
    """Editable list of expression lines with a cursor."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: list[str] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines.append("")
        self.closed = False
        self._begin_session()

    def _begin_session(self) -> None:
        if self._lines[-1]:
            self._lines.append("")
        self._x = 0
        self._y = len(self._lines) - 1
        self._untouched = True

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def cursor(self) -> tuple[int, int]:
        """Cursor as ``(column, line index)``."""
        return self._x, self._y

    @property
    def current_line(self) -> str:
        return self._lines[self._y]

    def _insert(self, text: str) -> None:
        line = self._lines[self._y]
        self._lines[self._y] = line[: self._x] + text + line[self._x :]

    def _clamp_column(self) -> None:
        self._x = min(self._x, len(self._lines[self._y]))

    def _press_key(self, key: Key) -> None:
        line = self._lines[self._y]
        if key is Key.BACKSPACE:
            if self._x > 0:
                self._lines[self._y] = line[: self._x - 1] + line[self._x :]
                self._x -= 1
        elif key is Key.ESCAPE:
            self.closed = True
        elif key is Key.LEFT:
            if self._x > 0:
                self._x -= 1
        elif key is Key.RIGHT:
            if self._x < len(line):
                self._x += 1
        elif key is Key.UP:
            if self._y > 0:
                self._y -= 1
                self._clamp_column()
        elif key is Key.DOWN:
            if self._y < len(self._lines) - 1:
                self._y += 1
                self._clamp_column()
        elif key is Key.DELETE:
            if self._x < len(line):
                self._lines[self._y] = line[: self._x] + line[self._x + 1 :]

    def _press_char(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        if ch == "(":
            self._insert("()")
            self._x += 1
        elif self._untouched and ch in _ANS_OPERATORS:
            self._insert(_ANS + ch)
            self._x += len(_ANS) + 1
        elif " " <= ch <= "~":
            self._insert(ch)
            self._x += 1

    def press(self, key: Union[Key, str]) -> int | None:
        """Handle one key press.

        Returns the index of the submitted line when ``key`` is
        :attr:`Key.ENTER`, otherwise None. Characters outside printable ASCII
        are ignored. Raises RuntimeError once the editor has been closed with
        :attr:`Key.ESCAPE`.
        """
        if self.closed:
            raise RuntimeError("editor is closed")
        if isinstance(key, Key):
            if key is Key.ENTER:
                submitted = self._y
                self._begin_session()
                return submitted
            self._press_key(key)
        else:
            self._press_char(key)
        self._untouched = False
        return None