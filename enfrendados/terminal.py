"""Console helpers: colours, cursor control, key reading and pauses."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from enum import IntEnum
from typing import TextIO


class Color(IntEnum):
    """Console colour numbers (QBasic / Windows console palette)."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    GREY = 7
    DARKGREY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15


class Key(IntEnum):
    """Key codes returned by :meth:`Terminal.getkey`."""

    ESCAPE = 0
    ENTER = 1
    SPACE = 32

    INSERT = 2
    HOME = 3
    PGUP = 4
    DELETE = 5
    END = 6
    PGDOWN = 7

    UP = 14
    DOWN = 15
    LEFT = 16
    RIGHT = 17

    F1 = 18
    F2 = 19
    F3 = 20
    F4 = 21
    F5 = 22
    F6 = 23
    F7 = 24
    F8 = 25
    F9 = 26
    F10 = 27
    F11 = 28
    F12 = 29

    NUMDEL = 30
    NUMPAD0 = 31
    NUMPAD1 = 127
    NUMPAD2 = 128
    NUMPAD3 = 129
    NUMPAD4 = 130
    NUMPAD5 = 131
    NUMPAD6 = 132
    NUMPAD7 = 133
    NUMPAD8 = 134
    NUMPAD9 = 135


ANSI_CLS = "\033[2J\033[3J"
ANSI_CONSOLE_TITLE_PRE = "\033]0;"
ANSI_CONSOLE_TITLE_POST = "\007"
ANSI_ATTRIBUTE_RESET = "\033[0m"
ANSI_CURSOR_HIDE = "\033[?25l"
ANSI_CURSOR_SHOW = "\033[?25h"
ANSI_CURSOR_HOME = "\033[H"

_FOREGROUND = {
    Color.BLACK: "\033[22;30m",
    Color.BLUE: "\033[22;34m",
    Color.GREEN: "\033[22;32m",
    Color.CYAN: "\033[22;36m",
    Color.RED: "\033[22;31m",
    Color.MAGENTA: "\033[22;35m",
    Color.BROWN: "\033[22;33m",
    Color.GREY: "\033[22;37m",
    Color.DARKGREY: "\033[01;30m",
    Color.LIGHTBLUE: "\033[01;34m",
    Color.LIGHTGREEN: "\033[01;32m",
    Color.LIGHTCYAN: "\033[01;36m",
    Color.LIGHTRED: "\033[01;31m",
    Color.LIGHTMAGENTA: "\033[01;35m",
    Color.YELLOW: "\033[01;33m",
    Color.WHITE: "\033[01;37m",
}

# Only the eight base colours have a background counterpart.
_BACKGROUND = {
    Color.BLACK: "\033[40m",
    Color.BLUE: "\033[44m",
    Color.GREEN: "\033[42m",
    Color.CYAN: "\033[46m",
    Color.RED: "\033[41m",
    Color.MAGENTA: "\033[45m",
    Color.BROWN: "\033[43m",
    Color.GREY: "\033[47m",
}

_NUMPAD = {
    71: Key.NUMPAD7,
    72: Key.NUMPAD8,
    73: Key.NUMPAD9,
    75: Key.NUMPAD4,
    77: Key.NUMPAD6,
    79: Key.NUMPAD1,
    80: Key.NUMPAD2,
    81: Key.NUMPAD3,
    82: Key.NUMPAD0,
    83: Key.NUMDEL,
}

_EXTENDED = {
    71: Key.HOME,
    72: Key.UP,
    73: Key.PGUP,
    75: Key.LEFT,
    77: Key.RIGHT,
    79: Key.END,
    80: Key.DOWN,
    81: Key.PGDOWN,
    82: Key.INSERT,
    83: Key.DELETE,
}

_ARROWS = {
    ord("A"): Key.UP,
    ord("B"): Key.DOWN,
    ord("C"): Key.RIGHT,
    ord("D"): Key.LEFT,
}


def ansi_color(color: int) -> str:
    """Return the ANSI foreground sequence for a colour number, or ''."""
    try:
        return _FOREGROUND[Color(color)]
    except ValueError:
        return ""


def ansi_background_color(color: int) -> str:
    """Return the ANSI background sequence for a colour number, or ''."""
    try:
        return _BACKGROUND.get(Color(color), "")
    except ValueError:
        return ""


def decode_key(codes: Sequence[int]) -> int:
    """Turn the character codes of one key press into a key code.

    ``codes`` holds every code that was available when the key was read;
    the escape-sequence handling depends on how many there were.
    """
    if not codes:
        raise ValueError("no key codes to decode")
    available = len(codes)
    stream: Iterator[int] = iter(codes)
    first = next(stream)

    if first in (0, 224):
        second = next(stream, None)
        if second is None:
            raise ValueError("incomplete extended key sequence")
        if first == 0:
            return _NUMPAD.get(second, second - 59 + Key.F1)
        return _EXTENDED.get(second, second - 123 + Key.F1)
    if first == 13:
        return Key.ENTER
    if first in (27, 155):
        if available >= 3 and next(stream) == ord("["):
            final = next(stream)
            return _ARROWS.get(final, final)
        return Key.ESCAPE
    return first


def read_char() -> str:
    """Read one key press from standard input without waiting for Return.

    Returns the first character together with any characters that were
    already waiting, so that escape sequences arrive whole.
    """
    if os.name == "nt":
        import msvcrt

        chars = [msvcrt.getwch()]
        while msvcrt.kbhit():
            chars.append(msvcrt.getwch())
        return "".join(chars)

    fd = sys.stdin.fileno()
    if not os.isatty(fd):
        ch = sys.stdin.read(1)
        if not ch:
            raise EOFError("end of input")
        return ch

    import select
    import termios

    saved = termios.tcgetattr(fd)
    try:
        raw = termios.tcgetattr(fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSANOW, raw)
        data = os.read(fd, 1)
        if not data:
            raise EOFError("end of input")
        while select.select([fd], [], [], 0)[0]:
            more = os.read(fd, 1)
            if not more:
                break
            data += more
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
    return data.decode("utf-8", errors="replace")


class Terminal:
    """A console driven with ANSI escape sequences."""

    def __init__(
        self,
        stream: TextIO | None = None,
        reader: Callable[[], str] | None = None,
        sleeper: Callable[[float], object] | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.reader = reader if reader is not None else read_char
        self.sleeper = sleeper if sleeper is not None else time.sleep

    def write(self, text: str) -> None:
        """Write text and flush it to the console."""
        self.stream.write(text)
        self.stream.flush()

    def set_color(self, color: int) -> None:
        """Change the foreground colour, leaving the background alone."""
        self.write(ansi_color(color))

    def set_background_color(self, color: int) -> None:
        """Change the background colour, leaving the foreground alone."""
        self.write(ansi_background_color(color))

    def reset_color(self) -> None:
        """Reset all text attributes to the defaults."""
        self.write(ANSI_ATTRIBUTE_RESET)

    def cls(self) -> None:
        """Clear the screen and move the cursor home."""
        self.write(ANSI_CLS + ANSI_CURSOR_HOME)

    def locate(self, x: int, y: int) -> None:
        """Move the cursor to the 1-based column ``x`` and row ``y``."""
        self.write(f"\033[{y};{x}H")

    def set_string(self, text: str) -> None:
        """Print text without advancing the cursor."""
        self.write(f"{text}\033[{len(text)}D")

    def set_cursor_visibility(self, visible: bool) -> None:
        """Show or hide the cursor."""
        self.write(ANSI_CURSOR_SHOW if visible else ANSI_CURSOR_HIDE)

    def hide_cursor(self) -> None:
        """Hide the cursor."""
        self.set_cursor_visibility(False)

    def show_cursor(self) -> None:
        """Show the cursor."""
        self.set_cursor_visibility(True)

    @contextmanager
    def hidden_cursor(self) -> Iterator[Terminal]:
        """Hide the cursor for the duration of a ``with`` block."""
        self.hide_cursor()
        try:
            yield self
        finally:
            self.show_cursor()

    def set_title(self, title: str) -> None:
        """Set the console window title."""
        self.write(ANSI_CONSOLE_TITLE_PRE + title + ANSI_CONSOLE_TITLE_POST)

    def sleep(self, ms: int) -> None:
        """Wait the given number of milliseconds."""
        if ms < 0:
            raise ValueError("sleep time must not be negative")
        self.sleeper(ms / 1000)

    def anykey(self, message: str | None = None) -> str:
        """Print an optional message and wait for a key; return what was read."""
        if message:
            self.write(message)
        return self.reader()

    def getkey(self) -> int:
        """Wait for a key press and return its key code."""
        codes = [ord(ch) for ch in self.reader()]
        while not codes or (codes[0] in (0, 224) and len(codes) < 2):
            codes.extend(ord(ch) for ch in self.reader())
        return decode_key(codes)

    def size(self) -> tuple[int, int]:
        """Return (rows, columns) of the console, or (-1, -1) if unknown."""
        try:
            dimensions = os.get_terminal_size(self.stream.fileno())
        except (OSError, ValueError, AttributeError):
            return (-1, -1)
        return (dimensions.lines, dimensions.columns)