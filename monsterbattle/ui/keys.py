"""
Key input for menu navigation: arrows / W,S / Enter / Esc, plus digit
shortcuts that jump straight to a menu item.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
import sys

class Key(Enum):
    UP = auto()
    DOWN = auto()
    ENTER = auto()
    ESC = auto()
    DIGIT = auto()
    OTHER = auto()

@dataclass
class KeyEvent:
    key: Key
    raw: str | None = None

    @property
    def digit(self) -> int | None:
        if self.key is Key.DIGIT and self.raw:
            return int(self.raw)
        return None

_CHAR_KEYS = {
    "\r": Key.ENTER, "\n": Key.ENTER, "": Key.ENTER,
    "\x1b": Key.ESC, "q": Key.ESC,
    "w": Key.UP, "k": Key.UP,
    "s": Key.DOWN, "j": Key.DOWN,
}
_ARROWS = {"A": Key.UP, "B": Key.DOWN}

def decode_char(ch: str) -> KeyEvent:
    if ch.isdigit() and len(ch) == 1:
        return KeyEvent(Key.DIGIT, ch)
    return KeyEvent(_CHAR_KEYS.get(ch.lower(), Key.OTHER), ch)

def _win_read() -> KeyEvent:
    import msvcrt
    ch = msvcrt.getwch()
    # Arrow keys arrive as a prefix then a scan code
    if ch in ("\x00", "\xe0"):
        nxt = msvcrt.getwch()
        return KeyEvent({"H": Key.UP, "P": Key.DOWN}.get(nxt, Key.OTHER), ch + nxt)
    return decode_char(ch)

def _unix_read() -> KeyEvent:
    import termios, tty
    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":
            seq = sys.stdin.read(1)
            if seq == "[":
                seq2 = sys.stdin.read(1)
                return KeyEvent(_ARROWS.get(seq2, Key.OTHER), "\x1b[" + seq2)
            return KeyEvent(Key.ESC, ch)
        return decode_char(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)

def read_key() -> KeyEvent:
    if not sys.stdin.isatty():
        # Piped input: one command per line
        line = sys.stdin.readline()
        if not line:
            raise EOFError("input closed")
        return decode_char(line.strip())
    if sys.platform.startswith("win"):
        return _win_read()
    return _unix_read()
