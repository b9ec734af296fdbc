from __future__ import annotations
import io
import logging
import os
import sys
from contextlib import contextmanager
from typing import Dict, Iterator, Optional, TextIO

from tictactoe.types import Command

log = logging.getLogger(__name__)


class TerminalUnsupported(RuntimeError):
    """The input stream is a tty this platform cannot switch to cbreak mode."""


ESC = "\x1b"
CTRL_C = "\x03"
CTRL_D = "\x04"

KEYMAP: Dict[str, Command] = {
    # arrows, both normal and application cursor mode
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[D": "left",
    "\x1b[C": "right",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOD": "left",
    "\x1bOC": "right",
    # wasd / vi keys
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "k": "up",
    "j": "down",
    "h": "left",
    "l": "right",
    "\r": "place",
    "\n": "place",
    " ": "place",
    "n": "new_game",
    "c": "quit",
    "q": "quit",
    CTRL_C: "quit",
    CTRL_D: "quit",
}


def parse_key(seq: str) -> Optional[Command]:
    """Map a raw key sequence to a command. Unknown keys map to None."""
    if not seq:
        return None
    cmd = KEYMAP.get(seq)
    if cmd is None and len(seq) == 1:
        cmd = KEYMAP.get(seq.lower())
    if cmd is None:
        log.debug("ignored key %r", seq)
    return cmd


def read_key(stream: TextIO) -> str:
    """
    Read one key press. Escape sequences (arrows, and the longer
    "ESC [ 1 ~" family) come back whole. Returns "" at end of input.
    """
    ch = stream.read(1)
    if ch != ESC:
        return ch

    seq = ch
    nxt = stream.read(1)
    if not nxt:
        return seq
    seq += nxt
    if nxt not in "[O":
        return seq

    while True:
        ch = stream.read(1)
        if not ch:
            return seq
        seq += ch
        # final byte of a CSI sequence is in @..~
        if "@" <= ch <= "~":
            return seq


@contextmanager
def raw_mode(stream: Optional[TextIO] = None) -> Iterator[None]:
    """
    Put the terminal in cbreak mode (no echo, unbuffered keys) for the
    duration of the block and always restore it afterwards, including on
    exceptions and Ctrl-C. Streams that aren't a tty are left alone.
    """
    stream = stream if stream is not None else sys.stdin
    try:
        fd: Optional[int] = stream.fileno()
    except (AttributeError, io.UnsupportedOperation):
        fd = None

    if fd is None or not os.isatty(fd):
        yield
        return

    try:
        import termios
        import tty
    except ImportError as e:
        raise TerminalUnsupported("Keyboard play needs a POSIX terminal (termios is unavailable).") from e

    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        sys.stdout.write("\033[?25l")  # hide the terminal cursor
        sys.stdout.flush()
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        sys.stdout.write("\033[?25h")
        sys.stdout.flush()
        log.debug("terminal mode restored")
