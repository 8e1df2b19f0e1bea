"""Pseudo-terminal helpers: raw mode and forking onto a new terminal."""

from __future__ import annotations

import fcntl
import os
import struct
import sys
import termios
from dataclasses import dataclass
from typing import Optional

_WINSIZE_FORMAT = "HHHH"


@dataclass(frozen=True)
class WinSize:
    """Terminal window size in character cells and pixels."""

    rows: int
    cols: int
    xpixel: int = 0
    ypixel: int = 0

    def to_bytes(self) -> bytes:
        """Pack as a ``struct winsize``."""
        return struct.pack(_WINSIZE_FORMAT, self.rows, self.cols, self.xpixel, self.ypixel)

    @classmethod
    def from_bytes(cls, data: bytes) -> "WinSize":
        """Unpack a ``struct winsize``."""
        return cls(*struct.unpack(_WINSIZE_FORMAT, data[: struct.calcsize(_WINSIZE_FORMAT)]))

    @classmethod
    def from_fd(cls, fd: int) -> "WinSize":
        """Read the window size of the terminal on ``fd``."""
        size = struct.calcsize(_WINSIZE_FORMAT)
        return cls.from_bytes(fcntl.ioctl(fd, termios.TIOCGWINSZ, b"\0" * size))

    def apply(self, fd: int) -> None:
        """Set this window size on the terminal on ``fd``."""
        fcntl.ioctl(fd, termios.TIOCSWINSZ, self.to_bytes())


# An initial size is needed, or querying the size later fails.
_DEFAULT_WINSIZE = WinSize(rows=25, cols=80)


def cfmakeraw(attrs: list) -> list:
    """Return a copy of termios ``attrs`` switched to raw mode."""
    iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
    iflag &= ~(
        termios.IGNBRK
        | termios.BRKINT
        | termios.PARMRK
        | termios.ISTRIP
        | termios.INLCR
        | termios.IGNCR
        | termios.ICRNL
        | termios.IXON
    )
    oflag &= ~termios.OPOST
    lflag &= ~(termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN)
    cflag &= ~(termios.CSIZE | termios.PARENB)
    cflag |= termios.CS8
    cc = list(cc)
    cc[termios.VMIN] = 1  # a read is satisfied after one byte
    cc[termios.VTIME] = 0  # no timer
    return [iflag, oflag, cflag, lflag, ispeed, ospeed, cc]


def _become_controlling_terminal(slave: int) -> None:
    try:
        os.setsid()
    except OSError as exc:
        print(f"setsid: {exc.strerror}", file=sys.stderr)
    if hasattr(termios, "TIOCSCTTY"):
        fcntl.ioctl(slave, termios.TIOCSCTTY, 0)
    else:
        os.close(os.open(os.ttyname(slave), os.O_RDWR))


def forkpty(attrs: Optional[list] = None, winsize: Optional[WinSize] = None) -> tuple[int, Optional[int]]:
    """Fork a child whose standard streams are a new pseudo-terminal.

    Returns ``(pid, master_fd)`` in the parent and ``(0, None)`` in the
    child. ``attrs`` and ``winsize`` configure the terminal before the fork.
    """
    master, slave = os.openpty()
    try:
        if attrs is not None:
            termios.tcsetattr(slave, termios.TCSAFLUSH, attrs)
        (winsize or _DEFAULT_WINSIZE).apply(slave)
        pid = os.fork()
    except BaseException:
        os.close(slave)
        os.close(master)
        raise

    if pid == 0:
        os.close(master)
        _become_controlling_terminal(slave)
        for target in (0, 1, 2):
            os.dup2(slave, target)
        if slave > 2:
            os.close(slave)
        return 0, None

    os.close(slave)
    return pid, master