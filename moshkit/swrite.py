"""Write a whole buffer to a file descriptor."""

from __future__ import annotations

import os


def swrite(fd: int, data: bytes | str) -> int:
    """Write all of ``data`` to ``fd``, retrying short writes.

    Text is encoded as UTF-8. Returns the number of bytes written and
    raises OSError if the descriptor stops accepting data.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    view = memoryview(data)
    total = 0
    while total < len(view):
        written = os.write(fd, view[total:])
        if written <= 0:
            raise OSError(f"write to fd {fd} made no progress")
        total += written
    return total