# moshkit

Small building blocks for programs that drive interactive terminal sessions
on POSIX systems.

## Modules

- `moshkit.timestamp`: `freeze_timestamp()` samples the monotonic clock and
  caches the value in milliseconds; `frozen_timestamp()` returns the cached
  value, taking a sample first if none has been taken yet. The value only
  changes when `freeze_timestamp()` is called again.
- `moshkit.swrite`: `swrite(fd, data)` writes every byte of `data` (bytes, or
  text encoded as UTF-8) to a file descriptor, retrying short writes. It
  returns the number of bytes written and raises `OSError` if the descriptor
  stops accepting data.
- `moshkit.locale_utils`: inspect and adjust the process locale.
  - `get_ctype()` returns a `LocaleVar(name, value)` for the first of
    `LC_ALL`, `LC_CTYPE` or `LANG` that is set; `str()` of it gives
    `NAME=value`, or `[no charset variables]` when none is set.
  - `locale_charset()` names the current codeset, reporting
    `ANSI_X3.4-1968` as `US-ASCII`.
  - `is_utf8_locale()` tells whether that codeset is `UTF-8` or `utf-8`.
  - `set_native_locale()` adopts the locale from the environment; if that
    fails it writes a diagnostic to stderr (suggesting `locale-gen` where a
    variable names the locale) and returns `False`.
  - `clear_locale_variables()` removes `LANG`, `LANGUAGE`, `LC_ALL` and every
    `LC_*` category variable from `os.environ`.
- `moshkit.pty_compat`: pseudo-terminal helpers.
  - `WinSize(rows, cols, xpixel=0, ypixel=0)` holds a window size, with
    `to_bytes()` / `from_bytes()` for the packed `struct winsize`,
    `from_fd(fd)` to read a terminal's size and `apply(fd)` to set it.
  - `cfmakeraw(attrs)` takes a `termios.tcgetattr()` list and returns a copy
    switched to raw mode (no echo, no canonical input, no signals, 8-bit
    characters, reads satisfied after one byte).
  - `forkpty(attrs=None, winsize=None)` opens a pseudo-terminal, applies
    `attrs` and the window size (80x25 by default), and forks. The parent
    gets `(pid, master_fd)`; the child gets `(0, None)` with the terminal as
    its controlling terminal and standard streams.

## Example

```python
import os

from moshkit.pty_compat import WinSize, forkpty
from moshkit.swrite import swrite

pid, master = forkpty(None, WinSize(rows=24, cols=80))
if pid == 0:
    os.execvp("echo", ["echo", "hello"])

while True:
    try:
        chunk = os.read(master, 1024)
    except OSError:  # EIO once the child side is closed
        break
    if not chunk:
        break
    swrite(1, chunk)

os.close(master)
os.waitpid(pid, 0)
```

## What it does not do

There is no event loop here: the package has no helper for waiting on
several file descriptors and signals at once, so callers use `select`,
`selectors` or `signal` from the standard library for that. There is also
no command-line program; everything is used as a library.

## Tests

```
pip install -e .[test]
pytest
```