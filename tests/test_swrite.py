import os
import threading

import pytest

from moshkit.swrite import swrite


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _read_all(fd):
    chunks = []
    while True:
        chunk = os.read(fd, 65536)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def test_bytes_round_trip(pipe):
    read_fd, write_fd = pipe
    assert swrite(write_fd, b"hello\x00world") == 11
    os.close(write_fd)
    assert _read_all(read_fd) == b"hello\x00world"


def test_text_is_encoded(pipe):
    read_fd, write_fd = pipe
    count = swrite(write_fd, "caf\u00e9")
    os.close(write_fd)
    data = _read_all(read_fd)
    assert data == "caf\u00e9".encode("utf-8")
    assert count == len(data)


def test_empty_write(pipe):
    read_fd, write_fd = pipe
    assert swrite(write_fd, b"") == 0
    os.close(write_fd)
    assert _read_all(read_fd) == b""


def test_large_buffer_written_completely(pipe):
    read_fd, write_fd = pipe
    payload = bytes(range(256)) * 2048
    result = {}
    reader = threading.Thread(target=lambda: result.setdefault("data", _read_all(read_fd)))
    reader.start()
    count = swrite(write_fd, payload)
    os.close(write_fd)
    reader.join(timeout=10)
    assert count == len(payload)
    assert result["data"] == payload


def test_bad_descriptor_raises(pipe):
    read_fd, write_fd = pipe
    os.close(write_fd)
    with pytest.raises(OSError):
        swrite(write_fd, b"data")