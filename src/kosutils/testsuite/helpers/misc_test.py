import io
import os
import threading
import time

import pytest

from ...helpers.errors import Error, TimeoutExpired
from ...helpers.misc import min_int, string_contains, supports_ansi_color, with_timeout
from ...platformflags import is_win32


@pytest.mark.parametrize("a, b, result", [(1, 2, 1), (2, 1, 1), (3, 3, 3), (-5, 0, -5), (0, -5, -5)])
def test_min_int(a, b, result):
    assert min_int(a, b) == result


def test_string_contains():
    items = ["foo", "bar", ""]
    assert string_contains(items, "foo")
    assert string_contains(items, "")
    assert not string_contains(items, "baz")
    assert not string_contains(items, "fo")
    assert not string_contains([], "foo")


def test_with_timeout_returns_result():
    assert with_timeout(lambda: 42, 5) == 42
    assert with_timeout(lambda: None, 5) is None


def test_with_timeout_raises_exception():
    def fail():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        with_timeout(fail, 5)


def test_with_timeout_expires():
    release = threading.Event()
    finished = threading.Event()

    def slow():
        release.wait(10)
        finished.set()
        return "late"

    start = time.monotonic()
    with pytest.raises(TimeoutExpired) as exc:
        with_timeout(slow, 0.1)
    assert time.monotonic() - start < 5
    assert str(exc.value) == "timeout after 0.1s"
    assert isinstance(exc.value, Error)
    assert isinstance(exc.value, TimeoutError)
    # the call keeps running in the background
    assert not finished.is_set()
    release.set()
    assert finished.wait(5)


def test_supports_ansi_color_file_objects():
    assert supports_ansi_color(io.StringIO()) is False
    assert supports_ansi_color(object()) is False


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_supports_ansi_color_closed_files(tmp_path):
    stream = io.StringIO()
    stream.close()
    assert supports_ansi_color(stream) is False
    with open(tmp_path / "file", "w") as f:
        pass
    assert supports_ansi_color(f) is False


def test_supports_ansi_color_tty():
    assert supports_ansi_color(FakeTTY()) is (not is_win32)


def test_supports_ansi_color_fd(tmp_path):
    with open(tmp_path / "file", "w") as f:
        assert supports_ansi_color(f.fileno()) is False
        assert supports_ansi_color(f) is False


@pytest.mark.skipif(is_win32 or not hasattr(os, "openpty"), reason="needs a pty")
def test_supports_ansi_color_pty():
    master, slave = os.openpty()
    try:
        assert supports_ansi_color(slave) is True
    finally:
        os.close(master)
        os.close(slave)
