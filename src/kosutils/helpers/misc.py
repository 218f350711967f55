import os
import sys
import threading

from .errors import TimeoutExpired
from ..platformflags import is_win32


def min_int(a, b):
    """Return the smaller one of two ints."""
    return a if a < b else b


def string_contains(items, item):
    """Return whether the list of strings *items* contains *item*."""
    return item in items


def format_timeout(timeout):
    return f"{timeout:g}s" if isinstance(timeout, (int, float)) else str(timeout)


def with_timeout(func, timeout):
    """
    Call func() and wait at most *timeout* seconds for it to return.

    Returns what func returns or raises what func raises, if it finishes in time.
    Otherwise, raise TimeoutExpired. The thread running func can't be stopped, it
    will finish in the background (it is a daemon thread, so it won't keep the
    process alive).
    """
    result = {}

    def run():
        try:
            result["value"] = func()
        except BaseException as exc:  # handed over to the waiting thread
            result["exception"] = exc

    thread = threading.Thread(target=run, name=f"with_timeout-{getattr(func, '__name__', 'func')}", daemon=True)
    thread.start()
    thread.join(timeout)
    if thread.is_alive():
        raise TimeoutExpired(format_timeout(timeout))
    if "exception" in result:
        raise result["exception"]
    return result.get("value")


def supports_ansi_color(fd=None):
    """
    Return whether ANSI color sequences may be written to *fd*.

    *fd* is either a file descriptor number or a file-like object, default: sys.stdout.
    """
    if fd is None:
        fd = sys.stdout
    if is_win32:
        return False
    if isinstance(fd, int):
        return os.isatty(fd)
    if not hasattr(fd, "isatty"):
        return False
    try:
        return fd.isatty()
    except ValueError:
        # closed file
        return False
