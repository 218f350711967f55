import mimetypes
import os
import stat
from pathlib import Path

import platformdirs

from .errors import Error

from ..constants import *  # NOQA


def ensure_dir(path, mode=stat.S_IRWXU | stat.S_IRWXG | stat.S_IRWXO, pretty_deadly=True):
    """
    Create directory *path* and missing parents, unless it already exists.

    *mode* is used for newly created directories (the umask applies).
    If pretty_deadly is True, an OSError is reraised as Error, otherwise as is.
    """
    try:
        Path(path).mkdir(mode=mode, parents=True, exist_ok=True)
    except OSError as e:
        if pretty_deadly:
            raise Error(str(e))
        else:
            raise


def get_base_dir():
    """KOS_BASE_DIR, if set. It overrides the platform specific way to determine the dirs."""
    return os.environ.get("KOS_BASE_DIR")


def join_base_dir(*paths):
    base_dir = get_base_dir()
    return None if base_dir is None else str(Path(base_dir).joinpath(*paths))


def get_config_dir(*, create=True):
    """Determine where to look for configuration, like logging.conf"""
    config_dir = os.environ.get(
        "KOS_CONFIG_DIR", join_base_dir(".config", "kos") or platformdirs.user_config_dir("kos")
    )
    if create:
        ensure_dir(config_dir)
    return config_dir


def exists(path):
    """
    Check whether something exists at *path*.

    Only "no such file or directory" means it does not exist. If stat fails for
    other reasons (e.g. permission denied), there is something, we just can't look at it.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def split_dir(d):
    """Split a list of paths separated by os.pathsep or, if there is none, by commas."""
    dirs = d.split(os.pathsep)
    if len(dirs) == 1:
        dirs = dirs[0].split(",")
    return dirs


def path_ext(key):
    """
    Return the extension of the last element of the /-separated *key*, including the dot.

    Unlike os.path.splitext, a leading dot is not skipped: path_ext(".bashrc") == ".bashrc".
    """
    for i in range(len(key) - 1, -1, -1):
        if key[i] == "/":
            break
        if key[i] == ".":
            return key[i:]
    return ""


def guess_mime_type(key):
    """Guess the MIME type of object / file *key* by its extension."""
    ext = path_ext(key)
    if not mimetypes.inited:
        mimetypes.init()
    mime_type = mimetypes.types_map.get(ext) or mimetypes.types_map.get(ext.lower()) or ""
    if "/" not in mime_type:
        mime_type = DEFAULT_MIME_TYPE
    return mime_type
