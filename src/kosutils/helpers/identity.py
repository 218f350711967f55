"""
uid / gid <-> user / group name resolution, memoized for the lifetime of the process.

Lookups never fail: if the OS user / group directory does not know an id,
the id itself (as a string) is used as the name, and a name that is neither
known nor numeric resolves to UNKNOWN_ID (-1). Either way, the result is
cached like a successful lookup and a warning is logged once.
"""

import re
import threading

from ..constants import *  # NOQA
from ..logger import create_logger

logger = create_logger()

# optional sign, ASCII digits only. int() alone would also accept blanks, "_" and non-ASCII digits.
numeric_id_re = re.compile(r"[+-]?[0-9]+")

# kind names as given to the on_failure observer
KIND_UID, KIND_GID, KIND_USER, KIND_GROUP = "uid", "gid", "user", "group"


def parse_numeric_id(name):
    """return int(name) if name is a plain decimal number, else None"""
    if isinstance(name, str) and numeric_id_re.fullmatch(name):
        return int(name)
    return None


class IdentityCache:
    """
    Memoizing translator between numeric OS ids and user / group names.

    *directory* is the identity service, an object with user_name(uid), group_name(gid),
    user_id(name) and group_id(name) methods which raise LookupError (or OSError) if
    there is no such entry. Default: the platform's user / group database.

    *on_failure* is an optional callable(kind, key, exc), called for every failed
    lookup (kind is one of "uid", "gid", "user", "group").

    All four mappings are guarded by one lock. A lookup holds it while querying the
    directory, so the same key is never queried twice, not even by concurrent callers.
    Failures are logged and reported to on_failure after the lock was released.
    """

    def __init__(self, directory=None, on_failure=None):
        self._directory = directory
        self.on_failure = on_failure
        self._lock = threading.Lock()
        self._uid2user = {}
        self._gid2group = {}
        self._user2uid = {}
        self._group2gid = {}

    def __len__(self):
        with self._lock:
            return len(self._uid2user) + len(self._gid2group) + len(self._user2uid) + len(self._group2gid)

    @property
    def directory(self):
        if self._directory is None:
            # late import: the platform package itself imports from helpers
            from ..platform import UserGroupDirectory

            self._directory = UserGroupDirectory()
        return self._directory

    def _failed(self, kind, key, exc):
        # called after the lock was released, so the observer may use this cache
        logger.warning("lookup %s %s: %s", kind, key, exc)
        if self.on_failure is not None:
            self.on_failure(kind, key, exc)

    def uid2user(self, uid):
        """Return the user name for *uid*, or str(uid) if the directory does not know it."""
        failure = None
        with self._lock:
            name = self._uid2user.get(uid)
            if name is None:
                try:
                    name = self.directory.user_name(uid)
                except (LookupError, OSError) as exc:
                    failure = exc
                    name = str(uid)
                self._uid2user[uid] = name
        if failure is not None:
            self._failed(KIND_UID, uid, failure)
        return name

    def gid2group(self, gid):
        """Return the group name for *gid*, or str(gid) if the directory does not know it."""
        failure = None
        with self._lock:
            name = self._gid2group.get(gid)
            if name is None:
                try:
                    name = self.directory.group_name(gid)
                except (LookupError, OSError) as exc:
                    failure = exc
                    name = str(gid)
                self._gid2group[gid] = name
        if failure is not None:
            self._failed(KIND_GID, gid, failure)
        return name

    def user2uid(self, user):
        """
        Return the uid of the user called *user*.

        If there is no such user, but *user* is a decimal number, that number is the uid.
        Otherwise, return UNKNOWN_ID.
        """
        failure = None
        with self._lock:
            uid = self._user2uid.get(user)
            if uid is None:
                try:
                    uid = self.directory.user_id(user)
                except (LookupError, OSError) as exc:
                    uid = parse_numeric_id(user)
                    if uid is None:
                        failure = exc
                        uid = UNKNOWN_ID
                self._user2uid[user] = uid
        if failure is not None:
            self._failed(KIND_USER, user, failure)
        return uid

    def group2gid(self, group):
        """
        Return the gid of the group called *group*.

        If there is no such group, but *group* is a decimal number, that number is the gid.
        Otherwise, return UNKNOWN_ID.
        """
        failure = None
        with self._lock:
            gid = self._group2gid.get(group)
            if gid is None:
                try:
                    gid = self.directory.group_id(group)
                except (LookupError, OSError) as exc:
                    gid = parse_numeric_id(group)
                    if gid is None:
                        failure = exc
                        gid = UNKNOWN_ID
                self._group2gid[group] = gid
        if failure is not None:
            self._failed(KIND_GROUP, group, failure)
        return gid


# process-wide instance, used by the module level functions below.
# code which needs its own directory or failure observer should create and pass around its own IdentityCache.
default_cache = IdentityCache()


def uid2user(uid):
    return default_cache.uid2user(uid)


def gid2group(gid):
    return default_cache.gid2group(gid)


def user2uid(user):
    return default_cache.user2uid(user)


def group2gid(group):
    return default_cache.group2gid(group)
