import os
from contextlib import contextmanager

from ..platformflags import is_posix


def fakeroot_detected():
    return "FAKEROOTKEY" in os.environ


def has_passwd_db():
    """is there a (non-empty) user database, so real uid / name lookups can be tested?"""
    if not is_posix:
        return False
    import grp
    import pwd

    try:
        return bool(pwd.getpwall()) and bool(grp.getgrall())
    except OSError:
        return False


def user_exists(username):
    if is_posix:
        import pwd

        try:
            pwd.getpwnam(username)
            return True
        except (KeyError, ValueError):
            pass
    return False


def group_exists(groupname):
    if is_posix:
        import grp

        try:
            grp.getgrnam(groupname)
            return True
        except (KeyError, ValueError):
            pass
    return False


def unused_id(db_ids, start=99999):
    """return an id >= start which is not in db_ids"""
    id_ = start
    while id_ in db_ids:
        id_ += 1
    return id_


@contextmanager
def changedir(dir):
    cwd = os.getcwd()
    os.chdir(dir)
    yield
    os.chdir(cwd)
