import pytest

from ...helpers.errors import IdentityNotFound
from ...helpers.identity import IdentityCache
from .. import unused_id, user_exists, group_exists
from .platform_test import skipif_not_posix, skipif_no_passwd_db

# set module-level skips
pytestmark = [skipif_not_posix, skipif_no_passwd_db]


@pytest.fixture()
def directory():
    from ...platform.posix_ug import UserGroupDirectory

    return UserGroupDirectory()


def test_posix_user_roundtrip(directory):
    import pwd

    # the current uid might not be in the db (containers), so take any user
    entry = pwd.getpwall()[0]
    assert directory.user_name(entry.pw_uid) == pwd.getpwuid(entry.pw_uid).pw_name
    assert directory.user_id(entry.pw_name) == pwd.getpwnam(entry.pw_name).pw_uid


def test_posix_group_roundtrip(directory):
    import grp

    entry = grp.getgrall()[0]
    assert directory.group_name(entry.gr_gid) == grp.getgrgid(entry.gr_gid).gr_name
    assert directory.group_id(entry.gr_name) == grp.getgrnam(entry.gr_name).gr_gid


@pytest.mark.skipif(not user_exists("root"), reason="no root user")
def test_posix_root(directory):
    assert directory.user_name(0) == "root"
    assert directory.user_id("root") == 0


def test_posix_unknown_ids(directory):
    import grp
    import pwd

    uid = unused_id({e.pw_uid for e in pwd.getpwall()})
    gid = unused_id({e.gr_gid for e in grp.getgrall()})
    with pytest.raises(IdentityNotFound) as exc:
        directory.user_name(uid)
    assert str(exc.value) == f"user id {uid} not found"
    with pytest.raises(KeyError):
        directory.group_name(gid)
    # out of range for uid_t / gid_t
    with pytest.raises(IdentityNotFound):
        directory.user_name(2**70)
    with pytest.raises(IdentityNotFound):
        directory.group_name(2**70)


@pytest.mark.parametrize("name", ["", "no-such-user-kosutils", "nul\0byte"])
def test_posix_unknown_names(directory, name):
    with pytest.raises(IdentityNotFound):
        directory.user_id(name)
    if not group_exists(name):
        with pytest.raises(IdentityNotFound):
            directory.group_id(name)


def test_posix_identity_cache(directory):
    import pwd

    cache = IdentityCache(directory)
    uid = unused_id({e.pw_uid for e in pwd.getpwall()})
    entry = pwd.getpwall()[0]
    assert cache.uid2user(entry.pw_uid) == pwd.getpwuid(entry.pw_uid).pw_name
    assert cache.uid2user(uid) == str(uid)
    assert cache.user2uid(str(uid)) == uid
    assert cache.user2uid("no-such-user-kosutils") == -1
