import grp
import pwd

from ..helpers.errors import IdentityNotFound


class UserGroupDirectory:
    """the OS user / group database (passwd, group, NSS), uncached"""

    def user_name(self, uid):
        try:
            return pwd.getpwuid(uid).pw_name
        except (KeyError, OverflowError):
            raise IdentityNotFound("user id", uid) from None

    def group_name(self, gid):
        try:
            return grp.getgrgid(gid).gr_name
        except (KeyError, OverflowError):
            raise IdentityNotFound("group id", gid) from None

    def user_id(self, name):
        if not name:
            raise IdentityNotFound("user name", name)
        try:
            return pwd.getpwnam(name).pw_uid
        except (KeyError, ValueError):
            # ValueError: name contains a NUL character
            raise IdentityNotFound("user name", name) from None

    def group_id(self, name):
        if not name:
            raise IdentityNotFound("group name", name)
        try:
            return grp.getgrnam(name).gr_gid
        except (KeyError, ValueError):
            raise IdentityNotFound("group name", name) from None
