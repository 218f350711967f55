
from ..helpers.errors import IdentityNotFound


class UserGroupDirectory:
    # Windows has no numeric uid / gid database, so nothing can be resolved here.
    # Callers (IdentityCache) fall back to the numeric representation.

    def user_name(self, uid):
        raise IdentityNotFound("user id", uid)

    def group_name(self, gid):
        raise IdentityNotFound("group id", gid)

    def user_id(self, name):
        raise IdentityNotFound("user name", name)

    def group_id(self, name):
        raise IdentityNotFound("group name", name)
