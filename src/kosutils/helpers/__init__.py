"""
This package contains various small helper/utility functions.

The submodules are imported here, so everything is also available as kosutils.helpers.<name>.
"""

from .errors import *  # NOQA
from .fs import *  # NOQA
from .identity import IdentityCache, default_cache, uid2user, gid2group, user2uid, group2gid  # NOQA
from .misc import *  # NOQA
from .net import *  # NOQA
from .parseformat import *  # NOQA
