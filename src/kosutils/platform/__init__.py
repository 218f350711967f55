"""
Platform-specific APIs.

Currently this is just the OS user / group directory used by the identity cache.
"""

from ..platformflags import is_posix

if is_posix:
    from .posix_ug import UserGroupDirectory
else:
    from .windows_ug import UserGroupDirectory
