"""
Platform flags, evaluated once at import time.

kosutils.platform picks the user / group directory implementation by these,
tests use them for their skip markers.
"""

import os
import sys

is_win32 = sys.platform.startswith("win32")

is_linux = sys.platform.startswith("linux")
is_freebsd = sys.platform.startswith("freebsd")
is_darwin = sys.platform.startswith("darwin")

# has pwd / grp (this includes cygwin and the other BSDs)
is_posix = os.name == "posix"
