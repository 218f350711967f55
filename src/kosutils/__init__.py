from packaging.version import parse as parse_version

__version__ = "1.0.0"

_v = parse_version(__version__)
__version_tuple__ = _v.release

# assert that all semver components are integers
# this is mainly to show errors when people repackage poorly
assert all(isinstance(v, int) for v in __version_tuple__), "Broken kosutils version metadata: %r" % __version__
