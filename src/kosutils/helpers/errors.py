class ErrorBase(Exception):
    """ErrorBase: {}"""
    # Error base class

    def __init__(self, *args):
        super().__init__(*args)
        self.args = args

    def get_message(self):
        return type(self).__doc__.format(*self.args)

    __str__ = get_message


class Error(ErrorBase):
    """Error: {}"""


class IdentityNotFound(Error, KeyError):
    """{} {!r} not found"""
    # Raised by the platform user/group directory. The IdentityCache never lets it escape.

    def __init__(self, kind, key):
        super().__init__(kind, key)
        self.kind = kind
        self.key = key


class InvalidAddress(Error, ValueError):
    """invalid address {!r}: {}"""


class TimeoutExpired(Error, TimeoutError):
    """timeout after {}"""
