# in-band "no such user / group" result of the name -> id lookups
UNKNOWN_ID = -1

# used by guess_mime_type() when the registry does not know an extension
DEFAULT_MIME_TYPE = "application/octet-stream"

# replaces the password part of URIs before they get logged or displayed
PASSWORD_MASK = "****"
