import socket

from .errors import InvalidAddress


def split_host_port(address):
    """
    Split "host:port", "[ipv6]:port" or ":port" into (host, port).

    Raise InvalidAddress for anything else, like a missing port or an unbracketed IPv6 address.
    """
    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise InvalidAddress(address, "missing ']' in address")
        host, rest = address[1:end], address[end + 1 :]
        if not rest.startswith(":"):
            raise InvalidAddress(address, "missing port in address")
        port = rest[1:]
    else:
        host, sep, port = address.rpartition(":")
        if not sep:
            raise InvalidAddress(address, "missing port in address")
        if ":" in host:
            raise InvalidAddress(address, "too many colons in address")
    if "[" in port or "]" in port:
        raise InvalidAddress(address, "unexpected bracket in address")
    return host, port


def get_local_ip(address):
    """
    Return the local ip address used to reach the remote *address* ("host:port").

    This "connects" an UDP socket, which just selects the route, no packets are sent.
    Name resolution and socket errors (OSError) are not handled here.
    """
    host, port = split_host_port(address)
    family, type_, proto, _, sockaddr = socket.getaddrinfo(host or None, port, 0, socket.SOCK_DGRAM)[0]
    with socket.socket(family, type_, proto) as sock:
        sock.connect(sockaddr)
        return sock.getsockname()[0]
