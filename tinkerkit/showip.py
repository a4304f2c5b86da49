"""Show the IP addresses a host name resolves to."""

from __future__ import annotations

import socket
import sys
from typing import Sequence

__all__ = ["resolve_addresses", "main"]


def resolve_addresses(hostname: str) -> list[tuple[str, str]]:
    """Return ``(version, address)`` pairs for ``hostname``.

    ``version`` is ``"IPv4"`` or ``"IPv6"``. Raises socket.gaierror when the
    name cannot be resolved.
    """
    results = socket.getaddrinfo(
        hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM
    )
    addresses = []
    for family, _type, _proto, _canonname, sockaddr in results:
        version = "IPv4" if family == socket.AF_INET else "IPv6"
        addresses.append((version, str(sockaddr[0])))
    return addresses


def main(argv: Sequence[str] | None = None) -> int:
    """Print the addresses of the host named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: showip hostname", file=sys.stderr)
        return 1
    hostname = args[0]
    try:
        addresses = resolve_addresses(hostname)
    except socket.gaierror as error:
        print(f"getaddrinfo: {error.strerror or error}", file=sys.stderr)
        return 2

    print(f"IP addresses for {hostname}:\n")
    for version, address in addresses:
        print(f"  {version}: {address}")
    return 0


if __name__ == "__main__":
    sys.exit(main())