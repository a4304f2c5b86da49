"""Interactive client for the TCP echo server.

Each line typed is sent to the server as a NUL-terminated string and the
server's reply is printed. An empty line ends the session.
"""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Iterable, Sequence, TextIO

__all__ = ["run_client", "main"]

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 54000
_BUFFER_SIZE = 4096


def run_client(
    host: str,
    port: int,
    lines: Iterable[str],
    output: TextIO | None = None,
) -> list[str]:
    """Send each line to the server and print its replies to ``output``.

    Stops at the first empty line, at the end of ``lines`` or when the server
    closes the connection. Returns the replies received. Raises
    ConnectionError if the server cannot be reached.
    """
    stream = output if output is not None else sys.stdout
    try:
        sock = socket.create_connection((host, port))
    except OSError as error:
        raise ConnectionError(f"Can't connect to server. ({error})") from error

    replies: list[str] = []
    source = iter(lines)
    with sock:
        while True:
            stream.write("> ")
            stream.flush()
            line = next(source, "")
            if not line:
                break
            sock.sendall(line.encode("utf-8") + b"\0")
            data = sock.recv(_BUFFER_SIZE)
            if not data:
                break
            reply = data.rstrip(b"\0").decode("utf-8", errors="replace")
            replies.append(reply)
            stream.write(f"SERVER> {reply}\n")
    return replies


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to an echo server and relay lines from standard input."""
    parser = argparse.ArgumentParser(
        prog="tinkerkit-echo-client", description="Talk to a TCP echo server."
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    args = parser.parse_args(argv)

    lines = (line.rstrip("\r\n") for line in sys.stdin)
    try:
        run_client(args.host, args.port, lines)
    except ConnectionError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())