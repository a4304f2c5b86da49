"""Threaded TCP echo server.

Every client gets its own thread that sends back whatever it receives. The
command-line server stops when ``shutdown`` is typed on standard input.
"""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from typing import Sequence, TextIO

__all__ = ["EchoServer", "main"]

DEFAULT_PORT = 54000
_BUFFER_SIZE = 4096
_ACCEPT_POLL_SECONDS = 0.2


class EchoServer:
    """Listens on a TCP port and echoes data back to each client."""

    def __init__(
        self,
        host: str = "0.0.0.0",
        port: int = DEFAULT_PORT,
        output: TextIO | None = None,
    ) -> None:
        self._output = output
        self._print_lock = threading.Lock()
        self._stopped = threading.Event()
        self._clients: set[socket.socket] = set()
        self._clients_lock = threading.Lock()
        self._threads: list[threading.Thread] = []
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._listener.bind((host, port))
            self._listener.listen(socket.SOMAXCONN)
            self._listener.settimeout(_ACCEPT_POLL_SECONDS)
        except OSError:
            self._listener.close()
            raise

    @property
    def address(self) -> tuple[str, int]:
        """The host and port the server is bound to."""
        host, port = self._listener.getsockname()[:2]
        return host, port

    def _say(self, message: str) -> None:
        stream = self._output if self._output is not None else sys.stdout
        with self._print_lock:
            print(message, file=stream, flush=True)

    def _describe_peer(self, address: tuple) -> None:
        try:
            host, service = socket.getnameinfo(address, 0)
            self._say(f"{host} connected on port {service}")
        except OSError:
            self._say(f"{address[0]} connected on port {address[1]}")
        self._say(f"Client port: {address[1]}")

    def _handle_client(self, conn: socket.socket, address: tuple) -> None:
        try:
            self._describe_peer(address)
            while not self._stopped.is_set():
                try:
                    data = conn.recv(_BUFFER_SIZE)
                except OSError:
                    if not self._stopped.is_set():
                        self._say("Error in recv(). Quitting")
                    break
                if not data:
                    self._say("Client disconnected")
                    break
                self._say(data.rstrip(b"\0").decode("utf-8", errors="replace"))
                try:
                    conn.sendall(data)
                except OSError:
                    self._say("Error in send(). Quitting")
                    break
        finally:
            with self._clients_lock:
                self._clients.discard(conn)
            conn.close()

    def serve_forever(self) -> None:
        """Accept clients until :meth:`shutdown` is called, then wait for them."""
        try:
            while not self._stopped.is_set():
                try:
                    conn, address = self._listener.accept()
                except socket.timeout:
                    continue
                except OSError:
                    if self._stopped.is_set():
                        break
                    raise
                conn.settimeout(None)
                self._say("New connection attempting to be established.")
                with self._clients_lock:
                    if self._stopped.is_set():
                        conn.close()
                        break
                    self._clients.add(conn)
                thread = threading.Thread(
                    target=self._handle_client, args=(conn, address), daemon=True
                )
                self._threads.append(thread)
                thread.start()
        finally:
            for thread in self._threads:
                thread.join()
            self._listener.close()

    def shutdown(self) -> None:
        """Stop accepting clients and disconnect the ones still connected."""
        self._stopped.set()
        with self._clients_lock:
            clients = list(self._clients)
        for conn in clients:
            try:
                conn.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass

    def __enter__(self) -> EchoServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
        self._listener.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the echo server until ``shutdown`` is read from standard input."""
    parser = argparse.ArgumentParser(
        prog="tinkerkit-echo-server", description="Run a TCP echo server."
    )
    parser.add_argument("--host", default="0.0.0.0", help="address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to bind")
    args = parser.parse_args(argv)

    try:
        server = EchoServer(args.host, args.port)
    except OSError as error:
        print(f"Can't create listening socket! Quitting ({error})", file=sys.stderr)
        return 1

    host, port = server.address
    print(f"Listening on {host}:{port}", flush=True)
    worker = threading.Thread(target=server.serve_forever)
    worker.start()
    try:
        for command in sys.stdin:
            if command.strip().lower() == "shutdown":
                break
    finally:
        server.shutdown()
        worker.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())