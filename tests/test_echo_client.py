import io
import socket
import socketserver
import threading

import pytest

from tinkerkit.echo_client import main, run_client


class _EchoHandler(socketserver.BaseRequestHandler):
    def handle(self):
        while True:
            data = self.request.recv(4096)
            if not data:
                break
            self.request.sendall(data)


@pytest.fixture
def echo_address():
    server = socketserver.ThreadingTCPServer(("127.0.0.1", 0), _EchoHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server.server_address
    server.shutdown()
    server.server_close()


def unused_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_replies_are_returned(echo_address):
    host, port = echo_address
    output = io.StringIO()
    assert run_client(host, port, ["hi", "there"], output) == ["hi", "there"]


def test_replies_are_printed(echo_address):
    host, port = echo_address
    output = io.StringIO()
    run_client(host, port, ["hi"], output)
    assert "SERVER> hi\n" in output.getvalue()
    assert output.getvalue().startswith("> ")


def test_empty_line_ends_session(echo_address):
    host, port = echo_address
    assert run_client(host, port, ["a", "", "b"], io.StringIO()) == ["a"]


def test_no_lines_sends_nothing(echo_address):
    host, port = echo_address
    assert run_client(host, port, [], io.StringIO()) == []


def test_unreachable_server_raises():
    with pytest.raises(ConnectionError):
        run_client("127.0.0.1", unused_port(), ["x"], io.StringIO())


def test_main_reports_unreachable_server(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert main(["--port", str(unused_port())]) == 1
    assert "Can't connect to server." in capsys.readouterr().err


def test_main_relays_stdin(echo_address, monkeypatch, capsys):
    host, port = echo_address
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n\n"))
    assert main(["--host", host, "--port", str(port)]) == 0
    assert "SERVER> abc" in capsys.readouterr().out