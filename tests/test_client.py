import io
import socket
import threading
from unittest import mock

import pytest

from bmeclient.client import (
    is_waiting_message,
    main,
    resolve_ipv4,
    run_client,
)
from bmeclient.netio import MAXLINE, NetIOError


def _serve_once(payloads):
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]

    def handler():
        conn, _ = server.accept()
        with conn:
            for payload in payloads:
                conn.sendall(payload)
        server.close()

    thread = threading.Thread(target=handler, daemon=True)
    thread.start()
    return port, thread


def test_resolve_ipv4_literal():
    assert resolve_ipv4("127.0.0.1") == "127.0.0.1"


def test_resolve_ipv4_failure_raises():
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("boom")):
        with pytest.raises(NetIOError):
            resolve_ipv4("unknown")


def test_is_waiting_message():
    assert is_waiting_message(b"Waiting in queue\n")
    assert is_waiting_message(b"Waiting in queue")
    assert not is_waiting_message(b"Waiting in")
    assert not is_waiting_message(b"T=21.5 H=40\n")


def test_run_client_success():
    port, thread = _serve_once([b"T=21.5 H=40\n"])
    out = io.StringIO()
    pauses = []
    replies = run_client("127.0.0.1", port, out, pauses.append)
    thread.join(5)
    assert replies == 1
    assert out.getvalue() == "SERVER: T=21.5 H=40\nCLIENT: success!\n\r"
    assert pauses == []


def test_run_client_waiting_then_success():
    waiting = b"Waiting in queue\n".ljust(MAXLINE, b"\0")
    port, thread = _serve_once([waiting, b"data\n"])
    out = io.StringIO()
    pauses = []
    replies = run_client("127.0.0.1", port, out, pauses.append)
    thread.join(5)
    assert replies == 2
    assert out.getvalue() == (
        "SERVER: Waiting in queue\nCLIENT: next try...\n\r"
        "SERVER: data\nCLIENT: success!\n\r"
    )
    assert pauses == [1]


def test_run_client_no_data():
    port, thread = _serve_once([])
    out = io.StringIO()
    assert run_client("127.0.0.1", port, out, lambda _: None) == 0
    thread.join(5)
    assert out.getvalue() == ""


def test_run_client_connection_refused():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(NetIOError):
        run_client("127.0.0.1", port, io.StringIO(), lambda _: None)


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert "No server IP address entered" in capsys.readouterr().err


def test_main_rejects_extra_arguments():
    assert main(["127.0.0.1", "extra"]) == 1


def test_main_reports_resolution_error(capsys):
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("boom")):
        assert main(["unknown"]) == 1
    assert "ERROR" in capsys.readouterr().err