"""Client that polls the sensor server until it is served."""

from __future__ import annotations

import socket
import sys
import time
from typing import Callable, TextIO

from bmeclient.netio import MAXLINE, NetIOError, readn

PORT = 9999
WAITING_MESSAGE = b"Waiting in queue"


def resolve_ipv4(host: str) -> str:
    """Resolve ``host`` to a dotted IPv4 address."""
    try:
        infos = socket.getaddrinfo(host, None, socket.AF_INET, socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as exc:
        raise NetIOError(f"cannot resolve {host!r}: {exc}") from exc
    if not infos:
        raise NetIOError(f"cannot resolve {host!r}")
    return infos[0][4][0]


def is_waiting_message(data: bytes) -> bool:
    """Tell whether the server reply says the client is still queued."""
    return data[: len(WAITING_MESSAGE)] == WAITING_MESSAGE


def run_client(
    host: str,
    port: int = PORT,
    out: TextIO | None = None,
    pause: Callable[[float], None] = time.sleep,
) -> int:
    """Connect to the server and report each reply until it closes.

    Returns the number of replies received.
    """
    out = sys.stdout if out is None else out
    address = resolve_ipv4(host)
    try:
        sock = socket.create_connection((address, port))
    except OSError as exc:
        raise NetIOError(f"connect failed: {exc}") from exc
    replies = 0
    with sock:
        while data := readn(sock, MAXLINE):
            replies += 1
            text = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            out.write(f"SERVER: {text}")
            if is_waiting_message(data):
                out.write("CLIENT: next try...\n\r")
                out.flush()
                pause(1)
            else:
                out.write("CLIENT: success!\n\r")
                out.flush()
    return replies


def main(argv: list[str] | None = None) -> int:
    """Run the client against the host named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("No server IP address entered", file=sys.stderr)
        return 1
    try:
        run_client(args[0])
    except NetIOError as exc:
        print(f"ERROR - {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())