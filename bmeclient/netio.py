"""Reliable byte and line I/O over stream sockets."""

from __future__ import annotations

import socket

MAXLINE = 1024


class NetIOError(OSError):
    """Raised when a socket read or write fails."""


def readn(sock: socket.socket, n: int) -> bytes:
    """Read up to ``n`` bytes, stopping early only at end of stream."""
    chunks: list[bytes] = []
    remaining = n
    while remaining > 0:
        try:
            chunk = sock.recv(remaining)
        except OSError as exc:
            raise NetIOError(f"read failed: {exc}") from exc
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def writen(sock: socket.socket, data: bytes) -> int:
    """Send all of ``data`` and return the number of bytes sent."""
    view = memoryview(data)
    total = 0
    while total < len(view):
        try:
            sent = sock.send(view[total:])
        except OSError as exc:
            raise NetIOError(f"write failed: {exc}") from exc
        if sent <= 0:
            raise NetIOError("write failed: connection closed")
        total += sent
    return total


class LineReader:
    """Buffered reader that returns newline-terminated lines from a socket."""

    def __init__(self, sock: socket.socket, bufsize: int = MAXLINE) -> None:
        self.sock = sock
        self.bufsize = bufsize
        self._buffer = bytearray()

    def _fill(self) -> bool:
        try:
            chunk = self.sock.recv(self.bufsize)
        except OSError as exc:
            raise NetIOError(f"readline failed: {exc}") from exc
        self._buffer += chunk
        return bool(chunk)

    def readline(self, maxlen: int) -> bytes:
        """Return the next line, at most ``maxlen - 1`` bytes long.

        The line keeps its trailing newline if one was read. An empty
        result means the stream ended before any byte was read.
        """
        limit = maxlen - 1
        line = bytearray()
        while len(line) < limit:
            if not self._buffer and not self._fill():
                break
            room = limit - len(line)
            newline = self._buffer.find(b"\n", 0, room)
            if newline >= 0:
                take = newline + 1
            else:
                take = min(len(self._buffer), room)
            line += self._buffer[:take]
            del self._buffer[:take]
            if newline >= 0:
                break
        return bytes(line)