# bmeclient

A small TCP client for a BME680 sensor server. It connects to the server
on port 9999 and prints everything the server sends until the server
closes the connection.

The server serves one client at a time. While another client is being
served, it answers `Waiting in queue`. The client then pauses for a second
and keeps reading until the server sends real data.

## Installation

```
pip install .
```

## Command line

```
bmeclient HOST
```

`HOST` is a host name or an IPv4 address. A name in `/etc/hosts` works too,
for example an entry that maps some address to `esp32_serv.local`:

```
bmeclient esp32_serv.local
```

The server's replies are read in chunks of up to 1024 bytes. Each chunk is
printed as `SERVER: ...` (cut at the first NUL byte), followed by
`CLIENT: next try...` if the chunk starts with `Waiting in queue`, or
`CLIENT: success!` otherwise. These client lines end in `\n\r`.

The command exits with status 0 when the server closes the connection, and
with status 1 when no host (or more than one argument) is given, or when the
host cannot be resolved, reached or read from.

## Library use

```python
import sys
import time
from bmeclient.client import resolve_ipv4, run_client

address = resolve_ipv4("esp32_serv.local")
replies = run_client(address, 9999, sys.stdout, time.sleep)
```

`run_client(host, port=9999, out=None, pause=time.sleep)` resolves `host`,
connects, writes the report lines to `out` (standard output by default),
calls `pause(1)` after each queue notice, and returns the number of chunks
received once the server closes the connection.

`resolve_ipv4(host)` returns the first IPv4 address for `host` as a dotted
string. `is_waiting_message(data)` tells whether a chunk of bytes from the
server starts with the queue notice.

The module `bmeclient.netio` has helpers for stream sockets:

- `readn(sock, n)` reads up to `n` bytes and stops early only at end of stream.
- `writen(sock, data)` sends all of `data` and returns the number of bytes sent.
- `LineReader(sock, bufsize=1024).readline(maxlen)` reads one line, newline
  included, of at most `maxlen - 1` bytes, and returns `b""` when the stream
  ends before any byte is read.

Socket errors from these helpers, and failures to resolve or connect in
`bmeclient.client`, are raised as `bmeclient.netio.NetIOError`, a subclass of
`OSError`.

## What this package does not do

It is only the client side. It contains no sensor server, does not read a
BME680 sensor, and does not parse or store the readings: the server's replies
are printed as they arrive.

## Tests

```
pip install .[test]
pytest
```