"""A tiny line-oriented command writer.

A command is its name followed by its arguments and CRLF. ``arg`` appends an
argument with no separator; ``kv`` appends " key value".
"""

from __future__ import annotations

from typing import Any, Protocol, Union

CRLF = b"\r\n"

Arg = Union[str, bytes, bytearray, memoryview]


class _Stream(Protocol):
    def write(self, data: bytes) -> Any: ...


def _encode(value: Arg) -> bytes:
    if isinstance(value, str):
        return value.encode()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"argument must be str or bytes, not {type(value).__name__}")


class Client:
    """Writes commands to a stream, flushing after each one."""

    def __init__(self, stream: _Stream) -> None:
        self._stream = stream

    def _write(self, data: bytes) -> None:
        self._stream.write(data)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def set(self, key: Arg, value: Arg) -> None:
        self.command("set").arg(key).arg(value).send()

    def execute(self, command: Arg, *args: Arg) -> None:
        """Write the command and its arguments back to back, then CRLF."""
        self._write(b"".join([_encode(command), *map(_encode, args), CRLF]))

    def command(self, name: Arg) -> Command:
        return Command(self, name)


class Command:
    """A command under construction; ``send`` writes it out."""

    def __init__(self, client: Client, name: Arg) -> None:
        self._client = client
        self._parts = [_encode(name)]

    def arg(self, value: Arg) -> Command:
        self._parts.append(_encode(value))
        return self

    def kv(self, key: Arg, value: Arg) -> Command:
        self._parts += [b" ", _encode(key), b" ", _encode(value)]
        return self

    def send(self) -> None:
        self._client._write(b"".join(self._parts) + CRLF)