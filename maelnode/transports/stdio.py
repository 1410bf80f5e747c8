from __future__ import annotations
import io, sys
from typing import IO, Iterator, Optional, Union

from ..transport import Transport


class StreamTransport(Transport):
    """Transport over streams; stdin/stdout unless told otherwise.

    When a stream has a binary layer underneath (sys.stdin, any
    TextIOWrapper) lines are read and written as raw UTF-8 bytes, so a line
    with invalid bytes reaches decode_line and is reported there instead of
    breaking the read loop. Plain text streams (io.StringIO) are used as-is.
    Writes flush after every line so the harness sees each message at once.
    """

    def __init__(self, stdin: Optional[IO] = None, stdout: Optional[IO] = None):
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout
        self.stdin = getattr(stdin, "buffer", stdin)
        self.stdout = getattr(stdout, "buffer", stdout)
        self._binary_out = not isinstance(self.stdout, io.TextIOBase)
        self._closed = False

    def lines(self) -> Iterator[Union[str, bytes]]:
        # readline() rather than iteration: file iteration may read ahead and
        # hold lines back on a pipe
        while not self._closed:
            line = self.stdin.readline()
            if not line:
                return
            if isinstance(line, bytes):
                yield line.rstrip(b"\r\n")
            else:
                yield line.rstrip("\r\n")

    def write_line(self, line: str) -> None:
        if self._binary_out:
            self.stdout.write((line + "\n").encode("utf-8"))
        else:
            self.stdout.write(line + "\n")
        self.stdout.flush()

    def close(self) -> None:
        self._closed = True
