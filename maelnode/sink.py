from __future__ import annotations
import threading
from typing import Any, Mapping, Union

from .codecs import Codec, JSONCodec
from .message import Envelope
from .transport import Transport
from .wire import encode_line


class OutputSink:
    """Exclusive writer: each send() lands as exactly one whole line."""

    def __init__(self, transport: Transport, codec: Codec = JSONCodec()):
        self.transport = transport
        self.codec = codec
        self._write_lock = threading.Lock()

    def send(self, msg: Union[Envelope, Mapping[str, Any]]) -> str:
        # serialize before taking the lock; only the write is exclusive
        line = encode_line(msg, self.codec)
        if "\n" in line or "\r" in line:
            raise ValueError(f"codec {self.codec.name!r} produced a multi-line message")
        with self._write_lock:
            self.transport.write_line(line)
        return line
