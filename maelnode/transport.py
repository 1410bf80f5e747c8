from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterator, Union


class Transport(ABC):
    """Duplex line stream: one JSON message per line in each direction."""

    @abstractmethod
    def lines(self) -> Iterator[Union[str, bytes]]:
        """Yield raw incoming lines (text or undecoded bytes) until end-of-stream."""
        raise NotImplementedError

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one complete line; the transport appends the newline."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError
