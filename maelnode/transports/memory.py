from __future__ import annotations
import json
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from ..transport import Transport


class MemoryTransport(Transport):
    """
    In-process transport: feeds preset lines, records what gets written.
    Lines may be given as str, bytes or dicts (encoded to compact JSON).
    """

    def __init__(self, lines: Optional[Iterable[Any]] = None):
        self._input: List[Union[str, bytes]] = [self._as_line(l) for l in (lines or [])]
        self.output: List[str] = []
        self.closed = False

    @staticmethod
    def _as_line(item: Any) -> Union[str, bytes]:
        if isinstance(item, (str, bytes)):
            return item
        return json.dumps(item, separators=(",", ":"))

    def feed(self, *lines: Any) -> None:
        self._input.extend(self._as_line(l) for l in lines)

    def lines(self) -> Iterator[Union[str, bytes]]:
        while self._input and not self.closed:
            yield self._input.pop(0)

    def write_line(self, line: str) -> None:
        self.output.append(line)

    def close(self) -> None:
        self.closed = True

    def decoded(self) -> List[Dict[str, Any]]:
        return [json.loads(l) for l in self.output]
