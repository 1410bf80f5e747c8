from __future__ import annotations
from typing import Any, Dict, Protocol as TypingProtocol

import json

class Codec(TypingProtocol):
    name: str
    def dumps(self, obj: Any) -> str: ...
    def loads(self, data: str) -> Any: ...

class JSONCodec:
    """Compact single-line JSON. Integers stay integers; non-ASCII is kept as-is."""
    name = "json"
    def dumps(self, obj: Any) -> str:
        # json escapes control characters inside strings, so the output never holds a raw newline
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    def loads(self, data: str) -> Any:
        return json.loads(data)

class Codecs:
    _registry: Dict[str, Codec] = {"json": JSONCodec()}

    @classmethod
    def get(cls, name: str) -> 'Codec':
        if name not in cls._registry:
            raise ValueError(f"Unknown codec: {name}")
        return cls._registry[name]
