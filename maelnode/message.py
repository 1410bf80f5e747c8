from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import StrEnum

from .errors import DecodeError

_MISSING = object()


# Message types the runtime itself understands
class MsgType(StrEnum):
    INIT    = "init"
    INIT_OK = "init_ok"


@dataclass(frozen=True)
class Envelope:
    """
    One message on the wire: {"src", "dest", "body"}.
    'body' is a JSON object and always carries a 'type'.
    """
    src: str                                          # sender node or client id
    dest: str                                         # recipient id
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> Optional[str]:
        return self.body.get("type")

    @property
    def msg_id(self) -> Optional[int]:
        return self.body.get("msg_id")

    def to_dict(self) -> Dict[str, Any]:
        return {"src": self.src, "dest": self.dest, "body": self.body}

    # ---- checked body access ----
    def _absent(self, key: str, default: Any) -> Any:
        if default is _MISSING:
            raise DecodeError(f"body is missing '{key}'")
        return default

    def get_str(self, key: str, default: Any = _MISSING) -> str:
        if key not in self.body:
            return self._absent(key, default)
        value = self.body[key]
        if not isinstance(value, str):
            raise DecodeError(f"body field '{key}' must be a string, got {type(value).__name__}")
        return value

    def get_int(self, key: str, default: Any = _MISSING) -> int:
        if key not in self.body:
            return self._absent(key, default)
        value = self.body[key]
        # bool is an int subclass but never a valid integer field
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(f"body field '{key}' must be an integer, got {type(value).__name__}")
        return value

    def get_str_list(self, key: str, default: Any = _MISSING) -> List[str]:
        if key not in self.body:
            return self._absent(key, default)
        value = self.body[key]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise DecodeError(f"body field '{key}' must be a list of strings")
        return list(value)
