from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from .message import Envelope


class MessageBuilder:
    """
    Builder that always produces a valid Envelope:
     - body carries a 'type'
     - msg_id / in_reply_to are set last, so they win over anything in the fields
    """
    def __init__(self, src: str):
        self._src = src
        self._dest: str = ""
        self._body: Dict[str, Any] = {}
        self._msg_id: Optional[int] = None
        self._in_reply_to: Optional[int] = None

    def to(self, dest: str):
        self._dest = dest
        return self

    def body(self, fields: Mapping[str, Any]):
        self._body = dict(fields)
        return self

    def msg_id(self, msg_id: int):
        self._msg_id = msg_id
        return self

    def reply_to(self, request: Envelope):
        """Reverse the request's route and correlate with its msg_id (if any)."""
        self._dest = request.src
        self._in_reply_to = request.msg_id
        return self

    def build(self) -> Envelope:
        if not self._body.get("type"):
            raise ValueError("Message body requires a 'type'.")
        body = dict(self._body)
        if self._in_reply_to is not None:
            body["in_reply_to"] = self._in_reply_to
        if self._msg_id is not None:
            body["msg_id"] = self._msg_id
        return Envelope(src=self._src, dest=self._dest, body=body)
