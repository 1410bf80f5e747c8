from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Iterator, Optional

from .message import Envelope, MsgType

Handler = Callable[[Envelope], Any]

log = logging.getLogger(__name__)


class HandlerRegistry:
    """message type -> handler. Filled before run(), only read afterwards."""

    def __init__(self):
        self._handlers: Dict[str, Handler] = {}

    def register(self, msg_type: str, handler: Handler) -> None:
        if not msg_type:
            raise ValueError("message type must be a non-empty string")
        if not callable(handler):
            raise TypeError(f"handler for '{msg_type}' is not callable")
        if msg_type == MsgType.INIT:
            log.warning("Handler for reserved type 'init' will never be called")
        self._handlers[msg_type] = handler

    def get(self, msg_type: str) -> Optional[Handler]:
        return self._handlers.get(msg_type)

    def __contains__(self, msg_type: str) -> bool:
        return msg_type in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
