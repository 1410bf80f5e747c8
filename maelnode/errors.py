from __future__ import annotations
from typing import Optional


class NodeError(Exception):
    """Base for every per-message error the runtime reports."""


class DecodeError(NodeError):
    """Line is not valid JSON, or the envelope/body has the wrong shape."""


class ProtocolError(NodeError):
    """Body decoded fine but carries no usable 'type'."""


class UnroutableMessage(NodeError):
    def __init__(self, msg_type: str):
        super().__init__(f"No handler registered for message type: {msg_type}")
        self.msg_type = msg_type


class HandlerFailure(NodeError):
    def __init__(self, msg_type: str, cause: BaseException, msg_id: Optional[int] = None):
        super().__init__(f"Handler error for '{msg_type}': {cause!r}")
        self.msg_type = msg_type
        self.cause = cause
        self.msg_id = msg_id
