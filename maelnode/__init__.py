"""
Public API:
- NodeRuntime: dispatch loop, init handshake, reply/send
- Node: one-liner factory (transport, codec, handlers, concurrency, logging)
- Envelope, MsgType: wire-level message types with checked body access
- encode_line, decode_line: JSON-lines codec
- NodeIdentity, MessageIdGenerator, OutputSink, HandlerRegistry: runtime parts
- Transport, StreamTransport, MemoryTransport: line transports
- NodeError and subclasses: per-message errors reported to diagnostics
"""

# Core runtime
from .runtime import NodeRuntime, DispatchStats
from .factory import Node

# Builder & wire types
from .builder import MessageBuilder
from .message import Envelope, MsgType
from .wire import encode_line, decode_line
from .codecs import Codec, Codecs, JSONCodec

# Runtime parts
from .identity import NodeIdentity
from .ids import MessageIdGenerator
from .sink import OutputSink
from .registry import Handler, HandlerRegistry

# Transports
from .transport import Transport
from .transports import StreamTransport, MemoryTransport

# Errors & diagnostics
from .errors import NodeError, DecodeError, ProtocolError, UnroutableMessage, HandlerFailure
from .log import configure_logging

__all__ = [
    "NodeRuntime",
    "DispatchStats",
    "Node",
    "MessageBuilder",
    "Envelope",
    "MsgType",
    "encode_line",
    "decode_line",
    "Codec",
    "Codecs",
    "JSONCodec",
    "NodeIdentity",
    "MessageIdGenerator",
    "OutputSink",
    "Handler",
    "HandlerRegistry",
    "Transport",
    "StreamTransport",
    "MemoryTransport",
    "NodeError",
    "DecodeError",
    "ProtocolError",
    "UnroutableMessage",
    "HandlerFailure",
    "configure_logging",
]

__version__ = "0.1.0"
