
from __future__ import annotations
from typing import Any, Mapping, Optional, Union

from .codecs import Codec, Codecs
from .log import configure_logging
from .registry import Handler
from .runtime import NodeRuntime
from .transport import Transport

def Node(*,
         transport: Union[str, Transport] = "stdio",
         codec: Union[str, Codec] = "json",
         handlers: Optional[Mapping[str, Handler]] = None,
         concurrent: bool = False,
         max_workers: Optional[int] = None,
         log_level: Union[str, int, None] = None,
         **transport_kwargs: Any) -> NodeRuntime:
    """
    One-liner factory:
      Node(handlers={"echo": on_echo})
      Node(transport="memory", lines=[...], concurrent=True)

    - transport: "stdio" | "memory" | Transport instance
    - codec: "json" | Codec instance
    - handlers: dict type->handler, registered in order
    - concurrent: run handlers on a thread pool instead of inline
    - log_level: when given, install the stderr diagnostics handler at this level
    - **transport_kwargs: passed to transport constructor (stdin=, stdout=, lines=)
    """
    # logging is the host's call unless a level is asked for
    if log_level is not None:
        configure_logging(log_level)

    # Resolve codec
    if isinstance(codec, str):
        codec_obj = Codecs.get(codec)
    else:
        codec_obj = codec

    # Resolve transport
    if isinstance(transport, str):
        tlabel = transport.lower()
        if tlabel == "stdio":
            from .transports.stdio import StreamTransport
            t = StreamTransport(**transport_kwargs)
        elif tlabel == "memory":
            from .transports.memory import MemoryTransport
            t = MemoryTransport(**transport_kwargs)
        else:
            raise ValueError(f"Unknown transport label: {transport}")
    else:
        t = transport

    node = NodeRuntime(t, codec=codec_obj, concurrent=concurrent, max_workers=max_workers)

    for msg_type, handler in (handlers or {}).items():
        node.on(msg_type, handler)

    return node
