
from __future__ import annotations
import logging, threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from .builder import MessageBuilder
from .codecs import Codec, JSONCodec
from .errors import DecodeError, HandlerFailure, NodeError, ProtocolError, UnroutableMessage
from .identity import NodeIdentity
from .ids import MessageIdGenerator
from .message import Envelope, MsgType
from .registry import Handler, HandlerRegistry
from .sink import OutputSink
from .transport import Transport
from .wire import decode_line

log = logging.getLogger(__name__)


@dataclass
class DispatchStats:
    lines: int = 0
    dispatched: int = 0
    decode_errors: int = 0
    protocol_errors: int = 0
    unroutable: int = 0
    handler_failures: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def count(self, name: str) -> None:
        # handler failures are counted from worker threads
        with self._lock:
            setattr(self, name, getattr(self, name) + 1)

    @property
    def errors(self) -> int:
        return self.decode_errors + self.protocol_errors + self.unroutable + self.handler_failures


_STAT_FOR_ERROR = {
    DecodeError: "decode_errors",
    ProtocolError: "protocol_errors",
    UnroutableMessage: "unroutable",
    HandlerFailure: "handler_failures",
}


class NodeRuntime:
    """
    One node: reads lines from the transport, answers the init handshake
    itself and hands every other message to the handler registered for its
    type. No per-message error ever stops the loop; end-of-stream does.

    concurrent=False runs each handler before the next line is read;
    concurrent=True hands handlers to a thread pool and keeps reading.
    """

    def __init__(self, transport: Transport, *, codec: Codec = JSONCodec(),
                 concurrent: bool = False, max_workers: Optional[int] = None):
        self.transport = transport
        self.codec = codec
        self.identity = NodeIdentity()
        self.handlers = HandlerRegistry()
        self.ids = MessageIdGenerator()
        self.sink = OutputSink(transport, codec)
        self.concurrent = concurrent
        self.max_workers = max_workers
        self.stats = DispatchStats()
        self.running = False
        # first non-Exception failure raised on a worker thread, re-raised by run()
        self._fatal: Optional[BaseException] = None

    @property
    def node_id(self) -> str:
        return self.identity.node_id

    @property
    def node_ids(self) -> List[str]:
        return list(self.identity.node_ids)

    def on(self, msg_type: str, handler: Handler) -> None:
        self.handlers.register(msg_type, handler)

    handle = on

    # ---- API ----
    def reply(self, request: Envelope, body: Mapping[str, Any]) -> Envelope:
        """Answer `request`: in_reply_to <- its msg_id, fresh msg_id, route reversed."""
        resp = (MessageBuilder(self.node_id)
                .body(body)
                .reply_to(request)
                .msg_id(self.ids.next())
                .build())
        self.sink.send(resp)
        return resp

    def send(self, dest: str, body: Mapping[str, Any]) -> Envelope:
        """Send a message from this node; assigns a msg_id unless the body has one."""
        builder = MessageBuilder(self.node_id).to(dest).body(body)
        if "msg_id" not in body:
            builder.msg_id(self.ids.next())
        env = builder.build()
        self.sink.send(env)
        return env

    # ---- dispatch loop ----
    def run(self) -> DispatchStats:
        self.running = True
        self._fatal = None
        pool = ThreadPoolExecutor(max_workers=self.max_workers,
                                  thread_name_prefix="maelnode-handler") if self.concurrent else None
        try:
            for line in self.transport.lines():
                if not self.running:
                    break
                self._dispatch_line(line, pool)
        finally:
            # in-flight handlers still get to send their replies
            if pool is not None:
                pool.shutdown(wait=True)
            self.running = False
        fatal, self._fatal = self._fatal, None
        if fatal is not None:
            raise fatal
        log.debug("Input closed after %d lines", self.stats.lines)
        return self.stats

    def stop(self) -> None:
        self.running = False
        self.transport.close()

    def _dispatch_line(self, line: Union[str, bytes], pool: Optional[ThreadPoolExecutor]) -> None:
        if not line or line.isspace():
            return
        self.stats.count("lines")

        try:
            env = decode_line(line, self.codec)
        except DecodeError as ex:
            self._report(ex)
            return

        msg_type = env.type
        if not isinstance(msg_type, str) or not msg_type:
            self._report(ProtocolError("Message missing 'type' field" if msg_type is None
                                       else "Message 'type' field is empty or not a string"))
            return

        # init is always ours, whatever the registry holds
        if msg_type == MsgType.INIT:
            self._handle_init(env)
            return

        handler = self.handlers.get(msg_type)
        if handler is None:
            self._report(UnroutableMessage(msg_type))
            return

        self.stats.count("dispatched")
        if pool is not None:
            pool.submit(self._invoke, handler, env).add_done_callback(self._collect)
        else:
            self._invoke(handler, env)

    def _invoke(self, handler: Handler, env: Envelope) -> None:
        try:
            handler(env)
        except Exception as ex:
            self._report(HandlerFailure(env.type, ex, env.msg_id), exc_info=ex)

    def _collect(self, future: Future) -> None:
        # _invoke already handles Exception; whatever reaches here would have
        # propagated out of run() in sequential mode
        exc = future.exception()
        if exc is None:
            return
        log.critical("Handler thread died: %r", exc, exc_info=exc)
        if self._fatal is None:
            self._fatal = exc
        self.running = False

    def _handle_init(self, env: Envelope) -> None:
        try:
            node_id = env.get_str("node_id")
            node_ids = env.get_str_list("node_ids")
        except DecodeError as ex:
            self._report(ex)
            return

        self.identity.initialize(node_id, node_ids)
        log.info("Node %s initialized (%d nodes)", node_id, len(node_ids))
        self.stats.count("dispatched")
        self.reply(env, {"type": MsgType.INIT_OK.value})

    def _report(self, err: NodeError, exc_info: Optional[BaseException] = None) -> None:
        self.stats.count(_STAT_FOR_ERROR[type(err)])
        if exc_info is not None:
            log.error("%s", err, exc_info=exc_info)
        else:
            log.warning("%s", err)
