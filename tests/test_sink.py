import io
import json
import threading

import pytest

from maelnode import Envelope, OutputSink, StreamTransport
from maelnode.transport import Transport


class SlowTransport(Transport):
    """Writes one character at a time so unguarded writers would interleave."""

    def __init__(self):
        self.buf = []

    def lines(self):
        return iter(())

    def write_line(self, line):
        for ch in line + "\n":
            self.buf.append(ch)

    def close(self):
        pass


def test_send_writes_one_line():
    out = io.StringIO()
    sink = OutputSink(StreamTransport(stdin=io.StringIO(), stdout=out))
    sink.send(Envelope(src="n1", dest="c1", body={"type": "t", "msg_id": 1}))
    assert out.getvalue() == '{"src":"n1","dest":"c1","body":{"type":"t","msg_id":1}}\n'


def test_concurrent_sends_never_interleave():
    transport = SlowTransport()
    sink = OutputSink(transport)

    def worker(n):
        for i in range(50):
            sink.send({"src": "n1", "dest": "c1", "body": {"type": "t", "w": n, "i": i, "pad": "x" * 40}})

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = "".join(transport.buf).splitlines()
    assert len(lines) == 6 * 50
    seen = {(m["body"]["w"], m["body"]["i"]) for m in map(json.loads, lines)}
    assert len(seen) == 6 * 50


class IndentedCodec:
    name = "indented"

    def dumps(self, obj):
        return json.dumps(obj, indent=2)

    def loads(self, data):
        return json.loads(data)


def test_multi_line_codec_output_is_refused():
    transport = SlowTransport()
    sink = OutputSink(transport, IndentedCodec())

    with pytest.raises(ValueError, match="multi-line"):
        sink.send({"src": "n1", "dest": "c1", "body": {"type": "t"}})

    assert transport.buf == []
