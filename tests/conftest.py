import pytest

from maelnode import MemoryTransport, NodeRuntime


def init_msg(node_id="n1", node_ids=("n1", "n2"), msg_id=1, src="c1"):
    return {"src": src, "dest": node_id,
            "body": {"type": "init", "msg_id": msg_id, "node_id": node_id, "node_ids": list(node_ids)}}


@pytest.fixture
def transport():
    return MemoryTransport()


@pytest.fixture
def node(transport):
    return NodeRuntime(transport)


@pytest.fixture
def echo_node(node):
    def on_echo(msg):
        body = dict(msg.body)
        body["type"] = "echo_ok"
        node.reply(msg, body)
    node.on("echo", on_echo)
    return node
