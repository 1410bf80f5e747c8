import logging
import sys

from maelnode import Node, Envelope, configure_logging

log = logging.getLogger("maelnode.examples.echo")


def build_node(**kwargs):
    node = Node(**kwargs)

    def on_echo(msg: Envelope):
        # Echo every field back, only the type changes
        body = dict(msg.body)
        body["type"] = "echo_ok"
        node.reply(msg, body)

    node.on("echo", on_echo)
    return node

def main():
    configure_logging()
    node = build_node()
    try:
        node.run()
    except Exception:
        log.exception("Echo node failed")
        sys.exit(1)

if __name__ == "__main__":
    main()
