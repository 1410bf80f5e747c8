import itertools
import logging
import sys

from maelnode import Node, Envelope, configure_logging

log = logging.getLogger("maelnode.examples.unique_ids")


def build_node(**kwargs):
    """
    'generate' -> {"type": "generate_ok", "id": "<node_id>-<n>"}.
    Node ids are unique per cluster, so the pair is too.
    """
    node = Node(**kwargs)
    counter = itertools.count(1)

    def on_generate(msg: Envelope):
        unique_id = f"{node.node_id}-{next(counter)}"
        node.reply(msg, {"type": "generate_ok", "id": unique_id})

    node.on("generate", on_generate)
    return node

def main():
    configure_logging()
    node = build_node(concurrent=True)
    try:
        node.run()
    except Exception:
        log.exception("Unique-id node failed")
        sys.exit(1)

if __name__ == "__main__":
    main()
