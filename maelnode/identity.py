from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple
import logging

log = logging.getLogger(__name__)


@dataclass
class NodeIdentity:
    # our own id, "" until the handshake
    node_id: str = ""
    # every node in the cluster, in the order the harness sent them
    node_ids: Tuple[str, ...] = field(default_factory=tuple)

    _handshakes: int = field(default=0, init=False, repr=False)

    @property
    def initialized(self) -> bool:
        return self._handshakes > 0

    def initialize(self, node_id: str, node_ids: Iterable[str]) -> None:
        """Set identity. A repeated handshake overwrites what the first one set."""
        if self._handshakes:
            log.warning("Repeated init: identity %r replaced by %r", self.node_id, node_id)
        self.node_id = node_id
        self.node_ids = tuple(node_ids)
        self._handshakes += 1

    def peers(self) -> List[str]:
        return [n for n in self.node_ids if n != self.node_id]
