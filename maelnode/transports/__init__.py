from .stdio import StreamTransport
from .memory import MemoryTransport

__all__ = ["StreamTransport", "MemoryTransport"]
