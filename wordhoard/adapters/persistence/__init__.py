# wordhoard\adapters\persistence\__init__.py
"""
Storage adapters implementing `IShardStorage`.

- JsonShardStorage: one JSON array file per shard on local disk.
- MemoryShardStorage: process-local lists, for tests and throwaway runs.
"""

from .json_storage import JsonShardStorage
from .memory_storage import MemoryShardStorage

__all__ = ["JsonShardStorage", "MemoryShardStorage"]
