# wordhoard\adapters\persistence\memory_storage.py
import copy
from typing import Any, Dict, List

from wordhoard.core.domain.exceptions import StorageFault
from wordhoard.core.ports.shard_storage import IShardStorage


class MemoryShardStorage(IShardStorage):
    """
    In-process shard storage. Records are deep-copied on the way in and out so
    callers can never alias what is stored.
    """

    def __init__(self) -> None:
        self._shards: Dict[str, List[Dict[str, Any]]] = {}

    async def load(self, key: str) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._shards.get(key, []))

    async def append(self, key: str, record: Dict[str, Any]) -> None:
        self._shards.setdefault(key, []).append(copy.deepcopy(record))

    async def replace(self, key: str, index: int, record: Dict[str, Any]) -> None:
        records = self._shards.get(key, [])
        if not 0 <= index < len(records):
            raise StorageFault(f"shard '{key}' has no record at position {index}")
        records[index] = copy.deepcopy(record)

    async def keys(self) -> List[str]:
        return [key for key, records in self._shards.items() if records]

    async def health_check(self) -> bool:
        return True
