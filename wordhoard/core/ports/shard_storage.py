# wordhoard\core\ports\shard_storage.py
from typing import Any, Dict, List, Protocol


class IShardStorage(Protocol):
    """
    Port for the persistent medium behind the lexicon store.

    A key-addressable collection of ordered record lists, one list per shard
    key. Records are plain JSON-compatible dicts (Word documents).
    Implementations raise `StorageFault` for any read or write failure.
    """

    async def load(self, key: str) -> List[Dict[str, Any]]:
        """
        Returns every record stored under `key`, in insertion order.
        A key that was never written reads as an empty list.
        """
        ...

    async def append(self, key: str, record: Dict[str, Any]) -> None:
        """Durably adds `record` at the end of the list for `key`."""
        ...

    async def replace(self, key: str, index: int, record: Dict[str, Any]) -> None:
        """Durably overwrites the record at position `index` of `key`."""
        ...

    async def keys(self) -> List[str]:
        """Lists the keys that currently hold persisted records."""
        ...

    async def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
