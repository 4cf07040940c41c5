# wordhoard\services\lexicon_store.py
from typing import Dict, List, Tuple

import structlog

from wordhoard.core.domain.models import Word, canonicalize
from wordhoard.core.ports.shard_storage import IShardStorage
from wordhoard.services.shard import Shard

logger = structlog.get_logger()

SHARD_KEY_LENGTH = 2


def shard_key(text: str) -> str:
    """
    The shard a word lives in: the first two characters of its canonical text
    (the whole text if shorter). Pure, so a Word never changes shard.
    """
    return canonicalize(text)[:SHARD_KEY_LENGTH]


class LexiconStore:
    """
    Routes words to their Shard and keeps the live Shard objects.

    One instance per process, built by the DI container at startup and handed to
    every use case. Shards are created on first access; their storage is
    materialized by the first write (an unwritten shard reads as empty).
    """

    def __init__(self, storage: IShardStorage, lock_timeout: float = 5.0):
        self.storage = storage
        self._lock_timeout = lock_timeout
        self._shards: Dict[str, Shard] = {}

    def shard_for(self, text: str) -> Shard:
        key = shard_key(text)
        shard = self._shards.get(key)
        if shard is None:
            shard = self._shards[key] = Shard(key, self.storage, self._lock_timeout)
            logger.debug("shard_opened", shard=key)
        return shard

    async def snapshot(self, text: str) -> Tuple[Word, ...]:
        """
        Words of the shard `text` belongs to, for read-only callers.

        A shard is only kept open if storage holds words under its key, so
        lookups of absent words do not grow `_shards`.
        """
        key = shard_key(text)
        shard = self._shards.get(key)
        if shard is not None:
            return await shard.words()

        candidate = Shard(key, self.storage, self._lock_timeout)
        words = await candidate.words()
        if not words:
            return words
        # A writer may have opened the shard while we were loading.
        return await self._shards.setdefault(key, candidate).words()

    async def shard_keys(self) -> List[str]:
        """Keys of every shard that has persisted words."""
        return sorted(await self.storage.keys())

    async def health_check(self) -> bool:
        return await self.storage.health_check()
