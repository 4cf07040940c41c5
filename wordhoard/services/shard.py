# wordhoard\services\shard.py
import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Tuple

import structlog
from pydantic import ValidationError

from wordhoard.core.domain.exceptions import IndexOutOfRange, StorageFault, WordTextChanged
from wordhoard.core.domain.models import Word
from wordhoard.core.ports.lexicon_store import Predicate, UpdateFn
from wordhoard.core.ports.shard_storage import IShardStorage

logger = structlog.get_logger()


class Shard:
    """
    Ordered collection of the Words sharing one shard key.

    Reads are served from an in-memory view, loaded lazily from storage on
    first access. Writes are write-through: the new sequence is built, persisted,
    and only then becomes the current view, so a failed write leaves the shard
    exactly as it was.

    The primitives below do not lock. A caller doing read-check-write must hold
    `exclusive()` for the whole sequence:

        async with shard.exclusive():
            if await shard.find_first(lambda w: w.text == text) is None:
                await shard.append(word)
    """

    def __init__(self, key: str, storage: IShardStorage, lock_timeout: float = 5.0):
        self.key = key
        self._storage = storage
        self._lock_timeout = lock_timeout
        self._lock = asyncio.Lock()
        self._words: Optional[Tuple[Word, ...]] = None

    def __repr__(self) -> str:
        size = "?" if self._words is None else len(self._words)
        return f"Shard(key={self.key!r}, words={size})"

    # --- Concurrency ---

    @asynccontextmanager
    async def exclusive(self) -> AsyncIterator["Shard"]:
        """Holds the shard's mutex. Raises StorageFault if it cannot be taken in time."""
        try:
            await asyncio.wait_for(self._lock.acquire(), timeout=self._lock_timeout)
        except asyncio.TimeoutError:
            logger.error("shard_lock_timeout", shard=self.key, timeout=self._lock_timeout)
            raise StorageFault(f"shard '{self.key}' is busy") from None
        try:
            yield self
        finally:
            self._lock.release()

    # --- Loading ---

    async def words(self) -> Tuple[Word, ...]:
        """Snapshot of the shard's Words in insertion order."""
        if self._words is None:
            documents = await self._storage.load(self.key)
            try:
                loaded = tuple(Word.from_document(doc) for doc in documents)
            except ValidationError as e:
                logger.error("shard_decode_failed", shard=self.key, error=str(e))
                raise StorageFault(f"shard '{self.key}' holds an invalid document") from e
            # An unlocked reader may finish loading after a writer already swapped in
            # a newer view; the newer view wins.
            if self._words is None:
                self._words = loaded
                logger.debug("shard_loaded", shard=self.key, words=len(loaded))
        return self._words

    # --- Queries ---

    async def find_first(self, predicate: Predicate) -> Optional[Word]:
        for word in await self.words():
            if predicate(word):
                return word
        return None

    async def index_of(self, predicate: Predicate) -> Optional[int]:
        for i, word in enumerate(await self.words()):
            if predicate(word):
                return i
        return None

    # --- Updates ---

    async def append(self, word: Word) -> None:
        """Adds `word` at the end. No uniqueness check is made here."""
        current = await self.words()
        await self._storage.append(self.key, word.to_document())
        self._words = (*current, word)

    async def update_at(self, index: int, update_fn: UpdateFn) -> Word:
        """
        Replaces the Word at `index` with `update_fn(current)` and returns it.

        Raises:
            IndexOutOfRange: `index` is negative or past the end.
            WordTextChanged: `update_fn` returned a Word with other text.
        """
        current = await self.words()
        if not 0 <= index < len(current):
            raise IndexOutOfRange(self.key, index, len(current))

        previous = current[index]
        replacement = update_fn(previous)
        if replacement.text != previous.text:
            raise WordTextChanged(previous.text, replacement.text)

        await self._storage.replace(self.key, index, replacement.to_document())
        self._words = (*current[:index], replacement, *current[index + 1:])
        return replacement

    async def update_where(self, predicate: Predicate, update_fn: UpdateFn) -> bool:
        """
        Applies `update_fn` to the first Word matching `predicate`.
        Returns False, without raising, when nothing matches.
        """
        index = await self.index_of(predicate)
        if index is None:
            logger.debug("shard_update_no_match", shard=self.key)
            return False
        await self.update_at(index, update_fn)
        return True
