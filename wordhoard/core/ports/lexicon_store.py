# wordhoard\core\ports\lexicon_store.py
from contextlib import AbstractAsyncContextManager
from typing import Callable, Optional, Protocol, Tuple

from wordhoard.core.domain.models import Word

Predicate = Callable[[Word], bool]
UpdateFn = Callable[[Word], Word]


class IShard(Protocol):
    """
    Port for one shard: the ordered Words sharing a shard key.

    The primitives do not lock; a read-check-write sequence runs inside
    `exclusive()`.
    """

    key: str

    def exclusive(self) -> AbstractAsyncContextManager["IShard"]:
        ...

    async def words(self) -> Tuple[Word, ...]:
        ...

    async def find_first(self, predicate: Predicate) -> Optional[Word]:
        ...

    async def index_of(self, predicate: Predicate) -> Optional[int]:
        ...

    async def append(self, word: Word) -> None:
        ...

    async def update_at(self, index: int, update_fn: UpdateFn) -> Word:
        ...

    async def update_where(self, predicate: Predicate, update_fn: UpdateFn) -> bool:
        ...


class ILexiconStore(Protocol):
    """Port the use cases route through to reach a word's shard."""

    def shard_for(self, text: str) -> IShard:
        """The live shard for `text`, created on first access."""
        ...

    async def snapshot(self, text: str) -> Tuple[Word, ...]:
        """
        Read-only view of the shard `text` belongs to. Does not keep a shard
        open when nothing is stored under its key.
        """
        ...
