# wordhoard\core\use_cases\lookup.py
from typing import List

from wordhoard.core.domain.exceptions import WordNotFound
from wordhoard.core.domain.models import Word, canonicalize
from wordhoard.core.ports.lexicon_store import ILexiconStore
from wordhoard.shared.observability import get_tracer

tracer = get_tracer(__name__)


class LookupWord:
    """Use Case: fetches one word by text, case-insensitively."""

    def __init__(self, store: ILexiconStore):
        self.store = store

    async def execute(self, text: str) -> Word:
        canonical = canonicalize(text)
        with tracer.start_as_current_span("use_case.lookup_word"):
            words = await self.store.snapshot(canonical)
        word = next((w for w in words if w.text == canonical), None)
        if word is None:
            raise WordNotFound(canonical)
        return word


class ListShard:
    """Use Case: every word sharing the shard of `prefix`, in insertion order."""

    def __init__(self, store: ILexiconStore):
        self.store = store

    async def execute(self, prefix: str) -> List[Word]:
        with tracer.start_as_current_span("use_case.list_shard"):
            return list(await self.store.snapshot(prefix))
