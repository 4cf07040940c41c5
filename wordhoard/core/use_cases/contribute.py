# wordhoard\core\use_cases\contribute.py
"""
Use cases appending community contributions (definitions, examples,
citations) to an existing Word.
"""

from typing import Callable, Union

import structlog

from wordhoard.core.domain.exceptions import DuplicateReference, WordNotFound
from wordhoard.core.domain.models import (
    Citation,
    Definition,
    Example,
    ReferenceScope,
    Word,
    canonicalize,
)
from wordhoard.core.domain.moderation import with_citation, with_definition, with_example
from wordhoard.core.ports.lexicon_store import ILexiconStore, IShard
from wordhoard.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

Record = Union[Definition, Example, Citation]


class _Contribution:
    """Shared flow: lock the shard, run the guard, append via update_where."""

    span_name = "use_case.contribute"
    kind = "contribution"

    def __init__(self, store: ILexiconStore):
        self.store = store

    async def _guard(self, shard: IShard, word_text: str, target: Word, record: Record) -> None:
        """Hook for duplicate checks; runs under the shard lock."""

    async def _contribute(self, word_text: str, record: Record, update_fn: Callable[[Word], Word]) -> None:
        canonical = canonicalize(word_text)
        with tracer.start_as_current_span(self.span_name) as span:
            span.set_attribute("lexicon.word", canonical)
            shard = self.store.shard_for(canonical)

            async with shard.exclusive():
                target = await shard.find_first(lambda w: w.text == canonical)
                if target is None:
                    raise WordNotFound(canonical)
                await self._guard(shard, canonical, target, record)

                if not await shard.update_where(lambda w: w.text == canonical, update_fn):
                    raise WordNotFound(canonical)

            logger.info(f"{self.kind}_added", word=canonical, shard=shard.key)


class AddDefinition(_Contribution):
    """
    Adds a definition to a word. At most one definition per reference: by
    default per word, or across the whole shard with ReferenceScope.SHARD.
    """

    span_name = "use_case.add_definition"
    kind = "definition"

    def __init__(self, store: ILexiconStore, reference_scope: ReferenceScope = ReferenceScope.WORD):
        super().__init__(store)
        self.reference_scope = ReferenceScope(reference_scope)

    async def _guard(self, shard: IShard, word_text: str, target: Word, record: Record) -> None:
        reference = record.reference

        def has_reference(word: Word) -> bool:
            return any(d.reference == reference for d in word.definitions)

        if self.reference_scope is ReferenceScope.SHARD:
            clash = await shard.find_first(has_reference) is not None
        else:
            clash = has_reference(target)

        if clash:
            logger.info("definition_duplicate_reference", word=word_text, scope=self.reference_scope.value)
            raise DuplicateReference(reference)

    async def execute(self, word_text: str, text: str, reference: str) -> None:
        """
        Raises:
            WordNotFound, DuplicateReference, StorageFault
        """
        definition = Definition(text=text, reference=reference)
        await self._contribute(word_text, definition, with_definition(definition))


class AddExample(_Contribution):
    span_name = "use_case.add_example"
    kind = "example"

    async def execute(self, word_text: str, text: str, reference: str = "") -> None:
        example = Example(text=text, reference=reference)
        await self._contribute(word_text, example, with_example(example))


class AddCitation(_Contribution):
    span_name = "use_case.add_citation"
    kind = "citation"

    async def execute(self, word_text: str, title: str, hyperlink: str) -> None:
        citation = Citation(title=title, hyperlink=hyperlink)
        await self._contribute(word_text, citation, with_citation(citation))
