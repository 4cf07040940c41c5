# wordhoard\core\use_cases\moderate.py
"""
Reporting and up-voting of a Word or one of its sub-records.

Report state machine:

    unauthenticated -> [auth check] -> locating word -> locating element
                    -> applying penalty -> persisted

Each arrow can end the request (Unauthorized, WordNotFound, ElementNotFound,
StorageFault). Nothing is retried and a failure leaves the shard untouched.
"""

from typing import Callable

import structlog

from wordhoard.core.domain.elements import Caller, ElementRef, element_id
from wordhoard.core.domain.exceptions import Unauthorized, WordNotFound
from wordhoard.core.domain.models import Word, canonicalize
from wordhoard.core.domain.moderation import (
    APPROVAL_WEIGHT,
    REPORT_PENALTY,
    apply_approval,
    apply_penalty,
)
from wordhoard.core.ports.lexicon_store import ILexiconStore
from wordhoard.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class _Vote:
    span_name = "use_case.vote"
    event = "vote_applied"
    action = "vote"

    def __init__(self, store: ILexiconStore, amount: int):
        self.store = store
        self.amount = amount

    def _apply(self, word: Word, ref: ElementRef) -> Word:
        raise NotImplementedError

    async def execute(self, caller: Caller, word_text: str, ref: ElementRef) -> Word:
        """
        Returns:
            Word: the Word as persisted after the score change.

        Raises:
            Unauthorized, WordNotFound, ElementNotFound, StorageFault
        """
        if not caller.authenticated:
            raise Unauthorized(self.action)

        canonical = canonicalize(word_text)
        with tracer.start_as_current_span(self.span_name) as span:
            span.set_attribute("lexicon.word", canonical)
            span.set_attribute("lexicon.element", ref.kind)
            shard = self.store.shard_for(canonical)

            async with shard.exclusive():
                index = await shard.index_of(lambda w: w.text == canonical)
                if index is None:
                    raise WordNotFound(canonical)
                updated = await shard.update_at(index, self._updater(ref))

            logger.info(
                self.event,
                word=canonical,
                element=ref.kind,
                element_id=element_id(ref),
                amount=self.amount,
                user=caller.identity,
            )
            return updated

    def _updater(self, ref: ElementRef) -> Callable[[Word], Word]:
        # ElementNotFound raised here propagates out of update_at before any write.
        return lambda word: self._apply(word, ref)


class ReportElement(_Vote):
    """Use Case: flags an element, adding the report penalty to its disapprovals."""

    span_name = "use_case.report"
    event = "element_reported"
    action = "report items"

    def __init__(self, store: ILexiconStore, penalty: int = REPORT_PENALTY):
        super().__init__(store, penalty)

    def _apply(self, word: Word, ref: ElementRef) -> Word:
        return apply_penalty(word, ref, self.amount)


class ApproveElement(_Vote):
    """Use Case: up-votes an element, adding to its approvals."""

    span_name = "use_case.approve"
    event = "element_approved"
    action = "vote"

    def __init__(self, store: ILexiconStore, weight: int = APPROVAL_WEIGHT):
        super().__init__(store, weight)

    def _apply(self, word: Word, ref: ElementRef) -> Word:
        return apply_approval(word, ref, self.amount)
