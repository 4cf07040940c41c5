# wordhoard\services\lexicon_service.py
"""
Operation boundary of the lexicon store.

`LexiconService` runs the use cases and converts every outcome, good or bad,
into an `OperationResult`. Domain conditions come back as warning/error
results; storage faults and anything unexpected are logged here and reported
to the caller as a generic failure.
"""

from typing import Awaitable, Callable, Optional

import structlog

from wordhoard.core.domain.elements import Caller, parse_element
from wordhoard.core.domain.exceptions import LexiconError, StorageFault, Unauthorized
from wordhoard.core.domain.results import Message, OperationResult, ResultStatus
from wordhoard.core.use_cases import (
    AddCitation,
    AddDefinition,
    AddExample,
    AddWord,
    ApproveElement,
    ListShard,
    LookupWord,
    ReportElement,
)

logger = structlog.get_logger()

GENERIC_FAILURE = "Something went wrong!"


class LexiconService:
    def __init__(
        self,
        add_word: AddWord,
        add_definition: AddDefinition,
        add_example: AddExample,
        add_citation: AddCitation,
        report: ReportElement,
        approve: ApproveElement,
        lookup: LookupWord,
        list_shard: ListShard,
    ):
        self._add_word = add_word
        self._add_definition = add_definition
        self._add_example = add_example
        self._add_citation = add_citation
        self._report = report
        self._approve = approve
        self._lookup = lookup
        self._list_shard = list_shard

    async def _guard(self, operation: str, run: Callable[[], Awaitable[OperationResult]]) -> OperationResult:
        try:
            return await run()
        except StorageFault as e:
            logger.error("storage_fault", operation=operation, detail=e.detail)
            return OperationResult(
                code=e.code,
                message=Message(text=GENERIC_FAILURE, type=ResultStatus.ERROR),
            )
        except LexiconError as e:
            logger.info("operation_rejected", operation=operation, code=e.code)
            return OperationResult.failure(e)
        except Exception:
            logger.exception("operation_failed", operation=operation)
            return OperationResult(
                code=StorageFault.code,
                message=Message(text=GENERIC_FAILURE, type=ResultStatus.ERROR),
            )

    # --- Contributions ---

    async def add_word(self, text: str, definition_text: str, definition_reference: str) -> OperationResult:
        async def run():
            word = await self._add_word.execute(text, definition_text, definition_reference)
            return OperationResult.success(f"{word.text} has been successfully added.", word=word)
        return await self._guard("add_word", run)

    async def add_definition(self, word_text: str, text: str, reference: str) -> OperationResult:
        async def run():
            await self._add_definition.execute(word_text, text, reference)
            return OperationResult.success(
                "Your definition has been added successfully. Refresh the page and check it out."
            )
        return await self._guard("add_definition", run)

    async def add_example(self, word_text: str, text: str, reference: str = "") -> OperationResult:
        async def run():
            await self._add_example.execute(word_text, text, reference)
            return OperationResult.success(
                "The example has been added successfully. Refresh the page and check it out."
            )
        return await self._guard("add_example", run)

    async def add_citation(self, word_text: str, title: str, hyperlink: str) -> OperationResult:
        async def run():
            await self._add_citation.execute(word_text, title, hyperlink)
            return OperationResult.success(
                "The data has been added successfully. Refresh the page and check it out."
            )
        return await self._guard("add_citation", run)

    # --- Moderation ---

    async def report(
        self, caller: Caller, word_text: str, element_type: str, element_id: Optional[str] = None
    ) -> OperationResult:
        async def run():
            # Authentication is checked before the element is even parsed.
            if not caller.authenticated:
                raise Unauthorized("report items")
            ref = parse_element(element_type, element_id)
            word = await self._report.execute(caller, word_text, ref)
            return OperationResult.success("Done. Thanks for reporting.", word=word)
        return await self._guard("report", run)

    async def approve(
        self, caller: Caller, word_text: str, element_type: str, element_id: Optional[str] = None
    ) -> OperationResult:
        async def run():
            if not caller.authenticated:
                raise Unauthorized("vote")
            ref = parse_element(element_type, element_id)
            word = await self._approve.execute(caller, word_text, ref)
            return OperationResult.success("Done. Thanks for voting.", word=word)
        return await self._guard("approve", run)

    # --- Reads ---

    async def lookup(self, text: str) -> OperationResult:
        async def run():
            word = await self._lookup.execute(text)
            return OperationResult.success(word.text, word=word)
        return await self._guard("lookup", run)

    async def list_shard(self, prefix: str) -> OperationResult:
        async def run():
            words = await self._list_shard.execute(prefix)
            return OperationResult.success(f"{len(words)} words", words=words)
        return await self._guard("list_shard", run)
