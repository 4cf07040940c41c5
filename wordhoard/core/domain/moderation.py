# wordhoard\core\domain\moderation.py
"""
Voting / moderation protocol.

Pure functions over the record types: each takes a Word and returns a new
Word with one score adjusted. Nothing here touches storage; the use cases
persist the result with `Shard.update_at`.
"""

from typing import Callable, Sequence, Tuple, TypeVar

from wordhoard.core.domain.elements import (
    CitationRef,
    DefinitionRef,
    ElementRef,
    ExampleRef,
    WordRef,
    element_id,
)
from wordhoard.core.domain.exceptions import ElementNotFound
from wordhoard.core.domain.models import Citation, Definition, Example, ScoredUnit, Word

REPORT_PENALTY = 2
APPROVAL_WEIGHT = 1

S = TypeVar("S", bound=ScoredUnit)


def bump(unit: S, approvals: int = 0, disapprovals: int = 0) -> S:
    """Returns a copy of `unit` with its counters increased. Counters never go down."""
    if approvals < 0 or disapprovals < 0:
        raise ValueError("score adjustments must be non-negative")
    return unit.model_copy(
        update={
            "approvals": unit.approvals + approvals,
            "disapprovals": unit.disapprovals + disapprovals,
        }
    )


def _bump_first(
    items: Sequence[S],
    matches: Callable[[S], bool],
    approvals: int,
    disapprovals: int,
) -> Tuple[S, ...] | None:
    for i, item in enumerate(items):
        if matches(item):
            return (
                *items[:i],
                bump(item, approvals=approvals, disapprovals=disapprovals),
                *items[i + 1:],
            )
    return None


def adjust_score(word: Word, ref: ElementRef, approvals: int = 0, disapprovals: int = 0) -> Word:
    """
    Adjusts the score of the element `ref` points at.

    Raises:
        ElementNotFound: no sub-record of `word` carries the identifying value.
    """
    match ref:
        case WordRef():
            return bump(word, approvals=approvals, disapprovals=disapprovals)
        case DefinitionRef(reference=reference):
            field = "definitions"
            updated = _bump_first(
                word.definitions, lambda d: d.reference == reference, approvals, disapprovals
            )
        case ExampleRef(text=text):
            field = "examples"
            updated = _bump_first(
                word.examples, lambda e: e.text == text, approvals, disapprovals
            )
        case CitationRef(hyperlink=hyperlink):
            field = "citations"
            updated = _bump_first(
                word.citations, lambda c: c.hyperlink == hyperlink, approvals, disapprovals
            )

    if updated is None:
        raise ElementNotFound(ref.kind, element_id(ref), word.text)
    return word.model_copy(update={field: updated})


def apply_penalty(word: Word, ref: ElementRef, amount: int = REPORT_PENALTY) -> Word:
    """A report: the target's disapprovals grow by `amount`."""
    return adjust_score(word, ref, disapprovals=amount)


def apply_approval(word: Word, ref: ElementRef, amount: int = APPROVAL_WEIGHT) -> Word:
    """An up-vote: the target's approvals grow by `amount`."""
    return adjust_score(word, ref, approvals=amount)


# --- Contribution helpers (pure Word -> Word updates) ---

def with_definition(definition: Definition) -> Callable[[Word], Word]:
    return lambda word: word.model_copy(update={"definitions": (*word.definitions, definition)})


def with_example(example: Example) -> Callable[[Word], Word]:
    return lambda word: word.model_copy(update={"examples": (*word.examples, example)})


def with_citation(citation: Citation) -> Callable[[Word], Word]:
    return lambda word: word.model_copy(update={"citations": (*word.citations, citation)})
