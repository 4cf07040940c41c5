# wordhoard\core\domain\exceptions.py
"""
Error taxonomy of the lexicon store.

Use cases raise these; `wordhoard.services.lexicon_service.LexiconService`
catches them at the operation boundary and turns them into
`OperationResult` values, so none of them ever reaches a caller as an
exception.

Each class carries:
    - `code`: stable machine-readable identifier (used by the HTTP layer)
    - `severity`: "warning" or "error", how the UI should render it
    - `field`: the form field the condition belongs to, if any
"""

from __future__ import annotations

from typing import Dict, List, Optional


class LexiconError(Exception):
    """Base class for all lexicon-store errors."""

    code = "lexicon_error"
    severity = "error"
    field: Optional[str] = None

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


# --- Input Errors ---

class ValidationFailed(LexiconError):
    """Raised by the input layer when a field violates its bounds."""

    code = "validation_failed"

    def __init__(self, fields: Optional[Dict[str, List[str]]] = None) -> None:
        super().__init__("Error submitting the form!")
        self.fields = fields or {}


class InvalidElementType(LexiconError):
    """Raised when a report/vote names an element type outside word/definition/example/citation."""

    code = "invalid_element_type"

    def __init__(self, element_type: str) -> None:
        super().__init__(f"Invalid input! Unknown element type '{element_type}'.")
        self.element_type = element_type


class Unauthorized(LexiconError):
    """Raised when an operation requiring a signed-in caller is attempted anonymously."""

    code = "unauthorized"

    def __init__(self, action: str = "report items") -> None:
        super().__init__(f"You have to login in order to {action}.")


# --- Uniqueness Errors ---

class DuplicateWord(LexiconError):
    """Raised when adding a word whose canonical text is already stored."""

    code = "duplicate_word"
    severity = "warning"
    field = "word_text"

    def __init__(self, text: str) -> None:
        super().__init__(f"{text} already exists.")
        self.text = text


class DuplicateReference(LexiconError):
    """Raised when a definition from the same reference is already included."""

    code = "duplicate_reference"
    field = "def_reference"

    def __init__(self, reference: str) -> None:
        super().__init__(
            "Failed: there is already a definition from the same reference included!"
        )
        self.reference = reference


# --- Not Found Errors ---

class WordNotFound(LexiconError):
    code = "word_not_found"

    def __init__(self, text: str) -> None:
        super().__init__(f"Cannot find the word {text}")
        self.text = text


class ElementNotFound(LexiconError):
    code = "element_not_found"

    def __init__(self, element_type: str, element_id: str, word_text: str) -> None:
        super().__init__(
            f"Cannot find the {element_type} '{element_id}' of the word {word_text}"
        )
        self.element_type = element_type
        self.element_id = element_id


class IndexOutOfRange(LexiconError):
    """Raised by `Shard.update_at` for a position outside the shard."""

    code = "index_out_of_range"

    def __init__(self, shard_key: str, index: int, size: int) -> None:
        super().__init__(
            f"Index {index} is out of range for shard '{shard_key}' ({size} words)."
        )
        self.index = index


class WordTextChanged(LexiconError):
    """
    Raised by `Shard.update_at` when an update function returns a Word with
    different text. A Word never moves, so this is a bug in the caller.
    """

    code = "word_text_changed"

    def __init__(self, previous: str, replacement: str) -> None:
        super().__init__(
            f"An update may not change word text ('{previous}' -> '{replacement}')."
        )
        self.previous = previous
        self.replacement = replacement


# --- Infrastructure Errors ---

class StorageFault(LexiconError):
    """
    Raised when the storage medium cannot be read or written.

    This is the only class logged server-side: it points at the persistence
    layer, not at something the caller did.
    """

    code = "storage_fault"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Storage failure: {detail}")
        self.detail = detail


__all__ = [
    "LexiconError",
    "ValidationFailed",
    "InvalidElementType",
    "Unauthorized",
    "DuplicateWord",
    "DuplicateReference",
    "WordNotFound",
    "ElementNotFound",
    "IndexOutOfRange",
    "WordTextChanged",
    "StorageFault",
]
