# wordhoard\core\domain\models.py
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---

class ReferenceScope(str, Enum):
    """Where AddDefinition looks for an existing definition with the same reference."""
    WORD = "word"    # only the target word's own definitions
    SHARD = "shard"  # every word sharing the target's shard

# --- Base ---

class ScoredUnit(BaseModel):
    """
    Shared shape of every record that collects community votes.

    Stored as 'V' / 'NV' in the document format. Both counters only ever grow;
    see `wordhoard.core.domain.moderation` for the functions that change them.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    approvals: int = Field(1, ge=0, alias="V")
    disapprovals: int = Field(0, ge=0, alias="NV")

# --- Sub-records ---

class Definition(ScoredUnit):
    """A meaning of the word, attributed to a reference (book, site, author)."""
    text: str
    reference: str

class Example(ScoredUnit):
    """A usage sentence. The reference is optional and may be empty."""
    text: str
    reference: str = ""

class Citation(ScoredUnit):
    """A link to an external page that mentions the word."""
    title: str
    hyperlink: str

# --- Aggregate ---

class Word(ScoredUnit):
    """
    A dictionary entry and the root document stored in a shard.

    `text` is always the canonical (lowercased) form. Collections are tuples so
    a Word can only change through `model_copy(update=...)`.
    """
    text: str
    definitions: Tuple[Definition, ...] = Field(..., min_length=1)
    examples: Tuple[Example, ...] = ()
    citations: Tuple[Citation, ...] = Field((), alias="mentions")

    def to_document(self) -> dict:
        """Serializes the Word using the stored field names (V, NV, mentions)."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_document(cls, document: dict) -> "Word":
        return cls.model_validate(document)


def canonicalize(text: str) -> str:
    """Canonical form of a word's text: lowercase. Inputs arrive already trimmed."""
    return text.lower()


def new_word(text: str, definition_text: str, definition_reference: str) -> Word:
    """
    Builds a freshly contributed Word: one seeded Definition, no examples or
    citations yet, and the creator's implicit approval (V=1, NV=0).
    """
    return Word(
        text=canonicalize(text),
        definitions=(Definition(text=definition_text, reference=definition_reference),),
        examples=(),
        citations=(),
        approvals=1,
        disapprovals=0,
    )
