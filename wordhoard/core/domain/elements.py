# wordhoard\core\domain\elements.py
"""
References to a votable element of a Word.

A report or a vote targets either the Word itself or one of its sub-records.
Each variant carries the field that identifies its sub-record:

    definition -> reference
    example    -> text
    citation   -> hyperlink
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from wordhoard.core.domain.exceptions import InvalidElementType


class ElementType(str, Enum):
    WORD = "word"
    DEFINITION = "definition"
    EXAMPLE = "example"
    CITATION = "citation"


class _Ref(BaseModel):
    model_config = ConfigDict(frozen=True)


class WordRef(_Ref):
    kind: Literal["word"] = "word"


class DefinitionRef(_Ref):
    kind: Literal["definition"] = "definition"
    reference: str


class ExampleRef(_Ref):
    kind: Literal["example"] = "example"
    text: str


class CitationRef(_Ref):
    kind: Literal["citation"] = "citation"
    hyperlink: str


ElementRef = Annotated[
    Union[WordRef, DefinitionRef, ExampleRef, CitationRef],
    Field(discriminator="kind"),
]

element_ref_adapter = TypeAdapter(ElementRef)

# "mention" is the name the web report form uses for citations.
_TYPE_ALIASES = {"mention": ElementType.CITATION}


def parse_element(element_type: str, element_id: Optional[str] = None) -> ElementRef:
    """
    Builds an ElementRef from the (type, id) pair submitted by a form.

    Raises:
        InvalidElementType: unknown type, or a sub-record type without an id.
    """
    key = element_type.strip().lower()
    try:
        kind = _TYPE_ALIASES.get(key) or ElementType(key)
    except ValueError:
        raise InvalidElementType(element_type) from None

    if kind is ElementType.WORD:
        return WordRef()
    if not element_id:
        raise InvalidElementType(f"{element_type} (missing identifier)")

    match kind:
        case ElementType.DEFINITION:
            return DefinitionRef(reference=element_id)
        case ElementType.EXAMPLE:
            return ExampleRef(text=element_id)
        case ElementType.CITATION:
            return CitationRef(hyperlink=element_id)


def element_id(ref: ElementRef) -> str:
    """The identifying value carried by a reference ('' for the word itself)."""
    match ref:
        case DefinitionRef(reference=reference):
            return reference
        case ExampleRef(text=text):
            return text
        case CitationRef(hyperlink=hyperlink):
            return hyperlink
        case _:
            return ""


class Caller(BaseModel):
    """
    What the authentication collaborator tells us about the requester.
    `identity` is an opaque label, only used for logging.
    """
    model_config = ConfigDict(frozen=True)

    authenticated: bool = False
    identity: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "Caller":
        return cls()
