# wordhoard\core\use_cases\__init__.py
"""
Application use cases over the lexicon store.

Each use case locks the shard it touches for its whole read-check-write
sequence and raises a `LexiconError` subclass on failure.
"""

from .add_word import AddWord
from .contribute import AddCitation, AddDefinition, AddExample
from .lookup import ListShard, LookupWord
from .moderate import ApproveElement, ReportElement

__all__ = [
    "AddWord",
    "AddDefinition",
    "AddExample",
    "AddCitation",
    "LookupWord",
    "ListShard",
    "ReportElement",
    "ApproveElement",
]
