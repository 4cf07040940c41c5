# wordhoard\core\domain\results.py
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from wordhoard.core.domain.exceptions import LexiconError
from wordhoard.core.domain.models import Word


class ResultStatus(str, Enum):
    """How the UI renders an outcome."""
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Message(BaseModel):
    text: str
    type: ResultStatus


class OperationResult(BaseModel):
    """
    Typed outcome of a lexicon operation.

    Every operation of `LexiconService` returns one of these instead of raising.
    """
    code: str = "ok"
    message: Message
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    word: Optional[Word] = None
    words: Optional[List[Word]] = None

    @property
    def status(self) -> ResultStatus:
        return self.message.type

    @property
    def ok(self) -> bool:
        return self.message.type == ResultStatus.SUCCESS

    @classmethod
    def success(cls, text: str, word: Optional[Word] = None, words: Optional[List[Word]] = None) -> "OperationResult":
        return cls(message=Message(text=text, type=ResultStatus.SUCCESS), word=word, words=words)

    @classmethod
    def failure(cls, exc: LexiconError) -> "OperationResult":
        errors = dict(getattr(exc, "fields", {}))
        if exc.field:
            errors.setdefault(exc.field, []).append(exc.message)
        return cls(
            code=exc.code,
            message=Message(text=exc.message, type=ResultStatus(exc.severity)),
            errors=errors,
        )
