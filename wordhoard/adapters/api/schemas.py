# wordhoard\adapters\api\schemas.py
"""
Request DTOs.

These carry the field bounds the forms enforce; a request that violates them
is rejected with 422 before any use case runs. Field names follow the form
field names of the web UI (word_text, def_content, ...).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Form(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class AddWordRequest(_Form):
    word_text: str = Field(..., min_length=2, max_length=50)
    def_content: str = Field(..., min_length=10, max_length=255)
    def_reference: str = Field(..., min_length=10, max_length=45)


class AddDefinitionRequest(_Form):
    def_content: str = Field(..., min_length=10, max_length=255)
    def_reference: str = Field(..., min_length=10, max_length=45)


class AddExampleRequest(_Form):
    example_text: str = Field(..., min_length=10, max_length=145)
    example_reference: str = Field("", max_length=45)


class AddCitationRequest(_Form):
    mention_title: str = Field(..., min_length=10, max_length=45)
    mention_hyperlink: str = Field(
        ...,
        pattern=r"^https://",
        description="Must provide secure URL",
    )


class VoteRequest(_Form):
    """Targets the word itself (element_type='word') or one of its sub-records."""
    element_type: str = Field(..., min_length=1, description="word | definition | example | citation")
    element_id: Optional[str] = Field(
        None,
        description="definition reference, example text, or citation hyperlink",
    )
