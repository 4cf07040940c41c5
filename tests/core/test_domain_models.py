# tests\core\test_domain_models.py
import pytest
from pydantic import ValidationError

from wordhoard.core.domain.models import (
    Citation,
    Definition,
    Example,
    Word,
    canonicalize,
    new_word,
)


class TestNewWord:
    def test_seeded_shape(self):
        """A new word has one definition, no examples/citations and V=1, NV=0."""
        word = new_word("Run", "to move swiftly on foot", "Oxford Dictionary")

        assert word.text == "run"
        assert word.approvals == 1
        assert word.disapprovals == 0
        assert len(word.definitions) == 1
        assert word.definitions[0].reference == "Oxford Dictionary"
        assert word.definitions[0].approvals == 1
        assert word.definitions[0].disapprovals == 0
        assert word.examples == ()
        assert word.citations == ()

    def test_canonicalize_lowercases(self):
        assert canonicalize("RuN") == "run"
        assert canonicalize("Éclair") == "éclair"


class TestWordDocument:
    def test_document_uses_stored_field_names(self):
        word = new_word("test", "a procedure to check quality", "Cambridge Online")
        doc = word.to_document()

        assert doc["V"] == 1
        assert doc["NV"] == 0
        assert doc["mentions"] == []
        assert doc["definitions"][0] == {
            "text": "a procedure to check quality",
            "reference": "Cambridge Online",
            "V": 1,
            "NV": 0,
        }
        assert "approvals" not in doc

    def test_document_round_trip(self):
        word = Word(
            text="quay",
            definitions=(Definition(text="a landing place for ships", reference="Collins English"),),
            examples=(Example(text="The boat was tied at the quay.", reference="", approvals=3),),
            citations=(Citation(title="Harbour history page", hyperlink="https://example.org/quay", disapprovals=2),),
            approvals=4,
            disapprovals=1,
        )
        assert Word.from_document(word.to_document()) == word

    def test_loads_legacy_document(self):
        """Documents in the stored format, with mentions and V/NV, load unchanged."""
        doc = {
            "text": "ab",
            "definitions": [{"text": "a short definition", "reference": "Some Reference", "V": 1, "NV": 0}],
            "examples": [],
            "mentions": [{"title": "A mention title", "hyperlink": "https://a.example", "V": 2, "NV": 4}],
            "V": 1,
            "NV": 2,
        }
        word = Word.from_document(doc)
        assert word.citations[0].disapprovals == 4
        assert word.disapprovals == 2


class TestInvariants:
    def test_word_requires_a_definition(self):
        with pytest.raises(ValidationError):
            Word(text="empty", definitions=())

    def test_negative_scores_rejected(self):
        with pytest.raises(ValidationError):
            Definition(text="x" * 10, reference="y" * 10, disapprovals=-1)

    def test_records_are_frozen(self):
        word = new_word("test", "a procedure to check quality", "Cambridge Online")
        with pytest.raises(ValidationError):
            word.approvals = 10
