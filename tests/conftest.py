# tests\conftest.py
import pytest
from dependency_injector import providers

from wordhoard.adapters.persistence.memory_storage import MemoryShardStorage
from wordhoard.core.domain.models import ReferenceScope
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
from wordhoard.services.lexicon_service import LexiconService
from wordhoard.services.lexicon_store import LexiconStore
from wordhoard.shared.container import container as app_container

DEF_TEXT = "to move swiftly on foot"
DEF_REF = "Oxford Dictionary"
OTHER_REF = "Merriam-Webster Online"


@pytest.fixture(scope="function")
def storage():
    """Fresh in-memory storage for each test."""
    return MemoryShardStorage()


@pytest.fixture(scope="function")
def store(storage):
    return LexiconStore(storage, lock_timeout=1.0)


@pytest.fixture(scope="function")
def service(store):
    """The operation boundary, assembled by hand over the test store."""
    return LexiconService(
        add_word=AddWord(store),
        add_definition=AddDefinition(store, ReferenceScope.WORD),
        add_example=AddExample(store),
        add_citation=AddCitation(store),
        report=ReportElement(store),
        approve=ApproveElement(store),
        lookup=LookupWord(store),
        list_shard=ListShard(store),
    )


@pytest.fixture(scope="function")
def container(storage):
    """
    The application container with its storage replaced by the test storage.
    Singletons are reset so every test gets its own store and service.
    """
    app_container.shard_storage.override(providers.Object(storage))
    app_container.reset_singletons()

    yield app_container

    app_container.shard_storage.reset_override()
    app_container.reset_singletons()
