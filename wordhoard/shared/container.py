# wordhoard\shared\container.py
from dependency_injector import containers, providers

from wordhoard.adapters.persistence.json_storage import JsonShardStorage
from wordhoard.adapters.persistence.memory_storage import MemoryShardStorage
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
from wordhoard.shared.config import StorageBackend, settings


def build_shard_storage(backend: str, data_dir: str):
    """Picks the storage adapter named by STORAGE_BACKEND."""
    if StorageBackend(backend) is StorageBackend.MEMORY:
        return MemoryShardStorage()
    return JsonShardStorage(base_path=data_dir)


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    The store is the process-wide handle to the storage medium: a Singleton
    built on first use and shared by every request for the life of the process.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Persistence (Singleton: one handle per process)
    shard_storage = providers.Singleton(
        build_shard_storage,
        backend=config.STORAGE_BACKEND,
        data_dir=config.LEXICON_DATA_DIR,
    )

    lexicon_store = providers.Singleton(
        LexiconStore,
        storage=shard_storage,
        lock_timeout=config.SHARD_LOCK_TIMEOUT_SEC,
    )

    # 3. Use Cases (Factory: stateless, new instance per call)
    add_word_use_case = providers.Factory(AddWord, store=lexicon_store)
    add_definition_use_case = providers.Factory(
        AddDefinition,
        store=lexicon_store,
        reference_scope=config.REFERENCE_DEDUP_SCOPE,
    )
    add_example_use_case = providers.Factory(AddExample, store=lexicon_store)
    add_citation_use_case = providers.Factory(AddCitation, store=lexicon_store)
    report_use_case = providers.Factory(
        ReportElement, store=lexicon_store, penalty=config.REPORT_PENALTY
    )
    approve_use_case = providers.Factory(
        ApproveElement, store=lexicon_store, weight=config.APPROVAL_WEIGHT
    )
    lookup_use_case = providers.Factory(LookupWord, store=lexicon_store)
    list_shard_use_case = providers.Factory(ListShard, store=lexicon_store)

    # 4. Operation boundary
    lexicon_service = providers.Singleton(
        LexiconService,
        add_word=add_word_use_case,
        add_definition=add_definition_use_case,
        add_example=add_example_use_case,
        add_citation=add_citation_use_case,
        report=report_use_case,
        approve=approve_use_case,
        lookup=lookup_use_case,
        list_shard=list_shard_use_case,
    )


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
