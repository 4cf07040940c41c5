# tests\core\test_use_cases.py
import asyncio

import pytest

from tests.conftest import DEF_REF, DEF_TEXT, OTHER_REF
from wordhoard.adapters.persistence.json_storage import JsonShardStorage
from wordhoard.core.domain.elements import Caller, DefinitionRef, ExampleRef, WordRef
from wordhoard.core.domain.exceptions import (
    DuplicateReference,
    DuplicateWord,
    ElementNotFound,
    StorageFault,
    Unauthorized,
    WordNotFound,
)
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
from wordhoard.services.lexicon_store import LexiconStore

USER = Caller(authenticated=True, identity="alice")


@pytest.mark.asyncio
class TestAddWord:

    async def test_add_then_lookup(self, store):
        """
        Scenario: A new word is added.
        Expected: Lookup returns it with V=1, NV=0, one definition, nothing else.
        """
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)

        word = await LookupWord(store).execute("test")
        assert word.approvals == 1
        assert word.disapprovals == 0
        assert len(word.definitions) == 1
        assert word.examples == ()
        assert word.citations == ()

    async def test_case_insensitive(self, store):
        await AddWord(store).execute("Run", DEF_TEXT, DEF_REF)

        lookup = LookupWord(store)
        assert (await lookup.execute("run")).text == "run"
        assert await lookup.execute("RUN") == await lookup.execute("run")

    async def test_duplicate(self, store):
        use_case = AddWord(store)
        await use_case.execute("test", DEF_TEXT, DEF_REF)

        with pytest.raises(DuplicateWord):
            await use_case.execute("TEST", "another definition here", OTHER_REF)

        words = await store.shard_for("te").words()
        assert [w.text for w in words] == ["test"]

    async def test_concurrent_adds_store_one_word(self, tmp_path):
        """
        Scenario: Two requests add the same word at the same time against real
        file storage (every write yields to the event loop).
        Expected: Exactly one succeeds, the other gets DuplicateWord.
        """
        store = LexiconStore(JsonShardStorage(str(tmp_path)))
        use_case = AddWord(store)

        results = await asyncio.gather(
            use_case.execute("race", DEF_TEXT, DEF_REF),
            use_case.execute("race", DEF_TEXT, OTHER_REF),
            return_exceptions=True,
        )

        assert sum(1 for r in results if isinstance(r, DuplicateWord)) == 1
        assert sum(1 for r in results if not isinstance(r, Exception)) == 1

        reopened = LexiconStore(JsonShardStorage(str(tmp_path)))
        assert len(await reopened.shard_for("race").words()) == 1


@pytest.mark.asyncio
class TestContributions:

    async def test_add_definition(self, store):
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        await AddDefinition(store).execute("Test", "a trial of something", OTHER_REF)

        word = await LookupWord(store).execute("test")
        assert [d.reference for d in word.definitions] == [DEF_REF, OTHER_REF]
        assert word.definitions[1].approvals == 1

    async def test_duplicate_reference_on_same_word(self, store):
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)

        with pytest.raises(DuplicateReference):
            await AddDefinition(store).execute("test", "a trial of something", DEF_REF)

        word = await LookupWord(store).execute("test")
        assert len(word.definitions) == 1

    async def test_reference_scope_word(self, store):
        """By default a reference used by a neighbouring word does not clash."""
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        await AddWord(store).execute("tests", DEF_TEXT, OTHER_REF)

        await AddDefinition(store).execute("tests", "more than one test", DEF_REF)
        word = await LookupWord(store).execute("tests")
        assert len(word.definitions) == 2

    async def test_reference_scope_shard(self, store):
        """With shard scope any word in the same shard blocks the reference."""
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        await AddWord(store).execute("tests", DEF_TEXT, OTHER_REF)

        with pytest.raises(DuplicateReference):
            await AddDefinition(store, ReferenceScope.SHARD).execute("tests", "more than one test", DEF_REF)

    async def test_missing_word(self, store):
        with pytest.raises(WordNotFound):
            await AddExample(store).execute("ghost", "A ghost sentence here.")

    async def test_example_and_citation(self, store):
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        await AddExample(store).execute("test", "This is only a test.", "")
        await AddCitation(store).execute("test", "Testing in practice", "https://example.org/test")

        word = await LookupWord(store).execute("test")
        assert word.examples[0].text == "This is only a test."
        assert word.citations[0].hyperlink == "https://example.org/test"


@pytest.mark.asyncio
class TestReport:

    async def test_report_definition(self, store):
        """
        Scenario: An authenticated user reports one definition.
        Expected: That definition's NV grows by 2; every other score is unchanged.
        """
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        await AddDefinition(store).execute("test", "a trial of something", OTHER_REF)
        before = await LookupWord(store).execute("test")

        await ReportElement(store).execute(USER, "test", DefinitionRef(reference=OTHER_REF))

        after = await LookupWord(store).execute("test")
        assert after.definitions[1].disapprovals == before.definitions[1].disapprovals + 2
        assert after.definitions[1].approvals == before.definitions[1].approvals
        assert after.definitions[0] == before.definitions[0]
        assert (after.approvals, after.disapprovals) == (before.approvals, before.disapprovals)

    async def test_report_word(self, store):
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        updated = await ReportElement(store).execute(USER, "TEST", WordRef())
        assert updated.disapprovals == 2

    async def test_unauthenticated(self, store):
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        before = await LookupWord(store).execute("test")

        with pytest.raises(Unauthorized):
            await ReportElement(store).execute(Caller.anonymous(), "test", WordRef())

        assert await LookupWord(store).execute("test") == before

    async def test_unknown_element(self, store):
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        before = await LookupWord(store).execute("test")

        with pytest.raises(ElementNotFound):
            await ReportElement(store).execute(USER, "test", ExampleRef(text="never written"))

        assert await LookupWord(store).execute("test") == before

    async def test_unknown_word(self, store):
        with pytest.raises(WordNotFound):
            await ReportElement(store).execute(USER, "ghost", WordRef())

    async def test_report_racing_add_definition(self, tmp_path):
        """
        Scenario: A report on a definition and a new definition for the same word
        run at the same time against real file storage.
        Expected: Neither update is lost, in memory or on disk.
        """
        store = LexiconStore(JsonShardStorage(str(tmp_path)))
        await AddWord(store).execute("race", DEF_TEXT, DEF_REF)

        results = await asyncio.gather(
            ReportElement(store).execute(USER, "race", DefinitionRef(reference=DEF_REF)),
            AddDefinition(store).execute("race", "a contest of speed", OTHER_REF),
            return_exceptions=True,
        )
        assert not any(isinstance(r, Exception) for r in results)

        for current in (store, LexiconStore(JsonShardStorage(str(tmp_path)))):
            word = await LookupWord(current).execute("race")
            assert [d.reference for d in word.definitions] == [DEF_REF, OTHER_REF]
            assert word.definitions[0].disapprovals == 2
            assert word.definitions[1].disapprovals == 0

    async def test_custom_penalty_and_approval(self, store):
        await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
        await ReportElement(store, penalty=5).execute(USER, "test", WordRef())
        updated = await ApproveElement(store).execute(USER, "test", DefinitionRef(reference=DEF_REF))

        assert updated.disapprovals == 5
        assert updated.definitions[0].approvals == 2


class FailingReplaceStorage:
    """Storage whose overwrite always fails."""

    def __init__(self, inner):
        self.inner = inner

    async def load(self, key):
        return await self.inner.load(key)

    async def append(self, key, record):
        await self.inner.append(key, record)

    async def replace(self, key, index, record):
        raise StorageFault("disk full")

    async def keys(self):
        return await self.inner.keys()

    async def health_check(self):
        return False


@pytest.mark.asyncio
async def test_storage_fault_leaves_word_unchanged(storage):
    store = LexiconStore(FailingReplaceStorage(storage))
    await AddWord(store).execute("test", DEF_TEXT, DEF_REF)
    before = await LookupWord(store).execute("test")

    with pytest.raises(StorageFault):
        await ReportElement(store).execute(USER, "test", WordRef())

    assert await LookupWord(store).execute("test") == before


@pytest.mark.asyncio
async def test_list_shard_in_insertion_order(store):
    for text in ("tea", "test", "team"):
        await AddWord(store).execute(text, DEF_TEXT, DEF_REF)
    await AddWord(store).execute("toast", DEF_TEXT, DEF_REF)

    words = await ListShard(store).execute("Te")
    assert [w.text for w in words] == ["tea", "test", "team"]
