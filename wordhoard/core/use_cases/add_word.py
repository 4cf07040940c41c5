# wordhoard\core\use_cases\add_word.py
import structlog

from wordhoard.core.domain.exceptions import DuplicateWord
from wordhoard.core.domain.models import Word, canonicalize, new_word
from wordhoard.core.ports.lexicon_store import ILexiconStore
from wordhoard.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class AddWord:
    """
    Use Case: Contributes a new word with its first definition.

    Steps:
    1. Canonicalizes the text (lowercase) and routes to its shard.
    2. Under the shard lock, checks the word is not stored yet.
    3. Appends a Word seeded with one Definition and no examples/citations.
    """

    def __init__(self, store: ILexiconStore):
        self.store = store

    async def execute(self, text: str, definition_text: str, definition_reference: str) -> Word:
        """
        Returns:
            Word: the stored Word.

        Raises:
            DuplicateWord: a word with the same canonical text already exists.
            StorageFault: the shard could not be read or written.
        """
        canonical = canonicalize(text)
        with tracer.start_as_current_span("use_case.add_word") as span:
            span.set_attribute("lexicon.word", canonical)
            shard = self.store.shard_for(canonical)

            async with shard.exclusive():
                if await shard.find_first(lambda w: w.text == canonical) is not None:
                    logger.info("word_duplicate", word=canonical, shard=shard.key)
                    raise DuplicateWord(canonical)

                word = new_word(canonical, definition_text, definition_reference)
                await shard.append(word)

            logger.info("word_added", word=canonical, shard=shard.key)
            return word
