"""
Lookup pipeline for EasyDict.

This module coordinates the provider adapters and the word-analysis agents
into a single lookup flow:

1. Script detection (English vs Chinese query)
2. Concurrent definition and translation fetches
3. Synchronous etymology and usage analysis
4. Background word-family derivation, attached progressively
"""

import asyncio
import re
from datetime import datetime
from typing import List, Optional

import aiohttp
from loguru import logger

from easydict.agents.data_sources import (
    AssociationSource,
    DatamuseSource,
    DefinitionSource,
    FreeDictionarySource,
    MyMemorySource,
    TranslationSource
)
from easydict.agents.family_agent import FamilyAgent, WordVerifier
from easydict.agents.root_agent import RootAgent
from easydict.agents.usage_agent import UsageAgent
from easydict.config import LANGUAGE_PAIRS, REVERSE_LOOKUP_CONFIG, TRANSLATION_CONFIG
from easydict.errors import DictionaryError, InvalidQueryError, WordNotFoundError
from easydict.models.analysis_models import EtymologyAnalysis, UsageAnalysis, WordFamilyResult
from easydict.models.dictionary_models import DictionaryEntry, TranslationPayload
from easydict.models.lookup_models import (
    LookupResult,
    LookupState,
    ReverseTranslation,
    Script,
    TranslationResult
)

CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]")
PUNCTUATION_PATTERN = re.compile(r"[^\w\s]", re.ASCII)


def is_chinese(text: str) -> bool:
    """Whether text contains any CJK Unified Ideograph."""
    return CJK_PATTERN.search(text) is not None


def looks_like_phrase(text: str) -> bool:
    return " " in text or "-" in text


def build_translation(
    payload: TranslationPayload,
    min_quality: float = TRANSLATION_CONFIG["min_quality"],
    max_length: int = TRANSLATION_CONFIG["max_length"],
    max_alternatives: int = TRANSLATION_CONFIG["max_alternatives"]
) -> TranslationResult:
    """
    Reduce a raw translation payload to a primary plus alternatives.

    Alternatives must score strictly above `min_quality`, be strictly
    shorter than `max_length` and differ case-insensitively from the
    primary and from each other.

    Args:
        payload: Provider translation payload
        min_quality: Exclusive lower bound on match quality
        max_length: Exclusive upper bound on alternative length
        max_alternatives: Maximum number of alternatives kept

    Returns:
        TranslationResult
    """
    seen = {payload.primary.lower()}
    alternatives: List[str] = []

    for match in payload.matches:
        if not match.translation or not match.quality or match.quality <= min_quality:
            continue
        translation = match.translation.strip()
        key = translation.lower()
        if key in seen or len(translation) >= max_length:
            continue
        seen.add(key)
        alternatives.append(translation)
        if len(alternatives) >= max_alternatives:
            break

    return TranslationResult(primary=payload.primary, alternatives=alternatives)


def extract_translation_words(
    text: str,
    min_length: int = REVERSE_LOOKUP_CONFIG["min_word_length"]
) -> List[str]:
    """Significant lowercased words of an English translation, punctuation removed."""
    cleaned = PUNCTUATION_PATTERN.sub("", text.lower())
    return [w for w in cleaned.split() if len(w) >= min_length]


class LookupPipeline:
    """
    Main coordinator for dictionary lookups.

    Provider adapters are injected so tests can substitute stubs; when
    omitted, the public REST providers are used, sharing `session` if one
    is given. The pipeline keeps no state between lookups.
    """

    def __init__(
        self,
        definitions: Optional[DefinitionSource] = None,
        translations: Optional[TranslationSource] = None,
        associations: Optional[AssociationSource] = None,
        root_agent: Optional[RootAgent] = None,
        usage_agent: Optional[UsageAgent] = None,
        family_agent: Optional[FamilyAgent] = None,
        verifier: Optional[WordVerifier] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize the pipeline.

        Args:
            definitions: English definitions provider
            translations: Translation provider
            associations: Word-association provider
            root_agent: Etymology segmenter
            usage_agent: Usage classifier
            family_agent: Word-family deriver
            verifier: Candidate verifier for word families; defaults to
                `definitions.verify_word_form`
            session: Shared aiohttp session for the default providers
        """
        self.definitions = definitions or FreeDictionarySource(session)
        self.translations = translations or MyMemorySource(session)
        self.associations = associations or DatamuseSource(session)
        self.root_agent = root_agent or RootAgent()
        self.usage_agent = usage_agent or UsageAgent()
        self.family_agent = family_agent or FamilyAgent()
        self.verifier = verifier or self.definitions.verify_word_form

    async def search(self, query: str, await_word_family: bool = False) -> LookupResult:
        """Look up a query, routing Chinese input to the reverse lookup."""
        trimmed = query.strip()
        if not trimmed:
            raise InvalidQueryError("Query cannot be empty")
        if is_chinese(trimmed):
            return await self.lookup_chinese(trimmed)
        return await self.lookup(trimmed, await_word_family=await_word_family)

    async def lookup(self, query: str, await_word_family: bool = False) -> LookupResult:
        """
        Look up an English word or phrase.

        Definitions and the Chinese translation are fetched concurrently.
        A definitions "not found" is soft: the lookup continues without
        definitions and the query is marked as a phrase when it contains a
        space or hyphen. Every other provider failure propagates.

        Args:
            query: Word or phrase to look up
            await_word_family: Block until the word family is attached

        Returns:
            LookupResult; unless `await_word_family` is set, the word family
            may still be pending (see `LookupResult.wait_word_family`)

        Raises:
            InvalidQueryError: If the query is empty
            DictionaryError: If a provider fetch fails
        """
        start_time = datetime.now()
        word = query.strip()
        if not word:
            raise InvalidQueryError("Query cannot be empty")

        logger.info(f"Starting lookup for: {word}")
        result = LookupResult(word=word, script=Script.ENGLISH)

        src, tgt = LANGUAGE_PAIRS["en_zh"]
        translation_task = asyncio.create_task(self.translations.translate(word, src, tgt))

        is_phrase = False
        try:
            result.english_definitions = await self.definitions.get_definitions(word)
            result.state = LookupState.DEFINITIONS_FETCHED
        except WordNotFoundError:
            logger.debug(f"No definitions for {word}, continuing with translation only")
            is_phrase = looks_like_phrase(word)
            result.state = LookupState.DEFINITIONS_FAILED
        except Exception:
            if translation_task.done() and not translation_task.cancelled():
                # Retrieve the finished task's outcome so asyncio does not report it
                translation_task.exception()
            else:
                translation_task.cancel()
            raise

        result.chinese_translation = build_translation(await translation_task)
        result.is_phrase = is_phrase or " " in word

        self._analyze(result)

        if not result.is_phrase:
            task = asyncio.create_task(
                self.family_agent.fetch_word_family(word, self.verifier)
            )
            result.attach_word_family_task(task)
            if await_word_family:
                await result.wait_word_family()

        processing_time = (datetime.now() - start_time).total_seconds()
        logger.info(f"Completed lookup for {word} in {processing_time:.2f}s")
        return result

    def _analyze(self, result: LookupResult) -> None:
        """Run the synchronous analyzers; phrases get empty analyses."""
        lowercased = result.word.lower()
        if result.is_phrase:
            result.etymology = EtymologyAnalysis(word=lowercased)
            result.usage = UsageAnalysis(word=lowercased)
        else:
            entry = result.primary_entry
            result.etymology = self.root_agent.analyze(
                result.word, entry.origin if entry else None
            )
            result.usage = self.usage_agent.analyze(
                result.word, entry.all_synonyms() if entry else None
            )
        result.state = LookupState.ANALYSIS_COMPLETE

    async def lookup_chinese(self, query: str) -> LookupResult:
        """
        Look up a Chinese word or phrase.

        The query is translated to English; the first significant word of the
        translation is then looked up for definitions and synonyms. Failing
        that second step is not an error.

        Args:
            query: Chinese text

        Returns:
            LookupResult with `script=CHINESE` and `reverse` populated

        Raises:
            InvalidQueryError: If the query is empty
            DictionaryError: If the translation fails
        """
        text = query.strip()
        if not text:
            raise InvalidQueryError("Query cannot be empty")

        logger.info(f"Starting Chinese lookup for: {text}")
        src, tgt = LANGUAGE_PAIRS["zh_en"]
        payload = await self.translations.translate(text, src, tgt)
        english = payload.primary

        reverse = ReverseTranslation(
            english_translation=english,
            translation_words=extract_translation_words(english)
        )
        result = LookupResult(word=text, script=Script.CHINESE, reverse=reverse)

        definitions: List[DictionaryEntry] = []
        synonyms: List[str] = []
        try:
            definitions = await self.definitions.get_definitions(reverse.main_word)
            result.state = LookupState.DEFINITIONS_FETCHED
        except DictionaryError as e:
            logger.debug(f"No definitions for {reverse.main_word}: {e.kind.value}")
            result.state = LookupState.DEFINITIONS_FAILED
        if definitions:
            synonyms = definitions[0].all_synonyms()

        reverse.alternatives = self._reverse_alternatives(synonyms, reverse.translation_words)
        result.english_definitions = definitions
        result.etymology = EtymologyAnalysis(word=text)
        result.usage = UsageAnalysis(word=text)
        result.word_family = WordFamilyResult(word=text)
        result.state = LookupState.ANALYSIS_COMPLETE

        logger.info(f"Completed Chinese lookup for {text}: {english}")
        return result

    def _reverse_alternatives(self, synonyms: List[str], translation_words: List[str]) -> List[str]:
        limit = REVERSE_LOOKUP_CONFIG["max_alternatives"]
        alternatives = synonyms[:limit]
        if len(alternatives) < REVERSE_LOOKUP_CONFIG["min_synonym_alternatives"]:
            others = [w for w in translation_words[1:] if w not in alternatives]
            alternatives = (alternatives + others)[:limit]
        return alternatives

    async def related_words(self, word: str, relation: str = "ml", max_results: int = 10) -> List[str]:
        """Words associated with `word` from the association provider."""
        trimmed = word.strip()
        if not trimmed:
            raise InvalidQueryError("Query cannot be empty")
        return await self.associations.related_words(trimmed, relation, max_results)
