"""
Data source abstractions for dictionary and translation lookups.

This module provides interfaces and aiohttp implementations for the three
public REST providers: definitions (dictionaryapi.dev), translation
(MyMemory) and word association (Datamuse). Responses are validated with
pydantic; transport and payload problems are mapped onto DictionaryError
kinds so callers never see raw aiohttp or pydantic exceptions.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import aiohttp
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from easydict.config import API_CONFIG, API_ENDPOINTS
from easydict.errors import DecodingError, DictionaryError, NetworkError, WordNotFoundError
from easydict.models.analysis_models import PartOfSpeech, VerifiedForm
from easydict.models.dictionary_models import (
    DatamuseWord,
    DictionaryEntry,
    MyMemoryResponse,
    TranslationPayload
)

_ENTRIES_ADAPTER = TypeAdapter(List[DictionaryEntry])
_DATAMUSE_ADAPTER = TypeAdapter(List[DatamuseWord])


class HTTPDataSource(ABC):
    """
    Shared HTTP plumbing for provider adapters.

    When a session is passed in it is reused for every request and left
    open; otherwise each request opens and closes its own session.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self.session = session

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Get the name of this data source."""
        pass

    async def _get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        """
        Fetch and decode a JSON document.

        Raises:
            WordNotFoundError: Provider answered 404
            NetworkError: Transport failure or any other non-2xx status
            DecodingError: Body is not valid JSON in its declared charset
        """
        headers = {"User-Agent": API_CONFIG["user_agent"]}
        try:
            if self.session is not None:
                return await self._request(self.session, url, params, headers)
            timeout = aiohttp.ClientTimeout(total=API_CONFIG["timeout"])
            async with aiohttp.ClientSession(timeout=timeout) as session:
                return await self._request(session, url, params, headers)
        except DictionaryError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"{self.source_name} request failed: {str(e) or type(e).__name__}")
            raise NetworkError(str(e) or "Network error occurred")

    async def _request(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: Optional[Dict[str, str]],
        headers: Dict[str, str]
    ) -> Any:
        async with session.get(url, params=params, headers=headers) as response:
            if response.status == 404:
                raise WordNotFoundError("Word not found in dictionary")
            if response.status != 200:
                raise NetworkError(f"HTTP Error: {response.status}")
            body = await response.read()
            charset = response.charset or "utf-8"
        try:
            return json.loads(body.decode(charset))
        except (UnicodeDecodeError, LookupError, ValueError) as e:
            logger.warning(f"{self.source_name} sent an unreadable body: {type(e).__name__}")
            raise DecodingError("Failed to parse response")


class DefinitionSource(ABC):
    """Abstract base class for English definition providers."""

    @abstractmethod
    async def get_definitions(self, word: str) -> List[DictionaryEntry]:
        """Fetch dictionary entries for a word."""
        pass

    async def verify_word_form(self, candidate: str) -> Optional[VerifiedForm]:
        """
        Confirm that a candidate is a real word and report its part of speech.

        Only the first entry's first meaning is considered; categories other
        than noun, verb, adjective and adverb reject the candidate. Never raises.
        """
        try:
            entries = await self.get_definitions(candidate)
        except DictionaryError as e:
            logger.debug(f"Candidate {candidate} rejected: {e.kind.value}")
            return None
        if not entries:
            return None
        part_of_speech = PartOfSpeech.from_provider(entries[0].primary_part_of_speech)
        if part_of_speech is None:
            return None
        return VerifiedForm(word=entries[0].word, part_of_speech=part_of_speech)


class TranslationSource(ABC):
    """Abstract base class for translation providers."""

    @abstractmethod
    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationPayload:
        """Translate text between two languages."""
        pass


class AssociationSource(ABC):
    """Abstract base class for word-association providers."""

    @abstractmethod
    async def related_words(self, word: str, relation: str = "ml", max_results: int = 10) -> List[str]:
        """Fetch words associated with a word or phrase."""
        pass


class FreeDictionarySource(HTTPDataSource, DefinitionSource):
    """dictionaryapi.dev definitions source."""

    @property
    def source_name(self) -> str:
        return "Free Dictionary API"

    async def get_definitions(self, word: str) -> List[DictionaryEntry]:
        url = f"{API_ENDPOINTS['dictionary'].base_url}{quote(word.strip(), safe='')}"
        data = await self._get_json(url)
        try:
            return _ENTRIES_ADAPTER.validate_python(data)
        except ValidationError as e:
            logger.warning(f"Malformed dictionary payload for {word}: {e.error_count()} errors")
            raise DecodingError("Invalid dictionary response")


class MyMemorySource(HTTPDataSource, TranslationSource):
    """MyMemory translation-memory source."""

    @property
    def source_name(self) -> str:
        return "MyMemory"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationPayload:
        params = {
            "q": text.strip(),
            "langpair": f"{source_lang}|{target_lang}"
        }
        email = API_ENDPOINTS["translation"].credential
        if email:
            params["de"] = email

        data = await self._get_json(API_ENDPOINTS["translation"].base_url, params=params)
        try:
            payload = MyMemoryResponse.model_validate(data).to_payload()
        except ValidationError:
            raise DecodingError("Invalid translation response")
        if not payload.primary:
            raise DecodingError("Invalid translation response")
        return payload


class DatamuseSource(HTTPDataSource, AssociationSource):
    """Datamuse word-association source."""

    RELATIONS = {
        "ml": "ml",  # means like
        "syn": "rel_syn",
        "ant": "rel_ant",
        "trg": "rel_trg",  # statistically associated
    }

    @property
    def source_name(self) -> str:
        return "Datamuse"

    async def related_words(self, word: str, relation: str = "ml", max_results: int = 10) -> List[str]:
        """
        Fetch words associated with `word`.

        Args:
            word: Query word or phrase
            relation: One of `RELATIONS`
            max_results: Maximum number of words to return
        """
        if relation not in self.RELATIONS:
            raise ValueError(f"Unknown relation: {relation}")
        params = {self.RELATIONS[relation]: word.strip(), "max": str(max_results)}
        data = await self._get_json(API_ENDPOINTS["datamuse"].base_url, params=params)
        try:
            words = _DATAMUSE_ADAPTER.validate_python(data)
        except ValidationError:
            raise DecodingError("Invalid word-association response")
        return [w.word for w in words][:max_results]
