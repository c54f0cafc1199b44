"""Shared test fixtures."""

import asyncio
from typing import Dict, List, Optional

import pytest

from easydict.agents.data_sources import AssociationSource, DefinitionSource, TranslationSource
from easydict.errors import DictionaryError, WordNotFoundError
from easydict.models.dictionary_models import DictionaryEntry, TranslationPayload

# Sample payload in the shape returned by dictionaryapi.dev
HELLO_JSON = {
    "word": "hello",
    "phonetic": "/həˈləʊ/",
    "phonetics": [
        {"text": "/həˈləʊ/", "audio": "https://example.com/hello-uk.mp3"},
        {"text": "/həˈloʊ/", "audio": "https://example.com/hello-us.mp3"}
    ],
    "origin": "early 19th century: variant of earlier hollo.",
    "meanings": [
        {
            "partOfSpeech": "exclamation",
            "definitions": [
                {
                    "definition": "used as a greeting or to begin a phone conversation.",
                    "example": "hello there, Katie!",
                    "synonyms": ["hi", "howdy"],
                    "antonyms": []
                }
            ],
            "synonyms": ["greeting"],
            "antonyms": []
        }
    ]
}

CREATE_JSON = {
    "word": "create",
    "phonetics": [{"text": "/kriˈeɪt/"}],
    "meanings": [
        {
            "partOfSpeech": "verb",
            "definitions": [{"definition": "bring (something) into existence."}]
        }
    ]
}


def make_entry(data: Dict) -> DictionaryEntry:
    return DictionaryEntry.model_validate(data)


class StubDefinitions(DefinitionSource):
    """Definitions keyed by lowercased word; anything else is not found."""

    def __init__(self, entries: Optional[Dict[str, List[DictionaryEntry]]] = None, error: Optional[DictionaryError] = None):
        self.entries = entries or {}
        self.error = error
        self.calls: List[str] = []

    async def get_definitions(self, word: str) -> List[DictionaryEntry]:
        self.calls.append(word)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if word.lower() not in self.entries:
            raise WordNotFoundError("Word not found in dictionary")
        return self.entries[word.lower()]


class StubTranslations(TranslationSource):
    """Translations keyed by (source_lang, target_lang)."""

    def __init__(self, payloads: Optional[Dict[tuple, TranslationPayload]] = None, error: Optional[DictionaryError] = None):
        self.payloads = payloads or {}
        self.error = error
        self.calls: List[tuple] = []
        self.started = False

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationPayload:
        self.started = True
        self.calls.append((text, source_lang, target_lang))
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.payloads[(source_lang, target_lang)]


class StubAssociations(AssociationSource):

    def __init__(self, words: Optional[List[str]] = None):
        self.words = words or []

    async def related_words(self, word: str, relation: str = "ml", max_results: int = 10) -> List[str]:
        return self.words[:max_results]


@pytest.fixture
def hello_entry() -> DictionaryEntry:
    return make_entry(HELLO_JSON)


@pytest.fixture
def create_entry() -> DictionaryEntry:
    return make_entry(CREATE_JSON)


@pytest.fixture
def en_zh_payload() -> TranslationPayload:
    return TranslationPayload(
        primary="你好",
        matches=[
            {"translation": "你好", "quality": 100},
            {"translation": "喂", "quality": 74},
            {"translation": "哈喽", "quality": 40}
        ]
    )
