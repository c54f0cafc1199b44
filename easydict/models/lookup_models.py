"""
Result containers for the lookup pipeline.

A LookupResult aggregates provider payloads and analyzer output for one
query. It is built per request and never cached by the pipeline.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from loguru import logger

from easydict.models.analysis_models import EtymologyAnalysis, UsageAnalysis, WordFamilyResult
from easydict.models.dictionary_models import DictionaryEntry


class Script(Enum):
    """Writing system of a query."""
    ENGLISH = "english"
    CHINESE = "chinese"


class LookupState(Enum):
    """Progress of a single lookup."""
    PENDING = "pending"
    DEFINITIONS_FETCHED = "definitions_fetched"
    DEFINITIONS_FAILED = "definitions_failed"
    ANALYSIS_COMPLETE = "analysis_complete"
    WORD_FAMILY_PENDING = "word_family_pending"
    WORD_FAMILY_COMPLETE = "word_family_complete"


@dataclass
class TranslationResult:
    primary: str
    alternatives: List[str] = field(default_factory=list)

    @property
    def all_translations(self) -> List[str]:
        return [self.primary, *self.alternatives]


@dataclass
class ReverseTranslation:
    """
    Chinese -> English translation details.

    Attributes:
        english_translation: Full translation of the Chinese query
        translation_words: Significant lowercased words of the translation
        alternatives: Other English words that may translate to the query
    """
    english_translation: str
    translation_words: List[str] = field(default_factory=list)
    alternatives: List[str] = field(default_factory=list)

    @property
    def main_word(self) -> str:
        if self.translation_words:
            return self.translation_words[0]
        parts = self.english_translation.split(" ")
        return parts[0] if parts else ""


@dataclass
class LookupResult:
    """
    Unified response for one query.

    Attributes:
        word: The trimmed query
        script: Script classification of the query
        english_definitions: Provider entries, passed through untouched
        chinese_translation: Primary + alternatives (English queries only)
        etymology: Prefix/root/suffix breakdown (empty for phrases)
        usage: Register suggestions (empty for phrases)
        word_family: Related forms, attached once derivation settles
        is_phrase: Whether the query is treated as a multi-word phrase
        reverse: Chinese -> English details (Chinese queries only)
        state: Lookup progress
        timestamp: When the lookup started
    """
    word: str
    script: Script = Script.ENGLISH
    english_definitions: List[DictionaryEntry] = field(default_factory=list)
    chinese_translation: Optional[TranslationResult] = None
    etymology: Optional[EtymologyAnalysis] = None
    usage: Optional[UsageAnalysis] = None
    word_family: Optional[WordFamilyResult] = None
    is_phrase: bool = False
    reverse: Optional[ReverseTranslation] = None
    state: LookupState = LookupState.PENDING
    timestamp: datetime = field(default_factory=datetime.now)
    _family_task: Optional[asyncio.Task] = field(default=None, repr=False, compare=False)

    @property
    def primary_entry(self) -> Optional[DictionaryEntry]:
        return self.english_definitions[0] if self.english_definitions else None

    @property
    def word_family_pending(self) -> bool:
        return self.state == LookupState.WORD_FAMILY_PENDING

    def attach_word_family_task(self, task: asyncio.Task) -> None:
        self._family_task = task
        self.state = LookupState.WORD_FAMILY_PENDING

    async def wait_word_family(self) -> Optional[WordFamilyResult]:
        """
        Wait for the background word-family derivation, if one was started.

        Returns:
            The attached WordFamilyResult, or None when no derivation runs
            for this result (phrases, Chinese queries)
        """
        if self._family_task is None:
            return self.word_family
        try:
            self.word_family = await self._family_task
        except asyncio.CancelledError:
            logger.debug(f"Word family derivation for {self.word} was cancelled")
            self.word_family = WordFamilyResult(word=self.word.lower())
        self._family_task = None
        self.state = LookupState.WORD_FAMILY_COMPLETE
        return self.word_family

    def to_dict(self) -> Dict:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "word": self.word,
            "script": self.script.value,
            "english_definitions": [
                entry.model_dump(by_alias=True) for entry in self.english_definitions
            ],
            "chinese_translation": (
                {
                    "primary": self.chinese_translation.primary,
                    "alternatives": self.chinese_translation.alternatives
                }
                if self.chinese_translation else None
            ),
            "etymology": self.etymology.to_dict() if self.etymology else None,
            "usage": self.usage.to_dict() if self.usage else None,
            "word_family": self.word_family.to_dict() if self.word_family else None,
            "is_phrase": self.is_phrase,
            "reverse": (
                {
                    "english_translation": self.reverse.english_translation,
                    "translation_words": self.reverse.translation_words,
                    "alternatives": self.reverse.alternatives
                }
                if self.reverse else None
            ),
            "state": self.state.value,
            "timestamp": self.timestamp.isoformat()
        }
