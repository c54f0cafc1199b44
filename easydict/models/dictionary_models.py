"""
Schemas for payloads returned by the external dictionary and translation APIs.

These models validate provider JSON at the adapter boundary so the analyzers
can rely on well-typed entries. Unknown fields are ignored; missing optional
fields fall back to empty values.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderModel(BaseModel):
    """
    Common base for provider payload schemas.

    - ignore extra fields, providers add keys without notice
    - populate by field name so tests and stubs can use snake_case
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Phonetic(ProviderModel):
    text: Optional[str] = None
    audio: Optional[str] = None


class Definition(ProviderModel):
    definition: str
    example: Optional[str] = None
    synonyms: List[str] = Field(default_factory=list)
    antonyms: List[str] = Field(default_factory=list)


class Meaning(ProviderModel):
    part_of_speech: str = Field(alias="partOfSpeech")
    definitions: List[Definition] = Field(default_factory=list)
    synonyms: List[str] = Field(default_factory=list)
    antonyms: List[str] = Field(default_factory=list)


class DictionaryEntry(ProviderModel):
    """
    One headword entry from the definitions API.

    Attributes:
        word: Headword as reported by the provider
        phonetic: Preferred phonetic transcription, if any
        phonetics: All transcriptions with optional audio URLs
        origin: Free-text etymology, if the provider has one
        meanings: Senses grouped by part of speech
    """

    word: str
    phonetic: Optional[str] = None
    phonetics: List[Phonetic] = Field(default_factory=list)
    origin: Optional[str] = None
    meanings: List[Meaning] = Field(default_factory=list)

    def phonetic_text(self) -> str:
        """Preferred transcription, or the first non-blank one from `phonetics`."""
        if self.phonetic:
            return self.phonetic
        for phonetic in self.phonetics:
            if phonetic.text and phonetic.text.strip():
                return phonetic.text
        return ""

    def best_audio_url(self) -> Optional[str]:
        """US pronunciation audio if present, otherwise any audio."""
        for phonetic in self.phonetics:
            if phonetic.audio and ("-us" in phonetic.audio or "/us/" in phonetic.audio):
                return phonetic.audio
        for phonetic in self.phonetics:
            if phonetic.audio and phonetic.audio.strip():
                return phonetic.audio
        return None

    def all_synonyms(self) -> List[str]:
        """Meaning-level and definition-level synonyms, first-seen order."""
        synonyms = {}
        for meaning in self.meanings:
            for synonym in meaning.synonyms:
                synonyms.setdefault(synonym, None)
            for definition in meaning.definitions:
                for synonym in definition.synonyms:
                    synonyms.setdefault(synonym, None)
        return list(synonyms)

    @property
    def primary_part_of_speech(self) -> Optional[str]:
        if not self.meanings:
            return None
        return self.meanings[0].part_of_speech.lower()


class TranslationMatch(ProviderModel):
    translation: Optional[str] = None
    quality: Optional[float] = None


class TranslationPayload(ProviderModel):
    """
    Normalised translation response.

    Attributes:
        primary: The provider's preferred translation
        matches: Translation-memory matches with a quality score (0-100)
    """

    primary: str
    matches: List[TranslationMatch] = Field(default_factory=list)


class ResponseData(ProviderModel):
    translated_text: str = Field(alias="translatedText")


class MyMemoryResponse(ProviderModel):
    """Raw MyMemory `/get` response body."""

    response_data: ResponseData = Field(alias="responseData")
    matches: List[TranslationMatch] = Field(default_factory=list)

    def to_payload(self) -> TranslationPayload:
        return TranslationPayload(
            primary=self.response_data.translated_text,
            matches=self.matches
        )


class DatamuseWord(ProviderModel):
    word: str
    score: Optional[int] = None
