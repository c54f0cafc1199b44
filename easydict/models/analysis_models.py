"""
Data models for the word-analysis pipeline.

This module contains the structures produced by the etymology segmenter,
the usage classifier and the word-family deriver. All of them are built
fresh per lookup; only MorphemeEntry and ScenarioDescriptor are static.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional


class ComponentType(Enum):
    """Position of a morpheme within a word."""
    PREFIX = "prefix"
    ROOT = "root"
    SUFFIX = "suffix"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def chinese_label(self) -> str:
        return {"prefix": "前缀", "root": "词根", "suffix": "后缀"}[self.value]


@dataclass(frozen=True)
class MorphemeEntry:
    """
    A curated prefix, root or suffix.

    Attributes:
        pattern: Literal spelling matched against words
        gloss: English meaning
        gloss_zh: Chinese meaning
    """
    pattern: str
    gloss: str
    gloss_zh: str


@dataclass(frozen=True)
class WordComponent:
    """A morpheme found in a specific word."""
    text: str
    kind: ComponentType
    gloss: str
    gloss_zh: str

    @classmethod
    def from_entry(cls, entry: MorphemeEntry, kind: ComponentType) -> 'WordComponent':
        return cls(text=entry.pattern, kind=kind, gloss=entry.gloss, gloss_zh=entry.gloss_zh)

    def to_dict(self) -> Dict[str, str]:
        return {
            "text": self.text,
            "kind": self.kind.value,
            "gloss": self.gloss,
            "gloss_zh": self.gloss_zh
        }


@dataclass
class EtymologyAnalysis:
    """
    Prefix/root/suffix breakdown of a word.

    Attributes:
        word: The analyzed word (lowercased)
        components: Morphemes in left-to-right order
        origin: Free-text origin reported by the dictionary, if any
    """
    word: str
    components: List[WordComponent] = field(default_factory=list)
    origin: Optional[str] = None

    @property
    def has_content(self) -> bool:
        return bool(self.components) or self.origin is not None

    def get_components_by_kind(self, kind: ComponentType) -> List[WordComponent]:
        return [c for c in self.components if c.kind == kind]

    @property
    def root(self) -> Optional[WordComponent]:
        roots = self.get_components_by_kind(ComponentType.ROOT)
        return roots[0] if roots else None

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "components": [c.to_dict() for c in self.components],
            "origin": self.origin,
            "has_content": self.has_content
        }


@dataclass(frozen=True)
class ScenarioDescriptor:
    """
    A communicative register with its own vocabulary fit-list.

    Attributes:
        key: Stable identifier
        label: English display name
        label_zh: Chinese display name
        icon: Short display glyph
        description: What the register covers
        words: Lowercased words that fit the register
        substitutions: Word -> better-fitting alternative for this register
    """
    key: str
    label: str
    label_zh: str
    icon: str
    description: str
    words: FrozenSet[str]
    substitutions: Dict[str, str] = field(default_factory=dict, hash=False)


@dataclass
class UsageSuggestion:
    scenario: ScenarioDescriptor
    is_appropriate: bool
    suggested_word: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "scenario": self.scenario.key,
            "label": self.scenario.label,
            "is_appropriate": self.is_appropriate,
            "suggested_word": self.suggested_word
        }


@dataclass
class UsageAnalysis:
    """
    Register fit of a word across every configured scenario.

    Attributes:
        word: The analyzed word (lowercased)
        suggestions: One entry per scenario, in scenario table order
        has_content: Whether any scenario matched or offered a substitute
    """
    word: str
    suggestions: List[UsageSuggestion] = field(default_factory=list)
    has_content: bool = False

    def sorted_suggestions(self) -> List[UsageSuggestion]:
        """Appropriate scenarios first, otherwise stable."""
        return sorted(self.suggestions, key=lambda s: not s.is_appropriate)

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "suggestions": [s.to_dict() for s in self.suggestions],
            "has_content": self.has_content
        }


class PartOfSpeech(Enum):
    """Coarse word-family categories, in display priority order."""
    NOUN = ("Noun", "N", 1)
    VERB = ("Verb", "V", 2)
    ADJECTIVE = ("Adjective", "Adj", 3)
    ADVERB = ("Adverb", "Adv", 4)

    def __init__(self, label: str, icon: str, sort_order: int):
        self.label = label
        self.icon = icon
        self.sort_order = sort_order

    @classmethod
    def from_provider(cls, value: Optional[str]) -> Optional['PartOfSpeech']:
        """Map a provider part-of-speech string; unknown categories map to None."""
        if not value:
            return None
        return _PROVIDER_POS.get(value.strip().lower())


_PROVIDER_POS = {
    "noun": PartOfSpeech.NOUN,
    "verb": PartOfSpeech.VERB,
    "participle": PartOfSpeech.VERB,
    "adjective": PartOfSpeech.ADJECTIVE,
    "adverb": PartOfSpeech.ADVERB,
}


@dataclass(frozen=True)
class VerifiedForm:
    """A candidate confirmed by the dictionary, with its dominant part of speech."""
    word: str
    part_of_speech: PartOfSpeech


@dataclass
class WordFamilyEntry:
    word: str
    part_of_speech: str
    icon: str
    sort_order: int
    category: PartOfSpeech = PartOfSpeech.NOUN

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "part_of_speech": self.part_of_speech,
            "icon": self.icon,
            "sort_order": self.sort_order
        }


@dataclass
class WordFamilyResult:
    word: str
    forms: List[WordFamilyEntry] = field(default_factory=list)

    @property
    def has_content(self) -> bool:
        return len(self.forms) > 0

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "forms": [f.to_dict() for f in self.forms],
            "has_content": self.has_content
        }
