"""
Data models for the EasyDict project.
"""

from easydict.models.analysis_models import (
    ComponentType,
    EtymologyAnalysis,
    MorphemeEntry,
    PartOfSpeech,
    ScenarioDescriptor,
    UsageAnalysis,
    UsageSuggestion,
    VerifiedForm,
    WordComponent,
    WordFamilyEntry,
    WordFamilyResult
)
from easydict.models.dictionary_models import (
    Definition,
    DictionaryEntry,
    Meaning,
    Phonetic,
    TranslationMatch,
    TranslationPayload
)
from easydict.models.lookup_models import (
    LookupResult,
    LookupState,
    ReverseTranslation,
    Script,
    TranslationResult
)

__all__ = [
    'ComponentType',
    'EtymologyAnalysis',
    'MorphemeEntry',
    'PartOfSpeech',
    'ScenarioDescriptor',
    'UsageAnalysis',
    'UsageSuggestion',
    'VerifiedForm',
    'WordComponent',
    'WordFamilyEntry',
    'WordFamilyResult',
    'Definition',
    'DictionaryEntry',
    'Meaning',
    'Phonetic',
    'TranslationMatch',
    'TranslationPayload',
    'LookupResult',
    'LookupState',
    'ReverseTranslation',
    'Script',
    'TranslationResult'
]
