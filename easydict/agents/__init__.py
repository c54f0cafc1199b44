"""
Agent modules for EasyDict.

This module provides the provider adapters and the word-analysis agents.
"""

from easydict.agents.data_sources import (
    AssociationSource,
    DatamuseSource,
    DefinitionSource,
    FreeDictionarySource,
    MyMemorySource,
    TranslationSource
)
from easydict.agents.family_agent import FamilyAgent
from easydict.agents.root_agent import RootAgent
from easydict.agents.usage_agent import UsageAgent

__all__ = [
    'AssociationSource',
    'DatamuseSource',
    'DefinitionSource',
    'FreeDictionarySource',
    'MyMemorySource',
    'TranslationSource',
    'FamilyAgent',
    'RootAgent',
    'UsageAgent'
]
