"""
EasyDict: an English-Chinese dictionary with etymology, usage and word-family analysis.
"""

__version__ = "1.0.0"

from easydict.agents.family_agent import fetch_word_family
from easydict.agents.root_agent import analyze_etymology
from easydict.agents.usage_agent import analyze_usage
from easydict.errors import DictionaryError, ErrorKind, StorageError
from easydict.pipeline import LookupPipeline, is_chinese

__all__ = [
    'DictionaryError',
    'ErrorKind',
    'LookupPipeline',
    'StorageError',
    'analyze_etymology',
    'analyze_usage',
    'fetch_word_family',
    'is_chinese'
]
