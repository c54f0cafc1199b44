"""
Client-side stores for EasyDict.
"""

from easydict.storage.stores import (
    HistoryStore,
    JsonFileBackend,
    KnownWordsStore,
    NotebookStore,
    default_backend
)

__all__ = [
    'HistoryStore',
    'JsonFileBackend',
    'KnownWordsStore',
    'NotebookStore',
    'default_backend'
]
