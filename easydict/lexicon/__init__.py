"""
Curated morpheme tables and usage scenarios.
"""

from easydict.lexicon.morphemes import (
    PREFIXES,
    ROOTS,
    SORTED_PREFIXES,
    SORTED_ROOTS,
    SORTED_SUFFIXES,
    SUFFIXES
)
from easydict.lexicon.scenarios import SCENARIOS

__all__ = [
    'PREFIXES',
    'ROOTS',
    'SUFFIXES',
    'SORTED_PREFIXES',
    'SORTED_ROOTS',
    'SORTED_SUFFIXES',
    'SCENARIOS'
]
