"""
Root Analysis Agent for prefix/root/suffix decomposition.

This module implements the RootAgent class, responsible for breaking a
single word into its morphological components using greedy longest-match
segmentation over the curated morpheme tables. It performs no I/O.
"""

from typing import List, Optional, Sequence, Tuple

from loguru import logger

from easydict.config import ETYMOLOGY_CONFIG
from easydict.lexicon.morphemes import SORTED_PREFIXES, SORTED_ROOTS, SORTED_SUFFIXES
from easydict.models.analysis_models import (
    ComponentType,
    EtymologyAnalysis,
    MorphemeEntry,
    WordComponent
)


class RootAgent:
    """
    Agent responsible for etymological decomposition of words.

    Prefixes are stripped from the front first, suffixes from the tail of
    what remains, and a single root is then searched inside the leftover
    window (falling back to the whole word). Equal-length patterns are
    resolved by table order.
    """

    def __init__(
        self,
        prefixes: Sequence[MorphemeEntry] = SORTED_PREFIXES,
        roots: Sequence[MorphemeEntry] = SORTED_ROOTS,
        suffixes: Sequence[MorphemeEntry] = SORTED_SUFFIXES,
        max_prefixes: int = ETYMOLOGY_CONFIG["max_prefixes"],
        max_suffixes: int = ETYMOLOGY_CONFIG["max_suffixes"],
        min_prefix_remainder: int = ETYMOLOGY_CONFIG["min_prefix_remainder"],
        min_suffix_remainder: int = ETYMOLOGY_CONFIG["min_suffix_remainder"]
    ):
        """
        Initialize the root agent.

        Args:
            prefixes: Prefix table, longest patterns first
            roots: Root table, longest patterns first
            suffixes: Suffix table, longest patterns first
            max_prefixes: Maximum number of prefixes to strip
            max_suffixes: Maximum number of suffixes to strip
            min_prefix_remainder: Characters that must remain after a prefix
            min_suffix_remainder: Characters that must remain after a suffix
        """
        self.prefixes = prefixes
        self.roots = roots
        self.suffixes = suffixes
        self.max_prefixes = max_prefixes
        self.max_suffixes = max_suffixes
        self.min_prefix_remainder = min_prefix_remainder
        self.min_suffix_remainder = min_suffix_remainder

    def analyze(self, word: str, origin: Optional[str] = None) -> EtymologyAnalysis:
        """
        Decompose a word into prefixes, a root and suffixes.

        Args:
            word: A single token; phrases yield an empty analysis
            origin: Free-text origin from the dictionary entry

        Returns:
            EtymologyAnalysis with components in left-to-right order
        """
        lowercased = word.strip().lower()
        if not lowercased or any(ch.isspace() for ch in lowercased):
            logger.debug(f"Skipping etymology for non-word input: {word!r}")
            return EtymologyAnalysis(word=lowercased, origin=origin)

        prefixes, remaining = self._strip_prefixes(lowercased)
        suffixes, remaining = self._strip_suffixes(remaining)

        root = self._find_root(remaining) or self._find_root(lowercased)

        components: List[WordComponent] = list(prefixes)
        if root:
            components.append(root)
        components.extend(suffixes)

        logger.debug(
            f"Etymology for {lowercased}: "
            f"{' + '.join(c.text for c in components) or '(no match)'}"
        )
        return EtymologyAnalysis(word=lowercased, components=components, origin=origin)

    def _strip_prefixes(self, word: str) -> Tuple[List[WordComponent], str]:
        found = []
        remaining = word
        while len(found) < self.max_prefixes:
            match = self._match_prefix(remaining)
            if not match:
                break
            found.append(WordComponent.from_entry(match, ComponentType.PREFIX))
            remaining = remaining[len(match.pattern):]
        return found, remaining

    def _match_prefix(self, window: str) -> Optional[MorphemeEntry]:
        for entry in self.prefixes:
            if (window.startswith(entry.pattern)
                    and len(window) - len(entry.pattern) >= self.min_prefix_remainder):
                return entry
        return None

    def _strip_suffixes(self, word: str) -> Tuple[List[WordComponent], str]:
        # Collected outermost first, returned in word order
        found = []
        remaining = word
        while len(found) < self.max_suffixes:
            match = self._match_suffix(remaining)
            if not match:
                break
            found.insert(0, WordComponent.from_entry(match, ComponentType.SUFFIX))
            remaining = remaining[:-len(match.pattern)]
        return found, remaining

    def _match_suffix(self, window: str) -> Optional[MorphemeEntry]:
        for entry in self.suffixes:
            if (window.endswith(entry.pattern)
                    and len(window) - len(entry.pattern) >= self.min_suffix_remainder):
                return entry
        return None

    def _find_root(self, window: str) -> Optional[WordComponent]:
        for entry in self.roots:
            if entry.pattern in window:
                return WordComponent.from_entry(entry, ComponentType.ROOT)
        return None


_default_agent = RootAgent()


def analyze_etymology(word: str, origin: Optional[str] = None) -> EtymologyAnalysis:
    """Decompose `word` with the default morpheme tables."""
    return _default_agent.analyze(word, origin)
