"""
Usage Agent for register (formality) classification.

Checks a word, and optionally its synonyms, against each scenario's curated
vocabulary and proposes a substitute where the word does not fit.
"""

from typing import Iterable, List, Optional, Sequence

from loguru import logger

from easydict.lexicon.scenarios import SCENARIOS
from easydict.models.analysis_models import ScenarioDescriptor, UsageAnalysis, UsageSuggestion


class UsageAgent:
    """
    Agent responsible for classifying a word against usage scenarios.

    A scenario is appropriate when the lowercased word is in its word set or,
    with `include_synonyms` (the default), when any of the supplied synonyms
    is. Every scenario always yields exactly one suggestion.
    """

    def __init__(
        self,
        scenarios: Sequence[ScenarioDescriptor] = SCENARIOS,
        include_synonyms: bool = True
    ):
        self.scenarios = scenarios
        self.include_synonyms = include_synonyms

    def analyze(self, word: str, synonyms: Optional[Iterable[str]] = None) -> UsageAnalysis:
        """
        Classify a word across all scenarios.

        Args:
            word: Word to classify
            synonyms: Synonyms reported by the dictionary entry

        Returns:
            UsageAnalysis with one suggestion per scenario, in table order
        """
        lowercased = word.strip().lower()
        candidates = {lowercased}
        if self.include_synonyms and synonyms:
            candidates.update(s.strip().lower() for s in synonyms if s and s.strip())

        suggestions: List[UsageSuggestion] = []
        determined = False
        for scenario in self.scenarios:
            is_appropriate = not scenario.words.isdisjoint(candidates)
            suggested = None if is_appropriate else scenario.substitutions.get(lowercased)
            determined = determined or is_appropriate or suggested is not None
            suggestions.append(UsageSuggestion(
                scenario=scenario,
                is_appropriate=is_appropriate,
                suggested_word=suggested
            ))

        logger.debug(
            f"Usage for {lowercased}: "
            f"{[s.scenario.key for s in suggestions if s.is_appropriate]} appropriate"
        )
        return UsageAnalysis(word=lowercased, suggestions=suggestions, has_content=determined)


_default_agent = UsageAgent()


def analyze_usage(word: str, synonyms: Optional[Iterable[str]] = None) -> UsageAnalysis:
    """Classify `word` against the built-in scenarios."""
    return _default_agent.analyze(word, synonyms)
