"""
Word Family Agent for morphologically related forms.

This module implements the FamilyAgent class. It generates candidate forms
of a word with suffix transformation rules, verifies every candidate
concurrently through an injected verifier, labels the survivors with a part
of speech and returns a small, deterministically ordered family.
"""

import asyncio
import re
from dataclasses import dataclass
from datetime import datetime
from itertools import zip_longest
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from loguru import logger

from easydict.config import FAMILY_CONFIG
from easydict.models.analysis_models import (
    PartOfSpeech,
    VerifiedForm,
    WordFamilyEntry,
    WordFamilyResult
)

WordVerifier = Callable[[str], Awaitable[Optional[VerifiedForm]]]

VOWELS = "aeiou"
# Short vowel followed by a single consonant that doubles (stop -> stopping)
DOUBLING_PATTERN = re.compile(r"(?:^|[^aeiou])[aeiou][bcdfgklmnprstvz]$")
CONSONANT_Y_PATTERN = re.compile(r"[^aeiou]y$")

# Endings that mark a word as already derived, with the base forms to try
DERIVED_ENDINGS: Sequence[Tuple[str, Sequence[str]]] = (
    ("tion", ("te", "t", "e")),
    ("ation", ("e", "")),
    ("ness", ("", "y")),
    ("ive", ("e", "ion", "")),
    ("ly", ("", "le", "y")),
)
# Shortest stem a derived ending may leave behind
MIN_STEM_LENGTH = 3
# Shortest restored base form worth verifying
MIN_BASE_LENGTH = 4


@dataclass(frozen=True)
class FormPattern:
    """Ending-based label for a verified form."""
    endings: Tuple[str, ...]
    label: str
    icon: str
    category: PartOfSpeech


# Checked in order; the first pattern whose ending matches and whose category
# agrees with the verifier wins
FORM_PATTERNS: Sequence[FormPattern] = (
    FormPattern(("ing",), "Present Participle", "V-ing", PartOfSpeech.VERB),
    FormPattern(("ed",), "Past Tense", "V-ed", PartOfSpeech.VERB),
    FormPattern(("est",), "Superlative", "Adj-est", PartOfSpeech.ADJECTIVE),
    FormPattern(("er",), "Comparative", "Adj-er", PartOfSpeech.ADJECTIVE),
    FormPattern(("er", "or", "ist", "ian", "ant"), "Noun (Person)", "N-er", PartOfSpeech.NOUN),
    FormPattern(("tion", "sion", "ment", "ness", "ity", "ance", "ence"), "Noun", "N", PartOfSpeech.NOUN),
    FormPattern(("ly",), "Adverb", "Adv", PartOfSpeech.ADVERB),
    FormPattern(("ive", "able", "ible", "al", "ful", "ous", "less"), "Adjective", "Adj", PartOfSpeech.ADJECTIVE),
)


def _drop_e(word: str) -> str:
    return word[:-1] if word.endswith("e") else word


def _y_to_i(word: str) -> str:
    return word[:-1] + "i" if CONSONANT_Y_PATTERN.search(word) else word


def _doubled(word: str) -> Optional[str]:
    if sum(ch in VOWELS for ch in word) == 1 and DOUBLING_PATTERN.search(word):
        return word + word[-1]
    return None


def generate_base_forms(word: str) -> List[str]:
    """Candidate base forms when `word` itself looks derived."""
    forms: List[str] = []
    for ending, restorations in DERIVED_ENDINGS:
        if not word.endswith(ending) or len(word) - len(ending) < MIN_STEM_LENGTH:
            continue
        stem = word[:-len(ending)]
        for restoration in restorations:
            if restoration == "y":
                if stem.endswith("i"):
                    forms.append(stem[:-1] + "y")  # happiness -> happy
                continue
            # creation -> "crea" + "e" is never a word
            if restoration and restoration[0] in VOWELS and stem[-1] in VOWELS:
                continue
            if len(stem) + len(restoration) >= MIN_BASE_LENGTH:
                forms.append(stem + restoration)
    return forms


def generate_verb_forms(word: str) -> List[str]:
    forms: List[str] = []
    doubled = _doubled(word)
    if word.endswith("ee"):
        forms.append(word + "ing")  # agree -> agreeing, agreed
        forms.append(word + "d")
    elif word.endswith("e"):
        forms.append(word[:-1] + "ing")
        forms.append(word + "d")
    elif CONSONANT_Y_PATTERN.search(word):
        forms.append(word + "ing")
        forms.append(word[:-1] + "ied")
    elif doubled:
        forms.append(doubled + "ing")
        forms.append(doubled + "ed")
    else:
        forms.append(word + "ing")
        forms.append(word + "ed")
    return forms


def generate_noun_forms(word: str) -> List[str]:
    forms: List[str] = []
    stem = _drop_e(word)
    if word.endswith("e"):
        forms.append(stem + "ion")
        forms.append(stem + "ation")
        forms.append(word + "ment")
        forms.append(stem + "ity")
        forms.append(word + "r")
        forms.append(stem + "or")
    else:
        forms.append(word + "tion")
        forms.append(word + "ation")
        forms.append(word + "ment")
        forms.append(_y_to_i(word) + "ness")
        forms.append(word + "ity")
        doubled = _doubled(word)
        forms.append((doubled or _y_to_i(word)) + "er")
        forms.append(word + "or")
    return forms


def generate_adjective_forms(word: str) -> List[str]:
    forms: List[str] = []
    stem = _drop_e(word)
    if word.endswith("ion"):
        forms.append(word[:-3] + "ive")
    forms.append(stem + "ive")
    forms.append(stem + "able")
    forms.append(stem + "al")
    forms.append(_y_to_i(word) + "ful")
    forms.append(stem + "ous")
    return forms


def generate_adverb_forms(word: str) -> List[str]:
    forms: List[str] = []
    if word.endswith("le"):
        forms.append(word[:-1] + "y")  # simple -> simply
    elif word.endswith("ic"):
        forms.append(word + "ally")
    elif CONSONANT_Y_PATTERN.search(word):
        forms.append(word[:-1] + "ily")
    else:
        forms.append(word + "ly")
    return forms


def generate_candidates(
    word: str,
    max_candidates: int = FAMILY_CONFIG["max_candidates"]
) -> List[str]:
    """
    Generate candidate related forms of a word.

    Base forms come first, then forward derivations interleaved across
    noun, verb, adjective and adverb rules so the cap does not starve
    any category.

    Args:
        word: A single word
        max_candidates: Upper bound on candidates returned

    Returns:
        Unique lowercased candidates, excluding the word itself
    """
    w = word.strip().lower()
    ordered: List[str] = generate_base_forms(w)

    groups = (
        generate_noun_forms(w),
        generate_verb_forms(w),
        generate_adjective_forms(w),
        generate_adverb_forms(w),
    )
    for row in zip_longest(*groups):
        ordered.extend(form for form in row if form)

    min_len = FAMILY_CONFIG["min_candidate_length"]
    max_len = FAMILY_CONFIG["max_candidate_length"]
    unique = [
        form for form in dict.fromkeys(ordered)
        if form != w and min_len <= len(form) <= max_len and form.isalpha()
    ]
    return unique[:max_candidates]


def classify_form(form: VerifiedForm) -> WordFamilyEntry:
    """
    Label a verified form.

    The ending-based label is used when it agrees with the verifier's
    category; otherwise the verifier's coarse category wins.
    """
    word = form.word.lower()
    for pattern in FORM_PATTERNS:
        if pattern.category != form.part_of_speech:
            continue
        if any(word.endswith(ending) and len(word) > len(ending) + 1 for ending in pattern.endings):
            return WordFamilyEntry(
                word=form.word,
                part_of_speech=pattern.label,
                icon=pattern.icon,
                sort_order=pattern.category.sort_order,
                category=pattern.category
            )
    category = form.part_of_speech
    return WordFamilyEntry(
        word=form.word,
        part_of_speech=category.label,
        icon=category.icon,
        sort_order=category.sort_order,
        category=category
    )


def select_forms(
    word: str,
    entries: Sequence[WordFamilyEntry],
    max_forms: int = FAMILY_CONFIG["max_forms"]
) -> List[WordFamilyEntry]:
    """
    Deduplicate, diversify, order and truncate classified forms.

    One form per part-of-speech category is taken first (in candidate
    order); remaining forms then fill the list up to `max_forms`. The
    result is sorted by category priority, ties keeping selection order.
    """
    seen = {word.lower()}
    unique: List[WordFamilyEntry] = []
    for entry in entries:
        key = entry.word.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(entry)

    chosen: List[WordFamilyEntry] = []
    categories = set()
    for entry in unique:
        if entry.category not in categories:
            categories.add(entry.category)
            chosen.append(entry)
    for entry in unique:
        if len(chosen) >= max_forms:
            break
        if entry not in chosen:
            chosen.append(entry)

    chosen.sort(key=lambda e: e.sort_order)
    return chosen[:max_forms]


class FamilyAgent:
    """
    Agent responsible for word-family derivation.

    Verification goes through an injected coroutine so the agent itself
    never touches the network. Verifier failures reject the candidate and
    never fail the derivation.
    """

    def __init__(
        self,
        max_candidates: int = FAMILY_CONFIG["max_candidates"],
        max_forms: int = FAMILY_CONFIG["max_forms"]
    ):
        self.max_candidates = max_candidates
        self.max_forms = max_forms

    async def fetch_word_family(self, word: str, verify: WordVerifier) -> WordFamilyResult:
        """
        Find verified related forms of a word.

        Args:
            word: The word to find relatives for; phrases yield an empty result
            verify: Coroutine confirming a candidate and its part of speech

        Returns:
            WordFamilyResult with at most `max_forms` entries
        """
        start_time = datetime.now()
        trimmed = word.strip().lower()

        if not trimmed or any(ch.isspace() for ch in trimmed):
            logger.debug(f"Skipping word family for phrase: {trimmed!r}")
            return WordFamilyResult(word=trimmed)

        candidates = generate_candidates(trimmed, self.max_candidates)
        logger.debug(f"Verifying {len(candidates)} candidate forms for {trimmed}")

        verified = await asyncio.gather(*(self._verify(verify, c) for c in candidates))

        entries = [classify_form(form) for form in verified if form is not None]
        forms = select_forms(trimmed, entries, self.max_forms)

        duration = (datetime.now() - start_time).total_seconds()
        logger.debug(
            f"Word family for {trimmed}: {len(forms)} of {len(candidates)} candidates "
            f"kept in {duration:.2f}s"
        )
        return WordFamilyResult(word=trimmed, forms=forms)

    async def _verify(self, verify: WordVerifier, candidate: str) -> Optional[VerifiedForm]:
        try:
            return await verify(candidate)
        except Exception as e:
            logger.debug(f"Verification failed for {candidate}: {str(e)}")
            return None


_default_agent = FamilyAgent()


async def fetch_word_family(word: str, verify: WordVerifier) -> WordFamilyResult:
    """Derive the family of `word` using the default limits."""
    return await _default_agent.fetch_word_family(word, verify)
