"""Tests for word-family derivation."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from easydict.agents.family_agent import (
    FamilyAgent,
    classify_form,
    fetch_word_family,
    generate_candidates,
    select_forms
)
from easydict.errors import NetworkError
from easydict.models.analysis_models import PartOfSpeech, VerifiedForm, WordFamilyEntry

NOUN = PartOfSpeech.NOUN
VERB = PartOfSpeech.VERB
ADJ = PartOfSpeech.ADJECTIVE
ADV = PartOfSpeech.ADVERB

CREATE_FAMILY = {
    "creation": NOUN,
    "creator": NOUN,
    "creating": VERB,
    "created": VERB,
    "creative": ADJ,
}


def dictionary_verifier(known):
    async def verify(candidate):
        await asyncio.sleep(0)
        if candidate in known:
            return VerifiedForm(word=candidate, part_of_speech=known[candidate])
        return None
    return verify


class TestCandidateGeneration:

    def test_silent_e(self):
        candidates = generate_candidates("create")

        for form in ["creation", "creator", "creating", "created", "creative"]:
            assert form in candidates
        assert "create" not in candidates

    def test_consonant_y(self):
        candidates = generate_candidates("happy")

        assert "happiness" in candidates
        assert "happily" in candidates
        assert "happier" in candidates

    def test_final_consonant_doubling(self):
        candidates = generate_candidates("stop")

        assert "stopping" in candidates
        assert "stopped" in candidates
        assert "stopper" in candidates

    def test_no_doubling_for_two_vowel_words(self):
        candidates = generate_candidates("open")

        assert "opening" in candidates
        assert "openning" not in candidates

    def test_ee_verb_forms(self):
        agree = generate_candidates("agree")
        free = generate_candidates("free")

        assert "agreed" in agree
        assert "agreeing" in agree
        assert "agreeed" not in agree
        assert "freed" in free
        assert "freeing" in free

    def test_base_forms_skip_impossible_restorations(self):
        candidates = generate_candidates("creation")

        assert "create" in candidates
        assert "creae" not in candidates
        assert "cree" not in candidates
        assert "cre" not in candidates

    def test_base_forms_of_derived_words_come_first(self):
        assert "happy" in generate_candidates("happiness")[:2]
        assert "create" in generate_candidates("creation")
        assert "create" in generate_candidates("creative")
        assert "quick" in generate_candidates("quickly")

    def test_candidates_are_capped_and_unique(self):
        candidates = generate_candidates("nation", max_candidates=20)

        assert len(candidates) <= 20
        assert len(candidates) == len(set(candidates))
        assert all(c.isalpha() and 3 <= len(c) <= 19 for c in candidates)


class TestClassification:

    def test_pattern_label_when_consistent(self):
        assert classify_form(VerifiedForm("running", VERB)).part_of_speech == "Present Participle"
        assert classify_form(VerifiedForm("walked", VERB)).part_of_speech == "Past Tense"
        assert classify_form(VerifiedForm("bigger", ADJ)).part_of_speech == "Comparative"
        assert classify_form(VerifiedForm("biggest", ADJ)).part_of_speech == "Superlative"
        assert classify_form(VerifiedForm("teacher", NOUN)).part_of_speech == "Noun (Person)"
        assert classify_form(VerifiedForm("quickly", ADV)).part_of_speech == "Adverb"

    def test_verifier_category_wins_on_conflict(self):
        # "-ing" looks like a participle but the dictionary says adjective
        entry = classify_form(VerifiedForm("interesting", ADJ))

        assert entry.part_of_speech == "Adjective"
        assert entry.category == ADJ
        assert entry.sort_order == 3

    def test_coarse_label_without_pattern(self):
        entry = classify_form(VerifiedForm("run", VERB))

        assert entry.part_of_speech == "Verb"
        assert entry.icon == "V"


class TestSelection:

    def _entries(self, words):
        return [classify_form(VerifiedForm(w, pos)) for w, pos in words]

    def test_one_per_category_before_filling(self):
        nouns = [(f"noun{c}", NOUN) for c in "abcdefgh"]
        entries = self._entries(nouns + [("slowly", ADV)])

        forms = select_forms("slow", entries)

        assert len(forms) == 6
        assert forms[-1].word == "slowly"

    def test_excludes_original_word_case_insensitively(self):
        entries = self._entries([("Create", VERB), ("creation", NOUN), ("CREATION", NOUN)])

        forms = select_forms("create", entries)

        assert [f.word for f in forms] == ["creation"]

    def test_sorted_by_part_of_speech(self):
        entries = self._entries([("quickly", ADV), ("quicken", VERB), ("quickness", NOUN)])

        assert [f.word for f in select_forms("quick", entries)] == ["quickness", "quicken", "quickly"]

    def test_empty_input(self):
        assert select_forms("word", []) == []


@pytest.mark.asyncio
class TestFamilyAgent:

    async def test_create_family(self):
        result = await fetch_word_family("create", dictionary_verifier(CREATE_FAMILY))

        assert result.has_content
        assert [(f.word, f.part_of_speech) for f in result.forms] == [
            ("creation", "Noun"),
            ("creator", "Noun (Person)"),
            ("creating", "Present Participle"),
            ("created", "Past Tense"),
            ("creative", "Adjective"),
        ]

    async def test_never_includes_query_and_at_most_six(self):
        async def accept_all(candidate):
            return VerifiedForm(word=candidate, part_of_speech=NOUN)

        for word in ["creation", "Happy", "stop", "nation"]:
            result = await fetch_word_family(word, accept_all)
            assert len(result.forms) <= 6
            assert word.lower() not in [f.word.lower() for f in result.forms]

    async def test_all_rejected_is_empty(self):
        verify = AsyncMock(return_value=None)

        result = await fetch_word_family("create", verify)

        assert result.has_content is False
        assert result.forms == []

    async def test_verifier_errors_are_swallowed(self):
        verify = AsyncMock(side_effect=NetworkError("offline"))

        result = await fetch_word_family("create", verify)

        assert result.has_content is False

    async def test_partial_failures_do_not_affect_others(self):
        good = dictionary_verifier(CREATE_FAMILY)

        async def flaky(candidate):
            if candidate == "creator":
                raise NetworkError("timeout")
            return await good(candidate)

        result = await fetch_word_family("create", flaky)

        assert "creator" not in [f.word for f in result.forms]
        assert "creation" in [f.word for f in result.forms]

    async def test_every_candidate_verified(self):
        verify = AsyncMock(return_value=None)

        await FamilyAgent().fetch_word_family("create", verify)

        assert verify.await_count == len(generate_candidates("create"))

    async def test_order_independent_of_completion_order(self):
        known = dict(CREATE_FAMILY)

        async def slow_first(candidate):
            # Earlier candidates settle later
            await asyncio.sleep(0.01 if candidate in ("creation", "creating") else 0)
            if candidate in known:
                return VerifiedForm(word=candidate, part_of_speech=known[candidate])
            return None

        fast = await fetch_word_family("create", dictionary_verifier(CREATE_FAMILY))
        slow = await fetch_word_family("create", slow_first)

        assert [f.word for f in slow.forms] == [f.word for f in fast.forms]

    async def test_phrase_short_circuits(self):
        verify = AsyncMock(return_value=None)

        result = await fetch_word_family("piece of cake", verify)

        assert result.forms == []
        verify.assert_not_awaited()

    async def test_max_forms_is_configurable(self):
        result = await FamilyAgent(max_forms=2).fetch_word_family(
            "create", dictionary_verifier(CREATE_FAMILY)
        )

        assert len(result.forms) == 2
        assert isinstance(result.forms[0], WordFamilyEntry)
