"""Tests for register classification."""

from easydict.agents.usage_agent import UsageAgent, analyze_usage
from easydict.lexicon.scenarios import SCENARIOS
from easydict.models.analysis_models import ScenarioDescriptor


def _by_key(analysis):
    return {s.scenario.key: s for s in analysis.suggestions}


def test_one_suggestion_per_scenario():
    for word in ["hello", "utilize", "xyzzy", "Purchase"]:
        analysis = analyze_usage(word)
        assert [s.scenario for s in analysis.suggestions] == list(SCENARIOS)


def test_hello_is_casual_with_formal_substitute():
    suggestions = _by_key(analyze_usage("Hello"))

    assert suggestions["casual"].is_appropriate
    assert suggestions["social_media"].is_appropriate
    assert not suggestions["formal"].is_appropriate
    assert suggestions["formal"].suggested_word == "greetings"
    assert suggestions["business"].suggested_word == "greetings"
    assert suggestions["academic"].suggested_word is None


def test_appropriate_scenarios_have_no_suggestion():
    analysis = analyze_usage("utilize")

    for suggestion in analysis.suggestions:
        if suggestion.is_appropriate:
            assert suggestion.suggested_word is None
    assert _by_key(analysis)["casual"].suggested_word == "use"


def test_unknown_word_has_no_content():
    analysis = analyze_usage("xyzzy")

    assert analysis.has_content is False
    assert all(not s.is_appropriate and s.suggested_word is None for s in analysis.suggestions)


def test_synonyms_count_towards_appropriateness():
    analysis = analyze_usage("joyful", ["Happy"])
    suggestions = _by_key(analysis)

    assert suggestions["casual"].is_appropriate
    assert suggestions["social_media"].is_appropriate
    assert analysis.has_content


def test_strict_mode_ignores_synonyms():
    agent = UsageAgent(include_synonyms=False)
    analysis = agent.analyze("joyful", ["happy"])

    assert not any(s.is_appropriate for s in analysis.suggestions)
    assert analysis.has_content is False


def test_sorted_suggestions_put_appropriate_first():
    ordered = analyze_usage("hello").sorted_suggestions()
    flags = [s.is_appropriate for s in ordered]

    assert flags == sorted(flags, reverse=True)
    assert [s.scenario.key for s in ordered[:2]] == ["casual", "social_media"]


def test_custom_scenarios():
    scenario = ScenarioDescriptor(
        key="legal",
        label="Legal",
        label_zh="法律",
        icon="L",
        description="Contracts",
        words=frozenset({"hereby"}),
        substitutions={"now": "hereby"}
    )
    analysis = UsageAgent(scenarios=[scenario]).analyze("now")

    assert len(analysis.suggestions) == 1
    assert analysis.suggestions[0].suggested_word == "hereby"
    assert analysis.has_content
