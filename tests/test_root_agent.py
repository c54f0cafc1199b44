"""Tests for prefix/root/suffix segmentation."""

from easydict.agents.root_agent import RootAgent, analyze_etymology
from easydict.models.analysis_models import ComponentType, MorphemeEntry


def _texts(analysis):
    return [(c.text, c.kind) for c in analysis.components]


def test_prefix_root_suffix_in_word_order():
    analysis = analyze_etymology("unbelievable")

    assert _texts(analysis) == [
        ("un", ComponentType.PREFIX),
        ("believ", ComponentType.ROOT),
        ("able", ComponentType.SUFFIX),
    ]
    assert analysis.has_content


def test_unhappiness_root_between_affixes():
    analysis = analyze_etymology("unhappiness", None)
    kinds = [c.kind for c in analysis.components]

    assert kinds == [ComponentType.PREFIX, ComponentType.ROOT, ComponentType.SUFFIX]
    assert analysis.components[0].text == "un"
    assert analysis.components[1].text.startswith("hap")
    assert analysis.components[2].text == "ness"


def test_suffixes_returned_innermost_first():
    analysis = analyze_etymology("carefulness")
    suffixes = analysis.get_components_by_kind(ComponentType.SUFFIX)

    assert [s.text for s in suffixes] == ["ful", "ness"]
    assert analysis.components[-2:] == suffixes


def test_no_match_has_no_content():
    analysis = analyze_etymology("zzzz")

    assert analysis.components == []
    assert analysis.has_content is False


def test_origin_alone_gives_content():
    analysis = analyze_etymology("zzzz", origin="onomatopoeic")

    assert analysis.components == []
    assert analysis.has_content is True


def test_at_most_two_prefixes_and_suffixes():
    for word in ["reintroduction", "antidisestablishmentarianism", "uncomfortableness", "misunderstanding"]:
        analysis = analyze_etymology(word)
        assert len(analysis.get_components_by_kind(ComponentType.PREFIX)) <= 2
        assert len(analysis.get_components_by_kind(ComponentType.SUFFIX)) <= 2
        assert len(analysis.get_components_by_kind(ComponentType.ROOT)) <= 1


def test_idempotent():
    first = analyze_etymology("international", "from inter- + national")
    second = analyze_etymology("international", "from inter- + national")

    assert first == second


def test_phrase_and_blank_input_are_empty():
    assert analyze_etymology("piece of cake").has_content is False
    assert analyze_etymology("   ").components == []


def test_prefix_requires_three_remaining_characters():
    agent = RootAgent(
        prefixes=[MorphemeEntry("re", "again", "再")],
        roots=[],
        suffixes=[]
    )

    assert agent.analyze("redo").components == []
    assert [c.text for c in agent.analyze("remake").components] == ["re"]


def test_equal_length_patterns_resolved_by_table_order():
    first = MorphemeEntry("ab", "first", "一")
    second = MorphemeEntry("ab", "second", "二")
    agent = RootAgent(prefixes=[first, second], roots=[], suffixes=[])

    assert agent.analyze("abcdef").components[0].gloss == "first"


def test_root_falls_back_to_whole_word():
    # Suffix stripping leaves "bo", which holds no root; the root is then
    # found in the full word
    agent = RootAgent(
        prefixes=[],
        roots=[MorphemeEntry("boat", "boat", "船")],
        suffixes=[MorphemeEntry("at", "suffix", "后缀")]
    )
    analysis = agent.analyze("boat")

    assert [(c.text, c.kind) for c in analysis.components] == [
        ("boat", ComponentType.ROOT),
        ("at", ComponentType.SUFFIX),
    ]
