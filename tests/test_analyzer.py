from services.analyzer import (
    FALLBACK_REASONS,
    UNKNOWN_PATTERN,
    analyze_problem,
    confidence_for,
    list_patterns,
)
from services.rules import KEYWORD, PATTERNS, PatternDefinition, Rule


def test_no_signals_falls_back():
    for text in ("", "hello world", "the array is unsorted"):
        res = analyze_problem(text)
        assert res.best_pattern_name == UNKNOWN_PATTERN
        assert res.best_pattern_id is None
        assert res.confidence == 0
        assert res.top_reasons == FALLBACK_REASONS
        assert [p.pattern_name for p in res.debug_top3] == [
            "Sliding Window", "Two Pointers", "Hash Map / Frequency Counting",
        ]
        assert all(p.raw_score == 0 and p.confidence == 0 for p in res.debug_top3)


def test_sorted_first_index_prefers_binary_search():
    res = analyze_problem("Given a sorted array, find the first index...")
    assert res.best_pattern_id == "binary_search"
    assert res.best_pattern_name == "Binary Search"
    # bs_sorted (6) + bs_boundary (4) against a hint of 16 -> 62.5, rounded half up
    assert res.confidence == confidence_for(10, 16) == 63
    assert [(p.pattern_name, p.raw_score) for p in res.debug_top3] == [
        ("Binary Search", 10), ("Two Pointers", 6), ("Sliding Window", 0),
    ]
    assert res.debug_top3[1].confidence == 38
    assert res.top_reasons[0].startswith("Sorted input → binary search")
    assert res.top_reasons[1].startswith("Boundary language")


def test_ties_keep_table_order():
    res = analyze_problem("The input is SORTED.")
    assert res.best_pattern_id == "two_pointers"
    assert res.debug_top3[1].pattern_name == "Binary Search"


def test_confidence_saturates():
    res = analyze_problem(
        "Find the longest contiguous subarray or substring with at most k distinct characters."
    )
    assert res.best_pattern_id == "sliding_window"
    assert res.debug_top3[0].raw_score == 26
    assert res.confidence == 100
    assert len(res.top_reasons) == 3
    assert "subarray" in res.top_reasons[0]
    assert "substring" in res.top_reasons[1]
    assert "contiguous" in res.top_reasons[2]


def test_bare_regex_matches_inside_words():
    # "node" is a bare regex, so "nodes" still matches it
    res = analyze_problem("Count the nodes")
    assert res.best_pattern_id == "linked_list_simulation"


def test_deterministic():
    text = "Return the number of ways to partition the string"
    assert analyze_problem(text) == analyze_problem(text)
    assert analyze_problem(text).best_pattern_id == "dynamic_programming"


def test_list_patterns_mirrors_table():
    listed = list_patterns()
    assert [p["id"] for p in listed] == [p.id for p in PATTERNS]
    assert all(r["weight"] > 0 for p in listed for r in p["rules"])


def test_keyword_literal_is_escaped():
    table = (PatternDefinition("dotted", "Dotted", 4, (Rule("r", KEYWORD, "a.b", 4, "Literal a.b"),)),)
    assert analyze_problem("see a.b here", patterns=table).confidence == 100
    assert analyze_problem("see axb here", patterns=table).best_pattern_id is None


def test_word_boundaries_are_ascii():
    # é is not a word character for \b, so "sorted" still stands alone
    res = analyze_problem("sortedé")
    assert res.best_pattern_id == "two_pointers"
    assert res.debug_top3[1].pattern_name == "Binary Search"
    assert res.debug_top3[1].raw_score == 6
