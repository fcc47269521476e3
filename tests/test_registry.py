import pytest

from algorithms.registry import PATTERN_REGISTRY, get_pattern, visualizers_for

SAMPLE_ARGS = {
    "binary-search": ([1, 2, 2, 4, 7], 2, "last"),
    "sliding-window": ([2, 1, 5, 1, 3, 2], 7),
    "substring-window": ("eceba", 2),
}


def test_every_step_points_at_a_code_line():
    for key, p in PATTERN_REGISTRY.items():
        steps = p.build_steps(*SAMPLE_ARGS[key])
        assert steps
        assert all(0 <= p.active_line(s) < len(p.code_lines) for s in steps)


def test_lookup():
    assert get_pattern("sliding-window").name == "Sliding Window"
    with pytest.raises(KeyError):
        get_pattern("two-pointers")


def test_visualizers_for_analyzer_ids():
    assert visualizers_for("binary_search") == ("binary-search",)
    assert visualizers_for("sliding_window") == ("sliding-window", "substring-window")
    assert visualizers_for("stack_monotonic") == ()
    assert visualizers_for(None) == ()
