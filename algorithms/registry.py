from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from algorithms.binary_search import (
    BINARY_SEARCH_CODE,
    binary_search_active_line,
    build_binary_search_steps,
)
from algorithms.sliding_window import (
    SLIDING_WINDOW_CODE,
    build_sliding_window_steps,
    sliding_window_active_line,
)
from algorithms.substring_window import (
    SUBSTRING_WINDOW_CODE,
    build_substring_window_steps,
    substring_window_active_line,
)


@dataclass(frozen=True)
class VisualizerPattern:
    key: str
    name: str
    subtitle: str
    code_lines: Tuple[str, ...]
    build_steps: Callable[..., tuple]
    active_line: Callable[..., int]


PATTERN_REGISTRY: Dict[str, VisualizerPattern] = {
    "binary-search": VisualizerPattern(
        key="binary-search",
        name="Binary Search",
        subtitle="Find target in a sorted array by shrinking lo..hi.",
        code_lines=BINARY_SEARCH_CODE,
        build_steps=build_binary_search_steps,
        active_line=binary_search_active_line,
    ),
    "sliding-window": VisualizerPattern(
        key="sliding-window",
        name="Sliding Window",
        subtitle="Maintain a window where sum ≤ k (shrink when invalid).",
        code_lines=SLIDING_WINDOW_CODE,
        build_steps=build_sliding_window_steps,
        active_line=sliding_window_active_line,
    ),
    "substring-window": VisualizerPattern(
        key="substring-window",
        name="Substring Window",
        subtitle="Longest substring with at most k distinct characters.",
        code_lines=SUBSTRING_WINDOW_CODE,
        build_steps=build_substring_window_steps,
        active_line=substring_window_active_line,
    ),
}

# analyzer pattern id -> visualizers that demonstrate it
_VISUALIZERS_BY_ANALYZER_ID = {
    "binary_search": ("binary-search",),
    "sliding_window": ("sliding-window", "substring-window"),
}


def get_pattern(key: str) -> VisualizerPattern:
    return PATTERN_REGISTRY[key]


def visualizers_for(analyzer_pattern_id) -> Tuple[str, ...]:
    return _VISUALIZERS_BY_ANALYZER_ID.get(analyzer_pattern_id, ())
