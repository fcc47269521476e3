# services/rules.py
"""
Static rule table for the pattern analyzer.

Each pattern carries weighted keyword/regex rules. max_score_hint is a
hand-picked "strong match" score used to turn a raw score into 0..100; it is
not derived from the weights.
"""

from dataclasses import dataclass
from typing import Tuple

KEYWORD = "keyword"
REGEX = "regex"


@dataclass(frozen=True)
class Rule:
    id: str
    kind: str  # KEYWORD or REGEX
    pattern: str
    weight: int
    reason: str


@dataclass(frozen=True)
class PatternDefinition:
    id: str
    display_name: str
    max_score_hint: int
    rules: Tuple[Rule, ...]


PATTERNS: Tuple[PatternDefinition, ...] = (
    PatternDefinition("sliding_window", "Sliding Window", 18, (
        Rule("sw_subarray", KEYWORD, "subarray", 5,
             "Mentions subarray → contiguous segment problems often fit sliding window."),
        Rule("sw_substring", KEYWORD, "substring", 5,
             "Mentions substring → classic signal for a window over a string."),
        Rule("sw_contiguous", KEYWORD, "contiguous", 4,
             "Uses 'contiguous' → strongly points to expanding/shrinking a window."),
        Rule("sw_longest", REGEX, r"\blongest\b|\bmaximum length\b", 4,
             "Asks for longest/max length under a condition → typical sliding window goal."),
        Rule("sw_shortest", REGEX, r"\bshortest\b|\bminimum window\b|\bmin window\b", 4,
             "Asks for shortest/min window → direct sliding window indicator."),
        Rule("sw_atmost_exactly", REGEX, r"\bat most\b|\bat least\b|\bexactly\b|\bno more than\b", 4,
             "Phrases like at most/exactly → maintain condition and adjust pointers."),
        Rule("sw_k_distinct", REGEX, r"\bk distinct\b|\bdistinct characters\b|\bdistinct elements\b", 4,
             "K distinct constraint → sliding window + frequency map is standard."),
    )),
    PatternDefinition("two_pointers", "Two Pointers", 16, (
        Rule("tp_sorted", KEYWORD, "sorted", 6,
             "Sorted input → two pointers can scan from both ends in O(n)."),
        Rule("tp_two_sum", REGEX, r"\btwo sum\b|\bpairs?\b|\btriplet\b|\btarget\b", 4,
             "Find pair/triplet with a target → commonly solved with two pointers (after sorting)."),
        Rule("tp_palindrome", KEYWORD, "palindrome", 5,
             "Palindrome check uses left/right pointers moving inward."),
        Rule("tp_inplace", REGEX, r"\bin-place\b|\bwithout extra space\b|\bO\(1\) extra space\b", 3,
             "In-place/O(1) extra space hints → pointers to rearrange without extra memory."),
    )),
    PatternDefinition("hashmap_counting", "Hash Map / Frequency Counting", 16, (
        Rule("hm_frequency", KEYWORD, "frequency", 6,
             "Mentions frequency → hash map counting is the natural tool."),
        Rule("hm_count", REGEX, r"\bcount\b|\boccurrences?\b|\bnumber of\b|\bfreq\b", 4,
             "Counting occurrences/number of items → map-based counting pattern."),
        Rule("hm_anagram", KEYWORD, "anagram", 5,
             "Anagram problems rely on comparing frequency maps."),
        Rule("hm_distinct", KEYWORD, "distinct", 4,
             "Distinct elements usually require set/map tracking."),
        Rule("hm_duplicate", REGEX, r"\bduplicate\b|\brepeat\b|\bfirst unique\b|\bunique\b", 3,
             "Duplicate/unique detection often uses a hash map or set."),
    )),
    PatternDefinition("stack_monotonic", "Stack / Monotonic Stack", 18, (
        Rule("st_next_greater", REGEX, r"next greater|next smaller|previous greater|previous smaller", 7,
             "Next/previous greater/smaller → monotonic stack is the standard solution."),
        Rule("st_parentheses", REGEX, r"valid parentheses|balanced parentheses|brackets|parentheses", 6,
             "Parentheses/brackets validity → stack tracks opening symbols."),
        Rule("st_histogram", REGEX, r"histogram|largest rectangle|rectangle in histogram", 7,
             "Histogram/largest rectangle → classic monotonic stack pattern."),
        Rule("st_word_stack", KEYWORD, "stack", 3,
             "Explicitly mentions stack → likely stack-based approach."),
    )),
    PatternDefinition("binary_search", "Binary Search", 16, (
        Rule("bs_sorted", KEYWORD, "sorted", 6,
             "Sorted input → binary search is a direct candidate."),
        Rule("bs_log", REGEX, r"O\(log\s*n\)|log\s*n|binary search", 5,
             "Mentions log time/binary search → strongly suggests binary search."),
        Rule("bs_boundary", REGEX, r"\bfirst\b|\blast\b|\blower bound\b|\bupper bound\b", 4,
             "Boundary language (first/last) → typical binary search boundary finding."),
        Rule("bs_answer", REGEX, r"minimize the maximum|maximize the minimum|minimum possible|maximum possible", 6,
             "Minimize max / maximize min → often binary search on answer."),
    )),
    PatternDefinition("dynamic_programming", "Dynamic Programming", 20, (
        Rule("dp_ways", REGEX, r"number of ways|how many ways|count the ways", 7,
             "Counting number of ways → DP over states is common."),
        Rule("dp_subsequence", KEYWORD, "subsequence", 6,
             "Subsequence problems often use DP (LIS/LCS style)."),
        Rule("dp_partition", REGEX, r"partition|split into", 5,
             "Partition/splitting → DP with prefix decisions is common."),
        Rule("dp_optimal", REGEX, r"optimal|maximize|minimize|minimum cost|maximum profit", 5,
             "Optimal min/max + overlapping subproblems → DP is a strong candidate."),
        Rule("dp_word", KEYWORD, "dp", 3,
             "Mentions DP explicitly → likely intended dynamic programming."),
    )),
    PatternDefinition("linked_list_simulation", "Linked List / Simulation", 18, (
        Rule("ll_keyword", REGEX, r"linked list|node|next pointer", 7,
             "Mentions linked list or node → traversal of node structure required."),
        Rule("ll_reverse", REGEX, r"reverse order|reverse the list", 4,
             "Reverse order in linked list → typical pointer manipulation."),
        Rule("ll_carry", REGEX, r"carry|digit|sum of two numbers", 5,
             "Digit-by-digit addition with carry → simulation over linked structure."),
        Rule("ll_merge", REGEX, r"merge two lists|merge k lists", 5,
             "Merging linked lists → pointer simulation pattern."),
    )),
)
