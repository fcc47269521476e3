import random

from algorithms.sliding_window import build_sliding_window_steps, sliding_window_active_line


def _brute_best_len(a, k):
    best = 0
    for i in range(len(a)):
        for j in range(i, len(a)):
            if sum(a[i:j + 1]) <= k:
                best = max(best, j - i + 1)
    return best


def test_example():
    a = [2, 1, 5, 1, 3, 2]
    last = build_sliding_window_steps(a, 7)[-1]
    assert last.phase == "done"
    assert last.best_len == 3 == _brute_best_len(a, 7)
    assert sum(a[last.best_l:last.best_r + 1]) <= 7


def test_empty_array():
    assert build_sliding_window_steps([], 5) == ()


def test_first_step_is_init():
    first = build_sliding_window_steps([1, 2], 3)[0]
    assert (first.phase, first.l, first.r, first.sum, first.best_r) == ("init", 0, -1, 0, -1)


def test_phases_for_one_shrink():
    steps = build_sliding_window_steps([3, 4], 5)
    assert [s.phase for s in steps] == [
        "init",
        "expand", "check", "new_best",
        "expand", "check", "shrink", "after_shrink", "window_valid",
        "done",
    ]


def test_invariants_hold_on_every_step():
    rng = random.Random(11)
    for _ in range(200):
        a = [rng.randint(0, 6) for _ in range(rng.randint(1, 10))]
        k = rng.randint(0, 12)
        steps = build_sliding_window_steps(a, k)
        best = [s.best_len for s in steps]
        assert best == sorted(best)
        assert all(s.l <= s.r + 1 for s in steps)
        assert steps[-1].best_len == _brute_best_len(a, k)


def test_non_finite_inputs_are_coerced():
    assert build_sliding_window_steps([1, float("nan"), 2], float("inf")) == build_sliding_window_steps([1, 2], 0)


def test_nothing_fits():
    last = build_sliding_window_steps([5, 6], 1)[-1]
    assert (last.best_len, last.best_l, last.best_r) == (0, 0, -1)
    assert last.l == 2


def test_active_line():
    steps = build_sliding_window_steps([3, 4], 5)
    assert [sliding_window_active_line(s) for s in steps] == [0, 4, 5, 8, 4, 5, 6, 7, 8, 8]


def test_huge_ints():
    assert build_sliding_window_steps([1, 2, 3], 10 ** 400)[-1].best_len == 3
    assert build_sliding_window_steps([1, 10 ** 400, 3], 5)[-1].best_len == 1


def test_init_step_is_valid_even_for_negative_k():
    steps = build_sliding_window_steps([1, 2], -1)
    assert steps[0].phase == "init" and steps[0].valid
    assert steps[-1].best_len == 0
