from dataclasses import dataclass
from typing import Sequence, Tuple

from utils.inputs import finite_or, finite_values
from utils.logging import get_logger

logger = get_logger("sliding_window")

SLIDING_WINDOW_CODE = (
    "l = 0",
    "sum = 0",
    "best = 0",
    "for r in range(n):",
    "  sum += a[r]",
    "  while sum > k:",
    "    sum -= a[l]",
    "    l += 1",
    "  best = max(best, r-l+1)",
)


@dataclass(frozen=True)
class SlidingStep:
    l: int
    r: int
    sum: float
    k: float
    valid: bool
    best_len: int
    best_l: int
    best_r: int
    phase: str  # init | expand | check | shrink | after_shrink | new_best | window_valid | done
    note: str

    def to_dict(self):
        return {
            "l": self.l,
            "r": self.r,
            "sum": self.sum,
            "k": self.k,
            "valid": self.valid,
            "best_len": self.best_len,
            "best_l": self.best_l,
            "best_r": self.best_r,
            "phase": self.phase,
            "note": self.note,
        }


def build_sliding_window_steps(a: Sequence, k) -> Tuple[SlidingStep, ...]:
    """
    Longest subarray with sum <= k, one snapshot per pointer move.
    Values are assumed non-negative; that is what makes shrinking from the left correct.
    """
    a = finite_values(a)
    k = finite_or(k, 0)
    if not a:
        return ()

    l = 0
    total = 0
    best_len, best_l, best_r = 0, 0, -1
    steps = []

    def snap(r, phase, note, valid=None):
        ok = total <= k if valid is None else valid
        steps.append(SlidingStep(l, r, total, k, ok, best_len, best_l, best_r, phase, note))

    snap(-1, "init", "Init: l=0, sum=0, best=0", valid=True)

    for r, x in enumerate(a):
        total += x
        snap(r, "expand", f"Expand: add a[{r}]={x} → sum={total}")
        snap(r, "check", f"Check: sum={total} {'≤' if total <= k else '>'} k={k}")

        while total > k and l <= r:
            removed = a[l]
            total -= removed
            l += 1
            snap(r, "shrink", f"Shrink: remove left ({removed}) → l={l}, sum={total}")
            snap(r, "after_shrink", f"After shrink: sum={total} {'≤' if total <= k else '>'} k={k}")

        if total <= k:
            length = r - l + 1
            if length > best_len:
                best_len, best_l, best_r = length, l, r
                snap(r, "new_best", f"New best: [{best_l}..{best_r}] len={best_len}")
            else:
                snap(r, "window_valid", f"Valid window: [{l}..{r}] len={length} (best={best_len})")

    snap(len(a) - 1, "done", f"Done. Best window [{best_l}..{best_r}] len={best_len}.")
    logger.debug("Built %d sliding window steps", len(steps), extra={"steps": len(steps)})
    return tuple(steps)


_ACTIVE_LINE = {
    "init": 0,
    "expand": 4,
    "check": 5,
    "shrink": 6,
    "after_shrink": 7,
    "new_best": 8,
    "window_valid": 8,
    "done": 8,
}


def sliding_window_active_line(step: SlidingStep) -> int:
    return _ACTIVE_LINE.get(step.phase, 8)
