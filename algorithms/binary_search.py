from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple

from utils.inputs import finite_or
from utils.logging import get_logger

logger = get_logger("binary_search")

BINARY_SEARCH_CODE = (
    "lo = 0, hi = n-1",
    "while lo <= hi:",
    "  mid = (lo+hi)//2",
    "  if a[mid] == target: ...",
    "  elif a[mid] < target: lo = mid + 1",
    "  else: hi = mid - 1",
    "return ans",
)


class Variant(str, Enum):
    STANDARD = "standard"
    FIRST = "first"
    LAST = "last"
    LOWER_BOUND = "lower_bound"
    UPPER_BOUND = "upper_bound"


@dataclass(frozen=True)
class BinaryStep:
    lo: int
    hi: int
    mid: int
    decision: str  # init | go_left | go_right | found | record_ans | done
    note: str
    ans_index: Optional[int] = None
    result_index: Optional[int] = None

    def to_dict(self):
        return {
            "lo": self.lo,
            "hi": self.hi,
            "mid": self.mid,
            "decision": self.decision,
            "note": self.note,
            "ans_index": self.ans_index,
            "result_index": self.result_index,
        }


@dataclass(frozen=True)
class Transition:
    decision: str
    move: str  # "left", "right" or "stop"
    record: bool
    note: str


def _step_right(mid, v, target) -> Transition:
    return Transition("go_right", "right", False, f"a[mid]={v} < {target}. Move lo = mid + 1")


def _step_left(mid, v, target) -> Transition:
    return Transition("go_left", "left", False, f"a[mid]={v} > {target}. Move hi = mid - 1")


def _standard(mid, v, target) -> Transition:
    if v == target:
        return Transition("found", "stop", True, f"Found target at mid={mid}. Stop.")
    return _step_right(mid, v, target) if v < target else _step_left(mid, v, target)


def _first(mid, v, target) -> Transition:
    if v == target:
        return Transition("record_ans", "left", True,
                          f"Found at mid={mid}. Record ans, go LEFT to find first occurrence.")
    return _step_right(mid, v, target) if v < target else _step_left(mid, v, target)


def _last(mid, v, target) -> Transition:
    if v == target:
        return Transition("record_ans", "right", True,
                          f"Found at mid={mid}. Record ans, go RIGHT to find last occurrence.")
    return _step_right(mid, v, target) if v < target else _step_left(mid, v, target)


def _lower_bound(mid, v, target) -> Transition:
    if v >= target:
        return Transition("record_ans", "left", True,
                          f"a[mid]={v} >= {target}. Record ans={mid}, go LEFT (hi = mid - 1)")
    return Transition("go_right", "right", False, f"a[mid]={v} < {target}. Go RIGHT (lo = mid + 1)")


def _upper_bound(mid, v, target) -> Transition:
    if v > target:
        return Transition("record_ans", "left", True,
                          f"a[mid]={v} > {target}. Record ans={mid}, go LEFT (hi = mid - 1)")
    return Transition("go_right", "right", False, f"a[mid]={v} <= {target}. Go RIGHT (lo = mid + 1)")


TRANSITIONS: Dict[Variant, Callable[..., Transition]] = {
    Variant.STANDARD: _standard,
    Variant.FIRST: _first,
    Variant.LAST: _last,
    Variant.LOWER_BOUND: _lower_bound,
    Variant.UPPER_BOUND: _upper_bound,
}


def build_binary_search_steps(a: Sequence, target, variant="standard") -> Tuple[BinaryStep, ...]:
    """
    Replay binary search over a sorted array and snapshot every decision.

    standard stops on the first hit; first/last keep narrowing after a hit;
    lower_bound/upper_bound find the first index with a[i] >= / > target.
    The last step carries result_index (None when nothing qualifies).
    """
    variant = Variant(variant)
    target = finite_or(target, 0)
    if not a:
        return ()

    decide = TRANSITIONS[variant]
    lo, hi = 0, len(a) - 1
    ans = None
    steps = [BinaryStep(lo, hi, (lo + hi) // 2, "init",
                        f"Start: lo={lo}, hi={hi}, variant={variant.value}", ans)]

    while lo <= hi:
        mid = (lo + hi) // 2
        t = decide(mid, a[mid], target)
        if t.record:
            ans = mid
        if t.move == "stop":
            steps.append(BinaryStep(lo, hi, mid, t.decision, t.note, ans, mid))
            logger.debug("Built %d binary search steps", len(steps),
                         extra={"variant": variant.value, "steps": len(steps)})
            return tuple(steps)
        steps.append(BinaryStep(lo, hi, mid, t.decision, t.note, ans))
        if t.move == "left":
            hi = mid - 1
        else:
            lo = mid + 1

    if variant is Variant.STANDARD:
        note = "Done. Not found."
    else:
        note = f"Done. Best answer index = {ans}."
    steps.append(BinaryStep(lo, hi, -1, "done", note, ans, ans))
    logger.debug("Built %d binary search steps", len(steps),
                 extra={"variant": variant.value, "steps": len(steps)})
    return tuple(steps)


def binary_search_active_line(step: BinaryStep) -> int:
    return {
        "init": 0,
        "found": 3,
        "record_ans": 3,
        "go_right": 4,
        "go_left": 5,
        "done": 6,
    }.get(step.decision, 2)
