from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from utils.inputs import clamp_k
from utils.logging import get_logger

logger = get_logger("substring_window")

SUBSTRING_WINDOW_CODE = (
    "l = 0",
    "freq = {}",
    "best = 0",
    "",
    "for r in range(n):",
    "  add s[r] to freq",
    "  while distinct(freq) > k:",
    "    remove s[l] from freq",
    "    l += 1",
    "  best = max(best, r-l+1)",
)


@dataclass(frozen=True)
class SubstringStep:
    l: int
    r: int
    k: int
    freq: Mapping[str, int]  # read-only copy taken when the step was recorded
    distinct: int
    valid: bool
    best_len: int
    best_l: int
    best_r: int
    phase: str  # init | expand | check | shrink | new_best | window_valid | done
    note: str
    char_added: Optional[str] = None
    char_removed: Optional[str] = None

    def to_dict(self):
        return {
            "l": self.l,
            "r": self.r,
            "k": self.k,
            "freq": dict(self.freq),
            "distinct": self.distinct,
            "valid": self.valid,
            "best_len": self.best_len,
            "best_l": self.best_l,
            "best_r": self.best_r,
            "phase": self.phase,
            "note": self.note,
            "char_added": self.char_added,
            "char_removed": self.char_removed,
        }


def build_substring_window_steps(s: str, k) -> Tuple[SubstringStep, ...]:
    """Longest substring with at most k distinct characters."""
    s = s or ""
    k = clamp_k(k)
    if not s:
        return ()

    l = 0
    freq = {}
    best_len, best_l, best_r = 0, 0, -1
    steps = []

    def snap(r, phase, note, **chars):
        d = len(freq)
        steps.append(SubstringStep(
            l, r, k, MappingProxyType(dict(freq)), d, d <= k,
            best_len, best_l, best_r, phase, note, **chars,
        ))

    snap(-1, "init", "Init: l=0, freq={}, best=0")

    for r, ch in enumerate(s):
        freq[ch] = freq.get(ch, 0) + 1
        snap(r, "expand", f"Expand: add '{ch}' at r={r}. distinct={len(freq)} (k={k}).", char_added=ch)

        while len(freq) > k and l <= r:
            snap(r, "check", f"Check: distinct={len(freq)} > k={k}. Need shrink.")
            left = s[l]
            freq[left] -= 1
            if freq[left] == 0:
                del freq[left]
            l += 1
            snap(r, "shrink", f"Shrink: remove '{left}', l={l}. distinct={len(freq)} (k={k}).",
                 char_removed=left)

        if len(freq) <= k:
            length = r - l + 1
            if length > best_len:
                best_len, best_l, best_r = length, l, r
                snap(r, "new_best", f"Update best: new best [{best_l}..{best_r}] len={best_len}.")
            else:
                snap(r, "window_valid", f"Update best: window [{l}..{r}] len={length}, best={best_len}.")

    snap(len(s) - 1, "done", f"Done. Best window [{best_l}..{best_r}] len={best_len}.")
    logger.debug("Built %d substring window steps", len(steps), extra={"steps": len(steps)})
    return tuple(steps)


_ACTIVE_LINE = {
    "init": 0,
    "expand": 5,
    "check": 6,
    "shrink": 7,
    "new_best": 9,
    "window_valid": 9,
    "done": 9,
}


def substring_window_active_line(step: SubstringStep) -> int:
    return _ACTIVE_LINE.get(step.phase, 0)
