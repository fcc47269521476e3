# services/analyzer.py
"""
Rule-based guess of the algorithmic pattern behind a problem statement.

- keyword rules -> whole-word literal match (\\bword\\b), case-insensitive
- regex rules   -> the rule's own regex, case-insensitive
- raw score     -> sum of weights of matching rules (each rule counts once)
- confidence    -> min(100, 100 * score / max_score_hint), rounded half up
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from services.rules import KEYWORD, PATTERNS, PatternDefinition, Rule
from utils.logging import get_logger

logger = get_logger("analyzer")

UNKNOWN_PATTERN = "Unknown (Need more signals)"
FALLBACK_REASONS = (
    "Not enough strong keywords/signals were detected.",
    "Try including the goal (longest/minimum/count), constraints, or key terms.",
)


@dataclass(frozen=True)
class RankedPattern:
    pattern_name: str
    raw_score: int
    confidence: int


@dataclass(frozen=True)
class AnalysisResult:
    best_pattern_name: str
    best_pattern_id: Optional[str]
    confidence: int
    top_reasons: Tuple[str, ...]
    debug_top3: Tuple[RankedPattern, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "best_pattern_name": self.best_pattern_name,
            "best_pattern_id": self.best_pattern_id,
            "confidence": self.confidence,
            "top_reasons": list(self.top_reasons),
            "debug_top3": [
                {"pattern_name": p.pattern_name, "raw_score": p.raw_score, "confidence": p.confidence}
                for p in self.debug_top3
            ],
        }


@dataclass(frozen=True)
class _Scored:
    pattern: PatternDefinition
    score: int
    matches: Tuple[Rule, ...]


@lru_cache(maxsize=None)
def _compile(kind: str, pattern: str) -> re.Pattern:
    if kind == KEYWORD:
        return re.compile(rf"\b{re.escape(pattern)}\b", re.I | re.ASCII)
    return re.compile(pattern, re.I | re.ASCII)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def confidence_for(score: int, max_score_hint: int) -> int:
    if max_score_hint <= 0:
        return 0
    return _round_half_up(min(100.0, 100.0 * score / max_score_hint))


def _score_pattern(text: str, p: PatternDefinition) -> _Scored:
    matches = [r for r in p.rules if _compile(r.kind, r.pattern).search(text)]
    return _Scored(p, sum(r.weight for r in matches), tuple(matches))


def analyze_problem(raw_text: str, patterns=PATTERNS) -> AnalysisResult:
    text = (raw_text or "").lower()
    ranked = sorted((_score_pattern(text, p) for p in patterns), key=lambda s: -s.score)

    top3 = tuple(
        RankedPattern(s.pattern.display_name, s.score, confidence_for(s.score, s.pattern.max_score_hint))
        for s in ranked[:3]
    )

    best = ranked[0] if ranked else None
    if best is None or best.score == 0:
        logger.debug("No analyzer rule matched")
        return AnalysisResult(UNKNOWN_PATTERN, None, 0, FALLBACK_REASONS, top3)

    # strongest reasons first; sorted() keeps table order among equal weights
    strongest = sorted(best.matches, key=lambda r: -r.weight)
    confidence = confidence_for(best.score, best.pattern.max_score_hint)
    logger.debug("Analyzed problem text",
                 extra={"pattern": best.pattern.id, "confidence": confidence})
    return AnalysisResult(
        best_pattern_name=best.pattern.display_name,
        best_pattern_id=best.pattern.id,
        confidence=confidence,
        top_reasons=tuple(r.reason for r in strongest[:3]),
        debug_top3=top3,
    )


def list_patterns() -> List[Dict[str, object]]:
    return [
        {
            "id": p.id,
            "display_name": p.display_name,
            "max_score_hint": p.max_score_hint,
            "rules": [
                {"id": r.id, "kind": r.kind, "pattern": r.pattern, "weight": r.weight, "reason": r.reason}
                for r in p.rules
            ],
        }
        for p in PATTERNS
    ]
