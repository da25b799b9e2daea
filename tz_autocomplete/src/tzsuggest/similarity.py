"""
Similarity metric and the per-call score cache.

Scores are Jaro-Winkler similarities in [0.0, 1.0] computed by rapidfuzz.
The metric is case-sensitive and total: two empty strings score 1.0, an
empty string against anything else scores 0.0.
"""
from __future__ import annotations
from typing import Callable, Dict, Sequence

from rapidfuzz.distance import JaroWinkler

from .config import PREFIX_WEIGHT

Scorer = Callable[[str, str], float]


def jaro_winkler(query: str, candidate: str) -> float:
    return JaroWinkler.similarity(query, candidate, prefix_weight=PREFIX_WEIGHT)


class ScoreCache:
    """
    Lookup-or-compute scores by candidate position for ONE query.
    Build a fresh instance per call; it is never shared between calls.
    """

    def __init__(self, query: str, candidates: Sequence[str], scorer: Scorer = jaro_winkler) -> None:
        self.query = query
        self._candidates = candidates
        self._scorer = scorer
        self._scores: Dict[int, float] = {}
        self.computed = 0          # number of real metric evaluations

    def score(self, pos: int) -> float:
        try:
            return self._scores[pos]
        except KeyError:
            value = float(self._scorer(self.query, self._candidates[pos]))
            self._scores[pos] = value
            self.computed += 1
            return value

    def key(self, pos: int) -> tuple[float, int]:
        """Ranking key: higher score first, then lower original position."""
        return (-self.score(pos), pos)

    def __len__(self) -> int:
        return len(self._scores)
