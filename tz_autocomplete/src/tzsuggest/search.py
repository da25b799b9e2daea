from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from .errors import InvalidArgument
from .models import Suggestion
from .similarity import ScoreCache, Scorer, jaro_winkler

log = logging.getLogger(__name__)


# Partition helpers (positions are indices into the caller's candidate sequence)

def _median_of_three(order: List[int], lo: int, hi: int, cache: ScoreCache) -> int:
    mid = (lo + hi) // 2
    a, b, c = cache.key(order[lo]), cache.key(order[mid]), cache.key(order[hi])
    if a < b:
        if b < c:
            return mid
        return hi if a < c else lo
    if a < c:
        return lo
    return hi if b < c else mid

def _partition(order: List[int], lo: int, hi: int, cache: ScoreCache) -> int:
    """Lomuto partition of order[lo..hi]; returns the pivot's final index."""
    m = _median_of_three(order, lo, hi, cache)
    order[m], order[hi] = order[hi], order[m]
    pivot = cache.key(order[hi])
    store = lo
    for i in range(lo, hi):
        if cache.key(order[i]) < pivot:
            order[i], order[store] = order[store], order[i]
            store += 1
    order[store], order[hi] = order[hi], order[store]
    return store

def _select(order: List[int], k: int, cache: ScoreCache) -> None:
    """
    /* ~~~ Quickselect: afterwards order[:k] holds the k best positions
       (any order) and nothing from order[k:] ranks above them ~~~ */
    """
    lo, hi = 0, len(order) - 1
    while lo < hi:
        p = _partition(order, lo, hi, cache)
        if p == k:
            return
        if p < k:
            lo = p + 1
        else:
            hi = p - 1

def _check(candidates: Sequence[str], k: int) -> None:
    n = len(candidates)
    if n == 0:
        raise InvalidArgument("candidate set is empty")
    if k < 0 or k >= n:
        raise InvalidArgument(f"k must satisfy 0 <= k < {n}, got {k}")

def _top_positions(candidates: Sequence[str], k: int, cache: ScoreCache) -> List[int]:
    if k == 0:
        return []
    order = list(range(len(candidates)))   # call-local working copy
    _select(order, k, cache)
    head = order[:k]
    head.sort(key=cache.key)
    log.debug("top-%d for %r: %d of %d candidates scored", k, cache.query, cache.computed, len(candidates))
    return head


def select_top_k(
    candidates: Sequence[str],
    query: str,
    k: int,
    *,
    scorer: Optional[Scorer] = None,
) -> List[str]:
    """
    Return the k candidates most similar to query, best first.

    Ties on score are broken by original position (lower wins), so repeated
    calls give identical output. Only the top-k slice is sorted; the rest of
    the candidates are partitioned away without ordering them.

    Raises InvalidArgument unless 0 <= k < len(candidates).
    """
    _check(candidates, k)
    cache = ScoreCache(query, candidates, scorer or jaro_winkler)
    return [candidates[p] for p in _top_positions(candidates, k, cache)]


def complete_query(
    query: str,
    candidates: Sequence[str],
    top_k: int,
    *,
    scorer: Optional[Scorer] = None,
) -> List[Suggestion]:
    """Like select_top_k, but returns ranked Suggestion rows with their scores."""
    _check(candidates, top_k)
    cache = ScoreCache(query, candidates, scorer or jaro_winkler)
    return [
        Suggestion(name=candidates[p], score=cache.score(p), rank=i)
        for i, p in enumerate(_top_positions(candidates, top_k, cache), start=1)
    ]
