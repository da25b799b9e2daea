from collections import Counter

import pytest

import tzsuggest.search as S
from tzsuggest.search import select_top_k
from tzsuggest.similarity import ScoreCache, jaro_winkler


def _counting(scorer):
    calls = Counter()

    def wrapped(q, c):
        calls[c] += 1
        return scorer(q, c)
    return wrapped, calls


def _cands(n: int) -> list[str]:
    return [f"Zone/{i:03d}_{'ab'[i % 2]}" for i in range(n)]


@pytest.mark.parametrize("k", [1, 7, 250, 499])
def test_each_candidate_scored_at_most_once(k):
    cands = _cands(500)
    scorer, calls = _counting(jaro_winkler)
    select_top_k(cands, "Zone/42", k, scorer=scorer)
    assert calls and max(calls.values()) == 1
    assert set(calls) <= set(cands)


def test_k_zero_scores_nothing():
    scorer, calls = _counting(jaro_winkler)
    assert select_top_k(_cands(10), "x", 0, scorer=scorer) == []
    assert not calls


def test_cache_is_fresh_per_call():
    cands = _cands(40)
    scorer, calls = _counting(jaro_winkler)
    select_top_k(cands, "Zone/001", 5, scorer=scorer)
    select_top_k(cands, "Zone/002", 5, scorer=scorer)
    # a second query rescores: nothing leaks from the first call
    assert max(calls.values()) == 2


def test_cached_results_match_uncached(monkeypatch):
    cands = _cands(120)
    expected = select_top_k(cands, "Zone/07", 12)

    class NoCache(ScoreCache):
        def score(self, pos):
            return float(self._scorer(self.query, self._candidates[pos]))

    monkeypatch.setattr(S, "ScoreCache", NoCache)
    assert select_top_k(cands, "Zone/07", 12) == expected


def test_score_cache_counts_real_evaluations():
    cache = ScoreCache("abc", ["abc", "abd"])
    assert cache.score(0) == 1.0
    cache.score(0); cache.score(1); cache.score(1)
    assert cache.computed == 2
    assert len(cache) == 2
    assert cache.key(0) == (-1.0, 0)
