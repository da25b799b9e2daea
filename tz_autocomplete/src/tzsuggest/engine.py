# tzsuggest/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional

from . import config as CFG
from .models import CandidateSet, Suggestion
from .loader import load_candidates
from .search import complete_query
from .similarity import Scorer

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the candidate set (IANA names, a names file, or names passed in),
      - the top-k matcher (search.complete_query).

    Public API (used by CLI/Flask/interaction layer):
      * build(...):          load the candidate set (no-op if already loaded)
      * complete(query, top_k): ranked Suggestion rows
      * suggest(query, top_k):  ranked names only
      * shutdown():          drop state

    The matcher refuses top_k >= len(candidates); the engine clamps top_k
    into [0, len(candidates) - 1] so caller input never reaches that error.
    """

    # ------------- lifecycle -------------

    def __init__(self, candidates: Optional[Iterable[str]] = None, *, scorer: Optional[Scorer] = None) -> None:
        self.candidates: Optional[CandidateSet] = (
            CandidateSet.of(candidates) if candidates is not None else None
        )
        self._scorer = scorer
        self._injected = candidates is not None

    # /* ~~~ Load the candidate set once ~~~ */
    def build(self, *, names_file: Optional[str] = None, verbose: bool = False) -> "Engine":
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["TZSUGGEST_VERBOSE"] = "1"

        if self._injected and names_file is not None:
            raise ValueError("build(): names_file given but candidates were passed to Engine()")
        if self.candidates is None:
            self.candidates = load_candidates(names_file)
        log.info("Engine build() complete: candidates=%d", len(self.candidates))
        return self

    # ------------- query -------------

    def clamp(self, top_k: int) -> int:
        n = len(self._require())
        k = max(0, min(int(top_k), n - 1))
        if k != top_k:
            log.warning("Requested top_k=%s clamped to %d (candidates=%d)", top_k, k, n)
        return k

    # /* ~~~ Run autocomplete for a user query and return ranked candidates ~~~ */
    def complete(self, query: str, *, top_k: int = CFG.TOP_K) -> List[Suggestion]:
        cands = self._require()
        return complete_query(query, cands.names, self.clamp(top_k), scorer=self._scorer)

    def suggest(self, query: str, *, top_k: int = CFG.TOP_K) -> List[str]:
        return [s.name for s in self.complete(query, top_k=top_k)]

    def __len__(self) -> int:
        return len(self.candidates) if self.candidates is not None else 0

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.candidates = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require(self) -> CandidateSet:
        if self.candidates is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.candidates
