from __future__ import annotations
import logging
import os
from typing import Iterable, List, Optional
from zoneinfo import available_timezones

from .models import CandidateSet

log = logging.getLogger(__name__)


def iana_names() -> List[str]:
    """All IANA timezone identifiers known to zoneinfo (system tz database or tzdata), sorted."""
    return sorted(available_timezones())

def _read_names(path: str) -> Iterable[str]:
    """Yield one name per non-blank line; '#' starts a comment line."""
    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            name = raw.strip()
            if name and not name.startswith("#"):
                yield name

def load_candidates(path: Optional[str] = None) -> CandidateSet:
    """
    Build the immutable candidate set.
      - path given: names from that file, in file order, first occurrence kept
      - otherwise:  the IANA timezone identifiers
    """
    if path is None:
        names = iana_names()
        source = "zoneinfo"
    else:
        names = list(dict.fromkeys(_read_names(path)))
        source = path
    # Progress output (TZSUGGEST_VERBOSE=1), checked on every load
    if os.environ.get("TZSUGGEST_VERBOSE") == "1":
        print(f"[load] {len(names)} candidates from {source}")
    log.info("Loaded %d candidates from %s", len(names), source)
    return CandidateSet.of(names)
