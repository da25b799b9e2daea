"""
Timezone autocomplete engine.

Given a partial string, returns the IANA timezone identifiers most similar
to it (Jaro-Winkler), best first, without sorting the whole dictionary:
a quickselect isolates the top-k and only that slice is sorted.

Main entry points:
    select_top_k(candidates, query, k): the k best names, best first
    Engine: owns the candidate set and clamps k for callers
    respond(payload, engine): answer a chat-platform interaction payload

Example Usage:
    from tzsuggest import Engine

    eng = Engine().build()
    for s in eng.complete("Asia/Ma", top_k=5):
        print(f"{s.score:.3f}: {s.name}")
"""

# tzsuggest/__init__.py
from .engine import Engine
from .errors import InvalidArgument
from .interaction import respond
from .search import complete_query, select_top_k

__version__ = "1.0.0"
__all__ = ["Engine", "InvalidArgument", "respond", "complete_query", "select_top_k"]
