from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class CandidateSet:
    names: tuple[str, ...]     # ordered, distinct; position is the tie-break key

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError("candidate set must not be empty")
        if len(set(self.names)) != len(self.names):
            raise ValueError("candidate set must not contain duplicates")

    @classmethod
    def of(cls, names: Iterable[str]) -> "CandidateSet":
        return cls(tuple(names))

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names


@dataclass(frozen=True)
class Suggestion:
    name: str
    score: float              # similarity against the query, in [0, 1]
    rank: int                 # 1-based


@dataclass(frozen=True)
class Choice:
    name: str
    value: str

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class CommandOption:
    name: str
    value: Any
    type: Optional[int] = None       # platform option type (3 = string, 4 = integer)
    focused: bool = False            # set on the option being typed during autocomplete

    @classmethod
    def from_dict(cls, raw: dict) -> "CommandOption":
        return cls(
            name=str(raw.get("name", "")),
            value=raw.get("value"),
            type=raw.get("type"),
            focused=bool(raw.get("focused", False)),
        )
