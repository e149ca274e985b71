from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Above:
    name: str


@dataclass(frozen=True)
class Below:
    name: str


@dataclass(frozen=True)
class Between:
    lower: str
    upper: str


@dataclass(frozen=True)
class Only:
    name: str


QueryIntent = Union[Above, Below, Between, Only]


__all__ = ["Above", "Below", "Between", "Only", "QueryIntent"]
