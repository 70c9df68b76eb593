"""Shared notation-layer data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Game:
    """One game extracted from a PGN batch: headers plus mainline SAN tokens."""

    headers: Mapping[str, str]
    moves: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        object.__setattr__(self, "moves", tuple(self.moves))

    def header(self, key: str, default: str = "?") -> str:
        """Header value, or *default* when absent or empty."""
        return self.headers.get(key) or default
