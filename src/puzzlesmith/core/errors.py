"""Error types raised by the rules engine and notation layer."""

from __future__ import annotations


class FormatError(ValueError):
    """A serialized position does not follow the six-field FEN grammar."""


class ResolutionError(ValueError):
    """A notated move matches no candidate piece in the given position."""

    def __init__(self, token: str, reason: str = "no matching piece") -> None:
        super().__init__(f"Cannot resolve move {token!r}: {reason}")
        self.token = token
        self.reason = reason
