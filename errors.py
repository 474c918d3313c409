# errors.py
from __future__ import annotations


class EnigmaError(Exception):
    """Base class for every error raised by the rotor machine."""


# ── symbol validation ────────────────────────────────────────────
class SymbolError(EnigmaError, ValueError):
    def __init__(self, character: str, reason: str) -> None:
        super().__init__(f"{character!r}: {reason}")
        self.character = character


class NotAlphabetic(SymbolError):
    def __init__(self, character: str) -> None:
        super().__init__(character, "not a single alphabetic character")


class OutOfRange(SymbolError):
    def __init__(self, character: str) -> None:
        super().__init__(character, "not a letter between A and Z")


class InvalidCharacter(EnigmaError, ValueError):
    """A message contains a character that cannot be enciphered."""

    def __init__(self, character: str, position: int | None, cause: SymbolError | None = None) -> None:
        where = "" if position is None else f" at position {position}"
        super().__init__(f"Invalid character {character!r}{where}")
        self.character = character
        self.position = position
        self.cause = cause


# ── configuration ────────────────────────────────────────────────
class ConfigurationError(EnigmaError, ValueError):
    pass


class DuplicateRotorModel(ConfigurationError):
    def __init__(self, models) -> None:
        names = ", ".join(m.name for m in models)
        super().__init__(f"Rotor models must be pairwise distinct, got {names}")
        self.models = tuple(models)


# ── table lookups ────────────────────────────────────────────────
class LookupFailure(EnigmaError, LookupError):
    """An index outside 0–25 reached a wiring table."""
