# keyboard.py
from __future__ import annotations

import string
from dataclasses import dataclass

from debug import debug
from errors import LookupFailure, NotAlphabetic, OutOfRange

ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)

log = debug.get_logger("keyboard")


# ── Symbol: one validated key press ──────────────────────────────
@dataclass(frozen=True, slots=True)
class Symbol:
    """A single letter A–Z with its zero-based alphabet index.

    The caller's case is kept in `character` for display; indexing always
    uses the uppercase form.
    """

    character: str

    def __post_init__(self) -> None:
        ch = self.character
        if not isinstance(ch, str) or len(ch) != 1 or not ch.isalpha():
            raise NotAlphabetic(ch)
        upper = ch.upper()
        if len(upper) != 1 or upper not in ALPHABET:
            raise OutOfRange(ch)
        log.debug("%r -> %d", ch, self.index)

    @property
    def upper(self) -> str:
        return self.character.upper()

    @property
    def index(self) -> int:
        return ord(self.upper) - ord("A")

    # lamp board direction: integer signal → letter
    @classmethod
    def from_index(cls, index: int) -> "Symbol":
        if not (0 <= index < ALPHABET_SIZE):
            raise LookupFailure(f"Signal {index} out of range 0–{ALPHABET_SIZE - 1}")
        return cls(ALPHABET[index])

    def __str__(self) -> str:
        return self.character
