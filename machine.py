# machine.py
from __future__ import annotations

from typing import List

from debug import debug
from errors import InvalidCharacter, SymbolError
from keyboard import ALPHABET, Symbol
from rotor_bank import RotorBank
from settings import MachineSettings, build_bank

log = debug.get_logger("encipher")


def clean_text(text: str) -> str:
    """Upper-case *text* and drop everything outside A–Z.

    Opt-in only: `Machine.encrypt` rejects such characters instead.
    """
    return "".join(ch for ch in text.upper() if ch in ALPHABET)


def validate_text(text: str) -> List[Symbol]:
    """Turn *text* into symbols or fail on the first bad character."""
    symbols: List[Symbol] = []
    for position, ch in enumerate(text):
        try:
            symbols.append(Symbol(ch))
        except SymbolError as exc:
            raise InvalidCharacter(ch, position, exc) from exc
    return symbols


class Machine:
    """One enciphering session around a single rotor bank."""

    def __init__(self, bank: RotorBank) -> None:
        self.bank = bank

    @classmethod
    def from_settings(cls, settings: MachineSettings) -> "Machine":
        return cls(build_bank(settings))

    def encrypt_char(self, character: str) -> str:
        """Encipher one key press; a rejected key carries no position."""
        try:
            symbol = Symbol(character)
        except SymbolError as exc:
            raise InvalidCharacter(character, None, exc) from exc
        return self.bank.encrypt_char(symbol).upper

    def encrypt(self, text: str) -> str:
        """Encipher *text* letter by letter.

        The whole message is validated before the first rotor moves, so a
        rejected message leaves the bank exactly where it was.
        """
        symbols = validate_text(text)
        out = "".join(self.bank.encrypt_char(s).upper for s in symbols)
        log.debug("%d letters, offsets now %s", len(out), self.bank.offsets)
        return out

    def decrypt(self, text: str) -> str:
        """Undo `encrypt` on a machine set up with the same settings."""
        symbols = validate_text(text)
        return "".join(self.bank.decrypt_char(s).upper for s in symbols)

    def __repr__(self) -> str:
        return f"<Machine {self.bank!r}>"
