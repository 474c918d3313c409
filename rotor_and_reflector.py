# rotor_and_reflector.py
from __future__ import annotations

from enum import Enum

from debug import debug
from errors import ConfigurationError, LookupFailure
from keyboard import ALPHABET, ALPHABET_SIZE, Symbol

rotor_log = debug.get_logger("rotor")
reflector_log = debug.get_logger("reflector")


def _check_index(index: int, what: str) -> int:
    if not isinstance(index, int) or not (0 <= index < ALPHABET_SIZE):
        raise LookupFailure(f"{what}: index {index!r} outside 0–{ALPHABET_SIZE - 1}")
    return index


def _lookup(enum_cls, name: str):
    try:
        return enum_cls[str(name).strip().upper()]
    except KeyError:
        valid = ", ".join(enum_cls.__members__)
        raise ConfigurationError(f"Unknown {enum_cls.__name__} {name!r}. Expected one of {valid}") from None


# ── Reflector ─────────────────────────────────────────────────────
class Reflector(Enum):
    """Fixed reflector wirings, listed in alphabet order.

    If the first letter of a wiring is E, A is wired to E.
    """

    A = "EJMZALYXVBWFCRQUONTSPIKHGD"
    B = "YRUHQSLDPXNGOKMIEBFZCWVJAT"
    C = "FVPJIAOYEDRZXWGCTKUQSBNMHL"

    def __init__(self, wiring: str) -> None:
        self._map = [ALPHABET.index(c) for c in wiring]

    @property
    def wiring(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Reflector":
        return _lookup(cls, name)

    def reflect(self, sig: int) -> int:
        out = self._map[_check_index(sig, f"Reflector {self.name}")]
        reflector_log.debug("%s: %d->%d", self.name, sig, out)
        return out

    def reflect_character(self, character: str) -> str:
        letter = character.upper() if isinstance(character, str) else ""
        if len(letter) != 1 or letter not in ALPHABET:
            raise LookupFailure(f"Reflector {self.name} has no contact for {character!r}")
        return ALPHABET[self.reflect(ALPHABET.index(letter))]


# ── Rotor models ──────────────────────────────────────────────────
class RotorModel(Enum):
    """Wiring (right contact → left contact) plus the turnover offset.

    A keypress made while a rotor sits at its turnover offset also
    advances the neighbour on its left.
    """

    I = ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", 23)
    II = ("AJDKSIRUXBLHWTMCQGZNPYFVOE", 21)
    III = ("BDFHJLCPRTXVZNYEIWGAKMUSQO", 17)
    IV = ("ESOVPZJAYQUIRHXLNFTGKDCMWB", 20)
    V = ("VZBRGITYUPSDNHLXAWMJQOFECK", 16)

    def __init__(self, wiring: str, turnover: int) -> None:
        self.wiring = wiring
        self.turnover = turnover
        # integer lookup tables
        self._fwd = [ALPHABET.index(c) for c in wiring]
        self._rev = [wiring.index(c) for c in ALPHABET]

    @classmethod
    def from_name(cls, name: str) -> "RotorModel":
        return _lookup(cls, name)

    def wire(self, index: int) -> int:
        return self._fwd[_check_index(index, f"Rotor {self.name}")]

    def unwire(self, value: int) -> int:
        """Position in the wiring whose contact is `value`."""
        return self._rev[_check_index(value, f"Rotor {self.name}")]

    def index_of(self, symbol: Symbol) -> int:
        """Position of a letter inside this model's wiring string."""
        return self.wiring.index(symbol.upper)


# ── Rotor: a model plus its rotational offset ─────────────────────
class Rotor:
    def __init__(self, model: RotorModel, initial: Symbol | str | None = None) -> None:
        if not isinstance(model, RotorModel):
            model = RotorModel.from_name(model)
        self.model = model
        self._offset = 0
        if initial is not None:
            if not isinstance(initial, Symbol):
                initial = Symbol(initial)
            self._offset = model.index_of(initial)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def window(self) -> str:
        """Wiring letter at the current offset; the letter a rotor was set to."""
        return self.model.wiring[self._offset]

    def at_turnover(self) -> bool:
        return self._offset == self.model.turnover

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self._offset = (self._offset + 1) % ALPHABET_SIZE
        rotor_log.debug("%s offset -> %d", self.model.name, self._offset)

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        shift = (_check_index(sig, f"Rotor {self.model.name}") + self._offset) % ALPHABET_SIZE
        mapped = self.model.wire(shift)
        return (mapped - self._offset) % ALPHABET_SIZE

    def backward(self, sig: int) -> int:
        shift = (_check_index(sig, f"Rotor {self.model.name}") + self._offset) % ALPHABET_SIZE
        mapped = self.model.unwire(shift)
        return (mapped - self._offset) % ALPHABET_SIZE

    def __repr__(self) -> str:
        return f"<Rotor {self.model.name} offset={self._offset}>"
