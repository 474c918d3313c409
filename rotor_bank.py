# rotor_bank.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from copy import copy

from debug import debug
from errors import ConfigurationError, DuplicateRotorModel
from keyboard import ALPHABET_SIZE, Symbol
from rotor_and_reflector import Reflector, Rotor, RotorModel

stepping_log = debug.get_logger("stepping")
encipher_log = debug.get_logger("encipher")


class RotorBank:
    """Three distinct rotors (left, middle, right) in front of a reflector.

    The bank owns its rotors: offsets only ever move through
    `encrypt_char`, one keypress at a time.
    """

    def __init__(
        self,
        reflector: Reflector,
        left: Rotor,
        middle: Rotor,
        right: Rotor,
        *,
        double_step: bool = False,
    ) -> None:
        models = (left.model, middle.model, right.model)
        if len(set(models)) != len(models):
            raise DuplicateRotorModel(models)

        self._reflector = reflector
        # the bank steps its own copies; rotors passed in never move
        self._left, self._middle, self._right = (copy(r) for r in (left, middle, right))
        self._double_step = double_step

    @classmethod
    def from_models(
        cls,
        reflector: Reflector,
        models: tuple[RotorModel, RotorModel, RotorModel],
        positions: str = "",
        *,
        double_step: bool = False,
    ) -> "RotorBank":
        """Build fresh rotors for `models`, left to right, set to `positions`."""
        if len(models) != 3 or len(positions) > 3:
            raise ConfigurationError(
                f"Expected 3 rotor models and at most 3 positions, got {len(models)} and {positions!r}"
            )
        letters = list(positions) + [None] * (3 - len(positions))
        left, middle, right = (Rotor(m, p) for m, p in zip(models, letters))
        return cls(reflector, left, middle, right, double_step=double_step)

    # ── read-only views ─────────────────────────────────────────
    @property
    def reflector(self) -> Reflector:
        return self._reflector

    @property
    def double_step(self) -> bool:
        return self._double_step

    @property
    def models(self) -> tuple[RotorModel, RotorModel, RotorModel]:
        return (self._left.model, self._middle.model, self._right.model)

    @property
    def offsets(self) -> tuple[int, int, int]:
        return (self._left.offset, self._middle.offset, self._right.offset)

    @property
    def positions(self) -> str:
        return self._left.window + self._middle.window + self._right.window

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors for one keypress, before the signal passes."""
        left, middle, right = self._left, self._middle, self._right

        # decide which rotors step (two-phase clarity); every carry is
        # taken from the offset a rotor reached on an earlier keypress
        step_L = middle.at_turnover()
        step_M = right.at_turnover()
        if self._double_step:
            # historic anomaly: a middle rotor at turnover re-steps itself
            step_M = step_M or step_L

        right.step()
        if step_M:
            middle.step()
        if step_L:
            left.step()

        stepping_log.debug("offsets %s", self.offsets)

    # ── encipher one symbol  ────────────────────────────────────

    def _forward(self, signal: int) -> int:
        for rotor in (self._right, self._middle, self._left):
            signal = rotor.forward(signal)
        return signal

    def _backward_plain(self, signal: int) -> int:
        for rotor in (self._left, self._middle, self._right):
            signal = rotor.backward(signal)
        return signal

    def _backward(self, signal: int) -> int:
        # last stage exits in the right rotor's frame
        return (self._backward_plain(signal) - self._right.offset) % ALPHABET_SIZE

    def encrypt_char(self, symbol: Symbol) -> Symbol:
        self._step_rotors()

        signal = self._forward(symbol.index)
        reflected = self._reflector.reflect(signal)
        out = Symbol.from_index(self._backward(reflected))

        encipher_log.debug(
            "%s -> fwd %d -> refl %d -> %s", symbol.upper, signal, reflected, out.upper
        )
        return out

    def decrypt_char(self, symbol: Symbol) -> Symbol:
        """Inverse of `encrypt_char` for the same keypress.

        The right-frame shift on the way out means the path is not its own
        inverse; undo that shift first, then run the plain path.
        """
        self._step_rotors()

        signal = (symbol.index + self._right.offset) % ALPHABET_SIZE
        signal = self._reflector.reflect(self._forward(signal))
        out = Symbol.from_index(self._backward_plain(signal))

        encipher_log.debug("%s <- %s", symbol.upper, out.upper)
        return out

    def __repr__(self) -> str:
        names = "-".join(m.name for m in self.models)
        return f"<RotorBank {self._reflector.name} {names} offsets={self.offsets}>"
