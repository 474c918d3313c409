# settings.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

from debug import debug
from errors import ConfigurationError, DuplicateRotorModel
from keyboard import ALPHABET
from rotor_and_reflector import Reflector, RotorModel
from rotor_bank import RotorBank

REQUIRED_KEYS = {"reflector", "rotors"}

log = debug.get_logger("settings")


@dataclass(slots=True)
class MachineSettings:
    """Everything needed to set up a machine for one message."""

    reflector: str = "B"
    rotors: List[str] = field(default_factory=lambda: ["I", "II", "III"])  # left → right
    positions: str = ""             # starting letters, left → right; "" = all zero
    double_step: bool = False       # historic middle-rotor anomaly

    def validate(self) -> None:
        Reflector.from_name(self.reflector)
        if len(self.rotors) != 3:
            raise ConfigurationError(f"Need exactly 3 rotors, got {len(self.rotors)}")
        models = [RotorModel.from_name(name) for name in self.rotors]
        if len(set(models)) != 3:
            raise DuplicateRotorModel(models)
        if len(self.positions) > 3 or not all(ch.upper() in ALPHABET and len(ch.upper()) == 1 for ch in self.positions):
            raise ConfigurationError(f"Positions must be up to 3 letters A–Z, got {self.positions!r}")

    # ── dict / JSON helpers ─────────────────────────────────────
    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")
        settings = cls(
            reflector=str(data["reflector"]),
            rotors=[str(r) for r in data["rotors"]],
            positions=str(data.get("positions", "")),
            double_step=bool(data.get("double_step", False)),
        )
        settings.validate()
        return settings


def load_settings(path: str | Path) -> MachineSettings:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object")
    log.debug("loaded %s: %s", path, data)
    return MachineSettings.from_dict(data)


def save_settings(settings: MachineSettings, path: str | Path) -> Path:
    settings.validate()
    path = Path(path)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    return path


def build_bank(settings: MachineSettings) -> RotorBank:
    """Fresh rotors every call, so two machines never share offsets."""
    settings.validate()
    models = tuple(RotorModel.from_name(name) for name in settings.rotors)
    bank = RotorBank.from_models(
        Reflector.from_name(settings.reflector),
        models,
        settings.positions,
        double_step=settings.double_step,
    )
    log.debug("built %r", bank)
    return bank
