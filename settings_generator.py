# settings_generator.py
from __future__ import annotations

import argparse
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from keyboard import ALPHABET
from rotor_and_reflector import Reflector, RotorModel
from settings import MachineSettings, save_settings

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def generate_settings(rng: Random | SystemRandom, *, double_step: bool = False) -> MachineSettings:
    """Three distinct rotors, one reflector and random starting letters."""
    rotors = rng.sample([m.name for m in RotorModel], 3)
    reflector = rng.choice([r.name for r in Reflector])
    positions = "".join(rng.choice(ALPHABET) for _ in rotors)
    return MachineSettings(
        reflector=reflector,
        rotors=rotors,
        positions=positions,
        double_step=double_step,
    )


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate daily rotor machine settings")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("rotor_config.json"),
        help="Destination JSON file (default: rotor_config.json)",
    )
    p.add_argument("--double-step", dest="double_step", action="store_true", help="Mark the settings for double-step stepping")
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    cfg = generate_settings(build_rng(args.seed), double_step=args.double_step)
    save_settings(cfg, args.outfile)
    print(f"✅  Wrote {args.outfile}\n"
        f"   reflector   : {cfg.reflector}\n"
        f"   rotors      : {cfg.rotors}\n"
        f"   positions   : {cfg.positions}")


if __name__ == "__main__":
    main()
