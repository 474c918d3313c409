# main.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from debug import COMPONENTS, configure, debug
from errors import EnigmaError
from machine import Machine, clean_text
from settings import MachineSettings, load_settings

DEFAULT_CONFIG = Path("rotor_config.json")


# ────────────────────────────────────────────────────────────────────────
#  1. Settings
# ────────────────────────────────────────────────────────────────────────


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    """JSON file first, then any command-line overrides on top."""
    cfg_path = Path(args.config) if args.config else DEFAULT_CONFIG
    if args.config or cfg_path.exists():
        settings = load_settings(cfg_path)
    else:
        settings = MachineSettings()

    if args.reflector:
        settings.reflector = args.reflector
    if args.rotors:
        settings.rotors = list(args.rotors)
    if args.positions is not None:
        settings.positions = args.positions
    if args.double_step:
        settings.double_step = True

    settings.validate()
    return settings


# ────────────────────────────────────────────────────────────────────────
#  2. One message
# ────────────────────────────────────────────────────────────────────────


def group(text: str, block: int) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


def run_message(settings: MachineSettings, text: str, *, decrypt: bool, clean: bool) -> str:
    """Each message gets a freshly set machine."""
    if clean:
        text = clean_text(text)
    machine = Machine.from_settings(settings)
    return machine.decrypt(text) if decrypt else machine.encrypt(text)


# ────────────────────────────────────────────────────────────────────────
#  3. CLI
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encipher text with a three-rotor machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive REPL starts.")
    p.add_argument("-d", "--decrypt", action="store_true", help="Decipher instead of encipher.")
    p.add_argument("--config", metavar="FILE", help=f"Machine settings JSON (default: {DEFAULT_CONFIG} when present).")
    p.add_argument("--reflector", metavar="NAME", help="Reflector A, B or C.")
    p.add_argument("--rotors", nargs=3, metavar=("LEFT", "MIDDLE", "RIGHT"), help="Three distinct rotors from I–V.")
    p.add_argument("--positions", metavar="LETTERS", help="Starting letters, left to right (e.g. ABC).")
    p.add_argument("--double-step", dest="double_step", action="store_true", help="Reproduce the historic middle-rotor double step.")
    p.add_argument("--clean", action="store_true", help="Upper-case and strip anything outside A–Z instead of rejecting it.")
    p.add_argument("--block", type=int, default=5, help="Group output in blocks of N letters (0 = no grouping). Default: 5")
    p.add_argument("--debug", nargs="+", metavar="COMPONENT", choices=[*COMPONENTS, "all"], default=[], help="Enable debug logging for components.")
    p.add_argument("--log-file", dest="log_file", metavar="FILE", help="Also write debug output to FILE.")
    return p.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)

    if args.debug:
        configure(log_to=args.log_file)
        debug.enable(*(COMPONENTS if "all" in args.debug else args.debug))

    try:
        settings = settings_from_args(args)
    except (EnigmaError, OSError) as e:
        sys.exit(f"Failed to load configuration: {e}")

    label = "Decrypted" if args.decrypt else "Encrypted"

    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        try:
            out = run_message(settings, args.message, decrypt=args.decrypt, clean=args.clean)
        except EnigmaError as e:
            sys.exit(f"❌  {e}")
        print(f"{label}:", group(out, args.block))
        return 0

    # interactive REPL ---------------------------------------------------
    rotors = " ".join(settings.rotors)
    print(f"\nReflector {settings.reflector}, rotors {rotors}, positions {settings.positions or '(all offsets 0)'}.")
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input("Message > ")
        except EOFError:
            break
        if not txt.strip():
            break
        try:
            out = run_message(settings, txt, decrypt=args.decrypt, clean=args.clean)
        except EnigmaError as e:
            print(f"❌  {e}")
            continue
        print(f"{label}:", group(out, args.block))
    return 0


if __name__ == "__main__":
    sys.exit(main())
