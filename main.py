# main.py
from __future__ import annotations

import argparse, json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from debug import COMPONENTS, Debug
from enigma import Enigma

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()
debug.disable("config")


@dataclass(slots=True)
class Settings:
    """Everything needed to rebuild a machine at its starting key."""

    rotors: List[str] = field(default_factory=lambda: ["I", "II", "III"])
    positions: str = "aaa"
    reflector: str = "A"
    reflector_position: str = "a"
    plugs: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a JSON object, not {type(data).__name__}")

        required = {"rotors", "reflector"}
        missing = required - data.keys()
        if missing:
            raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")

        return cls(
            rotors=[r for r in _str_list(data, "rotors") if r],
            positions=_str(data, "positions", "aaa"),
            reflector=_str(data, "reflector", "A"),
            reflector_position=_str(data, "reflector_position", "a"),
            plugs=[p for p in _str_list(data, "plugs") if p],
        )

    def build(self) -> Enigma:
        """Return a fresh machine; raises EnigmaError on a bad setting."""
        if len(self.rotors) != 3:
            raise ValueError(f"Need exactly 3 rotors, got {len(self.rotors)}")

        machine = Enigma()
        for slot, name in enumerate(self.rotors):
            machine.select_rotor(name, slot)
        machine.select_reflector(self.reflector)
        machine.set_rotor_positions(self.positions)
        machine.set_reflector_position(self.reflector_position)
        for token in self.plugs:
            machine.add_wire(token)

        debug.log("config", repr(machine))
        return machine


def _str(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"Config key {key!r} must be a string, got {value!r}")
    return value


def _str_list(data: Dict[str, Any], key: str) -> List[str]:
    """A comma string or a list of strings, each item trimmed."""
    value = data.get(key, [])
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Config key {key!r} must be a string or a list of strings, got {value!r}")
    return [v.strip() for v in value]


def load_config(path: str | Path) -> Settings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    debug.log("config", f"loaded {path}")
    return Settings.from_dict(data)


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encipher text with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher (letters only; everything else passes through).")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON.")
    p.add_argument("--rotors", metavar="R,R,R", help="Rotor names for slots 0,1,2, e.g. I,II,III")
    p.add_argument("--positions", metavar="XYZ", help="Rotor start letters for slots 0,1,2")
    p.add_argument("--reflector", choices=["a", "b", "c", "A", "B", "C"], help="Reflector name")
    p.add_argument("--reflector-position", dest="reflector_position", metavar="X", help="Reflector start letter")
    p.add_argument("--plugs", metavar="a-b,c-d", help="Comma separated plugboard wires")
    p.add_argument("--show", action="store_true", help="Print the machine configuration.")
    p.add_argument("--debug", nargs="+", choices=COMPONENTS, default=[], metavar="COMPONENT", help=f"Log components: {', '.join(COMPONENTS)}")
    p.add_argument("--log-file", dest="log_file", metavar="FILE", help="Also write enabled log components to FILE.")
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    """File settings (if any) with command-line flags layered on top."""
    settings = load_config(args.config) if args.config else Settings()

    if args.rotors:
        settings.rotors = [r.strip() for r in args.rotors.split(",")]
    if args.positions:
        settings.positions = args.positions
    if args.reflector:
        settings.reflector = args.reflector
    if args.reflector_position:
        settings.reflector_position = args.reflector_position
    if args.plugs:
        settings.plugs = [p.strip() for p in args.plugs.split(",") if p.strip()]
    return settings


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    debug.enable(*args.debug)

    try:
        if args.log_file:
            Debug(log_to=args.log_file)
        machine = settings_from_args(args).build()
    except (OSError, ValueError) as err:        # EnigmaError is a ValueError
        raise SystemExit(f"❌  {err}")

    if args.show:
        print(machine)

    if args.message is not None:
        print(machine.encipher_text(args.message))


if __name__ == "__main__":
    main()
