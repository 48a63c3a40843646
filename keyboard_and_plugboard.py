# keyboard_and_plugboard.py
from __future__ import annotations

from debug import Debug
from wiring import ALPHABET, SIZE, is_involution

debug = Debug()
debug.disable("keyboard", "plugboard")


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    # letter → integer signal (either case)
    def forward(self, letter: str) -> int:
        try:
            signal = self.alpha_to_index[letter.lower()]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            ) from None
        debug.log("keyboard", f"key {letter} -> {signal}")
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        debug.log("keyboard", f"lamp {signal} -> {self.alphabet[signal]}")
        return self.alphabet[signal]


keyboard = Keyboard()


# ── Plugboard ─────────────────────────────────────────────────────
class PlugboardError(ValueError):
    pass


class OverlappingWire(PlugboardError):
    """One end of the requested wire is already plugged elsewhere."""


class WireNotFound(PlugboardError):
    """The two letters are not joined by a wire."""


class Plugboard:
    """Pairwise letter swaps; unplugged letters map to themselves."""

    def __init__(self) -> None:
        self.wires: list[int] = list(range(SIZE))

    def add_wire(self, a: str, b: str) -> None:
        ia, ib = keyboard.forward(a), keyboard.forward(b)
        if self.wires[ia] != ia or self.wires[ib] != ib:
            raise OverlappingWire(f"{a}-{b}")
        if ia == ib:
            return

        self.wires[ia], self.wires[ib] = ib, ia
        debug.log("plugboard", f"plugged {ALPHABET[ia]}-{ALPHABET[ib]}")

    def remove_wire(self, a: str, b: str) -> None:
        ia, ib = keyboard.forward(a), keyboard.forward(b)
        if ia == ib or self.wires[ia] != ib or self.wires[ib] != ia:
            raise WireNotFound(f"{a}-{b}")

        self.wires[ia], self.wires[ib] = ia, ib
        debug.log("plugboard", f"unplugged {ALPHABET[ia]}-{ALPHABET[ib]}")
        assert is_involution(self.wires)

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        mapped = self.wires[signal]
        debug.trace("plugboard", "plugboard", signal, mapped)
        return mapped

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    def translate(self, letter: str) -> str:
        return ALPHABET[self.wires[keyboard.forward(letter)]]

    def pairs(self) -> list[tuple[str, str]]:
        """Connected letters, each pair once with the smaller letter first."""
        return [
            (ALPHABET[i], ALPHABET[j]) for i, j in enumerate(self.wires) if i < j
        ]

    def __len__(self) -> int:
        return len(self.pairs())

    def __str__(self) -> str:
        swaps = [f"{a}-{b}" for a, b in self.pairs()]
        return " ".join(swaps) if swaps else "(no wires)"

    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self.pairs()]
        return f"<Plugboard {' '.join(swaps)}>"
