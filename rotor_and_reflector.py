# rotor_and_reflector.py
from __future__ import annotations

from debug import Debug
from keyboard_and_plugboard import keyboard
from wiring import ALPHABET, SIZE, invert, is_involution, shift_translate, table_from_letters

debug = Debug()
debug.disable("stepping")


class Rotor:
    def __init__(self, wiring: str, notches: str, name: str = "") -> None:
        self.name = name

        # integer lookup tables
        self._fwd = table_from_letters(wiring)
        self._rev = invert(self._fwd)

        self.notches = {keyboard.forward(c) for c in notches}
        self.position = 0

    def set(self, letter: str) -> None:
        self.position = keyboard.forward(letter)

    # ── stepping --------------------------------------------------
    def step(self) -> bool:
        """Advance one and return True when stepping *off* a notch (carry)."""
        left = self.position
        self.position = (self.position + 1) % SIZE
        hit = left in self.notches
        debug.log("stepping", f"Rotor {self.name} {ALPHABET[left]}->{ALPHABET[self.position]}, carry={hit}")
        return hit

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        out = shift_translate(self._fwd, self.position, sig)
        debug.trace("rotor", f"rotor {self.name} fwd", sig, out)
        return out

    def backward(self, sig: int) -> int:
        out = shift_translate(self._rev, self.position, sig)
        debug.trace("rotor", f"rotor {self.name} rev", sig, out)
        return out

    def translate_forward(self, letter: str) -> str:
        return ALPHABET[self.forward(keyboard.forward(letter))]

    def translate_reverse(self, letter: str) -> str:
        return ALPHABET[self.backward(keyboard.forward(letter))]

    # ── niceties --------------------------------------------------
    def __str__(self) -> str:
        return f"{self.name or '?'} @ {ALPHABET[self.position]}"

    def __repr__(self) -> str:
        notches = "".join(ALPHABET[n] for n in sorted(self.notches))
        return f"<Rotor {self.name} pos={ALPHABET[self.position]} notches={notches}>"


class Reflector:
    def __init__(self, wiring: str, name: str = "") -> None:
        table = table_from_letters(wiring)

        # involution (w[i] = j ⇒ w[j] = i) and no self-maps
        if not is_involution(table) or any(i == j for i, j in enumerate(table)):
            raise ValueError("Reflector wiring must be an involution with no fixed points")

        self.name = name
        self._map = table
        self.position = 0  # rotational offset

    def set(self, letter: str) -> None:
        self.position = keyboard.forward(letter)

    def reflect(self, sig: int) -> int:
        out = shift_translate(self._map, self.position, sig)
        debug.trace("reflector", f"reflector {self.name}", sig, out)
        return out

    def translate(self, letter: str) -> str:
        return ALPHABET[self.reflect(keyboard.forward(letter))]

    def __str__(self) -> str:
        return f"{self.name or '?'} @ {ALPHABET[self.position]}"

    def __repr__(self) -> str:
        return f"<Reflector {self.name} pos={ALPHABET[self.position]}>"
