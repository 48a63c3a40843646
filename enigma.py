# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from copy import deepcopy

from debug import Debug
from keyboard_and_plugboard import (
    Plugboard,
    PlugboardError,
    OverlappingWire,
    keyboard,
)
from rotor_and_reflector import Rotor, Reflector
from utilities import new_reflector, new_rotor, parse_wire_token, split_csv

debug = Debug()
debug.disable("encipher")

N_ROTORS = 3


# ── errors ──────────────────────────────────────────────────────────

class EnigmaError(ValueError):
    """Base for every configuration error the machine reports."""

    label = "Enigma Error"

    def __init__(self, text: str) -> None:
        super().__init__(f"{self.label}: {text}")
        self.text = text


class InvalidRotorName(EnigmaError):
    label = "Invalid Rotor"


class InvalidReflectorName(EnigmaError):
    label = "Invalid Reflector"


class InvalidWireToken(EnigmaError):
    label = "Invalid Plugboard Wire"


class WireOverlap(EnigmaError):
    label = "Plugboard Wire Overlap"


class WireRemovalFailed(EnigmaError):
    label = "Plugboard Wire Removal Failure"


# ── machine ─────────────────────────────────────────────────────────

class Enigma:
    """Three rotors, a plugboard and a reflector.

    Slot 0 is the leftmost rotor and slot 2 the rightmost, fastest one.
    ``encipher_text`` turns the rotors as a side effect, so one instance
    must not be shared between concurrent callers; use ``clone()``.
    """

    def __init__(
        self,
        rotors: list[Rotor] | None = None,
        plugboard: Plugboard | None = None,
        reflector: Reflector | None = None,
    ) -> None:
        if rotors is None:
            rotors = [new_rotor(name) for name in ("I", "II", "III")]
        if len(rotors) != N_ROTORS:
            raise ValueError(f"Expected {N_ROTORS} rotors, got {len(rotors)}")

        self.rotors     = list(rotors)
        self.plugboard  = plugboard if plugboard is not None else Plugboard()
        self.reflector  = reflector if reflector is not None else new_reflector("A")

    # ── wheel selection ─────────────────────────────────────────

    def select_rotor(self, name: str, slot: int) -> None:
        """Put a fresh rotor *name* (I–VIII) at offset 0 into *slot*."""
        if not 0 <= slot < N_ROTORS:
            raise IndexError(f"Rotor slot {slot} out of range 0–{N_ROTORS - 1}")
        try:
            self.rotors[slot] = new_rotor(name)
        except KeyError:
            raise InvalidRotorName(name) from None
        debug.log("encipher", f"slot {slot} <- rotor {name}")

    def select_reflector(self, name: str) -> None:
        try:
            self.reflector = new_reflector(name)
        except KeyError:
            raise InvalidReflectorName(name) from None
        debug.log("encipher", f"reflector <- {name}")

    # ── key settings ────────────────────────────────────────────

    def set_rotor_positions(self, text: str) -> None:
        """Set slots 0, 1, 2 from the first three letters; the rest is ignored."""
        for rotor, letter in zip(self.rotors, text):
            rotor.set(letter)

    def set_reflector_position(self, text: str) -> None:
        if text:
            self.reflector.set(text[0])

    @property
    def positions(self) -> str:
        """Current rotor offsets as letters, slot 0 first."""
        return "".join(keyboard.backward(r.position) for r in self.rotors)

    # ── plugboard ───────────────────────────────────────────────

    def add_wire(self, token: str) -> None:
        """Plug one ``"<letter>-<letter>"`` wire, e.g. ``"a-e"``."""
        try:
            a, b = parse_wire_token(token)
        except ValueError:
            raise InvalidWireToken(token) from None

        try:
            self.plugboard.add_wire(a, b)
        except OverlappingWire as err:
            raise WireOverlap(f"Couldn't add wire due to overlap {token}") from err
        except PlugboardError as err:  # pragma: no cover
            raise AssertionError(f"Unexpected plugboard error adding {token!r}") from err

    def add_wires(self, wires: str) -> None:
        """``"a-e,b-d,x-z"``; stops at the first bad wire, keeping earlier ones."""
        for token in split_csv(wires):
            self.add_wire(token)

    def remove_wire(self, end: str) -> None:
        """Unplug the wire that has *end* as one of its letters."""
        try:
            partner = self.plugboard.translate(end)
            self.plugboard.remove_wire(end, partner)
        except ValueError:              # WireNotFound, or not a letter
            raise WireRemovalFailed(f"Couldn't remove {end}") from None

    def remove_wires(self, ends: str) -> None:
        """``"e,q"`` unplugs the wires at e and at q; blank items are skipped."""
        for item in split_csv(ends):
            if item:
                self.remove_wire(item[0])

    # ── enciphering ─────────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Odometer: the rightmost rotor always turns, carries move left."""
        carry = True
        for rotor in reversed(self.rotors):
            if not carry:
                break
            carry = rotor.step()        # .step() returns bool carry
        debug.log("stepping", f"Rotor pos {self.positions}")

    def _signal_path(self, signal: int) -> int:
        signal = self.plugboard.forward(signal)

        for rotor in self.rotors:
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.backward(signal)

        return self.plugboard.backward(signal)

    def encipher_char(self, letter: str) -> str:
        """Encipher one letter (either case) and then step the rotors."""
        out_ch = keyboard.backward(self._signal_path(keyboard.forward(letter)))
        debug.log("encipher", f"{letter} -> {out_ch}")
        self._step_rotors()
        return out_ch

    def encipher_text(self, text: str) -> str:
        """Encipher every ASCII letter of *text*; anything else is copied as is.

        Output letters are lowercase. Only letters turn the rotors.
        """
        out: list[str] = []
        for ch in text:
            if ch.isascii() and ch.isalpha():
                out.append(self.encipher_char(ch))
            else:
                out.append(ch)
        return "".join(out)

    # ── niceties ────────────────────────────────────────────────

    def clone(self) -> "Enigma":
        return deepcopy(self)

    def __str__(self) -> str:
        rotor_lines = "\n".join(
            f"\tRotor {i}: {rotor}" for i, rotor in enumerate(self.rotors, start=1)
        )
        return (
            "Rotor Configuration:\n"
            f"{rotor_lines}\n"
            "Reflector Configuration:\n"
            f"\t{self.reflector}\n"
            "Plugboard Configuration:\n"
            f"\t{self.plugboard}\n"
        )

    def __repr__(self) -> str:
        names = ",".join(r.name for r in self.rotors)
        return f"<Enigma rotors={names} pos={self.positions} reflector={self.reflector.name}>"
