# utilities.py
from __future__ import annotations

from copy import deepcopy
from typing import Dict, List, Tuple

from rotor_and_reflector import Rotor, Reflector

# ────────────────────────────────────────────────────────────────────────
#  0. Wire-token helpers
# ────────────────────────────────────────────────────────────────────────


def split_csv(text: str) -> List[str]:
    """``" a-e, b-c "`` → ``["a-e", "b-c"]`` (items trimmed, order kept)."""
    return [item.strip() for item in text.split(",")]


def _is_letter(ch: str) -> bool:
    return len(ch) == 1 and ch.isascii() and ch.isalpha()


def parse_wire_token(token: str) -> Tuple[str, str]:
    """``"a-e"`` → ``("a", "e")``. Exactly one letter either side of a single dash."""
    sides = token.split("-")
    if len(sides) != 2:
        raise ValueError(f"Wire {token!r} must be of the form <letter>-<letter>")
    a, b = sides
    if not (_is_letter(a) and _is_letter(b)):
        raise ValueError(f"Wire {token!r} must join two single letters")
    return a, b


# ────────────────────────────────────────────────────────────────────────
#  1. Wheel database
# ────────────────────────────────────────────────────────────────────────

# Historical rotors ------------------------------------------------------
I    = Rotor("EKMFLGDQVZNTOWYHXUSPAIBRCJ", notches="Q",  name="I")
II   = Rotor("AJDKSIRUXBLHWTMCQGZNPYFVOE", notches="E",  name="II")
III  = Rotor("BDFHJLCPRTXVZNYEIWGAKMUSQO", notches="V",  name="III")
IV   = Rotor("ESOVPZJAYQUIRHXLNFTGKDCMWB", notches="J",  name="IV")
V    = Rotor("VZBRGITYUPSDNHLXAWMJQOFECK", notches="Z",  name="V")
VI   = Rotor("JPGVOUMFYQBENHZRDKASXLICTW", notches="ZM", name="VI")
VII  = Rotor("NZJHGRCXMYSWBOUFAIVLPEKQDT", notches="ZM", name="VII")
VIII = Rotor("FKQHTLXOCBJSPDZRAMEWNIUYGV", notches="ZM", name="VIII")

# Historical reflectors --------------------------------------------------
A = Reflector("EJMZALYXVBWFCRQUONTSPIKHGD", name="A")
B = Reflector("YRUHQSLDPXNGOKMIEBFZCWVJAT", name="B")
C = Reflector("FVPJIAOYEDRZXWGCTKUQSBNMHL", name="C")

# Build the lookup dicts -------------------------------------------------

# rotor names are matched exactly (canonical uppercase roman numerals)
rotor_dict: Dict[str, Rotor] = {
    "I": I, "II": II, "III": III, "IV": IV,
    "V": V, "VI": VI, "VII": VII, "VIII": VIII,
}

base_reflectors: Dict[str, Reflector] = {"A": A, "B": B, "C": C}

reflector_dict: Dict[str, Reflector] = {}
for name, obj in base_reflectors.items():
    reflector_dict[name] = reflector_dict[name.lower()] = obj  # uppercase + alias

ROTOR_NAMES: Tuple[str, ...] = tuple(rotor_dict)
REFLECTOR_NAMES: Tuple[str, ...] = tuple(base_reflectors)


def new_rotor(name: str) -> Rotor:
    """Fresh copy of a named rotor at offset 0; ``KeyError`` if unknown."""
    return deepcopy(rotor_dict[name])


def new_reflector(name: str) -> Reflector:
    """Fresh copy of a named reflector at offset 0; ``KeyError`` if unknown."""
    return deepcopy(reflector_dict[name])


__all__ = [
    "ROTOR_NAMES",
    "REFLECTOR_NAMES",
    "new_rotor",
    "new_reflector",
    "parse_wire_token",
    "split_csv",
]
