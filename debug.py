# debug.py
from __future__ import annotations
import logging
from typing import Dict

from wiring import ALPHABET

# component names understood by Debug.enable()/disable()
COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher", "config")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Debug:
    """Per-component switches in front of the ``ENIGMA`` logger.

    Every module builds its own ``Debug()`` but the switch board is shared,
    so ``main.py --debug stepping`` reaches the rotors as well.
    """

    _root_configured: bool = False          # class-level guard
    _enabled: bool = True
    _components: Dict[str, bool] = {name: False for name in COMPONENTS}

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        If `log_to` is given, ENIGMA messages also stream to that file.
        Multiple Debug() instances share the same root logger config.
        """
        if not Debug._root_configured:
            logging.basicConfig(
                level=logging.DEBUG,
                format=LOG_FORMAT,
                datefmt=DATE_FORMAT,
                handlers=[logging.StreamHandler()],
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")

        # modules build their Debug() at import, so a file can arrive later
        if log_to:
            handler = logging.FileHandler(log_to, encoding="utf-8")
            handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
            self.logger.addHandler(handler)

    # ── logging API ──────────────────────────────────────────────
    def active(self, component: str) -> bool:
        return Debug._enabled and Debug._components.get(component, False)

    def log(self, component: str, message: str) -> None:
        if self.active(component):
            self.logger.debug("[%s] %s", component.upper(), message)

    def trace(self, component: str, stage: str, sig_in: int, sig_out: int) -> None:
        """Log one hop of the signal path as letters, e.g. ``rotor 1: a->e``."""
        if self.active(component):
            self.log(component, f"{stage}: {ALPHABET[sig_in]}->{ALPHABET[sig_out]}")

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = False

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug._components.copy()

    # ── helpers ──────────────────────────────────────────────────
    @staticmethod
    def _require(component: str) -> None:
        if component not in Debug._components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._components.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"
