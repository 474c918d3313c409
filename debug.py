# debug.py
from __future__ import annotations

import logging
from typing import Dict

ROOT_LOGGER = "ROTOR"
COMPONENTS = ("keyboard", "rotor", "reflector", "stepping", "encipher", "settings")

# library code stays silent unless the host application wires up handlers
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def configure(*, log_to: str | None = None) -> None:
    """Stream ROTOR debug records to stderr, and to `log_to` when given.

    Only the command-line entry point calls this.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_to:
        handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

    logging.basicConfig(
        level=logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
    logging.getLogger(ROOT_LOGGER).setLevel(logging.DEBUG)


class _ComponentFilter(logging.Filter):
    """Drops DEBUG records of a component the switchboard has turned off."""

    def __init__(self, switchboard: "Debug", component: str) -> None:
        super().__init__()
        self.switchboard = switchboard
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno > logging.DEBUG or self.switchboard.is_enabled(self.component)


class Debug:
    """Switchboard over one `<root>.<component>` logger per component.

    Every component starts switched off.
    """

    def __init__(self, root: str = ROOT_LOGGER) -> None:
        self.root = root
        self.enabled = True
        self.components: Dict[str, bool] = {c: False for c in COMPONENTS}
        self._loggers: Dict[str, logging.Logger] = {}
        for c in COMPONENTS:
            logger = logging.getLogger(f"{root}.{c}")
            logger.addFilter(_ComponentFilter(self, c))
            self._loggers[c] = logger

    def get_logger(self, component: str) -> logging.Logger:
        self._require(component)
        return self._loggers[component]

    def is_enabled(self, component: str) -> bool:
        return self.enabled and self.components.get(component, False)

    # ── switches ─────────────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        self.components[component] = not self.components[component]

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        """Copy of the component map."""
        return dict(self.components)

    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug {self.root} enabled={self.enabled} active={active}>"


# the switchboard every module logs through; main.py flips it
debug = Debug()
