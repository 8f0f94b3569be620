"""
config.py — Live run configuration
===================================
Everything the input widgets can change.  Speed is read by the emitter on
every step, so it applies to a run in flight.  Array size and algorithm
are locked while a run is active; array size and pending text only take
effect on the next generate.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from algorithms import REGISTRY
from sequence import random_array, parse_array_text
from sequence.store import Number
from engine.emitter import compute_delay

log = logging.getLogger(__name__)

MIN_SPEED          = 1
MAX_SPEED          = 50
DEFAULT_SPEED      = 25
DEFAULT_ARRAY_SIZE = 20
DEFAULT_ALGORITHM  = "bubble"


@dataclass
class RunConfig:
    speed:      int  = DEFAULT_SPEED
    array_size: int  = DEFAULT_ARRAY_SIZE
    array_text: str  = ""
    algorithm:  str  = DEFAULT_ALGORITHM
    locked:     bool = field(default=False, repr=False)

    def __post_init__(self):
        self.speed = max(MIN_SPEED, min(MAX_SPEED, int(self.speed)))
        if self.array_size <= 0:
            self.array_size = DEFAULT_ARRAY_SIZE

    # ------------------------------------------------------------------
    # Setters (called by the input layer)
    # ------------------------------------------------------------------
    def set_speed(self, value: int) -> int:
        self.speed = max(MIN_SPEED, min(MAX_SPEED, int(value)))
        return self.speed

    def set_array_size(self, n: int) -> bool:
        if self.locked:
            log.debug("array size change ignored while running")
            return False
        n = int(n)
        if n <= 0:
            log.warning("array size %d is not positive, using %d", n, DEFAULT_ARRAY_SIZE)
            n = DEFAULT_ARRAY_SIZE
        self.array_size = n
        return True

    def set_array_content(self, text: str) -> None:
        self.array_text = (text or "").strip()

    def select_algorithm(self, name: str) -> bool:
        if self.locked:
            log.debug("algorithm change ignored while running")
            return False
        if not isinstance(name, str) or name not in REGISTRY:
            log.warning("unknown algorithm %r, keeping %r", name, self.algorithm)
            return False
        self.algorithm = name
        return True

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def delay_ms(self) -> int:
        return compute_delay(self.speed)

    def initial_values(self) -> List[Number]:
        """The array the next generate should load."""
        if self.array_text:
            parsed = parse_array_text(self.array_text)
            if parsed:
                return parsed
            log.warning("no finite numbers in %r, generating %d random values",
                        self.array_text, self.array_size)
        return random_array(self.array_size)

    def lock(self) -> None:
        self.locked = True

    def unlock(self) -> None:
        self.locked = False
