"""Roll sources for the battle engine.

Production code uses ``random.Random`` (optionally seeded). ``ScriptedRng``
replays queued rolls so a battle can be driven to an exact outcome.
"""
from __future__ import annotations
import random
from collections import deque
from typing import Iterable, Optional
from monsterbattle.core.errors import ScriptExhaustedError, RollOutOfRangeError

# Chance values for scripted critical rolls
CRIT = 0.0
NO_CRIT = 0.99

def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)

class ScriptedRng:
    """Feeds queued chance floats to ``random()`` and integers to ``randrange()``."""

    def __init__(self, chances: Iterable[float] = (), values: Iterable[int] = ()):
        self.chances = deque(chances)
        self.values = deque(values)

    def random(self) -> float:
        if not self.chances:
            raise ScriptExhaustedError("chance")
        return self.chances.popleft()

    def randrange(self, start: int, stop: int) -> int:
        if not self.values:
            raise ScriptExhaustedError("value")
        value = self.values.popleft()
        if not start <= value < stop:
            raise RollOutOfRangeError(value, start, stop)
        return value

    def queue(self, chance: float, value: int):
        self.chances.append(chance)
        self.values.append(value)

    def exhausted(self) -> bool:
        return not self.chances and not self.values

    @classmethod
    def hits(cls, *rolls: tuple[bool, int]) -> "ScriptedRng":
        """Build from (critical, amount) pairs in the order the engine draws them."""
        rng = cls()
        for critical, amount in rolls:
            rng.queue(CRIT if critical else NO_CRIT, amount)
        return rng
