"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class MonsterBattleError(Exception):
    pass

class ScriptExhaustedError(MonsterBattleError):
    def __init__(self, kind: str):
        super().__init__(f"No scripted {kind} rolls left")
        self.kind = kind

class RollOutOfRangeError(MonsterBattleError):
    def __init__(self, value: int, low: int, high: int):
        super().__init__(f"Scripted roll {value} outside [{low}, {high})")
        self.value = value
        self.low = low
        self.high = high
