"""Tuning constants and pure resolution helpers for the battle engine."""
from __future__ import annotations
from typing import Optional, Protocol, Tuple

MAX_HEALTH = 100

ATTACK_DAMAGE = (5, 12)
SPECIAL_ATTACK_DAMAGE = (10, 20)
MONSTER_ATTACK_DAMAGE = (8, 15)
HEAL_AMOUNT = (8, 20)

SPECIAL_ATTACK_COOLDOWN = 3
CRITICAL_HIT_CHANCE = 0.2
CRITICAL_HIT_MULTIPLIER = 1.5


class RollSource(Protocol):
    def random(self) -> float: ...
    def randrange(self, start: int, stop: int) -> int: ...


def roll_critical(rng: RollSource) -> bool:
    return rng.random() < CRITICAL_HIT_CHANCE

def roll_value(rng: RollSource, value_range: Tuple[int, int]) -> int:
    # min inclusive, max exclusive
    low, high = value_range
    return rng.randrange(low, high)

def apply_critical(amount: int, critical: bool) -> int:
    if not critical:
        return amount
    return int(amount * CRITICAL_HIT_MULTIPLIER)

def roll_damage(rng: RollSource, value_range: Tuple[int, int]) -> Tuple[int, bool]:
    """Roll a hit: critical first, then the base amount. Returns (damage, critical)."""
    critical = roll_critical(rng)
    damage = apply_critical(roll_value(rng, value_range), critical)
    return damage, critical

def clamp_health(value: int) -> int:
    return max(0, min(int(value), MAX_HEALTH))

def resolve_winner(player_health: int, monster_health: int) -> Optional[str]:
    if player_health <= 0 and monster_health <= 0:
        return "draw"
    if monster_health <= 0:
        return "player"
    if player_health <= 0:
        return "monster"
    return None
