"""Simple action policy used to auto-play battles."""
from __future__ import annotations
from typing import Literal
from .engine import BattleEngine
from .models import BattleSnapshot

Action = Literal["attack", "special_attack", "heal"]

HEAL_THRESHOLD = 35

def choose_action(snap: BattleSnapshot) -> Action:
    if snap.player_health < HEAL_THRESHOLD and snap.monster_health > 15:
        return "heal"
    if snap.special_attack_available:
        return "special_attack"
    return "attack"

def play_out(engine: BattleEngine, max_rounds: int = 500) -> str:
    """Drive the engine with :func:`choose_action` until the battle ends.

    Returns the winner, or ``"STALEMATE"`` if ``max_rounds`` is reached first.
    """
    while not engine.game_over and engine.state.round < max_rounds:
        action = choose_action(engine.snapshot())
        getattr(engine, action)()
    return engine.winner or "STALEMATE"
