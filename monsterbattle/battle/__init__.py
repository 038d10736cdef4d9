"""
Battle package:
- rules.py (constants, rolls, clamping, winner resolution)
- rng.py (seeded and scripted roll sources)
- models.py (BattleState, LogEntry, BattleStats, BattleSnapshot)
- engine.py (BattleEngine state machine)
- render.py (log text, health colours)
- ai.py (auto-play policy)
"""
from .engine import BattleEngine
__all__ = ["BattleEngine"]
