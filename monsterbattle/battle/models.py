from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List, Literal, Optional, Tuple
from .rules import MAX_HEALTH

Actor = Literal["player", "monster"]
LogKind = Literal["damage", "heal", "surrender"]
Winner = Literal["player", "monster", "draw"]

@dataclass(frozen=True)
class LogEntry:
    actor: Actor
    kind: LogKind
    amount: Optional[int] = None
    critical: bool = False
    capped: bool = False  # heal reached the health ceiling

@dataclass
class BattleStats:
    player_damage_dealt: int = 0
    monster_damage_dealt: int = 0
    healing_done: int = 0
    critical_hits: int = 0
    rounds_played: int = 0

@dataclass
class BattleState:
    player_health: int = MAX_HEALTH
    monster_health: int = MAX_HEALTH
    round: int = 0
    battle_log: List[LogEntry] = field(default_factory=list)  # newest first
    game_over: bool = False
    winner: Optional[Winner] = None
    special_attack_cooldown: int = 0
    last_action_critical: bool = False
    stats: BattleStats = field(default_factory=BattleStats)

    @property
    def special_attack_available(self) -> bool:
        return self.special_attack_cooldown == 0

    def add_log(self, entry: LogEntry):
        self.battle_log.insert(0, entry)

@dataclass(frozen=True)
class BattleSnapshot:
    player_health: int
    monster_health: int
    round: int
    battle_log: Tuple[LogEntry, ...]
    game_over: bool
    winner: Optional[Winner]
    special_attack_cooldown: int
    special_attack_available: bool
    last_action_critical: bool
    stats: BattleStats

    @classmethod
    def of(cls, state: BattleState) -> "BattleSnapshot":
        return cls(
            player_health=state.player_health,
            monster_health=state.monster_health,
            round=state.round,
            battle_log=tuple(state.battle_log),
            game_over=state.game_over,
            winner=state.winner,
            special_attack_cooldown=state.special_attack_cooldown,
            special_attack_available=state.special_attack_available,
            last_action_critical=state.last_action_critical,
            stats=replace(state.stats),
        )
