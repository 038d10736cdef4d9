"""Battle engine: one player against one monster.

All state lives in a single :class:`BattleState` owned by the engine and is
mutated only through the five actions (attack, special attack, heal,
surrender, reset). Illegal actions are silent no-ops; every action returns
``True`` when it changed state and ``False`` when a guard rejected it.

A player attack or heal hands the monster its counter-attack inside the same
call, so each action runs to completion before returning.
"""
from __future__ import annotations
import random
from typing import Optional, Tuple
from monsterbattle.core.logging import logger
from .models import BattleState, BattleSnapshot, LogEntry
from .rules import (
    ATTACK_DAMAGE,
    HEAL_AMOUNT,
    MAX_HEALTH,
    MONSTER_ATTACK_DAMAGE,
    SPECIAL_ATTACK_COOLDOWN,
    SPECIAL_ATTACK_DAMAGE,
    RollSource,
    clamp_health,
    resolve_winner,
    roll_damage,
    roll_value,
)

class BattleEngine:
    def __init__(self, rng: Optional[RollSource] = None):
        self.rng = rng or random.Random()
        self.state = BattleState()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def winner(self):
        return self.state.winner

    @property
    def special_attack_available(self) -> bool:
        return self.state.special_attack_available

    def snapshot(self) -> BattleSnapshot:
        return BattleSnapshot.of(self.state)

    def can_act(self) -> bool:
        s = self.state
        return not s.game_over and s.player_health > 0 and s.monster_health > 0

    def can_heal(self) -> bool:
        return self.can_act() and self.state.player_health < MAX_HEALTH

    def can_special_attack(self) -> bool:
        return self.can_act() and self.state.special_attack_available

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------
    def attack(self) -> bool:
        if not self.can_act():
            return False
        self._player_strike(ATTACK_DAMAGE, special=False)
        return True

    def special_attack(self) -> bool:
        if not self.can_special_attack():
            return False
        self._player_strike(SPECIAL_ATTACK_DAMAGE, special=True)
        return True

    def heal(self) -> bool:
        if not self.can_heal():
            return False
        s = self.state
        s.round += 1
        healing = roll_value(self.rng, HEAL_AMOUNT)
        capped = s.player_health + healing >= MAX_HEALTH
        applied = MAX_HEALTH - s.player_health if capped else healing
        s.player_health = min(s.player_health + healing, MAX_HEALTH)
        s.stats.healing_done += applied
        s.stats.rounds_played += 1
        s.add_log(LogEntry("player", "heal", healing, capped=capped))
        logger.debug("PlayerHeal", healing=healing, applied=applied, capped=capped, round=s.round)
        self._tick_cooldown()
        self._check_winner()
        # Healing always costs the turn
        self._monster_attack()
        return True

    def surrender(self) -> bool:
        s = self.state
        if s.game_over:
            return False
        s.player_health = 0
        s.winner = "monster"
        s.game_over = True
        s.add_log(LogEntry("player", "surrender"))
        logger.info("PlayerSurrender", round=s.round)
        return True

    def reset(self) -> bool:
        self.state = BattleState()
        logger.debug("BattleReset")
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _player_strike(self, damage_range: Tuple[int, int], *, special: bool):
        s = self.state
        s.round += 1
        damage, critical = roll_damage(self.rng, damage_range)
        s.last_action_critical = critical
        if critical:
            s.stats.critical_hits += 1
        s.monster_health = clamp_health(s.monster_health - damage)
        s.stats.player_damage_dealt += damage
        s.stats.rounds_played += 1
        s.add_log(LogEntry("player", "damage", damage, critical=critical))
        logger.debug("SpecialAttack" if special else "PlayerAttack", damage=damage, critical=critical, round=s.round)
        if special:
            s.special_attack_cooldown = SPECIAL_ATTACK_COOLDOWN
        else:
            self._tick_cooldown()
        self._check_winner()
        if s.monster_health > 0:
            self._monster_attack()

    def _monster_attack(self):
        if not self.can_act():
            return
        s = self.state
        damage, critical = roll_damage(self.rng, MONSTER_ATTACK_DAMAGE)
        s.player_health = clamp_health(s.player_health - damage)
        s.stats.monster_damage_dealt += damage
        s.add_log(LogEntry("monster", "damage", damage, critical=critical))
        logger.debug("MonsterAttack", damage=damage, critical=critical, round=s.round)
        self._check_winner()

    def _tick_cooldown(self):
        if self.state.special_attack_cooldown > 0:
            self.state.special_attack_cooldown -= 1

    def _check_winner(self):
        s = self.state
        if s.game_over:
            return
        winner = resolve_winner(s.player_health, s.monster_health)
        if winner is None:
            return
        s.winner = winner
        s.game_over = True
        logger.info("BattleOver", winner=winner, rounds=s.round)

__all__ = ["BattleEngine"]
