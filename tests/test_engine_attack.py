from monsterbattle.battle.engine import BattleEngine
from monsterbattle.battle.models import LogEntry
from monsterbattle.battle.rng import ScriptedRng


def test_attack_then_monster_counter():
    rng = ScriptedRng.hits((False, 8), (False, 10))
    engine = BattleEngine(rng)
    assert engine.attack() is True
    s = engine.state
    assert s.monster_health == 92
    assert s.player_health == 90
    assert s.round == 1
    assert s.stats.rounds_played == 1
    assert s.stats.player_damage_dealt == 8
    assert s.stats.monster_damage_dealt == 10
    # newest first: monster counter sits on top of the player hit
    assert s.battle_log == [
        LogEntry("monster", "damage", 10),
        LogEntry("player", "damage", 8),
    ]
    assert not s.game_over
    assert rng.exhausted()


def test_critical_hit_multiplies_and_floors():
    engine = BattleEngine(ScriptedRng.hits((True, 11), (False, 8)))
    engine.attack()
    s = engine.state
    assert s.monster_health == 100 - 16  # floor(11 * 1.5)
    assert s.last_action_critical is True
    assert s.stats.critical_hits == 1
    assert s.battle_log[-1].critical is True


def test_monster_critical_not_counted_in_stats():
    engine = BattleEngine(ScriptedRng.hits((False, 5), (True, 14)))
    engine.attack()
    s = engine.state
    assert s.player_health == 100 - 21
    assert s.stats.critical_hits == 0
    assert s.stats.monster_damage_dealt == 21
    assert s.battle_log[0].critical is True
    assert s.last_action_critical is False


def test_lethal_attack_skips_monster_turn():
    rng = ScriptedRng.hits((False, 6))
    engine = BattleEngine(rng)
    engine.state.player_health = 5
    engine.state.monster_health = 5
    engine.attack()
    s = engine.state
    assert s.monster_health == 0
    assert s.player_health == 5
    assert s.game_over is True
    assert s.winner == "player"
    assert len(s.battle_log) == 1
    assert rng.exhausted()


def test_monster_damage_clamped_at_zero():
    engine = BattleEngine(ScriptedRng.hits((False, 5), (True, 14)))
    engine.state.player_health = 10
    engine.attack()
    s = engine.state
    assert s.player_health == 0
    assert s.winner == "monster"
    assert s.game_over
    # recorded damage is the roll, not the remaining health
    assert s.stats.monster_damage_dealt == 21


def test_attack_noop_after_game_over():
    engine = BattleEngine(ScriptedRng())
    engine.surrender()
    before = engine.snapshot()
    assert engine.attack() is False
    assert engine.snapshot() == before


def test_attack_noop_when_health_already_zero():
    engine = BattleEngine(ScriptedRng())
    engine.state.monster_health = 0
    assert engine.attack() is False
    assert engine.state.round == 0
    assert engine.state.battle_log == []
