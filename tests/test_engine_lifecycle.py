from monsterbattle.battle.engine import BattleEngine
from monsterbattle.battle.models import BattleState, LogEntry
from monsterbattle.battle.rng import ScriptedRng


def test_surrender_forces_loss():
    engine = BattleEngine(ScriptedRng())
    engine.state.player_health = 73
    assert engine.surrender() is True
    s = engine.state
    assert s.player_health == 0
    assert s.winner == "monster"
    assert s.game_over
    assert s.battle_log == [LogEntry("player", "surrender")]


def test_second_surrender_is_noop():
    engine = BattleEngine(ScriptedRng())
    engine.surrender()
    assert engine.surrender() is False
    assert len(engine.state.battle_log) == 1


def test_surrender_ignores_health_guard():
    engine = BattleEngine(ScriptedRng())
    engine.state.monster_health = 0
    assert engine.surrender() is True
    assert engine.state.winner == "monster"


def test_winner_is_not_overwritten():
    engine = BattleEngine(ScriptedRng())
    engine.surrender()
    engine.state.monster_health = 0
    engine._check_winner()
    assert engine.state.winner == "monster"


def test_reset_restores_defaults():
    engine = BattleEngine(ScriptedRng.hits((True, 19), (False, 8), (False, 5), (False, 8)))
    engine.special_attack()
    engine.attack()
    engine.surrender()
    engine.reset()
    assert engine.state == BattleState()
    assert engine.special_attack_available
    assert engine.winner is None


def test_snapshot_is_detached():
    engine = BattleEngine(ScriptedRng.hits((False, 5), (False, 8)))
    snap = engine.snapshot()
    engine.attack()
    assert snap.round == 0
    assert snap.battle_log == ()
    assert snap.stats.player_damage_dealt == 0
    assert engine.snapshot().special_attack_available
