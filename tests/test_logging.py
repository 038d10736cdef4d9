from monsterbattle.battle.engine import BattleEngine
from monsterbattle.core.logging import Logger, logger


def test_threshold_filters(capsys):
    log = Logger("WARN")
    log.info("Hidden")
    log.warn("Shown", code=7)
    out = capsys.readouterr().out
    assert "Hidden" not in out
    assert "[WARN] Shown code=7" in out


def test_engine_logs_battle_end(capsys):
    logger.set_level("INFO")
    engine = BattleEngine()
    engine.surrender()
    out = capsys.readouterr().out
    assert "PlayerSurrender" in out
