import io
from rich.console import Console
from monsterbattle.battle.engine import BattleEngine
from monsterbattle.battle.rng import ScriptedRng
from monsterbattle.ui.battle import action_items, run_battle_ui
from monsterbattle.ui.keys import Key, KeyEvent, decode_char
from monsterbattle.ui.menu_nav import Menu, MenuItem


def _console():
    return Console(file=io.StringIO(), width=100, force_terminal=False)


def _reader(*chars):
    events = iter([decode_char(c) for c in chars])
    return lambda: next(events)


def test_decode_char():
    assert decode_char("2").digit == 2
    assert decode_char("W").key == Key.UP
    assert decode_char("").key == Key.ENTER
    assert decode_char("z").key == Key.OTHER


def test_items_follow_engine_guards():
    engine = BattleEngine(ScriptedRng.hits((False, 10), (False, 8)))
    items = {i.value: i for i in action_items(engine)}
    assert items["heal"].disabled  # full health
    assert not items["special_attack"].disabled
    engine.special_attack()
    items = {i.value: i for i in action_items(engine)}
    assert items["special_attack"].disabled
    assert items["special_attack"].label == "Special Attack (3)"
    assert not items["heal"].disabled


def test_game_over_items():
    engine = BattleEngine(ScriptedRng())
    engine.surrender()
    assert [i.value for i in action_items(engine)] == ["reset", "leave"]


def test_menu_skips_disabled_items():
    items = [MenuItem("A", "a", disabled=True), MenuItem("B", "b"), MenuItem("C", "c")]
    menu = Menu("T", items, console=_console(), reader=_reader("s", "s", "\r"))
    assert menu.index == 1
    # down from B to C, wraps past disabled A back to B
    assert menu.run() == "b"


def test_digit_on_disabled_item_is_ignored():
    items = [MenuItem("A", "a", disabled=True), MenuItem("B", "b")]
    menu = Menu("T", items, console=_console(), reader=_reader("1", "2"))
    assert menu.run() == "b"


def test_battle_loop_plays_and_leaves():
    rng = ScriptedRng.hits((False, 7), (False, 9))
    engine = BattleEngine(rng)
    console = _console()
    # attack, surrender, then "Main Menu"
    run_battle_ui(engine, console=console, reader=_reader("1", "4", "2"))
    s = engine.state
    assert s.monster_health == 93
    assert s.winner == "monster"
    out = console.file.getvalue()
    assert "You lost!" in out
    assert "Player hits Monster for 7 damage" in out


def test_battle_loop_reset_from_game_over():
    engine = BattleEngine(ScriptedRng())
    engine.surrender()
    run_battle_ui(engine, console=_console(), reader=_reader("1", "4", "2"))
    # reset, surrender again, leave
    assert engine.state.round == 0
    assert engine.state.battle_log[0].kind == "surrender"
