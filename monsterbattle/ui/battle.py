"""Terminal battle UI.

Renders the engine snapshot as two health panels, the battle log and, once
the battle is decided, a game-over panel with the battle statistics. The
action menu disables items under the same conditions the engine guards on,
so a disabled item is never offered.
"""
from __future__ import annotations
from typing import Callable, List, Optional

from rich.align import Align
from rich.box import DOUBLE, ROUNDED
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from monsterbattle.battle.engine import BattleEngine
from monsterbattle.battle.models import BattleSnapshot
from monsterbattle.battle.render import format_log_entry, game_over_message, health_bar, health_color
from monsterbattle.battle.rules import MAX_HEALTH
from monsterbattle.ui.keys import KeyEvent, read_key
from monsterbattle.ui.menu_nav import Menu, MenuItem, menu_console

WINNER_STYLES = {"player": "bold green", "monster": "bold red", "draw": "bold yellow"}

def _health_panel(title: str, health: int, *, monster: bool) -> Panel:
    color = health_color(health, monster=monster)
    body = f"[{color}]{health_bar(health)}[/{color}]\n[bright_white]{health}/{MAX_HEALTH}[/bright_white]"
    return Panel(body, title=f"[bold bright_white]{title}[/bold bright_white]", box=ROUNDED, width=34, padding=(0, 1))

def log_panel(snap: BattleSnapshot, lines: int = 8) -> Panel:
    text = Text()
    entries = snap.battle_log[:lines]
    for i, entry in enumerate(entries):
        style = "cyan" if entry.actor == "player" else "magenta"
        if entry.kind == "heal":
            style = "green"
        if entry.critical:
            style = f"bold {style}"
        text.append(format_log_entry(entry), style=style)
        if i < len(entries) - 1:
            text.append("\n")
    if not entries:
        text.append("The monster is waiting for your move...", style="dim")
    return Panel(text, title="[bold bright_white]Battle Log[/bold bright_white]", box=ROUNDED, width=72)

def game_over_panel(snap: BattleSnapshot) -> Panel:
    stats = snap.stats
    table = Table(show_header=False, box=None)
    table.add_column("Stat", style="bright_white")
    table.add_column("Value", justify="right")
    table.add_row("Rounds played", str(stats.rounds_played))
    table.add_row("Damage dealt to monster", str(stats.player_damage_dealt))
    table.add_row("Damage taken", str(stats.monster_damage_dealt))
    table.add_row("Healing done", str(stats.healing_done))
    table.add_row("Critical hits", str(stats.critical_hits))
    message = Text(game_over_message(snap.winner), style=WINNER_STYLES.get(snap.winner or "draw", "bold"), justify="center")
    return Panel(Group(Align.center(message), Align.center(table)), title="[bold bright_white]Game Over![/bold bright_white]", box=DOUBLE, width=72)

def render_hud(snap: BattleSnapshot, console: Console, lines: int = 8):
    header = f"ROUND {snap.round}"
    if snap.last_action_critical and not snap.game_over:
        header += "  [bold yellow]CRITICAL HIT![/bold yellow]"
    console.print(Align.center(Text.from_markup(f"[bold bright_white]{header}[/bold bright_white]")))
    columns = Columns([
        _health_panel("Your Health", snap.player_health, monster=False),
        _health_panel("Monster Health", snap.monster_health, monster=True),
    ], padding=(0, 4))
    console.print(Align.center(columns))
    if snap.game_over:
        console.print(Align.center(game_over_panel(snap)))
    console.print(Align.center(log_panel(snap, lines)))

def action_items(engine: BattleEngine) -> List[MenuItem]:
    s = engine.state
    if s.game_over:
        return [
            MenuItem("Start New Game", "reset"),
            MenuItem("Main Menu", "leave"),
        ]
    special = "Special Attack"
    if not s.special_attack_available:
        special += f" ({s.special_attack_cooldown})"
    return [
        MenuItem("Attack", "attack", disabled=not engine.can_act()),
        MenuItem(special, "special_attack", disabled=not engine.can_special_attack(),
                 help_text="Heavy hit; needs 3 turns to recharge."),
        MenuItem("Heal", "heal", disabled=not engine.can_heal()),
        MenuItem("Surrender", "surrender", disabled=not engine.can_act()),
    ]

def run_battle_ui(
    engine: BattleEngine,
    *,
    log_lines: int = 8,
    color: str = "bright_white",
    console: Optional[Console] = None,
    reader: Callable[[], KeyEvent] = read_key,
) -> None:
    """Loop until the player leaves the battle screen."""
    console = console or menu_console
    while True:
        menu = Menu(
            "GAME OVER" if engine.game_over else "BATTLE COMMANDS",
            action_items(engine),
            allow_escape=engine.game_over,
            footer="↑/↓ W/S • 1-4 • Enter select",
            color=color,
            before_render=lambda: render_hud(engine.snapshot(), console, log_lines),
            console=console,
            reader=reader,
        )
        choice = menu.run()
        if choice in (None, "leave"):
            return
        getattr(engine, choice)()
