"""
High-level menus using the vertical navigation system.
"""
from __future__ import annotations
from monsterbattle.core.logging import LEVELS
from monsterbattle.ui.menu_nav import select_menu

MENU_COLORS = ("bright_white", "bright_cyan", "bright_magenta", "bright_yellow", "bright_green")

def main_menu(color: str = "bright_white") -> str:
    choice = select_menu(
        "MONSTER BATTLE",
        [
            ("New Battle", "new"),
            ("Options", "options"),
            ("Quit", "quit"),
        ],
        color=color,
    )
    # Esc returns None -> treat as Quit
    return choice or "quit"

def options_submenu(settings) -> None:
    while True:
        d = settings.data
        choice = select_menu(
            "OPTIONS",
            [
                (f"Log Level [{d.log_level}]", "log_level"),
                (f"Debug [{'ON' if d.debug else 'OFF'}]", "debug"),
                (f"Menu Color [{d.menu_color}]", "menu_color"),
                (f"Log Lines [{d.log_lines}]", "log_lines"),
                (f"Seed [{'random' if d.seed is None else d.seed}]", "seed"),
                ("Return", "return"),
            ],
            footer="↑/↓ or W/S • Enter to edit • Esc to return",
            color=d.menu_color,
        )
        if choice in (None, "return"):
            return
        if choice == "log_level":
            _edit_log_level(settings)
        elif choice == "debug":
            d.debug = not d.debug
        elif choice == "menu_color":
            _edit_menu_color(settings)
        elif choice == "log_lines":
            _edit_log_lines(settings)
        elif choice == "seed":
            _edit_seed(settings)
        settings.data.normalize()
        settings.apply_log_level()
        settings.save()
        settings.notify()

def _edit_log_level(settings):
    choice = select_menu("LOG LEVEL", [(lvl, lvl) for lvl in LEVELS] + [("Cancel", "cancel")],
                         color=settings.data.menu_color)
    if choice in LEVELS:
        settings.data.log_level = choice

def _edit_menu_color(settings):
    choice = select_menu("MENU COLOR", [(c, c) for c in MENU_COLORS] + [("Cancel", "cancel")],
                         color=settings.data.menu_color)
    if choice in MENU_COLORS:
        settings.data.menu_color = choice

def _edit_log_lines(settings):
    choice = select_menu("LOG LINES", [(str(n), str(n)) for n in (4, 8, 12, 20)] + [("Cancel", "cancel")],
                         color=settings.data.menu_color)
    if choice and choice.isdigit():
        settings.data.log_lines = int(choice)

def _edit_seed(settings):
    try:
        raw = input("Seed (blank for random): ").strip()
    except EOFError:
        return
    if not raw:
        settings.data.seed = None
    elif raw.lstrip("-").isdigit():
        settings.data.seed = int(raw)
    else:
        print("Seed must be a whole number.")
