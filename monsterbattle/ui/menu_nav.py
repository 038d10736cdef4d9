"""
Vertical menu navigation rendered with Rich.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from rich.align import Align
from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from monsterbattle.ui.keys import Key, KeyEvent, read_key

# Shared console for menus and the battle HUD
menu_console = Console()

DEFAULT_FOOTER = "↑/↓ or W/S to move • 1-9 to jump • Enter to select • Esc to cancel"

@dataclass
class MenuItem:
    label: str
    value: str
    disabled: bool = False
    help_text: Optional[str] = None

class Menu:
    def __init__(
        self,
        title: str,
        items: Sequence[MenuItem],
        allow_escape: bool = True,
        footer: str | None = DEFAULT_FOOTER,
        color: str = "bright_white",
        before_render: Optional[Callable[[], None]] = None,
        console: Optional[Console] = None,
        reader: Callable[[], KeyEvent] = read_key,
    ):
        self.title = title
        self.items = list(items)
        self.allow_escape = allow_escape
        self.footer = footer
        self.color = color
        self.before_render = before_render
        self.console = console or menu_console
        self.reader = reader
        self.index = 0
        # Starting selection must not be disabled
        if self.items and self.items[self.index].disabled:
            self._advance(1)

    def _advance(self, delta: int):
        if not self.items:
            return
        n = len(self.items)
        for _ in range(n):
            self.index = (self.index + delta) % n
            if not self.items[self.index].disabled:
                return

    def _jump(self, number: int) -> bool:
        idx = number - 1
        if 0 <= idx < len(self.items) and not self.items[idx].disabled:
            self.index = idx
            return True
        return False

    def table(self) -> Table:
        color = self.color
        menu_table = Table(
            title=f"[bold {color}]{self.title}[/bold {color}]",
            box=ROUNDED,
            show_header=False,
            style="bright_white",
            width=60,
        )
        menu_table.add_column("Option", justify="left")
        for i, item in enumerate(self.items):
            prefix = f"[{color}]►[/{color}] " if i == self.index else "  "
            if item.disabled:
                style = "dim red" if i == self.index else "dim"
                label = escape(f"[X] {item.label}")
            else:
                style = color if i == self.index else "bright_white"
                label = escape(item.label)
            menu_table.add_row(f"{prefix}{i + 1}. [{style}]{label}[/{style}]")
        return menu_table

    def render(self):
        if self.before_render:
            self.before_render()
        self.console.print(Align.center(self.table()))
        cur = self.items[self.index] if self.items else None
        if cur and cur.help_text:
            self.console.print(Panel(cur.help_text, box=ROUNDED, title=f"[bold {self.color}]Info[/bold {self.color}]"))
        if self.footer:
            self.console.print(Panel(self.footer, style="dim bright_white", box=ROUNDED))

    def run(self) -> Optional[str]:
        if not any(not item.disabled for item in self.items):
            return None
        while True:
            self.console.clear()
            self.render()
            ev = self.reader()
            if ev.key == Key.UP:
                self._advance(-1)
            elif ev.key == Key.DOWN:
                self._advance(1)
            elif ev.key == Key.DIGIT:
                if self._jump(ev.digit or 0):
                    return self.items[self.index].value
            elif ev.key == Key.ENTER:
                return self.items[self.index].value
            elif ev.key == Key.ESC and self.allow_escape:
                return None
            # ignore others

def select_menu(
    title: str,
    options: List[tuple[str, str]],
    footer: str | None = DEFAULT_FOOTER,
    color: str = "bright_white",
) -> str | None:
    items = [MenuItem(label=o[0], value=o[1]) for o in options]
    return Menu(title, items, allow_escape=True, footer=footer, color=color).run()
