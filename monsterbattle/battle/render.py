"""Plain-text rendering of battle state for the terminal UI and scripts."""
from __future__ import annotations
from .models import LogEntry
from .rules import MAX_HEALTH

ACTOR_NAMES = {"player": "Player", "monster": "Monster"}

GAME_OVER_MESSAGES = {
    "player": "You won!",
    "monster": "You lost!",
    "draw": "It's a draw!",
}

def format_log_entry(entry: LogEntry) -> str:
    name = ACTOR_NAMES[entry.actor]
    if entry.kind == "surrender":
        return f"{name} surrendered to the monster!"
    if entry.kind == "heal":
        suffix = " (MAX HEALTH!)" if entry.capped else ""
        return f"{name} heals {entry.amount} life points{suffix}"
    target = ACTOR_NAMES["monster" if entry.actor == "player" else "player"]
    suffix = " (CRITICAL HIT!)" if entry.critical else ""
    return f"{name} hits {target} for {entry.amount} damage{suffix}"

def game_over_message(winner: str | None) -> str:
    return GAME_OVER_MESSAGES.get(winner or "draw", GAME_OVER_MESSAGES["draw"])

def health_color(health: int, *, monster: bool = False) -> str:
    """Rich colour name for a health bar.

    Below 25 is red and below 50 orange for both sides; above that the
    player bar is green and the monster bar stays red.
    """
    if health < 25:
        return "red"
    if health < 50:
        return "dark_orange"
    return "red" if monster else "green"

def health_bar(health: int, width: int = 20) -> str:
    health = max(0, min(health, MAX_HEALTH))
    filled = int(round(health / MAX_HEALTH * width))
    return "█" * filled + "░" * (width - filled)
