"""Play many automatic battles and summarise the outcomes.

Usage: python scripts/simulate.py [games] [seed]
"""
from __future__ import annotations
import sys
from collections import Counter
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rich.console import Console
from rich.table import Table

from monsterbattle.battle.ai import play_out
from monsterbattle.battle.engine import BattleEngine
from monsterbattle.battle.rng import make_rng

def simulate(games: int, seed: int | None = None) -> dict:
    engine = BattleEngine(make_rng(seed))
    outcomes: Counter = Counter()
    rounds = damage = taken = 0
    for _ in range(games):
        engine.reset()
        outcomes[play_out(engine)] += 1
        stats = engine.state.stats
        rounds += stats.rounds_played
        damage += stats.player_damage_dealt
        taken += stats.monster_damage_dealt
    n = max(games, 1)
    return {
        "outcomes": dict(outcomes),
        "avg_rounds": rounds / n,
        "avg_damage_dealt": damage / n,
        "avg_damage_taken": taken / n,
    }

def main(argv: list[str]) -> None:
    games = int(argv[1]) if len(argv) > 1 else 1000
    seed = int(argv[2]) if len(argv) > 2 else None
    summary = simulate(games, seed)
    table = Table(title=f"{games} simulated battles (seed={seed})")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for winner in ("player", "monster", "draw", "STALEMATE"):
        table.add_row(f"Winner: {winner}", str(summary["outcomes"].get(winner, 0)))
    table.add_row("Avg rounds", f"{summary['avg_rounds']:.2f}")
    table.add_row("Avg damage dealt", f"{summary['avg_damage_dealt']:.2f}")
    table.add_row("Avg damage taken", f"{summary['avg_damage_taken']:.2f}")
    Console().print(table)

if __name__ == "__main__":
    main(sys.argv)
