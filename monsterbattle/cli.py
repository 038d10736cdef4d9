from __future__ import annotations
from monsterbattle.system.settings import Settings
from monsterbattle.core.logging import logger
from monsterbattle.battle.engine import BattleEngine
from monsterbattle.battle.rng import make_rng
from monsterbattle.ui.battle import run_battle_ui
from monsterbattle.ui.menu import main_menu, options_submenu

class GameContext:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine = BattleEngine(make_rng(settings.data.seed))
        self.battles_started = 0
        settings.on_change(self._settings_changed)

    def _settings_changed(self, data):
        # A new seed only applies to battles started afterwards
        self.engine.rng = make_rng(data.seed)

    def new_battle(self):
        self.engine.reset()
        self.battles_started += 1
        logger.info("BattleStart", number=self.battles_started, seed=self.settings.data.seed)
        run_battle_ui(
            self.engine,
            log_lines=self.settings.data.log_lines,
            color=self.settings.data.menu_color,
        )

def run():
    settings = Settings.load()
    settings.apply_log_level()
    ctx = GameContext(settings)
    try:
        while True:
            choice = main_menu(settings.data.menu_color)
            if choice == "new":
                ctx.new_battle()
            elif choice == "options":
                options_submenu(settings)
            elif choice == "quit":
                print("Goodbye!")
                break
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
    settings.save()

if __name__ == "__main__":
    run()
