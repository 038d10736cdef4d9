# Project root on sys.path for tests; keep logs quiet and settings out of $HOME
import sys, pathlib
import pytest

root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    from monsterbattle.core.logging import logger
    from monsterbattle.system.settings import Settings, SETTINGS_FILENAME
    monkeypatch.setattr(Settings, "_resolve_path", classmethod(lambda cls: tmp_path / SETTINGS_FILENAME))
    threshold = logger.threshold
    logger.set_level("ERROR")
    yield
    logger.threshold = threshold
