import sys
from pathlib import Path

import pytest


# Garante que `src/` está no PYTHONPATH quando rodar pytest no repo.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    """
    Nenhum teste deve ler o config real do usuário nem herdar log ligado.
    """
    from arnav_core import config, log

    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "missing-config.yaml"))
    config.set_config(config.AppConfig())
    yield config.get_config()
    config.set_config(None)
    log.disable()
