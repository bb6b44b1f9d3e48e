import pytest

from config import reset_config

_ENV_VARS = (
    "TICTACTOE_SHALLOW_DEPTH",
    "TICTACTOE_AI_LEVEL",
    "TICTACTOE_AI_SIDE",
    "TICTACTOE_ALLOW_UNDO",
    "TICTACTOE_LOG_LEVEL",
    "TICTACTOE_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    # Every test starts from the default configuration
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
