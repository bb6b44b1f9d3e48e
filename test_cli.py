import argparse
import json
import sys

import pytest

import selfplay
from tictactoe.types import AILevel


def test_level_parsing():
    assert selfplay._level("easy") == AILevel.EASY
    assert selfplay._level("HARD") == AILevel.HARD
    with pytest.raises(argparse.ArgumentTypeError):
        selfplay._level("medium")


def test_parse_args_defaults(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["selfplay"])
    args = selfplay.parse_args()
    assert args.games == 10
    assert args.x_level == AILevel.HARD
    assert args.o_level == AILevel.HARD
    assert args.epsilon == 0.0
    assert args.seed is None
    assert args.config is None


def test_parse_args_rejects_unknown_level(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["selfplay", "--x-level", "medium"])
    with pytest.raises(SystemExit):
        selfplay.parse_args()


def test_main_prints_stats_json(monkeypatch, capsys):
    monkeypatch.setattr(selfplay, "setup_logging", lambda: None)
    monkeypatch.setattr(sys, "argv", ["selfplay", "--games", "2", "--x-level", "easy",
                                      "--o-level", "easy", "--seed", "3"])
    selfplay.main()
    stats = json.loads(capsys.readouterr().out)
    assert stats["games_played"] == 2
    assert stats["x_wins"] + stats["o_wins"] + stats["draws"] == 2
    assert stats["random_moves_total"] == 0
    assert 5 <= stats["avg_game_length"] <= 9


def test_main_loads_config_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"engine": {"shallow_depth": 3}}))
    monkeypatch.setattr(selfplay, "setup_logging", lambda: None)
    monkeypatch.setattr(sys, "argv", ["selfplay", "--games", "1", "--x-level", "easy",
                                      "--o-level", "easy", "--config", str(path)])
    selfplay.main()
    from config import get_engine_settings
    assert get_engine_settings().shallow_depth == 3
    assert json.loads(capsys.readouterr().out)["games_played"] == 1
