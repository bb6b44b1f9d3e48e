"""
Central configuration for search tunables, match setup and logging.
Pydantic models give type-safe configuration management.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator

from tictactoe.types import AILevel, Cell

ConfigDict = Dict[str, Any]


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == 'true'
    return bool(value)


def _env_bool(name: str, default: str) -> bool:
    return _parse_bool(os.getenv(name, default))


class EngineSettings(BaseModel):
    """Move search configuration settings."""

    shallow_depth: int = Field(default=2, ge=1, le=9, description="Ply limit for EASY search, candidate ply included")
    exhaustive_depth: int = Field(default=9, ge=9, le=9, description="Ply limit for HARD search (whole game tree)")

    @field_validator('shallow_depth', 'exhaustive_depth', mode='before')
    @classmethod
    def validate_int_fields(cls, v):
        return int(v)


class MatchSettings(BaseModel):
    """Human vs AI match setup."""

    ai_level: AILevel = Field(default=AILevel.NONE, description="AI strength: NONE, EASY or HARD")
    ai_plays_as: Cell = Field(default=Cell.O, description="Side controlled by the AI")

    @field_validator('ai_level', mode='before')
    @classmethod
    def validate_ai_level(cls, v):
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        if isinstance(v, str):
            try:
                return AILevel[v.strip().upper()]
            except KeyError:
                raise ValueError(f"ai_level must be one of {[l.name for l in AILevel]}")
        return v

    @field_validator('ai_plays_as', mode='before')
    @classmethod
    def validate_ai_side(cls, v):
        if isinstance(v, str) and v.strip().isdigit():
            v = int(v)
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in ('X', 'O'):
                raise ValueError("ai_plays_as must be X or O")
            return Cell[v]
        if int(v) not in (Cell.X, Cell.O):
            raise ValueError("ai_plays_as must be X or O")
        return v


class GameRulesSettings(BaseModel):
    """Game rules settings."""

    allow_undo: bool = Field(default=True, description="Allow retracting moves")

    @field_validator('allow_undo', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        return _parse_bool(v)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="tictactoe.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class TicTacToeConfig(BaseModel):
    """Main configuration model for the Tic-Tac-Toe engine."""

    engine: EngineSettings = Field(default_factory=EngineSettings)
    match: MatchSettings = Field(default_factory=MatchSettings)
    rules: GameRulesSettings = Field(default_factory=GameRulesSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'TicTacToeConfig':
        """Create configuration from environment variables."""
        return cls(
            engine=EngineSettings(
                shallow_depth=int(os.getenv('TICTACTOE_SHALLOW_DEPTH', '2')),
            ),
            match=MatchSettings(
                ai_level=os.getenv('TICTACTOE_AI_LEVEL', 'NONE'),
                ai_plays_as=os.getenv('TICTACTOE_AI_SIDE', 'O'),
            ),
            rules=GameRulesSettings(
                allow_undo=_env_bool('TICTACTOE_ALLOW_UNDO', 'true'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('TICTACTOE_LOG_LEVEL', 'INFO'),
                log_to_file=_env_bool('TICTACTOE_LOG_FILE', 'false'),
            ),
        )

    def to_dict(self) -> ConfigDict:
        """Convert configuration to a JSON-friendly dictionary."""
        return {
            'engine': self.engine.model_dump(),
            'match': {
                'ai_level': self.match.ai_level.name,
                'ai_plays_as': self.match.ai_plays_as.name,
            },
            'rules': self.rules.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'TicTacToeConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            engine=EngineSettings(**data.get('engine', {})),
            match=MatchSettings(**data.get('match', {})),
            rules=GameRulesSettings(**data.get('rules', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration from dictionary, validating each section."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                merged = section_model.model_dump()
                merged.update({k: v for k, v in settings.items() if k in merged})
                setattr(self, section, type(section_model)(**merged))


# Global configuration instance
_config: Optional[TicTacToeConfig] = None


def get_config() -> TicTacToeConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = TicTacToeConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> TicTacToeConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = TicTacToeConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


# Convenience functions for common configuration access
def get_engine_settings() -> EngineSettings:
    return get_config().engine


def get_match_settings() -> MatchSettings:
    return get_config().match


def get_game_rules() -> GameRulesSettings:
    return get_config().rules


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def setup_logging(level: Union[str, None] = None) -> None:
    """Configure root logging once, from the logging settings unless level is given."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = get_logging_settings()
    level_name = (level or settings.log_level).upper()
    handlers: list = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(logging.FileHandler(settings.log_file_path))
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
