"""
Type definitions and protocols for the Tic-Tac-Toe engine.

This module provides:
- Enumerations for cell occupants and AI levels
- A dataclass for move history records
- Protocol definitions for the pluggable interfaces
- Type aliases and constants shared by the game and the search
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Protocol, Sequence, Tuple


class Cell(IntEnum):
    """Occupant of a board cell. X always moves first."""
    NONE = 0
    X = 1
    O = 2

    def __str__(self) -> str:
        return self.name


class AILevel(IntEnum):
    """Strength of the automated opponent."""
    NONE = 0
    EASY = 1  # depth-bounded search with positional heuristic
    HARD = 2  # exhaustive search


# Basic type aliases
Board = List[Cell]  # 9 cells, row-major
CellIndex = int  # 0..8
LineIndex = int  # 0..7, or -1
SearchResult = Tuple[int, CellIndex]  # (score, best_move)
Position = Tuple[int, int]  # (row, col) coordinates

# Constants
BOARD_SIZE = 9
BOARD_WIDTH = 3
NO_MOVE = -1
NO_LINE = -1
VALID_SIDES = (Cell.X, Cell.O)

# Rows, then columns, then main diagonal, then anti-diagonal.
# A winning board reports the first matching line in this order.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def other_side(player: Cell) -> Cell:
    """Return the opponent of a side."""
    if player == Cell.X:
        return Cell.O
    if player == Cell.O:
        return Cell.X
    raise ValueError(f"No opposite side for {player!r}")


@dataclass(frozen=True)
class MoveRecord:
    """A single entry of the move history."""
    index: CellIndex
    player: Cell

    def __post_init__(self) -> None:
        """Validate the record after initialization."""
        if not is_valid_index(self.index):
            raise ValueError(f"Move index must be 0..{BOARD_SIZE - 1}, got {self.index}")
        if not is_valid_side(self.player):
            raise ValueError(f"Move player must be X or O, got {self.player!r}")


class PositionEvaluatorProtocol(Protocol):
    """Protocol for static position evaluation."""

    def evaluate_position(self, board: Sequence[Cell], ai_player: Cell) -> float:
        """Score a position from the AI side's point of view."""
        ...


class SearchStrategyProtocol(Protocol):
    """Protocol for move search implementations."""

    def search(self, board: Board, current_player: Cell, ai_player: Cell) -> SearchResult:
        """Search for the best move for the side to move."""
        ...


class MatchListenerProtocol(Protocol):
    """Receives match events from the controller (sound, UI refresh, ...)."""

    def on_place(self, index: CellIndex, player: Cell) -> None:
        ...

    def on_human_win(self) -> None:
        ...

    def on_human_loss(self) -> None:
        ...


# Utility functions for type checking
def is_valid_index(index: Any) -> bool:
    """Check if a value addresses a board cell."""
    return isinstance(index, int) and 0 <= index < BOARD_SIZE


def is_valid_side(player: Any) -> bool:
    """Check if a value is one of the two playing sides."""
    return player in VALID_SIDES


def is_valid_board(board: Any) -> bool:
    """Check if an object is a valid board representation."""
    return (isinstance(board, list) and len(board) == BOARD_SIZE and
            all(v in (Cell.NONE, Cell.X, Cell.O) for v in board))
