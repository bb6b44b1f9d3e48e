"""
Evaluation interfaces and the positional heuristic used at shallow search cutoffs.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence, Union

import numpy as np

from .types import BOARD_SIZE, Cell

# Center 3, corners 2, edges 1.
POSITION_WEIGHTS: np.ndarray = np.array([2, 1, 2,
                                         1, 3, 1,
                                         2, 1, 2], dtype=np.int64)

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


def occupancy(board: Sequence[Cell], ai_player: Cell) -> np.ndarray:
    """+1 for the AI side, -1 for the opponent, 0 for empty cells."""
    cells = np.fromiter((int(v) for v in board), dtype=np.int64, count=BOARD_SIZE)
    out = np.zeros(BOARD_SIZE, dtype=np.int64)
    out[cells == int(ai_player)] = 1
    out[(cells != int(ai_player)) & (cells != int(Cell.NONE))] = -1
    return out


def heuristic(board: Sequence[Cell], ai_player: Cell) -> int:
    """Weighted occupancy score from the AI side's point of view."""
    return int(np.dot(POSITION_WEIGHTS, occupancy(board, ai_player)))


class Evaluator(ABC):
    """Abstract evaluator interface for position scoring."""

    @abstractmethod
    def evaluate_position(self, board: Sequence[Cell], ai_player: Cell) -> float:  # pragma: no cover
        """Evaluate a single board position for the given side."""
        raise NotImplementedError

    def batch_predict(
        self,
        boards: Union[List[List[Cell]], np.ndarray],
        ai_player: Cell,
    ) -> np.ndarray:
        """Batch prediction for multiple boards. Default uses single calls."""
        out = np.zeros(len(boards), dtype=np.float32)
        for i in range(len(boards)):
            out[i] = float(self.evaluate_position(list(boards[i]), ai_player))
        return out


class PositionalEvaluator(Evaluator):
    """Static occupancy heuristic: center 3, corners 2, edges 1."""

    def evaluate_position(self, board: Sequence[Cell], ai_player: Cell) -> float:
        return float(heuristic(board, ai_player))

    def batch_predict(
        self,
        boards: Union[List[List[Cell]], np.ndarray],
        ai_player: Cell,
    ) -> np.ndarray:
        if len(boards) == 0:
            return np.zeros(0, dtype=np.float32)
        mat = np.array([occupancy(b, ai_player) for b in boards], dtype=np.int64)
        return (mat @ POSITION_WEIGHTS).astype(np.float32)


def get_evaluator() -> Evaluator:
    return PositionalEvaluator()


__all__ = [
    "POSITION_WEIGHTS",
    "CENTER",
    "CORNERS",
    "EDGES",
    "occupancy",
    "heuristic",
    "Evaluator",
    "PositionalEvaluator",
    "get_evaluator",
]
