"""
Search interfaces and the minimax move selector.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TYPE_CHECKING

from .board import empty_cells, is_terminal
from .eval import Evaluator, get_evaluator
from .types import (
    NO_MOVE,
    AILevel,
    Board,
    Cell,
    CellIndex,
    SearchResult,
    is_valid_board,
    is_valid_side,
    other_side,
)

if TYPE_CHECKING:
    from .game import TicTacToeGame

logger = logging.getLogger(__name__)

WIN_SCORE = 10
EXHAUSTIVE_DEPTH = 9


class SearchStrategy(ABC):
    """Abstract interface for search strategies."""

    @abstractmethod
    def search(self, board: Board, current_player: Cell, ai_player: Cell) -> SearchResult:  # pragma: no cover
        raise NotImplementedError


class MinimaxSearchStrategy(SearchStrategy):
    """
    Plain minimax over the 9-cell board.

    The candidate move is ply 1. Terminal positions score 10 - depth for an
    AI win, depth - 10 for an AI loss and 0 for a draw. Once depth reaches
    max_depth on a non-terminal position the evaluator scores it instead.
    The board is mutated in place and restored after every child.
    """

    def __init__(self, max_depth: int = EXHAUSTIVE_DEPTH, evaluator: Optional[Evaluator] = None) -> None:
        self.max_depth = max_depth
        self.evaluator: Evaluator = evaluator or get_evaluator()
        self.nodes_searched = 0

    def search(self, board: Board, current_player: Cell, ai_player: Cell) -> SearchResult:
        self.nodes_searched = 0
        done, _ = is_terminal(board)
        if done:
            return (0, NO_MOVE)

        best_move: CellIndex = NO_MOVE
        best_score: Optional[int] = None
        for move in empty_cells(board):
            board[move] = current_player
            score = self.minimax(board, other_side(current_player), ai_player, 1)
            board[move] = Cell.NONE
            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        logger.debug("minimax(max_depth=%d) for %s: move %d score %s, %d nodes",
                     self.max_depth, ai_player, best_move, best_score, self.nodes_searched)
        return (int(best_score), best_move)  # type: ignore[arg-type]

    def minimax(self, board: Board, current_player: Cell, ai_player: Cell, depth: int) -> int:
        self.nodes_searched += 1
        done, winner = is_terminal(board)
        if done:
            if winner == ai_player:
                return WIN_SCORE - depth
            if winner == Cell.NONE:
                return 0
            return depth - WIN_SCORE

        if depth >= self.max_depth:
            return int(self.evaluator.evaluate_position(board, ai_player))

        maximizing = current_player == ai_player
        nxt = other_side(current_player)
        best: Optional[int] = None
        for move in empty_cells(board):
            board[move] = current_player
            score = self.minimax(board, nxt, ai_player, depth + 1)
            board[move] = Cell.NONE
            if best is None or (score > best if maximizing else score < best):
                best = score
        return best  # type: ignore[return-value]


def depth_for_level(level: AILevel) -> int:
    """HARD searches the whole tree; every other level uses the shallow limit."""
    from config import get_engine_settings

    settings = get_engine_settings()
    if level == AILevel.HARD:
        return settings.exhaustive_depth
    return settings.shallow_depth


def get_search_strategy(level: AILevel = AILevel.HARD) -> SearchStrategy:
    """Factory for the minimax strategy matching an AI level."""
    return MinimaxSearchStrategy(max_depth=depth_for_level(level))


def search_move(board: Sequence[Cell], current_player: Cell, level: AILevel, ai_player: Cell) -> SearchResult:
    """Search a copy of board and return (score, move)."""
    snapshot = [Cell(v) for v in board]
    if not is_valid_board(snapshot):
        raise ValueError("Board must be a list of 9 cells")
    if not is_valid_side(current_player) or not is_valid_side(ai_player):
        raise ValueError("Players must be X or O")
    return get_search_strategy(level).search(snapshot, Cell(current_player), Cell(ai_player))


def choose_move_on_board(board: Sequence[Cell], current_player: Cell, level: AILevel, ai_player: Cell) -> CellIndex:
    """Best move for the side to move on a raw board, or NO_MOVE if finished."""
    _, move = search_move(board, current_player, level, ai_player)
    return move


def choose_move(game: "TicTacToeGame", level: AILevel, ai_player: Cell) -> CellIndex:
    """Best move for the side to move in game, or NO_MOVE if the game is over."""
    if game is None:
        raise ValueError("game is required")
    if game.is_game_over:
        return NO_MOVE
    return choose_move_on_board(game.get_board_copy(), game.current_player, level, ai_player)


__all__ = [
    "WIN_SCORE",
    "EXHAUSTIVE_DEPTH",
    "SearchStrategy",
    "MinimaxSearchStrategy",
    "depth_for_level",
    "get_search_strategy",
    "search_move",
    "choose_move_on_board",
    "choose_move",
]
