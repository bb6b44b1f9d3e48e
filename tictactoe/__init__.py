"""Tic-Tac-Toe engine: board state machine and minimax move selection.

Usage examples:
    from tictactoe import TicTacToeGame, choose_move, AILevel, Cell
    from tictactoe import MatchController
    from tictactoe import SelfPlayRunner
"""
from __future__ import annotations

from .types import (
    AILevel,
    Board,
    Cell,
    MoveRecord,
    SearchResult,
    BOARD_SIZE,
    NO_LINE,
    NO_MOVE,
    WIN_LINES,
    other_side,
)
from .board import empty_board, empty_cells, find_winner, is_terminal, rc, idx
from .game import TicTacToeGame
from .eval import Evaluator, PositionalEvaluator, get_evaluator, heuristic
from .search import (
    SearchStrategy,
    MinimaxSearchStrategy,
    choose_move,
    choose_move_on_board,
    get_search_strategy,
    search_move,
)
from .controller import MatchController, NullListener
from .selfplay import MatchStats, SelfPlayRunner

__version__ = "1.0.0"
