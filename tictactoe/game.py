"""
Game state management for Tic-Tac-Toe.
"""
from __future__ import annotations

import logging
from typing import List, Tuple

from .board import empty_board, empty_cells, find_winner, is_full
from .types import (
    BOARD_SIZE,
    NO_LINE,
    Board,
    Cell,
    CellIndex,
    LineIndex,
    MoveRecord,
    is_valid_index,
    other_side,
)

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """Owns the board, the side to move, the result and the move history."""

    def __init__(self) -> None:
        self._board: Board = empty_board()
        self._history: List[MoveRecord] = []
        self._current_player = Cell.X
        self._winner = Cell.NONE
        self._game_over = False
        self._winning_line: LineIndex = NO_LINE

    @property
    def current_player(self) -> Cell:
        return self._current_player

    @property
    def winner(self) -> Cell:
        return self._winner

    @property
    def is_game_over(self) -> bool:
        return self._game_over

    @property
    def winning_line_index(self) -> LineIndex:
        return self._winning_line

    def reset(self) -> None:
        """Reset the game to the initial state."""
        for i in range(BOARD_SIZE):
            self._board[i] = Cell.NONE
        self._current_player = Cell.X
        self._winner = Cell.NONE
        self._game_over = False
        self._winning_line = NO_LINE
        self._history.clear()

    def get_cell(self, index: CellIndex) -> Cell:
        if not 0 <= index < BOARD_SIZE:
            raise IndexError(f"Cell index {index} out of range 0..{BOARD_SIZE - 1}")
        return self._board[index]

    def make_move(self, index: CellIndex) -> bool:
        """Place the current player's mark at index and return success."""
        if self._game_over:
            return False
        if not is_valid_index(index):
            return False
        if self._board[index] != Cell.NONE:
            return False

        player = self._current_player
        self._board[index] = player
        self._history.append(MoveRecord(index, player))
        self._check_game_end()

        if not self._game_over:
            self._current_player = other_side(player)
        return True

    def get_available_moves(self) -> List[CellIndex]:
        """Empty cells in ascending order; nothing once the game is over."""
        if self._game_over:
            return []
        return empty_cells(self._board)

    def _check_game_end(self) -> None:
        """Check if the game has ended and set the result fields."""
        winner, line = find_winner(self._board)
        if winner != Cell.NONE:
            self._winner = winner
            self._game_over = True
            self._winning_line = line
            logger.debug("%s wins on line %d", winner, line)
            return
        if is_full(self._board):
            self._winner = Cell.NONE
            self._game_over = True
            self._winning_line = NO_LINE
            logger.debug("Board full, draw")

    def get_board_copy(self) -> Board:
        """Get an independent copy of the cells."""
        return list(self._board)

    def undo_moves(self, count: int) -> int:
        """
        Retract up to count moves, most recent first.

        Each retracted move hands the turn back to the side that made it and
        clears the result. The remaining board is not re-scanned for a win.

        Returns:
            Number of moves actually undone.
        """
        undone = 0
        while count > 0 and self._history:
            last = self._history.pop()
            self._board[last.index] = Cell.NONE
            self._current_player = last.player
            self._winner = Cell.NONE
            self._game_over = False
            self._winning_line = NO_LINE
            undone += 1
            count -= 1
        if undone:
            logger.debug("Undid %d move(s), %s to move", undone, self._current_player)
        return undone

    def try_peek_last_move(self) -> Tuple[bool, Cell]:
        """Side that made the most recent move, as (found, player)."""
        if not self._history:
            return False, Cell.NONE
        return True, self._history[-1].player

    def try_peek_previous_move(self) -> Tuple[bool, Cell]:
        """Side that made the second most recent move, as (found, player)."""
        if len(self._history) < 2:
            return False, Cell.NONE
        return True, self._history[-2].player

    def get_move_count(self) -> int:
        return len(self._history)

    def get_move_players_history(self) -> List[Cell]:
        return [m.player for m in self._history]

    def get_move_history(self) -> List[MoveRecord]:
        return list(self._history)

    def copy(self) -> "TicTacToeGame":
        """Create an independent copy of the game."""
        new_game = TicTacToeGame()
        new_game._board = list(self._board)
        new_game._history = list(self._history)
        new_game._current_player = self._current_player
        new_game._winner = self._winner
        new_game._game_over = self._game_over
        new_game._winning_line = self._winning_line
        return new_game

    def __repr__(self) -> str:
        cells = "".join("." if v == Cell.NONE else v.name for v in self._board)
        return (f"TicTacToeGame(board={cells!r}, current_player={self._current_player.name}, "
                f"winner={self._winner.name}, over={self._game_over})")
