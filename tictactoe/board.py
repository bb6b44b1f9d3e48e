from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .types import (
    BOARD_SIZE,
    BOARD_WIDTH,
    NO_LINE,
    WIN_LINES,
    Board,
    Cell,
    CellIndex,
    LineIndex,
    Position,
)

# -----------------------------
# Board indexing and utilities
# -----------------------------
_rc_of: List[Position] = []
idx_map: Dict[Position, CellIndex] = {}


def _build_mappings() -> None:
    i: int = 0
    for r in range(BOARD_WIDTH):
        for c in range(BOARD_WIDTH):
            _rc_of.append((r, c))
            idx_map[(r, c)] = i
            i += 1


_build_mappings()


def rc(i: CellIndex) -> Position:
    """Convert a cell index to row/column coordinates."""
    return _rc_of[i]


def idx(row: int, col: int) -> CellIndex:
    """Convert row/column coordinates to a cell index."""
    return idx_map[(row, col)]


def empty_board() -> Board:
    return [Cell.NONE] * BOARD_SIZE


def empty_cells(board: Sequence[Cell]) -> List[CellIndex]:
    """Indices of empty cells in ascending order."""
    return [i for i, v in enumerate(board) if v == Cell.NONE]


def is_full(board: Sequence[Cell]) -> bool:
    for v in board:
        if v == Cell.NONE:
            return False
    return True


def find_winner(board: Sequence[Cell]) -> Tuple[Cell, LineIndex]:
    """Return (winner, line_index) for the first completed line in table order.

    Returns (Cell.NONE, -1) when no line is complete.
    """
    for i, (a, b, c) in enumerate(WIN_LINES):
        pa = board[a]
        if pa == Cell.NONE:
            continue
        if pa == board[b] and pa == board[c]:
            return Cell(pa), i
    return Cell.NONE, NO_LINE


def is_terminal(board: Sequence[Cell]) -> Tuple[bool, Cell]:
    """
    Check if a raw board is finished.

    Returns:
        (is_terminal, winner) where winner is Cell.NONE for a draw or an
        unfinished board.
    """
    winner, _ = find_winner(board)
    if winner != Cell.NONE:
        return True, winner
    return is_full(board), Cell.NONE


def line_cells(line: LineIndex) -> Tuple[int, int, int]:
    return WIN_LINES[line]


def line_midpoint(line: LineIndex) -> Optional[CellIndex]:
    """Middle cell of a winning line, where a strike-through is centered."""
    if not 0 <= line < len(WIN_LINES):
        return None
    return WIN_LINES[line][1]
