"""
Human vs AI match orchestration.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .board import line_cells
from .game import TicTacToeGame
from .search import choose_move
from .types import (
    NO_MOVE,
    AILevel,
    Cell,
    CellIndex,
    MatchListenerProtocol,
    is_valid_side,
)

logger = logging.getLogger(__name__)


class NullListener:
    """Listener that ignores every event."""

    def on_place(self, index: CellIndex, player: Cell) -> None:
        pass

    def on_human_win(self) -> None:
        pass

    def on_human_loss(self) -> None:
        pass


class MatchController:
    """Drives a game between a human and an optional AI opponent.

    The AI answers synchronously: every call that hands the turn to the AI
    returns only after the AI has moved.
    """

    def __init__(self, ai_level: Optional[AILevel] = None, ai_plays_as: Optional[Cell] = None,
                 listener: Optional[MatchListenerProtocol] = None,
                 allow_undo: Optional[bool] = None) -> None:
        from config import get_game_rules, get_match_settings

        match = get_match_settings()
        self.game = TicTacToeGame()
        self.ai_level = AILevel(ai_level if ai_level is not None else match.ai_level)
        self.ai_plays_as = Cell(ai_plays_as if ai_plays_as is not None else match.ai_plays_as)
        if not is_valid_side(self.ai_plays_as):
            raise ValueError("AI must play X or O")
        self.allow_undo = get_game_rules().allow_undo if allow_undo is None else bool(allow_undo)
        self.listener: MatchListenerProtocol = listener or NullListener()
        self.move_was_by_ai: List[bool] = []
        self.game_over_notified = False

    def start(self) -> None:
        """Start a fresh game; the AI opens if it plays X."""
        self.reset()

    def reset(self) -> None:
        self.game.reset()
        self.move_was_by_ai.clear()
        self.game_over_notified = False
        self._play_ai_if_due()

    def is_ai_turn(self) -> bool:
        if self.ai_level == AILevel.NONE:
            return False
        return self.game.current_player == self.ai_plays_as and not self.game.is_game_over

    def play_human(self, index: CellIndex) -> bool:
        """Apply a human move; the AI replies if it is then its turn."""
        if self.game.is_game_over:
            return False
        if self.is_ai_turn():
            return False

        player = self.game.current_player
        if not self.game.make_move(index):
            return False
        self.move_was_by_ai.append(False)
        self.listener.on_place(index, player)
        self._after_move()
        self._play_ai_if_due()
        return True

    def play_ai(self) -> CellIndex:
        """Let the AI make one move. Returns the cell played or NO_MOVE."""
        if not self.is_ai_turn():
            return NO_MOVE
        move = choose_move(self.game, self.ai_level, self.ai_plays_as)
        if move == NO_MOVE:
            return NO_MOVE
        player = self.game.current_player
        self.game.make_move(move)
        self.move_was_by_ai.append(True)
        logger.debug("AI (%s, %s) played %d", self.ai_plays_as, self.ai_level.name, move)
        self.listener.on_place(move, player)
        self._after_move()
        return move

    def retract(self) -> int:
        """
        Take back the human's last move.

        If the AI moved last its reply is taken back as well, so two moves
        are undone when available. Returns the number of moves undone.
        """
        if not self.allow_undo:
            return 0
        history_count = len(self.move_was_by_ai)
        if history_count == 0:
            return 0
        last_was_ai = self.move_was_by_ai[-1]
        to_undo = min(2, history_count) if last_was_ai else 1

        undone = self.game.undo_moves(to_undo)
        if undone > 0:
            remove = min(undone, len(self.move_was_by_ai))
            del self.move_was_by_ai[len(self.move_was_by_ai) - remove:]
            self._play_ai_if_due()
        return undone

    def set_ai_level(self, level: AILevel) -> None:
        self.ai_level = AILevel(level)
        self._play_ai_if_due()

    def set_ai_side(self, side: Cell) -> None:
        """Hand a side to the AI. If that side is to move, the AI plays at once."""
        if not is_valid_side(side):
            raise ValueError("AI must play X or O")
        if self.ai_plays_as != side:
            self.ai_plays_as = Cell(side)
            self._play_ai_if_due()

    def status_message(self) -> str:
        if self.game.is_game_over:
            if self.game.winner == Cell.NONE:
                return "Draw!"
            return f"{self.game.winner.name} wins!"
        return f"{self.game.current_player.name}'s turn"

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        if not self.game.is_game_over or self.game.winning_line_index < 0:
            return None
        return line_cells(self.game.winning_line_index)

    def _play_ai_if_due(self) -> None:
        if self.is_ai_turn():
            self.play_ai()

    def _after_move(self) -> None:
        if not self.game.is_game_over or self.game_over_notified:
            return
        winner = self.game.winner
        if winner == Cell.NONE:
            return

        # Only a game where the human kept one side and the AI the other counts.
        players = self.game.get_move_players_history()
        if not players or len(players) != len(self.move_was_by_ai):
            return
        human_sides = {p for p, by_ai in zip(players, self.move_was_by_ai) if not by_ai}
        ai_sides = {p for p, by_ai in zip(players, self.move_was_by_ai) if by_ai}
        if len(human_sides) != 1 or len(ai_sides) != 1 or human_sides == ai_sides:
            return

        human_side = next(iter(human_sides))
        if winner == human_side:
            self.listener.on_human_win()
        else:
            self.listener.on_human_loss()
        self.game_over_notified = True
        logger.debug("Game over: %s wins, human played %s", winner, human_side)
