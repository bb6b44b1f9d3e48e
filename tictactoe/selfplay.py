"""
AI vs AI self-play with optional random exploration moves.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .game import TicTacToeGame
from .search import choose_move
from .types import NO_MOVE, AILevel, Cell

logger = logging.getLogger(__name__)


@dataclass
class MatchStats:
    """Statistics from a self-play session."""
    games_played: int = 0
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
    avg_game_length: float = 0.0
    random_moves_total: int = 0
    random_moves_per_game: List[int] = field(default_factory=list)

    def record(self, winner: Cell, moves: int, random_moves: int = 0) -> None:
        if winner == Cell.X:
            self.x_wins += 1
        elif winner == Cell.O:
            self.o_wins += 1
        else:
            self.draws += 1
        self.games_played += 1
        self.avg_game_length = ((self.avg_game_length * (self.games_played - 1)) + moves) / self.games_played
        self.random_moves_total += random_moves
        self.random_moves_per_game.append(random_moves)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'games_played': self.games_played,
            'x_wins': self.x_wins,
            'o_wins': self.o_wins,
            'draws': self.draws,
            'avg_game_length': self.avg_game_length,
            'random_moves_total': self.random_moves_total,
        }


class SelfPlayRunner:
    """Plays the engine against itself, one AI level per side."""

    def __init__(self, level_x: AILevel = AILevel.HARD, level_o: AILevel = AILevel.HARD,
                 epsilon: float = 0.0, seed: Optional[int] = None) -> None:
        if not 0.0 <= epsilon <= 1.0:
            raise ValueError("epsilon must be between 0 and 1")
        self.levels = {Cell.X: AILevel(level_x), Cell.O: AILevel(level_o)}
        self.epsilon = epsilon
        self.rng = random.Random(seed)
        self.stats = MatchStats()

    def play_game(self) -> Tuple[TicTacToeGame, int]:
        """
        Play one game to the end.

        Returns:
            (finished game, number of random exploration moves)
        """
        game = TicTacToeGame()
        random_moves = 0
        while not game.is_game_over:
            player = game.current_player
            if self.epsilon > 0 and self.rng.random() < self.epsilon:
                move = self.rng.choice(game.get_available_moves())
                random_moves += 1
            else:
                move = choose_move(game, self.levels[player], player)
            if move == NO_MOVE:
                break
            game.make_move(move)
        return game, random_moves

    def run(self, num_games: int) -> MatchStats:
        """Play num_games games and accumulate the results."""
        start_time = time.time()
        logger.info("Self-play: %d games, X=%s O=%s, epsilon=%.2f",
                    num_games, self.levels[Cell.X].name, self.levels[Cell.O].name, self.epsilon)
        for game_num in range(num_games):
            game, random_moves = self.play_game()
            self.stats.record(game.winner, game.get_move_count(), random_moves)
            logger.debug("Game %d: %s in %d moves (%d random)", game_num + 1,
                         "draw" if game.winner == Cell.NONE else f"{game.winner.name} wins",
                         game.get_move_count(), random_moves)
        elapsed = time.time() - start_time
        logger.info("Self-play finished in %.2fs: X %d, O %d, draws %d",
                    elapsed, self.stats.x_wins, self.stats.o_wins, self.stats.draws)
        return self.stats
