import pytest

from tictactoe.eval import heuristic
from tictactoe.game import TicTacToeGame
from tictactoe.search import (
    EXHAUSTIVE_DEPTH,
    MinimaxSearchStrategy,
    choose_move,
    choose_move_on_board,
    depth_for_level,
    get_search_strategy,
    search_move,
)
from tictactoe.types import NO_MOVE, AILevel, Cell

X, O, E = Cell.X, Cell.O, Cell.NONE


def game_from(moves):
    game = TicTacToeGame()
    for m in moves:
        assert game.make_move(m)
    return game


def test_depth_policy():
    assert depth_for_level(AILevel.HARD) == EXHAUSTIVE_DEPTH == 9
    assert depth_for_level(AILevel.EASY) == 2
    assert depth_for_level(AILevel.NONE) == 2


def test_shallow_depth_follows_config(monkeypatch):
    monkeypatch.setenv("TICTACTOE_SHALLOW_DEPTH", "4")
    assert depth_for_level(AILevel.EASY) == 4
    assert depth_for_level(AILevel.HARD) == 9


def test_finished_game_has_no_move():
    game = game_from([0, 3, 1, 4, 2])
    assert choose_move(game, AILevel.HARD, O) == NO_MOVE
    assert choose_move(game, AILevel.EASY, X) == NO_MOVE


def test_finished_board_has_no_move():
    board = [X, O, X,
             X, O, O,
             O, X, X]
    assert search_move(board, X, AILevel.HARD, X) == (0, NO_MOVE)
    assert choose_move_on_board(board, O, AILevel.EASY, O) == NO_MOVE


@pytest.mark.parametrize("level", [AILevel.HARD, AILevel.EASY])
def test_takes_immediate_win(level):
    board = [X, X, E,
             E, O, E,
             E, E, E]
    score, move = search_move(board, X, level, X)
    assert move == 2
    assert score == 9


def test_blocks_immediate_loss():
    board = [X, X, E,
             E, O, E,
             E, E, E]
    score, move = search_move(board, O, AILevel.HARD, O)
    assert move == 2
    assert score >= 0


def test_first_maximal_candidate_wins_ties():
    # X wins with 2 (top row) or 6 (left column); 2 comes first
    board = [X, X, E,
             X, O, O,
             E, O, E]
    assert search_move(board, X, AILevel.HARD, X) == (9, 2)


def test_shallow_search_prefers_center_on_empty_board():
    assert search_move([E] * 9, X, AILevel.EASY, X) == (1, 4)


def test_exhaustive_search_on_empty_board_is_a_draw():
    # Every opening draws under perfect play, so the first cell is kept
    score, move = search_move([E] * 9, X, AILevel.HARD, X)
    assert score == 0
    assert move == 0


def test_search_does_not_touch_caller_board():
    board = [X, E, E,
             E, O, E,
             E, E, E]
    before = list(board)
    search_move(board, X, AILevel.HARD, X)
    assert board == before


def test_choose_move_leaves_game_untouched():
    game = game_from([0, 4])
    before = game.get_board_copy()
    move = choose_move(game, AILevel.HARD, X)
    assert move in game.get_available_moves()
    assert game.get_board_copy() == before
    assert game.get_move_count() == 2


def test_choose_move_searches_for_side_to_move():
    game = game_from([0, 4, 1])
    # O must block the top row
    assert choose_move(game, AILevel.HARD, O) == 2


def test_terminal_scores_depend_on_depth():
    strategy = MinimaxSearchStrategy()
    x_wins = [X, X, X,
              O, O, E,
              E, E, E]
    assert strategy.minimax(list(x_wins), O, X, 3) == 7
    assert strategy.minimax(list(x_wins), O, O, 3) == -7
    draw = [X, O, X,
            X, O, O,
            O, X, X]
    assert strategy.minimax(list(draw), X, X, 5) == 0


def test_cutoff_uses_heuristic():
    strategy = MinimaxSearchStrategy(max_depth=2)
    board = [X, E, E,
             E, O, E,
             E, E, E]
    assert strategy.minimax(list(board), X, X, 2) == heuristic(board, X) == -1
    assert strategy.minimax(list(board), X, O, 2) == 1


def test_exhaustive_never_cuts_off():
    strategy = get_search_strategy(AILevel.HARD)
    assert isinstance(strategy, MinimaxSearchStrategy)
    assert strategy.max_depth == 9
    board = [X, O, X,
             E, O, E,
             E, E, E]
    score, move = strategy.search(list(board), X, X)
    assert move == 7
    assert strategy.nodes_searched > 0


def test_invalid_arguments():
    with pytest.raises(ValueError):
        search_move([E] * 8, X, AILevel.HARD, X)
    with pytest.raises(ValueError):
        search_move([E] * 9, E, AILevel.HARD, X)
    with pytest.raises(ValueError):
        choose_move(None, AILevel.HARD, X)
