from tictactoe.eval import Evaluator, PositionalEvaluator, get_evaluator
from tictactoe.search import MinimaxSearchStrategy, SearchStrategy, get_search_strategy
from tictactoe.board import empty_board
from tictactoe.types import AILevel, Cell


class CenterOnlyEvaluator(Evaluator):
    def evaluate_position(self, board, ai_player):
        return 5.0 if board[4] == ai_player else 0.0


def test_search_strategy_returns_move():
    strat = get_search_strategy(AILevel.EASY)
    assert isinstance(strat, SearchStrategy)
    score, move = strat.search(empty_board(), Cell.X, Cell.X)
    assert isinstance(score, int)
    assert move in range(9)


def test_custom_evaluator_is_used_at_cutoff():
    strat = MinimaxSearchStrategy(max_depth=1, evaluator=CenterOnlyEvaluator())
    score, move = strat.search(empty_board(), Cell.X, Cell.X)
    assert (score, move) == (5, 4)


def test_default_evaluator_batch_fallback():
    evaluator = CenterOnlyEvaluator()
    board = empty_board()
    board[4] = Cell.O
    out = evaluator.batch_predict([empty_board(), board], Cell.O)
    assert out.tolist() == [0.0, 5.0]


def test_factories_work():
    evaluator = get_evaluator()
    assert isinstance(evaluator, PositionalEvaluator)
    assert isinstance(evaluator.evaluate_position(empty_board(), Cell.X), float)
