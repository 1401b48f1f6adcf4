import numpy as np
import pytest

from loa.core import Board, Move, Piece, board_from_rows
from loa.search import (
    INFTY,
    WINNING_VALUE,
    AlphaBetaSearch,
    HeuristicConfig,
    SearchConfig,
    heuristic_estimate,
)

# Two clusters (d4, f6) for the side moving, three lone corner pieces for
# the other side.
TWO_VS_THREE = [
    "{o}------{o}",
    "--------",
    "-----{m}--",
    "--------",
    "---{m}----",
    "--------",
    "--------",
    "-------{o}",
]


def two_vs_three(mover: Piece) -> Board:
    m, o = ("b", "w") if mover == Piece.BLACK else ("w", "b")
    return board_from_rows([row.format(m=m, o=o) for row in TWO_VS_THREE], mover)


def connected_corners(turn: Piece) -> Board:
    rows = ["ww------"] + ["--------"] * 6 + ["b-----bb"]
    return board_from_rows(rows, turn)


def test_heuristic_winning_shortcut_for_side_on_move() -> None:
    rows = ["ww------"] + ["--------"] * 6 + ["------bb"]
    assert heuristic_estimate(board_from_rows(rows, Piece.WHITE)) == WINNING_VALUE
    assert heuristic_estimate(board_from_rows(rows, Piece.BLACK)) == -WINNING_VALUE


def test_heuristic_prefers_fewer_clusters() -> None:
    board = connected_corners(Piece.BLACK)
    assert heuristic_estimate(board) == 25
    assert heuristic_estimate(board, HeuristicConfig(region_weight=4)) == 4


def test_heuristic_noise_is_bounded() -> None:
    board = connected_corners(Piece.BLACK)
    config = HeuristicConfig(noise=5)
    rng = np.random.default_rng(0)
    for _ in range(10):
        assert 25 <= heuristic_estimate(board, config, rng=rng) <= 30


@pytest.mark.parametrize("mover, value", [(Piece.BLACK, -50), (Piece.WHITE, 50)])
def test_depth_one_picks_last_of_tied_best_moves(mover: Piece, value: int) -> None:
    # d4g7 and f6c3 both join the mover's pieces; the later one wins the tie.
    board = two_vs_three(mover)
    result = AlphaBetaSearch(SearchConfig(depth=1)).search(board)
    assert result.move == Move.parse("f6c3")
    assert result.value == value


def test_depth_one_matches_static_scores_of_children() -> None:
    board = Board()
    scores = []
    for move in board.legal_moves():
        board.make_move(move)
        scores.append(heuristic_estimate(board))
        board.retract()
    best = min(scores)
    expected = board.legal_moves()[max(i for i, s in enumerate(scores) if s == best)]

    result = AlphaBetaSearch(SearchConfig(depth=1)).search(board)
    assert result.value == best
    assert result.move == expected


def exact_value_after(board: Board, move: Move, depth: int) -> float:
    """Full-width minimax value of BOARD after MOVE, DEPTH - 1 plies deeper."""
    child = board.copy()
    child.make_move(move)
    sense = 1 if child.turn == Piece.WHITE else -1
    full = AlphaBetaSearch(SearchConfig(depth=depth, prune=False))
    return full.find_move(child, depth - 1, False, sense, -INFTY, INFTY)


def played_position(seed: int, plies: int) -> Board:
    rng = np.random.default_rng(seed)
    board = Board()
    for _ in range(plies):
        moves = board.legal_moves()
        if board.game_over() or not moves:
            break
        board.make_move(moves[int(rng.integers(len(moves)))])
    return board


@pytest.mark.parametrize(
    "board_factory, depth",
    [(lambda: two_vs_three(Piece.BLACK), 3), (lambda: two_vs_three(Piece.WHITE), 3), (Board, 2)],
)
def test_alpha_beta_value_equals_full_minimax(board_factory, depth: int) -> None:
    board = board_factory()
    pruned = AlphaBetaSearch(SearchConfig(depth=depth)).search(board)
    full = AlphaBetaSearch(SearchConfig(depth=depth, prune=False)).search(board)
    assert pruned.value == full.value
    assert pruned.nodes <= full.nodes
    assert exact_value_after(board, pruned.move, depth) == full.value


@pytest.mark.parametrize("seed", range(12))
def test_pruned_search_plays_a_move_worth_its_reported_value(seed: int) -> None:
    board = played_position(seed, plies=6 + seed)
    if board.game_over() or not board.legal_moves():
        pytest.skip("position already decided")
    result = AlphaBetaSearch(SearchConfig(depth=2)).search(board)
    assert exact_value_after(board, result.move, 2) == result.value
    full = AlphaBetaSearch(SearchConfig(depth=2, prune=False)).search(board)
    assert result.value == full.value


def test_search_leaves_callers_board_untouched() -> None:
    board = Board()
    board.make_move(Move.parse("b1d3"))
    snapshot = board.copy()
    move = AlphaBetaSearch(SearchConfig(depth=2)).choose_move(board)
    assert board == snapshot
    assert board.moves_made() == 1
    assert board.moves == snapshot.moves
    assert board.is_legal(move)
    assert board.get(move.from_sq) == board.turn


def test_search_without_legal_moves_raises() -> None:
    rows = ["--------"] * 6 + ["ww------", "bw------"]
    board = board_from_rows(rows, Piece.BLACK)
    assert board.legal_moves() == []
    with pytest.raises(ValueError):
        AlphaBetaSearch().choose_move(board)


def test_search_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        AlphaBetaSearch(SearchConfig(depth=0)).choose_move(Board())


def test_heuristic_density_term() -> None:
    rows = ["www-----"] + ["--------"] * 6 + ["b-----bb"]
    board = board_from_rows(rows, Piece.BLACK)
    assert heuristic_estimate(board, HeuristicConfig(density_weight=5)) == 30


def test_side_without_pieces_scores_as_lost() -> None:
    rows = ["--------"] * 7 + ["b-----bb"]
    assert heuristic_estimate(board_from_rows(rows, Piece.WHITE)) == -WINNING_VALUE
    rows = ["ww-----w"] + ["--------"] * 7
    assert heuristic_estimate(board_from_rows(rows, Piece.BLACK)) == WINNING_VALUE
