from sudokusolver.core.board import Board
from sudokusolver.core.constraints import is_solution
from sudokusolver.core.csp import SearchStats, count_solutions, search, select_branch_cell
from sudokusolver.core.model import digit_bit
from sudokusolver.core.topology import build_topology
from sudokusolver.io.parser import parse_grid

from grids import EASY, EASY_SOLUTION, HARD, HARD_SOLUTION, UNSOLVABLE


def test_search_solves_hard_grid():
    stats = SearchStats()
    solved = search(parse_grid(HARD), stats)
    assert solved is not None
    assert is_solution(solved)
    assert solved.to_string() == HARD_SOLUTION
    assert stats.branches > 0


def test_search_keeps_givens():
    solved = search(parse_grid(HARD))
    for given, digit in zip(HARD, solved.to_string()):
        if given != ".":
            assert given == digit


def test_search_does_not_touch_input_board():
    board = parse_grid(HARD)
    before = list(board.candidates)
    search(board)
    assert board.candidates == before


def test_search_returns_complete_board_unchanged():
    board = parse_grid(EASY)
    stats = SearchStats()
    assert search(board, stats) is board
    assert stats.branches == 0
    assert board.to_string() == EASY_SOLUTION


def test_search_propagates_contradiction():
    stats = SearchStats()
    assert search(None, stats) is None
    assert stats.branches == 0
    assert stats.contradictions == 1


def test_search_rejects_board_with_empty_cell():
    board = Board.full(build_topology())
    board.candidates[10] = 0
    assert search(board) is None


def test_select_branch_cell_prefers_fewest_candidates():
    board = Board.full(build_topology())
    board.candidates[30] = digit_bit(1) | digit_bit(2) | digit_bit(3)
    board.candidates[20] = digit_bit(4) | digit_bit(5) | digit_bit(6)
    assert select_branch_cell(board) == 20
    board.candidates[50] = digit_bit(1) | digit_bit(9)
    assert select_branch_cell(board) == 50


def test_select_branch_cell_skips_assigned_cells():
    board = Board.full(build_topology())
    board.candidates[0] = digit_bit(1)
    assert select_branch_cell(board) == 1


def test_empty_grid_has_many_solutions():
    board = parse_grid("." * 81)
    assert count_solutions(board, limit=2) == 2
    assert is_solution(search(board))


def test_unique_grid_has_one_solution():
    assert count_solutions(parse_grid(HARD), limit=2) == 1


def test_search_fails_when_every_guess_fails():
    board = parse_grid(UNSOLVABLE)
    assert board is not None
    stats = SearchStats()
    assert search(board, stats) is None
    assert stats.branches > 0
    assert stats.contradictions > 0
    assert count_solutions(board, limit=2) == 0
