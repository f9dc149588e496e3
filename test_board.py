"""
Board transition tests: rule correctness, boundaries and terminal states.

Run with ``python -m unittest test_board.py``.
"""

import unittest

from life import Board, InvalidGrid

BLINKER_VERTICAL = [
    [False, True, False],
    [False, True, False],
    [False, True, False],
]
BLINKER_HORIZONTAL = [
    [False, False, False],
    [True, True, True],
    [False, False, False],
]


def grid_of(*rows: str):
    return [[cell == "#" for cell in row] for row in rows]


class TestTransition(unittest.TestCase):
    def test_blinker_oscillates(self) -> None:
        board = Board(grid=[row[:] for row in BLINKER_VERTICAL])

        self.assertEqual(board.next(), 4)
        self.assertEqual(board.grid, BLINKER_HORIZONTAL)
        self.assertEqual(board.delta, 4)
        self.assertEqual(board.generation, 1)

        self.assertEqual(board.next(), 4)
        self.assertEqual(board.grid, BLINKER_VERTICAL)
        self.assertEqual(board.generation, 2)
        self.assertFalse(board.terminal())

    def test_block_is_stable_and_terminal(self) -> None:
        board = Board(grid=grid_of("....", ".##.", ".##.", "...."))
        before = [row[:] for row in board.grid]

        self.assertEqual(board.next(), 0)
        self.assertEqual(board.grid, before)
        self.assertEqual(board.delta, 0)
        self.assertTrue(board.terminal())

    def test_block_in_corner_is_stable(self) -> None:
        board = Board(grid=grid_of("##", "##"))
        board.next()
        self.assertEqual(board.grid, grid_of("##", "##"))
        self.assertTrue(board.terminal())

    def test_lone_corner_cell_dies(self) -> None:
        for size in (1, 2, 5):
            grid = [[False] * size for _ in range(size)]
            grid[0][0] = True
            board = Board(grid=grid)
            self.assertEqual(board.next(), 1)
            self.assertEqual(board.population, 0)

    def test_corner_neighbors_are_clipped(self) -> None:
        # All eight cells around the corner would be alive on a torus.
        board = Board(grid=grid_of("#..#", "....", "....", "#..#"))
        self.assertEqual(board._count_neighbors(0, 0), 0)
        board = Board(grid=grid_of("###", "###", "###"))
        self.assertEqual(board._count_neighbors(0, 0), 3)
        self.assertEqual(board._count_neighbors(1, 1), 8)

    def test_reproduction_needs_exactly_three(self) -> None:
        board = Board(grid=grid_of("#.#", "...", ".#."))
        board.next()
        self.assertTrue(board.grid[1][1])

        board = Board(grid=grid_of("#.#", "...", "#.#"))
        board.next()
        self.assertFalse(board.grid[1][1])

    def test_overpopulation(self) -> None:
        board = Board(grid=grid_of("###", "##.", "..."))
        board.next()
        # Center had 4 live neighbors
        self.assertFalse(board.grid[1][1])

    def test_update_is_synchronous(self) -> None:
        # An in-place scan would see (0,1) already dead when visiting (1,1).
        board = Board(grid=grid_of(".#.", ".#.", ".#."))
        board.next()
        self.assertEqual(board.grid, BLINKER_HORIZONTAL)

    def test_glider_moves(self) -> None:
        board = Board.from_seed(".#...\n..#..\n###..\n.....\n.....")
        for _ in range(4):
            board.next()
        self.assertEqual(str(board), ".....\n..#..\n...#.\n.###.\n.....")
        self.assertEqual(board.generation, 4)

    def test_delta_is_not_accumulated(self) -> None:
        board = Board(grid=grid_of(".....", "..#..", "..#..", "..#..", "....."))
        board.next()
        board.next()
        self.assertEqual(board.delta, 4)

    def test_empty_grids(self) -> None:
        for grid in ([], [[]], [[], []]):
            board = Board(grid=grid)
            self.assertEqual(board.next(), 0)
            self.assertEqual(board.generation, 1)
            self.assertTrue(board.terminal())


class TestTerminal(unittest.TestCase):
    def test_fresh_board_is_never_terminal(self) -> None:
        self.assertFalse(Board.from_seed("...\n...").terminal())
        self.assertFalse(Board().terminal())

    def test_dead_board_becomes_terminal_after_one_step(self) -> None:
        board = Board.from_seed("...\n...")
        board.next()
        self.assertTrue(board.terminal())


class TestBoardModel(unittest.TestCase):
    def test_from_seed_starts_at_zero(self) -> None:
        board = Board.from_seed("#.\n.#")
        self.assertEqual((board.generation, board.delta), (0, 0))
        self.assertEqual((board.rows, board.cols), (2, 2))

    def test_zero_row_shape(self) -> None:
        board = Board()
        self.assertEqual((board.rows, board.cols), (0, 0))

    def test_jagged_grid_rejected(self) -> None:
        with self.assertRaises(InvalidGrid):
            Board(grid=[[True, False], [True]])

    def test_negative_counters_rejected(self) -> None:
        with self.assertRaises(InvalidGrid):
            Board(grid=[[True]], generation=-1)
        with self.assertRaises(InvalidGrid):
            Board(grid=[[True]], delta=-1)

    def test_dict_round_trip(self) -> None:
        board = Board(grid=grid_of("#.", ".#"), generation=7, delta=3)
        restored = Board.from_dict(board.to_dict())
        self.assertEqual(restored, board)

    def test_from_dict_rejects_malformed_data(self) -> None:
        with self.assertRaises(InvalidGrid):
            Board.from_dict({"generation": 1})
        with self.assertRaises(InvalidGrid):
            Board.from_dict({"grid": [[True], [True, False]]})
        with self.assertRaises(InvalidGrid):
            Board.from_dict({"grid": [[True, "false"]], "generation": 1})
        with self.assertRaises(InvalidGrid):
            Board.from_dict({"grid": [[1, 0]]})
        with self.assertRaises(InvalidGrid):
            Board.from_dict({"grid": [[True]], "generation": "soon"})

    def test_clone_is_independent(self) -> None:
        board = Board(grid=[row[:] for row in BLINKER_VERTICAL])
        copy = board.clone()
        board.next()
        self.assertEqual(copy.grid, BLINKER_VERTICAL)
        self.assertEqual(copy.generation, 0)

    def test_repr_shows_counters(self) -> None:
        board = Board(grid=grid_of("#."), generation=2, delta=1)
        self.assertEqual(repr(board), "[n: 2, Δ: 1]\n#.")


if __name__ == "__main__":
    unittest.main()
