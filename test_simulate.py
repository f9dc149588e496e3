"""
Local simulation CLI tests.

Run with ``python -m unittest test_simulate.py``.
"""

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from life import Board
from simulate import main, simulate


class TestSimulate(unittest.TestCase):
    def test_stops_when_terminal(self) -> None:
        board = simulate(Board.from_seed("##\n##"), max_generations=50)
        self.assertEqual(board.generation, 1)
        self.assertTrue(board.terminal())

    def test_oscillator_runs_to_limit(self) -> None:
        seen = []
        board = simulate(Board.from_seed(".#.\n.#.\n.#."), 5, on_generation=lambda b: seen.append(b.delta))
        self.assertEqual(board.generation, 5)
        self.assertEqual(seen, [4] * 5)
        self.assertFalse(board.terminal())

    def test_zero_generations(self) -> None:
        board = simulate(Board.from_seed("#"), 0)
        self.assertEqual(board.generation, 0)

    def test_negative_generations_rejected(self) -> None:
        with self.assertRaises(ValueError):
            simulate(Board.from_seed("#"), -1)


class TestSimulateCLI(unittest.TestCase):
    def test_writes_final_svg(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            seed_path = Path(tmpdir) / "block.txt"
            seed_path.write_text("##\n##\n", encoding="utf-8")
            svg_path = Path(tmpdir) / "out.svg"

            out = io.StringIO()
            with redirect_stdout(out):
                code = main([str(seed_path), "--generations", "10", "--svg", str(svg_path), "--quiet"])

            self.assertEqual(code, 0)
            self.assertIn("[n: 1, Δ: 0]", out.getvalue())
            self.assertIn("t = 1, Δ = 0", svg_path.read_text(encoding="utf-8"))

    def test_custom_symbols_in_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            seed_path = Path(tmpdir) / "blinker.txt"
            seed_path.write_text("-o-,-o-,-o-", encoding="utf-8")

            out = io.StringIO()
            with redirect_stdout(out):
                code = main([str(seed_path), "--generations", "1", "--alive", "o", "--dead", "-", "--separator", ","])

            self.assertEqual(code, 0)
            self.assertIn("---,ooo,---", out.getvalue())

    def test_invalid_seed_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            seed_path = Path(tmpdir) / "bad.txt"
            seed_path.write_text("#?", encoding="utf-8")

            err = io.StringIO()
            with redirect_stderr(err):
                code = main([str(seed_path)])

            self.assertEqual(code, 2)
            self.assertIn("invalid seed character", err.getvalue())


if __name__ == "__main__":
    unittest.main()
