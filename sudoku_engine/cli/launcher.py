"""Command line entry point."""
import argparse
import json
import sys
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from sudoku_engine.common.board import Board, count_clues
from sudoku_engine.common.config import load_config
from sudoku_engine.common.constants import GRID_SIZE, Difficulty
from sudoku_engine.common.exceptions import PuzzleGenerationTimeout
from sudoku_engine.common.judge import SudokuJudge
from sudoku_engine.generator.carver import PuzzleCarver
from sudoku_engine.search.counter import count_solutions, has_unique_solution
from sudoku_engine.search.solver import solve_puzzle
from sudoku_engine.utils.log import get_logger, set_log_level

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_TIMEOUT = 2
EXIT_BAD_INPUT = 3


def read_board(path: str, stdin: Optional[TextIO] = None) -> Board:
    """Read a 9x9 JSON grid from `path`, or from stdin when `path` is `-`."""
    if path == "-":
        board = json.load(stdin if stdin is not None else sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as f:
            board = json.load(f)
    if (
        not isinstance(board, list)
        or len(board) != GRID_SIZE
        or not all(isinstance(row, list) and len(row) == GRID_SIZE for row in board)
    ):
        raise ValueError(f"Expected a {GRID_SIZE}x{GRID_SIZE} grid in {path}")
    if not all(
        isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= GRID_SIZE
        for row in board
        for v in row
    ):
        raise ValueError(f"Cell values must be integers in [0, {GRID_SIZE}] in {path}")
    return board


def read_consistent_board(path: str) -> Board:
    """Like `read_board`, but reject grids whose clues already clash."""
    board = read_board(path)
    conflicts = sorted(SudokuJudge.find_conflicts(board))
    if conflicts:
        raise ValueError(f"Grid in {path} has conflicting cells: {conflicts}")
    return board


def generate(args: argparse.Namespace) -> int:
    config = load_config(
        args.config,
        overrides={
            "difficulty": args.difficulty,
            "time_budget_ms": args.time_budget_ms,
            "seed": args.seed,
        },
    )
    carver = PuzzleCarver(config)
    for _ in range(args.count):
        try:
            puzzle = carver.generate()
        except PuzzleGenerationTimeout as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_TIMEOUT
        print(json.dumps(puzzle))
    return EXIT_OK


def solve(args: argparse.Namespace) -> int:
    solution = solve_puzzle(read_consistent_board(args.grid))
    if solution is None:
        print("No solution.", file=sys.stderr)
        return EXIT_NO_SOLUTION
    print(json.dumps(solution))
    return EXIT_OK


def count(args: argparse.Namespace) -> int:
    print(count_solutions(read_consistent_board(args.grid), args.max))
    return EXIT_OK


def check(args: argparse.Namespace) -> int:
    board = read_board(args.grid)
    conflicts = sorted(SudokuJudge.find_conflicts(board))
    report = {
        "clues": count_clues(board),
        "conflicts": [list(cell) for cell in conflicts],
        # search is undefined on boards that already clash
        "unique": None if conflicts else has_unique_solution(board),
    }
    print(json.dumps(report))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sudoku-engine", description="Sudoku generator and solver")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_parser = subparsers.add_parser("generate", help="Generate puzzles with a unique solution.")
    gen_parser.add_argument(
        "--difficulty",
        type=str,
        default=None,
        choices=[d.value for d in Difficulty],
        help="Puzzle difficulty (default: medium)",
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    gen_parser.add_argument(
        "--time-budget-ms", type=int, default=None, help="Wall-clock budget per puzzle"
    )
    gen_parser.add_argument("--config", type=str, default=None, help="Path to a yaml config")
    gen_parser.add_argument("--count", type=int, default=1, help="Number of puzzles")
    gen_parser.set_defaults(func=generate)

    solve_parser = subparsers.add_parser("solve", help="Solve a JSON grid.")
    solve_parser.add_argument("grid", type=str, help="Path to a JSON grid, or - for stdin")
    solve_parser.set_defaults(func=solve)

    count_parser = subparsers.add_parser("count", help="Count solutions of a JSON grid.")
    count_parser.add_argument("grid", type=str, help="Path to a JSON grid, or - for stdin")
    count_parser.add_argument("--max", type=int, default=2, help="Stop counting at this many")
    count_parser.set_defaults(func=count)

    check_parser = subparsers.add_parser("check", help="Report conflicts and uniqueness.")
    check_parser.add_argument("grid", type=str, help="Path to a JSON grid, or - for stdin")
    check_parser.set_defaults(func=check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    set_log_level()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        logger.error(f"Error: {e}")
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
