import argparse
import sys
from pathlib import Path

# Ensure local repo package is used even if another "amida" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from amida import SimulationEngine, create_board, create_board_from_puzzle, parse_puzzle_file
from amida.utils.config_loader import configure_logging, load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Step through a ghost-leg lottery puzzle.")
    parser.add_argument(
        "--puzzle",
        default="kattis-sample",
        help="Registered puzzle name",
    )
    parser.add_argument(
        "--file",
        help="Puzzle text file (overrides --puzzle)",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "--disable",
        type=int,
        nargs="*",
        default=[],
        help="Rung ids to switch off before printing",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_config(args.config)
    configure_logging(config.logging)

    if args.file:
        board = create_board_from_puzzle(parse_puzzle_file(args.file), config.board)
    else:
        board = create_board(args.puzzle, config=config.board)

    for rung_id in args.disable:
        board.toggle_rung(rung_id)

    engine = SimulationEngine()
    print(f"query 0/{board.rung_count}:", board.landing_columns())
    while engine.run(board, steps=1):
        print(
            f"query {board.query_index}/{board.rung_count}:",
            board.landing_columns(),
            f"({len(board.active_rungs)} active rungs)",
        )


if __name__ == "__main__":
    main()
