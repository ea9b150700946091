import argparse
import logging
import random
import sys
from pathlib import Path

# Ensure local repo package is used even if another "blackbox" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blackbox import SimulationEngine, load_config, place_atoms


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fire rays into a random Blackbox board.")
    parser.add_argument(
        "rays",
        nargs="*",
        type=int,
        help="Ray ids to fire (default: every perimeter ray)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config (default: bundled blackbox/config.yaml)",
    )
    parser.add_argument(
        "--atoms",
        type=int,
        default=None,
        help="Number of hidden atoms (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for atom placement",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Print atom positions after the log",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    cfg = load_config(args.config)
    atoms = cfg.board.atoms if args.atoms is None else args.atoms
    board = place_atoms(atoms, size=cfg.board.size, rng=random.Random(args.seed))

    engine = SimulationEngine(cfg)
    engine.start(board)
    if args.rays:
        for ray_id in args.rays:
            engine.fire(ray_id)
    else:
        engine.fire_all()

    for result in engine.results:
        print(f"{result.ray_id:>3}: {result.describe()}")

    if args.reveal:
        print("Atoms:", ", ".join(f"({p.x}, {p.y})" for p in board.atoms))


if __name__ == "__main__":
    main()
