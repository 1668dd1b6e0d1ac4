import argparse
import logging
import sys

from golreach.config import DEFAULT_DIMENSION, DEFAULT_MAX_ITERATIONS, RunConfig
from golreach.errors import GolReachError
from golreach.runner import run
from golreach.scenarios import BLINKER, GLIDER


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="golreach",
        description="Symbolic reachability check: does the game reach the all-dead board?",
    )
    parser.add_argument("--scenario", choices=[BLINKER, GLIDER, "both"], default="both")
    parser.add_argument("--dimension", type=int, default=DEFAULT_DIMENSION)
    parser.add_argument("--workers", type=int, default=None,
                        help="parallel workers for the transition relation (default: CPU count)")
    parser.add_argument("--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS,
                        help="cap on fixpoint iterations, 0 for none")
    parser.add_argument("--verify", action="store_true",
                        help="cross-check against explicit exploration")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    scenarios = [BLINKER, GLIDER] if args.scenario == "both" else [args.scenario]
    try:
        for scenario in scenarios:
            config = RunConfig(
                scenario=scenario,
                dimension=args.dimension,
                max_iterations=args.max_iterations or None,
                verify=args.verify,
            )
            if args.workers is not None:
                config.workers = args.workers
            run(config)
    except GolReachError as e:
        print(f"[Error] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
