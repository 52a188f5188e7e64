"""Play the blob platformer: python -m blob_platformer [--levels FILE]."""

import argparse
import logging

from .config import GameConfig
from .level_io import load_level_pack


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Blob platformer")
    parser.add_argument("--levels", default=None, help="Level pack JSON (default: bundled levels)")
    parser.add_argument("--level", type=int, default=1, help="1-based level to start on")
    parser.add_argument("--seed", type=int, default=None, help="Seed for spike placement")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    levels = load_level_pack(args.levels)
    if not 1 <= args.level <= len(levels):
        parser.error(f"--level must be between 1 and {len(levels)}")

    # pygame is only needed for the interactive window
    from .engine import BlobEngine

    engine = BlobEngine(
        levels=levels,
        config=GameConfig(fps=args.fps),
        seed=args.seed,
        level_index=args.level - 1,
    )
    engine.run()


if __name__ == "__main__":
    main()
