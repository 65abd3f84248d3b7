"""
Via Romana: Entry Point

Opens the window, builds the city and runs the frame loop until the
window is closed.
"""

import argparse
import sys

from via_romana.config import RANDOM_SEED, START_FULLSCREEN
from via_romana.core.errors import GameInitError
from via_romana.core.logger import GameLogger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Collect denarii in a procedurally built Roman town")
    parser.add_argument("--seed", type=int, default=RANDOM_SEED,
                        help="Seed for map and coin placement (default: random)")
    parser.add_argument("--windowed", action="store_true",
                        help="Start in a window instead of fullscreen")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logger = GameLogger()

    print("=" * 50)
    print("  VIA ROMANA")
    print("  Arrows/WASD=Move, R=Restart, Double-click=Fullscreen, ESC=Windowed")
    print("=" * 50)
    print()

    logger.log_event("SYSTEM", "Initializing Via Romana...")

    # Imported here so --help works without a display
    from via_romana.gui.window import GameWindow

    try:
        window = GameWindow(fullscreen=START_FULLSCREEN and not args.windowed,
                            seed=args.seed)
    except GameInitError as e:
        logger.log_error("SYSTEM", f"Error initializing game: {e}")
        return 1

    try:
        window.run()
    except KeyboardInterrupt:
        print("\n[MAIN] Interrupted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
