#!/usr/bin/env python3
"""
Entry point: python -m flappy_term
"""

import argparse
import logging

from .constants import SCORE_FILE, TARGET_FPS
from .data_models import GameConfig
from .logger import setup_logging
from .score_store import ScoreStore

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy-term", description="Flappy Bird on a character grid.")
    parser.add_argument("--score-file", default=SCORE_FILE, help="High score file (default: %(default)s)")
    parser.add_argument("--fps", type=int, default=TARGET_FPS, help="Target frame rate (default: %(default)s)")
    parser.add_argument("--log-level", default="warning",
                        choices=["debug", "info", "warning", "error"], help="Diagnostic log level")
    parser.add_argument("--log-file", default=None, help="Also write diagnostics to this file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    # Imported late so --help works without opening a window
    from .console_engine import ConsoleEngine
    from .flappy_client import FlappyClient

    config = GameConfig()
    engine = ConsoleEngine(config.width, config.height, fps=args.fps)
    try:
        FlappyClient(engine, ScoreStore(args.score_file), config).run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        engine.close()


if __name__ == "__main__":
    main()
