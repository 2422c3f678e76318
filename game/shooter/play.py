"""
Launch the playable shooter window

    python -m game.shooter.play --progress ./progress.json
"""

import argparse
import logging

import arcade

from . import config
from .progress import JsonProgressStore
from .renderer import ShooterWindow
from .session import ShooterSession


def main():
    parser = argparse.ArgumentParser(description="Play the shooter")
    parser.add_argument("--progress", type=str, default="./progress.json",
                        help="File that remembers the highest unlocked level")
    parser.add_argument("--width", type=int, default=config.WIDTH)
    parser.add_argument("--height", type=int, default=config.HEIGHT)
    parser.add_argument("--verbose", action="store_true", help="Log state transitions")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    session = ShooterSession(
        store=JsonProgressStore(args.progress),
        width=args.width,
        height=args.height,
    )
    print(f"Unlocked level: {session.unlocked_level}. Press 1/2/3 to pick a level, ESC to quit.")

    ShooterWindow(session)
    arcade.run()


if __name__ == "__main__":
    main()
