import sys
import os
import logging

# Ensure the 'core', 'world' and 'players' directories can be found
# This adds the project root directory to the Python path.
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from core.game import Game, load_default_world


def main():
    """Loads the world and starts the game."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    try:
        world_db = load_default_world()
    except (FileNotFoundError, ValueError) as e:
        logging.error("FATAL: Could not load world data: %s", e)
        print(f"Could not start game: {e}")
        return
    game_instance = Game(world_db)
    game_instance.run()


if __name__ == "__main__":
    main()
