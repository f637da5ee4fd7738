"""Saves and restores the Player to a JSON file."""

import json
import logging

import config
from players.player import Player


def save_player(player: Player, path: str = config.SAVE_FILE):
    """
    Writes the player to `path` as JSON, replacing any previous save.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(player.to_dict(), f)
    logging.info("Saved player '%s' to %s", player.name, path)


def load_player(path: str = config.SAVE_FILE) -> Player:
    """
    Reads a player previously written by save_player.

    The stored location id is returned as-is; callers must not assume it
    exists in the world.

    Raises:
        OSError: If the file is missing or unreadable.
        ValueError: If the file is not valid JSON or not a saved player.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    player = Player.from_dict(data)
    logging.info("Loaded player '%s' from %s", player.name, path)
    return player
