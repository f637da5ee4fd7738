"""Configuration settings for the adventure game and the game-state service."""

import logging
import os

# --- Save File ---
# Relative to the working directory the game is started from
SAVE_FILE = os.environ.get("ADVENTURE_SAVE_FILE", "save_game.json")

# --- World Settings (for world/in_memory_world_db.py) ---
# List of relative paths from project root to JSON files containing locations
WORLD_DATA_FILES = ["data/world.json"]

START_LOCATION_ID = "Home"
DEFAULT_PLAYER_NAME = "Adventurer"

# --- Encounter Settings (for core/combat.py) ---
ENEMY_NAME = "Goblin"
ENEMY_HEALTH = 30
ENEMY_DAMAGE = 10  # Stored on the enemy but never applied to the player
PLAYER_ATTACK_DAMAGE = 10
DISPLAYED_PLAYER_HEALTH = 100

# --- State Service Settings (for web_app.py) ---
SERVER_HOST = "127.0.0.1"
SERVER_PORT = 8080
try:
    SERVER_PORT = int(os.environ.get("ADVENTURE_PORT", SERVER_PORT))
except ValueError as e:
    print(f"Warning: Invalid ADVENTURE_PORT, using {SERVER_PORT}: {e}")

STATIC_INDEX_FILE = "index.html"

# --- Logging ---
LOG_LEVEL = os.environ.get("ADVENTURE_LOG_LEVEL", "WARNING").upper()
# getLevelName maps a known level name to its number
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    print(f"Warning: Invalid ADVENTURE_LOG_LEVEL '{LOG_LEVEL}', using WARNING")
    LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
