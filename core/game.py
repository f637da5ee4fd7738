import logging
import os
from typing import List, Optional

# Import configuration
import config

from core.combat import Enemy, resolve_encounter
from core.save_manager import save_player, load_player
from players.player import Player
from world.location import Location
from world.in_memory_world_db import InMemoryWorldDB
from world.world_db import WorldDatabase


def load_default_world() -> InMemoryWorldDB:
    """Loads the world from config.WORLD_DATA_FILES, resolved against the project root."""
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    world_files = [
        os.path.join(base_dir, rel_path) for rel_path in config.WORLD_DATA_FILES
    ]
    logging.info("Attempting to load world from: %s", world_files)
    return InMemoryWorldDB.from_files(world_files)


class Game:
    """
    The exploration loop: renders the player's location, reads a command,
    and applies it to the player until they quit.
    """

    def __init__(
        self,
        world_db: WorldDatabase,
        player: Optional[Player] = None,
        save_path: Optional[str] = None,
    ):
        self.world_db = world_db
        self.player = player or Player(config.DEFAULT_PLAYER_NAME, config.START_LOCATION_ID)
        self.save_path = save_path or config.SAVE_FILE
        self.running = True

        if not self.world_db.get_location(self.player.current_location):
            logging.warning(
                "Player starts in unknown location '%s'.", self.player.current_location
            )

    # --- Rendering ---

    def describe_location(self) -> str:
        """Renders the current location, its open quests and its exits."""
        location: Optional[Location] = self.world_db.get_location(self.player.current_location)
        if not location:
            return f"You are nowhere. There is no place called '{self.player.current_location}'."

        lines = [f"Location: {location.name}", location.description]
        for quest in location.quests:
            if not self.player.has_completed(quest.unique_id):
                lines.append(f"Quest: {quest.description}")
        if location.exits:
            lines.append("Exits: " + " ".join(location.exits))
        return "\n".join(lines)

    def describe_inventory(self) -> str:
        if not self.player.inventory:
            return "Your inventory is empty."
        return "Inventory: " + " ".join(self.player.inventory)

    # --- Commands ---

    def process_command(self, raw_command: str) -> str:
        """
        Applies one line of player input and returns the text to show.

        Returns an empty string when the command has nothing to report
        (a successful move).
        """
        command = raw_command.strip().lower()
        words: List[str] = command.split()

        if command == "quit":
            self.running = False
            return "Thank you for playing!"
        if command == "save":
            return self._save()
        if command == "load":
            return self._load()
        if command == "inventory":
            return self.describe_inventory()
        if words and words[0] == "go":
            direction = words[1] if len(words) > 1 else ""
            return self._go(direction)
        return "I don't understand that command."

    def _go(self, direction: str) -> str:
        destination = self.world_db.get_destination(self.player.current_location, direction)
        if destination is None:
            logging.debug(
                "No exit '%s' from '%s'.", direction, self.player.current_location
            )
            return "You can't go that way!"
        self.player.current_location = destination
        logging.info("Player moved %s to '%s'.", direction, destination)
        return ""

    def _save(self) -> str:
        try:
            save_player(self.player, self.save_path)
        except OSError as e:
            logging.error("Failed to save game to %s: %s", self.save_path, e)
            return f"Failed to save game: {e}"
        return "Game saved."

    def _load(self) -> str:
        try:
            loaded_player = load_player(self.save_path)
        except (OSError, ValueError) as e:
            logging.error("Failed to load game from %s: %s", self.save_path, e)
            return f"Failed to load game: {e}"
        self.player = loaded_player
        if not self.world_db.get_location(self.player.current_location):
            logging.warning(
                "Loaded save places player in unknown location '%s'.",
                self.player.current_location,
            )
        return "Game loaded."

    # --- Main Loop ---

    def run(self):
        """Runs the opening encounter, then the exploration loop until quit or end of input."""
        enemy = Enemy(config.ENEMY_NAME, config.ENEMY_HEALTH, config.ENEMY_DAMAGE)
        resolve_encounter(enemy)

        while self.running:
            print(self.describe_location())
            try:
                player_input = input("> ")
            except EOFError:
                # End of input quits
                print()
                player_input = "quit"

            response = self.process_command(player_input)
            if response:
                print(response)
