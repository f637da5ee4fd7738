"""In-memory implementation of the WorldDatabase interface."""

import os
import json
import logging
from typing import List, Optional, Dict, Any

# Import the interface and data structures
from world.world_db import WorldDatabase
from world.location import Location, Quest


class InMemoryWorldDB(WorldDatabase):
    """Stores the world map entirely in memory."""

    def __init__(self):
        """Initializes an empty world."""
        self._locations: Dict[str, Location] = {}
        logging.debug("Initialized empty InMemoryWorldDB.")

    @classmethod
    def from_files(cls, file_paths: List[str]) -> "InMemoryWorldDB":
        """
        Creates a world by loading locations from JSON files.

        Each file must contain a JSON list of location objects. All files are
        merged into a single world.

        Raises:
            FileNotFoundError: If a listed file does not exist.
            ValueError: If a file is not valid JSON or holds invalid locations.
        """
        location_data: List[Dict[str, Any]] = []
        for file_path in file_paths:
            if not os.path.isfile(file_path):
                raise FileNotFoundError(f"World data file not found: {file_path}")

            logging.info("Processing world data file: %s", file_path)
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"File {file_path} is not valid JSON: {e}") from e

            if not isinstance(data, list):
                raise ValueError(f"File {file_path} must contain a JSON list of locations.")
            location_data.extend(data)

        return cls.from_data(location_data)

    @classmethod
    def from_data(cls, location_data: List[Dict[str, Any]]) -> "InMemoryWorldDB":
        """Creates a world from a list of location data dictionaries."""
        db_instance = cls()
        logging.info(
            "Initializing InMemoryWorldDB from data list (%d items)", len(location_data)
        )

        for i, data in enumerate(location_data):
            try:
                location = db_instance._parse_location_data(data)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Failed to process location data at index {i}: {e}") from e
            if location.unique_id in db_instance._locations:
                raise ValueError(
                    f"Duplicate location id found at index {i}: {location.unique_id}"
                )
            db_instance._locations[location.unique_id] = location

        db_instance._warn_dangling_exits()
        logging.info("Finished world initialization. Loaded %d locations.", len(db_instance._locations))
        return db_instance

    # --- Helper Methods ---

    def _parse_location_data(self, data: Dict[str, Any]) -> Location:
        """Parses a dictionary and creates a Location with its quests."""
        if not isinstance(data, dict):
            raise TypeError("Location entry must be a dictionary.")

        unique_id = data.get("unique_id", "")
        name = data.get("name", "")
        description = data.get("description", "")
        if not isinstance(unique_id, str) or not isinstance(name, str):
            raise TypeError("'unique_id' and 'name' must be strings.")
        if not unique_id or not name:
            raise ValueError("'unique_id' and 'name' are required.")
        if not isinstance(description, str):
            raise TypeError(f"Location '{unique_id}': 'description' must be a string.")

        exits = data.get("exits", {})
        if not isinstance(exits, dict):
            raise TypeError(f"Location '{unique_id}': 'exits' field must be a dictionary.")
        for direction, target in exits.items():
            if not isinstance(direction, str) or not isinstance(target, str) or not target:
                raise TypeError(
                    f"Location '{unique_id}': exit '{direction}' must map to a location id string."
                )

        quest_list = data.get("quests", [])
        if not isinstance(quest_list, list):
            raise TypeError(f"Location '{unique_id}': 'quests' field must be a list.")

        quests = []
        for quest_data in quest_list:
            if not isinstance(quest_data, dict):
                raise TypeError(f"Location '{unique_id}': each quest must be a dictionary.")
            quest_id = quest_data.get("unique_id", "")
            quest_description = quest_data.get("description", "")
            concept = quest_data.get("concept", "")
            if not all(isinstance(v, str) for v in (quest_id, quest_description, concept)):
                raise TypeError(f"Location '{unique_id}': quest fields must be strings.")
            if not quest_id or not quest_description:
                raise ValueError(
                    f"Location '{unique_id}': quests need 'unique_id' and 'description'."
                )
            quests.append(
                Quest(
                    unique_id=quest_id,
                    description=quest_description,
                    concept=concept,
                )
            )

        return Location(
            unique_id=unique_id,
            name=name,
            description=description,
            quests=quests,
            exits=dict(exits),
        )

    def _warn_dangling_exits(self):
        """Logs exits that point at locations missing from this world."""
        for location in self._locations.values():
            for direction, target in location.exits.items():
                if target not in self._locations:
                    logging.warning(
                        "Location '%s' exit '%s' leads to unknown location '%s'.",
                        location.unique_id,
                        direction,
                        target,
                    )

    # --- Database Query Methods ---

    def get_location(self, location_id: str) -> Optional[Location]:
        """Retrieves a location by its id."""
        return self._locations.get(location_id)

    def get_all_locations(self) -> List[Location]:
        """Returns a list of all locations in the world."""
        return list(self._locations.values())
