"""Defines the abstract interface for the world map."""

from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any

from world.location import Location


class WorldDatabase(ABC):
    """Abstract base class for storing and looking up game Locations."""

    @classmethod
    @abstractmethod
    def from_data(cls, location_data: List[Dict[str, Any]]) -> "WorldDatabase":
        """Creates a world from a list of location data dictionaries."""
        pass

    @classmethod
    @abstractmethod
    def from_files(cls, file_paths: List[str]) -> "WorldDatabase":
        """Creates a world by loading locations from JSON files."""
        pass

    @abstractmethod
    def get_location(self, location_id: str) -> Optional[Location]:
        """Retrieves a location by its id, or None if it does not exist."""
        pass

    @abstractmethod
    def get_all_locations(self) -> List[Location]:
        """Returns a list of all locations."""
        pass

    def get_destination(self, location_id: str, direction: str) -> Optional[str]:
        """
        Follows an exit from a location.

        Returns:
            The destination location id, or None if either the starting
            location or the exit does not exist.
        """
        location = self.get_location(location_id)
        if not location:
            return None
        return location.get_exit(direction)
