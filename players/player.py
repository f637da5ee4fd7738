"""Defines the Player record, the mutable state of the person playing."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set


@dataclass
class Player:
    """
    The player's name, whereabouts and belongings.

    Attributes:
        name: The player's display name.
        current_location: Id of the location the player is in. Not checked
            against the world map; lookups must handle an unknown id.
        inventory: Item names in the order they were picked up.
        completed_quests: Ids of quests the player has finished.
    """
    name: str
    current_location: str
    inventory: List[str] = field(default_factory=list)
    completed_quests: Set[str] = field(default_factory=set)

    def has_completed(self, quest_id: str) -> bool:
        return quest_id in self.completed_quests

    def to_dict(self) -> Dict[str, Any]:
        """Returns a JSON-ready dictionary. Completed quests are sorted for a stable document."""
        return {
            "name": self.name,
            "current_location": self.current_location,
            "inventory": list(self.inventory),
            "completed_quests": sorted(self.completed_quests),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """
        Builds a Player from a dictionary produced by to_dict.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError("Player data must be a JSON object.")

        for key in ("name", "current_location"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"Player field '{key}' must be a string.")
        for key in ("inventory", "completed_quests"):
            value = data.get(key)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"Player field '{key}' must be a list of strings.")

        return cls(
            name=data["name"],
            current_location=data["current_location"],
            inventory=list(data["inventory"]),
            completed_quests=set(data["completed_quests"]),
        )
