"""
This module defines the Location and Quest records that make up the world
map. Both are built once when the world is loaded and never change after.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Quest:
    """
    A textual objective attached to a location.

    Attributes:
        unique_id: Stable identifier used to record completion on the player.
        description: Text shown to the player (e.g., "Find a stick.").
        concept: A free-form tag describing what the quest teaches.
    """
    unique_id: str
    description: str
    concept: str = ""


@dataclass(frozen=True)
class Location:
    """
    A named place in the world with quests and directional exits.

    Attributes:
        unique_id: The key this location is stored under in the world map.
        name: Display name. Not required to match unique_id.
        description: Text shown when the player is here.
        quests: Quests offered at this location, in display order.
        exits: Mapping from a direction (e.g., "north") to a location id.
    """
    unique_id: str
    name: str
    description: str
    quests: List[Quest] = field(default_factory=list)
    exits: Dict[str, str] = field(default_factory=dict)

    def get_exit(self, direction: str) -> Optional[str]:
        """Returns the destination id for a direction, or None if there is no exit."""
        return self.exits.get(direction)
