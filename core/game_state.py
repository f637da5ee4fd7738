"""
This module defines the GameState document served by the web app and the
GameStateStore, the single owned cell that holds the current value.
"""
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional

import config


@dataclass(frozen=True)
class GameState:
    """The flat player-name/location document exposed over HTTP."""
    player_name: str
    current_location: str

    def to_dict(self) -> Dict[str, str]:
        return {"player_name": self.player_name, "current_location": self.current_location}

    @classmethod
    def from_dict(cls, data: Any) -> "GameState":
        """
        Builds a GameState from a decoded JSON body. Unknown keys are ignored.

        Raises:
            ValueError: If the body is not an object with both fields as strings.
        """
        if not isinstance(data, dict):
            raise ValueError("Game state must be a JSON object.")
        for key in ("player_name", "current_location"):
            if key not in data:
                raise ValueError(f"Missing field '{key}'.")
            if not isinstance(data[key], str):
                raise ValueError(f"Field '{key}' must be a string.")
        return cls(player_name=data["player_name"], current_location=data["current_location"])


class GameStateStore:
    """
    Holds the current GameState. All access goes through get_snapshot and
    replace, which take the same lock, so a reader never sees a half-written
    value. Concurrent replaces are not ordered: the last writer wins.
    """
    def __init__(self, initial_state: Optional[GameState] = None):
        self._lock = threading.Lock()
        self._state = initial_state or GameState(
            player_name=config.DEFAULT_PLAYER_NAME,
            current_location=config.START_LOCATION_ID,
        )

    def get_snapshot(self) -> GameState:
        """Returns the current state. GameState is frozen, so callers cannot modify it."""
        with self._lock:
            return self._state

    def replace(self, new_state: GameState) -> GameState:
        """Swaps in a whole new state and returns it."""
        with self._lock:
            self._state = new_state
            return self._state
