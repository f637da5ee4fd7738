"""
This module runs the scripted melee encounter the game opens with.

The enemy's damage is recorded but never applied: the player has no health
to lose, and the health shown each turn is a fixed value.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import config


@dataclass
class Enemy:
    """An opponent for a single encounter."""
    name: str
    health: int
    damage: int


class EncounterOutcome(Enum):
    VICTORY = "victory"
    FLED = "fled"


def resolve_encounter(
    enemy: Enemy,
    read_command: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
    attack_damage: int = config.PLAYER_ATTACK_DAMAGE,
) -> EncounterOutcome:
    """
    Runs attack/run turns until the enemy is defeated or the player flees.

    Args:
        enemy: The opponent. Its health is reduced in place.
        read_command: Prompts for and returns one line of player input.
            Defaults to input().
        write: Outputs one line of text. Defaults to print().
        attack_damage: Health removed from the enemy by each attack.

    Returns:
        VICTORY once the enemy's health reaches zero or below, FLED if the
        player runs. Running out of input counts as running.
    """
    read_command = read_command or input
    write = write or print

    write(f"You encounter a {enemy.name}!")

    while True:
        write(f"Enemy health: {enemy.health}")
        write(f"Player health: {config.DISPLAYED_PLAYER_HEALTH}")
        write("Do you want to attack or run?")

        try:
            command = read_command("> ").strip().lower()
        except EOFError:
            command = "run"

        if command == "attack":
            write(f"You attack the {enemy.name}!")
            enemy.health -= attack_damage
            if enemy.health <= 0:
                write(f"You defeated the {enemy.name}!")
                logging.info("Encounter with %s ended in victory.", enemy.name)
                return EncounterOutcome.VICTORY
            write(f"The {enemy.name} attacks you!")
        elif command == "run":
            write(f"You run away from the {enemy.name}.")
            logging.info("Player fled from %s at %d health.", enemy.name, enemy.health)
            return EncounterOutcome.FLED
        else:
            # Invalid input repeats the turn without a counter-attack
            write("I don't understand that command.")
