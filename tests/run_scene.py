"""
This script runs a sample scene against a live service using the ServerHarness.
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tests.server_harness import ServerHarness

def run_scene():
    """
    Moves a player around by replacing the shared state.
    """
    harness = ServerHarness()
    try:
        harness.setup()
        harness.get_state()
        harness.set_state("Bob", "Forest")
        assert harness.get_state() == {"player_name": "Bob", "current_location": "Forest"}
        harness.set_state("Bob", "Home")
        harness.get_state()
    finally:
        harness.teardown()

if __name__ == "__main__":
    run_scene()
