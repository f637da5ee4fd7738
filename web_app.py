"""
This is the main file for the game-state service.
It serves the status page and the routes that read and replace the shared
GameState. It does not share any state with a running game.
"""

import os
from flask import Flask, request, jsonify, send_from_directory
import logging

import config

# --- Logging Configuration ---
logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)

from core.game_state import GameState, GameStateStore

app = Flask(__name__)

# --- State Initialization ---
state_store = GameStateStore()
logging.info("Game state initialized: %s", state_store.get_snapshot().to_dict())

# --- Routes ---

@app.route("/")
def index():
    """Serves the static status page."""
    return send_from_directory(app.static_folder, config.STATIC_INDEX_FILE)

@app.route("/game", methods=["GET"])
def get_game_state():
    """Returns the current game state."""
    return jsonify(state_store.get_snapshot().to_dict())

@app.route("/game", methods=["POST"])
def update_game_state():
    """Replaces the whole game state with the posted document and echoes it back."""
    data = request.get_json(silent=True)
    try:
        new_state = GameState.from_dict(data)
    except ValueError as e:
        logging.warning(f"Rejected game state update: {e}")
        return jsonify({"error": str(e)}), 400

    current = state_store.replace(new_state)
    logging.info(f"Game state replaced: {current.to_dict()}")
    return jsonify(current.to_dict())

# Add error handler for 404
@app.errorhandler(404)
def page_not_found(e):
    return jsonify({"error": "Not found"}), 404


# Add error handler for 500
@app.errorhandler(500)
def internal_server_error(e):
    logging.exception("Internal Server Error")
    return jsonify({"error": "Internal server error"}), 500


# --- Run the App ---
if __name__ == "__main__":
    if not os.path.exists(os.path.join(app.static_folder, config.STATIC_INDEX_FILE)):
        logging.warning("Status page missing from %s", app.static_folder)
    app.run(host=config.SERVER_HOST, port=config.SERVER_PORT, threaded=True)
