"""
This module provides a harness for driving a live game-state service in
integration runs and scenes.
"""
import threading
import time
import requests
import psutil
import config
from web_app import app

def _run_app():
    """Runs the Flask app in a background thread."""
    # Note: debug=False and no reloader so the server stays in this process
    app.run(host=config.SERVER_HOST, port=config.SERVER_PORT, debug=False, use_reloader=False)

def _shutdown_server():
    """Finds and terminates any other process listening on the service port."""
    for proc in psutil.process_iter(['pid', 'name']):
        try:
            p = psutil.Process(proc.info['pid'])
            if p.pid == psutil.Process().pid:
                continue
            for conn in p.net_connections(kind='inet'):
                if conn.laddr.port == config.SERVER_PORT:
                    print(f"Found server process {proc.pid} ({proc.info['name']}). Terminating.")
                    p.terminate()
                    p.wait(timeout=5)
                    return
        except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
            pass

class ServerHarness:
    """
    Starts the service and talks to it over HTTP.
    """
    def __init__(self):
        self.server_thread = None
        self.server_url = f"http://{config.SERVER_HOST}:{config.SERVER_PORT}/"

    def setup(self, timeout: float = 5.0):
        """Starts the server and waits until it answers."""
        _shutdown_server()
        self.server_thread = threading.Thread(target=_run_app)
        self.server_thread.daemon = True
        self.server_thread.start()
        print("Starting server...")

        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            try:
                requests.get(f"{self.server_url}game", timeout=1)
                print(f"Server up at {self.server_url}")
                return
            except requests.ConnectionError:
                time.sleep(0.1)
        raise RuntimeError(f"Server did not start within {timeout} seconds.")

    def teardown(self):
        """The server thread is a daemon and stops with this process."""
        print("\nHarness finished.")

    def get_state(self) -> dict:
        """Returns the service's current game state."""
        response = requests.get(f"{self.server_url}game", timeout=5)
        response.raise_for_status()
        state = response.json()
        print(f"Current state: {state}")
        return state

    def set_state(self, player_name: str, current_location: str) -> dict:
        """Replaces the service's game state and returns the echoed document."""
        response = requests.post(
            f"{self.server_url}game",
            json={"player_name": player_name, "current_location": current_location},
            timeout=5,
        )
        if response.status_code != 200:
            print(f"Failed to set state. Status: {response.status_code}, Response: {response.text}")
        response.raise_for_status()
        return response.json()
