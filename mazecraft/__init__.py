"""
project: MazeCraft
module: __init__.py
License: MIT

Flask application factory and configuration.

This module wires the Flask app together with the maze HTTP blueprint.
Configuration is sourced from environment variables with reasonable defaults
for development. A local `instance/` directory holds runtime data such as the
rotating log file.
"""

import os

from dotenv import load_dotenv
from flask import Flask

# Load .env if present so `SECRET_KEY`, `MAZE_DEFAULT_WIDTH`, etc. can be
# supplied without exporting shell variables during development.
load_dotenv()

# Create the Flask app with instance-relative config so ./instance holds runtime files
app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only installs still serve mazes; only file logging is lost
    pass


def _load_config(flask_app: Flask) -> None:
    flask_app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        MAZE_DEFAULT_WIDTH=int(os.getenv("MAZE_DEFAULT_WIDTH", "10")),
        MAZE_DEFAULT_HEIGHT=int(os.getenv("MAZE_DEFAULT_HEIGHT", "10")),
        MAZE_CACHE_MAX=int(os.getenv("MAZE_CACHE_MAX", "8")),
        MAZE_CORRECTED_WALL_CONFIG=os.getenv("MAZE_CORRECTED_WALL_CONFIG", "0") == "1",
    )


_load_config(app)

# Register HTTP blueprints after the app is configured
from mazecraft.routes.maze_api import bp_maze  # noqa: E402

app.register_blueprint(bp_maze)


def create_app():
    """Return the Flask app instance with configuration re-read from the environment.

    Tests set environment variables after import; re-reading here keeps the
    returned app in step with them.
    """
    _load_config(app)
    return app


__all__ = ["app", "create_app"]
