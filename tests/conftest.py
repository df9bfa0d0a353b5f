import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazecraft import create_app  # noqa: E402
from mazecraft.routes.maze_api import _maze_cache, _maze_cache_lock  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True, "MAZE_DEFAULT_WIDTH": 10, "MAZE_DEFAULT_HEIGHT": 10})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _clear_maze_cache():
    """Keep cached mazes from leaking between tests."""
    with _maze_cache_lock:
        _maze_cache.clear()
    yield
    with _maze_cache_lock:
        _maze_cache.clear()

