"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Headless Pygame for the rendering smoke tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from utils import DEFAULT_CONFIG, merge_config  # noqa: E402


@pytest.fixture
def carrom_params():
    """Carrom parameters with a fixed seed and a handful of bodies."""
    return merge_config({"carrom": {"seed": 7, "body_count": 6}})["carrom"]


@pytest.fixture
def life_params():
    """Default Game of Life parameters (20px cells, 4 generations/s)."""
    return dict(DEFAULT_CONFIG["life"])


@pytest.fixture(scope="session")
def project_root_path():
    """Provide the project root path."""
    return project_root
