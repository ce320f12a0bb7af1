"""
Configuration constants for the mazegraph project.

All paths, default maze characters and search limits are defined here.
Limits can be overridden from the environment (or a .env file at the
project root) without touching code.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of mazegraph/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env", override=False)


def _env_int(name: str, default: int) -> int:
    """Read a non-negative integer from the environment."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (contains sample mazes)
DATA_DIR = PROJECT_ROOT / "data"

# Maze read by MazeGraph.load() when no source is given
DEFAULT_MAZE_PATH = DATA_DIR / "maze.txt"

# =============================================================================
# Maze Configuration
# =============================================================================

# Character classes used when the caller does not supply its own
DEFAULT_PATH_CHAR = "."
DEFAULT_END_CHAR = "E"
DEFAULT_START_CHAR = "S"

# Glyph drawn over interior route cells when rendering a solved maze
PATH_MARKER = "+"

# =============================================================================
# Search Configuration
# =============================================================================

# Strategy used by find_route() unless overridden ("dfs" or "bfs")
DEFAULT_STRATEGY = "dfs"

# Maximum number of nodes in a single route before a branch is cut.
# 0 disables the limit.
DEFAULT_MAX_DEPTH = _env_int("MAZEGRAPH_MAX_DEPTH", 10_000) or None

# Maximum number of nodes a single search may expand before giving up.
# 0 disables the limit.
DEFAULT_MAX_STEPS = _env_int("MAZEGRAPH_MAX_STEPS", 1_000_000) or None

# Maximum node count a graph may grow to. 0 disables the limit.
DEFAULT_MAX_NODES = _env_int("MAZEGRAPH_MAX_NODES", 1_000_000) or None

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "maze": DEFAULT_MAZE_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
