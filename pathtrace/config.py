"""
Configuration constants for the PathTrace project.

All tunable defaults live here. Runtime overrides are read from
environment variables (the CLI loads a `.env` file first).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathtrace/
PROJECT_ROOT = Path(__file__).parent.parent

# File suffixes accepted by the graph loader
GRAPH_FILE_SUFFIXES = (".json", ".msgpack")

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Algorithm used when the requested identifier is unknown
DEFAULT_ALGORITHM = "dijkstra"

# Preset loaded when no graph file is given (index into PRESETS)
DEFAULT_PRESET_INDEX = 0

# =============================================================================
# Display Configuration
# =============================================================================

# How an unreachable distance is rendered
INFINITY_SYMBOL = "∞"

# Arrow used in step messages ("A → B")
EDGE_ARROW = "→"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
