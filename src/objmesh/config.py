"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    SAMPLE_MESH_PATH (str): Absolute path to the bundled sample OBJ file.
    DEFAULT_ENCODING (str): Text encoding used to open OBJ files.
    FACE_VERTEX_COUNT (int): Number of vertex groups consumed per face line.
    LOG_LEVEL_ENV_VAR (str): Environment variable read by the CLI for its log level.
"""
import logging
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a resource relative to the project root.
    """
    # config.py is in src/objmesh/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_log_level() -> int:
    """
    Reads the log level name from the environment.

    Raises:
        ValueError: If the variable holds something that is not a logging level name.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}' in ${LOG_LEVEL_ENV_VAR}.")
    return level


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_MESH_PATH: str = os.path.join(ASSETS_PATH, "textured_quad.obj")

DEFAULT_ENCODING: str = "utf-8"

# Polygons with more groups are truncated, not triangulated
FACE_VERTEX_COUNT: int = 3

LOG_LEVEL_ENV_VAR: str = "OBJMESH_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "WARNING"
