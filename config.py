# config.py

import logging
import os
from dataclasses import dataclass

from vertex import VERTEX_RADIUS

LOG_LEVEL_ENV = "GRAPH_DRAWER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class CanvasConfig:
    # Geometry
    vertex_radius: float = VERTEX_RADIUS
    window_width: int = 900
    window_height: int = 700

    # Labels
    font_family: str = "Arial"
    font_size: int = 12

    # Colors
    background: str = "#ffffff"
    vertex_fill: str = "#ffffff"
    marked_fill: str = "#ff0000"
    outline: str = "#000000"
    label_color: str = "#808080"


def setup_logging(level=None):
    """Configure root logging once; level falls back to $GRAPH_DRAWER_LOG_LEVEL, then WARNING."""
    name = level or os.environ.get(LOG_LEVEL_ENV, "WARNING")
    numeric = logging.getLevelName(str(name).upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(numeric)
    return numeric
