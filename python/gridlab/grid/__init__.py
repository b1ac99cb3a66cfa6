from .base import GridBase
from .dense import Grid, Grid2D, Grid3D

__all__ = [
    "GridBase",
    "Grid",
    "Grid2D",
    "Grid3D",
]
