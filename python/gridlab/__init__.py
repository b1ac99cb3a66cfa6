from ._runtime import (
    get_fill_range,
    get_print_precision,
    get_seed,
    set_fill_range,
    set_print_precision,
    set_seed,
)
from .errors import EmptyGrid, GridError, InvalidShape, OutOfBounds, RankMismatch, ShapeMismatch
from .formatting import dimensions_label, format_grid
from .grid import Grid, Grid2D, Grid3D
from .result import MinResult
from .searching import find_minimum

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "set_seed",
    "get_seed",
    "set_fill_range",
    "get_fill_range",
    "set_print_precision",
    "get_print_precision",
    "Grid",
    "Grid2D",
    "Grid3D",
    "MinResult",
    "find_minimum",
    "dimensions_label",
    "format_grid",
    "GridError",
    "InvalidShape",
    "OutOfBounds",
    "RankMismatch",
    "ShapeMismatch",
    "EmptyGrid",
]
