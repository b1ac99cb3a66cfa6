"""Error kinds raised by :mod:`gridlab`.

All errors derive from :class:`GridError` and also from the closest builtin
exception, so callers may catch either ``GridError`` or e.g. ``IndexError``.
"""


class GridError(Exception):
    """Base class for all grid errors."""


class InvalidShape(GridError, ValueError):
    """Shape has a non-positive dimension or an unsupported rank."""


class OutOfBounds(GridError, IndexError):
    """Index lies outside ``[0, shape[d])`` on some axis."""

    def __init__(self, index, shape):
        self.index = tuple(index)
        self.shape = tuple(shape)
        super().__init__(f"index {self.index} is out of bounds for shape {self.shape}")


class RankMismatch(GridError, IndexError):
    """Index rank differs from the grid rank."""

    def __init__(self, index, ndim):
        self.index = tuple(index)
        self.ndim = int(ndim)
        super().__init__(
            f"index {self.index} has rank {len(self.index)}, grid has rank {self.ndim}"
        )


class ShapeMismatch(GridError, ValueError):
    """Bulk fill received the wrong number of values."""


class EmptyGrid(GridError, ValueError):
    """Search over a grid with no cells."""


__all__ = [
    "GridError",
    "InvalidShape",
    "OutOfBounds",
    "RankMismatch",
    "ShapeMismatch",
    "EmptyGrid",
]
