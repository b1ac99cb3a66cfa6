"""Display helpers for grids and search results.

Contents
--------
- `dimensions_label`: rank and extents of a shape, e.g. ``"2D (4x4)"``.
- `format_grid`: fixed-width text rendering of a 2D or 3D grid.
"""

import numpy as np

from ._runtime import get_print_precision


def dimensions_label(shape):
    dims = tuple(int(d) for d in shape)
    return f"{len(dims)}D ({'x'.join(str(d) for d in dims)})"


def _format_rows(matrix, width, precision):
    return [
        " ".join(f"{float(v):{width}.{precision}f}" for v in row) for row in matrix
    ]


def format_grid(grid, width=8, precision=None):
    """Render a grid as text.

    Parameters
    ----------
    grid : Grid or array_like
        Object exposing ``toarray()``, or anything ``numpy.asarray`` accepts.
        Must be 2D or 3D.
    width : int, optional
        Field width of each value.
    precision : int, optional
        Digits after the decimal point; defaults to
        :func:`gridlab.get_print_precision`.

    Returns
    -------
    str
        One line per row. A 3D grid is printed layer by layer, where layer
        ``k`` is the slice ``[:, :, k]`` headed by ``"Layer k:"``.
    """
    if precision is None:
        precision = get_print_precision()
    data = grid.toarray() if hasattr(grid, "toarray") else np.asarray(grid, dtype=np.float64)
    if data.ndim == 2:
        return "\n".join(_format_rows(data, width, precision))
    if data.ndim == 3:
        blocks = []
        for k in range(data.shape[2]):
            lines = [f"Layer {k}:"]
            lines.extend(_format_rows(data[:, :, k], width, precision))
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)
    raise ValueError("format_grid requires a 2D or 3D grid")
