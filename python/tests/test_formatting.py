import numpy as np
import pytest

import gridlab
from gridlab import Grid, dimensions_label, format_grid


def test_dimensions_label():
    assert dimensions_label((4, 4)) == "2D (4x4)"
    assert dimensions_label((3, 3, 3)) == "3D (3x3x3)"
    assert dimensions_label(np.array([2, 5])) == "2D (2x5)"


def test_format_grid_2d():
    g = Grid((2, 2))
    g.fill_from_sequence([5, 3.125, 8, 10.5])
    assert format_grid(g) == "    5.00     3.12\n    8.00    10.50"


def test_format_grid_3d_layers_along_last_axis():
    g = Grid((2, 2, 2))
    g.fill_from_sequence([0, 1, 2, 3, 4, 5, 6, 7])
    expected = (
        "Layer 0:\n"
        "0.0 2.0\n"
        "4.0 6.0\n"
        "\n"
        "Layer 1:\n"
        "1.0 3.0\n"
        "5.0 7.0"
    )
    assert format_grid(g, width=3, precision=1) == expected


def test_format_grid_uses_runtime_precision():
    gridlab.set_print_precision(0)
    assert format_grid(np.array([[1.4, 2.6]]), width=2) == " 1  3"


def test_format_grid_rejects_other_ranks():
    with pytest.raises(ValueError):
        format_grid(np.zeros(3))
