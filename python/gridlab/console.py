"""Keyboard entry of grid values.

Input and output go through injectable callables (``input_fn``/``output_fn``)
so the prompts can be driven from tests. They default to the builtins
``input`` and ``print``, looked up at call time.
"""

import builtins

import numpy as np

INVALID_INPUT_MESSAGE = "Invalid input. Please enter a real number."


def read_float(prompt, input_fn=None, output_fn=None):
    """Prompt until the answer parses as a float and return it."""
    input_fn = input_fn or builtins.input
    output_fn = output_fn or builtins.print
    while True:
        text = input_fn(prompt)
        try:
            return float(text.strip())
        except ValueError:
            output_fn(INVALID_INPUT_MESSAGE)


def fill_from_keyboard(grid, input_fn=None, output_fn=None):
    """Prompt for every cell of ``grid`` and store the answers.

    A 2D grid is read row by row with prompts ``"[i, j]: "``. A 3D grid is
    read layer by layer, layer ``k`` being the slice ``[:, :, k]``. The grid
    is written only after every value has been read.
    """
    output_fn = output_fn or builtins.print
    shape = grid.shape
    values = np.empty(shape, dtype=np.float64)
    output_fn(f"Enter the elements of the {'x'.join(str(d) for d in shape)} matrix:")
    if grid.ndim == 2:
        rows, cols = shape
        for i in range(rows):
            for j in range(cols):
                values[i, j] = read_float(f"[{i}, {j}]: ", input_fn, output_fn)
    else:
        rows, cols, depth = shape
        for k in range(depth):
            output_fn(f"--- Layer [*, *, {k}] ---")
            for i in range(rows):
                for j in range(cols):
                    values[i, j, k] = read_float(f"[{i}, {j}, {k}]: ", input_fn, output_fn)
    grid.fill_from_sequence(values.ravel())
