import os

_current_seed = None
_current_fill_range = (0.0, 100.0)
_current_precision = 2


def set_seed(n) -> None:
    global _current_seed
    _current_seed = None if n is None else int(n)
    if _current_seed is None:
        os.environ.pop("GRIDLAB_SEED", None)
    else:
        os.environ["GRIDLAB_SEED"] = str(_current_seed)


def get_seed():
    # If user set env externally, honor it
    env = os.environ.get("GRIDLAB_SEED")
    if env:
        try:
            return int(env)
        except ValueError:
            return _current_seed
    return _current_seed


def set_fill_range(low: float, high: float) -> None:
    global _current_fill_range
    low, high = float(low), float(high)
    if not low < high:
        raise ValueError("fill range requires low < high")
    _current_fill_range = (low, high)
    os.environ["GRIDLAB_FILL_LOW"] = repr(low)
    os.environ["GRIDLAB_FILL_HIGH"] = repr(high)


def get_fill_range():
    low_env = os.environ.get("GRIDLAB_FILL_LOW")
    high_env = os.environ.get("GRIDLAB_FILL_HIGH")
    if low_env and high_env:
        try:
            low, high = float(low_env), float(high_env)
        except ValueError:
            return _current_fill_range
        if low < high:
            return (low, high)
    return _current_fill_range


def set_print_precision(n: int) -> None:
    global _current_precision
    if n is not None and n >= 0:
        _current_precision = int(n)
        os.environ["GRIDLAB_PRECISION"] = str(_current_precision)


def get_print_precision() -> int:
    env = os.environ.get("GRIDLAB_PRECISION")
    if env:
        try:
            return max(0, int(env))
        except ValueError:
            return _current_precision
    return _current_precision
