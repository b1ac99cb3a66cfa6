import os

import pytest

from gridlab import _runtime

ENV_VARS = ("GRIDLAB_SEED", "GRIDLAB_FILL_LOW", "GRIDLAB_FILL_HIGH", "GRIDLAB_PRECISION")


@pytest.fixture(autouse=True)
def clean_runtime(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(_runtime, "_current_seed", None)
    monkeypatch.setattr(_runtime, "_current_fill_range", (0.0, 100.0))
    monkeypatch.setattr(_runtime, "_current_precision", 2)
    yield
    # the setters write os.environ directly
    for name in ENV_VARS:
        os.environ.pop(name, None)
