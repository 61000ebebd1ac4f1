# tests/conftest.py
import textwrap
from pathlib import Path

import pytest

from zcalc_core import ImpedanceModel, parse


# A reference network used across modules:
#   R:100 in series with (C:1e-6 || L:0.01), in series with R:50
NESTED_EXPRESSION = "series(R:100, parallel(C:1e-6, L:0.01), R:50)"


@pytest.fixture
def model():
    return ImpedanceModel()


@pytest.fixture
def nested_tree():
    return parse(NESTED_EXPRESSION)


@pytest.fixture
def write_yaml(tmp_path):
    """Writes dedented YAML text to a file under tmp_path and returns its path."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text))
        return path
    return _write
