from pathlib import Path

import pytest

EXAMPLES = Path(__file__).resolve().parent.parent / "puzzles" / "examples.yaml"


@pytest.fixture
def examples_path() -> Path:
    return EXAMPLES
