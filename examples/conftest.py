"""Shared pytest configuration for ripley examples.

Each example directory holds an ``app.py`` that builds and renders a
template at import time, plus a ``test_*.py`` that checks its globals.
"""

import runpy
from pathlib import Path
from types import SimpleNamespace

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> SimpleNamespace:
    """Run the sibling app.py in a fresh namespace and expose its globals."""
    app_path = Path(request.path).parent / "app.py"
    namespace = runpy.run_path(str(app_path), run_name=f"example_{app_path.parent.name}")
    return SimpleNamespace(**namespace)
