import os

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    pytest.importorskip("PySide6")
    from ghanfoot.application import create_app
    return create_app([])
