"""
Shared pytest fixtures for DayGrid tests

Supports both development mode (python -m daygrid) and installed mode (pip install -e .)
"""
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import pytest

# Repo root on sys.path for development mode:
#   <repo>/daygrid/tests/conftest.py -> <repo>
_repo_root = Path(__file__).parent.parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

from daygrid.layout import LayoutEngine  # noqa: E402
from daygrid.tests.factories import ev  # noqa: E402


@pytest.fixture
def engine() -> LayoutEngine:
    """Fresh engine with default configuration"""
    return LayoutEngine()


@pytest.fixture
def salon_day():
    """A realistic day at the salon, with two overlapping afternoon bookings"""
    return [
        ev('1', '09:00', '09:45', {'title': 'Corte + Barba', 'staff': 'Carlos', 'status': 'confirmed'}),
        ev('2', '10:00', '10:30', {'title': 'Corte Clásico', 'staff': 'Carlos', 'status': 'pending'}),
        ev('3', '11:30', '12:30', {'title': 'Tratamiento Capilar', 'staff': 'Sofía', 'status': 'confirmed'}),
        ev('4', '13:00', '13:30', {'title': 'Barba Completa', 'staff': 'Carlos', 'status': 'in_progress'}),
        ev('5', '14:30', '15:15', {'title': 'Corte Fade', 'staff': 'Miguel', 'status': 'pending'}),
        ev('6', '15:00', '15:45', {'title': 'Corte + Cejas', 'staff': 'Sofía', 'status': 'confirmed'}),
        ev('7', '16:00', '17:30', {'title': 'Coloración', 'staff': 'Carlos', 'status': 'confirmed'}),
    ]


@pytest.fixture
def events_csv(tmp_path) -> Path:
    """Appointment table spanning two days"""
    path = tmp_path / "bookings.csv"
    path.write_text(
        "id,start,end,title,client,staff,status,color\n"
        "1,2024-03-04 09:00,2024-03-04 10:30,Corte + Barba,María García,Carlos,confirmed,#6366f1\n"
        "2,2024-03-04 09:30,2024-03-04 10:00,Corte Clásico,Juan Pérez,Sofía,pending,\n"
        "3,2024-03-04 10:15,2024-03-04 11:00,Coloración,Ana López,Carlos,confirmed,\n"
        "8,2024-03-05 09:00,2024-03-05 09:20,Corte Express,Diego Torres,Miguel,confirmed,\n",
        encoding="utf-8",
    )
    return path


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the CLI end to end"
    )
    config.addinivalue_line(
        "markers", "properties: Randomized invariant checks over generated days"
    )
