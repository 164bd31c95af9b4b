"""Shared fixtures."""

import pytest

from rowtrack.routes.route import Route, Stop


@pytest.fixture
def stops():
    """Four stops at 0, 10, 25 and 50 km."""
    return [
        Stop("Start", 59.0, 18.0, 0.0, info="Harbour"),
        Stop("Island", 59.5, 19.0, 10.0),
        Stop("Strait", 60.0, 20.5, 25.0),
        Stop("Finish", 61.0, 22.0, 50.0),
    ]


@pytest.fixture
def route(stops):
    return Route(name="Test Route", stops=stops)
