"""Shalom courier API gateway.

- ShalomAPI: real client for the public Shalom web endpoints
- MockShalomAPI: sample-data implementation for demo/development
- APIFactory: picks one based on USE_MOCK_APIS
"""

from .client import ShalomAPI
from .factory import APIFactory, ShalomSource
from .mock import MockShalomAPI

__all__ = [
    "ShalomAPI",
    "MockShalomAPI",
    "APIFactory",
    "ShalomSource",
]
