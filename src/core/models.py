"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
The API layer (higher) and the db layer (lower) both send/receive these, so neither depends on the other's data model.
"""

from dataclasses import dataclass


@dataclass
class PositionModel:
    """Transport-safe representation of a stored position: only the notation string and which variant it belongs to."""

    name: str
    variant: str
    notation: str
