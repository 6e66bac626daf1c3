"""
Type definitions for DayGrid

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Union, Tuple
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

EventStatus = Literal['confirmed', 'pending', 'in_progress', 'completed', 'cancelled']
"""Booking status of an appointment"""

OutputFormat = Literal['tsv', 'json']
"""Layout table output format"""

Rect = Tuple[float, float, float, float]
"""Rectangle as (x, y, width, height)"""


class EventRecord(TypedDict, total=False):
    """
    Appointment payload carried through the layout engine

    All fields optional; the engine never reads them.
    """
    title: str
    client: str
    service: str
    staff: str
    status: EventStatus
    color: str
