"""
Layout Module for DayGrid
Overlap-aware layout engine for day-view calendar columns

Public API:
    - LayoutEngine: Main layout calculation engine
    - layout: Functional wrapper over a shared engine
    - Event: Input time interval with payload
    - LayoutEvent: Positioned block
    - ClusterLayout: Overlap cluster summary
    - LayoutResult: Complete layout solution
"""

from .engine import LayoutEngine, layout
from .types import (
    Event,
    LayoutEvent,
    ClusterLayout,
    LayoutResult,
)

__all__ = [
    'LayoutEngine',
    'layout',
    'Event',
    'LayoutEvent',
    'ClusterLayout',
    'LayoutResult',
]
