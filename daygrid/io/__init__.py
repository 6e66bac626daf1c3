"""I/O utilities for DayGrid"""

from .readers import EventReader, read_events
from .writers import LayoutWriter, write_layout

__all__ = [
    'EventReader', 'read_events',
    'LayoutWriter', 'write_layout']
