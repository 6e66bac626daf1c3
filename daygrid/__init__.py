"""DayGrid: Overlap-aware layout engine for day-view calendars"""

from .config import LayoutConfig, PlotConfig
from .layout import Event, LayoutEvent, LayoutEngine, LayoutResult
from . import utils
from .visualizer import DayViewPlotter

__version__ = "0.1.0"
__all__ = ["LayoutConfig", "PlotConfig", "Event", "LayoutEvent", "LayoutEngine", "LayoutResult",
           "utils", "DayViewPlotter"]
