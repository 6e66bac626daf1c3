"""
DayGrid Configuration
Layout and rendering parameters for the day-view calendar column
"""
from dataclasses import dataclass, field
from typing import Dict, Tuple


STATUS_COLORS: Dict[str, str] = {
    'confirmed': '#22c55e',
    'pending': '#f59e0b',
    'in_progress': '#3b82f6',
    'completed': '#6366f1',
    'cancelled': '#ef4444',
}
"""Accent color per booking status"""

STAFF_COLORS: Tuple[str, ...] = ('#6366f1', '#ec4899', '#14b8a6', '#f59e0b', '#8b5cf6', '#ef4444')
"""Block fill palette, assigned per staff member"""


@dataclass
class LayoutConfig:
    """
    Layout engine parameters

    Maps event time ranges to pixel rows and percentage columns.
    """

    # ============================================================
    # VERTICAL SCALE
    # ============================================================
    day_start_hour: int = 7
    """Hour of day mapped to pixel 0 (top edge of the grid)"""

    pixels_per_hour: float = 80.0
    """Vertical scale: pixels per hour of duration"""

    min_pixels_per_hour: float = 1.0
    """Floor applied when a non-positive scale is requested"""

    min_height_px: float = 20.0
    """Minimum block height so short events stay legible (px)"""

    # ============================================================
    # HORIZONTAL PACKING
    # ============================================================
    expand_width: bool = True
    """Grow events rightward into columns with no conflicting event"""

    # ============================================================
    # MEMOIZATION
    # ============================================================
    cache_size: int = 128
    """Number of memoized layouts kept per engine (0 disables caching)"""

    @classmethod
    def touch(cls) -> 'LayoutConfig':
        """
        Settings for touch screens

        - 44 px minimum block height (touch target size)

        Example:
            >>> engine = LayoutEngine(LayoutConfig.touch())
        """
        config = cls()
        config.min_height_px = 44.0
        return config


@dataclass
class PlotConfig:
    """
    Day-view rendering configuration
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Layout configuration"""

    # ============================================================
    # GRID
    # ============================================================
    grid_end_hour: int = 21
    """Hour at which the grid ends (7:00 AM - 8:00 PM rows)"""

    column_width_px: float = 480.0
    """Width of the day column (px)"""

    gutter_px: float = 4.0
    """Horizontal gap subtracted from each block's width (px)"""

    time_axis_width_px: float = 56.0
    """Width of the hour label strip left of the column (px)"""

    # ============================================================
    # STYLING
    # ============================================================
    grid_linewidth: float = 0.6
    """Line width for hour grid lines"""

    grid_color: str = '#d1d5db'
    """Hour grid line color"""

    block_alpha: float = 0.85
    """Fill alpha for event blocks"""

    block_linewidth: float = 1.2
    """Border width for event blocks"""

    status_bar_px: float = 4.0
    """Width of the status accent bar on the left edge of a block (px)"""

    label_fontsize: int = 8
    """Font size for block labels"""

    hour_label_fontsize: int = 8
    """Font size for hour labels"""

    default_color: str = '#6366f1'
    """Block fill when an event carries no color"""

    # ============================================================
    # FIGURE SETTINGS
    # ============================================================
    dpi: int = 100
    """DPI for saved figures"""

    title_fontsize: int = 12
    """Font size for the day title"""

    @property
    def status_colors(self) -> Dict[str, str]:
        """Accent colors per booking status"""
        return STATUS_COLORS

    @classmethod
    def presentation(cls) -> 'PlotConfig':
        """
        Settings for screen sharing

        - Wider column and larger fonts
        - Touch-size minimum block height

        Example:
            >>> plotter = DayViewPlotter(PlotConfig.presentation())
        """
        config = cls()
        config.layout = LayoutConfig.touch()
        config.column_width_px = 720.0
        config.label_fontsize = 11
        config.hour_label_fontsize = 10
        config.title_fontsize = 16
        config.dpi = 150
        return config

    @classmethod
    def compact(cls) -> 'PlotConfig':
        """
        Compact settings for busy days

        - Smaller vertical scale and gutters
        - Equal-width columns (no expansion)

        Example:
            >>> plotter = DayViewPlotter(PlotConfig.compact())
        """
        config = cls()
        config.layout.pixels_per_hour = 48.0
        config.layout.min_height_px = 14.0
        config.layout.expand_width = False
        config.gutter_px = 2.0
        config.label_fontsize = 6
        return config
