"""
Day-view visualizer

Renders a day column of positioned appointment blocks to an image.
"""

from __future__ import annotations
from datetime import date
from typing import Iterable, List, Optional
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import FancyBboxPatch, Rectangle
from matplotlib.figure import Figure
from pathlib import Path
import logging

from .config import PlotConfig, STAFF_COLORS
from .layout import LayoutEngine
from .layout.types import Event, LayoutEvent, LayoutResult
from .types import Rect

logger = logging.getLogger(__name__)


class DayViewPlotter:
    """
    Creates day-view calendar images

    The vertical axis is pixels from the grid top, the horizontal axis is
    pixels across the day column; hour labels sit in a strip on the left.
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize DayViewPlotter

        Args:
            config: Visual configuration. If None, uses default settings.

        Example:
            >>> plotter = DayViewPlotter()
            >>> plotter = DayViewPlotter(PlotConfig.presentation())
        """
        self.config: PlotConfig = config or PlotConfig()
        self.layout_engine = LayoutEngine(self.config.layout)
        self._staff_colors: dict = {}

    def block_rect(self, block: LayoutEvent) -> Rect:
        """
        Pixel rectangle for a positioned event

        Args:
            block: Positioned event

        Returns:
            (x, y, width, height) with width reduced by the gutter
        """
        column_width = self.config.column_width_px
        x = block.left / 100.0 * column_width
        width = max(block.width / 100.0 * column_width - self.config.gutter_px, 1.0)
        return x, block.top, width, block.height

    def block_color(self, block: LayoutEvent) -> str:
        """Fill color: the event's own color, else a stable per-staff palette entry"""
        payload = block.payload if isinstance(block.payload, dict) else {}
        if payload.get('color'):
            return payload['color']
        staff = payload.get('staff')
        if not staff:
            return self.config.default_color
        if staff not in self._staff_colors:
            self._staff_colors[staff] = STAFF_COLORS[len(self._staff_colors) % len(STAFF_COLORS)]
        return self._staff_colors[staff]

    def grid_height(self, result: LayoutResult) -> float:
        """Height of the hour grid, extended to fit blocks past the last row (px)"""
        hours = self.config.grid_end_hour - self.config.layout.day_start_hour
        return max(hours * result.pixels_per_hour, result.total_height, result.pixels_per_hour)

    def plot(
        self,
        events: Iterable[Event],
        output_file: Optional[str] = 'day_view.png',
        day: Optional[date] = None,
        title: Optional[str] = None,
        show: bool = False
    ) -> Figure:
        """
        Generate a day-view image

        Args:
            events: Events for a single day
            output_file: Path to save figure (None to skip saving)
            day: Reference day (default: day of earliest event)
            title: Plot title (auto-generated if None)
            show: Whether to display the plot

        Returns:
            matplotlib Figure object
        """
        events = list(events)
        result = self.layout_engine.calculate_layout(events, day=day)
        logger.info(f"Plotting {len(result)} events in {result.n_clusters} clusters "
                    f"(max {result.max_columns} columns)")

        cfg = self.config
        start_hour = result.day_start_hour
        pph = result.pixels_per_hour
        height_px = self.grid_height(result)
        width_px = cfg.time_axis_width_px + cfg.column_width_px

        fig = plt.figure(figsize=(width_px / cfg.dpi, (height_px + 40) / cfg.dpi), dpi=cfg.dpi)
        ax = fig.add_axes([0, 0, 1, height_px / (height_px + 40)])
        ax.set_xlim(-cfg.time_axis_width_px, cfg.column_width_px)
        ax.set_ylim(height_px, 0)
        ax.axis('off')

        # Hour rows
        for i, y in enumerate(np.arange(0, height_px + 1e-9, pph)):
            ax.axhline(y, color=cfg.grid_color, linewidth=cfg.grid_linewidth, zorder=0)
            ax.text(-6, y, f"{(start_hour + i) % 24:02d}:00", ha='right', va='center',
                    fontsize=cfg.hour_label_fontsize, color='#6b7280')

        for block in result:
            self._draw_block(ax, block)

        if title is None:
            shown_day = day or (min(e.start for e in events).date() if events else None)
            title = shown_day.strftime('%A %d %B %Y') if shown_day else 'No appointments'
        fig.text(0.5, 1.0, title, ha='center', va='top', fontsize=cfg.title_fontsize,
                 weight='bold', transform=fig.transFigure)

        if output_file:
            Path(output_file).parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(output_file, dpi=cfg.dpi, facecolor='white', edgecolor='none')
            logger.info(f"Plot saved to {output_file}")

        if show:
            plt.show()

        return fig

    def _draw_block(self, ax, block: LayoutEvent) -> None:
        """Draw one appointment block with status bar and label"""
        cfg = self.config
        x, y, w, h = self.block_rect(block)
        color = self.block_color(block)
        payload = block.payload if isinstance(block.payload, dict) else {}

        ax.add_patch(FancyBboxPatch(
            (x, y), w, h,
            boxstyle='round,pad=0,rounding_size=3',
            facecolor=color, edgecolor='white',
            alpha=cfg.block_alpha, linewidth=cfg.block_linewidth, zorder=2
        ))

        status = payload.get('status')
        if status in cfg.status_colors:
            ax.add_patch(Rectangle(
                (x, y), min(cfg.status_bar_px, w), h,
                facecolor=cfg.status_colors[status], edgecolor='none', zorder=3
            ))

        lines: List[str] = [payload.get('title') or block.id,
                            f"{block.start:%H:%M}-{block.end:%H:%M}"]
        if payload.get('client'):
            lines.append(payload['client'])
        ax.text(x + cfg.status_bar_px + 3, y + 3, '\n'.join(lines),
                ha='left', va='top', fontsize=cfg.label_fontsize, color='white',
                clip_on=True, zorder=4)
