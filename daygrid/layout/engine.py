"""
Layout Engine for DayGrid
Pure layout logic for side-by-side event blocks in a single day column

Algorithm:
- Sort by start, then end, then id
- Cluster events with a time-sorted watermark (connected overlap components);
  a zero-duration event owns its instant and conflicts with events starting there
- Greedy first-fit column packing within each cluster
- Pixel rows from time, percentage columns from packing, then widen blocks
  into free columns to their right
"""
from __future__ import annotations
from datetime import date, datetime
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from ..config import LayoutConfig
from ..utils import hour_fraction, occupancy, overlaps, reference_day
from .types import ClusterLayout, Event, LayoutEvent, LayoutResult, T

logger = logging.getLogger(__name__)

# (start, end, id, input position)
_Item = Tuple[datetime, datetime, str, int]
# (input position, top, height, left, width, column, span, column_count, cluster)
_Slot = Tuple[int, float, float, float, float, int, int, int, int]


class LayoutEngine:
    """
    Day-view layout engine

    Stateless apart from a memoization cache on event timing and render
    parameters; payloads are attached after the cache lookup so they are
    never served stale.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Layout configuration (defaults: 7 AM start, 80 px/hour)
        """
        self.config = config or LayoutConfig()

        if self.config.cache_size > 0:
            self._slots = lru_cache(maxsize=self.config.cache_size)(self._compute_slots)
        else:
            self._slots = self._compute_slots

        logger.debug(f"LayoutEngine initialized (cache_size={self.config.cache_size}, "
                     f"expand_width={self.config.expand_width})")

    def calculate_layout(
        self,
        events: Iterable[Event[T]],
        day_start_hour: Optional[int] = None,
        pixels_per_hour: Optional[float] = None,
        day: Optional[date] = None
    ) -> LayoutResult[T]:
        """
        Calculate layout for one day's events

        Args:
            events: Events for a single day, in any order
            day_start_hour: Hour mapped to pixel 0 (default: from config)
            pixels_per_hour: Vertical scale (default: from config)
            day: Reference day for hour offsets (default: day of earliest start)

        Returns:
            LayoutResult with events in (start, end, id) order
        """
        events = list(events)
        start_hour = self.config.day_start_hour if day_start_hour is None else day_start_hour
        scale = self._resolve_scale(pixels_per_hour)

        if not events:
            return self._create_empty_layout(start_hour, scale, day)

        ref_day = day or reference_day(events)
        timing = tuple((e.id, e.start, e.end) for e in events)
        slots, clusters = self._slots(
            timing, start_hour, scale, ref_day,
            self.config.min_height_px, self.config.expand_width
        )

        positioned = [
            LayoutEvent(
                event=events[pos],
                top=top,
                height=height,
                left=left,
                width=width,
                column=column,
                column_span=span,
                column_count=count,
                cluster_index=cluster,
            )
            for pos, top, height, left, width, column, span, count, cluster in slots
        ]

        return LayoutResult(
            events=positioned,
            clusters=list(clusters),
            day_start_hour=start_hour,
            pixels_per_hour=scale,
            day=ref_day,
            layout_stats={
                'n_events': len(positioned),
                'n_clusters': len(clusters),
                'max_columns': max(c.column_count for c in clusters),
                'n_expanded': sum(1 for e in positioned if e.was_expanded),
                'n_normalized': sum(1 for e in events if e.end < e.start),
            }
        )

    def cache_info(self):
        """lru_cache statistics, or None when caching is disabled"""
        return self._slots.cache_info() if hasattr(self._slots, 'cache_info') else None

    def clear_cache(self) -> None:
        """Drop memoized layouts"""
        if hasattr(self._slots, 'cache_clear'):
            self._slots.cache_clear()

    def _resolve_scale(self, pixels_per_hour: Optional[float]) -> float:
        """Clamp a non-positive (or NaN) scale to the configured floor"""
        scale = self.config.pixels_per_hour if pixels_per_hour is None else pixels_per_hour
        if not scale > 0:
            logger.warning(f"pixels_per_hour={scale} is not positive, "
                           f"using {self.config.min_pixels_per_hour}")
            scale = self.config.min_pixels_per_hour
        return float(scale)

    def _compute_slots(
        self,
        timing: Tuple[Tuple[str, datetime, datetime], ...],
        start_hour: int,
        scale: float,
        day: date,
        min_height: float,
        expand: bool
    ) -> Tuple[Tuple[_Slot, ...], Tuple[ClusterLayout, ...]]:
        """
        Geometry for a timing tuple (memoized)

        Args:
            timing: (id, start, end) per event, in input order
            start_hour: Hour mapped to pixel 0
            scale: Pixels per hour (already clamped)
            day: Reference day for hour offsets
            min_height: Minimum block height (px)
            expand: Whether to run the width-expansion pass

        Returns:
            (slots, clusters) with slots in sorted order
        """
        items: List[_Item] = []
        for pos, (event_id, start, end) in enumerate(timing):
            if end < start:
                logger.debug(f"Event {event_id} ends before it starts, treating as zero duration")
                end = start
            items.append((start, end, event_id, pos))

        items.sort(key=lambda it: (it[0], it[1], it[2]))

        slots: List[_Slot] = []
        clusters: List[ClusterLayout] = []

        for cluster_index, cluster in enumerate(self._cluster(items)):
            columns, n_columns = self._assign_columns(cluster)
            if expand:
                spans = self._expand_spans(cluster, columns, n_columns)
            else:
                spans = [1] * len(cluster)

            for (start, end, _, pos), column, span in zip(cluster, columns, spans):
                duration = (end - start).total_seconds() / 3600.0
                slots.append((
                    pos,
                    (hour_fraction(start, day) - start_hour) * scale,
                    max(min_height, duration * scale),
                    column * 100.0 / n_columns,
                    span * 100.0 / n_columns,
                    column,
                    span,
                    n_columns,
                    cluster_index,
                ))

            clusters.append(ClusterLayout(
                index=cluster_index,
                start=cluster[0][0],
                end=max(it[1] for it in cluster),
                n_events=len(cluster),
                column_count=n_columns,
            ))

        logger.debug(f"Laid out {len(items)} events in {len(clusters)} clusters")
        return tuple(slots), tuple(clusters)

    @staticmethod
    def _cluster(items: Sequence[_Item]) -> List[List[_Item]]:
        """
        Split sorted items into overlap clusters

        An item joins the current cluster when it starts strictly before the
        latest end seen in that cluster, or at the instant owned by a
        zero-duration item that ends the cluster.
        """
        clusters: List[List[_Item]] = []
        current: List[_Item] = []
        watermark = None

        for item in items:
            lower, upper = occupancy(item[0], item[1])
            if current and lower < watermark:
                current.append(item)
                watermark = max(watermark, upper)
            else:
                if current:
                    clusters.append(current)
                current = [item]
                watermark = upper

        if current:
            clusters.append(current)
        return clusters

    @staticmethod
    def _assign_columns(cluster: Sequence[_Item]) -> Tuple[List[int], int]:
        """
        Greedy first-fit column assignment

        Returns:
            (column index per item, number of columns)
        """
        column_ends: List[tuple] = []
        assignment: List[int] = []

        for start, end, _, _ in cluster:
            lower, upper = occupancy(start, end)
            for col, col_end in enumerate(column_ends):
                if col_end <= lower:
                    column_ends[col] = upper
                    assignment.append(col)
                    break
            else:
                column_ends.append(upper)
                assignment.append(len(column_ends) - 1)

        return assignment, len(column_ends)

    @staticmethod
    def _expand_spans(
        cluster: Sequence[_Item],
        columns: Sequence[int],
        n_columns: int
    ) -> List[int]:
        """
        Width-expansion pass

        Each item spans its own column plus every consecutive column to the
        right holding no item that overlaps it in time.
        """
        by_column: List[List[Tuple[datetime, datetime]]] = [[] for _ in range(n_columns)]
        for (start, end, _, _), col in zip(cluster, columns):
            by_column[col].append((start, end))

        spans: List[int] = []
        for (start, end, _, _), col in zip(cluster, columns):
            span = 1
            for neighbour in by_column[col + 1:]:
                if any(overlaps(start, end, s, e) for s, e in neighbour):
                    break
                span += 1
            spans.append(span)
        return spans

    def _create_empty_layout(self, start_hour: int, scale: float, day: Optional[date] = None) -> LayoutResult:
        """Create empty layout for when there are no events"""
        return LayoutResult(
            events=[],
            clusters=[],
            day_start_hour=start_hour,
            pixels_per_hour=scale,
            day=day,
            layout_stats={'n_events': 0, 'n_clusters': 0, 'max_columns': 0,
                          'n_expanded': 0, 'n_normalized': 0}
        )


_default_engine = LayoutEngine()


def layout(
    events: Iterable[Event[T]],
    day_start_hour: int = 7,
    pixels_per_hour: float = 80.0
) -> List[LayoutEvent[T]]:
    """
    Position a day's events as side-by-side blocks

    Convenience wrapper around a shared, memoized LayoutEngine with the
    default configuration.

    Args:
        events: Events for a single day, in any order
        day_start_hour: Hour mapped to pixel 0
        pixels_per_hour: Vertical scale

    Returns:
        One LayoutEvent per input event, in (start, end, id) order
    """
    return _default_engine.calculate_layout(events, day_start_hour, pixels_per_hour).events
