"""
Layout types for DayGrid
Data structures for layout engine input and results

Event and LayoutEvent are immutable (frozen) for safety and testability.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar
import pandas as pd

from ..utils import overlaps

T = TypeVar('T')


@dataclass(frozen=True)
class Event(Generic[T]):
    """
    Time interval to be placed in the day column

    Attributes:
        id: Stable identifier, used as a correlation key
        start: Start instant (already localized)
        end: End instant, expected after start
        payload: Caller-defined data, passed through untouched
    """
    id: str
    start: datetime
    end: datetime
    payload: Optional[T] = None

    def overlaps(self, other: 'Event[Any]') -> bool:
        """
        Whether the two events conflict in time

        Touching ends do not conflict; a zero-duration event conflicts with
        events starting at or running across its instant.
        """
        return overlaps(self.start, self.end, other.start, other.end)


@dataclass(frozen=True)
class LayoutEvent(Generic[T]):
    """
    Positioned block for a single event

    Attributes:
        event: The input event
        top: Pixels from the grid's top edge (may be negative)
        height: Block height (px)
        left: Horizontal offset, percent of column width
        width: Horizontal extent, percent of column width
        column: Column index within the cluster
        column_span: Number of columns the block covers after expansion
        column_count: Number of columns in the cluster
        cluster_index: Index of the overlap cluster this event belongs to
    """
    event: Event[T]
    top: float
    height: float
    left: float
    width: float
    column: int = 0
    column_span: int = 1
    column_count: int = 1
    cluster_index: int = 0

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def start(self) -> datetime:
        return self.event.start

    @property
    def end(self) -> datetime:
        return self.event.end

    @property
    def payload(self) -> Optional[T]:
        return self.event.payload

    @property
    def bottom(self) -> float:
        """Bottom edge (px)"""
        return self.top + self.height

    @property
    def right(self) -> float:
        """Right edge, percent of column width"""
        return self.left + self.width

    @property
    def was_expanded(self) -> bool:
        """Whether the width-expansion pass widened this block"""
        return self.column_span > 1

    def css_style(self, gutter_px: float = 4.0) -> str:
        """Inline style for an absolutely positioned block"""
        return (
            f"position: absolute; top: {self.top:g}px; height: {self.height:g}px; "
            f"left: {self.left:g}%; width: calc({self.width:g}% - {gutter_px:g}px)"
        )


@dataclass(frozen=True)
class ClusterLayout:
    """
    Layout summary for one overlap cluster

    Attributes:
        index: Cluster index in time order
        start: Earliest start in the cluster
        end: Latest end in the cluster
        n_events: Number of events in the cluster
        column_count: Columns needed to pack the cluster
    """
    index: int
    start: datetime
    end: datetime
    n_events: int
    column_count: int

    @property
    def is_conflicted(self) -> bool:
        """Whether any events in the cluster render side by side"""
        return self.column_count > 1


@dataclass
class LayoutResult(Generic[T]):
    """
    Complete layout solution for one day column

    This is the output of LayoutEngine and input to DayViewPlotter and
    LayoutWriter.

    Attributes:
        events: Positioned events in (start, end, id) order
        clusters: Cluster summaries in time order
        day_start_hour: Hour mapped to pixel 0
        pixels_per_hour: Vertical scale actually used (after clamping)
        layout_stats: Statistics about the layout
        day: Reference day the hour offsets are measured from
    """
    events: List[LayoutEvent[T]]
    clusters: List[ClusterLayout]
    day_start_hour: int
    pixels_per_hour: float
    layout_stats: Dict[str, Any] = field(default_factory=dict)
    day: Optional[date] = None

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    @property
    def n_clusters(self) -> int:
        """Number of overlap clusters"""
        return len(self.clusters)

    @property
    def max_columns(self) -> int:
        """Widest cluster's column count"""
        return max((c.column_count for c in self.clusters), default=0)

    @property
    def total_height(self) -> float:
        """Lowest block edge (px), 0 for an empty day"""
        return max((e.bottom for e in self.events), default=0.0)

    def get_events(self, event_id: str) -> List[LayoutEvent[T]]:
        """All positioned events with the given id (ids may repeat)"""
        return [e for e in self.events if e.id == event_id]

    def get_cluster_events(self, cluster_index: int) -> List[LayoutEvent[T]]:
        """Positioned events belonging to a cluster"""
        return [e for e in self.events if e.cluster_index == cluster_index]

    def to_frame(self) -> pd.DataFrame:
        """
        Flatten the layout into a DataFrame

        Mapping payloads (e.g. EventRecord) are expanded into columns;
        other payloads are kept in a single 'payload' column.
        """
        columns = ['id', 'start', 'end', 'top', 'height', 'left', 'width',
                   'column', 'column_span', 'column_count', 'cluster']
        rows = []
        for e in self.events:
            row: Dict[str, Any] = {
                'id': e.id,
                'start': e.start,
                'end': e.end,
                'top': e.top,
                'height': e.height,
                'left': e.left,
                'width': e.width,
                'column': e.column,
                'column_span': e.column_span,
                'column_count': e.column_count,
                'cluster': e.cluster_index,
            }
            if isinstance(e.payload, dict):
                for key, value in e.payload.items():
                    row.setdefault(key, value)
            elif e.payload is not None:
                row['payload'] = e.payload
            rows.append(row)
        return pd.DataFrame(rows, columns=None if rows else columns)
