"""
Utility functions

General-purpose time helpers used across DayGrid modules.
"""

from __future__ import annotations
from collections import defaultdict
from datetime import date, datetime, time
from typing import Dict, Iterable, List, Sequence, Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from .layout.types import Event


def hour_fraction(moment: datetime, day: date) -> float:
    """
    Hours elapsed since midnight of a reference day

    Uses wall-clock arithmetic, so 09:30 on the reference day is 9.5 and
    01:00 on the following day is 25.0.

    Args:
        moment: Instant to convert
        day: Reference calendar day

    Returns:
        Fractional hours since the day's midnight
    """
    midnight = datetime.combine(day, time(0), tzinfo=moment.tzinfo)
    return (moment - midnight).total_seconds() / 3600.0


def reference_day(events: Iterable['Event']) -> date:
    """Calendar day of the earliest start"""
    return min(e.start for e in events).date()


def occupancy(start, end) -> Tuple[tuple, tuple]:
    """
    Sweep keys bounding the stretch of time an interval blocks

    Intervals are half-open. A zero-length (or reversed) interval owns its
    single instant: it blocks anything else starting at that instant but
    not intervals that end there.

    Returns:
        (lower, upper) keys; two intervals conflict when each lower key is
        below the other's upper key
    """
    if end <= start:
        return (start, 0), (start, 1)
    return (start, 0), (end, 0)


def overlaps(a_start, a_end, b_start, b_end) -> bool:
    """Whether two intervals conflict (touching ends do not)"""
    a_lo, a_hi = occupancy(a_start, a_end)
    b_lo, b_hi = occupancy(b_start, b_end)
    return a_lo < b_hi and b_lo < a_hi


def max_concurrency(intervals: Sequence[Tuple[float, float]]) -> int:
    """
    Maximum number of intervals active at a single instant

    Sweep line over interval endpoints, using the same conflict rule as
    occupancy(): a zero-length interval counts against intervals starting
    at or running across its instant (and against other zero-length
    intervals there) but not against ones ending there.

    Args:
        intervals: (start, end) pairs; end < start is treated as end == start

    Returns:
        Peak concurrency (0 for no intervals)
    """
    if len(intervals) == 0:
        return 0

    arr = np.asarray(intervals, dtype=float).reshape(-1, 2)
    starts = arr[:, 0]
    ends = np.maximum(arr[:, 1], starts)
    is_point = ends == starts
    n = len(arr)

    # Same-instant ordering: spanning ends, all starts, then point ends
    times = np.concatenate([starts, ends])
    deltas = np.concatenate([np.ones(n), -np.ones(n)])
    sub = np.concatenate([np.zeros(n), np.where(is_point, 1, 0)])
    kind = np.concatenate([np.ones(n), np.zeros(n)])

    order = np.lexsort((kind, sub, times))
    running = np.cumsum(deltas[order])
    return int(running.max())


def events_for_day(events: Iterable['Event'], day: date) -> List['Event']:
    """
    Events starting on a calendar day, sorted by start

    Args:
        events: Events spanning any number of days
        day: Day to select

    Returns:
        Events whose start falls on the day
    """
    return sorted((e for e in events if e.start.date() == day), key=lambda e: e.start)


def group_by_day(events: Iterable['Event']) -> Dict[date, List['Event']]:
    """Bucket events by the calendar day of their start, each bucket sorted by start"""
    days: Dict[date, List['Event']] = defaultdict(list)
    for e in events:
        days[e.start.date()].append(e)
    return {d: sorted(evts, key=lambda e: e.start) for d, evts in sorted(days.items())}
