"""
Property tests for the layout engine

Generated days mix appointments on a 5-minute grid with arbitrary instants,
and include zero-duration and reversed records, events before the grid start
or past midnight, repeated ids and shared start times.
"""
from collections import Counter
from datetime import datetime, timedelta
from itertools import combinations

import pytest
from hypothesis import given, settings, strategies as st
from hypothesis.strategies import composite

from daygrid.config import LayoutConfig
from daygrid.layout import Event, LayoutEngine
from daygrid.utils import hour_fraction, max_concurrency
from daygrid.tests.factories import DAY

MIDNIGHT = datetime.combine(DAY, datetime.min.time())
IDS = ('a', 'b', 'c', 'd', 'e', 'f')
EPS = 1e-6

# =============================================================================
# STRATEGIES
# =============================================================================

start_times = st.one_of(
    st.integers(min_value=-72, max_value=372).map(lambda k: MIDNIGHT + timedelta(minutes=5 * k)),
    st.datetimes(min_value=MIDNIGHT - timedelta(hours=6), max_value=MIDNIGHT + timedelta(hours=31)),
)

durations = st.one_of(
    st.just(timedelta(0)),
    st.integers(min_value=-12, max_value=48).map(lambda k: timedelta(minutes=5 * k)),
    st.timedeltas(min_value=timedelta(hours=-2), max_value=timedelta(hours=10)),
)


@composite
def calendar_events(draw, starts=start_times):
    """Single event, possibly zero-length or ending before it starts"""
    start = draw(starts)
    return Event(id=draw(st.sampled_from(IDS)), start=start, end=start + draw(durations))


@composite
def days(draw, max_size=30):
    """A day's events; a few shared anchors make identical starts common"""
    anchors = draw(st.lists(start_times, min_size=1, max_size=4))
    starts = st.one_of(st.sampled_from(anchors), start_times)
    return draw(st.lists(calendar_events(starts), max_size=max_size))


def snapshot(result):
    return [(b.id, b.top, b.height, b.left, b.width, b.column, b.column_span) for b in result]


def duration_px(block, scale):
    """Height the block's time range covers, before the minimum floor"""
    return max((block.end - block.start).total_seconds(), 0.0) / 3600.0 * scale


def share_width(a, b):
    return a.left < b.right - EPS and b.left < a.right - EPS


# =============================================================================
# PROPERTY TESTS
# =============================================================================

@pytest.mark.properties
@settings(deadline=None)
@given(days())
def test_overlapping_events_never_share_horizontal_space(events):
    """Events that conflict in time get disjoint horizontal ranges"""
    result = LayoutEngine().calculate_layout(events)
    for a, b in combinations(result.events, 2):
        if a.event.overlaps(b.event):
            assert not share_width(a, b), (a, b)


@pytest.mark.properties
@settings(deadline=None)
@given(days())
def test_blocks_sharing_width_are_stacked(events):
    """Blocks sharing horizontal space start on different rows, one below the other's time range"""
    result = LayoutEngine().calculate_layout(events)
    scale = result.pixels_per_hour
    for a, b in combinations(result.events, 2):
        if share_width(a, b):
            upper, lower = sorted((a, b), key=lambda blk: blk.start)
            assert upper.top < lower.top, (upper, lower)
            assert upper.top + duration_px(upper, scale) <= lower.top + EPS, (upper, lower)


@pytest.mark.properties
@settings(deadline=None)
@given(days())
def test_every_event_laid_out_once(events):
    """Output has one block per input event, duplicates included"""
    result = LayoutEngine().calculate_layout(events)
    assert len(result) == len(events)
    assert Counter(b.id for b in result) == Counter(e.id for e in events)
    assert Counter(id(b.event) for b in result) == Counter(id(e) for e in events)


@pytest.mark.properties
@settings(deadline=None)
@given(st.data())
def test_output_independent_of_input_order(data):
    """Any permutation of the input yields the same layout"""
    events = data.draw(days())
    shuffled = data.draw(st.permutations(events))

    engine = LayoutEngine()
    baseline = snapshot(engine.calculate_layout(events))
    assert snapshot(engine.calculate_layout(events)) == baseline
    assert snapshot(LayoutEngine().calculate_layout(shuffled)) == baseline


@pytest.mark.properties
@settings(deadline=None)
@given(days())
def test_column_count_matches_peak_concurrency(events):
    """Each cluster uses exactly as many columns as events active at one instant"""
    result = LayoutEngine().calculate_layout(events)
    for cluster in result.clusters:
        members = result.get_cluster_events(cluster.index)
        intervals = [(hour_fraction(b.start, result.day), hour_fraction(b.end, result.day)) for b in members]
        assert cluster.column_count == max_concurrency(intervals)
        assert {b.column_count for b in members} == {cluster.column_count}


@pytest.mark.properties
@settings(deadline=None)
@given(days())
def test_clusters_are_disjoint_in_time(events):
    """Each cluster ends no later than the next one starts"""
    result = LayoutEngine().calculate_layout(events)
    for earlier, later in zip(result.clusters, result.clusters[1:]):
        assert earlier.end <= later.start


@pytest.mark.properties
@settings(deadline=None)
@given(days())
def test_blocks_stay_inside_column(events):
    """Left and width stay within the day column"""
    result = LayoutEngine().calculate_layout(events)
    for b in result:
        assert 0.0 <= b.left < 100.0
        assert 0.0 < b.width <= 100.0
        assert b.right <= 100.0 + EPS
        assert b.column + b.column_span <= b.column_count


@pytest.mark.properties
@settings(deadline=None)
@given(days(), st.integers(min_value=0, max_value=23), st.floats(min_value=10, max_value=200))
def test_geometry_is_monotonic(events, start_hour, scale):
    """Top grows with start time and height with duration, never below the floor"""
    min_height = LayoutConfig().min_height_px
    blocks = LayoutEngine().calculate_layout(events, start_hour, scale).events
    for b in blocks:
        assert b.height >= min_height
        assert b.height == pytest.approx(max(min_height, duration_px(b, scale)))
    for a, b in combinations(blocks, 2):
        if a.start < b.start:
            assert a.top < b.top
        if duration_px(a, scale) <= duration_px(b, scale):
            assert a.height <= b.height + EPS


@pytest.mark.properties
@settings(deadline=None)
@given(days())
def test_expansion_only_widens(events):
    """Width expansion keeps columns and never narrows a block"""
    narrow = LayoutEngine(LayoutConfig(expand_width=False)).calculate_layout(events)
    wide = LayoutEngine().calculate_layout(events)
    for n, w in zip(narrow, wide):
        assert n.id == w.id
        assert (n.left, n.column) == (w.left, w.column)
        assert w.width >= n.width - EPS
