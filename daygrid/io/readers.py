"""
I/O Readers

Handles reading of appointment files into layout engine events.
"""

from __future__ import annotations
from datetime import date
from typing import List, Optional
import pandas as pd
from pathlib import Path
import logging

from ..layout.types import Event
from ..types import EventRecord, PathLike
from ..utils import events_for_day

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('id', 'start', 'end')
PAYLOAD_COLUMNS = ('title', 'client', 'service', 'staff', 'status', 'color')


class EventReader:
    """Reads appointment tables (CSV or TSV) into Events"""

    @staticmethod
    def read_frame(filepath: PathLike) -> pd.DataFrame:
        """
        Load and clean an appointment table

        The separator is picked from the extension ('.tsv' or '.tab' use tabs,
        anything else commas). Timestamps are parsed per row as ISO 8601, so
        space- and 'T'-separated values may be mixed. Rows whose start or end
        cannot be parsed are dropped with a warning.

        Args:
            filepath: Path to appointment table

        Returns:
            DataFrame with parsed 'start'/'end' datetimes and string 'id'
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Event file not found: {path}")

        sep = '\t' if path.suffix.lower() in ('.tsv', '.tab') else ','
        frame: pd.DataFrame = pd.read_csv(path, sep=sep, dtype={'id': str})

        missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
        if missing:
            raise ValueError(f"{path} is missing required columns: {', '.join(missing)}")

        frame['start'] = pd.to_datetime(frame['start'], format='ISO8601', errors='coerce')
        frame['end'] = pd.to_datetime(frame['end'], format='ISO8601', errors='coerce')

        bad = frame['start'].isna() | frame['end'].isna() | frame['id'].isna()
        if bad.any():
            logger.warning(f"Dropping {int(bad.sum())} rows with unparsable id/start/end from {path}")
            frame = frame[~bad].reset_index(drop=True)

        logger.debug(f"Read {len(frame)} events from {path}")
        return frame

    @staticmethod
    def to_events(frame: pd.DataFrame) -> List[Event[EventRecord]]:
        """
        Convert a cleaned table to Events

        Known payload columns present in the table become the EventRecord
        payload; empty cells are left out.
        """
        payload_columns = [c for c in PAYLOAD_COLUMNS if c in frame.columns]
        events: List[Event[EventRecord]] = []

        for row in frame.itertuples(index=False):
            record = row._asdict()
            payload: EventRecord = {
                c: str(record[c]) for c in payload_columns if pd.notna(record[c])
            }  # type: ignore[misc]
            events.append(Event(
                id=str(record['id']),
                start=pd.Timestamp(record['start']).to_pydatetime(),
                end=pd.Timestamp(record['end']).to_pydatetime(),
                payload=payload,
            ))

        return events

    @classmethod
    def read(cls, filepath: PathLike, day: Optional[date] = None) -> List[Event[EventRecord]]:
        """
        Read events, optionally restricted to one calendar day

        Args:
            filepath: Path to appointment table
            day: If given, keep only events starting on this day

        Returns:
            List of Events
        """
        events = cls.to_events(cls.read_frame(filepath))
        if day is not None:
            events = events_for_day(events, day)
            logger.debug(f"{len(events)} events on {day.isoformat()}")
        return events


def read_events(filepath: PathLike, day: Optional[date] = None) -> List[Event[EventRecord]]:
    """
    Convenience function to read an appointment table

    Args:
        filepath: Path to CSV/TSV file with id, start, end columns
        day: Optional calendar day filter

    Returns:
        List of Events
    """
    return EventReader.read(filepath, day)
