"""
I/O Writers

Handles writing of layout results in various formats.
"""

import json
import pandas as pd
from pathlib import Path
from typing import List, Sequence, Union
import logging

from ..layout.types import LayoutResult
from ..types import OutputFormat, PathLike

logger = logging.getLogger(__name__)

Layouts = Union[LayoutResult, Sequence[LayoutResult]]


class LayoutWriter:
    """Writes positioned events as TSV or JSON, one or more days per file"""

    def __init__(self, precision: int = 4):
        """
        Initialize layout writer

        Args:
            precision: Decimal places kept for geometry columns
        """
        self.precision = precision

    def to_frame(self, result: LayoutResult) -> pd.DataFrame:
        """Layout table with rounded geometry, ISO timestamps and the layout day"""
        frame = result.to_frame()
        if frame.empty:
            return frame

        for col in ('top', 'height', 'left', 'width'):
            frame[col] = frame[col].astype(float).round(self.precision)
        for col in ('start', 'end'):
            frame[col] = [ts.isoformat() for ts in frame[col]]
        frame.insert(0, 'day', result.day.isoformat() if result.day else None)
        return frame

    def write(self, results: Layouts, output_file: PathLike, fmt: OutputFormat = 'tsv') -> None:
        """
        Write layouts to disk

        TSV output is one table with a 'day' column; JSON output holds one
        entry per day with its statistics and events.

        Args:
            results: A single layout or per-day layouts
            output_file: Destination path
            fmt: 'tsv' or 'json'
        """
        days: List[LayoutResult] = [results] if isinstance(results, LayoutResult) else list(results)
        n_events = sum(len(r) for r in days)
        if n_events == 0:
            logger.warning("No events to save")

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        frames = [self.to_frame(r) for r in days]

        if fmt == 'tsv':
            non_empty = [f for f in frames if not f.empty]
            table = pd.concat(non_empty, ignore_index=True) if non_empty else pd.DataFrame(columns=['day', 'id'])
            table.to_csv(output_file, sep='\t', index=False)
        elif fmt == 'json':
            document = {
                'day_start_hour': days[0].day_start_hour if days else None,
                'pixels_per_hour': days[0].pixels_per_hour if days else None,
                'days': [
                    {
                        'day': r.day.isoformat() if r.day else None,
                        'stats': r.layout_stats,
                        'events': json.loads(frame.to_json(orient='records')) if not frame.empty else [],
                    }
                    for r, frame in zip(days, frames)
                ],
            }
            with open(output_file, 'w') as f:
                json.dump(document, f, indent=2)
        else:
            raise ValueError(f"Unknown output format: {fmt}")

        logger.info(f"Layout written: {output_file} ({n_events} events over {len(days)} days, {fmt})")


def write_layout(results: Layouts, output_file: PathLike, fmt: OutputFormat = 'tsv', precision: int = 4) -> None:
    """
    Convenience function to write layouts

    Args:
        results: A single layout or per-day layouts
        output_file: Destination path
        fmt: 'tsv' or 'json'
        precision: Decimal places kept for geometry columns
    """
    LayoutWriter(precision).write(results, output_file, fmt)
