"""Abstract base class for worksheet sources."""

import csv
import io
import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_column_name(header: str) -> str:
    """Flatten a header the way the worksheet list feed does ('Cancer Studies' -> 'cancerstudies')."""
    return _NON_ALNUM.sub("", header.lower())


def parse_rows(text: str, delimiter: str = "\t") -> List[Dict[str, str]]:
    """Parse delimited text into rows keyed by normalized column name."""
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    try:
        header = next(reader)
    except StopIteration:
        return []
    columns = [normalize_column_name(h) for h in header]
    rows = []
    for cells in reader:
        if not any(c.strip() for c in cells):
            continue
        # Short rows are padded so every column is present
        cells = cells + [""] * (len(columns) - len(cells))
        rows.append(dict(zip(columns, cells)))
    return rows


def first_match(rows: List[Dict[str, str]], column: str, value: str) -> Optional[Dict[str, str]]:
    key = normalize_column_name(column)
    wanted = value.strip()
    for row in rows:
        if row.get(key, "").strip() == wanted:
            return row
    return None


class WorksheetSource(ABC):
    @abstractmethod
    def get_row_by_column_value(
        self, worksheet: str, column: str, value: str
    ) -> Optional[Dict[str, str]]:
        """Return the row whose ``column`` equals ``value``, or None. Must not raise on no match."""
        ...
