"""Read worksheets exported as TSV/CSV files into a local directory."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from cancer_study_metadata.errors import WorksheetNotFoundError
from cancer_study_metadata.sources.base import WorksheetSource, first_match, parse_rows

logger = logging.getLogger(__name__)

# Checked in order; TSV wins when both exist
_EXTENSIONS = ((".tsv", "\t"), (".csv", ","))


class DirectoryWorksheetSource(WorksheetSource):
    """One file per worksheet: ``<directory>/<worksheet>.tsv`` or ``.csv``."""

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory)

    def get_row_by_column_value(
        self, worksheet: str, column: str, value: str
    ) -> Optional[Dict[str, str]]:
        row = first_match(self._read_worksheet(worksheet), column, value)
        if row is None:
            logger.debug("No row in %s with %s=%s", worksheet, column, value)
        return row

    def _read_worksheet(self, worksheet: str) -> List[Dict[str, str]]:
        for ext, delimiter in _EXTENSIONS:
            path = self._directory / f"{worksheet}{ext}"
            if path.is_file():
                logger.debug("Reading worksheet %s from %s", worksheet, path)
                return parse_rows(path.read_text(encoding="utf-8"), delimiter)
        raise WorksheetNotFoundError(
            f"No .tsv or .csv file for worksheet '{worksheet}' in {self._directory}"
        )
