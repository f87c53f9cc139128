"""Resolve a single cancer study record from a worksheet source by unique key."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from cancer_study_metadata.config import ID_COLUMN_MAP, STABLE_ID_COLUMN, WORKSHEET_CANCER_STUDIES
from cancer_study_metadata.models import CancerStudyMetadata
from cancer_study_metadata.sources.base import WorksheetSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    record: CancerStudyMetadata

    @property
    def is_found(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    @property
    def is_found(self) -> bool:
        return False


NOT_FOUND = NotFound()

LookupResult = Union[Found, NotFound]


def find_by_stable_id(source: WorksheetSource, stable_id: Optional[str]) -> LookupResult:
    """Look up a study in the cancer_studies worksheet by its stable id."""
    return _find(source, "cancer_studies", STABLE_ID_COLUMN, stable_id)


def find_by_study_name(source: WorksheetSource, study_name: Optional[str]) -> LookupResult:
    """Look up a study by its unique name (the study path, e.g. 'lcll/mskcc/foundation')."""
    return _find(source, WORKSHEET_CANCER_STUDIES, ID_COLUMN_MAP[WORKSHEET_CANCER_STUDIES], study_name)


def _find(source: WorksheetSource, worksheet: str, column: str, value: Optional[str]) -> LookupResult:
    if not value:
        return NOT_FOUND
    row = source.get_row_by_column_value(worksheet, column, value)
    if row is None:
        logger.info("No cancer study with %s=%s in %s", column, value, worksheet)
        return NOT_FOUND
    return Found(CancerStudyMetadata.from_worksheet_row(row))
