"""Repository — wires a worksheet source from settings and exposes study lookups."""

import logging
from typing import Iterable, List, Optional

import requests

from cancer_study_metadata.config import USER_AGENT, Settings
from cancer_study_metadata.lookup import LookupResult, find_by_stable_id, find_by_study_name
from cancer_study_metadata.rate_limiter import RateLimiter
from cancer_study_metadata.sources import (
    DirectoryWorksheetSource,
    GoogleSheetsWorksheetSource,
    WorksheetSource,
)

logger = logging.getLogger(__name__)


class StudyMetadataRepository:
    def __init__(self, source: WorksheetSource):
        self._source = source

    @classmethod
    def from_settings(
        cls, settings: Settings, session: Optional[requests.Session] = None
    ) -> "StudyMetadataRepository":
        """Use Google Sheets when a spreadsheet id is configured, else the worksheet directory."""
        if settings.spreadsheet_id:
            if session is None:
                session = requests.Session()
                session.headers.update({"User-Agent": USER_AGENT})
            limiter = RateLimiter(settings.requests_per_second)
            logger.info("Reading worksheets from spreadsheet %s", settings.spreadsheet_id)
            return cls(GoogleSheetsWorksheetSource(settings.spreadsheet_id, session, limiter))
        if settings.worksheet_dir:
            logger.info("Reading worksheets from %s", settings.worksheet_dir)
            return cls(DirectoryWorksheetSource(settings.worksheet_dir))
        raise ValueError(
            "No worksheet source configured: set CANCER_STUDY_SPREADSHEET_ID "
            "or CANCER_STUDY_WORKSHEET_DIR"
        )

    @property
    def source(self) -> WorksheetSource:
        return self._source

    def find_by_stable_id(self, stable_id: Optional[str]) -> LookupResult:
        return find_by_stable_id(self._source, stable_id)

    def find_by_study_name(self, study_name: Optional[str]) -> LookupResult:
        return find_by_study_name(self._source, study_name)

    def find_all_by_stable_id(self, stable_ids: Iterable[str]) -> List[LookupResult]:
        """Look up each stable id, in order."""
        return [self.find_by_stable_id(sid) for sid in stable_ids]
