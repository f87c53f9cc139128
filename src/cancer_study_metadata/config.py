"""Worksheet names and environment-driven settings."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

WORKSHEET_CANCER_STUDIES = "cancer_studies"
WORKSHEET_TUMOR_TYPES = "tumor_types"

STABLE_ID_COLUMN = "stableid"

# Column holding each worksheet's unique name
ID_COLUMN_MAP = {
    WORKSHEET_CANCER_STUDIES: "cancerstudies",
    WORKSHEET_TUMOR_TYPES: "tumortype",
}

DEFAULT_REQUESTS_PER_SECOND = 5.0
USER_AGENT = "cancerStudyMetadata/0.1.0"


@dataclass(frozen=True)
class Settings:
    spreadsheet_id: Optional[str] = None
    worksheet_dir: Optional[str] = None
    requests_per_second: float = DEFAULT_REQUESTS_PER_SECOND

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from CANCER_STUDY_* environment variables."""
        rate_text = os.environ.get("CANCER_STUDY_REQUESTS_PER_SECOND", "")
        rate = DEFAULT_REQUESTS_PER_SECOND
        if rate_text.strip():
            try:
                rate = float(rate_text)
            except ValueError:
                logger.warning(
                    "Ignoring invalid CANCER_STUDY_REQUESTS_PER_SECOND=%r, using %s",
                    rate_text, DEFAULT_REQUESTS_PER_SECOND,
                )
        return cls(
            spreadsheet_id=os.environ.get("CANCER_STUDY_SPREADSHEET_ID") or None,
            worksheet_dir=os.environ.get("CANCER_STUDY_WORKSHEET_DIR") or None,
            requests_per_second=rate,
        )
