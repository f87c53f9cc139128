"""Shared fixtures for cancer-study-metadata tests."""

from typing import Dict, List, Optional, Tuple

import pytest
import requests

from cancer_study_metadata.rate_limiter import RateLimiter
from cancer_study_metadata.sources.base import WorksheetSource


class StubWorksheetSource(WorksheetSource):
    """Serves canned rows and records every call."""

    def __init__(self, rows: Optional[List[Dict[str, str]]] = None):
        self.rows = rows or []
        self.calls: List[Tuple[str, str, str]] = []

    def get_row_by_column_value(self, worksheet, column, value):
        self.calls.append((worksheet, column, value))
        for row in self.rows:
            if row.get(column) == value:
                return row
        return None


@pytest.fixture
def fast_limiter():
    """Rate limiter that never blocks (high rate)."""
    return RateLimiter(10_000)


@pytest.fixture
def session():
    return requests.Session()


@pytest.fixture
def brca_row():
    """Worksheet row for brca_icgc_uk, with the padding hand-edited sheets tend to have."""
    return {
        "cancerstudies": " brca/icgc/uk ",
        "cancertype": "brca",
        "stableid": "brca_icgc_uk",
        "name": "BRCA ICGC UK",
        "description": "ICGC breast cancer study, <NUM_CASES> samples ",
        "citation": "Nik-Zainal et al. 2016",
        "pmid": "27135926",
        "groups": "PUBLIC;ICGC",
        "shortname": "BRCA (ICGC UK)",
        "convert": "TRUE",
        "requiresvalidation": "false",
        "updatetriage": "yes",
        "readyforrelease": "",
    }


@pytest.fixture
def stub_source(brca_row):
    return StubWorksheetSource([brca_row])


@pytest.fixture
def empty_source():
    return StubWorksheetSource()


@pytest.fixture
def lcll_properties():
    return [
        "lcll/mskcc/foundation",
        "lcll",
        "lcll_mskcc_foundation",
        "Lymphocytic Leukemia (MSKCC/Foundation)",
        "Targeted sequencing of <NUM_CASES> <TUMOR_TYPE> samples",
        "MSKCC/Foundation",
        "",
        "PUBLIC",
        "CLL (FMI)",
        "true",
        "true",
        "false",
        "false",
    ]


@pytest.fixture
def cancer_studies_tsv():
    return (
        "Cancer Studies\tCancer Type\tStable ID\tName\tDescription\tCitation\tPMID\t"
        "Groups\tShort Name\tConvert\tRequires Validation\tUpdate Triage\tReady For Release\tmskcc-portal\n"
        "brca/icgc/uk\tbrca\tbrca_icgc_uk\tBRCA ICGC UK\tBreast study\tNik-Zainal 2016\t27135926\t"
        "PUBLIC\tBRCA (UK)\ttrue\tfalse\tfalse\ttrue\tx\n"
        "lcll/mskcc/foundation\tlcll\tlcll_mskcc_foundation\tCLL Foundation\tLeukemia study\t\t\t"
        "PUBLIC\tCLL (FMI)\tfalse\tfalse\tfalse\tfalse\t\n"
        "\n"
        "brca/icgc/uk\tbrca\tbrca_icgc_uk\tDuplicate Row\t\t\t\t\t\tfalse\tfalse\tfalse\tfalse\t\n"
    )
