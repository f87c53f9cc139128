"""Read worksheets from a published Google Sheets spreadsheet."""

import logging
from typing import Dict, Optional

import requests
from tenacity import RetryError, retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from cancer_study_metadata.rate_limiter import RateLimiter
from cancer_study_metadata.sources.base import WorksheetSource, first_match, parse_rows

logger = logging.getLogger(__name__)

SHEETS_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/gviz/tq"


class GoogleSheetsWorksheetSource(WorksheetSource):
    def __init__(
        self,
        spreadsheet_id: str,
        session: requests.Session,
        rate_limiter: RateLimiter,
    ):
        self._spreadsheet_id = spreadsheet_id
        self._session = session
        self._limiter = rate_limiter

    def get_row_by_column_value(
        self, worksheet: str, column: str, value: str
    ) -> Optional[Dict[str, str]]:
        text = self._fetch_worksheet(worksheet)
        if text is None:
            return None
        row = first_match(parse_rows(text, delimiter=","), column, value)
        if row is None:
            logger.debug("No row in %s with %s=%s", worksheet, column, value)
        return row

    def _fetch_worksheet(self, worksheet: str) -> Optional[str]:
        url = SHEETS_EXPORT_URL.format(spreadsheet_id=self._spreadsheet_id)
        params = {"tqx": "out:csv", "sheet": worksheet}
        try:
            resp = self._http_get_with_retry(url, params)
        except (requests.RequestException, RetryError):
            logger.warning("Failed to fetch worksheet %s from %s", worksheet, url, exc_info=True)
            return None
        return resp.text

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
    )
    def _http_get_with_retry(self, url: str, params: dict) -> requests.Response:
        self._limiter.acquire()
        resp = self._session.get(url, params=params, timeout=30)
        if resp.status_code == 429:
            raise requests.ConnectionError("Rate limited (429)")
        resp.raise_for_status()
        return resp
