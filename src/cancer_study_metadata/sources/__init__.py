"""Worksheet sources — add new source classes here."""

from cancer_study_metadata.sources.base import WorksheetSource
from cancer_study_metadata.sources.local import DirectoryWorksheetSource
from cancer_study_metadata.sources.sheets import GoogleSheetsWorksheetSource

__all__ = [
    "WorksheetSource",
    "DirectoryWorksheetSource",
    "GoogleSheetsWorksheetSource",
]
