"""Exceptions raised while building or locating cancer study metadata."""


class StudyMetadataError(Exception):
    """Base class for all cancer-study-metadata errors."""


class MissingFieldError(StudyMetadataError, KeyError):
    """A required column or property is absent or None."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"missing required field '{self.field}'"


class ArityError(StudyMetadataError, ValueError):
    """A positional property array is shorter than the fixed layout."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"corrupt properties array: expected at least {expected} values, got {actual}"
        )


class MalformedPathError(StudyMetadataError, ValueError):
    """A study path lacks the tumor type and/or center segment."""

    def __init__(self, study_path: str):
        self.study_path = study_path
        super().__init__(
            f"cancer study path '{study_path}' is missing tumor type and/or center"
        )


class WorksheetNotFoundError(StudyMetadataError):
    """A worksheet source has no data for the requested worksheet."""
