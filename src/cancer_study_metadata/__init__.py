"""Cancer study metadata records for the portal importer."""

from cancer_study_metadata.errors import (
    ArityError,
    MalformedPathError,
    MissingFieldError,
    StudyMetadataError,
    WorksheetNotFoundError,
)
from cancer_study_metadata.lookup import NOT_FOUND, Found, NotFound, find_by_stable_id, find_by_study_name
from cancer_study_metadata.models import (
    CancerStudy,
    CancerStudyMetadata,
    EnrichedStudyMetadata,
    TumorTypeMetadata,
    attach_tumor_type,
)

__version__ = "0.1.0"
