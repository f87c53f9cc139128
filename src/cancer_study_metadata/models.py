"""Cancer study metadata record — the single contract between worksheets and the importer."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from cancer_study_metadata.errors import ArityError, MalformedPathError, MissingFieldError

logger = logging.getLogger(__name__)

# Column keys used when writing a record back to the worksheet
WORKSHEET_UPDATE_COLUMN_KEY = "CANCERSTUDY"
CANCER_STUDY_COLUMN_KEY = "CANCERSTUDY"
CANCER_TYPE_COLUMN_KEY = "CANCERTYPE"
STABLE_ID_COLUMN_KEY = "STABLEID"
NAME_COLUMN_KEY = "NAME"
DESCRIPTION_COLUMN_KEY = "DESCRIPTION"
CITATION_COLUMN_KEY = "CITATION"
PMID_COLUMN_KEY = "PMID"
GROUPS_COLUMN_KEY = "GROUPS"
SHORT_NAME_COLUMN_KEY = "SHORTNAME"
CONVERT_COLUMN_KEY = "CONVERT"
REQUIRES_VALIDATION_COLUMN_KEY = "REQUIRESVALIDATION"
UPDATE_TRIAGE_COLUMN_KEY = "UPDATETRIAGE"
READY_FOR_RELEASE_COLUMN_KEY = "READYFORRELEASE"

PROPERTY_COLUMNS = [
    CANCER_STUDY_COLUMN_KEY,
    CANCER_TYPE_COLUMN_KEY,
    STABLE_ID_COLUMN_KEY,
    NAME_COLUMN_KEY,
    DESCRIPTION_COLUMN_KEY,
    CITATION_COLUMN_KEY,
    PMID_COLUMN_KEY,
    GROUPS_COLUMN_KEY,
    SHORT_NAME_COLUMN_KEY,
    CONVERT_COLUMN_KEY,
    REQUIRES_VALIDATION_COLUMN_KEY,
    UPDATE_TRIAGE_COLUMN_KEY,
    READY_FOR_RELEASE_COLUMN_KEY,
]

# Delimiter between tumor type and center in a study path
CANCER_STUDY_DELIMITER = "/"
GROUPS_DELIMITER = ";"
CANCER_STUDY_IDENTIFIER_DELIMITER = "_"

# Worksheet-matrix cell value marking a study as part of a portal
CANCER_STUDY_IN_PORTAL_INDICATOR = "x"

CANCER_STUDY_METADATA_FILE = "meta_study.txt"

# Description placeholders, substituted downstream
NUM_CASES_TAG = "<NUM_CASES>"
TUMOR_TYPE_TAG = "<TUMOR_TYPE>"
TUMOR_TYPE_NAME_TAG = "<TUMOR_TYPE_NAME>"

# Flattened worksheet column names read by from_worksheet_row
_ROW_STUDY_PATH = "cancerstudies"
_ROW_STUDY_PATH_ALIAS = "cancerstudy"
_ROW_COLUMNS = {
    "tumor_type": "cancertype",
    "stable_id": "stableid",
    "name": "name",
    "description": "description",
    "citation": "citation",
    "pmid": "pmid",
    "groups": "groups",
    "short_name": "shortname",
}
_ROW_FLAG_COLUMNS = {
    "convert": "convert",
    "requires_validation": "requiresvalidation",
    "update_triage": "updatetriage",
    "ready_for_release": "readyforrelease",
}

# Positional layout read by from_properties; anything after is a portal column
_PROPERTY_FIELDS = [
    "study_path",
    "tumor_type",
    "stable_id",
    "name",
    "description",
    "citation",
    "pmid",
    "groups",
    "short_name",
    "convert",
    "requires_validation",
    "update_triage",
    "ready_for_release",
]
PROPERTIES_LENGTH = len(_PROPERTY_FIELDS)


def parse_bool(text: Any) -> bool:
    """Lenient boolean parse: only the text 'true' (any case) is True.

    Upstream worksheets are hand-edited, so anything else (including blanks
    and 'yes') reads as False instead of failing.
    """
    if text is None:
        return False
    return str(text).strip().lower() == "true"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class CancerStudy:
    """A study as stored in the portal database."""

    cancer_study_stable_id: str
    type_of_cancer_id: str
    name: str = ""
    description: str = ""
    citation: str = ""
    pmid: str = ""
    groups: Tuple[str, ...] = field(default_factory=tuple)
    short_name: str = ""


@dataclass(frozen=True)
class CancerStudyMetadata:
    study_path: str
    tumor_type: str
    stable_id: str
    name: str = ""
    description: str = ""
    citation: str = ""
    pmid: str = ""
    groups: str = ""
    short_name: str = ""
    convert: bool = False
    requires_validation: bool = False
    update_triage: bool = False
    ready_for_release: bool = False
    center: str = ""  # only derived from positional properties

    @classmethod
    def from_worksheet_row(cls, row: Mapping[str, Any]) -> "CancerStudyMetadata":
        """Build a record from a worksheet row keyed by flattened column name.

        Keys are matched case-insensitively. Every column is required; values
        are stripped and the four flag columns go through parse_bool.
        """
        normalized = {str(key).strip().lower(): value for key, value in row.items()}

        def required(column: str) -> str:
            value = normalized.get(column)
            if value is None:
                raise MissingFieldError(column)
            return str(value).strip()

        if normalized.get(_ROW_STUDY_PATH) is None and normalized.get(_ROW_STUDY_PATH_ALIAS) is not None:
            study_path = required(_ROW_STUDY_PATH_ALIAS)
        else:
            study_path = required(_ROW_STUDY_PATH)

        values = {attr: required(column) for attr, column in _ROW_COLUMNS.items()}
        flags = {attr: parse_bool(required(column)) for attr, column in _ROW_FLAG_COLUMNS.items()}
        return cls(study_path=study_path, **values, **flags)

    @classmethod
    def from_properties(cls, properties: Sequence[Any]) -> "CancerStudyMetadata":
        """Build a record from the worksheet's fixed column order.

        Layout: study path, cancer type, stable id, name, description,
        citation, pmid, groups, short name, then the convert,
        requires-validation, update-triage and ready-for-release flags.
        Portal columns after position 12 are ignored. The study path must look
        like ``brca/tcga/pub``; its second segment becomes the center.
        """
        if len(properties) < PROPERTIES_LENGTH:
            raise ArityError(PROPERTIES_LENGTH, len(properties))

        for attr, value in zip(_PROPERTY_FIELDS, properties):
            if value is None:
                raise MissingFieldError(attr)

        values = [str(p).strip() for p in properties[:PROPERTIES_LENGTH]]
        study_path = values[0]
        # Trailing empty segments don't count ('brca/' has no center)
        parts = study_path.rstrip(CANCER_STUDY_DELIMITER).split(CANCER_STUDY_DELIMITER)
        if len(parts) < 2:
            raise MalformedPathError(study_path)

        return cls(
            study_path=study_path,
            tumor_type=values[1],
            stable_id=values[2],
            name=values[3],
            description=values[4],
            citation=values[5],
            pmid=values[6],
            groups=values[7],
            short_name=values[8],
            convert=parse_bool(values[9]),
            requires_validation=parse_bool(values[10]),
            update_triage=parse_bool(values[11]),
            ready_for_release=parse_bool(values[12]),
            center=parts[1],
        )

    @classmethod
    def from_cancer_study(cls, study_path: str, cancer_study: CancerStudy) -> "CancerStudyMetadata":
        """Derive a record from a portal study; it is not yet scheduled for import."""
        groups: Optional[Iterable[str]] = cancer_study.groups
        return cls(
            study_path=study_path,
            tumor_type=cancer_study.type_of_cancer_id,
            stable_id=cancer_study.cancer_study_stable_id,
            name=cancer_study.name,
            description=cancer_study.description,
            citation=cancer_study.citation,
            pmid=cancer_study.pmid,
            groups=GROUPS_DELIMITER.join(str(g) for g in groups) if groups else "",
            short_name=cancer_study.short_name,
        )

    @property
    def is_converted(self) -> bool:
        return self.convert

    @property
    def metadata_filename(self) -> str:
        return CANCER_STUDY_METADATA_FILE

    @property
    def identifier_parts(self) -> List[str]:
        return self.stable_id.split(CANCER_STUDY_IDENTIFIER_DELIMITER)

    def to_properties(self) -> Dict[str, str]:
        """Return the worksheet columns in PROPERTY_COLUMNS order."""
        return {
            CANCER_STUDY_COLUMN_KEY: self.study_path,
            CANCER_TYPE_COLUMN_KEY: self.tumor_type,
            STABLE_ID_COLUMN_KEY: self.stable_id,
            NAME_COLUMN_KEY: self.name,
            DESCRIPTION_COLUMN_KEY: self.description,
            CITATION_COLUMN_KEY: self.citation,
            PMID_COLUMN_KEY: self.pmid,
            GROUPS_COLUMN_KEY: self.groups,
            SHORT_NAME_COLUMN_KEY: self.short_name,
            CONVERT_COLUMN_KEY: _format_bool(self.convert),
            REQUIRES_VALIDATION_COLUMN_KEY: _format_bool(self.requires_validation),
            UPDATE_TRIAGE_COLUMN_KEY: _format_bool(self.update_triage),
            READY_FOR_RELEASE_COLUMN_KEY: _format_bool(self.ready_for_release),
        }

    def __str__(self) -> str:
        return self.stable_id


@dataclass(frozen=True)
class TumorTypeMetadata:
    tumor_type: str
    name: str = ""
    color: str = ""
    parent: str = ""


@dataclass(frozen=True)
class EnrichedStudyMetadata:
    """A study record paired with the tumor type attached during enrichment."""

    study: CancerStudyMetadata
    tumor_type_metadata: TumorTypeMetadata

    @property
    def stable_id(self) -> str:
        return self.study.stable_id

    def __str__(self) -> str:
        return self.study.stable_id


def attach_tumor_type(
    study: CancerStudyMetadata, tumor_type_metadata: TumorTypeMetadata
) -> EnrichedStudyMetadata:
    if tumor_type_metadata.tumor_type.lower() != study.tumor_type.lower():
        logger.warning(
            "Attaching tumor type %s to study %s (cancer type %s)",
            tumor_type_metadata.tumor_type, study.stable_id, study.tumor_type,
        )
    return EnrichedStudyMetadata(study=study, tumor_type_metadata=tumor_type_metadata)
