"""Write cancer study records to TSV/CSV worksheet exports."""

import csv
import io
from typing import List

from cancer_study_metadata.models import PROPERTY_COLUMNS, CancerStudyMetadata


def write_tsv(records: List[CancerStudyMetadata], filepath: str) -> None:
    _write(records, filepath, delimiter="\t")


def write_csv(records: List[CancerStudyMetadata], filepath: str) -> None:
    _write(records, filepath, delimiter=",")


def _write(records: List[CancerStudyMetadata], filepath: str, delimiter: str) -> None:
    with open(filepath, "w", newline="", encoding="utf-8") as fh:
        _write_rows(fh, records, delimiter)


def _write_rows(fh, records: List[CancerStudyMetadata], delimiter: str) -> None:
    writer = csv.DictWriter(fh, fieldnames=PROPERTY_COLUMNS, delimiter=delimiter)
    writer.writeheader()
    for rec in records:
        writer.writerow(rec.to_properties())


def records_to_bytes(records: List[CancerStudyMetadata], fmt: str = "tsv") -> bytes:
    buf = io.StringIO()
    _write_rows(buf, records, "\t" if fmt == "tsv" else ",")
    return buf.getvalue().encode("utf-8")
