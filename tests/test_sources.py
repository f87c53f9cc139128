import pytest
import responses

from cancer_study_metadata.errors import WorksheetNotFoundError
from cancer_study_metadata.sources.base import normalize_column_name, parse_rows
from cancer_study_metadata.sources.local import DirectoryWorksheetSource
from cancer_study_metadata.sources.sheets import GoogleSheetsWorksheetSource

SHEETS_URL = "https://docs.google.com/spreadsheets/d/sheet-123/gviz/tq"


def test_normalize_column_name():
    assert normalize_column_name("Cancer Studies") == "cancerstudies"
    assert normalize_column_name("Ready_For-Release") == "readyforrelease"
    assert normalize_column_name("stableid") == "stableid"


def test_parse_rows_skips_blank_and_pads_short_rows():
    rows = parse_rows("Stable ID\tName\tPMID\nabc\tA\n\n\t\t\ndef\tD\t42\n")
    assert rows == [
        {"stableid": "abc", "name": "A", "pmid": ""},
        {"stableid": "def", "name": "D", "pmid": "42"},
    ]


def test_parse_rows_empty_text():
    assert parse_rows("") == []


# --- local directory source ---


def test_directory_source_finds_row(tmp_path, cancer_studies_tsv):
    (tmp_path / "cancer_studies.tsv").write_text(cancer_studies_tsv, encoding="utf-8")
    source = DirectoryWorksheetSource(tmp_path)

    row = source.get_row_by_column_value("cancer_studies", "stableid", "lcll_mskcc_foundation")
    assert row["cancerstudies"] == "lcll/mskcc/foundation"
    assert row["shortname"] == "CLL (FMI)"
    assert row["mskccportal"] == ""


def test_directory_source_first_match_wins(tmp_path, cancer_studies_tsv):
    (tmp_path / "cancer_studies.tsv").write_text(cancer_studies_tsv, encoding="utf-8")
    source = DirectoryWorksheetSource(tmp_path)

    row = source.get_row_by_column_value("cancer_studies", "stableid", "brca_icgc_uk")
    assert row["name"] == "BRCA ICGC UK"


def test_directory_source_no_match(tmp_path, cancer_studies_tsv):
    (tmp_path / "cancer_studies.tsv").write_text(cancer_studies_tsv, encoding="utf-8")
    source = DirectoryWorksheetSource(str(tmp_path))
    assert source.get_row_by_column_value("cancer_studies", "stableid", "nope") is None


def test_directory_source_reads_csv(tmp_path):
    (tmp_path / "tumor_types.csv").write_text(
        "Tumor Type,Name\nbrca,Invasive Breast Carcinoma\n", encoding="utf-8"
    )
    source = DirectoryWorksheetSource(tmp_path)
    row = source.get_row_by_column_value("tumor_types", "tumortype", "brca")
    assert row == {"tumortype": "brca", "name": "Invasive Breast Carcinoma"}


def test_directory_source_missing_worksheet(tmp_path):
    source = DirectoryWorksheetSource(tmp_path)
    with pytest.raises(WorksheetNotFoundError):
        source.get_row_by_column_value("cancer_studies", "stableid", "brca_icgc_uk")


# --- Google Sheets source ---


@responses.activate
def test_sheets_source_finds_row(session, fast_limiter):
    body = (
        '"Cancer Studies","Cancer Type","Stable ID","Name"\n'
        '"brca/icgc/uk","brca","brca_icgc_uk","BRCA ICGC UK"\n'
    )
    responses.add(responses.GET, SHEETS_URL, body=body, status=200)

    source = GoogleSheetsWorksheetSource("sheet-123", session, fast_limiter)
    row = source.get_row_by_column_value("cancer_studies", "stableid", "brca_icgc_uk")

    assert row == {
        "cancerstudies": "brca/icgc/uk",
        "cancertype": "brca",
        "stableid": "brca_icgc_uk",
        "name": "BRCA ICGC UK",
    }
    assert "sheet=cancer_studies" in responses.calls[0].request.url
    assert "tqx=out%3Acsv" in responses.calls[0].request.url


@responses.activate
def test_sheets_source_no_match(session, fast_limiter):
    responses.add(responses.GET, SHEETS_URL, body='"Stable ID"\n"other"\n', status=200)

    source = GoogleSheetsWorksheetSource("sheet-123", session, fast_limiter)
    assert source.get_row_by_column_value("cancer_studies", "stableid", "brca_icgc_uk") is None


@responses.activate
def test_sheets_source_http_failure_is_absent(session, fast_limiter, caplog):
    responses.add(responses.GET, SHEETS_URL, status=500)

    source = GoogleSheetsWorksheetSource("sheet-123", session, fast_limiter)
    assert source.get_row_by_column_value("cancer_studies", "stableid", "brca_icgc_uk") is None
    assert "Failed to fetch worksheet cancer_studies" in caplog.text
