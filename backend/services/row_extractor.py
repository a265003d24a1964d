import logging
from io import BytesIO, StringIO

import pandas as pd

from models.enrichment import Company
from services.errors import RowParseError

logger = logging.getLogger(__name__)

# checked in order; first non-empty value wins
COMPANY_NAME_ALIASES = ("company", "Company", "business_name", "Company Name")

EXCEL_SUFFIXES = (".xlsx", ".xls")


def resolve_company_name(record: dict[str, str]) -> str | None:
    for alias in COMPANY_NAME_ALIASES:
        value = record.get(alias)
        if value:
            return value

    first = next(iter(record.values()), None)
    return first or None


def _read_frame(contents: bytes, filename: str | None) -> pd.DataFrame:
    name = (filename or "").lower()
    if name.endswith(EXCEL_SUFFIXES):
        return pd.read_excel(BytesIO(contents), dtype=str, keep_default_na=False)

    text = contents.decode("utf-8-sig")
    if not text.strip():
        return pd.DataFrame()
    # index_col=False keeps the header mapping when rows carry a trailing extra field
    return pd.read_csv(StringIO(text), dtype=str, keep_default_na=False, index_col=False)


def _to_record(row: dict) -> dict[str, str]:
    return {str(k): "" if pd.isna(v) else str(v) for k, v in row.items()}


def extract_companies(contents: bytes, filename: str | None = None) -> list[Company]:
    try:
        df = _read_frame(contents, filename)
    except (UnicodeDecodeError, ValueError, pd.errors.ParserError) as exc:
        raise RowParseError(f"Failed to parse file: {exc}") from exc

    companies: list[Company] = []
    for row in df.to_dict(orient="records"):
        record = _to_record(row)
        name = resolve_company_name(record)
        if name:
            companies.append(Company(name=name, original_row=record))

    logger.info("Parsed %s rows, %s with a company name", len(df), len(companies))
    return companies
