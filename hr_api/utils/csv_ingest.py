import csv
import io
import logging
import os
from typing import Dict, List

import requests
from pydantic import ValidationError
from sqlalchemy import bindparam, text
from sqlalchemy.orm import Session

from ..config import HEADER_MAPS, SETTINGS
from ..models import Base
from ..schemas import RegionIn, CountryIn, LocationIn, DepartmentIn, JobIn, EmployeeIn, JobHistoryIn
from .types import TableName, COLUMN_TYPES, EXPECTED_HEADERS, REQUIRED_COLUMNS, PRIMARY_KEYS
from .validators import coerce_value

logger = logging.getLogger(__name__)

# Same row rules as the JSON batch endpoints
ROW_SCHEMAS = {
    "regions": RegionIn,
    "countries": CountryIn,
    "locations": LocationIn,
    "departments": DepartmentIn,
    "jobs": JobIn,
    "employees": EmployeeIn,
    "job_history": JobHistoryIn,
}

# ----------------------------
# IO Utilities
# ----------------------------
def _open_source(source: str) -> io.StringIO:
    if source.startswith(("http://", "https://")):
        r = requests.get(source, timeout=30)
        r.raise_for_status()
        return io.StringIO(r.text)
    if os.path.isfile(source):
        with open(source, "r", encoding="utf-8") as f:
            return io.StringIO(f.read())
    # Direct content
    return io.StringIO(source)

def _clean_header(h: str) -> str:
    # Remove BOM, strip spaces, and lowercase
    return h.replace("\ufeff", "").strip().lower()

# ----------------------------
# Header normalization
# ----------------------------
def _normalize_headers(headers: List[str], table: TableName) -> Dict[str, str]:
    expected = EXPECTED_HEADERS[table]

    # alias -> standard (from YAML)
    aliases = HEADER_MAPS.get(table, {}) if isinstance(HEADER_MAPS, dict) else {}
    alias_to_std = {}
    for std, alias_list in (aliases or {}).items():
        for alias in alias_list or []:
            alias_to_std[_clean_header(alias)] = std

    # Build mapping from actual headers
    mapping: Dict[str, str] = {}
    for h in headers:
        ch = _clean_header(h)
        std = alias_to_std.get(ch)
        if std:
            mapping[h] = std
        elif ch in expected:
            mapping[h] = ch

    found = set(mapping.values())
    missing_required = [c for c in REQUIRED_COLUMNS[table] if c not in found]
    if missing_required:
        raise ValueError(f"CSV headers missing required {missing_required} for {table}. Got: {headers}")

    missing = [c for c in expected if c not in found]
    if missing:
        if SETTINGS.get("ingest", {}).get("fail_fast_on_header_mismatch", False):
            raise ValueError(f"CSV headers missing {missing} for {table}. Got: {headers}")
        logger.info("CSV for %s has no column(s) %s; loading them as NULL", table, missing)
    return mapping

# ----------------------------
# Type coercion by table
# ----------------------------
def _coerce_row(table: TableName, row: Dict[str, str], header_map: Dict[str, str]) -> Dict[str, object]:
    kinds = COLUMN_TYPES[table]
    norm = {header_map[k]: v for k, v in row.items() if k in header_map}

    out: Dict[str, object] = {}
    for col, kind in kinds.items():
        try:
            out[col] = coerce_value(kind, norm.get(col))
        except ValueError as e:
            raise ValueError(f"column '{col}': {e}") from e

    for col in REQUIRED_COLUMNS[table]:
        if out[col] is None:
            raise ValueError(f"{col} is empty or null")

    try:
        return ROW_SCHEMAS[table].model_validate(out).model_dump()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'row'}: {err['msg']}" for err in e.errors()
        )
        raise ValueError(problems) from e

# ----------------------------
# UPSERT helpers
# ----------------------------
def _update_set_clause(table: TableName, present: List[str]) -> str:
    # Only columns the CSV carries; absent ones keep their stored values
    cols = [c for c in EXPECTED_HEADERS[table] if c not in PRIMARY_KEYS[table] and c in present]
    return ", ".join([f"{c}=excluded.{c}" for c in cols])

def _build_upsert_sql(dialect: str, table: TableName, mode: str, present: List[str] = None) -> str:
    cols = EXPECTED_HEADERS[table]
    placeholders = ",".join([f":{c}" for c in cols])
    col_list = ",".join(cols)
    target = ",".join(PRIMARY_KEYS[table])
    insert = f"INSERT INTO {table} ({col_list}) VALUES ({placeholders})"

    if mode == "insert":
        return insert

    if mode == "upsert":
        if dialect.startswith(("sqlite", "postgresql")):
            set_clause = _update_set_clause(table, EXPECTED_HEADERS[table] if present is None else present)
            if not set_clause:
                return f"{insert} ON CONFLICT({target}) DO NOTHING"
            return f"{insert} ON CONFLICT({target}) DO UPDATE SET {set_clause}"
        raise ValueError(f"Upsert is not supported on dialect '{dialect}'.")

    raise ValueError("Invalid mode. Use 'insert' or 'upsert'.")

def _typed_statement(table: TableName, sql: str):
    # Bind through the column types so dates and decimals convert per dialect
    columns = Base.metadata.tables[table].c
    return text(sql).bindparams(*[bindparam(c, type_=columns[c].type) for c in EXPECTED_HEADERS[table]])

# ----------------------------
# Main ingestion logic
# ----------------------------
def ingest_csv(db: Session, table: TableName, content: str, skip_invalid_rows: bool = False, mode: str = None):
    """
    Transactional ingestion from CSV.
    - skip_invalid_rows=True: skip rows with missing required values, bad
      ints/decimals/dates or values the row schema rejects (lengths,
      salary > 0, end_date > start_date) and count them.
    - mode: "insert" (default from settings.yaml) or "upsert"
      (INSERT ... ON CONFLICT(<primary key>) DO UPDATE on SQLite and Postgres;
      only the columns present in the CSV are overwritten).
    Foreign keys are checked by the database, so tables must be loaded in
    LOAD_ORDER; a dangling reference fails the whole load.
    """
    if table not in COLUMN_TYPES:
        raise ValueError(f"Unsupported table: {table}")

    settings = SETTINGS.get("ingest", {})
    mode = mode or settings.get("mode", "insert")
    dialect = db.bind.dialect.name
    _build_upsert_sql(dialect, table, mode)  # reject a bad mode before reading

    sio = io.StringIO(content)
    reader = csv.reader(sio)
    headers = next(reader, None)
    if not headers:
        raise ValueError("CSV is empty or missing headers.")

    header_map = _normalize_headers(headers, table)
    sql = _build_upsert_sql(dialect, table, mode, present=list(header_map.values()))

    # 1) Parsing + coercion + skipped row count
    sio.seek(0)
    dict_reader = csv.DictReader(sio)
    normalized_rows: List[Dict[str, object]] = []
    errors = 0
    max_rows = settings.get("max_rows")

    for idx, r in enumerate(dict_reader, start=2):  # start=2 because of header
        if max_rows and len(normalized_rows) + errors >= max_rows:
            raise ValueError(f"CSV exceeds the limit of {max_rows} rows.")
        try:
            normalized_rows.append(_coerce_row(table, r, header_map))
        except ValueError as e:
            if skip_invalid_rows:
                errors += 1
                logger.warning("Skipping row %d of %s: %s", idx, table, e)
                continue
            raise ValueError(f"Error in row {idx}: {e}") from e

    if not normalized_rows:
        # Nothing to insert
        return {"inserted": 0, "skipped": errors}

    # 2) INSERT / UPSERT
    with db.begin():
        db.execute(_typed_statement(table, sql), normalized_rows)

    logger.info("Loaded %d row(s) into %s (mode=%s, skipped=%d)", len(normalized_rows), table, mode, errors)
    return {"inserted": len(normalized_rows), "skipped": errors}
