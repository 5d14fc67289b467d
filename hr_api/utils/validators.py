from datetime import datetime, date
from decimal import Decimal, InvalidOperation
from typing import Optional

NULL_TOKENS = ("", "NULL", "null", "None")


def is_null(s) -> bool:
    return s is None or str(s).strip() in NULL_TOKENS


def parse_date(s: str) -> date:
    """
    Accepts 'YYYY-MM-DD', a full ISO 8601 timestamp ('YYYY-MM-DDTHH:MM:SSZ',
    with or without offset) or the 'DD-MON-YY' form used by the classic HR dumps.
    Only the calendar date is kept.
    """
    if s is None or not str(s).strip():
        raise ValueError("Empty or null date.")

    txt = str(s).strip()
    # Normalize Z suffix to +00:00 for fromisoformat
    if txt.endswith("Z"):
        txt = txt[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(txt).date()
    except ValueError:
        # Fallback to common formats
        for fmt in ("%d-%b-%y", "%d-%b-%Y", "%Y/%m/%d", "%d/%m/%Y"):
            try:
                return datetime.strptime(txt, fmt).date()
            except ValueError:
                continue
    raise ValueError(f"Invalid date: {s}")


def parse_decimal(s: str) -> Decimal:
    """
    Converts the string into a Decimal with 2 decimal places.
    Raises ValueError if the input is not numeric.
    """
    if s is None or s == "":
        raise ValueError("Empty decimal value.")
    try:
        return Decimal(str(s).strip()).quantize(Decimal("0.01"))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Invalid decimal: {s}") from e


def parse_int(s: str) -> int:
    try:
        return int(str(s).strip())
    except ValueError as e:
        raise ValueError(f"Invalid integer: {s}") from e


def coerce_value(kind: str, s) -> Optional[object]:
    """Coerce one CSV cell; null tokens become None for every kind."""
    if is_null(s):
        return None
    if kind == "int":
        return parse_int(s)
    if kind == "decimal":
        return parse_decimal(s)
    if kind == "date":
        return parse_date(s)
    return str(s).strip()
