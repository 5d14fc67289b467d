from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.orm import Session
from ..db import get_db
from ..views import emp_details_view, VIEW_COLUMNS
from .metrics import _csv_response

router = APIRouter(prefix="/emp_details", tags=["emp_details"])

@router.get("")
def list_emp_details(
    department_id: Optional[int] = None,
    country_id: Optional[str] = Query(None, min_length=2, max_length=2),
    region_name: Optional[str] = None,
    format: str = Query("json", pattern="^(json|csv)$"),
    db: Session = Depends(get_db),
):
    v = emp_details_view.c
    stmt = select(emp_details_view).order_by(v.employee_id)
    if department_id is not None:
        stmt = stmt.where(v.department_id == department_id)
    if country_id:
        stmt = stmt.where(v.country_id == country_id.upper())
    if region_name:
        stmt = stmt.where(v.region_name == region_name)

    rows = db.execute(stmt).mappings().all()
    if format == "csv":
        return _csv_response(rows, VIEW_COLUMNS, "emp_details.csv")
    return [dict(r) for r in rows]
