from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import Date, bindparam, text
from starlette.responses import Response
from ..db import get_db
import csv, io

router = APIRouter(prefix="/metrics", tags=["metrics"])

def _csv_response(rows, headers: list[str], filename: str) -> Response:
    buf = io.StringIO()
    w = csv.DictWriter(buf, fieldnames=headers)
    w.writeheader()
    for r in rows:
        d = dict(r) if not isinstance(r, dict) else r
        w.writerow({h: d.get(h, "") for h in headers})
    return Response(
        content=buf.getvalue(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )

def _year_params(year: int) -> dict:
    return {"start": date(year, 1, 1), "end": date(year + 1, 1, 1)}

def _year_bounds(sql: str):
    # Typed binds so dates reach SQLite as ISO strings and Postgres as DATE
    return text(sql).bindparams(bindparam("start", type_=Date), bindparam("end", type_=Date))

@router.get("/hiring_by_quarter")
def hiring_by_quarter(
    year: int = Query(2005, ge=1900, le=2100),
    format: str = Query("json", pattern="^(json|csv)$"),
    include_unknown: bool = Query(True, description="Include rows without department as '(Unknown)'"),
    db: Session = Depends(get_db),
):
    dialect = db.bind.dialect.name
    unknown_filter = "" if include_unknown else "AND e.department_id IS NOT NULL"

    if dialect.startswith("postgresql"):
        quarter = "EXTRACT(QUARTER FROM e.hire_date)::int"
    else:
        # SQLite stores DATE as 'YYYY-MM-DD'
        quarter = "(CAST(strftime('%m', e.hire_date) AS INTEGER) + 2) / 3"

    sql = _year_bounds(f"""
        WITH base AS (
          SELECT
            COALESCE(d.department_name, '(Unknown)') AS department,
            j.job_title AS job,
            {quarter} AS q
          FROM employees e
          LEFT JOIN departments d ON d.department_id = e.department_id
          JOIN jobs j             ON j.job_id = e.job_id
          WHERE e.hire_date >= :start
            AND e.hire_date <  :end
            {unknown_filter}
        )
        SELECT department, job,
          SUM(CASE WHEN q=1 THEN 1 ELSE 0 END) AS "Q1",
          SUM(CASE WHEN q=2 THEN 1 ELSE 0 END) AS "Q2",
          SUM(CASE WHEN q=3 THEN 1 ELSE 0 END) AS "Q3",
          SUM(CASE WHEN q=4 THEN 1 ELSE 0 END) AS "Q4"
        FROM base
        GROUP BY department, job
        ORDER BY department ASC, job ASC;
    """)

    rows = db.execute(sql, _year_params(year)).mappings().all()
    if format == "csv":
        return _csv_response(rows, ["department", "job", "Q1", "Q2", "Q3", "Q4"], f"hiring_by_quarter_{year}.csv")
    return [dict(r) for r in rows]

@router.get("/departments_above_mean")
def departments_above_mean(
    year: int = Query(2005, ge=1900, le=2100),
    format: str = Query("json", pattern="^(json|csv)$"),
    include_unknown: bool = Query(True, description="Include '(Unknown)' as department when missing"),
    db: Session = Depends(get_db),
):
    # If unknowns are not allowed, require department to be not null
    base_where = "e.hire_date >= :start AND e.hire_date < :end" + ("" if include_unknown else " AND e.department_id IS NOT NULL")

    sql = _year_bounds(f"""
        WITH hires AS (
          SELECT
            COALESCE(d.department_id, -1)             AS id,
            COALESCE(d.department_name, '(Unknown)')  AS department,
            COUNT(*)                                  AS hired
          FROM employees e
          LEFT JOIN departments d ON d.department_id = e.department_id
          WHERE {base_where}
          GROUP BY COALESCE(d.department_id, -1), COALESCE(d.department_name, '(Unknown)')
        )
        SELECT id, department, hired
        FROM hires
        WHERE hired > (SELECT AVG(hired) FROM hires)
        ORDER BY hired DESC, department ASC;
    """)
    rows = db.execute(sql, _year_params(year)).mappings().all()
    if format == "csv":
        return _csv_response(rows, ["id", "department", "hired"], f"departments_above_mean_{year}.csv")
    return [dict(r) for r in rows]

@router.get("/salary_by_department")
def salary_by_department(
    format: str = Query("json", pattern="^(json|csv)$"),
    db: Session = Depends(get_db),
):
    sql = text("""
        SELECT
          d.department_id              AS id,
          d.department_name            AS department,
          COUNT(e.employee_id)         AS headcount,
          MIN(e.salary)                AS min_salary,
          MAX(e.salary)                AS max_salary,
          ROUND(AVG(e.salary), 2)      AS avg_salary
        FROM departments d
        LEFT JOIN employees e ON e.department_id = d.department_id
        GROUP BY d.department_id, d.department_name
        ORDER BY d.department_id ASC;
    """)
    rows = db.execute(sql).mappings().all()
    headers = ["id", "department", "headcount", "min_salary", "max_salary", "avg_salary"]
    if format == "csv":
        return _csv_response(rows, headers, "salary_by_department.csv")
    return [dict(r) for r in rows]
