from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session
from ..crud import insert_batch, get_or_404, update_row
from ..db import get_db
from ..schemas import EmployeeBatch, EmployeeIn, EmployeeUpdate, JobHistoryIn
from ..models import Employee, JobHistory

router = APIRouter(prefix="/employees", tags=["employees"])

# Ingestion from JSON; a manager must come earlier in the batch than their reports
@router.post("/batch")
def batch_insert_employees(items: EmployeeBatch, db: Session = Depends(get_db)):
    return insert_batch(db, Employee, items)

@router.get("", response_model=List[EmployeeIn])
def list_employees(
    department_id: Optional[int] = None,
    manager_id: Optional[int] = None,
    job_id: Optional[str] = None,
    db: Session = Depends(get_db),
):
    stmt = select(Employee).order_by(Employee.employee_id)
    if department_id is not None:
        stmt = stmt.where(Employee.department_id == department_id)
    if manager_id is not None:
        stmt = stmt.where(Employee.manager_id == manager_id)
    if job_id:
        stmt = stmt.where(Employee.job_id == job_id)
    return db.scalars(stmt).all()

@router.get("/{employee_id}", response_model=EmployeeIn)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Employee, employee_id)

@router.get("/{employee_id}/job_history", response_model=List[JobHistoryIn])
def get_employee_job_history(employee_id: int, db: Session = Depends(get_db)):
    get_or_404(db, Employee, employee_id)
    stmt = select(JobHistory).where(JobHistory.employee_id == employee_id).order_by(JobHistory.start_date)
    return db.scalars(stmt).all()

@router.patch("/{employee_id}", response_model=EmployeeIn)
def update_employee(employee_id: int, changes: EmployeeUpdate, db: Session = Depends(get_db)):
    return update_row(db, Employee, employee_id, changes.model_dump(exclude_unset=True))
