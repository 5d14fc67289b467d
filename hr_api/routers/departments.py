from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..crud import insert_batch, list_rows, get_or_404, update_row
from ..db import get_db
from ..schemas import DepartmentBatch, DepartmentIn, DepartmentUpdate
from ..models import Department

router = APIRouter(prefix="/departments", tags=["departments"])

@router.post("/batch")
def batch_insert_departments(items: DepartmentBatch, db: Session = Depends(get_db)):
    return insert_batch(db, Department, items)

@router.get("", response_model=List[DepartmentIn])
def list_departments(db: Session = Depends(get_db)):
    return list_rows(db, Department, Department.department_id)

@router.get("/{department_id}", response_model=DepartmentIn)
def get_department(department_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Department, department_id)

# Departments are loaded before employees, so managers are assigned here afterwards
@router.patch("/{department_id}", response_model=DepartmentIn)
def update_department(department_id: int, changes: DepartmentUpdate, db: Session = Depends(get_db)):
    return update_row(db, Department, department_id, changes.model_dump(exclude_unset=True))
