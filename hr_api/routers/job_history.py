from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..crud import insert_batch, list_rows
from ..db import get_db
from ..schemas import JobHistoryBatch, JobHistoryIn
from ..models import JobHistory

router = APIRouter(prefix="/job_history", tags=["job_history"])

@router.post("/batch")
def batch_insert_job_history(items: JobHistoryBatch, db: Session = Depends(get_db)):
    return insert_batch(db, JobHistory, items)

@router.get("", response_model=List[JobHistoryIn])
def list_job_history(db: Session = Depends(get_db)):
    return list_rows(db, JobHistory, JobHistory.employee_id, JobHistory.start_date)
