from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..crud import insert_batch, list_rows, get_or_404
from ..db import get_db
from ..schemas import JobBatch, JobIn
from ..models import Job

router = APIRouter(prefix="/jobs", tags=["jobs"])

# Ingestion from JSON
@router.post("/batch")
def batch_insert_jobs(items: JobBatch, db: Session = Depends(get_db)):
    return insert_batch(db, Job, items)

@router.get("", response_model=List[JobIn])
def list_jobs(db: Session = Depends(get_db)):
    return list_rows(db, Job, Job.job_id)

@router.get("/{job_id}", response_model=JobIn)
def get_job(job_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Job, job_id)
