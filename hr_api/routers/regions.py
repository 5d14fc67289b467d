from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..crud import insert_batch, list_rows, get_or_404
from ..db import get_db
from ..schemas import RegionBatch, RegionIn
from ..models import Region

router = APIRouter(prefix="/regions", tags=["regions"])

@router.post("/batch")
def batch_insert_regions(items: RegionBatch, db: Session = Depends(get_db)):
    return insert_batch(db, Region, items)

@router.get("", response_model=List[RegionIn])
def list_regions(db: Session = Depends(get_db)):
    return list_rows(db, Region, Region.region_id)

@router.get("/{region_id}", response_model=RegionIn)
def get_region(region_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Region, region_id)
