from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..crud import insert_batch, list_rows, get_or_404
from ..db import get_db
from ..schemas import CountryBatch, CountryIn
from ..models import Country

router = APIRouter(prefix="/countries", tags=["countries"])

@router.post("/batch")
def batch_insert_countries(items: CountryBatch, db: Session = Depends(get_db)):
    return insert_batch(db, Country, items)

@router.get("", response_model=List[CountryIn])
def list_countries(db: Session = Depends(get_db)):
    return list_rows(db, Country, Country.country_id)

@router.get("/{country_id}", response_model=CountryIn)
def get_country(country_id: str, db: Session = Depends(get_db)):
    return get_or_404(db, Country, country_id.upper())
