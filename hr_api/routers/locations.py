from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.orm import Session
from ..crud import insert_batch, get_or_404
from ..db import get_db
from ..schemas import LocationBatch, LocationIn
from ..models import Location

router = APIRouter(prefix="/locations", tags=["locations"])

@router.post("/batch")
def batch_insert_locations(items: LocationBatch, db: Session = Depends(get_db)):
    return insert_batch(db, Location, items)

@router.get("", response_model=List[LocationIn])
def list_locations(
    country_id: Optional[str] = Query(None, min_length=2, max_length=2),
    city: Optional[str] = None,
    db: Session = Depends(get_db),
):
    # Both filters are served by loc_country_ix / loc_city_ix
    stmt = select(Location).order_by(Location.location_id)
    if country_id:
        stmt = stmt.where(Location.country_id == country_id.upper())
    if city:
        stmt = stmt.where(Location.city == city)
    return db.scalars(stmt).all()

@router.get("/{location_id}", response_model=LocationIn)
def get_location(location_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Location, location_id)
