import logging

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def insert_batch(db: Session, model, items) -> dict:
    """Insert validated rows in one transaction; any violation rolls back the batch."""
    payload = [i.model_dump() for i in items]

    try:
        with db.begin():
            db.bulk_insert_mappings(model, payload)
    except IntegrityError as e:
        logger.warning("Batch insert into %s rejected: %s", model.__tablename__, e.orig)
        raise HTTPException(status_code=409, detail=f"Integrity violation: {e.orig}")
    except SQLAlchemyError as e:
        raise HTTPException(status_code=400, detail=f"Insert failed: {e}")

    logger.info("Inserted %d row(s) into %s", len(payload), model.__tablename__)
    return {"inserted": len(payload)}


def list_rows(db: Session, model, *order_by):
    return db.scalars(select(model).order_by(*order_by)).all()


def get_or_404(db: Session, model, key):
    row = db.get(model, key)
    if row is None:
        raise HTTPException(status_code=404, detail=f"{model.__name__} {key} not found")
    return row


def update_row(db: Session, model, key, changes: dict):
    """Apply a partial update; constraint checks happen at commit."""
    try:
        with db.begin():
            row = get_or_404(db, model, key)
            for field, value in changes.items():
                setattr(row, field, value)
    except IntegrityError as e:
        logger.warning("Update of %s %s rejected: %s", model.__tablename__, key, e.orig)
        raise HTTPException(status_code=409, detail=f"Integrity violation: {e.orig}")

    db.refresh(row)
    return row
