import logging
from typing import Literal, Optional

import requests
from fastapi import APIRouter, UploadFile, File, Form, Depends, HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from ..db import get_db
from ..utils.csv_ingest import ingest_csv, _open_source
from ..utils.types import TableName, LOAD_ORDER

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ingest", tags=["ingest"])

@router.get("/order")
def load_order():
    return {"order": LOAD_ORDER}

@router.post("/csv")
async def ingest_csv_upload(
    table: TableName = Form(...),
    file: UploadFile = File(None),
    source_path: Optional[str] = Form(None),
    skip_invalid_rows: bool = Form(False, description="Skip invalid rows instead of failing the whole load"),
    mode: Optional[Literal["insert", "upsert"]] = Form(None),
    db: Session = Depends(get_db)
):
    if not file and not source_path:
        raise HTTPException(status_code=400, detail="Provide 'file' or 'source_path'.")

    try:
        content = (await file.read()).decode("utf-8-sig") if file else _open_source(source_path).read()
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail=f"CSV is not valid UTF-8: {e}")
    except (requests.RequestException, OSError) as e:
        logger.warning("Could not read CSV source %s: %s", source_path, e)
        raise HTTPException(status_code=400, detail=f"Could not read source: {e}")

    try:
        result = ingest_csv(db, table, content, skip_invalid_rows=skip_invalid_rows, mode=mode)
    except IntegrityError as e:
        logger.warning("CSV load into %s rejected: %s", table, e.orig)
        raise HTTPException(status_code=409, detail=f"Integrity violation: {e.orig}")
    except (ValueError, SQLAlchemyError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"status": "ok", "table": table, **(result or {})}
