import logging.config

from fastapi import FastAPI
from .config import LOGGING_CONFIG
from .routers import (
    ingest, regions, countries, locations, departments, jobs, employees, job_history, emp_details, metrics,
)

logging.config.dictConfig(LOGGING_CONFIG)

# Initialize FastAPI application
app = FastAPI(title="HR Schema API", version="1.0.0")

# Register routers
app.include_router(ingest.router)
app.include_router(regions.router)
app.include_router(countries.router)
app.include_router(locations.router)
app.include_router(departments.router)
app.include_router(jobs.router)
app.include_router(employees.router)
app.include_router(job_history.router)
app.include_router(emp_details.router)
app.include_router(metrics.router)

# Health check endpoint
@app.get("/health")
def health():
    return {"status": "ok"}
