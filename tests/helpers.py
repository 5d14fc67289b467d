import os
from datetime import date
from decimal import Decimal

from hr_api.models import Region, Country, Location, Department, Job, Employee

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")


def seed_chain(db):
    """The minimal fully linked Region -> Country -> Location -> Department, Job, Employee chain."""
    db.add(Region(region_id=1, region_name="Europe"))
    db.add(Country(country_id="UK", country_name="United Kingdom", region_id=1))
    db.add(Location(location_id=10, street_address="8204 Arthur St", city="London", country_id="UK"))
    db.add(Department(department_id=100, department_name="Sales", manager_id=None, location_id=10))
    db.add(Job(job_id="SA_REP", job_title="Sales Rep", min_salary=Decimal("6000"), max_salary=Decimal("12000")))
    db.flush()
    db.add(Employee(
        employee_id=1, first_name="Ann", last_name="Lee", email="a@x",
        phone_number="44.1632.960000", hire_date=date(2005, 3, 1), job_id="SA_REP",
        salary=Decimal("1000"), commission_pct=None, manager_id=None, department_id=100,
    ))
    db.commit()


def upload(client, table, filename, **form):
    """POST one of the sample CSVs under data/ to /ingest/csv."""
    with open(os.path.join(DATA_DIR, filename), "rb") as f:
        files = {"file": (filename, f, "text/csv")}
        return client.post("/ingest/csv", data={"table": table, **form}, files=files)


def upload_text(client, table, content, **form):
    files = {"file": (f"{table}.csv", content.encode("utf-8"), "text/csv")}
    return client.post("/ingest/csv", data={"table": table, **form}, files=files)
