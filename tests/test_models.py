from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from hr_api.models import Region, Country, Department, Employee, JobHistory
from helpers import seed_chain


def _employee(**overrides):
    values = dict(
        employee_id=2, first_name="Bob", last_name="Stone", email="b@x",
        hire_date=date(2006, 1, 9), job_id="SA_REP", salary=Decimal("2000"), department_id=100,
    )
    values.update(overrides)
    return Employee(**values)


def test_schema_has_all_tables_and_indexes(engine):
    insp = inspect(engine)
    assert {"regions", "countries", "locations", "departments", "jobs", "employees", "job_history"} <= set(insp.get_table_names())
    assert "emp_details_view" in insp.get_view_names()

    emp_indexes = {ix["name"] for ix in insp.get_indexes("employees")}
    assert {"emp_department_ix", "emp_job_ix", "emp_manager_ix", "emp_name_ix"} <= emp_indexes
    loc_indexes = {ix["name"] for ix in insp.get_indexes("locations")}
    assert {"loc_city_ix", "loc_state_province_ix", "loc_country_ix"} <= loc_indexes
    assert insp.get_pk_constraint("job_history")["constrained_columns"] == ["employee_id", "start_date"]


def test_department_manager_foreign_key_is_declared(engine):
    fks = {fk["name"]: fk for fk in inspect(engine).get_foreign_keys("departments")}
    assert fks["dept_mgr_fk"]["referred_table"] == "employees"
    assert fks["dept_loc_fk"]["referred_table"] == "locations"


def test_salary_must_be_positive(db):
    seed_chain(db)
    db.add(_employee(salary=Decimal("0")))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


@pytest.mark.parametrize("salary", [Decimal("0"), Decimal("-1")])
def test_salary_update_must_stay_positive(db, salary):
    seed_chain(db)
    db.get(Employee, 1).salary = salary
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
    assert db.get(Employee, 1).salary == Decimal("1000")


def test_salary_may_be_null(db):
    seed_chain(db)
    db.add(_employee(salary=None))
    db.commit()
    assert db.get(Employee, 2).salary is None


def test_email_is_unique(db):
    seed_chain(db)
    db.add(_employee(email="a@x"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_last_name_is_required(db):
    seed_chain(db)
    db.add(_employee(last_name=None))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_dangling_foreign_keys_are_rejected(db):
    seed_chain(db)

    db.add(Country(country_id="XX", country_name="Nowhere", region_id=99))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    db.add(_employee(department_id=999))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    db.add(_employee(manager_id=999))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_optional_foreign_keys_accept_null(db):
    db.add(Region(region_id=5, region_name="Antarctica"))
    db.add(Country(country_id="AQ", country_name="Antarctica", region_id=None))
    db.commit()
    assert db.get(Country, "AQ").region is None


def test_job_history_end_after_start(db):
    seed_chain(db)
    db.add(JobHistory(employee_id=1, start_date=date(2004, 1, 1), end_date=date(2004, 1, 1), job_id="SA_REP"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_job_history_composite_key(db):
    seed_chain(db)
    db.add(JobHistory(employee_id=1, start_date=date(2001, 1, 1), end_date=date(2003, 1, 1), job_id="SA_REP"))
    db.commit()
    db.expunge_all()

    # same start_date for another employee is fine
    db.add(_employee())
    db.add(JobHistory(employee_id=2, start_date=date(2001, 1, 1), end_date=date(2002, 1, 1), job_id="SA_REP"))
    db.commit()
    db.expunge_all()

    db.add(JobHistory(employee_id=1, start_date=date(2001, 1, 1), end_date=date(2004, 1, 1), job_id="SA_REP"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_department_manager_is_assigned_after_employee_exists(db):
    seed_chain(db)
    dept = db.get(Department, 100)
    dept.manager_id = 1
    db.commit()

    assert db.get(Department, 100).manager.last_name == "Lee"
    assert [e.employee_id for e in dept.employees] == [1]

    dept.manager_id = 999
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_relationships_navigate_the_chain(db):
    seed_chain(db)
    db.add(_employee(manager_id=1))
    db.commit()

    ann = db.get(Employee, 1)
    assert ann.department.location.country.region.region_name == "Europe"
    assert ann.job.job_title == "Sales Rep"
    assert [e.employee_id for e in ann.reports] == [2]
    assert db.get(Employee, 2).manager is ann
