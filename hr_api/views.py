from sqlalchemy import DDL, CHAR, Column, Integer, MetaData, Numeric, String, Table, event

from .db import Base

VIEW_NAME = "emp_details_view"

# Inner joins: an employee missing any link in the chain is left out
EMP_DETAILS_SELECT = """
SELECT
    e.employee_id,
    e.job_id,
    e.manager_id,
    e.department_id,
    d.location_id,
    l.country_id,
    e.first_name,
    e.last_name,
    e.salary,
    e.commission_pct,
    d.department_name,
    j.job_title,
    l.city,
    l.state_province,
    c.country_name,
    r.region_name
FROM employees e
    INNER JOIN departments d ON e.department_id = d.department_id
    INNER JOIN jobs j ON j.job_id = e.job_id
    INNER JOIN locations l ON d.location_id = l.location_id
    INNER JOIN countries c ON l.country_id = c.country_id
    INNER JOIN regions r ON c.region_id = r.region_id
"""

CREATE_OR_REPLACE_VIEW_SQL = f"CREATE OR REPLACE VIEW {VIEW_NAME} AS {EMP_DETAILS_SELECT}"
CREATE_VIEW_IF_NOT_EXISTS_SQL = f"CREATE VIEW IF NOT EXISTS {VIEW_NAME} AS {EMP_DETAILS_SELECT}"
DROP_VIEW_SQL = f"DROP VIEW IF EXISTS {VIEW_NAME}"

# Created after the tables, dropped before them
event.listen(
    Base.metadata, "after_create",
    DDL(CREATE_OR_REPLACE_VIEW_SQL).execute_if(dialect=("postgresql", "mysql", "mariadb")),
)
event.listen(
    Base.metadata, "after_create",
    DDL(CREATE_VIEW_IF_NOT_EXISTS_SQL).execute_if(dialect="sqlite"),
)
event.listen(Base.metadata, "before_drop", DDL(DROP_VIEW_SQL))

# Read-only handle on the view; kept out of Base.metadata so create_all never makes it a table
view_metadata = MetaData()

emp_details_view = Table(
    VIEW_NAME,
    view_metadata,
    Column("employee_id", Integer, primary_key=True),
    Column("job_id", String(10)),
    Column("manager_id", Integer),
    Column("department_id", Integer),
    Column("location_id", Integer),
    Column("country_id", CHAR(2)),
    Column("first_name", String(20)),
    Column("last_name", String(25)),
    Column("salary", Numeric(10, 2)),
    Column("commission_pct", Numeric(4, 2)),
    Column("department_name", String(30)),
    Column("job_title", String(35)),
    Column("city", String(30)),
    Column("state_province", String(25)),
    Column("country_name", String(60)),
    Column("region_name", String(25)),
)

VIEW_COLUMNS = [c.name for c in emp_details_view.columns]
