from typing import Literal

# Literal restricts the accepted values
TableName = Literal["regions", "countries", "locations", "departments", "jobs", "employees", "job_history"]

# Tables in foreign-key order; departments.manager_id is filled in after employees
LOAD_ORDER = ["regions", "countries", "locations", "departments", "jobs", "employees", "job_history"]

# Column -> kind used to coerce CSV text
COLUMN_TYPES = {
    "regions": {
        "region_id": "int",
        "region_name": "str",
    },
    "countries": {
        "country_id": "str",
        "country_name": "str",
        "region_id": "int",
    },
    "locations": {
        "location_id": "int",
        "street_address": "str",
        "postal_code": "str",
        "city": "str",
        "state_province": "str",
        "country_id": "str",
    },
    "departments": {
        "department_id": "int",
        "department_name": "str",
        "manager_id": "int",
        "location_id": "int",
    },
    "jobs": {
        "job_id": "str",
        "job_title": "str",
        "min_salary": "decimal",
        "max_salary": "decimal",
    },
    "employees": {
        "employee_id": "int",
        "first_name": "str",
        "last_name": "str",
        "email": "str",
        "phone_number": "str",
        "hire_date": "date",
        "job_id": "str",
        "salary": "decimal",
        "commission_pct": "decimal",
        "manager_id": "int",
        "department_id": "int",
    },
    "job_history": {
        "employee_id": "int",
        "start_date": "date",
        "end_date": "date",
        "job_id": "str",
        "department_id": "int",
    },
}

# Standard expected headers for each table
EXPECTED_HEADERS = {table: list(cols) for table, cols in COLUMN_TYPES.items()}

# NOT NULL columns
REQUIRED_COLUMNS = {
    "regions": ["region_id"],
    "countries": ["country_id"],
    "locations": ["location_id", "city"],
    "departments": ["department_id", "department_name"],
    "jobs": ["job_id", "job_title"],
    "employees": ["employee_id", "last_name", "email", "hire_date", "job_id"],
    "job_history": ["employee_id", "start_date", "end_date", "job_id"],
}

PRIMARY_KEYS = {
    "regions": ["region_id"],
    "countries": ["country_id"],
    "locations": ["location_id"],
    "departments": ["department_id"],
    "jobs": ["job_id"],
    "employees": ["employee_id"],
    "job_history": ["employee_id", "start_date"],
}
