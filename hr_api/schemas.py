from pydantic import BaseModel, ConfigDict, Field, conlist, field_validator, model_validator
from datetime import date
from decimal import Decimal
from typing import Optional


class _Row(BaseModel):
    model_config = ConfigDict(from_attributes=True)

# Input schema for Region
class RegionIn(_Row):
    region_id: int
    region_name: Optional[str] = Field(None, max_length=25)

# Input schema for Country
class CountryIn(_Row):
    country_id: str = Field(min_length=2, max_length=2)
    country_name: Optional[str] = Field(None, max_length=60)
    region_id: Optional[int] = None

    @field_validator("country_id")
    @classmethod
    def _upper_country(cls, v):
        return v.upper()

# Input schema for Location
class LocationIn(_Row):
    location_id: int
    street_address: Optional[str] = Field(None, max_length=40)
    postal_code: Optional[str] = Field(None, max_length=12)
    city: str = Field(min_length=1, max_length=30)
    state_province: Optional[str] = Field(None, max_length=25)
    country_id: Optional[str] = Field(None, min_length=2, max_length=2)

    @field_validator("country_id")
    @classmethod
    def _upper_country(cls, v):
        return v.upper() if v is not None else v

# Input schema for Department
class DepartmentIn(_Row):
    department_id: int
    department_name: str = Field(min_length=1, max_length=30)
    manager_id: Optional[int] = None
    location_id: Optional[int] = None

# Partial update for Department; how the manager gets filled in once employees exist
class DepartmentUpdate(BaseModel):
    department_name: Optional[str] = Field(None, min_length=1, max_length=30)
    manager_id: Optional[int] = None
    location_id: Optional[int] = None

# Input schema for Job
class JobIn(_Row):
    job_id: str = Field(min_length=1, max_length=10)
    job_title: str = Field(min_length=1, max_length=35)
    min_salary: Optional[Decimal] = Field(None, max_digits=8, decimal_places=2)
    max_salary: Optional[Decimal] = Field(None, max_digits=8, decimal_places=2)

# Input schema for Employee
class EmployeeIn(_Row):
    employee_id: int
    first_name: Optional[str] = Field(None, max_length=20)
    last_name: str = Field(min_length=1, max_length=25)
    email: str = Field(min_length=1, max_length=25)
    phone_number: Optional[str] = Field(None, max_length=20)
    hire_date: date
    job_id: str = Field(min_length=1, max_length=10)
    salary: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    commission_pct: Optional[Decimal] = Field(None, max_digits=4, decimal_places=2)
    manager_id: Optional[int] = None
    department_id: Optional[int] = None

# Partial update for Employee
class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = Field(None, max_length=20)
    last_name: Optional[str] = Field(None, min_length=1, max_length=25)
    email: Optional[str] = Field(None, min_length=1, max_length=25)
    phone_number: Optional[str] = Field(None, max_length=20)
    job_id: Optional[str] = Field(None, min_length=1, max_length=10)
    salary: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    commission_pct: Optional[Decimal] = Field(None, max_digits=4, decimal_places=2)
    manager_id: Optional[int] = None
    department_id: Optional[int] = None

# Input schema for JobHistory
class JobHistoryIn(_Row):
    employee_id: int
    start_date: date
    end_date: date
    job_id: str = Field(min_length=1, max_length=10)
    department_id: Optional[int] = None

    @model_validator(mode="after")
    def _check_interval(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self

# Batches (1 to 1000 elements)
RegionBatch     = conlist(RegionIn,     min_length=1, max_length=1000)
CountryBatch    = conlist(CountryIn,    min_length=1, max_length=1000)
LocationBatch   = conlist(LocationIn,   min_length=1, max_length=1000)
DepartmentBatch = conlist(DepartmentIn, min_length=1, max_length=1000)
JobBatch        = conlist(JobIn,        min_length=1, max_length=1000)
EmployeeBatch   = conlist(EmployeeIn,   min_length=1, max_length=1000)
JobHistoryBatch = conlist(JobHistoryIn, min_length=1, max_length=1000)
