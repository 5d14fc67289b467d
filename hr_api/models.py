from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import String, CHAR, Integer, Date, Numeric, ForeignKey, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .db import Base

# Region model
class Region(Base):
    __tablename__ = "regions"
    __table_args__ = {
        "comment": "Regions table that contains region numbers and names. References with the Countries table."
    }

    region_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
        comment="Primary key of regions table.")
    region_name: Mapped[Optional[str]] = mapped_column(
        String(25),
        comment="Names of regions. Locations are in the countries of these regions.")

    countries: Mapped[List["Country"]] = relationship(back_populates="region")

# Country model
class Country(Base):
    __tablename__ = "countries"
    __table_args__ = {"comment": "Country table. References with locations table."}

    country_id: Mapped[str] = mapped_column(
        CHAR(2), primary_key=True,
        comment="Primary key of countries table.")
    country_name: Mapped[Optional[str]] = mapped_column(String(60), comment="Country name")
    region_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("regions.region_id", name="countr_reg_fk"),
        comment="Region ID for the country. Foreign key to region_id column in the regions table.")

    region: Mapped[Optional["Region"]] = relationship(back_populates="countries")
    locations: Mapped[List["Location"]] = relationship(back_populates="country")

# Location model
class Location(Base):
    __tablename__ = "locations"
    __table_args__ = (
        Index("loc_city_ix", "city"),
        Index("loc_state_province_ix", "state_province"),
        Index("loc_country_ix", "country_id"),
        {
            "comment": "Locations table that contains specific address of a specific office, warehouse, "
                       "and/or production site of a company. References with the departments and countries tables."
        },
    )

    location_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
        comment="Primary key of locations table")
    street_address: Mapped[Optional[str]] = mapped_column(
        String(40),
        comment="Street address of an office, warehouse, or production site of a company. "
                "Contains building number and street name")
    postal_code: Mapped[Optional[str]] = mapped_column(
        String(12),
        comment="Postal code of the location of an office, warehouse, or production site of a company.")
    city: Mapped[str] = mapped_column(
        String(30), nullable=False,
        comment="A not null column that shows city where an office, warehouse, or production site "
                "of a company is located.")
    state_province: Mapped[Optional[str]] = mapped_column(
        String(25),
        comment="State or Province where an office, warehouse, or production site of a company is located.")
    country_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("countries.country_id", name="loc_c_id_fk"),
        comment="Country where an office, warehouse, or production site of a company is located. "
                "Foreign key to country_id column of the countries table.")

    country: Mapped[Optional["Country"]] = relationship(back_populates="locations")
    departments: Mapped[List["Department"]] = relationship(back_populates="location")

# Department model
class Department(Base):
    __tablename__ = "departments"
    __table_args__ = (
        Index("dept_location_ix", "location_id"),
        {
            "comment": "Departments table that shows details of departments where employees work. "
                       "References with locations, employees, and job_history tables."
        },
    )

    department_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
        comment="Primary key of departments table.")
    department_name: Mapped[str] = mapped_column(
        String(30), nullable=False,
        comment="A not null column that shows name of a department. Administration, Marketing, Purchasing, "
                "Human Resources, Shipping, IT, Executive, Public Relations, Sales, Finance, and Accounting.")
    # employees references departments too, so this constraint is added once employees exists
    manager_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("employees.employee_id", name="dept_mgr_fk", use_alter=True),
        comment="Manager_id of a department. Foreign key to employee_id column of employees table.")
    location_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("locations.location_id", name="dept_loc_fk"),
        comment="Location id where a department is located. Foreign key to location_id column of locations table.")

    # Relationships (joins)
    location: Mapped[Optional["Location"]] = relationship(back_populates="departments")
    manager: Mapped[Optional["Employee"]] = relationship(foreign_keys=[manager_id], post_update=True)
    employees: Mapped[List["Employee"]] = relationship(
        foreign_keys="Employee.department_id", back_populates="department")

# Job model
class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = {
        "comment": "Jobs table with job titles and salary ranges. References with employees and job_history table."
    }

    job_id: Mapped[str] = mapped_column(String(10), primary_key=True, comment="Primary key of jobs table.")
    job_title: Mapped[str] = mapped_column(
        String(35), nullable=False,
        comment="A not null column that shows job title, e.g. AD_VP, FI_ACCOUNTANT")
    min_salary: Mapped[Optional[Decimal]] = mapped_column(Numeric(8, 2), comment="Minimum salary for a job title.")
    max_salary: Mapped[Optional[Decimal]] = mapped_column(Numeric(8, 2), comment="Maximum salary for a job title")

# Employee model
class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("email", name="emp_email_uk"),
        CheckConstraint("salary > 0", name="emp_salary_min"),
        Index("emp_department_ix", "department_id"),
        Index("emp_job_ix", "job_id"),
        Index("emp_manager_ix", "manager_id"),
        Index("emp_name_ix", "last_name", "first_name"),
        {
            "comment": "Employees table. References with departments, jobs, job_history tables. "
                       "Contains a self reference."
        },
    )

    employee_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
        comment="Primary key of employees table.")
    first_name: Mapped[Optional[str]] = mapped_column(String(20), comment="First name of the employee.")
    last_name: Mapped[str] = mapped_column(
        String(25), nullable=False,
        comment="Last name of the employee. A not null column.")
    email: Mapped[str] = mapped_column(String(25), nullable=False, comment="Email id of the employee")
    phone_number: Mapped[Optional[str]] = mapped_column(
        String(20),
        comment="Phone number of the employee; includes country code and area code")
    hire_date: Mapped[date] = mapped_column(
        Date, nullable=False,
        comment="Date when the employee started on this job. A not null column.")
    job_id: Mapped[str] = mapped_column(
        ForeignKey("jobs.job_id", name="emp_job_fk"), nullable=False,
        comment="Current job of the employee; foreign key to job_id column of the jobs table. A not null column.")
    salary: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(10, 2),
        comment="Monthly salary of the employee. Must be greater than zero (enforced by constraint emp_salary_min)")
    commission_pct: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(4, 2),
        comment="Commission percentage of the employee; Only employees in sales department "
                "eligible for commission percentage")
    manager_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("employees.employee_id", name="emp_manager_fk"),
        comment="Manager id of the employee; has same domain as manager_id in departments table. "
                "Foreign key to employee_id column of employees table.")
    department_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("departments.department_id", name="emp_dept_fk"),
        comment="Department id where employee works; foreign key to department_id column of the departments table")

    # Relationships (joins)
    job: Mapped["Job"] = relationship()
    department: Mapped[Optional["Department"]] = relationship(
        foreign_keys=[department_id], back_populates="employees")
    manager: Mapped[Optional["Employee"]] = relationship(remote_side=[employee_id], back_populates="reports")
    reports: Mapped[List["Employee"]] = relationship(back_populates="manager")
    job_history: Mapped[List["JobHistory"]] = relationship(back_populates="employee")

# JobHistory model
class JobHistory(Base):
    __tablename__ = "job_history"
    __table_args__ = (
        CheckConstraint("end_date > start_date", name="jhist_date_interval"),
        Index("jhist_job_ix", "job_id"),
        Index("jhist_employee_ix", "employee_id"),
        Index("jhist_department_ix", "department_id"),
        {
            "comment": "Table that stores job history of the employees. If an employee changes departments "
                       "within the job or changes jobs within the department, new rows get inserted into this "
                       "table with old job information of the employee. Contains a complex primary key: "
                       "employee_id+start_date. References with jobs, employees, and departments tables."
        },
    )

    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.employee_id", name="jhist_emp_fk"), primary_key=True,
        comment="A not null column in the complex primary key employee_id+start_date. "
                "Foreign key to employee_id column of the employee table")
    start_date: Mapped[date] = mapped_column(
        Date, primary_key=True,
        comment="A not null column in the complex primary key employee_id+start_date. "
                "Must be less than the end_date of the job_history table.")
    end_date: Mapped[date] = mapped_column(
        Date, nullable=False,
        comment="Last day of the employee in this job role. A not null column. "
                "Must be greater than the start_date of the job_history table.")
    job_id: Mapped[str] = mapped_column(
        ForeignKey("jobs.job_id", name="jhist_job_fk"), nullable=False,
        comment="Job role in which the employee worked in the past; foreign key to job_id column "
                "in the jobs table. A not null column.")
    department_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("departments.department_id", name="jhist_dept_fk"),
        comment="Department id in which the employee worked in the past; foreign key to department_id "
                "column in the departments table")

    employee: Mapped["Employee"] = relationship(back_populates="job_history")
    job: Mapped["Job"] = relationship()
    department: Mapped[Optional["Department"]] = relationship()


# The view DDL hooks into Base.metadata, so it must be registered with the models
from . import views  # noqa: E402,F401
