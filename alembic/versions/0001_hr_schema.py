"""HR schema: regions, countries, locations, departments, jobs, employees, job_history, emp_details_view

Revision ID: 0001_hr_schema
Revises:
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_hr_schema"
down_revision = None
branch_labels = None
depends_on = None

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


def upgrade():
    op.create_table(
        'regions',
        sa.Column('region_id', sa.Integer, primary_key=True, autoincrement=False,
                  comment='Primary key of regions table.'),
        sa.Column('region_name', sa.String(25), nullable=True,
                  comment='Names of regions. Locations are in the countries of these regions.'),
        comment='Regions table that contains region numbers and names. References with the Countries table.',
    )

    op.create_table(
        'countries',
        sa.Column('country_id', sa.CHAR(2), primary_key=True, comment='Primary key of countries table.'),
        sa.Column('country_name', sa.String(60), nullable=True, comment='Country name'),
        sa.Column('region_id', sa.Integer, sa.ForeignKey('regions.region_id', name='countr_reg_fk'), nullable=True,
                  comment='Region ID for the country. Foreign key to region_id column in the regions table.'),
        comment='Country table. References with locations table.',
    )

    op.create_table(
        'locations',
        sa.Column('location_id', sa.Integer, primary_key=True, autoincrement=False,
                  comment='Primary key of locations table'),
        sa.Column('street_address', sa.String(40), nullable=True,
                  comment='Street address of an office, warehouse, or production site of a company. '
                          'Contains building number and street name'),
        sa.Column('postal_code', sa.String(12), nullable=True,
                  comment='Postal code of the location of an office, warehouse, or production site of a company.'),
        sa.Column('city', sa.String(30), nullable=False,
                  comment='A not null column that shows city where an office, warehouse, or production site '
                          'of a company is located.'),
        sa.Column('state_province', sa.String(25), nullable=True,
                  comment='State or Province where an office, warehouse, or production site of a company is located.'),
        sa.Column('country_id', sa.CHAR(2), sa.ForeignKey('countries.country_id', name='loc_c_id_fk'), nullable=True,
                  comment='Country where an office, warehouse, or production site of a company is located. '
                          'Foreign key to country_id column of the countries table.'),
        comment='Locations table that contains specific address of a specific office, warehouse, and/or production '
                'site of a company. References with the departments and countries tables.',
    )
    op.create_index('loc_city_ix', 'locations', ['city'])
    op.create_index('loc_state_province_ix', 'locations', ['state_province'])
    op.create_index('loc_country_ix', 'locations', ['country_id'])

    # manager_id gets its foreign key once employees exists
    op.create_table(
        'departments',
        sa.Column('department_id', sa.Integer, primary_key=True, autoincrement=False,
                  comment='Primary key of departments table.'),
        sa.Column('department_name', sa.String(30), nullable=False,
                  comment='A not null column that shows name of a department. Administration, Marketing, '
                          'Purchasing, Human Resources, Shipping, IT, Executive, Public Relations, Sales, '
                          'Finance, and Accounting.'),
        sa.Column('manager_id', sa.Integer, nullable=True,
                  comment='Manager_id of a department. Foreign key to employee_id column of employees table.'),
        sa.Column('location_id', sa.Integer, sa.ForeignKey('locations.location_id', name='dept_loc_fk'),
                  nullable=True,
                  comment='Location id where a department is located. Foreign key to location_id column '
                          'of locations table.'),
        comment='Departments table that shows details of departments where employees work. '
                'References with locations, employees, and job_history tables.',
    )
    op.create_index('dept_location_ix', 'departments', ['location_id'])

    op.create_table(
        'jobs',
        sa.Column('job_id', sa.String(10), primary_key=True, comment='Primary key of jobs table.'),
        sa.Column('job_title', sa.String(35), nullable=False,
                  comment='A not null column that shows job title, e.g. AD_VP, FI_ACCOUNTANT'),
        sa.Column('min_salary', sa.Numeric(8, 2), nullable=True, comment='Minimum salary for a job title.'),
        sa.Column('max_salary', sa.Numeric(8, 2), nullable=True, comment='Maximum salary for a job title'),
        comment='Jobs table with job titles and salary ranges. References with employees and job_history table.',
    )

    op.create_table(
        'employees',
        sa.Column('employee_id', sa.Integer, primary_key=True, autoincrement=False,
                  comment='Primary key of employees table.'),
        sa.Column('first_name', sa.String(20), nullable=True, comment='First name of the employee.'),
        sa.Column('last_name', sa.String(25), nullable=False, comment='Last name of the employee. A not null column.'),
        sa.Column('email', sa.String(25), nullable=False, comment='Email id of the employee'),
        sa.Column('phone_number', sa.String(20), nullable=True,
                  comment='Phone number of the employee; includes country code and area code'),
        sa.Column('hire_date', sa.Date(), nullable=False,
                  comment='Date when the employee started on this job. A not null column.'),
        sa.Column('job_id', sa.String(10), sa.ForeignKey('jobs.job_id', name='emp_job_fk'), nullable=False,
                  comment='Current job of the employee; foreign key to job_id column of the jobs table. '
                          'A not null column.'),
        sa.Column('salary', sa.Numeric(10, 2), nullable=True,
                  comment='Monthly salary of the employee. Must be greater than zero '
                          '(enforced by constraint emp_salary_min)'),
        sa.Column('commission_pct', sa.Numeric(4, 2), nullable=True,
                  comment='Commission percentage of the employee; Only employees in sales department '
                          'eligible for commission percentage'),
        sa.Column('manager_id', sa.Integer, sa.ForeignKey('employees.employee_id', name='emp_manager_fk'),
                  nullable=True,
                  comment='Manager id of the employee; has same domain as manager_id in departments table. '
                          'Foreign key to employee_id column of employees table.'),
        sa.Column('department_id', sa.Integer, sa.ForeignKey('departments.department_id', name='emp_dept_fk'),
                  nullable=True,
                  comment='Department id where employee works; foreign key to department_id column '
                          'of the departments table'),
        sa.UniqueConstraint('email', name='emp_email_uk'),
        sa.CheckConstraint('salary > 0', name='emp_salary_min'),
        comment='Employees table. References with departments, jobs, job_history tables. Contains a self reference.',
    )
    op.create_index('emp_department_ix', 'employees', ['department_id'])
    op.create_index('emp_job_ix', 'employees', ['job_id'])
    op.create_index('emp_manager_ix', 'employees', ['manager_id'])
    op.create_index('emp_name_ix', 'employees', ['last_name', 'first_name'])

    # Circular reference departments.manager_id -> employees
    with op.batch_alter_table('departments') as batch_op:
        batch_op.create_foreign_key('dept_mgr_fk', 'employees', ['manager_id'], ['employee_id'])

    op.create_table(
        'job_history',
        sa.Column('employee_id', sa.Integer, sa.ForeignKey('employees.employee_id', name='jhist_emp_fk'),
                  primary_key=True,
                  comment='A not null column in the complex primary key employee_id+start_date. '
                          'Foreign key to employee_id column of the employee table'),
        sa.Column('start_date', sa.Date(), primary_key=True,
                  comment='A not null column in the complex primary key employee_id+start_date. '
                          'Must be less than the end_date of the job_history table.'),
        sa.Column('end_date', sa.Date(), nullable=False,
                  comment='Last day of the employee in this job role. A not null column. '
                          'Must be greater than the start_date of the job_history table.'),
        sa.Column('job_id', sa.String(10), sa.ForeignKey('jobs.job_id', name='jhist_job_fk'), nullable=False,
                  comment='Job role in which the employee worked in the past; foreign key to job_id column '
                          'in the jobs table. A not null column.'),
        sa.Column('department_id', sa.Integer,
                  sa.ForeignKey('departments.department_id', name='jhist_dept_fk'), nullable=True,
                  comment='Department id in which the employee worked in the past; foreign key to '
                          'department_id column in the departments table'),
        sa.CheckConstraint('end_date > start_date', name='jhist_date_interval'),
        comment='Table that stores job history of the employees. If an employee changes departments within '
                'the job or changes jobs within the department, new rows get inserted into this table with '
                'old job information of the employee. Contains a complex primary key: employee_id+start_date. '
                'References with jobs, employees, and departments tables.',
    )
    op.create_index('jhist_job_ix', 'job_history', ['job_id'])
    op.create_index('jhist_employee_ix', 'job_history', ['employee_id'])
    op.create_index('jhist_department_ix', 'job_history', ['department_id'])

    if op.get_bind().dialect.name == "sqlite":
        op.execute(f"CREATE VIEW emp_details_view AS {EMP_DETAILS_SELECT}")
    else:
        op.execute(f"CREATE OR REPLACE VIEW emp_details_view AS {EMP_DETAILS_SELECT}")


def downgrade():
    op.execute("DROP VIEW IF EXISTS emp_details_view")

    op.drop_table('job_history')

    with op.batch_alter_table('departments') as batch_op:
        batch_op.drop_constraint('dept_mgr_fk', type_='foreignkey')

    op.drop_table('employees')
    op.drop_table('jobs')
    op.drop_table('departments')
    op.drop_table('locations')
    op.drop_table('countries')
    op.drop_table('regions')
