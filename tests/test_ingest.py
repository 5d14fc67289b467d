import requests

from hr_api.utils import csv_ingest
from helpers import upload, upload_text


def test_load_order(client):
    assert client.get("/ingest/order").json()["order"][0] == "regions"


def test_load_sample_data_in_order(loaded):
    assert len(loaded.get("/regions").json()) == 4
    assert len(loaded.get("/countries").json()) == 5
    assert len(loaded.get("/locations").json()) == 5
    assert len(loaded.get("/departments").json()) == 6
    assert len(loaded.get("/jobs").json()) == 8
    assert len(loaded.get("/employees").json()) == 9
    assert len(loaded.get("/job_history").json()) == 4

    king = loaded.get("/employees/100").json()
    assert king["hire_date"] == "2003-06-17"
    assert king["manager_id"] is None


def test_child_before_parent_is_rejected(client):
    response = upload(client, "countries", "countries.csv")
    assert response.status_code == 409
    assert client.get("/countries").json() == []


def test_duplicate_insert_is_rejected(loaded):
    response = upload(loaded, "regions", "regions.csv")
    assert response.status_code == 409


def test_invalid_row_fails_whole_load(client):
    content = "region_id,region_name\n1,Europe\nabc,Broken\n"
    response = upload_text(client, "regions", content)
    assert response.status_code == 400
    assert "Error in row 3" in response.json()["detail"]
    assert client.get("/regions").json() == []


def test_skip_invalid_rows(loaded):
    content = (
        "employee_id,first_name,last_name,email,hire_date,job_id,salary,department_id\n"
        "300,Ana,Ruiz,ARUIZ,2008-01-10,IT_PROG,5000,60\n"
        "301,No,,NOLAST,2008-01-10,IT_PROG,5000,60\n"
        "302,Bad,Date,BADDATE,not-a-date,IT_PROG,5000,60\n"
        "303,Old,Style,OSTYLE,24-MAR-08,IT_PROG,4800.50,60\n"
    )
    response = upload_text(loaded, "employees", content, skip_invalid_rows="true")
    assert response.status_code == 200
    assert response.json()["inserted"] == 2
    assert response.json()["skipped"] == 2

    assert loaded.get("/employees/303").json()["hire_date"] == "2008-03-24"
    assert loaded.get("/employees/301").status_code == 404


def test_header_aliases(client):
    response = upload_text(client, "regions", "ID,Name\n7,Oceania\n")
    assert response.status_code == 200
    assert client.get("/regions/7").json() == {"region_id": 7, "region_name": "Oceania"}


def test_missing_required_header(client):
    response = upload_text(client, "locations", "location_id,street_address\n1,Main St\n")
    assert response.status_code == 400
    assert "city" in response.json()["detail"]


def test_upsert_assigns_department_managers(loaded):
    content = "department_id,department_name,manager_id,location_id\n90,Executive,100,1700\n60,IT,103,1700\n"
    response = upload_text(loaded, "departments", content, mode="upsert")
    assert response.status_code == 200
    assert loaded.get("/departments/90").json()["manager_id"] == 100
    assert loaded.get("/departments/60").json()["manager_id"] == 103
    assert len(loaded.get("/departments").json()) == 6


def test_upsert_on_composite_key(loaded):
    content = "employee_id,start_date,end_date,job_id,department_id\n101,1997-09-21,2001-10-20,AD_ASST,10\n"
    response = upload_text(loaded, "job_history", content, mode="upsert")
    assert response.status_code == 200

    history = loaded.get("/employees/101/job_history").json()
    assert [h["end_date"] for h in history] == ["2001-10-20", "2005-03-15"]


def test_non_positive_salary_fails_load(loaded):
    content = "employee_id,last_name,email,hire_date,job_id,salary\n400,Zero,ZERO,2010-01-01,IT_PROG,-5\n"
    response = upload_text(loaded, "employees", content)
    assert response.status_code == 400
    assert "Error in row 2" in response.json()["detail"]
    assert "salary" in response.json()["detail"]
    assert loaded.get("/employees/400").status_code == 404


def test_column_lengths_are_checked(client):
    assert upload(client, "regions", "regions.csv").status_code == 200

    response = upload_text(client, "countries", "country_id,country_name,region_id\nGBR,Too long,1\n")
    assert response.status_code == 400
    assert "Error in row 2" in response.json()["detail"]
    assert "country_id" in response.json()["detail"]

    countries = client.get("/countries")
    assert countries.status_code == 200
    assert countries.json() == []


def test_skip_rows_the_schema_rejects(loaded):
    content = (
        "employee_id,last_name,email,hire_date,job_id,salary\n"
        "310,Good,GOOD,2010-01-01,IT_PROG,5000\n"
        "311,Zero,ZERO,2010-01-01,IT_PROG,0\n"
        f"312,Long,{'L' * 26},2010-01-01,IT_PROG,5000\n"
    )
    response = upload_text(loaded, "employees", content, skip_invalid_rows="true")
    assert response.status_code == 200
    assert response.json()["inserted"] == 1
    assert response.json()["skipped"] == 2
    assert loaded.get("/employees/310").status_code == 200
    assert loaded.get("/employees/311").status_code == 404


def test_skip_job_history_with_bad_interval(loaded):
    content = (
        "employee_id,start_date,end_date,job_id,department_id\n"
        "103,2001-01-01,2003-12-31,MK_REP,20\n"
        "104,2004-01-01,2004-01-01,MK_REP,20\n"
        "104,2004-06-01,2004-01-01,MK_REP,20\n"
    )
    response = upload_text(loaded, "job_history", content, skip_invalid_rows="true")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "table": "job_history", "inserted": 1, "skipped": 2}
    assert loaded.get("/employees/104/job_history").json() == []


def test_country_codes_are_uppercased(client):
    assert upload(client, "regions", "regions.csv").status_code == 200
    response = upload_text(client, "countries", "country_id,country_name,region_id\nfr,France,1\n")
    assert response.status_code == 200

    country = client.get("/countries/fr")
    assert country.status_code == 200
    assert country.json()["country_id"] == "FR"


def test_upsert_keeps_columns_missing_from_csv(loaded):
    managers = "department_id,department_name,manager_id,location_id\n90,Executive,100,1700\n"
    assert upload_text(loaded, "departments", managers, mode="upsert").status_code == 200

    response = upload_text(loaded, "departments", "department_id,department_name\n90,Exec Office\n", mode="upsert")
    assert response.status_code == 200

    department = loaded.get("/departments/90").json()
    assert department["department_name"] == "Exec Office"
    assert department["manager_id"] == 100
    assert department["location_id"] == 1700


def test_upsert_with_only_key_columns(loaded):
    response = upload_text(loaded, "regions", "region_id\n1\n5\n", mode="upsert")
    assert response.status_code == 200
    assert loaded.get("/regions/1").json()["region_name"] == "Europe"
    assert loaded.get("/regions/5").json() == {"region_id": 5, "region_name": None}


def test_undecodable_upload(client):
    files = {"file": ("regions.csv", b"region_id,region_name\n1,\xff\xfe\xfa\n", "text/csv")}
    response = client.post("/ingest/csv", data={"table": "regions"}, files=files)
    assert response.status_code == 400
    assert "UTF-8" in response.json()["detail"]


def test_unreachable_source_url(client, monkeypatch):
    def refuse(url, timeout):
        raise requests.ConnectionError(f"cannot reach {url}")

    monkeypatch.setattr(csv_ingest.requests, "get", refuse)
    response = client.post("/ingest/csv", data={"table": "regions", "source_path": "http://example.invalid/r.csv"})
    assert response.status_code == 400
    assert "cannot reach" in response.json()["detail"]


def test_source_url_http_error(client, monkeypatch):
    class NotFound:
        text = ""

        def raise_for_status(self):
            raise requests.HTTPError("404 Client Error")

    monkeypatch.setattr(csv_ingest.requests, "get", lambda url, timeout: NotFound())
    response = client.post("/ingest/csv", data={"table": "regions", "source_path": "https://example.com/r.csv"})
    assert response.status_code == 400
    assert "404" in response.json()["detail"]
