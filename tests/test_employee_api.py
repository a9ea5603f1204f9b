import pytest
from fastapi import status

def _employee_payload(employee_id="E100", **overrides):
    # Legacy camelCase body as sent by the existing frontend
    payload = {
        "employeeId": employee_id,
        "name": "Asha Raman",
        "mailId": f"{employee_id.lower()}@example.com",
        "department": "Finance",
        "designation": "Accountant",
        "basicSalary": 4200.50,
        "allowance": 799.50,
        "totalSalary": 99999,
        "gender": "Female",
        "dob": "1992-03-14",
        "joiningDate": "2023-07-01",
        "essPassword": "asha-pass",
    }
    payload.update(overrides)
    return payload

def test_create_employee_recomputes_total_salary(client):
    """The total sent by the client is ignored in favour of basic + allowance."""
    response = client.post("/api/employees", json=_employee_payload())
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["employee_id"] == "E100"
    assert data["total_salary"] == 5000.00
    assert data["basic_salary"] + data["allowance"] == data["total_salary"]
    assert data["active"] is True

def test_create_employee_never_returns_credentials(client):
    data = client.post("/api/employees", json=_employee_payload()).json()
    assert "ess_password" not in data
    assert "essPassword" not in data

def test_create_employee_accepts_snake_case_fields(client):
    payload = {
        "employee_id": "E101",
        "name": "Ben Ortiz",
        "mail": "ben@example.com",
        "department": "Sales",
        "designation": "Lead",
        "basic_salary": "2000",
        "allowance": "0",
        "gender": "Male",
        "dob": "1988-11-02",
        "joining_date": "2021-02-15",
        "ess_password": "ben-pass",
    }
    response = client.post("/api/employees", json=payload)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["total_salary"] == 2000.0

def test_create_employee_rejects_negative_salary(client):
    response = client.post("/api/employees", json=_employee_payload(basicSalary=-1))
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["success"] is False

def test_get_employee(client, make_employee):
    make_employee("E200", name="Chen Li")
    response = client.get("/api/get-employee/E200")
    assert response.status_code == status.HTTP_200_OK
    rows = response.json()
    assert len(rows) == 1
    assert rows[0]["name"] == "Chen Li"

def test_get_unknown_employee_returns_empty_list(client):
    response = client.get("/api/get-employee/NOPE")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []

def test_list_employees_and_names(client, make_employee):
    make_employee("E301")
    make_employee("E302")
    employees = client.get("/api/get-employees").json()
    assert {e["employee_id"] for e in employees} == {"E301", "E302"}

    names = client.get("/api/employee-names").json()
    assert {"employee_id": "E301", "name": "Employee E301"} in names
    assert len(names) == 2

def test_update_employee_replaces_fields(client, make_employee):
    make_employee("E400")
    payload = _employee_payload("E400", name="Renamed", basicSalary=1000, allowance=250, totalSalary=1)
    payload.pop("employeeId")
    response = client.put("/api/update-employee/E400", json=payload)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "Employee updated successfully"}

    row = client.get("/api/get-employee/E400").json()[0]
    assert row["name"] == "Renamed"
    assert row["total_salary"] == 1250.0

def test_update_requires_every_field(client, make_employee):
    make_employee("E401")
    response = client.put("/api/update-employee/E401", json={"name": "Only name"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["success"] is False

def test_update_unknown_employee(client):
    payload = _employee_payload("E999")
    payload.pop("employeeId")
    response = client.put("/api/update-employee/E999", json=payload)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    body = response.json()
    assert body["success"] is False
    assert "E999" in body["message"]

def test_duplicate_employee_id_is_a_conflict(client, make_employee):
    make_employee("E500")
    response = client.post("/api/employees", json=_employee_payload("E500", mailId="other@example.com"))
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["errors"][0]["code"] == "CONSTRAINT_VIOLATION"

def test_duplicate_mail_is_a_conflict(client, make_employee):
    make_employee("E501", mail="shared@example.com")
    response = client.post("/api/employees", json=_employee_payload("E502", mailId="shared@example.com"))
    assert response.status_code == status.HTTP_409_CONFLICT
