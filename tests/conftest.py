import pytest
import os
from datetime import date
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("ADMIN_PASSWORD", None)

from hr_master.database import Base, get_db
from hr_master.main import app
from hr_master.schemas.employee import EmployeeCreate
from hr_master.schemas.leave import LeaveApply
from hr_master.services import employee_service, leave_service
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    # Use sessionmaker with the active connection
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def make_employee(db_session):
    """Factory creating employees through the directory service."""
    def _make_employee(employee_id="E001", **overrides):
        data = {
            "employee_id": employee_id,
            "name": f"Employee {employee_id}",
            "mail": f"{employee_id.lower()}@example.com",
            "department": "Engineering",
            "designation": "Developer",
            "gender": "Female",
            "dob": date(1990, 5, 17),
            "joining_date": date(2020, 1, 6),
            "basic_salary": "3000.00",
            "allowance": "500.00",
            "ess_password": "secret-pass",
        }
        data.update(overrides)
        return employee_service.create_employee(db_session, EmployeeCreate(**data))
    return _make_employee

@pytest.fixture(scope="function")
def make_leave(db_session):
    """Factory applying leave requests through the ledger service."""
    def _make_leave(employee_id, start_date, end_date, leave_type="Casual", leave_days=None, reason=None):
        return leave_service.apply_leave(db_session, LeaveApply(
            employee_id=employee_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            leave_days=leave_days,
            reason=reason,
        ))
    return _make_leave

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
