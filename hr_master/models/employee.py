from sqlalchemy import Column, Integer, String, Date, Numeric, Boolean, DateTime, Text
from sqlalchemy.sql import func
from hr_master.database import Base

class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String(100), unique=True, index=True, nullable=False)  # externally assigned
    name = Column(String(100), nullable=False)
    mail = Column(String(100), unique=True, nullable=False)
    department = Column(String(100), nullable=False)
    designation = Column(String(100), nullable=False)
    basic_salary = Column(Numeric(10, 2), nullable=False)
    allowance = Column(Numeric(10, 2), nullable=False)
    total_salary = Column(Numeric(10, 2), nullable=False)
    gender = Column(String(20), nullable=False)
    dob = Column(Date, nullable=False)
    joining_date = Column(Date, nullable=False)
    ess_password = Column(Text, nullable=False)  # legacy plaintext credential
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Employee {self.employee_id} ({self.name})>"
