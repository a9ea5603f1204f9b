from sqlalchemy import Column, Integer, String, Date, DateTime, Text
from sqlalchemy.sql import func
from hr_master.database import Base
import enum

class LeaveStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

TERMINAL_STATUSES = frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED})

class LeaveRequest(Base):
    __tablename__ = "leaves"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String(100), index=True, nullable=False)  # weak reference to employees.employee_id
    employee_name = Column(String(100), nullable=False)  # name at time of application
    leave_type = Column(String(20), index=True, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    reason = Column(Text, nullable=True)
    leave_days = Column(Integer, nullable=False)
    leave_status = Column(String(20), default=LeaveStatus.PENDING.value, nullable=False)  # enum value stored as string
    created_at = Column(DateTime(timezone=True), server_default=func.now())
