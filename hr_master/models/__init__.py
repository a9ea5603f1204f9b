# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import employee, leave, admin

# Explicit class exports for cleaner imports
from .employee import Employee
from .leave import LeaveRequest, LeaveStatus
from .admin import AdminAccount

__all__ = [
    "Employee",
    "LeaveRequest",
    "LeaveStatus",
    "AdminAccount",
]
