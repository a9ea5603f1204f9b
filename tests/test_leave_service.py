from datetime import date

import pytest

from hr_master.core.exceptions import InvalidTransition, NotFoundError, ValidationFailure
from hr_master.schemas.leave import LeaveApply
from hr_master.services import leave_service


def test_unpaid_leave_is_attributed_to_its_start_month(db_session, make_employee, make_leave):
    make_employee("E001")
    make_leave("E001", date(2025, 1, 30), date(2025, 2, 2), leave_type="Unpaid", leave_days=4)

    assert leave_service.unpaid_days_by_employee(db_session, 1, 2025) == {"E001": 4}
    assert leave_service.unpaid_days_by_employee(db_session, 2, 2025) == {}


def test_unpaid_days_match_the_tag_exactly(db_session, make_employee, make_leave):
    make_employee("E001")
    make_leave("E001", date(2025, 6, 2), date(2025, 6, 3), leave_type="Unpaid")
    make_leave("E001", date(2025, 6, 9), date(2025, 6, 9), leave_type="unpaid")
    make_leave("E001", date(2025, 6, 16), date(2025, 6, 20), leave_type="Casual")

    assert leave_service.unpaid_days_by_employee(db_session, 6, 2025) == {"E001": 2}


def test_unpaid_days_are_summed_per_employee(db_session, make_employee, make_leave):
    make_employee("E001")
    make_employee("E002")
    make_leave("E001", date(2024, 12, 1), date(2024, 12, 1), leave_type="Unpaid")
    make_leave("E001", date(2024, 12, 31), date(2025, 1, 1), leave_type="Unpaid", leave_days=2)
    make_leave("E002", date(2024, 12, 15), date(2024, 12, 17), leave_type="Unpaid")
    make_leave("E002", date(2023, 12, 15), date(2023, 12, 17), leave_type="Unpaid")

    assert leave_service.unpaid_days_by_employee(db_session, 12, 2024) == {"E001": 3, "E002": 3}


def test_summary_reports_zero_for_empty_buckets(db_session, make_employee, make_leave):
    make_employee("E001")
    leave = make_leave("E001", date(2025, 3, 3), date(2025, 3, 5))
    make_leave("E001", date(2025, 3, 10), date(2025, 3, 10))
    leave_service.approve_leave(db_session, leave.id)

    summary = leave_service.summarize_leaves(db_session, "E001")
    assert summary.approved_days == 3
    assert summary.pending_days == 1
    assert summary.rejected_days == 0


def test_summary_for_employee_without_leave(db_session, make_employee):
    make_employee("E001")
    summary = leave_service.summarize_leaves(db_session, "E001")
    assert (summary.approved_days, summary.pending_days, summary.rejected_days) == (0, 0, 0)


def test_terminal_status_cannot_be_reversed(db_session, make_employee, make_leave):
    make_employee("E001")
    leave = make_leave("E001", date(2025, 3, 3), date(2025, 3, 3))
    leave_service.reject_leave(db_session, leave.id)

    with pytest.raises(InvalidTransition) as exc:
        leave_service.approve_leave(db_session, leave.id)
    assert exc.value.details == {"current": "REJECTED", "requested": "APPROVED"}


def test_apply_validates_range_before_lookup(db_session):
    with pytest.raises(ValidationFailure):
        leave_service.apply_leave(db_session, LeaveApply(
            employee_id="GHOST",
            leave_type="Casual",
            start_date=date(2025, 3, 5),
            end_date=date(2025, 3, 4),
        ))


def test_get_unknown_leave(db_session):
    with pytest.raises(NotFoundError):
        leave_service.get_leave(db_session, 999)


@pytest.mark.parametrize("month,year,expected", [
    (1, 2025, (date(2025, 1, 1), date(2025, 1, 31))),
    (2, 2024, (date(2024, 2, 1), date(2024, 2, 29))),
    (12, 2025, (date(2025, 12, 1), date(2025, 12, 31))),
    (12, 9999, (date(9999, 12, 1), date(9999, 12, 31))),
])
def test_month_bounds(month, year, expected):
    assert leave_service.month_bounds(month, year) == expected
