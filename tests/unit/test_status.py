"""Unit tests for due-date driven status transitions"""

import pytest
from datetime import date
from payplan_gateway.domain.models import InstallmentStatus
from payplan_gateway.domain.status import classify_installment_status, is_due_soon

AS_OF = date(2025, 3, 10)


@pytest.mark.parametrize(
    "due_date, expected",
    [
        (date(2025, 3, 9), False),
        (date(2025, 3, 10), True),
        (date(2025, 3, 14), True),
        (date(2025, 3, 15), False),
    ],
)
def test_is_due_soon_window_is_inclusive(due_date, expected):
    assert is_due_soon(due_date, AS_OF, threshold_days=4) is expected


@pytest.mark.parametrize(
    "due_date, expected",
    [
        (date(2025, 3, 9), InstallmentStatus.OVERDUE),
        (date(2025, 3, 10), InstallmentStatus.DUE_SOON),
        (date(2025, 3, 14), InstallmentStatus.DUE_SOON),
        (date(2025, 4, 1), InstallmentStatus.PENDING),
    ],
)
def test_pending_installment_transitions(due_date, expected):
    assert classify_installment_status(InstallmentStatus.PENDING, due_date, AS_OF) == expected


def test_due_soon_becomes_overdue():
    status = classify_installment_status(InstallmentStatus.DUE_SOON, date(2025, 3, 1), AS_OF)

    assert status == InstallmentStatus.OVERDUE


@pytest.mark.parametrize("due_date", [date(2025, 3, 1), date(2025, 3, 12), date(2025, 6, 1)])
def test_overdue_stays_overdue(due_date):
    """Only payment recording clears an overdue installment"""
    status = classify_installment_status(InstallmentStatus.OVERDUE, due_date, AS_OF)

    assert status == InstallmentStatus.OVERDUE


@pytest.mark.parametrize(
    "status",
    [InstallmentStatus.DRAFT, InstallmentStatus.PAID, InstallmentStatus.CANCELLED, InstallmentStatus.OVERDUE],
)
def test_settled_and_draft_statuses_untouched(status):
    assert classify_installment_status(status, date(2020, 1, 1), AS_OF) == status


def test_custom_threshold():
    status = classify_installment_status(InstallmentStatus.PENDING, date(2025, 3, 20), AS_OF, due_soon_days=10)

    assert status == InstallmentStatus.DUE_SOON
