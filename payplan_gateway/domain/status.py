"""Installment status transitions driven by due dates"""

from datetime import date, timedelta

from payplan_gateway.domain.models import InstallmentStatus

DEFAULT_DUE_SOON_DAYS = 4

# Statuses the daily status job re-evaluates; overdue is only cleared by payment
TRACKED_STATUSES = {
    InstallmentStatus.PENDING,
    InstallmentStatus.DUE_SOON,
}


def is_due_soon(due_date: date, as_of: date, threshold_days: int = DEFAULT_DUE_SOON_DAYS) -> bool:
    """Due date falls between as_of and as_of + threshold_days (inclusive)"""
    return as_of <= due_date <= as_of + timedelta(days=threshold_days)


def classify_installment_status(
    status: InstallmentStatus,
    student_due_date: date,
    as_of: date,
    due_soon_days: int = DEFAULT_DUE_SOON_DAYS,
) -> InstallmentStatus:
    """
    Status an installment should carry on as_of.

    Drafts, paid, cancelled and overdue installments are never touched.
    Pending and due-soon installments become overdue once the student due
    date has passed.
    """
    if status not in TRACKED_STATUSES:
        return status

    if student_due_date < as_of:
        return InstallmentStatus.OVERDUE
    if is_due_soon(student_due_date, as_of, due_soon_days):
        return InstallmentStatus.DUE_SOON
    return InstallmentStatus.PENDING
