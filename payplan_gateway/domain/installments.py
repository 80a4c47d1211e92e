"""Installment schedule generation for course payment plans"""

from datetime import date
from typing import List

from payplan_gateway.domain.exceptions import InternalConsistencyError, ValidationError
from payplan_gateway.domain.models import (
    Installment,
    InstallmentSchedule,
    InstallmentStatus,
    PaymentFrequency,
    PaymentStructureRequest,
)
from payplan_gateway.utils.date_utils import add_months, is_non_decreasing, subtract_days

MIN_INSTALLMENTS = 1
MAX_INSTALLMENTS = 24

MONTHS_BETWEEN = {
    PaymentFrequency.MONTHLY: 1,
    PaymentFrequency.QUARTERLY: 3,
}


def generate_college_due_dates(first_due_date: date, count: int, frequency: PaymentFrequency) -> List[date]:
    """
    Due dates on the agency -> college timeline.

    Every date is computed from the anchor rather than from the previous
    date, so month-end anchors come back once the short month has passed:
        2025-01-31 monthly x3 -> [2025-01-31, 2025-02-28, 2025-03-31]
    """
    if frequency not in MONTHS_BETWEEN:
        raise ValidationError("payment_frequency", f"Due dates cannot be generated for {frequency.value} frequency")

    step = MONTHS_BETWEEN[frequency]
    return [add_months(first_due_date, i * step) for i in range(count)]


def calculate_student_due_date(college_due_date: date, lead_time_days: int) -> date:
    """Student pays the agency lead_time_days before the agency pays the college"""
    return subtract_days(college_due_date, lead_time_days)


def _validate_request(payable_cents: int, request: PaymentStructureRequest) -> None:
    n = request.number_of_installments
    if not MIN_INSTALLMENTS <= n <= MAX_INSTALLMENTS:
        raise ValidationError(
            "number_of_installments",
            f"Number of installments must be between {MIN_INSTALLMENTS} and {MAX_INSTALLMENTS}",
        )
    if request.student_lead_time_days < 0:
        raise ValidationError("student_lead_time_days", "Lead time cannot be negative")
    if payable_cents <= 0:
        raise ValidationError("total_course_value", "Payable amount must be positive")
    if request.initial_payment_cents < 0:
        raise ValidationError("initial_payment_amount", "Initial payment cannot be negative")
    if request.initial_payment_cents >= payable_cents:
        raise ValidationError("initial_payment_amount", "Initial payment must be less than the payable amount")
    if request.initial_payment_cents > 0 and request.initial_payment_due_date is None:
        raise ValidationError(
            "initial_payment_due_date",
            "Initial payment due date is required when amount is specified",
        )

    # Every regular installment must be at least one cent
    if payable_cents - request.initial_payment_cents < n:
        raise ValidationError("number_of_installments", "Remaining amount is too small to split into installments")

    if request.payment_frequency == PaymentFrequency.CUSTOM:
        custom_dates = request.custom_college_due_dates
        if custom_dates is None or len(custom_dates) != n:
            raise ValidationError(
                "custom_college_due_dates",
                f"Custom frequency requires exactly {n} college due dates",
            )
        if not is_non_decreasing(custom_dates):
            raise ValidationError("custom_college_due_dates", "Custom due dates must be in chronological order")
    elif request.first_college_due_date is None:
        raise ValidationError("first_college_due_date", "First college due date is required")


def generate_schedule(payable_cents: int, request: PaymentStructureRequest) -> InstallmentSchedule:
    """
    Split a payable amount into an optional initial payment plus N installments.

    Requirements:
    - Regular installments are equal, truncated to the cent
    - Last installment absorbs the rounding remainder (< N cents)
    - Installment 0 (initial payment) uses one date for both timelines
    - Amounts always sum to payable_cents exactly

    Example:
        $10,000.00 / 3 -> [$3,333.33, $3,333.33, $3,333.34]
        1000000 cents // 3 = 333333 base, remainder 1

    Raises:
        ValidationError: Malformed request
        InternalConsistencyError: Amounts do not reconcile to payable_cents
    """
    _validate_request(payable_cents, request)

    n = request.number_of_installments
    remaining_after_initial = payable_cents - request.initial_payment_cents

    # Calculate base amount and remainder
    base_amount = remaining_after_initial // n
    remainder = remaining_after_initial - base_amount * n

    if request.payment_frequency == PaymentFrequency.CUSTOM:
        college_due_dates = list(request.custom_college_due_dates)
    else:
        college_due_dates = generate_college_due_dates(
            request.first_college_due_date, n, request.payment_frequency
        )

    installments = []
    if request.initial_payment_cents > 0:
        installments.append(
            Installment(
                installment_number=0,
                amount_cents=request.initial_payment_cents,
                student_due_date=request.initial_payment_due_date,
                college_due_date=request.initial_payment_due_date,
                is_initial_payment=True,
                generates_commission=True,
                status=InstallmentStatus.PAID if request.initial_payment_paid else InstallmentStatus.DRAFT,
            )
        )

    for i, college_due_date in enumerate(college_due_dates, start=1):
        # Last installment absorbs remainder to ensure exact total
        amount = base_amount + (remainder if i == n else 0)

        installments.append(
            Installment(
                installment_number=i,
                amount_cents=amount,
                student_due_date=calculate_student_due_date(college_due_date, request.student_lead_time_days),
                college_due_date=college_due_date,
                is_initial_payment=False,
                generates_commission=True,
                status=InstallmentStatus.DRAFT,
            )
        )

    total = sum(inst.amount_cents for inst in installments)
    if total != payable_cents:
        raise InternalConsistencyError(
            f"Installments sum to {total} cents, expected {payable_cents} cents"
        )

    return tuple(installments)
