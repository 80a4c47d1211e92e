"""Payment plan preview - fee resolution, commission and schedule in one pass"""

from decimal import Decimal

from payplan_gateway.domain.commission import GST_RATE, calculate_expected_commission
from payplan_gateway.domain.fees import resolve_commissionable_value
from payplan_gateway.domain.installments import generate_schedule
from payplan_gateway.domain.models import (
    CommissionInput,
    FeeBreakdown,
    PaymentPlanPreview,
    PaymentStructureRequest,
    PlanSummary,
)


def build_payment_plan_preview(
    fees: FeeBreakdown,
    commission_rate: Decimal,
    gst_inclusive: bool,
    request: PaymentStructureRequest,
    gst_rate: Decimal = GST_RATE,
) -> PaymentPlanPreview:
    """
    Main entry point: turn wizard inputs into a draft schedule and summary.

    Flow:
    1. Resolve commissionable value from the fee breakdown
    2. Calculate expected commission (informational only)
    3. Split the total course value into installments

    The schedule always sums to the total course value, not to the
    commissionable value. Nothing is returned if any step fails.
    """
    commissionable_value = resolve_commissionable_value(fees)
    expected_commission = calculate_expected_commission(
        CommissionInput(
            commissionable_value_cents=commissionable_value,
            commission_rate=commission_rate,
            gst_inclusive=gst_inclusive,
        ),
        gst_rate=gst_rate,
    )

    installments = generate_schedule(fees.total_course_value_cents, request)

    remaining_after_initial = fees.total_course_value_cents - request.initial_payment_cents
    summary = PlanSummary(
        total_course_value_cents=fees.total_course_value_cents,
        commissionable_value_cents=commissionable_value,
        expected_commission_cents=expected_commission,
        initial_payment_cents=request.initial_payment_cents,
        total_installments=len(installments),
        amount_per_installment_cents=remaining_after_initial // request.number_of_installments,
    )

    return PaymentPlanPreview(installments=installments, summary=summary)
