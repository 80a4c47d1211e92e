"""POST /v1/payment-plans/preview - draft installment schedule for the wizard"""

import time

from fastapi import APIRouter, Depends, Request

from payplan_gateway.api.dependencies import get_request_id, get_settings
from payplan_gateway.api.errors import consistency_failed, unexpected_error, validation_failed
from payplan_gateway.api.v1.schemas import (
    InstallmentSchema,
    PaymentPlanPreviewRequest,
    PaymentPlanPreviewResponse,
    PlanSummarySchema,
)
from payplan_gateway.config import Settings
from payplan_gateway.domain.exceptions import InternalConsistencyError, ValidationError
from payplan_gateway.domain.models import FeeBreakdown, PaymentStructureRequest
from payplan_gateway.domain.money import from_cents, to_cents
from payplan_gateway.domain.plans import build_payment_plan_preview
from payplan_gateway.infrastructure.observability.logging import log_schedule_generated
from payplan_gateway.infrastructure.observability.metrics import record_schedule

router = APIRouter()


def to_fee_breakdown(body) -> FeeBreakdown:
    """Convert decimal request amounts to the cents-based domain model"""
    return FeeBreakdown(
        total_course_value_cents=to_cents(body.total_course_value, "total_course_value"),
        materials_cost_cents=to_cents(body.materials_cost, "materials_cost"),
        admin_fees_cents=to_cents(body.admin_fees, "admin_fees"),
        other_fees_cents=to_cents(body.other_fees, "other_fees"),
    )


@router.post("/payment-plans/preview", response_model=PaymentPlanPreviewResponse)
def preview_payment_plan(
    request_body: PaymentPlanPreviewRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Generate a draft installment schedule without saving anything.

    Flow:
    1. Convert wizard amounts to cents
    2. Resolve commissionable value and expected commission
    3. Split the total course value into dated installments
    4. Return installments + summary for review
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        structure = PaymentStructureRequest(
            number_of_installments=request_body.number_of_installments,
            payment_frequency=request_body.payment_frequency,
            first_college_due_date=request_body.first_college_due_date,
            student_lead_time_days=request_body.student_lead_time_days,
            initial_payment_cents=to_cents(request_body.initial_payment_amount, "initial_payment_amount"),
            initial_payment_due_date=request_body.initial_payment_due_date,
            initial_payment_paid=request_body.initial_payment_paid,
            custom_college_due_dates=(
                tuple(request_body.custom_college_due_dates)
                if request_body.custom_college_due_dates is not None
                else None
            ),
        )

        preview = build_payment_plan_preview(
            fees=to_fee_breakdown(request_body),
            commission_rate=request_body.commission_rate,
            gst_inclusive=request_body.gst_inclusive,
            request=structure,
            gst_rate=settings.gst_rate,
        )
    except ValidationError as e:
        raise validation_failed(e, request_id)
    except InternalConsistencyError as e:
        raise consistency_failed(e, request_id)
    except Exception as e:
        raise unexpected_error(e, request_id)

    summary = preview.summary

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_schedule(
        request_body.payment_frequency.value,
        summary.total_installments,
        summary.expected_commission_cents,
    )
    log_schedule_generated(
        request_id,
        request_body.payment_frequency.value,
        summary.total_installments,
        summary.total_course_value_cents,
        summary.expected_commission_cents,
        duration_ms,
    )

    return PaymentPlanPreviewResponse(
        installments=[
            InstallmentSchema(
                installment_number=inst.installment_number,
                amount=from_cents(inst.amount_cents),
                student_due_date=inst.student_due_date,
                college_due_date=inst.college_due_date,
                is_initial_payment=inst.is_initial_payment,
                generates_commission=inst.generates_commission,
                status=inst.status,
            )
            for inst in preview.installments
        ],
        summary=PlanSummarySchema(
            total_course_value=from_cents(summary.total_course_value_cents),
            commissionable_value=from_cents(summary.commissionable_value_cents),
            expected_commission=from_cents(summary.expected_commission_cents),
            initial_payment=from_cents(summary.initial_payment_cents),
            total_installments=summary.total_installments,
            amount_per_installment=from_cents(summary.amount_per_installment_cents),
        ),
    )
