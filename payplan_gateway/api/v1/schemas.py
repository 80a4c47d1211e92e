"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from payplan_gateway.domain.models import InstallmentStatus, PaymentFrequency

# Amounts fit DECIMAL(12,2): up to 9,999,999,999.99
MONEY_DIGITS = 12


class FeeBreakdownSchema(BaseModel):
    """Course value and its non-commissionable fees"""

    total_course_value: Decimal = Field(..., gt=0, max_digits=MONEY_DIGITS, description="Total course value")
    materials_cost: Decimal = Field(Decimal("0"), ge=0, max_digits=MONEY_DIGITS)
    admin_fees: Decimal = Field(Decimal("0"), ge=0, max_digits=MONEY_DIGITS)
    other_fees: Decimal = Field(Decimal("0"), ge=0, max_digits=MONEY_DIGITS)


class CommissionRequest(FeeBreakdownSchema):
    """Request body for POST /v1/commission/expected"""

    commission_rate: Decimal = Field(..., ge=0, le=1, description="0.15 == 15%")
    gst_inclusive: bool = True
    paid_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=MONEY_DIGITS, description="Amount received so far")


class CommissionResponse(BaseModel):
    """Response for POST /v1/commission/expected"""

    commissionable_value: Decimal
    expected_commission: Decimal
    earned_commission: Decimal


class PaymentPlanPreviewRequest(FeeBreakdownSchema):
    """Request body for POST /v1/payment-plans/preview"""

    commission_rate: Decimal = Field(..., ge=0, le=1, description="0.15 == 15%")
    gst_inclusive: bool = True

    initial_payment_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=MONEY_DIGITS)
    initial_payment_due_date: Optional[date] = None
    initial_payment_paid: bool = False

    number_of_installments: int = Field(..., ge=1, le=24)
    payment_frequency: PaymentFrequency
    first_college_due_date: Optional[date] = None
    student_lead_time_days: int = Field(0, ge=0)
    custom_college_due_dates: Optional[List[date]] = Field(
        None, description="College due dates for custom frequency, one per installment"
    )


class InstallmentSchema(BaseModel):
    """Single installment in a payment plan"""

    installment_number: int
    amount: Decimal
    student_due_date: date
    college_due_date: date
    is_initial_payment: bool
    generates_commission: bool
    status: InstallmentStatus


class PlanSummarySchema(BaseModel):
    """Summary figures for a previewed plan"""

    total_course_value: Decimal
    commissionable_value: Decimal
    expected_commission: Decimal
    initial_payment: Decimal
    total_installments: int
    amount_per_installment: Decimal


class PaymentPlanPreviewResponse(BaseModel):
    """Response for POST /v1/payment-plans/preview"""

    installments: List[InstallmentSchema]
    summary: PlanSummarySchema


class InstallmentStatusItem(BaseModel):
    """Persisted installment whose status should be re-evaluated"""

    installment_number: int = Field(..., ge=0)
    status: InstallmentStatus
    student_due_date: date


class InstallmentStatusRequest(BaseModel):
    """Request body for POST /v1/installments/status"""

    as_of: date
    installments: List[InstallmentStatusItem]


class InstallmentStatusResult(BaseModel):
    """Status transition for one installment"""

    installment_number: int
    previous_status: InstallmentStatus
    status: InstallmentStatus
    changed: bool


class InstallmentStatusResponse(BaseModel):
    """Response for POST /v1/installments/status"""

    as_of: date
    installments: List[InstallmentStatusResult]
