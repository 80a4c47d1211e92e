"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class PaymentFrequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    CUSTOM = "custom"


class InstallmentStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"
    PAID = "paid"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class FeeBreakdown:
    """Course fee split into the total and its non-commissionable parts"""

    total_course_value_cents: int
    materials_cost_cents: int = 0
    admin_fees_cents: int = 0
    other_fees_cents: int = 0


@dataclass(frozen=True)
class CommissionInput:
    """Inputs for the expected commission calculation"""

    commissionable_value_cents: int
    commission_rate: Decimal  # 0.15 == 15%
    gst_inclusive: bool = True


@dataclass(frozen=True)
class PaymentStructureRequest:
    """Wizard step 2: how the payable amount is split and when it falls due"""

    number_of_installments: int
    payment_frequency: PaymentFrequency
    first_college_due_date: Optional[date] = None
    student_lead_time_days: int = 0
    initial_payment_cents: int = 0
    initial_payment_due_date: Optional[date] = None
    initial_payment_paid: bool = False
    # Only read for PaymentFrequency.CUSTOM
    custom_college_due_dates: Optional[Tuple[date, ...]] = None


@dataclass(frozen=True)
class Installment:
    """Single payment in a payment plan (0 = initial payment)"""

    installment_number: int
    amount_cents: int
    student_due_date: date
    college_due_date: date
    is_initial_payment: bool = False
    generates_commission: bool = True
    status: InstallmentStatus = InstallmentStatus.DRAFT


InstallmentSchedule = Tuple[Installment, ...]


@dataclass(frozen=True)
class PlanSummary:
    """Headline figures shown next to a generated schedule"""

    total_course_value_cents: int
    commissionable_value_cents: int
    expected_commission_cents: int
    initial_payment_cents: int
    total_installments: int
    amount_per_installment_cents: int


@dataclass(frozen=True)
class PaymentPlanPreview:
    """Output of the wizard's generate step: schedule plus summary"""

    installments: InstallmentSchedule
    summary: PlanSummary
