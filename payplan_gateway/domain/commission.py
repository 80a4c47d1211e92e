"""Commission calculation - expected and earned agency commission"""

from decimal import Decimal

from payplan_gateway.domain.exceptions import ValidationError
from payplan_gateway.domain.models import CommissionInput
from payplan_gateway.domain.money import round_half_up_cents

GST_RATE = Decimal("0.10")


def calculate_expected_commission(commission: CommissionInput, gst_rate: Decimal = GST_RATE) -> int:
    """
    Calculate expected commission in cents.

    When the commissionable value is quoted GST-exclusive the GST component
    is removed first (value / 1.10). Rounding happens once, on the final
    figure.

    Examples:
        $8,750.00 @ 30%, GST inclusive  -> $2,625.00
        $9,200.00 @ 15%, GST exclusive  -> 9200 / 1.10 * 0.15 = $1,254.55
    """
    rate = Decimal(commission.commission_rate)
    if rate < 0 or rate > 1:
        raise ValidationError("commission_rate", "Commission rate must be between 0 and 1")
    if commission.commissionable_value_cents < 0:
        raise ValidationError("commissionable_value", "Commissionable value cannot be negative")

    base = Decimal(commission.commissionable_value_cents)
    if not commission.gst_inclusive:
        base = base / (1 + gst_rate)

    return round_half_up_cents(base * rate)


def calculate_earned_commission(
    paid_cents: int,
    total_course_value_cents: int,
    expected_commission_cents: int,
) -> int:
    """
    Commission earned so far, pro-rata to the share of the course fee paid.

    earned = paid / total * expected, paid capped at total.
    """
    if paid_cents < 0:
        raise ValidationError("paid_amount", "Paid amount cannot be negative")
    if expected_commission_cents < 0:
        raise ValidationError("expected_commission", "Expected commission cannot be negative")
    if total_course_value_cents <= 0:
        return 0

    paid = min(paid_cents, total_course_value_cents)
    earned = Decimal(paid) * Decimal(expected_commission_cents) / Decimal(total_course_value_cents)
    return round_half_up_cents(earned)
