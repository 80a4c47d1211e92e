"""Fee resolution - how much of a course fee earns agency commission"""

from payplan_gateway.domain.exceptions import ValidationError
from payplan_gateway.domain.models import FeeBreakdown


def resolve_commissionable_value(breakdown: FeeBreakdown) -> int:
    """
    Subtract non-commissionable fees from the total course value.

    Requirements:
    - Every fee is non-negative (rejected, never clamped)
    - Fees must sum to strictly less than the total course value

    Example:
        $9,250 total - $250 materials - $250 admin = $8,750.00 commissionable
    """
    if breakdown.total_course_value_cents <= 0:
        raise ValidationError("total_course_value", "Total course value must be positive")

    fees = {
        "materials_cost": breakdown.materials_cost_cents,
        "admin_fees": breakdown.admin_fees_cents,
        "other_fees": breakdown.other_fees_cents,
    }
    for field, cents in fees.items():
        if cents < 0:
            raise ValidationError(field, "Fee cannot be negative")

    total_fees = sum(fees.values())
    if total_fees >= breakdown.total_course_value_cents:
        raise ValidationError("fees", "Total fees cannot exceed or equal total course value")

    return breakdown.total_course_value_cents - total_fees
