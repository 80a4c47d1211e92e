"""POST /v1/commission/expected - commissionable value and commission figures"""

from fastapi import APIRouter, Depends, Request

from payplan_gateway.api.dependencies import get_request_id, get_settings
from payplan_gateway.api.errors import unexpected_error, validation_failed
from payplan_gateway.api.v1.plan import to_fee_breakdown
from payplan_gateway.api.v1.schemas import CommissionRequest, CommissionResponse
from payplan_gateway.config import Settings
from payplan_gateway.domain.commission import calculate_earned_commission, calculate_expected_commission
from payplan_gateway.domain.exceptions import ValidationError
from payplan_gateway.domain.fees import resolve_commissionable_value
from payplan_gateway.domain.models import CommissionInput
from payplan_gateway.domain.money import from_cents, to_cents

router = APIRouter()


@router.post("/commission/expected", response_model=CommissionResponse)
def get_expected_commission(
    request_body: CommissionRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Calculate commission figures for a fee breakdown.

    Returns:
        Commissionable value, expected commission and commission earned
        on paid_amount so far
    """
    request_id = get_request_id(request)

    try:
        fees = to_fee_breakdown(request_body)
        commissionable_value = resolve_commissionable_value(fees)
        expected_commission = calculate_expected_commission(
            CommissionInput(
                commissionable_value_cents=commissionable_value,
                commission_rate=request_body.commission_rate,
                gst_inclusive=request_body.gst_inclusive,
            ),
            gst_rate=settings.gst_rate,
        )
        earned_commission = calculate_earned_commission(
            to_cents(request_body.paid_amount, "paid_amount"),
            fees.total_course_value_cents,
            expected_commission,
        )
    except ValidationError as e:
        raise validation_failed(e, request_id)
    except Exception as e:
        raise unexpected_error(e, request_id)

    return CommissionResponse(
        commissionable_value=from_cents(commissionable_value),
        expected_commission=from_cents(expected_commission),
        earned_commission=from_cents(earned_commission),
    )
