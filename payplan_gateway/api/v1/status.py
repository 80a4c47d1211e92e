"""POST /v1/installments/status - re-evaluate installment statuses for a date"""

from fastapi import APIRouter, Depends

from payplan_gateway.api.dependencies import get_settings
from payplan_gateway.api.v1.schemas import (
    InstallmentStatusRequest,
    InstallmentStatusResponse,
    InstallmentStatusResult,
)
from payplan_gateway.config import Settings
from payplan_gateway.domain.status import classify_installment_status

router = APIRouter()


@router.post("/installments/status", response_model=InstallmentStatusResponse)
def evaluate_installment_statuses(
    request_body: InstallmentStatusRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Compute the status each installment should carry on as_of.

    The caller owns persistence and applies the returned transitions.
    """
    results = []
    for item in request_body.installments:
        new_status = classify_installment_status(
            item.status,
            item.student_due_date,
            request_body.as_of,
            settings.due_soon_threshold_days,
        )
        results.append(
            InstallmentStatusResult(
                installment_number=item.installment_number,
                previous_status=item.status,
                status=new_status,
                changed=new_status != item.status,
            )
        )

    return InstallmentStatusResponse(as_of=request_body.as_of, installments=results)
