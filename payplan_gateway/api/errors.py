"""Mapping of domain exceptions to HTTP errors"""

import logging

from fastapi import HTTPException

from payplan_gateway.domain.exceptions import InternalConsistencyError, ValidationError
from payplan_gateway.infrastructure.observability.metrics import (
    consistency_failure_counter,
    validation_failure_counter,
)


def validation_failed(e: ValidationError, request_id: str) -> HTTPException:
    """Caller-correctable input: 422 with a field-level message"""
    validation_failure_counter.labels(field=e.field).inc()
    logging.warning(f"Validation failed: {e}", extra={"request_id": request_id, "field": e.field})
    return HTTPException(status_code=422, detail=[{"field": e.field, "message": e.message}])


def consistency_failed(e: InternalConsistencyError, request_id: str) -> HTTPException:
    """Reconciliation bug in the scheduler: logged loudly, never recovered"""
    consistency_failure_counter.inc()
    logging.error(f"Schedule reconciliation failed: {e}", extra={"request_id": request_id})
    return HTTPException(status_code=500, detail="Internal server error")


def unexpected_error(e: Exception, request_id: str) -> HTTPException:
    logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
    return HTTPException(status_code=500, detail="Internal server error")
