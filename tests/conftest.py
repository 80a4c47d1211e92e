"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from payplan_gateway.api.main import create_app
from payplan_gateway.domain.models import PaymentFrequency, PaymentStructureRequest


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def monthly_request() -> PaymentStructureRequest:
    """Three monthly installments anchored on a month end, no initial payment"""
    return PaymentStructureRequest(
        number_of_installments=3,
        payment_frequency=PaymentFrequency.MONTHLY,
        first_college_due_date=date(2025, 1, 31),
        student_lead_time_days=0,
    )


@pytest.fixture
def wizard_payload() -> dict:
    """Complete wizard body for POST /v1/payment-plans/preview"""
    return {
        "total_course_value": "5200.00",
        "materials_cost": "200.00",
        "admin_fees": "0",
        "other_fees": "0",
        "commission_rate": "0.15",
        "gst_inclusive": True,
        "initial_payment_amount": "500.00",
        "initial_payment_due_date": "2025-02-01",
        "initial_payment_paid": False,
        "number_of_installments": 6,
        "payment_frequency": "monthly",
        "first_college_due_date": "2025-03-15",
        "student_lead_time_days": 7,
    }
