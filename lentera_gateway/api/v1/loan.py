"""POST /v1/loan/metrics - loan cost and risk calculation endpoint"""

import time
import logging
from typing import Optional, Tuple
from fastapi import APIRouter, Depends, HTTPException, Request

from lentera_gateway.api.v1.schemas import LoanMetricsRequest, LoanMetricsResponse, ValidationErrorResponse
from lentera_gateway.api.dependencies import get_registry_client, get_request_id
from lentera_gateway.infrastructure.clients.registry import RegistryClient
from lentera_gateway.domain.validation import validate_loan_input
from lentera_gateway.domain.scoring import compute_loan_metrics
from lentera_gateway.domain.exceptions import RegistryAPIError, ValidationError
from lentera_gateway.infrastructure.observability.metrics import record_calculation, validation_failure_counter
from lentera_gateway.infrastructure.observability.logging import log_calculation

router = APIRouter()


async def resolve_registration(
    request_body: LoanMetricsRequest,
    registry_client: RegistryClient,
    request_id: str,
) -> Tuple[bool, str, Optional[str]]:
    """
    Decide the legality flag fed to the scorer.

    Returns: (is_registered, registry_status, registry_message)

    Any lender the registry cannot confirm is treated as unregistered.
    """
    if request_body.is_registered is not None:
        return request_body.is_registered, "provided", None

    lender_name = request_body.lender_name.strip()
    if not lender_name:
        return False, "skipped", None

    try:
        verification = await registry_client.verify_lender(lender_name)
    except RegistryAPIError as e:
        logging.warning(f"Registry lookup failed: {e}", extra={"request_id": request_id})
        return False, "unavailable", None

    if verification.is_registered:
        status = "registered"
    elif verification.is_illegal:
        status = "illegal"
    else:
        status = "unregistered"

    return verification.is_registered, status, verification.message


@router.post(
    "/loan/metrics",
    response_model=LoanMetricsResponse,
    responses={422: {"model": ValidationErrorResponse, "description": "Invalid loan parameters"}},
)
async def calculate_loan_metrics(
    request_body: LoanMetricsRequest,
    request: Request,
    registry_client: RegistryClient = Depends(get_registry_client),
):
    """
    Calculate standardized cost metrics and a risk score for a proposed loan.

    Flow:
    1. Validate loan parameters (fail fast on the first bad field)
    2. Resolve lender registration (request flag, or registry lookup)
    3. Normalize interest, compute installment, DTI and risk score
    4. Return rounded metrics with registry status
    """
    start_time = time.time()
    request_id = get_request_id(request)
    loan = request_body.to_domain()

    try:
        # 1. Validate before touching the registry
        validate_loan_input(loan)

        # 2. Legality flag
        is_registered, registry_status, registry_message = await resolve_registration(
            request_body, registry_client, request_id
        )

        # 3. Calculate
        metrics = compute_loan_metrics(loan, is_registered)

    except ValidationError as e:
        validation_failure_counter.labels(field=e.field).inc()
        logging.warning(f"Invalid loan input: {e}", extra={"request_id": request_id, "field": e.field})
        raise HTTPException(status_code=422, detail={"field": e.field, "message": e.message})

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_calculation(metrics.risk_level.value, metrics.effective_apr)
    log_calculation(
        request_id,
        loan.interest_type.value,
        metrics.risk_score,
        metrics.risk_level.value,
        registry_status,
        duration_ms,
    )

    return LoanMetricsResponse(
        total_repayment=metrics.total_repayment,
        monthly_installment=metrics.monthly_installment,
        effective_apr=metrics.effective_apr,
        dti_ratio=metrics.dti_ratio,
        risk_score=metrics.risk_score,
        risk_level=metrics.risk_level,
        total_interest=metrics.total_interest,
        affordability_band=metrics.affordability_band,
        is_registered=is_registered,
        registry_status=registry_status,
        registry_message=registry_message,
    )
