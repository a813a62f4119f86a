"""Service request endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, status

from fieldops.api.dependencies import (
    CurrentAccountDep,
    CustomerDep,
    ServiceRequestRepositoryDep,
    TransactionServiceDep,
)
from fieldops.api.schemas.common import ApiResponse
from fieldops.api.schemas.service_request import (
    ServiceRequestCreateRequest,
    ServiceRequestData,
    ServiceRequestListData,
    ServiceRequestResponse,
    ServiceRequestUpdateRequest,
)
from fieldops.application.use_cases.service_requests import (
    CreateServiceRequestRequest,
    CreateServiceRequestUseCase,
    GetServiceRequestUseCase,
    ListServiceRequestsUseCase,
    UpdateServiceRequestUseCase,
)
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.urgency import Urgency

router = APIRouter(prefix="/service-requests", tags=["service-requests"])


@router.post(
    "",
    response_model=ApiResponse[ServiceRequestData],
    status_code=status.HTTP_201_CREATED,
)
async def create_service_request(
    payload: ServiceRequestCreateRequest,
    customer: CustomerDep,
    service_request_repository: ServiceRequestRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Open a new service request (customers only)."""
    use_case = CreateServiceRequestUseCase(service_request_repository, transaction_service)
    service_request = await use_case.execute(
        customer,
        CreateServiceRequestRequest(
            title=payload.title,
            description=payload.description,
            location=payload.location,
            category=payload.category,
            urgency=payload.urgency,
            budget=payload.budget,
            preferred_date=payload.preferred_date,
        ),
    )
    return ApiResponse[ServiceRequestData](
        message="Service request created successfully",
        data=ServiceRequestData(
            service_request=ServiceRequestResponse.model_validate(service_request)
        ),
    )


@router.get("", response_model=ApiResponse[ServiceRequestListData])
async def list_service_requests(
    caller: CurrentAccountDep,
    service_request_repository: ServiceRequestRepositoryDep,
    status: Optional[RequestStatus] = None,
    urgency: Optional[Urgency] = None,
    category: Optional[str] = None,
):
    """List the requests visible to the caller."""
    requests = await ListServiceRequestsUseCase(service_request_repository).execute(
        caller, status=status, urgency=urgency, category=category
    )
    return ApiResponse[ServiceRequestListData](
        message="Service requests retrieved successfully",
        data=ServiceRequestListData(
            service_requests=[
                ServiceRequestResponse.model_validate(item) for item in requests
            ],
            count=len(requests),
        ),
    )


@router.get("/{request_id}", response_model=ApiResponse[ServiceRequestData])
async def get_service_request(
    request_id: UUID,
    caller: CurrentAccountDep,
    service_request_repository: ServiceRequestRepositoryDep,
):
    service_request = await GetServiceRequestUseCase(
        service_request_repository
    ).execute(caller, request_id)
    return ApiResponse[ServiceRequestData](
        message="Service request retrieved successfully",
        data=ServiceRequestData(
            service_request=ServiceRequestResponse.model_validate(service_request)
        ),
    )


@router.put("/{request_id}", response_model=ApiResponse[ServiceRequestData])
async def update_service_request(
    request_id: UUID,
    payload: ServiceRequestUpdateRequest,
    caller: CurrentAccountDep,
    service_request_repository: ServiceRequestRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Edit the descriptive fields of a request (owner or admin)."""
    use_case = UpdateServiceRequestUseCase(service_request_repository, transaction_service)
    service_request = await use_case.execute(
        caller, request_id, payload.model_dump(exclude_unset=True)
    )
    return ApiResponse[ServiceRequestData](
        message="Service request updated successfully",
        data=ServiceRequestData(
            service_request=ServiceRequestResponse.model_validate(service_request)
        ),
    )
