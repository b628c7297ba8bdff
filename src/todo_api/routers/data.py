from __future__ import annotations

from fastapi import APIRouter, Depends

from ..dependencies import get_data_service
from ..schemas import DataInitializeResult, DataResetResult, DataStatus, DataSummary
from ..services import DataService

router = APIRouter(
    prefix="/api/data",
    tags=["data"],
)


# PUBLIC_INTERFACE
@router.get(
    "/status",
    response_model=DataStatus,
    summary="Data Store Status",
    description="Current number of users and todos and the sample-data setting.",
)
def get_status(service: DataService = Depends(get_data_service)) -> DataStatus:
    """Report the size of the data store."""
    return DataStatus(**service.status())


# PUBLIC_INTERFACE
@router.post(
    "/reset",
    response_model=DataResetResult,
    summary="Reset Data Store",
    description="Remove all users and todos, restart ids at 1 and load the sample data.",
)
def reset_data(service: DataService = Depends(get_data_service)) -> DataResetResult:
    """Reset the store to the sample data."""
    return DataResetResult(**service.reset_data())


# PUBLIC_INTERFACE
@router.post(
    "/initialize",
    response_model=DataInitializeResult,
    summary="Seed Sample Data",
    description=(
        "Add the sample users and todos to the store. Existing data is kept, so "
        "calling this repeatedly adds further copies under new ids."
    ),
)
def initialize_sample_data(service: DataService = Depends(get_data_service)) -> DataInitializeResult:
    """Add another copy of the sample data."""
    return DataInitializeResult(**service.initialize_sample_data())


# PUBLIC_INTERFACE
@router.get(
    "/summary",
    response_model=DataSummary,
    summary="Data Summary",
    description="Per-user todo counts and per-todo creator name and overdue flag.",
)
def get_summary(service: DataService = Depends(get_data_service)) -> DataSummary:
    """Summarise users, todos and overdue items."""
    return DataSummary(**service.summary())
