"""
Farms Module - API Routes

Read-only JSON views of the static fleet and the latest samples.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from solar_simulator.core.exceptions import NotFoundError
from solar_simulator.core.metrics import RegistryDep
from solar_simulator.modules.farms.models import Farm, Sample
from solar_simulator.modules.farms.schemas import (
    FarmDetailResponse,
    FarmListResponse,
    FarmResponse,
    SampleResponse,
)

router = APIRouter(prefix="/farms", tags=["Farms"])


def get_farms(request: Request) -> tuple[Farm, ...]:
    """Fleet loaded at startup."""
    return request.app.state.farms


FarmsDep = Annotated[tuple[Farm, ...], Depends(get_farms)]


def _sample_response(sample: Sample) -> SampleResponse:
    return SampleResponse(
        irradiance=sample.irradiance,
        temperature=sample.temperature,
        power=sample.power,
        inverter_status=int(sample.inverter_status),
        anomaly=sample.anomaly,
        timestamp=sample.timestamp,
    )


@router.get("", response_model=FarmListResponse)
async def list_farms(farms: FarmsDep):
    """List configured farms."""
    return FarmListResponse(
        farms=[FarmResponse.model_validate(farm) for farm in farms],
        total=len(farms),
    )


@router.get("/{farm_id}", response_model=FarmDetailResponse)
async def get_farm(farm_id: str, farms: FarmsDep, registry: RegistryDep):
    """Get a farm with its current simulated sample."""
    farm = next((f for f in farms if f.id == farm_id), None)
    if farm is None:
        raise NotFoundError("Farm", farm_id)

    sample = registry.latest(farm.id)
    return FarmDetailResponse(
        **FarmResponse.model_validate(farm).model_dump(),
        sample=_sample_response(sample) if sample else None,
    )
