"""
Farms Module - Pydantic Schemas
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from solar_simulator.modules.farms.models import AnomalyKind, Farm


class FarmConfig(BaseModel):
    """One entry of the farms file."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(..., min_length=1, pattern=r"^[A-Za-z0-9_.:-]+$", description="Label value used on every metric")
    name: str = Field(..., min_length=1, description="Display name")
    panels: int = Field(..., gt=0, description="Number of panels")
    peak_power_kw: float = Field(..., gt=0, alias="peakPower", description="Peak power per panel in kW")
    latitude: float = Field(..., ge=-90, le=90, alias="lat")

    def to_farm(self) -> Farm:
        return Farm(
            id=self.id,
            name=self.name,
            panels=self.panels,
            peak_power_kw=self.peak_power_kw,
            latitude=self.latitude,
        )


class FarmResponse(BaseModel):
    """Static farm description."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    panels: int
    peak_power_kw: float
    latitude: float
    rated_power_watts: float


class FarmListResponse(BaseModel):
    farms: list[FarmResponse]
    total: int


class SampleResponse(BaseModel):
    """Latest simulated reading."""
    irradiance: float = Field(..., description="W/m2")
    temperature: float = Field(..., description="Panel temperature in Celsius")
    power: float = Field(..., description="Instantaneous production in watts")
    inverter_status: int = Field(..., description="1=OK, 0=failed")
    anomaly: AnomalyKind | None = None
    timestamp: datetime


class FarmDetailResponse(FarmResponse):
    """Farm with its current sample."""
    sample: SampleResponse | None = None
