"""
Farms Module - Domain Models

Farm: static installation description, loaded once at startup.
Sample: latest simulated reading of a farm, replaced on every tick.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AnomalyKind(str, Enum):
    """Simulated incident injected into a sample."""
    INVERTER_FAILURE = "inverter_failure"
    OVERHEAT = "overheat"
    DEGRADED_OUTPUT = "degraded_output"


class InverterStatus(int, Enum):
    """Inverter health as exported on the gauge."""
    FAILED = 0
    OK = 1


@dataclass(frozen=True, slots=True)
class Farm:
    """A modeled solar installation."""

    id: str
    name: str
    panels: int
    peak_power_kw: float
    latitude: float

    @property
    def peak_power_watts(self) -> float:
        """Peak rating of a single panel in watts."""
        return self.peak_power_kw * 1000

    @property
    def rated_power_watts(self) -> float:
        return self.panels * self.peak_power_watts


@dataclass(frozen=True, slots=True)
class Sample:
    """Instantaneous values published for one farm."""

    farm_id: str
    irradiance: float
    temperature: float
    power: float
    inverter_status: InverterStatus
    timestamp: datetime
    anomaly: AnomalyKind | None = None
