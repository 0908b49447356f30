"""
Farms Module - Static fleet and per-farm samples.

Models: Farm, Sample, AnomalyKind, InverterStatus
"""
from solar_simulator.modules.farms.models import AnomalyKind, Farm, InverterStatus, Sample

__all__ = [
    "AnomalyKind",
    "Farm",
    "InverterStatus",
    "Sample",
]
