"""
Generator Module - Synthetic telemetry.

Tick: clock -> irradiance -> temperature -> production -> anomaly -> registry
"""
from solar_simulator.modules.generator.model import SolarModel
from solar_simulator.modules.generator.scheduler import PeriodicTask
from solar_simulator.modules.generator.service import MetricsGenerator, RandomSource

__all__ = [
    "MetricsGenerator",
    "PeriodicTask",
    "RandomSource",
    "SolarModel",
]
