"""
Generator Module - Physical Model

Deterministic part of the simulation: irradiance from the hour of day,
panel temperature from irradiance, and temperature-derated production.
"""
import math
from dataclasses import dataclass
from datetime import datetime

from solar_simulator.modules.farms.models import Farm

PEAK_IRRADIANCE = 1000.0  # W/m2, standard test conditions


@dataclass(frozen=True, slots=True)
class SolarModel:
    """Constants of the simulation."""

    sunrise_hour: float = 6.0
    sunset_hour: float = 18.0
    atmospheric_min: float = 0.8
    atmospheric_max: float = 1.0
    ambient_temperature: float = 15.0
    max_temperature_rise: float = 30.0
    reference_temperature: float = 25.0
    temperature_coefficient: float = 0.0035
    system_efficiency: float = 0.85
    anomaly_probability: float = 0.10
    overheat_offset: float = 30.0
    degraded_factor: float = 0.5

    def clear_sky_irradiance(self, hour: float) -> float:
        """Irradiance before atmospheric variation; zero outside daylight."""
        if not self.sunrise_hour < hour < self.sunset_hour:
            return 0.0
        day_length = self.sunset_hour - self.sunrise_hour
        return PEAK_IRRADIANCE * math.sin(math.pi * (hour - self.sunrise_hour) / day_length)

    def panel_temperature(self, irradiance: float) -> float:
        return self.ambient_temperature + (irradiance / PEAK_IRRADIANCE) * self.max_temperature_rise

    def temperature_derating(self, temperature: float) -> float:
        """Linear derating around the reference temperature (above 1 when colder)."""
        return 1 - self.temperature_coefficient * (temperature - self.reference_temperature)

    def production(self, farm: Farm, irradiance: float, temperature: float) -> float:
        """Nominal farm output in watts."""
        return (
            farm.panels
            * farm.peak_power_watts
            * (irradiance / PEAK_IRRADIANCE)
            * self.system_efficiency
            * self.temperature_derating(temperature)
        )


def fractional_hour(moment: datetime) -> float:
    """Hour of day with minutes as the fraction, e.g. 13:30 -> 13.5."""
    return moment.hour + moment.minute / 60
