"""
Generator Module - Service Layer

Tick: clock -> irradiance -> temperature -> production -> anomaly -> registry
"""
from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Protocol, Sequence, TypeVar

from solar_simulator.core.logging import get_logger
from solar_simulator.core.metrics import FarmRegistry
from solar_simulator.modules.farms.models import AnomalyKind, Farm, InverterStatus, Sample
from solar_simulator.modules.generator.model import SolarModel, fractional_hour

logger = get_logger(__name__)

T = TypeVar("T")

Clock = Callable[[], datetime]


class RandomSource(Protocol):
    """Subset of random.Random used by the generator."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


ANOMALY_KINDS: tuple[AnomalyKind, ...] = tuple(AnomalyKind)


class MetricsGenerator:
    """Computes one sample per farm and writes it into the registry."""

    def __init__(
        self,
        farms: Sequence[Farm],
        registry: FarmRegistry,
        model: SolarModel | None = None,
        rng: RandomSource | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.farms = tuple(farms)
        self.registry = registry
        self.model = model or SolarModel()
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now

    def tick(self, now: datetime | None = None) -> list[Sample]:
        """Generate and publish a fresh sample for every farm."""
        now = now or self.clock()
        hour = fractional_hour(now)

        samples = []
        for farm in self.farms:
            sample = self.simulate(farm, hour, now)
            self.registry.publish(sample)
            samples.append(sample)
        return samples

    def simulate(self, farm: Farm, hour: float, now: datetime) -> Sample:
        """Sample of one farm at the given fractional hour."""
        model = self.model

        irradiance = model.clear_sky_irradiance(hour)
        if irradiance > 0:
            irradiance *= self.rng.uniform(model.atmospheric_min, model.atmospheric_max)

        temperature = model.panel_temperature(irradiance)
        # Derating uses the temperature before any overheat offset
        production = model.production(farm, irradiance, temperature)

        inverter_status = InverterStatus.OK
        anomaly = None
        if self.rng.random() < model.anomaly_probability:
            anomaly = self.rng.choice(ANOMALY_KINDS)

            if anomaly is AnomalyKind.INVERTER_FAILURE:
                production = 0.0
                inverter_status = InverterStatus.FAILED
                logger.warning("Inverter failure", farm=farm.id, farm_name=farm.name)
            elif anomaly is AnomalyKind.OVERHEAT:
                temperature += model.overheat_offset
                logger.warning("Panel overheat", farm=farm.id, farm_name=farm.name, temperature=round(temperature, 2))
            else:
                production *= model.degraded_factor
                logger.debug("Degraded output", farm=farm.id, farm_name=farm.name)

        return Sample(
            farm_id=farm.id,
            irradiance=round(irradiance, 2),
            temperature=round(temperature, 2),
            power=max(0.0, round(production, 2)),
            inverter_status=inverter_status,
            timestamp=now,
            anomaly=anomaly,
        )
