"""
Pytest Configuration and Fixtures.

Shared fixtures: a deterministic random source, fixed clock moments,
a farm, a registry, and an application wired with both.
"""
from datetime import datetime

import pytest

from solar_simulator.core.config import Settings
from solar_simulator.core.metrics import FarmRegistry
from solar_simulator.main import create_application
from solar_simulator.modules.farms.models import AnomalyKind, Farm
from solar_simulator.modules.generator.service import MetricsGenerator


class ScriptedRandom:
    """
    Deterministic stand-in for random.Random.

    uniform() returns the atmospheric factor, random() the anomaly roll,
    choice() the scripted anomaly kind (or the first element).
    """

    def __init__(self, factor: float = 1.0, roll: float = 0.99, anomaly: AnomalyKind | None = None):
        self.factor = factor
        self.roll = roll
        self.anomaly = anomaly
        self.uniform_calls = 0

    def random(self) -> float:
        return self.roll

    def uniform(self, a: float, b: float) -> float:
        assert a <= self.factor <= b
        self.uniform_calls += 1
        return self.factor

    def choice(self, seq):
        if self.anomaly is not None:
            assert self.anomaly in seq
            return self.anomaly
        return seq[0]


@pytest.fixture
def noon() -> datetime:
    return datetime(2024, 6, 21, 12, 0)


@pytest.fixture
def night() -> datetime:
    return datetime(2024, 6, 21, 3, 0)


@pytest.fixture
def scripted_rng():
    """Factory: ScriptedRandom(factor=..., roll=..., anomaly=...)."""
    return ScriptedRandom


@pytest.fixture
def anomaly_rng():
    """Factory: random source that always injects the given anomaly."""
    def build(kind: AnomalyKind) -> ScriptedRandom:
        return ScriptedRandom(factor=1.0, roll=0.0, anomaly=kind)
    return build


@pytest.fixture
def farm() -> Farm:
    return Farm(id="provence", name="Marseille", panels=5000, peak_power_kw=0.4, latitude=43.29)


@pytest.fixture
def registry() -> FarmRegistry:
    return FarmRegistry()


@pytest.fixture
def quiet_rng() -> ScriptedRandom:
    """No atmospheric loss, never an anomaly."""
    return ScriptedRandom()


@pytest.fixture
def generator(farm, registry, quiet_rng, noon) -> MetricsGenerator:
    return MetricsGenerator([farm], registry, rng=quiet_rng, clock=lambda: noon)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, tick_interval_seconds=0.01, environment="development")


@pytest.fixture
def app(test_settings, noon):
    """Application with deterministic randomness and a noon clock."""
    return create_application(test_settings, rng=ScriptedRandom(), clock=lambda: noon)
