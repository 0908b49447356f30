"""
Prometheus Metrics - Farm Telemetry Registry

Holds the current gauge values of every farm and exposes them at the
/metrics endpoint for Prometheus scraping.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from prometheus_client import CollectorRegistry, Gauge, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_PLAIN_0_0_4

from solar_simulator.modules.farms.models import Sample

FARM_LABEL = "farm"


class FarmRegistry:
    """
    In-memory store of the latest sample per farm.

    Each instance owns its own CollectorRegistry, so several applications
    (or tests) never share gauge state. Every gauge set is a single locked
    assignment inside prometheus_client; a concurrent scrape sees either the
    old or the new value of each gauge.
    """

    content_type = CONTENT_TYPE_PLAIN_0_0_4

    def __init__(self) -> None:
        self.collector_registry = CollectorRegistry(auto_describe=True)
        self._samples: dict[str, Sample] = {}

        self.power = Gauge(
            "solar_power_watts",
            "Instantaneous electrical production",
            [FARM_LABEL],
            registry=self.collector_registry,
        )
        self.irradiance = Gauge(
            "solar_irradiance_wm2",
            "Measured solar irradiance",
            [FARM_LABEL],
            registry=self.collector_registry,
        )
        self.temperature = Gauge(
            "solar_panel_temperature_celsius",
            "Panel temperature",
            [FARM_LABEL],
            registry=self.collector_registry,
        )
        self.inverter_status = Gauge(
            "solar_inverter_status",
            "Inverter status (1=OK, 0=failed)",
            [FARM_LABEL],
            registry=self.collector_registry,
        )

    def publish(self, sample: Sample) -> None:
        """Overwrite the gauges of one farm with a new sample."""
        farm_id = sample.farm_id
        self.power.labels(farm=farm_id).set(sample.power)
        self.irradiance.labels(farm=farm_id).set(sample.irradiance)
        self.temperature.labels(farm=farm_id).set(sample.temperature)
        self.inverter_status.labels(farm=farm_id).set(int(sample.inverter_status))
        self._samples[farm_id] = sample

    def latest(self, farm_id: str) -> Sample | None:
        return self._samples.get(farm_id)

    def snapshot(self) -> dict[str, Sample]:
        """Copy of the current sample of every farm."""
        return dict(self._samples)

    def render(self) -> bytes:
        """Render all gauges in the Prometheus text exposition format."""
        return generate_latest(self.collector_registry)

    def clear(self) -> None:
        """Drop every farm series. Used on shutdown."""
        for gauge in (self.power, self.irradiance, self.temperature, self.inverter_status):
            gauge.clear()
        self._samples.clear()


def get_registry(request: Request) -> FarmRegistry:
    """Registry owned by the running application."""
    return request.app.state.registry


RegistryDep = Annotated[FarmRegistry, Depends(get_registry)]


# === Metrics Router ===
router = APIRouter(tags=["Metrics"])


@router.get("/metrics", include_in_schema=False)
async def metrics(registry: RegistryDep):
    """
    Prometheus metrics endpoint.

    Scrape this endpoint with Prometheus:
    ```yaml
    scrape_configs:
      - job_name: 'solar-simulator'
        scrape_interval: 5s
        static_configs:
          - targets: ['localhost:3000']
    ```
    """
    return Response(
        content=registry.render(),
        media_type=registry.content_type,
    )
