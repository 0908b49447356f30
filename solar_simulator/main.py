"""
Solar Simulator - Main Application Entry Point
Application Factory Pattern: the factory owns the registry, the generator
and the periodic tick task for the lifetime of the process.
"""
import random
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from solar_simulator.core.config import Settings, settings as default_settings
from solar_simulator.core.exceptions import (
    ConfigurationError,
    SolarSimulatorException,
    generic_exception_handler,
    http_exception_handler,
    solar_simulator_exception_handler,
)
from solar_simulator.core.logging import configure_logging, get_logger
from solar_simulator.core.metrics import FarmRegistry
from solar_simulator.core.metrics import router as metrics_router
from solar_simulator.core.sentry import init_sentry
from solar_simulator.modules.farms.fleet import load_farms
from solar_simulator.modules.farms.router import router as farms_router
from solar_simulator.modules.generator.model import SolarModel
from solar_simulator.modules.generator.scheduler import PeriodicTask
from solar_simulator.modules.generator.service import Clock, MetricsGenerator, RandomSource

# Configure logging on module load
configure_logging()
logger = get_logger(__name__)


def build_clock(timezone: str) -> Clock:
    """Wall clock in the configured time zone, local time when empty."""
    if not timezone:
        return datetime.now
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(
            f"Unknown time zone: {timezone}",
            details={"timezone": timezone},
        ) from exc
    return lambda: datetime.now(tz)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Publishes a first sample per farm, then ticks until shutdown.
    """
    settings: Settings = app.state.settings
    generator: MetricsGenerator = app.state.generator

    generator.tick()
    ticker = PeriodicTask(generator.tick, settings.tick_interval_seconds, name="metrics-generator")
    app.state.ticker = ticker
    ticker.start()

    logger.info(
        "Solar Simulator started",
        port=settings.port,
        metrics_url=settings.metrics_url,
        farms=len(generator.farms),
        environment=settings.environment,
    )

    try:
        yield
    finally:
        await ticker.stop()
        app.state.registry.clear()
        logger.info("Shutting down Solar Simulator")


def create_application(
    settings: Settings | None = None,
    rng: RandomSource | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings

    farms = load_farms(settings.farms_file or None)
    registry = FarmRegistry()
    model = SolarModel(
        system_efficiency=settings.system_efficiency,
        anomaly_probability=settings.anomaly_probability,
    )
    generator = MetricsGenerator(
        farms,
        registry,
        model=model,
        rng=rng or random.Random(settings.seed),
        clock=clock or build_clock(settings.timezone),
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.app_version,
        description="Simulated solar farm telemetry exposed as Prometheus gauges.",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.farms = farms
    app.state.registry = registry
    app.state.generator = generator

    init_sentry(settings)

    app.add_exception_handler(SolarSimulatorException, solar_simulator_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(metrics_router)
    app.include_router(farms_router, prefix=settings.api_v1_str)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "solar-simulator"}

    @app.get("/", tags=["root"])
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "service": settings.project_name,
            "version": settings.app_version,
            "metrics": "/metrics",
            "docs": "/docs" if settings.debug else "disabled",
        }

    return app


# Create application instance
app = create_application()


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "solar_simulator.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level="debug" if default_settings.debug else "info",
    )


if __name__ == "__main__":
    run()
