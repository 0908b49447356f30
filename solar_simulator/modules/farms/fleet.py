"""
Farms Module - Fleet Loading

The fleet is static: either the built-in default farms or a JSON array
read once from FARMS_FILE at startup.
"""
from collections import Counter
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from solar_simulator.core.exceptions import ConfigurationError
from solar_simulator.core.logging import get_logger
from solar_simulator.modules.farms.models import Farm
from solar_simulator.modules.farms.schemas import FarmConfig

logger = get_logger(__name__)

DEFAULT_FARMS: tuple[Farm, ...] = (
    Farm(id="provence", name="Marseille", panels=5000, peak_power_kw=0.4, latitude=43.29),
    Farm(id="occitanie", name="Montpellier", panels=3500, peak_power_kw=0.4, latitude=43.61),
    Farm(id="aquitaine", name="Bordeaux", panels=4200, peak_power_kw=0.4, latitude=44.83),
)

_farm_list_adapter = TypeAdapter(list[FarmConfig])


def parse_farms(raw: bytes | str) -> tuple[Farm, ...]:
    """Validate a JSON farm list and convert it to Farm objects."""
    try:
        configs = _farm_list_adapter.validate_json(raw)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid farm configuration: {exc.error_count()} error(s)",
            details={
                "validation_errors": [
                    {
                        "field": ".".join(str(loc) for loc in err.get("loc", [])),
                        "message": err.get("msg", "Invalid value"),
                    }
                    for err in exc.errors()
                ]
            },
        ) from exc

    if not configs:
        raise ConfigurationError("Farm configuration must contain at least one farm")

    counts = Counter(config.id for config in configs)
    duplicates = sorted(farm_id for farm_id, count in counts.items() if count > 1)
    if duplicates:
        raise ConfigurationError(
            "Duplicate farm identifiers",
            details={"duplicates": duplicates},
        )

    return tuple(config.to_farm() for config in configs)


def load_farms(path: str | Path | None = None) -> tuple[Farm, ...]:
    """Load the fleet from a JSON file, or return the default fleet."""
    if not path:
        logger.info("Using default farm fleet", farms=[farm.id for farm in DEFAULT_FARMS])
        return DEFAULT_FARMS

    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read farm file: {path}",
            details={"path": str(path), "reason": str(exc)},
        ) from exc

    farms = parse_farms(raw)
    logger.info("Farms loaded", path=str(path), farms=[farm.id for farm in farms])
    return farms
