"""Solar farm fleet simulator exposing synthetic telemetry as Prometheus gauges."""

__version__ = "1.0.0"
