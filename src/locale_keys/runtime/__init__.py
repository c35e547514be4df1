"""Runtime services (telemetry) shared across locale_keys."""

from . import telemetry

__all__ = ["telemetry"]
