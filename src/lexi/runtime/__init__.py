"""Runtime services shared by every editor component."""

from . import telemetry

__all__ = ["telemetry"]
