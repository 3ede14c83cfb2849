from .logs import AxisLog, SimulationResult, TrackingResult

__all__ = ["AxisLog", "SimulationResult", "TrackingResult"]
