"""
What-if Client Health Simulation Package

A heuristic engine for predicting how operational changes move client
churn risk, retention, health and satisfaction.
"""

from .config import DEFAULT_CONFIG, SimulationConfig
from .params import SimulationParams, SimulationResult
from .engine import SimulationEngine, compute
from .session import SimulationSession

__all__ = [
    "DEFAULT_CONFIG",
    "SimulationConfig",
    "SimulationParams",
    "SimulationResult",
    "SimulationEngine",
    "SimulationSession",
    "compute",
]
__version__ = "1.0.0"
