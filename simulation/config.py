"""
Scoring configuration for the what-if simulation model.

All baselines, weights, bounds and thresholds are defined here as literal
constants. The model is a fixed heuristic, so nothing in this module is read
from files or fitted to data.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class ParameterSpec:
    """Range, default and slider metadata for one input parameter."""

    name: str
    column: str
    alias: str
    low: float
    high: float
    default: float
    step: float
    unit: str
    label: str
    description: str = ""

    def clamp(self, value: float) -> float:
        """Clip a value into [low, high]."""
        return float(min(self.high, max(self.low, float(value))))


METRICS = ("churn_risk", "retention_rate", "health_score", "satisfaction_score")


@dataclass(frozen=True)
class SimulationConfig:
    """
    Configuration for the simulation engine.

    Outputs start from a baseline and move by impact * weight for each of the
    five parameters:
    - Response time: lower is better, no credit past 48 hours
    - Support score: centered on 50
    - Escalation rate: lower is better, no credit past 30%
    - Communication frequency: saturates at 3 per week
    - Issue resolution: centered on 50%
    """

    # === Input parameters (slider ranges from the dashboard) ===
    parameters: Tuple[ParameterSpec, ...] = (
        ParameterSpec(
            "response_time", "RESPONSE_TIME", "responseTime",
            low=1, high=72, default=24, step=1, unit="hours",
            label="Average Response Time",
            description="Lower response times improve client satisfaction",
        ),
        ParameterSpec(
            "support_score", "SUPPORT_SCORE", "supportScore",
            low=40, high=100, default=75, step=5, unit="/100",
            label="Support Quality Score",
            description="Higher support scores reduce churn risk",
        ),
        ParameterSpec(
            "escalation_rate", "ESCALATION_RATE", "escalationRate",
            low=0, high=50, default=15, step=1, unit="%",
            label="Escalation Rate",
            description="Lower escalation rates indicate better first-line support",
        ),
        ParameterSpec(
            "communication_freq", "COMMUNICATION_FREQ", "communicationFreq",
            low=0.5, high=5, default=2, step=0.5, unit="x/week",
            label="Communication Frequency",
            description="Regular communication strengthens client relationships",
        ),
        ParameterSpec(
            "issue_resolution", "ISSUE_RESOLUTION", "issueResolution",
            low=50, high=100, default=85, step=1, unit="%",
            label="Issue Resolution Rate",
            description="Higher resolution rates directly correlate with client retention",
        ),
    )

    # === Impact pivots ===
    response_pivot: float = 48.0        # hours; slower than this earns nothing
    support_midpoint: float = 50.0
    escalation_pivot: float = 30.0      # percent; higher than this earns nothing
    communication_target: float = 3.0   # touches per week for full credit
    resolution_midpoint: float = 50.0

    # === Baselines ===
    baselines: Dict[str, float] = field(default_factory=lambda: {
        "churn_risk": 30.0,
        "retention_rate": 85.0,
        "health_score": 70.0,
        "satisfaction_score": 70.0,
    })

    # === Weights (impact -> metric points) ===
    weights: Dict[str, Dict[str, float]] = field(default_factory=lambda: {
        "response": {
            "churn_risk": -15, "retention_rate": 10,
            "health_score": 15, "satisfaction_score": 12,
        },
        "support": {
            "churn_risk": -20, "retention_rate": 12,
            "health_score": 20, "satisfaction_score": 15,
        },
        "escalation": {
            "churn_risk": -10, "retention_rate": 8,
            "health_score": 12, "satisfaction_score": 10,
        },
        "communication": {
            "churn_risk": -8, "retention_rate": 6,
            "health_score": 10, "satisfaction_score": 8,
        },
        "resolution": {
            "churn_risk": -25, "retention_rate": 15,
            "health_score": 25, "satisfaction_score": 20,
        },
    })

    # === Output bounds ===
    bounds: Dict[str, Tuple[float, float]] = field(default_factory=lambda: {
        "churn_risk": (5.0, 95.0),
        "retention_rate": (60.0, 98.0),
        "health_score": (30.0, 100.0),
        "satisfaction_score": (40.0, 100.0),
    })
    decimals: int = 1

    # === Risk Level Categorization ===
    # Evaluated top-down on churn risk, first match wins
    risk_thresholds: List[Tuple[float, str]] = field(default_factory=lambda: [
        (70.0, "Critical"),
        (50.0, "High"),
        (25.0, "Medium"),
        # below 25: Low
    ])
    risk_default: str = "Low"

    # === Comparison chart reference ("Current" bar) ===
    comparison_reference: Dict[str, float] = field(default_factory=lambda: {
        "churn_risk": 35.0,
        "retention_rate": 80.0,
    })

    # === Metadata ===
    version: str = "1.0.0"

    @property
    def parameter_names(self) -> List[str]:
        return [spec.name for spec in self.parameters]

    def parameter(self, name: str) -> ParameterSpec:
        """Look up a parameter by field name, column name or alias."""
        for spec in self.parameters:
            if name in (spec.name, spec.column, spec.alias):
                return spec
        raise ValueError(f"Unknown simulation parameter: {name!r}")

    def get_risk_level(self, churn_risk: float) -> str:
        """Map churn risk to risk level."""
        for threshold, level in self.risk_thresholds:
            if churn_risk >= threshold:
                return level
        return self.risk_default


# Default configuration instance
DEFAULT_CONFIG = SimulationConfig()

RISK_LEVELS = ["Low", "Medium", "High", "Critical"]
