"""
Parameter and result containers for the what-if simulation.

SimulationParams is the live, mutable input vector owned by a session.
SimulationResult is a derived snapshot and is never edited after creation.
"""

from dataclasses import asdict, dataclass, replace
from typing import Optional

from .config import DEFAULT_CONFIG, SimulationConfig


@dataclass
class SimulationParams:
    """
    The five adjustable inputs.

    Attributes:
        response_time: Average response time in hours [1, 72]
        support_score: Support quality score [40, 100]
        escalation_rate: Escalation rate in percent [0, 50]
        communication_freq: Client touches per week [0.5, 5]
        issue_resolution: Issue resolution rate in percent [50, 100]
    """

    response_time: float = 24.0
    support_score: float = 75.0
    escalation_rate: float = 15.0
    communication_freq: float = 2.0
    issue_resolution: float = 85.0

    def clamped(self, config: Optional[SimulationConfig] = None) -> "SimulationParams":
        """Return a copy with every field clipped into its declared range."""
        config = config or DEFAULT_CONFIG
        return replace(self, **{
            spec.name: spec.clamp(getattr(self, spec.name))
            for spec in config.parameters
        })

    def copy(self) -> "SimulationParams":
        return replace(self)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(
        cls,
        data: dict,
        config: Optional[SimulationConfig] = None,
    ) -> "SimulationParams":
        """
        Build params from a mapping, filling missing fields with defaults.

        Keys may be field names (response_time), frame columns
        (RESPONSE_TIME) or the dashboard's camelCase names (responseTime).

        Raises:
            ValueError: If a key does not name a parameter
        """
        config = config or DEFAULT_CONFIG
        values = {spec.name: spec.default for spec in config.parameters}
        for key, value in data.items():
            values[config.parameter(key).name] = float(value)
        return cls(**values)

    @classmethod
    def defaults(cls, config: Optional[SimulationConfig] = None) -> "SimulationParams":
        return cls.from_dict({}, config)


@dataclass(frozen=True)
class SimulationResult:
    """Derived client health metrics for one parameter vector."""

    churn_risk: float
    retention_rate: float
    health_score: float
    satisfaction_score: float
    risk_level: str

    def to_dict(self) -> dict:
        return asdict(self)

    def summary(self) -> str:
        """Human-readable summary."""
        return (
            f"Risk Level:   {self.risk_level}\n"
            f"  Churn Risk:     {self.churn_risk:.1f}%\n"
            f"  Retention Rate: {self.retention_rate:.1f}%\n"
            f"  Health Score:   {self.health_score:.1f}\n"
            f"  Satisfaction:   {self.satisfaction_score:.1f}"
        )
