"""
SimulationEngine - maps business inputs to derived client health metrics.

Usage:
    from simulation import SimulationEngine, SimulationParams

    engine = SimulationEngine()
    result = engine.compute(SimulationParams(response_time=12))
    print(result.churn_risk, result.risk_level)

    # Many scenarios at once
    frame_result = engine.compute_frame(scenarios_df)
    print(frame_result.df[["CHURN_RISK", "RISK_LEVEL"]])
    print(frame_result.summary())
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from itertools import product
from typing import Optional

import numpy as np
import pandas as pd

from .config import DEFAULT_CONFIG, METRICS, RISK_LEVELS, SimulationConfig
from .components import (
    ResponseTimeImpact,
    SupportScoreImpact,
    EscalationRateImpact,
    CommunicationImpact,
    IssueResolutionImpact,
)
from .params import SimulationParams, SimulationResult
from .schemas import OUTPUT_COLUMNS, build_input_schema, build_output_schema

logger = logging.getLogger(__name__)


def round_half_up(value: float, decimals: int = 1) -> float:
    """
    Round exact halves away from zero, as dashboards display figures.

    Works on the exact binary value, so 18.25 becomes 18.3 while
    1.005 (stored as 1.00499...) stays 1.0 at two decimals.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass
class FrameResult:
    """
    Container for batch simulation results with impact breakdown.

    Attributes:
        df: Input DataFrame with impacts and metrics added
        impact_columns: List of impact column names
    """

    df: pd.DataFrame
    impact_columns: list[str]

    def get_high_risk(self, min_level: str = "High") -> pd.DataFrame:
        """
        Get scenarios at or above a risk level.

        Args:
            min_level: Minimum risk level ("Low", "Medium", "High", "Critical")

        Returns:
            DataFrame filtered to scenarios at or above the specified level
        """
        if min_level not in RISK_LEVELS:
            raise ValueError(f"Unknown risk level: {min_level!r}")
        valid_levels = RISK_LEVELS[RISK_LEVELS.index(min_level):]
        return self.df[self.df["RISK_LEVEL"].isin(valid_levels)]

    def summary(self) -> pd.DataFrame:
        """Scenario counts and mean metrics per risk level."""
        summary = (
            self.df.groupby("RISK_LEVEL")
            .agg(
                count=("CHURN_RISK", "count"),
                avg_churn=("CHURN_RISK", "mean"),
                avg_retention=("RETENTION_RATE", "mean"),
                avg_health=("HEALTH_SCORE", "mean"),
                avg_satisfaction=("SATISFACTION_SCORE", "mean"),
            )
            .round(1)
        )
        return summary.reindex([level for level in RISK_LEVELS if level in summary.index])

    def impact_breakdown(self) -> pd.DataFrame:
        """Mean, max and min of each impact across scenarios."""
        stats = {}
        for col in self.impact_columns:
            stats[col.replace("_impact", "")] = {
                "mean": self.df[col].mean(),
                "max": self.df[col].max(),
                "min": self.df[col].min(),
            }
        return pd.DataFrame(stats).T.round(3)


class SimulationEngine:
    """
    Heuristic what-if engine for client health.

    Each output metric starts from a baseline and moves by
    impact * weight for every component, then is clipped into
    its bounds and rounded:
    - Response time (lower is better)
    - Support score
    - Escalation rate (lower is better)
    - Communication frequency
    - Issue resolution
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize engine with configuration.

        Args:
            config: SimulationConfig instance. Uses DEFAULT_CONFIG if None.
        """
        self.config = config or DEFAULT_CONFIG
        self.input_schema = build_input_schema(self.config)
        self.output_schema = build_output_schema(self.config)
        self._init_components()

    def _init_components(self) -> None:
        """Initialize all impact components."""
        self.components = {
            "response": ResponseTimeImpact(self.config),
            "support": SupportScoreImpact(self.config),
            "escalation": EscalationRateImpact(self.config),
            "communication": CommunicationImpact(self.config),
            "resolution": IssueResolutionImpact(self.config),
        }

    @property
    def input_columns(self) -> list[str]:
        return [spec.column for spec in self.config.parameters]

    def _clip(self, metric: str, raw):
        """Clip a raw metric (scalar or Series) into its bounds."""
        low, high = self.config.bounds[metric]
        if isinstance(raw, pd.Series):
            return raw.clip(low, high)
        return float(np.clip(raw, low, high))

    def _round(self, value: float) -> float:
        return round_half_up(value, self.config.decimals)

    def impacts(self, params: SimulationParams) -> dict[str, float]:
        """Normalized impact of each component for one parameter vector."""
        return {
            name: component.value_impact(getattr(params, component.parameter))
            for name, component in self.components.items()
        }

    def compute(self, params: SimulationParams) -> SimulationResult:
        """
        Derive client health metrics from a parameter vector.

        Inputs outside their ranges are clipped before use. The call has
        no side effects and the same input always gives the same output.

        Example:
            >>> engine = SimulationEngine()
            >>> engine.compute(SimulationParams()).risk_level
            'Low'
        """
        impacts = self.impacts(params)

        clipped = {}
        for metric in METRICS:
            total = self.config.baselines[metric]
            for name, impact in impacts.items():
                total = total + impact * self.config.weights[name][metric]
            clipped[metric] = self._clip(metric, total)

        # Risk level is read before rounding
        return SimulationResult(
            **{metric: self._round(value) for metric, value in clipped.items()},
            risk_level=self.config.get_risk_level(clipped["churn_risk"]),
        )

    def validate_input(self, df: pd.DataFrame) -> None:
        """
        Validate required columns exist.

        Raises:
            ValueError: If required columns are missing
        """
        missing = set(self.input_columns) - set(df.columns)
        if missing:
            raise ValueError(f"Missing required columns: {missing}")

    def compute_frame(self, df: pd.DataFrame) -> FrameResult:
        """
        Evaluate every row of a scenario DataFrame.

        Row results match compute() for the same inputs.

        Args:
            df: DataFrame with one column per parameter

        Returns:
            FrameResult with impacts, metrics and risk levels

        Raises:
            ValueError: If required columns are missing
            pandera.errors.SchemaErrors: If inputs are null or not numeric
        """
        self.validate_input(df)
        result = self.input_schema.validate(df.copy(), lazy=True)

        impact_cols = []
        for name, component in self.components.items():
            col_name = f"{name}_impact"
            result[col_name] = component.score(result)
            impact_cols.append(col_name)

        clipped_churn = None
        for metric, column in OUTPUT_COLUMNS.items():
            total = pd.Series(self.config.baselines[metric], index=result.index, dtype=float)
            for name in self.components:
                total = total + result[f"{name}_impact"] * self.config.weights[name][metric]
            clipped = self._clip(metric, total)
            if metric == "churn_risk":
                clipped_churn = clipped
            result[column] = clipped.map(self._round).astype(float)

        result["RISK_LEVEL"] = clipped_churn.map(self.config.get_risk_level)
        self.output_schema.validate(result, lazy=True)

        logger.debug("Simulated %d scenarios", len(result))
        return FrameResult(df=result, impact_columns=impact_cols)

    def sweep(
        self,
        name: str,
        base: Optional[SimulationParams] = None,
    ) -> pd.DataFrame:
        """
        Evaluate one parameter across its slider steps.

        Args:
            name: Parameter to vary (field name, column or camelCase alias)
            base: Values for the other parameters (defaults if None)

        Returns:
            DataFrame with the varied column and the output metrics
        """
        spec = self.config.parameter(name)
        base = base or SimulationParams.defaults(self.config)

        values = np.round(np.arange(spec.low, spec.high + spec.step / 2, spec.step), 6)
        rows = pd.DataFrame([base.clamped(self.config).to_dict()] * len(values))
        rows = rows.rename(columns={s.name: s.column for s in self.config.parameters})
        rows[spec.column] = values

        result = self.compute_frame(rows).df
        return result[[spec.column, *OUTPUT_COLUMNS.values(), "RISK_LEVEL"]].reset_index(drop=True)


def parameter_grid(
    points: int = 5,
    config: Optional[SimulationConfig] = None,
) -> pd.DataFrame:
    """
    Full-factorial grid of evenly spaced values across every parameter range.

    Deterministic: the same arguments always give the same frame.
    """
    config = config or DEFAULT_CONFIG
    axes = [np.linspace(spec.low, spec.high, points) for spec in config.parameters]
    return pd.DataFrame(
        list(product(*axes)),
        columns=[spec.column for spec in config.parameters],
    )


def comparison_data(
    result: SimulationResult,
    config: Optional[SimulationConfig] = None,
) -> pd.DataFrame:
    """
    Current vs Simulated churn/retention rows for the comparison chart.

    "Current" is a static display reference, not an engine output.
    """
    config = config or DEFAULT_CONFIG
    reference = config.comparison_reference
    return pd.DataFrame(
        [
            {
                "SERIES": "Current",
                "CHURN_RISK": reference["churn_risk"],
                "RETENTION_RATE": reference["retention_rate"],
            },
            {
                "SERIES": "Simulated",
                "CHURN_RISK": result.churn_risk,
                "RETENTION_RATE": result.retention_rate,
            },
        ]
    )


_default_engine = SimulationEngine()


def compute(params: SimulationParams) -> SimulationResult:
    """Compute with the default configuration."""
    return _default_engine.compute(params)
