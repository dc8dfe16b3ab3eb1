"""
Data schema definitions for batch simulation.

Uses Pandera for runtime validation of scenario DataFrames. Input ranges are
not checked here: out-of-range inputs are clipped by the engine, so the input
schema only guards presence, type and nulls. The output schema enforces the
bounds every result must respect.
"""

from pandera import Column, Check, DataFrameSchema

from .config import DEFAULT_CONFIG, RISK_LEVELS, SimulationConfig


OUTPUT_COLUMNS = {
    "churn_risk": "CHURN_RISK",
    "retention_rate": "RETENTION_RATE",
    "health_score": "HEALTH_SCORE",
    "satisfaction_score": "SATISFACTION_SCORE",
}


def build_input_schema(config: SimulationConfig = DEFAULT_CONFIG) -> DataFrameSchema:
    """Schema for scenario input frames."""
    return DataFrameSchema(
        {
            spec.column: Column(
                float,
                nullable=False,
                description=f"{spec.label} ({spec.unit})",
            )
            for spec in config.parameters
        },
        strict=False,  # Allow identifying columns such as SCENARIO
        coerce=True,
        description="Schema for what-if simulation input parameters",
    )


def build_output_schema(config: SimulationConfig = DEFAULT_CONFIG) -> DataFrameSchema:
    """Schema for simulation result frames."""
    columns = {
        column: Column(
            float,
            nullable=False,
            checks=[
                Check.greater_than_or_equal_to(config.bounds[metric][0]),
                Check.less_than_or_equal_to(config.bounds[metric][1]),
            ],
        )
        for metric, column in OUTPUT_COLUMNS.items()
    }
    columns["RISK_LEVEL"] = Column(
        str,
        nullable=False,
        checks=Check.isin(RISK_LEVELS),
    )
    return DataFrameSchema(
        columns,
        strict=False,  # Allow input and impact columns
        description="Schema for what-if simulation results",
    )


SIMULATION_INPUT_SCHEMA = build_input_schema()
SIMULATION_OUTPUT_SCHEMA = build_output_schema()

__all__ = [
    "OUTPUT_COLUMNS",
    "SIMULATION_INPUT_SCHEMA",
    "SIMULATION_OUTPUT_SCHEMA",
    "build_input_schema",
    "build_output_schema",
]
