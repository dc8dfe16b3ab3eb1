"""
Named what-if scenarios loaded from YAML.

File layout:

    scenarios:
      baseline: {}
      fast_response:
        response_time: 4
        support_score: 90
      understaffed:
        responseTime: 60
        escalationRate: 35

Missing fields take their defaults. Keys may use field names, frame
columns or the dashboard's camelCase names.
"""

from pathlib import Path
from typing import Optional

import pandas as pd
import yaml

from .config import DEFAULT_CONFIG, SimulationConfig
from .params import SimulationParams


def load_scenarios(
    path: Path | str,
    config: Optional[SimulationConfig] = None,
) -> dict[str, SimulationParams]:
    """
    Load scenarios from a YAML file.

    Raises:
        ValueError: If the file has no ``scenarios`` mapping or a scenario
            names an unknown parameter
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    scenarios = data.get("scenarios") if isinstance(data, dict) else None
    if not isinstance(scenarios, dict):
        raise ValueError(f"{path} does not contain a 'scenarios' mapping")

    loaded = {}
    for name, values in scenarios.items():
        if values is not None and not isinstance(values, dict):
            raise ValueError(f"Scenario {name!r} must be a mapping of parameters")
        try:
            loaded[str(name)] = SimulationParams.from_dict(values or {}, config)
        except ValueError as e:
            raise ValueError(f"Scenario {name!r}: {e}") from e
    return loaded


def scenarios_frame(
    scenarios: dict[str, SimulationParams],
    config: Optional[SimulationConfig] = None,
) -> pd.DataFrame:
    """One row per scenario: SCENARIO plus one column per parameter."""
    config = config or DEFAULT_CONFIG
    rows = []
    for name, params in scenarios.items():
        row = {"SCENARIO": name}
        for spec in config.parameters:
            row[spec.column] = getattr(params, spec.name)
        rows.append(row)
    return pd.DataFrame(
        rows,
        columns=["SCENARIO", *(spec.column for spec in config.parameters)],
    )
