"""Base class for impact components."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from ..config import ParameterSpec, SimulationConfig

Values = Union[float, np.ndarray, pd.Series]


class ImpactComponent(ABC):
    """
    Abstract base class for impact components.

    Each component turns one input parameter into a normalized impact
    (roughly 0-1, higher is more favorable). The same numpy expression
    serves a single value and a whole column.
    """

    name: str = "base"
    parameter: str = ""

    def __init__(self, config: "SimulationConfig"):
        """
        Initialize component with configuration.

        Args:
            config: SimulationConfig instance with pivots and weights
        """
        self.config = config

    @abstractmethod
    def impact(self, values: Values) -> Values:
        """
        Normalized impact for one value or an array of values.

        Must be written with numpy operations so scalars and Series
        take the same path.
        """
        pass

    @property
    def spec(self) -> "ParameterSpec":
        return self.config.parameter(self.parameter)

    @property
    def required_columns(self) -> list[str]:
        """List of columns required by this component."""
        return [self.spec.column]

    @property
    def weights(self) -> dict[str, float]:
        return self.config.weights[self.name]

    def validate(self, df: pd.DataFrame) -> None:
        """Validate required columns exist."""
        missing = set(self.required_columns) - set(df.columns)
        if missing:
            raise ValueError(
                f"{self.__class__.__name__} requires columns: {missing}"
            )

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Impact for every row, on inputs clipped into range."""
        self.validate(df)
        spec = self.spec
        values = df[spec.column].astype(float).clip(spec.low, spec.high)
        return pd.Series(self.impact(values), index=df.index, dtype=float)

    def value_impact(self, value: float) -> float:
        """Impact for a single value, clipped into range."""
        return float(self.impact(self.spec.clamp(value)))
