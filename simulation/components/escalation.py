"""Escalation rate impact component."""

import numpy as np

from .base import ImpactComponent, Values


class EscalationRateImpact(ImpactComponent):
    """
    Impact of the escalation rate (percent). Lower is better.

    Points:
    - 0%: 1.0 (everything solved by first-line support)
    - 15%: 0.5
    - >=30%: 0
    """

    name = "escalation"
    parameter = "escalation_rate"

    def impact(self, values: Values) -> Values:
        pivot = self.config.escalation_pivot
        return np.maximum(0.0, (pivot - values) / pivot)
