"""Response time impact component."""

import numpy as np

from .base import ImpactComponent, Values


class ResponseTimeImpact(ImpactComponent):
    """
    Impact of average response time (hours). Lower is better.

    Scales linearly from ~1.0 at 0 hours down to 0 at the 48 hour pivot;
    anything slower earns no credit.
    """

    name = "response"
    parameter = "response_time"

    def impact(self, values: Values) -> Values:
        pivot = self.config.response_pivot
        return np.maximum(0.0, (pivot - values) / pivot)
