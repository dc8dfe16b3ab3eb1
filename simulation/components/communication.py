"""Communication frequency impact component."""

import numpy as np

from .base import ImpactComponent, Values


class CommunicationImpact(ImpactComponent):
    """Impact of touches per week, saturating at three."""

    name = "communication"
    parameter = "communication_freq"

    def impact(self, values: Values) -> Values:
        return np.minimum(1.0, values / self.config.communication_target)
