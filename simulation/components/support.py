"""Support quality impact component."""

from .base import ImpactComponent, Values


class SupportScoreImpact(ImpactComponent):
    """
    Impact of the support quality score.

    Centered on 50: the lowest slider value (40) is slightly negative,
    a perfect 100 gives 1.0.
    """

    name = "support"
    parameter = "support_score"

    def impact(self, values: Values) -> Values:
        midpoint = self.config.support_midpoint
        return (values - midpoint) / midpoint
