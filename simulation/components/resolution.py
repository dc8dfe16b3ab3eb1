"""Issue resolution impact component."""

from .base import ImpactComponent, Values


class IssueResolutionImpact(ImpactComponent):
    """
    Impact of the issue resolution rate (percent).

    The heaviest weighted driver: 50% resolution is neutral,
    100% gives 1.0.
    """

    name = "resolution"
    parameter = "issue_resolution"

    def impact(self, values: Values) -> Values:
        midpoint = self.config.resolution_midpoint
        return (values - midpoint) / midpoint
