"""Impact components for the what-if simulation."""

from .base import ImpactComponent
from .response import ResponseTimeImpact
from .support import SupportScoreImpact
from .escalation import EscalationRateImpact
from .communication import CommunicationImpact
from .resolution import IssueResolutionImpact

__all__ = [
    "ImpactComponent",
    "ResponseTimeImpact",
    "SupportScoreImpact",
    "EscalationRateImpact",
    "CommunicationImpact",
    "IssueResolutionImpact",
]
