"""
Unit tests for individual impact components.
"""

import pandas as pd
import pytest

from simulation.components.response import ResponseTimeImpact
from simulation.components.support import SupportScoreImpact
from simulation.components.escalation import EscalationRateImpact
from simulation.components.communication import CommunicationImpact
from simulation.components.resolution import IssueResolutionImpact


class TestResponseTimeImpact:
    """Tests for response time impact (lower is better)."""

    def test_linear_below_pivot(self, default_config):
        """Impact falls linearly to 0 at 48 hours."""
        component = ResponseTimeImpact(default_config)
        df = pd.DataFrame({"RESPONSE_TIME": [12, 24, 36, 48]})
        impacts = component.score(df)

        assert impacts.iloc[0] == pytest.approx(0.75)
        assert impacts.iloc[1] == pytest.approx(0.5)
        assert impacts.iloc[2] == pytest.approx(0.25)
        assert impacts.iloc[3] == 0.0

    def test_no_credit_past_pivot(self, default_config):
        """Slower than 48 hours is floored at 0, never negative."""
        component = ResponseTimeImpact(default_config)
        df = pd.DataFrame({"RESPONSE_TIME": [49, 60, 72]})

        assert (component.score(df) == 0.0).all()

    def test_out_of_range_clipped(self, default_config):
        """Values outside [1, 72] use the nearest bound."""
        component = ResponseTimeImpact(default_config)

        assert component.value_impact(0) == pytest.approx(47 / 48)
        assert component.value_impact(500) == 0.0

    def test_missing_column_raises_error(self, default_config):
        """Should raise ValueError if RESPONSE_TIME missing."""
        component = ResponseTimeImpact(default_config)
        df = pd.DataFrame({"OTHER_COLUMN": [24]})

        with pytest.raises(ValueError, match="RESPONSE_TIME"):
            component.score(df)


class TestSupportScoreImpact:
    """Tests for support quality impact."""

    def test_centered_on_fifty(self, default_config):
        """50 is neutral, 100 is full credit, 40 is slightly negative."""
        component = SupportScoreImpact(default_config)
        df = pd.DataFrame({"SUPPORT_SCORE": [40, 50, 75, 100]})
        impacts = component.score(df)

        assert impacts.iloc[0] == pytest.approx(-0.2)
        assert impacts.iloc[1] == 0.0
        assert impacts.iloc[2] == pytest.approx(0.5)
        assert impacts.iloc[3] == pytest.approx(1.0)

    def test_below_range_clipped(self, default_config):
        """Scores below 40 are treated as 40."""
        component = SupportScoreImpact(default_config)

        assert component.value_impact(0) == pytest.approx(-0.2)


class TestEscalationRateImpact:
    """Tests for escalation rate impact (lower is better)."""

    def test_escalation_points(self, default_config):
        """0% = 1.0, 15% = 0.5, 30%+ = 0."""
        component = EscalationRateImpact(default_config)
        df = pd.DataFrame({"ESCALATION_RATE": [0, 15, 30, 50]})
        impacts = component.score(df)

        assert impacts.iloc[0] == pytest.approx(1.0)
        assert impacts.iloc[1] == pytest.approx(0.5)
        assert impacts.iloc[2] == 0.0
        assert impacts.iloc[3] == 0.0


class TestCommunicationImpact:
    """Tests for communication frequency impact."""

    def test_saturates_at_three_per_week(self, default_config):
        """Credit grows to 1.0 at 3 touches and stays there."""
        component = CommunicationImpact(default_config)
        df = pd.DataFrame({"COMMUNICATION_FREQ": [0.5, 1.5, 3, 5]})
        impacts = component.score(df)

        assert impacts.iloc[0] == pytest.approx(1 / 6)
        assert impacts.iloc[1] == pytest.approx(0.5)
        assert impacts.iloc[2] == pytest.approx(1.0)
        assert impacts.iloc[3] == pytest.approx(1.0)

    def test_zero_clipped_to_minimum(self, default_config):
        """0 touches is below range and uses 0.5."""
        component = CommunicationImpact(default_config)

        assert component.value_impact(0) == pytest.approx(1 / 6)


class TestIssueResolutionImpact:
    """Tests for issue resolution impact."""

    def test_resolution_points(self, default_config):
        """50% neutral, 85% = 0.7, 100% = 1.0."""
        component = IssueResolutionImpact(default_config)
        df = pd.DataFrame({"ISSUE_RESOLUTION": [50, 85, 100]})
        impacts = component.score(df)

        assert impacts.iloc[0] == 0.0
        assert impacts.iloc[1] == pytest.approx(0.7)
        assert impacts.iloc[2] == pytest.approx(1.0)

    def test_weights_from_config(self, default_config):
        """Resolution is the heaviest driver of every metric."""
        component = IssueResolutionImpact(default_config)

        assert component.weights == {
            "churn_risk": -25,
            "retention_rate": 15,
            "health_score": 25,
            "satisfaction_score": 20,
        }


class TestSharedBehavior:
    """Behavior common to every component."""

    @pytest.mark.parametrize("component_cls", [
        ResponseTimeImpact,
        SupportScoreImpact,
        EscalationRateImpact,
        CommunicationImpact,
        IssueResolutionImpact,
    ])
    def test_scalar_matches_series(self, default_config, component_cls):
        """value_impact and score agree for every slider step."""
        component = component_cls(default_config)
        spec = component.spec
        steps = []
        value = spec.low
        while value <= spec.high:
            steps.append(value)
            value += spec.step
        df = pd.DataFrame({spec.column: steps})
        series = component.score(df)

        for value, impact in zip(steps, series):
            assert component.value_impact(value) == impact

    def test_component_names_match_weights(self, default_config):
        """Every component has a weight row in the config."""
        for component_cls in [ResponseTimeImpact, SupportScoreImpact,
                              EscalationRateImpact, CommunicationImpact,
                              IssueResolutionImpact]:
            assert component_cls.name in default_config.weights
