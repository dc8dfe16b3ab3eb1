"""
Pytest fixtures for what-if simulation tests.
"""

import dataclasses

import pandas as pd
import pytest

# Add package to path
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from simulation.config import SimulationConfig
from simulation.engine import SimulationEngine
from simulation.params import SimulationParams


@pytest.fixture
def default_config():
    """Default simulation configuration."""
    return SimulationConfig()


@pytest.fixture
def engine(default_config):
    """SimulationEngine with default config."""
    return SimulationEngine(default_config)


@pytest.fixture
def default_params():
    """Dashboard defaults: 24h, 75, 15%, 2/week, 85%."""
    return SimulationParams()


@pytest.fixture
def worst_params():
    """Every parameter at its least favorable extreme."""
    return SimulationParams(
        response_time=72,
        support_score=40,
        escalation_rate=50,
        communication_freq=0.5,
        issue_resolution=50,
    )


@pytest.fixture
def best_params():
    """Every parameter at its most favorable extreme."""
    return SimulationParams(
        response_time=1,
        support_score=100,
        escalation_rate=0,
        communication_freq=5,
        issue_resolution=100,
    )


@pytest.fixture
def neutral_params():
    """Only communication contributes (impact 0.5); nothing is clipped."""
    return SimulationParams(
        response_time=48,
        support_score=50,
        escalation_rate=30,
        communication_freq=1.5,
        issue_resolution=50,
    )


@pytest.fixture
def high_churn_config():
    """Config with a raised churn baseline so High/Critical are reachable."""
    config = SimulationConfig()
    baselines = dict(config.baselines, churn_risk=80.0)
    return dataclasses.replace(config, baselines=baselines)


@pytest.fixture
def scenario_data():
    """Small scenario frame covering extremes and defaults."""
    return pd.DataFrame([
        {"SCENARIO": "defaults", "RESPONSE_TIME": 24, "SUPPORT_SCORE": 75,
         "ESCALATION_RATE": 15, "COMMUNICATION_FREQ": 2, "ISSUE_RESOLUTION": 85},
        {"SCENARIO": "worst", "RESPONSE_TIME": 72, "SUPPORT_SCORE": 40,
         "ESCALATION_RATE": 50, "COMMUNICATION_FREQ": 0.5, "ISSUE_RESOLUTION": 50},
        {"SCENARIO": "best", "RESPONSE_TIME": 1, "SUPPORT_SCORE": 100,
         "ESCALATION_RATE": 0, "COMMUNICATION_FREQ": 5, "ISSUE_RESOLUTION": 100},
        {"SCENARIO": "neutral", "RESPONSE_TIME": 48, "SUPPORT_SCORE": 50,
         "ESCALATION_RATE": 30, "COMMUNICATION_FREQ": 1.5, "ISSUE_RESOLUTION": 50},
    ])
