"""
Live simulation session: parameter state plus synchronous recomputation.

A session owns one SimulationParams and the SimulationResult on display.
Every gesture that changes at least one parameter recomputes the full
result exactly once, then notifies the optional observer with a snapshot
of the new parameters.

Usage:
    session = SimulationSession(on_parameters_changed=log_parameters)
    session.set_parameter("response_time", 8)
    session.update(support_score=90, issue_resolution=95)
    print(session.result.summary())
"""

import logging
from typing import Callable, Optional

from .engine import SimulationEngine
from .params import SimulationParams, SimulationResult

logger = logging.getLogger(__name__)

ParametersObserver = Callable[[SimulationParams], None]


def log_parameters(params: SimulationParams) -> None:
    """Observer that logs every new parameter vector."""
    logger.info("Running simulation with parameters: %s", params.to_dict())


class SimulationSession:
    """
    Reactive wrapper around a SimulationEngine.

    Attributes:
        engine: Engine used for every recomputation
        params: Current parameter vector, edited in place
        result: Result for the current parameters
    """

    def __init__(
        self,
        engine: Optional[SimulationEngine] = None,
        on_parameters_changed: Optional[ParametersObserver] = None,
        params: Optional[SimulationParams] = None,
    ):
        """
        Initialize session and compute the first result.

        Args:
            engine: SimulationEngine instance. A default engine if None.
            on_parameters_changed: Called with a params snapshot after each
                recomputation, including the first one here. Failures are
                logged and never propagate.
            params: Starting parameters. Defaults if None.
        """
        self.engine = engine or SimulationEngine()
        self.on_parameters_changed = on_parameters_changed
        start = params or SimulationParams.defaults(self.engine.config)
        self.params = start.clamped(self.engine.config)
        self.result = self.engine.compute(self.params)
        self._notify()

    def set_parameter(self, name: str, value: float) -> SimulationResult:
        """
        Change one parameter (one slider movement).

        Args:
            name: Field name, column name or camelCase alias
            value: New value, clipped into the parameter's range

        Returns:
            The result now on display
        """
        return self.update(**{name: value})

    def update(self, **changes: float) -> SimulationResult:
        """
        Change several parameters as a single gesture.

        All names are resolved before anything is modified, so an unknown
        name leaves the session untouched.

        Raises:
            ValueError: If a name does not match any parameter
        """
        config = self.engine.config
        resolved = {}
        for name, value in changes.items():
            spec = config.parameter(name)
            resolved[spec.name] = spec.clamp(value)

        changed = {
            name: value
            for name, value in resolved.items()
            if getattr(self.params, name) != value
        }
        if not changed:
            return self.result

        for name, value in changed.items():
            setattr(self.params, name, value)
        self._recompute()
        return self.result

    def reset(self) -> SimulationResult:
        """Restore every parameter to its default as one gesture."""
        defaults = SimulationParams.defaults(self.engine.config)
        return self.update(**defaults.to_dict())

    def _recompute(self) -> None:
        self.result = self.engine.compute(self.params)
        logger.debug(
            "Recomputed simulation: churn=%.1f risk=%s",
            self.result.churn_risk,
            self.result.risk_level,
        )
        self._notify()

    def _notify(self) -> None:
        if self.on_parameters_changed is None:
            return
        try:
            self.on_parameters_changed(self.params.copy())
        except Exception:
            logger.exception("Parameter observer failed; result already updated")
