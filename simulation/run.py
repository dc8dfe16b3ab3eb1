#!/usr/bin/env python3
"""
CLI entry point for the what-if simulation.

Usage:
    # Simulate one parameter vector (defaults for anything not given)
    python -m simulation.run --response-time 8 --support-score 90

    # Evaluate every scenario in a YAML file
    python -m simulation.run --scenarios scenarios.yaml

    # Show how one parameter moves the metrics across its range
    python -m simulation.run --sweep issue_resolution
"""

import argparse
import sys

from .config import DEFAULT_CONFIG
from .engine import SimulationEngine, comparison_data
from .logging_config import setup_logging
from .scenarios import load_scenarios, scenarios_frame
from .session import SimulationSession, log_parameters


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="What-if client health simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m simulation.run --response-time 8 --support-score 90
  python -m simulation.run --scenarios scenarios.yaml
  python -m simulation.run --sweep issue_resolution
        """,
    )

    for spec in DEFAULT_CONFIG.parameters:
        parser.add_argument(
            f"--{spec.name.replace('_', '-')}",
            dest=spec.name,
            type=float,
            default=None,
            help=f"{spec.label} in {spec.unit} [{spec.low:g}-{spec.high:g}, default {spec.default:g}]",
        )
    parser.add_argument(
        "--scenarios",
        metavar="FILE",
        help="YAML file of named scenarios to evaluate",
    )
    parser.add_argument(
        "--sweep",
        metavar="NAME",
        help="Parameter to sweep across its slider steps",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    engine = SimulationEngine()

    # Batch scenarios
    if args.scenarios:
        try:
            scenarios = load_scenarios(args.scenarios)
        except FileNotFoundError:
            print(f"Scenario file not found: {args.scenarios}")
            return 1
        except ValueError as e:
            print(f"ERROR: {e}")
            return 1

        result = engine.compute_frame(scenarios_frame(scenarios))
        columns = ["SCENARIO", "CHURN_RISK", "RETENTION_RATE",
                   "HEALTH_SCORE", "SATISFACTION_SCORE", "RISK_LEVEL"]
        print(result.df[columns].to_string(index=False))
        print("\nBy risk level:\n")
        print(result.summary().to_string())
        return 0

    # Single-parameter sweep
    if args.sweep:
        try:
            table = engine.sweep(args.sweep)
        except ValueError as e:
            print(f"ERROR: {e}")
            return 1
        print(table.to_string(index=False))
        return 0

    # Single simulation
    session = SimulationSession(engine=engine, on_parameters_changed=log_parameters)
    overrides = {
        spec.name: getattr(args, spec.name)
        for spec in DEFAULT_CONFIG.parameters
        if getattr(args, spec.name) is not None
    }
    result = session.update(**overrides)

    print("Parameters:")
    for spec in DEFAULT_CONFIG.parameters:
        print(f"  {spec.label}: {getattr(session.params, spec.name):g} {spec.unit}")
    print()
    print(result.summary())
    print("\nChurn Risk vs Retention Comparison:\n")
    print(comparison_data(result).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
