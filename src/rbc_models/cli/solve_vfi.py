# rbc_models/cli/solve_vfi.py
"""
Command-line interface for solving the RBC model using VFI.

Runs the default calibration end to end: steady state, grid, output
table, Bellman iteration, and a console report with a policy check value
and the CPU time used.

Example:
    $ python -m rbc_models.cli.solve_vfi
    $ python -m rbc_models.cli.solve_vfi --max-iter 500 --log-level WARNING
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from rbc_models.config.economic_params import EconomicParams
from rbc_models.config.vfi_config import GridConfig
from rbc_models.core.timing import Stopwatch
from rbc_models.econ import SteadyStateCalculator
from rbc_models.io.console import ConsoleReporter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)


def solve_rbc_model(
    params: EconomicParams,
    config: GridConfig,
    reporter: ConsoleReporter,
) -> bool:
    """Orchestrate solving the RBC model and reporting the results.

    Returns:
        Whether the value function iteration converged.
    """
    from rbc_models.vfi.rbc import RBCModelVFI

    watch = Stopwatch().start()

    reporter.steady_state(SteadyStateCalculator.calculate(params))

    logger.info(
        f"Solving RBC model with grid size n_capital = {config.n_capital} "
        f"n_productivity = {params.n_productivity}..."
    )
    solver = RBCModelVFI(params, config)
    res = solver.solve(progress_callback=reporter.iteration)

    reporter.final(res["iterations"], res["sup_diff"], res["converged"])
    k_idx, z_idx = config.diagnostic_index
    reporter.policy_check(float(res["policy_k_values"][k_idx, z_idx]))
    reporter.elapsed(watch.elapsed())

    return res["converged"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve the RBC model via VFI")
    parser.add_argument(
        '--max-iter',
        type=int,
        default=None,
        help="Maximum number of Bellman iterations."
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help="Logging verbosity."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the VFI solver CLI."""
    args = build_parser().parse_args(argv)
    logging.getLogger().setLevel(args.log_level)

    params = EconomicParams()
    config = GridConfig()
    if args.max_iter is not None:
        config = dataclasses.replace(config, max_iter_vfi=args.max_iter)

    try:
        converged = solve_rbc_model(params, config, ConsoleReporter())
    except Exception as e:
        logger.error(f"Solver failed: {e}", exc_info=True)
        return 1

    return 0 if converged else 1


if __name__ == "__main__":
    sys.exit(main())
