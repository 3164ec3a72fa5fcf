#!/usr/bin/env python3
"""
Minimal CLI for gp-cellmodel.

Usage example:
  gp-cellmodel --config examples/gray_pathmanathan_2016.json --time 0 10.5
"""

import sys
import argparse
import logging

logger = logging.getLogger("gp_cellmodel.cli")


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="gp-cellmodel",
        description="Evaluate the Gray-Pathmanathan single-cell model",
        epilog="Usage example: gp-cellmodel --config examples/gray_pathmanathan_2016.json --time 0 10.5",
    )

    p.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to cell config JSON file. If omitted, uses the published constants.",
    )

    p.add_argument(
        "--time",
        type=float,
        nargs="+",
        default=None,
        help="Time points (ms) at which to evaluate rates and currents.",
    )

    p.add_argument(
        "--platform",
        type=str,
        choices=["cpu", "gpu"],
        default=None,
        help="JAX platform to run on. If omitted, uses default device.",
    )

    p.add_argument(
        "--dry-run", action="store_true", help="Print resolved args and exit"
    )

    p.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase verbosity (use -v or -vv for more)",
    )

    return p.parse_args(argv)


def configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


def set_platform(platform: str | None):
    if platform is None:
        return
    import jax

    jax.config.update("jax_platform_name", platform)
    logger.info("Set jax_platform_name=%s", platform)


def run_package(config_path: str | None, times: list[float] | None = None):
    """
    Initialize one cell (from the config file if given, else from the published
    constants) and report its rates and algebraic variables at each time point.
    Returns the list of (time, rates, algebraic).
    """
    try:
        from gp_cellmodel.core.cell_model import initConsts, computeRates
        from gp_cellmodel.core.setup_dictionary_functions import (
            load_config,
            SetupConstants,
            SetupInitialConditions,
        )
        from gp_cellmodel.io.print_functions import printCellState, printRates
    except Exception as exc:
        logger.exception("Could not import cell model: %s", exc)
        raise SystemExit(1)

    if config_path is None:
        logger.info("No config path provided; using published constants")
        constants, states = initConsts()
        config = {}
    else:
        logger.info("Loading cell config from %s", config_path)
        config = load_config(config_path)
        constants = SetupConstants(config.get("constants", {}))
        states = SetupInitialConditions(config.get("initial_conditions", {}), constants)

    if times is None:
        times = config.get("times", [0.0])

    results = []
    for t in times:
        rates, algebraic = computeRates(t, constants, states)
        printCellState(t, states, algebraic)
        printRates(rates)
        results.append((t, rates, algebraic))
    return results


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    set_platform(args.platform)

    if args.dry_run:
        print(
            "dry-run:",
            {"config": args.config, "time": args.time, "platform": args.platform},
        )
        return 0

    try:
        run_package(args.config, args.time)
    except SystemExit:
        # let package exit codes propagate
        raise
    except Exception as e:
        logger.exception("Run failed: %s", e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
