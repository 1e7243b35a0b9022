"""Main entry point for the rimeguard package."""

import sys

from loguru import logger

from rimeguard.cli import create_parser
from rimeguard.core import Config, InputError, load_config
from rimeguard.reports import write_report
from rimeguard.resolution import check_batch_conflicts_with_weight, summarize_results
from rimeguard.store import load_batch_items, open_store
from rimeguard.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("RimeGuard - Batch Conflict Checker")
        logger.info("=" * 60)
        logger.info("")


def _validate_config(config: Config, parser) -> None:
    """Validate configuration settings."""
    if not config.store or not config.batch:
        parser.error("Must specify both --store and --batch (on the command line or in --config)")

    if config.debug_codes and not (config.debug and config.verbose):
        parser.error("--debug-codes requires BOTH --debug and --verbose flags")


def _print_config_summary(config: Config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Store: {config.store}")
        logger.info(f"  Batch: {config.batch}")
        logger.info(f"  Output: {config.output or 'stdout'} ({config.format})")
        if config.type_weights:
            weights = ", ".join(f"{name}={weight}" for name, weight in config.type_weights.items())
            logger.info(f"  Type weights: {weights}")
        if config.debug_codes:
            logger.info(f"  Debug codes: {', '.join(config.debug_codes)}")
        logger.info("")


def run_check(config: Config) -> int:
    """Load the inputs, check the batch and write the report.

    Returns:
        Exit status: 1 if strict mode is on and any item is blocked, else 0

    Raises:
        InputError: If the store or batch file cannot be loaded
    """
    items = load_batch_items(config.batch)
    with open_store(config.store) as store:
        if config.verbose:
            logger.info(f"Checking {len(items)} items against {store.get_name()} store")
        results = check_batch_conflicts_with_weight(
            items,
            store,
            type_weights=config.type_weights,
            debug_codes=set(config.debug_codes),
            verbose=config.verbose,
        )

    write_report(items, results, config.output, config.format)

    summary = summarize_results(results)
    if config.strict and summary.blocked:
        logger.warning(f"{summary.blocked} item(s) blocked")
        return 1
    return 0


def _run_with_error_handling(config: Config, parser) -> int:
    """Run the check with proper error handling."""
    try:
        status = run_check(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Check completed")
            logger.info("=" * 60)
        return status
    except InputError as e:
        parser.error(str(e))
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Check interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Check failed")
            logger.error("=" * 60)
        raise


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Print startup banner
    _print_startup_banner(config.verbose)

    # Validate configuration
    _validate_config(config, parser)

    # Print configuration summary
    _print_config_summary(config)

    # Run check
    return _run_with_error_handling(config, parser)


if __name__ == "__main__":
    sys.exit(main())
