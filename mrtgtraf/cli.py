"""Command-line entry point for check_mrtgtraf."""

import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any, Callable

from mrtgtraf.core.arguments import USAGE, UsageError, resolve_arguments
from mrtgtraf.core.config import get_config_value
from mrtgtraf.core.context import Context
from mrtgtraf.core.evaluator import Status, evaluate
from mrtgtraf.core.logfile import LogFileError, LogParseError, read_log_record
from mrtgtraf.core.logging import CheckLogger
from mrtgtraf.core.output import Output


def unknown(output: Output, message: str, format: str = "plain") -> int:
    """Report an UNKNOWN state and return its exit code."""
    output.error(message)
    output.emit({"status": Status.UNKNOWN.name.lower()})
    output.render(format)
    return int(Status.UNKNOWN)


def run(
    args: list[str],
    output: Output,
    context: Context,
    config_lookup: Callable[[str], Any] = get_config_value,
) -> int:
    """
    Main entry point.

    Args:
        args: Command-line arguments
        output: Output helper
        context: Execution context
        config_lookup: Source of config-file settings (only log_dir is read)

    Returns:
        0 = OK, 1 = WARNING, 2 = CRITICAL, 3 = UNKNOWN
    """
    try:
        config = resolve_arguments(args)
    except UsageError as e:
        print(USAGE, file=sys.stderr)
        return unknown(output, f"Invalid command arguments supplied: {e}")

    if config.log_dir is None:
        configured = config_lookup("log_dir")
        if configured:
            config = replace(config, log_dir=Path(str(configured)).expanduser())

    with CheckLogger.for_directory(config.log_dir) as logger:
        logger.debug("Resolved configuration", **asdict(config))

        try:
            record = read_log_record(config.log_path, context)
        except LogFileError as e:
            logger.error("Unable to open MRTG log file", path=config.log_path, reason=str(e))
            return unknown(output, "Unable to open MRTG log file", config.output_format)
        except LogParseError as e:
            logger.error("Unable to process MRTG log file", path=config.log_path, reason=str(e))
            return unknown(output, "Unable to process MRTG log file", config.output_format)

        logger.info("Read MRTG sample", path=config.log_path, sample=asdict(record))

        result = evaluate(config, record, context.now())
        if result.expired:
            logger.warning("MRTG data has expired", age_seconds=result.age_seconds)

        logger.info(
            "Check complete",
            status=result.status.name,
            result_message=result.message,
        )

    output.emit(result.to_dict())
    output.set_summary(result.message)
    output.render(config.output_format)

    return int(result.status)


def main() -> int:
    """Run the check against the real system."""
    return run(sys.argv[1:], Output(), Context())


if __name__ == "__main__":
    sys.exit(main())
