"""Command-line argument resolution.

Accepts the option form

    check_mrtgtraf -F <log_file> -a <AVG|MAX> -w <iwarn,owarn> -c <icrit,ocrit> [-e <minutes>]

and the legacy positional form

    check_mrtgtraf <log_file> <expire_minutes> <AVG|MAX> <iwarn> <icrit> <owarn> <ocrit>

Positionals only fill what the options left unset.
"""

import argparse
import re
from collections import deque
from pathlib import Path

from mrtgtraf import __version__
from mrtgtraf.core.config import Aggregation, Configuration


PROG = "check_mrtgtraf"

# Option spellings accepted by older releases of the plugin
LEGACY_ALIASES = {"-wt": "-w", "-ct": "-c"}

UNSIGNED_PATTERN = re.compile(r"^[0-9]+$")

USAGE = (
    f"Usage: {PROG} -F <log_file> -a <AVG | MAX> -w <warning_pair> -c <critical_pair>\n"
    f"            [-e expire_minutes]\n"
    f"       {PROG} <log_file> <expire_minutes> <AVG | MAX> <iwl> <icl> <owl> <ocl>\n"
    f"       {PROG} --help\n"
    f"       {PROG} --version"
)


class UsageError(Exception):
    """Invalid or missing command-line arguments."""

    pass


class CheckArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(message)


def create_parser() -> CheckArgumentParser:
    """Create the argument parser."""
    parser = CheckArgumentParser(
        prog=PROG,
        usage=USAGE.removeprefix("Usage: "),
        description=(
            "Check the incoming/outgoing transfer rates of a router, switch, etc "
            "recorded in an MRTG log. If the newest log entry is older than the "
            "expiry window a WARNING results. Rates above the critical or warning "
            "thresholds (in bytes/sec) result in CRITICAL or WARNING."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{PROG} {__version__}",
    )
    parser.add_argument(
        "-F",
        "--logfile",
        dest="log_file",
        metavar="FILE",
        help="MRTG log file to read",
    )
    parser.add_argument(
        "-e",
        "--expires",
        metavar="MINUTES",
        help="Minutes after which the log data is considered stale (0 disables)",
    )
    parser.add_argument(
        "-a",
        "--aggregation",
        metavar="AVG|MAX",
        help="Test average or maximum rates (default: AVG)",
    )
    parser.add_argument(
        "-w",
        "--warning",
        metavar="IN,OUT",
        help='Warning threshold pair "<incoming>,<outgoing>" in bytes/sec',
    )
    parser.add_argument(
        "-c",
        "--critical",
        metavar="IN,OUT",
        help='Critical threshold pair "<incoming>,<outgoing>" in bytes/sec',
    )
    parser.add_argument(
        "--format",
        choices=["plain", "json"],
        default="plain",
        help="Output format (default: plain)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for the JSONL run log (default: disabled)",
    )
    parser.add_argument(
        "legacy",
        nargs="*",
        metavar="ARG",
        help=argparse.SUPPRESS,
    )
    return parser


def parse_unsigned(value: str, name: str) -> int:
    """Parse a non-negative integer, raising UsageError otherwise."""
    text = value.strip()
    if not UNSIGNED_PATTERN.match(text):
        raise UsageError(f"{name} must be a non-negative integer: {value!r}")
    return int(text)


def parse_threshold_pair(value: str, name: str) -> tuple[int, int]:
    """
    Parse an "incoming,outgoing" threshold pair.

    Args:
        value: Pair as given on the command line
        name: Option name for error messages

    Returns:
        (incoming, outgoing); a missing half is 0

    Raises:
        UsageError: If the pair has more than two parts or a part is not
            a non-negative integer
    """
    parts = value.split(",")
    if len(parts) > 2:
        raise UsageError(f"{name} expects <incoming>,<outgoing>: {value!r}")
    parts += [""] * (2 - len(parts))
    incoming, outgoing = (
        parse_unsigned(part, name) if part.strip() else 0 for part in parts
    )
    return incoming, outgoing


def resolve_arguments(args: list[str]) -> Configuration:
    """
    Resolve command-line tokens into a Configuration.

    Args:
        args: Command-line arguments (without the program name)

    Returns:
        Immutable Configuration

    Raises:
        UsageError: If no log file is given or a numeric value is invalid
    """
    parser = create_parser()
    opts = parser.parse_intermixed_args([LEGACY_ALIASES.get(a, a) for a in args])
    positionals = deque(opts.legacy)

    log_file = opts.log_file
    if log_file is None and positionals:
        log_file = positionals.popleft()
    if not log_file:
        raise UsageError("No MRTG log file specified")

    expire_minutes = None
    if opts.expires is not None:
        expire_minutes = parse_unsigned(opts.expires, "expires")
    elif positionals:
        expire_minutes = parse_unsigned(positionals.popleft(), "expire_minutes")

    aggregation_token = opts.aggregation
    if positionals and positionals[0] in ("MAX", "AVG"):
        aggregation_token = positionals.popleft()

    incoming_warning = outgoing_warning = 0
    incoming_critical = outgoing_critical = 0
    if opts.warning is not None:
        incoming_warning, outgoing_warning = parse_threshold_pair(opts.warning, "warning")
    if opts.critical is not None:
        incoming_critical, outgoing_critical = parse_threshold_pair(opts.critical, "critical")

    if positionals and incoming_warning == 0:
        incoming_warning = parse_unsigned(positionals.popleft(), "incoming_warning")
    if positionals and incoming_critical == 0:
        incoming_critical = parse_unsigned(positionals.popleft(), "incoming_critical")
    if positionals and outgoing_warning == 0:
        outgoing_warning = parse_unsigned(positionals.popleft(), "outgoing_warning")
    if positionals and outgoing_critical == 0:
        outgoing_critical = parse_unsigned(positionals.popleft(), "outgoing_critical")

    return Configuration(
        log_path=log_file,
        expire_minutes=expire_minutes,
        aggregation=Aggregation.from_token(aggregation_token),
        incoming_warning=incoming_warning,
        incoming_critical=incoming_critical,
        outgoing_warning=outgoing_warning,
        outgoing_critical=outgoing_critical,
        output_format=opts.format,
        log_dir=opts.log_dir,
    )
