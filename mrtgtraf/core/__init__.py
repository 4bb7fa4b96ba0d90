"""Core check_mrtgtraf functionality."""

from mrtgtraf.core.arguments import UsageError, create_parser, resolve_arguments
from mrtgtraf.core.config import Aggregation, Configuration
from mrtgtraf.core.context import Context
from mrtgtraf.core.evaluator import (
    EvaluationResult,
    NormalizedRate,
    RateUnit,
    Status,
    evaluate,
    normalize_rate,
)
from mrtgtraf.core.logfile import (
    LogFileError,
    LogParseError,
    LogReadError,
    LogRecord,
    read_log_record,
)
from mrtgtraf.core.output import Output

__all__ = [
    "Aggregation",
    "Configuration",
    "Context",
    "EvaluationResult",
    "LogFileError",
    "LogParseError",
    "LogReadError",
    "LogRecord",
    "NormalizedRate",
    "Output",
    "RateUnit",
    "Status",
    "UsageError",
    "create_parser",
    "evaluate",
    "normalize_rate",
    "read_log_record",
    "resolve_arguments",
]
