"""Traffic rate evaluation against freshness and thresholds."""

from dataclasses import dataclass
from enum import Enum, IntEnum

from mrtgtraf.core.config import Aggregation, Configuration
from mrtgtraf.core.logfile import LogRecord


class Status(IntEnum):
    """Plugin states; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


class RateUnit(Enum):
    """Display unit for a transfer rate."""

    BYTES = ("B/s", 1)
    KILOBYTES = ("KB/s", 1024)
    MEGABYTES = ("MB/s", 1024 * 1024)

    def __init__(self, label: str, factor: int):
        self.label = label
        self.factor = factor

    @classmethod
    def for_rate(cls, rate: int) -> "RateUnit":
        """Pick the largest unit the rate reaches."""
        if rate < cls.KILOBYTES.factor:
            return cls.BYTES
        if rate < cls.MEGABYTES.factor:
            return cls.KILOBYTES
        return cls.MEGABYTES


@dataclass(frozen=True)
class NormalizedRate:
    """A rate scaled into its display unit."""

    value: float
    unit: RateUnit

    def __str__(self) -> str:
        return f"{self.value:.1f} {self.unit.label}"


def normalize_rate(rate: int) -> NormalizedRate:
    """Scale a bytes/sec rate to B/s, KB/s or MB/s."""
    unit = RateUnit.for_rate(rate)
    return NormalizedRate(value=rate / unit.factor, unit=unit)


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of one check."""

    status: Status
    message: str
    incoming_rate: int | None = None
    outgoing_rate: int | None = None
    age_seconds: int | None = None
    expired: bool = False

    def to_dict(self) -> dict:
        data = {
            "status": self.status.name.lower(),
            "message": self.message,
            "expired": self.expired,
        }
        if self.age_seconds is not None:
            data["age_seconds"] = self.age_seconds
        if self.incoming_rate is not None:
            incoming = normalize_rate(self.incoming_rate)
            outgoing = normalize_rate(self.outgoing_rate)
            data["incoming"] = {
                "bytes_per_second": self.incoming_rate,
                "value": round(incoming.value, 1),
                "unit": incoming.unit.label,
            }
            data["outgoing"] = {
                "bytes_per_second": self.outgoing_rate,
                "value": round(outgoing.value, 1),
                "unit": outgoing.unit.label,
            }
        return data


def select_rates(record: LogRecord, aggregation: Aggregation) -> tuple[int, int]:
    """Return the (incoming, outgoing) pair for the aggregation mode."""
    if aggregation is Aggregation.AVERAGE:
        return record.average_in, record.average_out
    return record.maximum_in, record.maximum_out


def format_traffic(label: str, incoming_rate: int, outgoing_rate: int) -> str:
    return (
        f"{label}. In = {normalize_rate(incoming_rate)}, "
        f"{label}. Out = {normalize_rate(outgoing_rate)}"
    )


def evaluate(
    config: Configuration,
    record: LogRecord,
    current_time: int,
) -> EvaluationResult:
    """
    Evaluate a log record.

    Stale data short-circuits to WARNING before any rate is looked at.
    Thresholds are compared against the raw bytes/sec rates, not the
    scaled display values, and a rate equal to a threshold does not
    breach it.

    Args:
        config: Resolved check configuration
        record: Newest sample from the MRTG log
        current_time: Unix epoch seconds to measure staleness against

    Returns:
        EvaluationResult with status and one-line message
    """
    age = current_time - record.timestamp

    if config.expiry_enabled and age > config.expire_minutes * 60:
        return EvaluationResult(
            status=Status.WARNING,
            message=f"MRTG data has expired ({age // 60} minutes old)",
            age_seconds=age,
            expired=True,
        )

    incoming_rate, outgoing_rate = select_rates(record, config.aggregation)
    traffic = format_traffic(config.aggregation.label, incoming_rate, outgoing_rate)

    if incoming_rate > config.incoming_critical or outgoing_rate > config.outgoing_critical:
        status = Status.CRITICAL
        message = traffic
    elif incoming_rate > config.incoming_warning or outgoing_rate > config.outgoing_warning:
        status = Status.WARNING
        message = traffic
    else:
        status = Status.OK
        message = f"Traffic ok - {traffic}"

    return EvaluationResult(
        status=status,
        message=message,
        incoming_rate=incoming_rate,
        outgoing_rate=outgoing_rate,
        age_seconds=age,
    )
