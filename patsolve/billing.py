"""Phone bills from on-line and off-line records charged by hour of day."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

_HOURS = 24


@dataclass(frozen=True)
class Call:
    """One matched call; times are ``dd:hh:mm`` and the charge is in cents."""

    on_line: str
    off_line: str
    minutes: int
    charge: int


@dataclass
class Bill:
    """All the calls of one customer in a month."""

    name: str
    month: str
    calls: list[Call] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Total charge in cents."""
        return sum(call.charge for call in self.calls)


def _parse_moment(text: str) -> tuple[int, int, int]:
    parts = text.split(":")
    if len(parts) != 3:
        raise ValueError(f"expected dd:hh:mm, got {text!r}")
    try:
        day, hour, minute = (int(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"expected dd:hh:mm, got {text!r}") from exc
    if not (0 <= hour < _HOURS and 0 <= minute < 60):
        raise ValueError(f"expected dd:hh:mm, got {text!r}")
    return day, hour, minute


def call_charge(toll: Sequence[int], on_line: str, off_line: str) -> Call:
    """Charge a call from ``on_line`` to ``off_line`` (``dd:hh:mm``).

    ``toll[h]`` is the rate in cents per minute during hour ``h``.
    """
    if len(toll) != _HOURS:
        raise ValueError("toll must give a rate for each of the 24 hours")
    start = _parse_moment(on_line)
    end = _parse_moment(off_line)
    if end < start:
        raise ValueError("a call cannot end before it starts")
    day, hour, start_minute = start
    end_day, end_hour, end_minute = end
    charge = 0
    minutes = 0
    while (day, hour) < (end_day, end_hour):
        charge += toll[hour] * 60
        minutes += 60
        hour += 1
        if hour == _HOURS:
            hour = 0
            day += 1
    charge += toll[end_hour] * end_minute - toll[start[1]] * start_minute
    minutes += end_minute - start_minute
    return Call(on_line, off_line, minutes, charge)


def phone_bills(
    toll: Sequence[int], records: Iterable[tuple[str, str, str]]
) -> list[Bill]:
    """Pair records into calls and bill each customer, ordered by name.

    Each record is ``(name, MM:dd:hh:mm, "on-line" | "off-line")``.  An
    off-line record closes the latest unmatched on-line record of the same
    customer; records left unmatched are ignored, as are customers with no
    calls.
    """
    bills: dict[str, Bill] = {}
    pending: dict[str, str] = {}
    for name, time, status in sorted(records, key=lambda record: record[1]):
        if status not in ("on-line", "off-line"):
            raise ValueError(f"unknown record status {status!r}")
        bill = bills.setdefault(name, Bill(name, time[:2]))
        moment = time[3:]
        if status == "on-line":
            pending[name] = moment
        elif name in pending:
            bill.calls.append(call_charge(toll, pending.pop(name), moment))
    return [bills[name] for name in sorted(bills) if bills[name].calls]


def _dollars(cents: int) -> str:
    return f"${cents / 100:.2f}"


def format_bills(bills: Iterable[Bill]) -> list[str]:
    """Write the bills as printable lines."""
    lines = []
    for bill in bills:
        lines.append(f"{bill.name} {bill.month}")
        lines.extend(
            f"{call.on_line} {call.off_line} {call.minutes} {_dollars(call.charge)}"
            for call in bill.calls
        )
        lines.append(f"Total amount: {_dollars(bill.total)}")
    return lines