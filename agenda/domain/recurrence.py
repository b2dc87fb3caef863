"""Recurrence expansion: turn an EventRule into its occurrence dates.

Expansion walks cycles (a week for weekly rules, a month for monthly
rules) forward from the cycle containing the start date, ``interval``
cycles at a time, and keeps the candidate days of each visited cycle
that fall inside the rule's bounds.

Termination is either by end date (stop once a cycle starts after the
end date) or by count. A count bounds the number of cycles visited and
the number of occurrences emitted, whichever is reached first, so a
rule can yield fewer than ``occurrence_count`` dates when early
candidates fall before the start date.

The module does no I/O. Callers that want to observe an expansion pass
a ``trace`` callable.
"""

import calendar
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import date, timedelta
from itertools import count

from dateutil.relativedelta import relativedelta

from agenda.domain.models import EndCondition, EventRule, Frequency
from agenda.domain.value_objects import Interval, Weekday, normalize_date

DAYS_PER_WEEK = 7

Cycle = tuple[date, list[date]]


@dataclass(frozen=True)
class TraceEvent:
    """One step of an expansion: a visited cycle or an emitted occurrence."""

    kind: str
    cycle: int
    day: date


Tracer = Callable[[TraceEvent], None]


@dataclass(frozen=True)
class _Bounds:
    start: date
    end: date | None = None
    limit: int | None = None

    def admits(self, day: date) -> bool:
        return day >= self.start and (self.end is None or day <= self.end)

    def visits(self, cycle: int, cycle_start: date) -> bool:
        if self.limit is not None:
            return cycle < self.limit
        return self.end is not None and cycle_start <= self.end

    def is_full(self, emitted: int) -> bool:
        return self.limit is not None and emitted >= self.limit


def expand(rule: EventRule, trace: Tracer | None = None) -> list[date]:
    """Return the ordered occurrence dates of ``rule``.

    Never raises for a well-typed rule: an unusable selector or end
    condition yields an empty list.
    """
    start = normalize_date(rule.start_date)
    if not rule.is_recurring:
        return [start]

    bounds = _bounds_for(rule, start)
    if bounds is None:
        return []

    interval = Interval.coerce(rule.interval).value
    if rule.frequency is Frequency.WEEKLY:
        cycles = _weekly_cycles(start, interval, _selected_weekdays(rule.weekdays))
    elif rule.frequency is Frequency.MONTHLY:
        cycles = _monthly_cycles(start, interval, _selected_month_days(rule.month_days))
    else:
        return []
    return _collect(cycles, bounds, trace)


def _bounds_for(rule: EventRule, start: date) -> _Bounds | None:
    if rule.end_condition is EndCondition.BY_DATE:
        if rule.end_date is None:
            return None
        return _Bounds(start=start, end=normalize_date(rule.end_date))
    if rule.end_condition is EndCondition.BY_COUNT:
        limit = rule.occurrence_count
        if limit is None or limit < 1:
            return None
        return _Bounds(start=start, limit=limit)
    return None


def _collect(cycles: Iterator[Cycle], bounds: _Bounds, trace: Tracer | None) -> list[date]:
    occurrences: list[date] = []
    for cycle, (cycle_start, candidates) in enumerate(cycles):
        if not bounds.visits(cycle, cycle_start):
            break
        if trace is not None:
            trace(TraceEvent("cycle", cycle, cycle_start))
        for day in candidates:
            if not bounds.admits(day):
                continue
            occurrences.append(day)
            if trace is not None:
                trace(TraceEvent("occurrence", cycle, day))
            if bounds.is_full(len(occurrences)):
                return occurrences
    return occurrences


def _selected_weekdays(names: tuple[str, ...]) -> frozenset[Weekday]:
    found = (Weekday.from_name(name) for name in names)
    return frozenset(day for day in found if day is not None)


def _selected_month_days(days: tuple[int, ...]) -> list[int]:
    selected = set()
    for day in days:
        try:
            value = int(day)
        except (TypeError, ValueError):
            continue
        if 1 <= value <= 31:
            selected.add(value)
    return sorted(selected)


def _weekly_cycles(start: date, interval: int, weekdays: frozenset[Weekday]) -> Iterator[Cycle]:
    first_week = start - timedelta(days=start.weekday())
    step = timedelta(weeks=interval)
    if len(weekdays) == DAYS_PER_WEEK:
        # whole week block, no per-weekday ordering needed
        offsets = range(DAYS_PER_WEEK)
    else:
        offsets = sorted(day.index for day in weekdays)
    for n in count():
        try:
            week_start = first_week + n * step
        except OverflowError:
            return
        yield week_start, [
            day for day in (_shift(week_start, offset) for offset in offsets) if day is not None
        ]


def _monthly_cycles(start: date, interval: int, month_days: list[int]) -> Iterator[Cycle]:
    first_month = start.replace(day=1)
    for n in count():
        try:
            month_start = first_month + relativedelta(months=n * interval)
        except (OverflowError, ValueError):
            return
        length = calendar.monthrange(month_start.year, month_start.month)[1]
        yield month_start, [month_start.replace(day=day) for day in month_days if day <= length]


def _shift(day: date, offset: int) -> date | None:
    # None past date.max
    try:
        return day + timedelta(days=offset)
    except OverflowError:
        return None
