"""
Date-range search over trainings.

Bounds are calendar days: the start widens to 00:00:00 and the end to
23:59:59.999999 of their day, both inclusive.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time

from trainings.domain.entities import Training


@dataclass(frozen=True)
class SearchCriteria:
    start_date: date | datetime
    end_date: date | datetime


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def start_of_day(value: date | datetime) -> datetime:
    moment = _as_datetime(value)
    return datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)


def end_of_day(value: date | datetime) -> datetime:
    moment = _as_datetime(value)
    return datetime.combine(moment.date(), time.max, tzinfo=moment.tzinfo)


def search_trainings(
    trainings: Iterable[Training], criteria: SearchCriteria
) -> list[Training]:
    """
    Return the trainings dated within the criteria days, oldest first.

    A start after the end (compared as given, before widening) yields an
    empty list. The input is never modified; ties keep their input order.
    """
    if _as_datetime(criteria.start_date) > _as_datetime(criteria.end_date):
        return []

    lower = start_of_day(criteria.start_date)
    upper = end_of_day(criteria.end_date)

    matches = [t for t in trainings if lower <= t.date <= upper]
    return sorted(matches, key=lambda t: t.date)
