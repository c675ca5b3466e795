"""
Time-Window Filter

Turns a period token plus "now" into a cutoff date and keeps the records
dated on or after it.

Comparison is by calendar date only: time of day never matters, so a
record dated today is always inside every window.
"""

import datetime as dt
from datetime import timedelta
from typing import Optional, Protocol, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

from shopledger.models.records import Expense, Sale
from shopledger.models.reports import Period


class Dated(Protocol):
    @property
    def date(self) -> dt.date: ...


DatedT = TypeVar("DatedT", bound=Dated)


_DAYS_BACK = {
    Period.LAST_7_DAYS: 7,
    Period.LAST_30_DAYS: 30,
}


def _one_year_before(day: dt.date) -> dt.date:
    """Same calendar day a year earlier. Feb 29 rolls over to Mar 1."""
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        return dt.date(day.year - 1, 3, 1)


def cutoff_for(period: Period, now: dt.datetime) -> Optional[dt.date]:
    """
    First day included in the window, or None when there is no lower bound.
    """
    today = now.date()
    if period == Period.ALL:
        return None
    if period == Period.LAST_YEAR:
        return _one_year_before(today)
    return today - timedelta(days=_DAYS_BACK[period])


def filter_by_cutoff(
    records: Sequence[DatedT],
    cutoff: Optional[dt.date],
) -> list[DatedT]:
    """Records dated on or after the cutoff, in their original order."""
    if cutoff is None:
        return list(records)
    return [record for record in records if record.date >= cutoff]


class TimeWindow(BaseModel):
    """A period resolved against a specific "now"."""
    model_config = ConfigDict(frozen=True)

    period: Period
    cutoff: Optional[dt.date] = None

    @classmethod
    def resolve(cls, period: Period, now: dt.datetime) -> "TimeWindow":
        return cls(period=period, cutoff=cutoff_for(period, now))

    def sales(self, sales: Sequence[Sale]) -> list[Sale]:
        return filter_by_cutoff(sales, self.cutoff)

    def expenses(self, expenses: Sequence[Expense]) -> list[Expense]:
        return filter_by_cutoff(expenses, self.cutoff)
