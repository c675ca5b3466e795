"""
Tagged activity variant.

Sales and expenses are merged into one stream for the profit chart and the
recent activity feed. Each entry carries an explicit kind tag, so consumers
branch on the tag instead of guessing from which fields are present.
"""

import datetime as dt
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from shopledger.models.records import Expense, Sale


class ActivityKind(str, Enum):
    SALE = "sale"
    EXPENSE = "expense"


class SaleActivity(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ActivityKind.SALE] = ActivityKind.SALE
    data: Sale

    @property
    def date(self) -> dt.date:
        return self.data.date


class ExpenseActivity(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[ActivityKind.EXPENSE] = ActivityKind.EXPENSE
    data: Expense

    @property
    def date(self) -> dt.date:
        return self.data.date


Activity = Annotated[
    Union[SaleActivity, ExpenseActivity],
    Field(discriminator="kind"),
]


def merge_activities(
    sales: list[Sale],
    expenses: list[Expense],
) -> list[Union[SaleActivity, ExpenseActivity]]:
    """Tag every sale and expense, sales first, preserving input order."""
    merged: list[Union[SaleActivity, ExpenseActivity]] = [
        SaleActivity(data=sale) for sale in sales
    ]
    merged.extend(ExpenseActivity(data=expense) for expense in expenses)
    return merged
