"""
Core Data Models for Shop Ledger

These models define the strict schemas for the three record types the
ledger tracks: sales, expenses and vendors.

They are designed to:
1. Parse saved JSON exactly once, at the storage boundary
2. Keep the camelCase wire format the dashboard has always written
   (vendorId, plasticContainers, isActive)
3. Be immutable - an update replaces the record with the same id

DESIGN DECISION: Each record type comes in two shapes. The *Draft model is
what a form produces (no id yet). The full model adds the id the record
store assigns at creation time.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class SaleStatus(str, Enum):
    """
    Payment status of a sale.

    Only PAID sales count as revenue. PENDING sales are receivables.
    """
    PAID = "Paid"
    PENDING = "Pending"


class ExpenseCategory(str, Enum):
    """Expense categories offered by the expense form."""
    INGREDIENTS = "Ingredients"
    PLASTIC_CONTAINER = "Plastic container"
    MISCELLANEOUS = "Miscellaneous"
    OTHERS = "Others"


class ExpenseUnit(str, Enum):
    """Units an ingredient purchase can be measured in."""
    KG = "kg"
    G = "g"
    L = "L"
    ML = "ml"
    PCS = "pcs"
    DOZEN = "dozen"


# =============================================================================
# SHARED CONFIG
# =============================================================================

RECORD_CONFIG = ConfigDict(
    str_strip_whitespace=True,
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


def _blank_to_none(v):
    """Form fields left empty were saved as "" by earlier versions."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


# =============================================================================
# SALES
# =============================================================================

class PlasticContainers(BaseModel):
    """
    Containers handed out with a sale and how many came back.

    returned <= given is expected but not enforced: the ledger
    reports what was entered.
    """
    model_config = RECORD_CONFIG

    given: int = Field(default=0, ge=0)
    returned: int = Field(default=0, ge=0)

    @property
    def outstanding(self) -> int:
        """Containers still with the customer."""
        return self.given - self.returned


class SaleDraft(BaseModel):
    """A sale as entered, before the store assigns an id."""
    model_config = RECORD_CONFIG

    item: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Name of the item sold"
    )
    quantity: int = Field(
        ...,
        ge=1,
        description="Units sold"
    )
    price: Decimal = Field(
        ...,
        ge=0,
        decimal_places=2,
        description="Price per unit"
    )
    date: dt.date = Field(
        ...,
        description="Day of the sale"
    )
    status: SaleStatus = Field(
        default=SaleStatus.PAID,
        description="Whether the customer has paid"
    )
    vendor_id: Optional[int] = Field(
        default=None,
        description="Vendor the sale went through, None for no vendor"
    )
    plastic_containers: PlasticContainers = Field(
        default_factory=PlasticContainers
    )

    @field_validator("vendor_id", mode="before")
    @classmethod
    def empty_vendor_is_none(cls, v):
        """An empty vendorId ("Select Vendor") means no vendor."""
        return _blank_to_none(v)

    @property
    def line_total(self) -> Decimal:
        """quantity x price."""
        return self.quantity * self.price


class Sale(SaleDraft):
    """A stored sale."""

    id: int = Field(
        ...,
        description="Store-assigned id, unique and immutable"
    )


# =============================================================================
# EXPENSES
# =============================================================================

class ExpenseDraft(BaseModel):
    """
    An expense as entered, before the store assigns an id.

    quantity and unit only mean something for INGREDIENTS. They are kept
    as entered for other categories but never displayed.
    """
    model_config = RECORD_CONFIG

    description: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="What was bought"
    )
    category: ExpenseCategory = Field(
        default=ExpenseCategory.INGREDIENTS
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        decimal_places=2,
        description="Total amount paid (not per unit)"
    )
    date: dt.date = Field(
        ...,
        description="Day of the expense"
    )
    quantity: Optional[Decimal] = Field(
        default=None,
        gt=0,
        description="Quantity bought (e.g., 2.5 kg)"
    )
    unit: Optional[ExpenseUnit] = None

    @field_validator("quantity", mode="before")
    @classmethod
    def cleared_quantity_is_none(cls, v):
        """An empty or zeroed quantity input means no quantity."""
        v = _blank_to_none(v)
        if isinstance(v, (int, float, Decimal)) and v == 0:
            return None
        return v

    @field_validator("unit", mode="before")
    @classmethod
    def empty_unit_is_none(cls, v):
        return _blank_to_none(v)

    @property
    def details(self) -> str:
        """Description with the measured quantity for ingredient purchases."""
        if (
            self.category == ExpenseCategory.INGREDIENTS
            and self.quantity is not None
            and self.unit is not None
        ):
            return f"{self.description} ({self.quantity.normalize():f} {self.unit.value})"
        return self.description


class Expense(ExpenseDraft):
    """A stored expense."""

    id: int = Field(
        ...,
        description="Store-assigned id, unique and immutable"
    )


# =============================================================================
# VENDORS
# =============================================================================

class VendorDraft(BaseModel):
    """A vendor as entered, before the store assigns an id."""
    model_config = RECORD_CONFIG

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Vendor name"
    )
    contact: str = Field(
        default="",
        max_length=200,
        description="Phone number, email or any free text"
    )


class Vendor(VendorDraft):
    """
    A stored vendor.

    CRITICAL: Vendors are never physically removed. Deleting one flips
    is_active to False so old sales keep a valid vendor_id.
    """

    id: int = Field(
        ...,
        description="Store-assigned id, unique and immutable"
    )
    is_active: bool = Field(
        default=True,
        description="False once the vendor has been deleted"
    )
