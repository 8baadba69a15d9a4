"""
Pydantic models for spelled amounts and receipts.

Every field is explicitly typed. Monetary values are Decimal at the
boundary; the speller rounds them to whole ariary itself.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


# ─── Spelled Amount ─────────────────────────────────────────────────


class AmountInWords(BaseModel):
    """Tagged result of spelling one amount.

    `words` and `sentence` are always filled in, even for invalid input,
    so the model can be dropped straight into a template.
    """

    rounded: Optional[int] = None  # None when the input was rejected
    words: str  # e.g. "vingt et un mille ariary"
    sentence: str  # e.g. "Arrêté à la somme de : vingt et un mille ariary."
    is_valid: bool
    error_code: Optional[str] = None  # Machine-readable, e.g. "INVALID_AMOUNT"


# ─── Receipt Models ─────────────────────────────────────────────────


class EstablishmentInfo(BaseModel):
    """The shop printed at the top of every receipt."""

    name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    nif: Optional[str] = None  # Tax identification number
    stat: Optional[str] = None  # Statistical registration number


class ReceiptItem(BaseModel):
    """One receipt line."""

    name: str
    quantity: int = Field(ge=0)
    unit_price: Decimal = Field(ge=0)
    total: Decimal = Field(ge=0)


class ReceiptData(BaseModel):
    """Everything the receipt and receipt e-mail need to render a sale."""

    receipt_number: str
    date: datetime
    establishment: EstablishmentInfo
    cashier_name: str
    customer_name: Optional[str] = None
    items: list[ReceiptItem] = Field(default_factory=list)
    subtotal: Decimal = Field(ge=0)
    tax_amount: Decimal = Field(ge=0)
    total: Decimal = Field(ge=0)
    payment_method: str  # cash, card, mvola, orange_money, airtel_money
    payment_amount: Decimal = Field(ge=0)
    change_amount: Decimal = Field(default=Decimal(0), ge=0)
