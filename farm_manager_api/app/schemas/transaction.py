"""
Pydantic schemas for income and expense transactions.
"""

from typing import Optional

from pydantic import Field

from .common import UIModel


class TransactionCreate(UIModel):
    """Schema for recording a transaction.

    ``amount`` and ``farm_id`` accept their form representation
    (``"120.50"``, ``"3"``) and are coerced to numbers.
    """

    type: Optional[str] = Field(None, description="'income' or 'expense'")
    category: str
    amount: float
    date: str
    description: Optional[str] = None
    farm_id: int


class TransactionUpdate(TransactionCreate):
    """Schema for updating a transaction (full replacement)."""
    pass


class TransactionRead(UIModel):
    """Schema for reading a transaction."""

    id: int = Field(..., alias="Id")
    type: str = "expense"
    category: str = ""
    amount: float = 0
    date: Optional[str] = None
    description: str = ""
    farm_id: Optional[int] = None
