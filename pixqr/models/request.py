"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/models/request.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Pydantic models for the payment request handed to the codec
                and for the payment code produced by the service layer.
------------------------------------------------------------------------------
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentRequest(BaseModel):
    """
    Everything needed to build one payload.
    Text limits (name 25, city 15, reference 25) are applied by the
    assembler, so the raw values are kept here untouched.
    """

    model_config = ConfigDict(frozen=True)

    beneficiary_key: str
    merchant_name: str
    merchant_city: str
    # None means an open-amount code (the payer types the amount)
    amount: Optional[Decimal] = None
    reference_label: str = ""


class PixCode(BaseModel):
    """A generated payment code as handed to storage and rendering."""

    model_config = ConfigDict(frozen=True)

    code_id: str = Field(..., min_length=32, max_length=32)
    payload: str
    amount: Optional[Decimal] = None
    created_at: datetime
    expires_at: datetime
