#!/usr/bin/env python
"""
    Reservation Schemas for bookrent,
    the request bodies and the response view of a reservation.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from bookrent.core.models import ReservationStatus

class ReservationRequest(BaseModel):
    user_id: int
    book_external_id: str
    rental_days: int = Field(..., gt=0, description="Rental length in days")
    start_date: date = Field(default_factory=date.today)

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "book_external_id": "OL7353617M",
                "rental_days": 7,
                "start_date": "2025-10-01"
            }
        }

class ReturnBookRequest(BaseModel):
    return_date: date = Field(default_factory=date.today)

class ReservationResponse(BaseModel):
    id: int
    user_id: int
    user_name: Optional[str] = None
    book_external_id: str
    book_title: Optional[str] = None
    rental_days: int
    start_date: date
    expected_return_date: date
    actual_return_date: Optional[date] = None
    daily_rate: Decimal
    total_fee: Decimal
    late_fee: Decimal
    status: ReservationStatus
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
