"""Models for the delivery charge calculation system."""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum


class DeliveryZone(str, Enum):
    """Rate tiers; each maps to one rate strategy."""
    URBAN = "urban"
    SUBURBAN = "suburban"
    RURAL = "rural"


class Delivery(BaseModel):
    """Model representing a single delivery."""
    distance: float = Field(..., ge=0, description="Delivery distance")


class DeliveryWithCharge(Delivery):
    """Delivery model extended with calculated charge."""
    charge: float = Field(..., description="Calculated charge for this delivery")
    delivery_id: Optional[int] = Field(None, description="Position of the delivery in the batch")


class DeliveryRequest(BaseModel):
    """Request model for batch charge calculation."""
    deliveries: List[Delivery] = Field(
        ...,
        min_length=1,
        description="List of deliveries to charge"
    )


class StrategyRequest(BaseModel):
    """Request model for switching the active rate strategy."""
    zone: DeliveryZone


class ChargeQuote(BaseModel):
    """Response model for a single charge calculation."""
    zone: Optional[DeliveryZone] = None
    distance: float
    charge: float


class ChargeResponse(BaseModel):
    """Response model for batch charge calculation."""
    zone: Optional[DeliveryZone] = Field(None, description="Rate tier used for the batch")
    deliveries: List[DeliveryWithCharge] = Field(
        ...,
        description="List of deliveries with calculated charges"
    )
    total_charge: float = Field(..., description="Total charge for all deliveries")
    delivery_count: int = Field(..., description="Number of deliveries")


class RateTier(BaseModel):
    """Model describing a rate tier."""
    zone: DeliveryZone
    multiplier: float
    strategy: str
