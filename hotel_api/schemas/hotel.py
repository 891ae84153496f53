"""Hotel Pydantic schemas."""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Dict, Optional
from datetime import datetime


class HotelCreate(BaseModel):
    """Schema for creating a hotel.
    
    Every field is optional here so that missing values reach the model's
    own validation and are reported with its messages.
    """
    name: Optional[str] = Field(None, description="Hotel name")
    location: Optional[str] = Field(None, description="City or address")
    price: Optional[float] = Field(None, description="Price per night in USD, at least 50")
    rooms: Optional[int] = Field(None, description="Number of rooms, at least 1")


class Hotel(BaseModel):
    """Schema for hotel response."""
    id: str
    name: str
    location: str
    price: float
    rooms: int
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class HotelCreated(BaseModel):
    """Response for a newly stored hotel."""
    message: str
    hotel: Hotel


class Message(BaseModel):
    """Plain message response."""
    message: str


class ValidationErrorResponse(BaseModel):
    """Per-field validation failure details."""
    message: str = "Hotel validation failed"
    errors: Dict[str, str] = Field(default_factory=dict)
