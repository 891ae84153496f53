"""SQLAlchemy 2.0 database models."""
from dataclasses import dataclass
from numbers import Real
import math
import sys
from sqlalchemy import Column, String, Integer, DateTime, Float
from sqlalchemy.orm import declarative_base
from datetime import datetime
from typing import List
import uuid


Base = declarative_base()

MIN_PRICE = 50
MIN_ROOMS = 1
MAX_PRICE = sys.float_info.max
# Signed 64-bit column range
MAX_ROOMS = 2 ** 63 - 1

TYPE_MESSAGES = {
    "name": "Hotel name must be text",
    "location": "Hotel location must be text",
    "price": "Price must be a number",
    "rooms": "Number of rooms must be a whole number",
}


@dataclass(frozen=True)
class FieldError:
    """A single field constraint violation."""
    field: str
    message: str


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_number(value) -> bool:
    # bool is an int subclass but never a valid price or room count
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not isinstance(value, float) or math.isfinite(value)


class Hotel(Base):
    """Hotel model.
    
    Instances may hold invalid values while in memory; ``validate`` is
    checked by the repository before anything is added to a session.
    """
    __tablename__ = "hotels"
    
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    location = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    rooms = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    def validate(self) -> List[FieldError]:
        """
        Check every field constraint.
        
        Returns:
            All violations in field order (name, location, price, rooms);
            an empty list when the hotel may be stored.
        """
        errors = []
        
        if _is_blank(self.name):
            errors.append(FieldError("name", "Hotel name is required"))
        elif not isinstance(self.name, str):
            errors.append(FieldError("name", TYPE_MESSAGES["name"]))
        
        if _is_blank(self.location):
            errors.append(FieldError("location", "Hotel location is required"))
        elif not isinstance(self.location, str):
            errors.append(FieldError("location", TYPE_MESSAGES["location"]))
        
        if self.price is None:
            errors.append(FieldError("price", "Price is required"))
        elif not _is_number(self.price):
            errors.append(FieldError("price", TYPE_MESSAGES["price"]))
        elif self.price < MIN_PRICE:
            errors.append(FieldError("price", f"Price must be at least ${MIN_PRICE}"))
        elif self.price > MAX_PRICE:
            errors.append(FieldError("price", "Price is too large"))
        
        if self.rooms is None:
            errors.append(FieldError("rooms", "Number of rooms is required"))
        elif isinstance(self.rooms, bool) or not isinstance(self.rooms, int):
            errors.append(FieldError("rooms", TYPE_MESSAGES["rooms"]))
        elif self.rooms < MIN_ROOMS:
            errors.append(FieldError("rooms", "There must be at least one room"))
        elif self.rooms > MAX_ROOMS:
            errors.append(FieldError("rooms", "Number of rooms is too large"))
        
        return errors
    
    def __repr__(self) -> str:
        return f"<Hotel {self.id} {self.name!r}>"
