"""Exception classes for the hotel service."""
from typing import Dict


class HotelServiceError(Exception):
    """Base exception for the hotel service."""
    pass


class HotelValidationError(HotelServiceError):
    """One or more hotel fields violate their constraints."""
    
    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        summary = ", ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Hotel validation failed: {summary}")


class HotelNotFoundError(HotelServiceError):
    """No hotel is stored under the given id."""
    
    def __init__(self, hotel_id: str):
        self.hotel_id = hotel_id
        super().__init__(f"Hotel {hotel_id} not found")


class StorageError(HotelServiceError):
    """The database could not complete an operation."""
    pass
