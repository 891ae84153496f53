"""Hotel persistence service."""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from hotel_api.core.exceptions import HotelNotFoundError, HotelValidationError, StorageError
from hotel_api.db.models import Hotel

logger = logging.getLogger(__name__)


class HotelRepository:
    """Store handle for hotel records, bound to one database session."""
    
    def __init__(self, db: Session):
        self.db = db
    
    def create(self, hotel: Hotel) -> Hotel:
        """
        Validate and store a hotel.
        
        Args:
            hotel: Unsaved hotel instance
        
        Returns:
            The stored hotel with id and timestamps populated
        
        Raises:
            HotelValidationError: if any field constraint is violated
            StorageError: if the database rejects the write
        """
        errors = hotel.validate()
        if errors:
            logger.info("Rejected hotel: %s", ", ".join(e.field for e in errors))
            raise HotelValidationError({e.field: e.message for e in errors})
        
        now = datetime.utcnow()
        hotel.created_at = now
        hotel.updated_at = now
        
        try:
            self.db.add(hotel)
            self.db.commit()
            self.db.refresh(hotel)
        except (SQLAlchemyError, OverflowError) as e:
            self.db.rollback()
            logger.exception("Failed to store hotel")
            raise StorageError("Failed to store hotel") from e
        
        logger.info("Created hotel %s", hotel.id)
        return hotel
    
    def create_from(self, fields: Dict[str, Any]) -> Hotel:
        """Build a hotel from a field mapping and store it."""
        return self.create(Hotel(**fields))
    
    def list(self) -> List[Hotel]:
        """Return every stored hotel, oldest first."""
        try:
            return self.db.query(Hotel).order_by(Hotel.created_at, Hotel.id).all()
        except SQLAlchemyError as e:
            logger.exception("Failed to list hotels")
            raise StorageError("Failed to list hotels") from e
    
    def get(self, hotel_id: str) -> Optional[Hotel]:
        """Return the hotel stored under hotel_id, or None."""
        try:
            return self.db.query(Hotel).filter_by(id=hotel_id).first()
        except SQLAlchemyError as e:
            logger.exception("Failed to load hotel %s", hotel_id)
            raise StorageError("Failed to load hotel") from e
    
    def get_or_raise(self, hotel_id: str) -> Hotel:
        hotel = self.get(hotel_id)
        if hotel is None:
            raise HotelNotFoundError(hotel_id)
        return hotel
    
    def delete(self, hotel_id: str) -> bool:
        """
        Remove the hotel stored under hotel_id.
        
        Returns:
            True if a hotel was removed, False if none matched
        """
        hotel = self.get(hotel_id)
        if hotel is None:
            return False
        
        try:
            self.db.delete(hotel)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to delete hotel %s", hotel_id)
            raise StorageError("Failed to delete hotel") from e
        
        logger.info("Deleted hotel %s", hotel_id)
        return True
    
    def delete_or_raise(self, hotel_id: str) -> None:
        if not self.delete(hotel_id):
            raise HotelNotFoundError(hotel_id)
