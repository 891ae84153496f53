"""Hotel CRUD API endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from hotel_api.db.session import get_db
from hotel_api.schemas.hotel import HotelCreate, Hotel as HotelSchema, HotelCreated, Message, ValidationErrorResponse
from hotel_api.services.hotel import HotelRepository

router = APIRouter()

NOT_FOUND = {404: {"model": Message, "description": "Hotel not found"}}


def get_hotel_repository(db: Session = Depends(get_db)) -> HotelRepository:
    """Dependency that binds a hotel repository to the request's session."""
    return HotelRepository(db)


@router.post("/hotels", response_model=HotelCreated, status_code=status.HTTP_201_CREATED,
              responses={400: {"model": ValidationErrorResponse}})
async def create_hotel(
    hotel: Optional[HotelCreate] = None,
    repository: HotelRepository = Depends(get_hotel_repository)
):
    """Create a new hotel."""
    # A missing or null body is treated as an empty one
    if hotel is None:
        hotel = HotelCreate()
    db_hotel = repository.create_from(hotel.model_dump())
    
    return HotelCreated(
        message="Hotel successfully added!",
        hotel=HotelSchema.model_validate(db_hotel)
    )


@router.get("/hotels", response_model=List[HotelSchema])
async def list_hotels(
    repository: HotelRepository = Depends(get_hotel_repository)
):
    """List all hotels."""
    return repository.list()


@router.get("/hotels/{hotel_id}", response_model=HotelSchema, responses=NOT_FOUND)
async def get_hotel(
    hotel_id: str,
    repository: HotelRepository = Depends(get_hotel_repository)
):
    """Get a specific hotel by ID."""
    return repository.get_or_raise(hotel_id)


@router.delete("/hotels/{hotel_id}", response_model=Message, responses=NOT_FOUND)
async def delete_hotel(
    hotel_id: str,
    repository: HotelRepository = Depends(get_hotel_repository)
):
    """Delete a hotel by ID."""
    repository.delete_or_raise(hotel_id)
    return Message(message="Hotel deleted successfully")
