"""Pytest configuration and fixtures."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy.orm import sessionmaker
from hotel_api.db.models import Base
from hotel_api.db.session import build_engine, get_db
from hotel_api.main import app
from hotel_api.services.hotel import HotelRepository
from fastapi.testclient import TestClient
import tempfile


@pytest.fixture(scope="function")
def db_session():
    """Create a test database session."""
    # Create temporary SQLite database
    db_fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(db_fd)
    
    engine = build_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(bind=engine)
    
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
        os.unlink(db_path)


@pytest.fixture
def repository(db_session):
    """Hotel repository bound to the test session."""
    return HotelRepository(db_session)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass
    
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_hotel_data():
    """Sample hotel data for testing."""
    return {
        "name": "Hotel California",
        "location": "California",
        "price": 200,
        "rooms": 100
    }


@pytest.fixture
def stored_hotel(repository, sample_hotel_data):
    """A hotel already present in the store."""
    return repository.create_from(sample_hotel_data)
