"""Tests for the application shell."""
import logging
from sqlalchemy.exc import OperationalError
from hotel_api import __version__
from hotel_api.core.config import Settings
from hotel_api.core.logging import RequestIdFilter, request_id_var


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Hotel Registry API", "version": __version__}


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_request_id_header(client):
    """Test request ids are generated or echoed."""
    response = client.get("/health")
    assert response.headers["X-Request-ID"]
    
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


def test_storage_error_is_500(client, db_session, monkeypatch):
    """Test database failures become a generic server error."""
    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is unavailable"))
    
    monkeypatch.setattr(db_session, "query", broken_query)
    
    response = client.get("/api/hotels")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "unavailable" not in response.text


def test_request_id_filter():
    """Test log records are stamped with the active request id."""
    log_filter = RequestIdFilter()
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
    
    assert log_filter.filter(record) is True
    assert record.request_id == "-"
    
    token = request_id_var.set("req-1")
    try:
        log_filter.filter(record)
    finally:
        request_id_var.reset(token)
    assert record.request_id == "req-1"


def test_settings_defaults():
    """Test default settings."""
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.api_port == 8000


def test_settings_from_environment(monkeypatch):
    """Test settings are read from environment variables."""
    monkeypatch.setenv("API_PORT", "9000")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    
    settings = Settings(_env_file=None)
    assert settings.api_port == 9000
    assert settings.database_url == "sqlite:///./other.db"
