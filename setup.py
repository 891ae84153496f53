"""Setup script for Hotel Registry API."""
from setuptools import setup, find_packages

setup(
    name="hotel-registry-api",
    version="1.0.0",
    description="REST service for creating, listing, fetching and deleting hotel records",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "sqlalchemy>=2.0",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.26",
        ],
    },
    entry_points={
        "console_scripts": [
            "hotel-registry-api=hotel_api.main:run",
        ],
    },
)
