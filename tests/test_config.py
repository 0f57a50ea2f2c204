"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from bizdocs.config import Settings

PRODUCTION = {
    "environment": "production",
    "jwt_secret": "a-real-secret",
    "database_url": "postgresql://bizdocs:pw@db.internal:5432/bizdocs",
    "storage_url": "https://files.example.com/storage",
}


def test_production_settings_accepted():
    settings = Settings(**PRODUCTION)
    assert not settings.is_development


@pytest.mark.parametrize(
    "override",
    [
        {"jwt_secret": "change-me-in-production"},
        {"database_url": "postgresql://bizdocs:pw@localhost:5432/bizdocs"},
        {"storage_url": "http://localhost:8000/storage"},
    ],
)
def test_production_rejects_development_defaults(override):
    with pytest.raises(ValidationError):
        Settings(**{**PRODUCTION, **override})


def test_upload_settings():
    settings = Settings(upload_max_kb=10, upload_allowed_extensions=[".PDF", "Png"])
    assert settings.upload_max_bytes == 10 * 1024
    assert settings.upload_allowed_extensions == ["pdf", "png"]
