"""Tests for User and RegisterRequest models."""

import pytest
from pydantic import ValidationError
from src.models.user import User, RegisterRequest


@pytest.mark.unit
def test_user_valid():
    """Test valid user creation."""
    user = User(
        id=1,
        username="jdoe",
        password_hash="pbkdf2_sha256$1000$abc$def",
        email="jdoe@example.com",
        full_name="John Doe"
    )

    assert user.username == "jdoe"
    assert user.saved_properties == "[]"  # Default value
    assert user.created_at is not None


@pytest.mark.unit
def test_user_invalid_email():
    with pytest.raises(ValidationError):
        User(
            id=1,
            username="jdoe",
            password_hash="x",
            email="not-an-email",
            full_name="John Doe"
        )


@pytest.mark.unit
def test_register_request_password_length():
    with pytest.raises(ValidationError):
        RegisterRequest(
            username="jdoe",
            password="123",
            email="jdoe@example.com",
            full_name="John Doe"
        )
