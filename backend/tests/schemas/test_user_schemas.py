"""User Schemas — request validation for the account endpoints."""

import pytest
from pydantic import ValidationError

from campus_api.schemas.user import UserAuthenticate, UserCreate


def test_authenticate_defaults_to_blank():
    body = UserAuthenticate()
    assert body.email_address == ""
    assert body.password == ""


def test_create_strips_names_only():
    body = UserCreate(
        first_name="  Emily ", last_name=" Johnson",
        email_address="emily.johnson@example.com", password="pw",
    )
    assert body.first_name == "Emily"
    assert body.last_name == "Johnson"
    assert body.email_address == "emily.johnson@example.com"


@pytest.mark.parametrize("field", ["email_address", "password"])
def test_create_rejects_empty_credentials(field):
    data = {
        "first_name": "Emily", "last_name": "Johnson",
        "email_address": "emily.johnson@example.com", "password": "pw",
    }
    data[field] = ""
    with pytest.raises(ValidationError):
        UserCreate(**data)


@pytest.mark.parametrize("field", ["email_address", "password"])
def test_create_rejects_whitespace_only_credentials(field):
    data = {
        "first_name": "Emily", "last_name": "Johnson",
        "email_address": "emily.johnson@example.com", "password": "pw",
    }
    data[field] = "   "
    with pytest.raises(ValidationError):
        UserCreate(**data)


def test_create_keeps_password_as_sent():
    body = UserCreate(
        first_name="Emily", last_name="Johnson",
        email_address="emily.johnson@example.com", password=" pw ",
    )
    assert body.password == " pw "
