"""Tests for ManageAccountUseCase."""

import pytest

from stockroom.application.dto.requests import RegisterAccountRequest
from stockroom.application.use_cases.manage_account import ManageAccountUseCase
from stockroom.core.exceptions import AuthenticationError, ValidationError
from stockroom.core.repositories import CURRENT_USER


@pytest.fixture
def use_case(store):
    return ManageAccountUseCase(record_store=store)


def registration(**overrides) -> RegisterAccountRequest:
    data = {
        "name": "Ana",
        "email": "Ana@Example.com",
        "password": "s3cret",
        "confirmation": "s3cret",
    }
    data.update(overrides)
    return RegisterAccountRequest(**data)


class TestManageAccountUseCase:
    async def test_register_and_login(self, use_case, store):
        account = await use_case.register(registration())
        assert account.email == "ana@example.com"
        assert "s3cret" not in store.payloads[CURRENT_USER]

        logged_in = await use_case.login(" ANA@example.com ", "s3cret")
        assert logged_in.name == "Ana"

    async def test_wrong_password(self, use_case):
        await use_case.register(registration())
        with pytest.raises(AuthenticationError) as exc:
            await use_case.login("ana@example.com", "nope")
        assert exc.value.code == "AUTHENTICATION_FAILED"

    async def test_login_without_account(self, use_case):
        with pytest.raises(AuthenticationError):
            await use_case.login("ana@example.com", "s3cret")

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"email": " "}, "email"),
            ({"password": "", "confirmation": ""}, "password"),
            ({"confirmation": "other"}, "confirmation"),
        ],
    )
    async def test_register_validation(self, use_case, overrides, field):
        with pytest.raises(ValidationError) as exc:
            await use_case.register(registration(**overrides))
        assert exc.value.details["field"] == field

    async def test_register_again_replaces_account(self, use_case):
        await use_case.register(registration())
        await use_case.register(registration(email="new@example.com"))
        with pytest.raises(AuthenticationError):
            await use_case.login("ana@example.com", "s3cret")
        assert (await use_case.login("new@example.com", "s3cret")).email == "new@example.com"
