"""Tests for ManageSuppliersUseCase."""

import pytest

from stockroom.application.dto.requests import SupplierRequest
from stockroom.application.use_cases.manage_suppliers import ManageSuppliersUseCase
from stockroom.core.exceptions import SupplierNotFoundError, ValidationError


@pytest.fixture
def use_case(store):
    return ManageSuppliersUseCase(record_store=store)


class TestManageSuppliersUseCase:
    async def test_create_and_list(self, use_case):
        supplier = await use_case.create(SupplierRequest(name=" Acme ", city="Recife", state="PE"))
        assert supplier.name == "Acme"
        assert [s.id for s in await use_case.list_all()] == [supplier.id]

    async def test_names_are_unique(self, use_case, acme):
        with pytest.raises(ValidationError):
            await use_case.create(SupplierRequest(name="Acme"))

    async def test_empty_name(self, use_case):
        with pytest.raises(ValidationError):
            await use_case.create(SupplierRequest(name="  "))

    async def test_suggest(self, use_case, acme):
        await use_case.create(SupplierRequest(name="Beta Supplies"))
        assert [s.name for s in await use_case.suggest("ac")] == ["Acme"]
        assert await use_case.suggest("") == []

    async def test_delete(self, use_case, acme):
        await use_case.delete(acme.id)
        assert await use_case.list_all() == []
        with pytest.raises(SupplierNotFoundError):
            await use_case.delete(acme.id)
