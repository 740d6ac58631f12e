"""Product directory use cases."""

from decimal import Decimal
from typing import Literal

from stockroom.application.dto.requests import ProductRequest
from stockroom.config import get_logger
from stockroom.core.entities import Product
from stockroom.core.exceptions import ValidationError
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork
from stockroom.core.services import suggest_by_name

logger = get_logger(__name__)


def _validate(request: ProductRequest) -> None:
    if not request.name.strip():
        raise ValidationError("name", "enter the product name", request.name)
    if request.price < 0:
        raise ValidationError("price", "price cannot be negative", request.price)
    if request.image is not None and not request.image.startswith("data:image/"):
        raise ValidationError("image", "image must be an image data URL", request.image)


class ManageProductsUseCase:
    """
    Create, edit, delete and search products.

    Stock, unit cost and the active flag are not editable here: they are
    owned by stock entries, order completion and the product dashboard.
    """

    def __init__(self, record_store: IRecordStore | None = None):
        self._record_store = record_store

    async def _get_uow(self) -> UnitOfWork:
        if self._record_store is None:
            from stockroom.infrastructure.storage import get_record_store

            self._record_store = await get_record_store()
        return UnitOfWork(self._record_store)

    async def create(self, request: ProductRequest) -> Product:
        _validate(request)
        uow = await self._get_uow()
        async with uow.transaction():
            if await uow.products.find_by_name(request.name) is not None:
                raise ValidationError("name", "a product with this name already exists", request.name)
            product = Product(
                name=request.name.strip(),
                price=request.price,
                description=request.description,
                supplier_name=request.supplier_name,
                image=request.image,
            )
            await uow.products.add(product)
        logger.info("product_created", product_id=product.id, name=product.name)
        return product

    async def update(self, product_id: str, request: ProductRequest) -> Product:
        _validate(request)
        uow = await self._get_uow()
        async with uow.transaction():
            product = await uow.products.require(product_id)
            clash = await uow.products.find_by_name(request.name)
            if clash is not None and clash.id != product_id:
                raise ValidationError("name", "a product with this name already exists", request.name)
            product.name = request.name.strip()
            product.price = request.price
            product.description = request.description
            product.supplier_name = request.supplier_name
            product.image = request.image
            await uow.products.update(product)
        logger.info("product_updated", product_id=product_id)
        return product

    async def delete(self, product_id: str) -> None:
        uow = await self._get_uow()
        async with uow.transaction():
            await uow.products.remove(product_id)
        logger.info("product_deleted", product_id=product_id)

    async def search(
        self,
        name: str = "",
        supplier: str = "",
        price_order: Literal["asc", "desc"] = "asc",
    ) -> list[Product]:
        """Filter by name and supplier substrings, sorted by price."""
        uow = await self._get_uow()
        products = await uow.products.load(strict=False)
        name_needle = name.strip().lower()
        supplier_needle = supplier.strip().lower()
        matches = [
            p
            for p in products
            if name_needle in p.name.lower() and supplier_needle in p.supplier_name.lower()
        ]
        return sorted(matches, key=lambda p: p.price, reverse=price_order == "desc")

    async def suggest(self, text: str) -> list[Product]:
        uow = await self._get_uow()
        return suggest_by_name(await uow.products.load(strict=False), text)

    async def set_price(self, product_id: str, price: Decimal) -> Product:
        product = await self._require(product_id)
        return await self.update(
            product_id,
            ProductRequest(
                name=product.name,
                price=price,
                description=product.description,
                supplier_name=product.supplier_name,
                image=product.image,
            ),
        )

    async def _require(self, product_id: str) -> Product:
        uow = await self._get_uow()
        return await uow.products.require(product_id)
