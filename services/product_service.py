import math
import uuid
from core.authorization import authorize
from core.exceptions import InsufficientStock, InvalidArgument
from db.repository import RestaurantRepository
from models.auth import CallerIdentity
from models.product import Product, ProductCreate, ProductUpdate
from utils.logger import get_logger
from typing import List

logger = get_logger("Product_Service")


def _require_non_negative(name: str, value) -> None:
    # NaN compares false against everything, so check finiteness first
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be a finite number")
    if value < 0:
        raise InvalidArgument(f"{name} must not be negative")


class ProductService:
    def __init__(self, repository: RestaurantRepository):
        self.repository = repository

    async def _owned_product(self, caller: CallerIdentity, product_id: str) -> Product:
        product = await self.repository.get_product_by_id(product_id)
        authorize(caller, product.restaurant_id)
        return product

    async def add_product(self, caller: CallerIdentity, payload: ProductCreate) -> str:
        """
        Create a product for the caller's restaurant and return its id.
        """
        authorize(caller, payload.restaurant_id)
        _require_non_negative("stock", payload.stock)
        _require_non_negative("price", payload.price)
        # products may only reference a restaurant that exists
        await self.repository.get_restaurant_by_id(payload.restaurant_id)

        product = Product(
            id=str(uuid.uuid4()),
            restaurant_id=payload.restaurant_id,
            name=payload.name,
            description=payload.description,
            price=payload.price,
            stock=payload.stock,
            category=payload.category,
        )
        await self.repository.create_product(product)
        logger.info(f"Product {product.id} created for restaurant {product.restaurant_id}")
        return product.id

    async def edit_product(self, caller: CallerIdentity, product_id: str, payload: ProductUpdate) -> None:
        product = await self._owned_product(caller, product_id)
        _require_non_negative("stock", payload.stock)
        _require_non_negative("price", payload.price)
        product.name = payload.name
        product.description = payload.description
        product.price = payload.price
        product.stock = payload.stock
        product.category = payload.category
        await self.repository.update_product(product)
        logger.info(f"Product {product_id} updated")

    async def delete_product(self, caller: CallerIdentity, product_id: str) -> None:
        await self._owned_product(caller, product_id)
        await self.repository.delete_product(product_id)
        logger.info(f"Product {product_id} deleted")

    async def increment_stock(self, caller: CallerIdentity, product_id: str, amount: int) -> None:
        _require_non_negative("amount", amount)
        await self._owned_product(caller, product_id)
        await self.repository.adjust_stock(product_id, amount)
        logger.info(f"Stock of product {product_id} incremented by {amount}")

    async def decrement_stock(self, caller: CallerIdentity, product_id: str, amount: int) -> None:
        """
        Subtract amount from stock. The sufficiency check and the write are a
        single conditional update in the store, so concurrent decrements can
        never take stock below zero.
        """
        _require_non_negative("amount", amount)
        await self._owned_product(caller, product_id)
        if not await self.repository.decrement_stock_if_sufficient(product_id, amount):
            logger.info(f"Decrement of product {product_id} by {amount} refused, insufficient stock")
            raise InsufficientStock()
        logger.info(f"Stock of product {product_id} decremented by {amount}")

    async def get_stock(self, product_id: str) -> int:
        return await self.repository.get_stock(product_id)

    async def get_by_id(self, product_id: str) -> Product:
        return await self.repository.get_product_by_id(product_id)

    async def list_by_restaurant(self, restaurant_id: str) -> List[Product]:
        return await self.repository.list_products_by_restaurant(restaurant_id)

    async def list_all(self) -> List[Product]:
        return await self.repository.list_all_products()

    async def get_owning_restaurant_id(self, product_id: str) -> str:
        product = await self.repository.get_product_by_id(product_id)
        return product.restaurant_id
