from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import List
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError
from core.exceptions import EmailAlreadyExists, ProductNotFound, RestaurantNotFound, StoreError
from db.db_operation import MongoConnection
from models.product import Product
from models.restaurant import Restaurant
from utils.logger import get_logger

logger = get_logger("Repository")


class RestaurantRepository(ABC):
    """
    Storage contract used by the services. Implementations raise
    RestaurantNotFound / ProductNotFound on misses, EmailAlreadyExists on a
    duplicate owner email and StoreError for anything else the backend reports.
    """

    # restaurants

    @abstractmethod
    async def create_restaurant(self, restaurant: Restaurant) -> None: ...

    @abstractmethod
    async def get_restaurant_by_email(self, email: str) -> Restaurant: ...

    @abstractmethod
    async def get_restaurant_by_id(self, restaurant_id: str) -> Restaurant: ...

    @abstractmethod
    async def update_restaurant(self, restaurant: Restaurant) -> None: ...

    @abstractmethod
    async def list_restaurants(self) -> List[Restaurant]: ...

    @abstractmethod
    async def set_ban_status(self, restaurant_id: str, banned: bool, reason: str) -> None: ...

    # products

    @abstractmethod
    async def create_product(self, product: Product) -> None: ...

    @abstractmethod
    async def get_product_by_id(self, product_id: str) -> Product: ...

    @abstractmethod
    async def list_products_by_restaurant(self, restaurant_id: str) -> List[Product]: ...

    @abstractmethod
    async def update_product(self, product: Product) -> None: ...

    @abstractmethod
    async def delete_product(self, product_id: str) -> None: ...

    @abstractmethod
    async def list_all_products(self) -> List[Product]: ...

    @abstractmethod
    async def adjust_stock(self, product_id: str, delta: int) -> None:
        """Atomic ``stock += delta``. No floor is enforced."""

    @abstractmethod
    async def decrement_stock_if_sufficient(self, product_id: str, amount: int) -> bool:
        """
        Atomically subtract amount only while stock >= amount.
        Returns False when stock was insufficient; raises ProductNotFound
        when the product does not exist.
        """

    @abstractmethod
    async def get_stock(self, product_id: str) -> int: ...


@contextmanager
def _store_errors(operation: str):
    try:
        yield
    except PyMongoError as e:
        logger.exception(f"DB error during {operation}")
        raise StoreError(f"Database error during {operation}") from e


def _restaurant_from_doc(doc: dict) -> Restaurant:
    data = dict(doc)
    data["id"] = data.pop("_id")
    return Restaurant.model_validate(data)


def _product_from_doc(doc: dict) -> Product:
    data = dict(doc)
    data["id"] = data.pop("_id")
    return Product.model_validate(data)


def _to_doc(model) -> dict:
    doc = model.model_dump()
    doc["_id"] = doc.pop("id")
    return doc


class MongoRestaurantRepository(RestaurantRepository):
    def __init__(self, mongo_conn: MongoConnection):
        self.restaurants = mongo_conn.restaurants_collection
        self.products = mongo_conn.products_collection

    async def create_restaurant(self, restaurant: Restaurant) -> None:
        try:
            await self.restaurants.insert_one(_to_doc(restaurant))
        except DuplicateKeyError:
            logger.warning(f"Duplicate owner email rejected by unique index for restaurant {restaurant.id}")
            raise EmailAlreadyExists()
        except PyMongoError as e:
            logger.exception("DB error during create_restaurant")
            raise StoreError("Database error during create_restaurant") from e

    async def get_restaurant_by_email(self, email: str) -> Restaurant:
        with _store_errors("get_restaurant_by_email"):
            doc = await self.restaurants.find_one({"owner_email": email})
        if doc is None:
            raise RestaurantNotFound()
        return _restaurant_from_doc(doc)

    async def get_restaurant_by_id(self, restaurant_id: str) -> Restaurant:
        with _store_errors("get_restaurant_by_id"):
            doc = await self.restaurants.find_one({"_id": restaurant_id})
        if doc is None:
            raise RestaurantNotFound()
        return _restaurant_from_doc(doc)

    async def update_restaurant(self, restaurant: Restaurant) -> None:
        update_doc = {
            "name": restaurant.name,
            "phone_number": restaurant.phone_number,
            "address": restaurant.address.model_dump(),
        }
        with _store_errors("update_restaurant"):
            result = await self.restaurants.update_one({"_id": restaurant.id}, {"$set": update_doc})
        if result.matched_count == 0:
            raise RestaurantNotFound()

    async def list_restaurants(self) -> List[Restaurant]:
        with _store_errors("list_restaurants"):
            docs = await self.restaurants.find({}).to_list(length=None)
        return [_restaurant_from_doc(d) for d in docs]

    async def set_ban_status(self, restaurant_id: str, banned: bool, reason: str) -> None:
        with _store_errors("set_ban_status"):
            result = await self.restaurants.update_one(
                {"_id": restaurant_id},
                {"$set": {"is_banned": banned, "ban_reason": reason}}
            )
        if result.matched_count == 0:
            raise RestaurantNotFound()

    async def create_product(self, product: Product) -> None:
        with _store_errors("create_product"):
            await self.products.insert_one(_to_doc(product))

    async def get_product_by_id(self, product_id: str) -> Product:
        with _store_errors("get_product_by_id"):
            doc = await self.products.find_one({"_id": product_id})
        if doc is None:
            raise ProductNotFound()
        return _product_from_doc(doc)

    async def list_products_by_restaurant(self, restaurant_id: str) -> List[Product]:
        with _store_errors("list_products_by_restaurant"):
            docs = await self.products.find({"restaurant_id": restaurant_id}).to_list(length=None)
        return [_product_from_doc(d) for d in docs]

    async def update_product(self, product: Product) -> None:
        update_doc = product.model_dump(exclude={"id", "restaurant_id"})
        with _store_errors("update_product"):
            result = await self.products.update_one({"_id": product.id}, {"$set": update_doc})
        if result.matched_count == 0:
            raise ProductNotFound()

    async def delete_product(self, product_id: str) -> None:
        with _store_errors("delete_product"):
            result = await self.products.delete_one({"_id": product_id})
        if result.deleted_count == 0:
            raise ProductNotFound()

    async def list_all_products(self) -> List[Product]:
        with _store_errors("list_all_products"):
            docs = await self.products.find({}).to_list(length=None)
        return [_product_from_doc(d) for d in docs]

    async def adjust_stock(self, product_id: str, delta: int) -> None:
        with _store_errors("adjust_stock"):
            result = await self.products.update_one({"_id": product_id}, {"$inc": {"stock": delta}})
        if result.matched_count == 0:
            raise ProductNotFound()

    async def decrement_stock_if_sufficient(self, product_id: str, amount: int) -> bool:
        with _store_errors("decrement_stock"):
            doc = await self.products.find_one_and_update(
                {"_id": product_id, "stock": {"$gte": amount}},
                {"$inc": {"stock": -amount}},
                projection={"stock": 1},
                return_document=ReturnDocument.AFTER,
            )
            if doc is not None:
                return True
            # the filter did not match: either missing or not enough stock
            exists = await self.products.count_documents({"_id": product_id}, limit=1)
        if not exists:
            raise ProductNotFound()
        return False

    async def get_stock(self, product_id: str) -> int:
        with _store_errors("get_stock"):
            doc = await self.products.find_one({"_id": product_id}, {"stock": 1})
        if doc is None:
            raise ProductNotFound()
        return int(doc.get("stock", 0))
