"""Tests for MongoRestaurantRepository against mocked motor collections."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from core.exceptions import EmailAlreadyExists, ProductNotFound, RestaurantNotFound, StoreError
from db.repository import MongoRestaurantRepository
from models.product import Product
from models.restaurant import Address, Restaurant


def _repo():
    conn = SimpleNamespace(restaurants_collection=MagicMock(), products_collection=MagicMock())
    return MongoRestaurantRepository(conn)


def _restaurant() -> Restaurant:
    return Restaurant(
        id="r1",
        owner_email="owner@example.com",
        password_hash="$2b$12$hash",
        name="Spice Route",
        phone_number="123",
        address=Address(street_name="MG Road"),
    )


def _product_doc(stock: int = 5) -> dict:
    return {
        "_id": "p1",
        "restaurant_id": "r1",
        "name": "Dosa",
        "description": "",
        "price": 60.0,
        "stock": stock,
        "category": "breakfast",
    }


class TestRestaurants:
    async def test_create_stores_id_as_document_key(self):
        repo = _repo()
        repo.restaurants.insert_one = AsyncMock()

        await repo.create_restaurant(_restaurant())

        doc = repo.restaurants.insert_one.call_args.args[0]
        assert doc["_id"] == "r1"
        assert "id" not in doc
        assert doc["address"]["street_name"] == "MG Road"

    async def test_duplicate_key_becomes_email_already_exists(self):
        repo = _repo()
        repo.restaurants.insert_one = AsyncMock(side_effect=DuplicateKeyError("dup"))

        with pytest.raises(EmailAlreadyExists):
            await repo.create_restaurant(_restaurant())

    async def test_driver_error_becomes_store_error(self):
        repo = _repo()
        repo.restaurants.find_one = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))

        with pytest.raises(StoreError):
            await repo.get_restaurant_by_id("r1")

    async def test_get_by_email_maps_document(self):
        repo = _repo()
        doc = _restaurant().model_dump()
        doc["_id"] = doc.pop("id")
        repo.restaurants.find_one = AsyncMock(return_value=doc)

        restaurant = await repo.get_restaurant_by_email("owner@example.com")

        assert restaurant.id == "r1"
        repo.restaurants.find_one.assert_awaited_once_with({"owner_email": "owner@example.com"})

    async def test_get_missing(self):
        repo = _repo()
        repo.restaurants.find_one = AsyncMock(return_value=None)
        with pytest.raises(RestaurantNotFound):
            await repo.get_restaurant_by_id("nope")

    async def test_update_only_sets_profile_fields(self):
        repo = _repo()
        repo.restaurants.update_one = AsyncMock(return_value=SimpleNamespace(matched_count=1))

        await repo.update_restaurant(_restaurant())

        filter_doc, update = repo.restaurants.update_one.call_args.args
        assert filter_doc == {"_id": "r1"}
        assert set(update["$set"]) == {"name", "phone_number", "address"}

    async def test_ban_status_zero_rows_is_not_found(self):
        repo = _repo()
        repo.restaurants.update_one = AsyncMock(return_value=SimpleNamespace(matched_count=0))
        with pytest.raises(RestaurantNotFound):
            await repo.set_ban_status("r1", True, "reason")

    async def test_ban_status_sets_both_fields_in_one_update(self):
        repo = _repo()
        repo.restaurants.update_one = AsyncMock(return_value=SimpleNamespace(matched_count=1))

        await repo.set_ban_status("r1", False, "")

        repo.restaurants.update_one.assert_awaited_once_with(
            {"_id": "r1"}, {"$set": {"is_banned": False, "ban_reason": ""}}
        )


class TestProducts:
    async def test_list_by_restaurant(self):
        repo = _repo()
        cursor = MagicMock()
        cursor.to_list = AsyncMock(return_value=[_product_doc()])
        repo.products.find = MagicMock(return_value=cursor)

        products = await repo.list_products_by_restaurant("r1")

        assert [p.id for p in products] == ["p1"]
        repo.products.find.assert_called_once_with({"restaurant_id": "r1"})

    async def test_update_keeps_owner_reference(self):
        repo = _repo()
        repo.products.update_one = AsyncMock(return_value=SimpleNamespace(matched_count=1))
        product = Product(id="p1", restaurant_id="r1", name="Dosa", price=70.0, stock=3)

        await repo.update_product(product)

        _, update = repo.products.update_one.call_args.args
        assert "restaurant_id" not in update["$set"]
        assert update["$set"]["stock"] == 3

    async def test_delete_zero_rows_is_not_found(self):
        repo = _repo()
        repo.products.delete_one = AsyncMock(return_value=SimpleNamespace(deleted_count=0))
        with pytest.raises(ProductNotFound):
            await repo.delete_product("p1")

    async def test_adjust_stock_uses_inc(self):
        repo = _repo()
        repo.products.update_one = AsyncMock(return_value=SimpleNamespace(matched_count=1))

        await repo.adjust_stock("p1", 4)

        repo.products.update_one.assert_awaited_once_with({"_id": "p1"}, {"$inc": {"stock": 4}})

    async def test_conditional_decrement_is_single_filtered_update(self):
        repo = _repo()
        repo.products.find_one_and_update = AsyncMock(return_value={"_id": "p1", "stock": 2})
        repo.products.count_documents = AsyncMock()

        assert await repo.decrement_stock_if_sufficient("p1", 3) is True

        filter_doc, update = repo.products.find_one_and_update.call_args.args
        assert filter_doc == {"_id": "p1", "stock": {"$gte": 3}}
        assert update == {"$inc": {"stock": -3}}
        repo.products.count_documents.assert_not_awaited()

    async def test_conditional_decrement_insufficient(self):
        repo = _repo()
        repo.products.find_one_and_update = AsyncMock(return_value=None)
        repo.products.count_documents = AsyncMock(return_value=1)

        assert await repo.decrement_stock_if_sufficient("p1", 30) is False

    async def test_conditional_decrement_missing_product(self):
        repo = _repo()
        repo.products.find_one_and_update = AsyncMock(return_value=None)
        repo.products.count_documents = AsyncMock(return_value=0)

        with pytest.raises(ProductNotFound):
            await repo.decrement_stock_if_sufficient("p1", 1)

    async def test_get_stock(self):
        repo = _repo()
        repo.products.find_one = AsyncMock(return_value={"_id": "p1", "stock": 7})
        assert await repo.get_stock("p1") == 7
