# services/restaurant_service.py
from core.authorization import authorize
from core.exceptions import InvalidArgument, RestaurantNotFound, StoreError
from db.repository import RestaurantRepository
from models.auth import CallerIdentity
from models.product import Product
from models.restaurant import BanStatus, Restaurant, RestaurantUpdate
from utils.logger import get_logger
from typing import List, Tuple

logger = get_logger("Restaurant_Service")


class RestaurantService:
    def __init__(self, repository: RestaurantRepository):
        self.repository = repository

    async def edit_profile(self, caller: CallerIdentity, restaurant_id: str, payload: RestaurantUpdate) -> None:
        """
        Overwrite name, phone number and address of the caller's own restaurant.
        The address is replaced as a whole.
        """
        authorize(caller, restaurant_id)
        restaurant = await self.repository.get_restaurant_by_id(restaurant_id)
        restaurant.name = payload.restaurant_name
        restaurant.phone_number = payload.phone_number
        restaurant.address = payload.address
        await self.repository.update_restaurant(restaurant)
        logger.info(f"Restaurant {restaurant_id} updated")

    async def get_by_id(self, restaurant_id: str) -> Restaurant:
        return await self.repository.get_restaurant_by_id(restaurant_id)

    async def get_with_products(self, restaurant_id: str) -> Tuple[Restaurant, List[Product]]:
        restaurant = await self.repository.get_restaurant_by_id(restaurant_id)
        products = await self.repository.list_products_by_restaurant(restaurant_id)
        return restaurant, products

    async def list_all_with_products(self) -> List[Tuple[Restaurant, List[Product]]]:
        """
        Every restaurant with its products. A restaurant whose products
        cannot be fetched is left out instead of failing the whole listing.
        """
        restaurants = await self.repository.list_restaurants()
        out = []
        for r in restaurants:
            try:
                products = await self.repository.list_products_by_restaurant(r.id)
            except StoreError:
                logger.warning(f"Skipping restaurant {r.id}: product fetch failed")
                continue
            out.append((r, products))
        return out

    async def ban(self, restaurant_id: str, reason: str) -> None:
        if not reason or not reason.strip():
            raise InvalidArgument("Ban reason must not be empty")
        await self.repository.set_ban_status(restaurant_id, True, reason)
        logger.info(f"Restaurant {restaurant_id} banned, reason: {reason}")

    async def unban(self, restaurant_id: str) -> None:
        await self.repository.set_ban_status(restaurant_id, False, "")
        logger.info(f"Restaurant {restaurant_id} unbanned")

    async def check_ban_status(self, restaurant_id: str) -> BanStatus:
        # a missing restaurant is "nothing to report", not an error
        try:
            restaurant = await self.repository.get_restaurant_by_id(restaurant_id)
        except RestaurantNotFound:
            return BanStatus(
                success=False,
                is_banned=False,
                ban_reason="",
                message="Restaurant not found, no ban on record"
            )
        if restaurant.is_banned:
            message = "Restaurant is banned"
        else:
            message = "Restaurant is not banned"
        return BanStatus(
            success=True,
            is_banned=restaurant.is_banned,
            ban_reason=restaurant.ban_reason,
            message=message
        )
