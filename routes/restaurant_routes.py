from fastapi import APIRouter, Depends
from core.dependencies import get_current_restaurant, get_product_service, get_restaurant_service
from core.exceptions import RestaurantNotFound
from models.auth import CallerIdentity
from models.product import ProductOut
from models.restaurant import (
    BanStatus,
    MessageResponse,
    RestaurantListResponse,
    RestaurantLookupResponse,
    RestaurantOut,
    RestaurantProductsResponse,
    RestaurantUpdate,
    RestaurantWithProducts,
)
from services.product_service import ProductService
from services.restaurant_service import RestaurantService
from utils.logger import get_logger

logger = get_logger("Restaurant_Route")
router = APIRouter(prefix="/restaurants", tags=["Restaurants"])

# Public: every restaurant with its products
@router.get("", response_model=RestaurantListResponse)
async def api_list_restaurants(restaurant_service: RestaurantService = Depends(get_restaurant_service)):
    pairs = await restaurant_service.list_all_with_products()
    restaurants = [
        RestaurantWithProducts(
            **RestaurantOut.from_record(r).model_dump(),
            products=[ProductOut(**p.model_dump()) for p in products]
        )
        for r, products in pairs
    ]
    return RestaurantListResponse(message="Restaurants with products retrieved successfully", restaurants=restaurants)

# Soft-failure lookup: a miss is reported in the body, not as an error status
@router.get("/{restaurant_id}", response_model=RestaurantLookupResponse)
async def api_get_restaurant(restaurant_id: str, restaurant_service: RestaurantService = Depends(get_restaurant_service)):
    try:
        restaurant = await restaurant_service.get_by_id(restaurant_id)
    except RestaurantNotFound as e:
        return RestaurantLookupResponse(success=False, message=str(e))
    return RestaurantLookupResponse(
        success=True,
        message="Restaurant retrieved successfully",
        restaurant=RestaurantOut.from_record(restaurant)
    )

@router.put("/{restaurant_id}", response_model=MessageResponse)
async def api_edit_restaurant(
    restaurant_id: str,
    payload: RestaurantUpdate,
    caller: CallerIdentity = Depends(get_current_restaurant),
    restaurant_service: RestaurantService = Depends(get_restaurant_service),
):
    await restaurant_service.edit_profile(caller, restaurant_id, payload)
    return MessageResponse(message="Restaurant updated successfully")

@router.get("/{restaurant_id}/products", response_model=RestaurantProductsResponse)
async def api_restaurant_products(restaurant_id: str, product_service: ProductService = Depends(get_product_service)):
    products = await product_service.list_by_restaurant(restaurant_id)
    return RestaurantProductsResponse(
        message="Products retrieved successfully",
        products=[ProductOut(**p.model_dump()) for p in products]
    )

@router.get("/{restaurant_id}/with-products", response_model=RestaurantWithProducts)
async def api_restaurant_with_products(restaurant_id: str, restaurant_service: RestaurantService = Depends(get_restaurant_service)):
    restaurant, products = await restaurant_service.get_with_products(restaurant_id)
    return RestaurantWithProducts(
        **RestaurantOut.from_record(restaurant).model_dump(),
        products=[ProductOut(**p.model_dump()) for p in products]
    )

@router.get("/{restaurant_id}/ban-status", response_model=BanStatus)
async def api_ban_status(restaurant_id: str, restaurant_service: RestaurantService = Depends(get_restaurant_service)):
    return await restaurant_service.check_ban_status(restaurant_id)
