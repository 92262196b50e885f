# routes/admin_routes.py
from fastapi import APIRouter, Depends
from core.dependencies import get_restaurant_service, require_admin
from models.restaurant import BanRequest, MessageResponse
from services.restaurant_service import RestaurantService
from utils.logger import get_logger

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])
logger = get_logger("Admin_Route")

@router.post("/restaurants/{restaurant_id}/ban", response_model=MessageResponse)
async def api_ban_restaurant(restaurant_id: str, payload: BanRequest, restaurant_service: RestaurantService = Depends(get_restaurant_service)):
    """
    Ban a restaurant; its owner can no longer log in.
    """
    await restaurant_service.ban(restaurant_id, payload.reason)
    logger.info(f"Restaurant {restaurant_id} banned by admin")
    return MessageResponse(message="Restaurant banned successfully")

@router.post("/restaurants/{restaurant_id}/unban", response_model=MessageResponse)
async def api_unban_restaurant(restaurant_id: str, restaurant_service: RestaurantService = Depends(get_restaurant_service)):
    await restaurant_service.unban(restaurant_id)
    logger.info(f"Restaurant {restaurant_id} unbanned by admin")
    return MessageResponse(message="Restaurant unbanned successfully")
