# core/authorization.py
from core.exceptions import Unauthorized
from models.auth import CallerIdentity
from utils.logger import get_logger

logger = get_logger("Authorization")

def authorize(caller: CallerIdentity, resource_owner_id: str) -> None:
    """
    Ownership check applied before any mutation of a restaurant or product.
    The caller identity is trusted as already verified upstream.
    """
    if caller.restaurant_id != resource_owner_id:
        logger.warning(f"Forbidden: restaurant {caller.restaurant_id} tried to modify resource owned by {resource_owner_id}")
        raise Unauthorized("Unauthorized: you can only modify your own restaurant and products")
