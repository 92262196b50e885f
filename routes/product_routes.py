from fastapi import APIRouter, Depends, status
from core.dependencies import get_current_restaurant, get_product_service
from models.auth import CallerIdentity
from models.product import (
    OwnerResponse,
    ProductCreate,
    ProductCreatedResponse,
    ProductListResponse,
    ProductOut,
    ProductResponse,
    ProductUpdate,
    StockChange,
    StockResponse,
)
from models.restaurant import MessageResponse
from services.product_service import ProductService
from utils.logger import get_logger

logger = get_logger("Product_Route")
router = APIRouter(prefix="/products", tags=["Products"])

@router.get("", response_model=ProductListResponse)
async def api_list_products(product_service: ProductService = Depends(get_product_service)):
    products = await product_service.list_all()
    return ProductListResponse(message="Products retrieved successfully", products=[ProductOut(**p.model_dump()) for p in products])

# Restaurant owner: create item in their own catalog
@router.post("", response_model=ProductCreatedResponse, status_code=status.HTTP_201_CREATED)
async def api_add_product(
    payload: ProductCreate,
    caller: CallerIdentity = Depends(get_current_restaurant),
    product_service: ProductService = Depends(get_product_service),
):
    product_id = await product_service.add_product(caller, payload)
    return ProductCreatedResponse(product_id=product_id, message="Product added successfully")

@router.get("/{product_id}", response_model=ProductResponse)
async def api_get_product(product_id: str, product_service: ProductService = Depends(get_product_service)):
    product = await product_service.get_by_id(product_id)
    return ProductResponse(message="Product retrieved successfully", product=ProductOut(**product.model_dump()))

@router.put("/{product_id}", response_model=MessageResponse)
async def api_edit_product(
    product_id: str,
    payload: ProductUpdate,
    caller: CallerIdentity = Depends(get_current_restaurant),
    product_service: ProductService = Depends(get_product_service),
):
    await product_service.edit_product(caller, product_id, payload)
    return MessageResponse(message="Product updated successfully")

@router.delete("/{product_id}", response_model=MessageResponse)
async def api_delete_product(
    product_id: str,
    caller: CallerIdentity = Depends(get_current_restaurant),
    product_service: ProductService = Depends(get_product_service),
):
    await product_service.delete_product(caller, product_id)
    return MessageResponse(message="Product deleted successfully")

@router.post("/{product_id}/stock/increment", response_model=MessageResponse)
async def api_increment_stock(
    product_id: str,
    payload: StockChange,
    caller: CallerIdentity = Depends(get_current_restaurant),
    product_service: ProductService = Depends(get_product_service),
):
    await product_service.increment_stock(caller, product_id, payload.amount)
    return MessageResponse(message="Stock incremented successfully")

@router.post("/{product_id}/stock/decrement", response_model=MessageResponse)
async def api_decrement_stock(
    product_id: str,
    payload: StockChange,
    caller: CallerIdentity = Depends(get_current_restaurant),
    product_service: ProductService = Depends(get_product_service),
):
    await product_service.decrement_stock(caller, product_id, payload.amount)
    return MessageResponse(message="Stock decremented successfully")

@router.get("/{product_id}/stock", response_model=StockResponse)
async def api_get_stock(product_id: str, product_service: ProductService = Depends(get_product_service)):
    stock = await product_service.get_stock(product_id)
    return StockResponse(product_id=product_id, stock=stock, message="Stock retrieved successfully")

@router.get("/{product_id}/restaurant", response_model=OwnerResponse)
async def api_get_owner(product_id: str, product_service: ProductService = Depends(get_product_service)):
    restaurant_id = await product_service.get_owning_restaurant_id(product_id)
    return OwnerResponse(product_id=product_id, restaurant_id=restaurant_id, message="Restaurant ID retrieved successfully")
