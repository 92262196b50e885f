from pydantic import BaseModel, Field
from typing import List

# BSON stores integers as signed 64-bit
MAX_INT64 = 2**63 - 1

class Product(BaseModel):
    id: str
    restaurant_id: str
    name: str
    description: str = ""
    price: float = 0.0
    stock: int = 0
    category: str = ""

class ProductCreate(BaseModel):
    restaurant_id: str
    name: str = Field(..., min_length=1)
    description: str = ""
    price: float
    stock: int = Field(0, le=MAX_INT64)
    category: str = ""

class ProductUpdate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    price: float
    stock: int = Field(..., le=MAX_INT64)
    category: str = ""

class ProductOut(Product):
    pass

class StockChange(BaseModel):
    amount: int = Field(..., le=MAX_INT64)

class ProductCreatedResponse(BaseModel):
    product_id: str
    message: str

class ProductResponse(BaseModel):
    message: str
    product: ProductOut

class ProductListResponse(BaseModel):
    message: str
    products: List[ProductOut]

class StockResponse(BaseModel):
    product_id: str
    stock: int
    message: str

class OwnerResponse(BaseModel):
    product_id: str
    restaurant_id: str
    message: str
