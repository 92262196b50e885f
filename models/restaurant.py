# models/restaurant.py
from pydantic import BaseModel, Field
from typing import List, Optional
from models.product import ProductOut

class Address(BaseModel):
    street_name: str = ""
    locality: str = ""
    state: str = ""
    pincode: str = ""

class Restaurant(BaseModel):
    """Stored restaurant record, including the password hash."""
    id: str
    owner_email: str
    password_hash: str
    name: str
    phone_number: str = ""
    is_banned: bool = False
    ban_reason: str = ""
    address: Address = Field(default_factory=Address)

class RestaurantUpdate(BaseModel):
    restaurant_name: str = Field(min_length=1)
    phone_number: str = ""
    address: Address = Field(default_factory=Address)

class RestaurantOut(BaseModel):
    id: str
    owner_email: str
    name: str
    phone_number: str = ""
    is_banned: bool = False
    ban_reason: str = ""
    address: Address

    @classmethod
    def from_record(cls, restaurant: Restaurant) -> "RestaurantOut":
        return cls(**restaurant.model_dump(exclude={"password_hash"}))

class RestaurantWithProducts(RestaurantOut):
    products: List[ProductOut] = Field(default_factory=list)

class RestaurantLookupResponse(BaseModel):
    success: bool
    message: str
    restaurant: Optional[RestaurantOut] = None

class RestaurantListResponse(BaseModel):
    message: str
    restaurants: List[RestaurantWithProducts]

class RestaurantProductsResponse(BaseModel):
    message: str
    products: List[ProductOut]

class BanRequest(BaseModel):
    reason: str = Field(min_length=1)

class BanStatus(BaseModel):
    success: bool
    is_banned: bool
    ban_reason: str = ""
    message: str

class MessageResponse(BaseModel):
    message: str
