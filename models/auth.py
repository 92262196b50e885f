from pydantic import BaseModel, EmailStr, Field
from models.restaurant import Address

class SignupRequest(BaseModel):
    owner_email: EmailStr
    password: str = Field(min_length=1)
    restaurant_name: str = Field(min_length=1)
    phone_number: str = ""
    address: Address = Field(default_factory=Address)

class LoginRequest(BaseModel):
    owner_email: EmailStr
    password: str

class AuthResponse(BaseModel):
    restaurant_id: str
    token: str
    token_type: str = "bearer"
    message: str

class CallerIdentity(BaseModel):
    """Authenticated restaurant owner, decoded from a verified token."""
    restaurant_id: str
    email: str

    model_config = {"frozen": True}
