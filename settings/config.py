from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """Configuration settings for the restaurant service."""
    PROJECT_NAME: str = "Restaurant Service"
    MONGO_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "restaurant_service"
    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_HOURS: int = 24
    # empty disables the admin endpoints entirely
    ADMIN_API_KEY: str = ""
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
