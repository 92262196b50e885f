from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from settings.config import Settings
from utils.logger import get_logger

logger = get_logger("DB_OPERATION")


class MongoConnection:
    def __init__(self, settings: Settings):
        logger.info("Initializing MongoDB Connection")
        # the client owns the connection pool for the whole process
        self.client = AsyncIOMotorClient(settings.MONGO_URI)
        self.db = self.client[settings.DB_NAME]
        self.restaurants_collection = self.db["restaurants"]
        self.products_collection = self.db["products"]

    async def connect(self):
        try:
            # Force an actual connection & authentication check
            await self.db.command("ping")
            logger.info("Successfully connected to MongoDB and authenticated.")
            logger.info(f"Using Database: {self.db.name}")
        except Exception as e:
            logger.error(f"Could not connect to MongoDB: {e}")
            raise

    async def create_indexes(self):
        # owner_email uniqueness is what actually rejects racing signups
        await self.restaurants_collection.create_index([("owner_email", ASCENDING)], unique=True)
        await self.products_collection.create_index("restaurant_id")
        logger.info("Indexes created")

    def close(self):
        self.client.close()
        logger.info("MongoDB connection closed")
