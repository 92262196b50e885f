from fastapi import FastAPI
from core.exceptions import register_exception_handlers
from db.db_operation import MongoConnection
from db.repository import MongoRestaurantRepository, RestaurantRepository
from routes import admin_routes, auth, product_routes, restaurant_routes
from services.auth_service import AuthService
from services.product_service import ProductService
from services.restaurant_service import RestaurantService
from settings.config import Settings, settings as default_settings
from utils.logger import get_logger, setup_logging

logger = get_logger("main")


def create_app(settings: Settings | None = None, repository: RestaurantRepository | None = None) -> FastAPI:
    """
    Build the application. Settings are read once here and handed to every
    component; passing a repository skips the MongoDB connection.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME, version="1.0.0")

    mongo_conn = None
    if repository is None:
        mongo_conn = MongoConnection(settings)
        repository = MongoRestaurantRepository(mongo_conn)

    app.state.settings = settings
    app.state.auth_service = AuthService(repository, settings)
    app.state.restaurant_service = RestaurantService(repository)
    app.state.product_service = ProductService(repository)

    @app.get("/")
    async def health_check():
        logger.info("Health check is successful")
        return {
            "status": "ok",
            "app": settings.PROJECT_NAME,
            "message": "Restaurant service is running"
        }

    if mongo_conn is not None:
        @app.on_event("startup")
        async def startup_event():
            await mongo_conn.connect()
            await mongo_conn.create_indexes()

        @app.on_event("shutdown")
        async def shutdown_event():
            mongo_conn.close()

    register_exception_handlers(app)
    app.include_router(auth.router)
    app.include_router(restaurant_routes.router)
    app.include_router(product_routes.router)
    app.include_router(admin_routes.router)
    return app


app = create_app()
