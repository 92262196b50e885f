from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from utils.logger import get_logger

logger = get_logger("Global_Exception")


class ServiceError(Exception):
    """Base class for every categorized failure raised by the service layer."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    category = "internal"
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    category = "not_found"
    default_message = "Resource not found"


class RestaurantNotFound(NotFoundError):
    default_message = "Restaurant not found"


class ProductNotFound(NotFoundError):
    default_message = "Product not found"


class InvalidCredentials(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    category = "invalid_credentials"
    default_message = "Invalid credentials"


class InvalidToken(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    category = "invalid_token"
    default_message = "Invalid token"


class EmailAlreadyExists(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    category = "email_already_exists"
    default_message = "Email already registered"


class RestaurantBanned(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    category = "restaurant_banned"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Restaurant is banned: {reason}")


class InsufficientStock(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    category = "insufficient_stock"
    default_message = "Insufficient stock"


class Unauthorized(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    category = "unauthorized"
    default_message = "Unauthorized"


class InvalidArgument(ServiceError):
    status_code = 422
    category = "invalid_argument"
    default_message = "Invalid argument"


class StoreError(ServiceError):
    """Opaque failure from the persistence layer."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    category = "store_error"
    default_message = "Database error"


async def service_exception_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"{exc.category} on {request.url.path}: {exc}")
    else:
        logger.info(f"{exc.category} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": str(exc), "error": exc.category}
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error": "internal"}
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(ServiceError, service_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
