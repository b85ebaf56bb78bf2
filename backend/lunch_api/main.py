"""
REST API main application.
Entry point for the FastAPI lunch ordering server.
"""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from lunch_api.core import lifespan, register_middlewares
from lunch_api.routers.admin import router as admin_router
from lunch_api.routers.auth import callback_router, sessions_router
from lunch_api.routers.menu import router as menu_router
from lunch_api.routers.orders import router as orders_router
from lunch_api.routers.public import health_router
from lunch_api.routers.users import router as users_router
from lunch_shared.config.settings import settings
from lunch_shared.security.rate_limit import limiter, rate_limit_exceeded_handler


# Create FastAPI application
app = FastAPI(
    title="Lunch REST API",
    description="Day menus, lunch orders and their administration",
    version="0.1.0",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Middlewares
register_middlewares(app)


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router)
app.include_router(sessions_router)
app.include_router(callback_router)
app.include_router(users_router)
app.include_router(menu_router)
app.include_router(orders_router)
app.include_router(admin_router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "lunch_api.main:app",
        host="0.0.0.0",
        port=settings.rest_api_port,
        reload=True,
    )
